# topmark:header:start
#
#   project      : ToolCore
#   file         : __main__.py
#   file_relpath : src/toolcore/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Module entry point for running ToolCore via ``python -m toolcore``.

Equivalent to running the ``toolcore`` console script.

Examples:
    Hash a file with the bundled ``digest`` tool::

        python -m toolcore digest README.md
"""

from __future__ import annotations

from toolcore.cli.main import cli

if __name__ == "__main__":
    cli()
