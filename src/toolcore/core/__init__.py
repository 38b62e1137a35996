# topmark:header:start
#
#   project      : ToolCore
#   file         : __init__.py
#   file_relpath : src/toolcore/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Core primitives shared across ToolCore packages."""

from __future__ import annotations

from toolcore.core.exit_codes import ExitCode

__all__ = [
    "ExitCode",
]
