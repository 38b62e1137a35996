# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/toolcore/core/exit_codes.py
#   project      : ToolCore
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Defines the exit codes used by tools built on ToolCore.

A ToolCore tool only ever reports a binary outcome to the process
infrastructure, so there are exactly two codes.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for ToolCore tools.

    Attributes:
        SUCCESS (int): The tool ran to completion without errors.
        FAILURE (int): The tool raised an error or reported error diagnostics.

    Usage:
        ```python
        import subprocess
        from toolcore.core.exit_codes import ExitCode

        result = subprocess.run(["toolcore", "digest", "file.txt"])
        if result.returncode == ExitCode.SUCCESS:
            print("All files hashed.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
