# topmark:header:start
#
#   project      : ToolCore
#   file         : api.py
#   file_relpath : src/toolcore/console/api.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""The console a tool writes its plain (non-diagnostic) output through."""

from __future__ import annotations

from typing import Protocol, TextIO


class ConsoleLike(Protocol):
    """A tool's standard-output handle.

    ``out`` starts as standard output. `redirect_stdout_to_stderr` points it at
    ``err`` for the rest of the run, so that standard output can carry data only.
    """

    out: TextIO
    err: TextIO

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to ``out``."""
        ...

    def redirect_stdout_to_stderr(self) -> None:
        """Make ``out`` the error stream."""
        ...
