# topmark:header:start
#
#   project      : ToolCore
#   file         : errors.py
#   file_relpath : src/toolcore/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Exceptions for ToolCore tools.

Usage:
    Raise these exceptions from argument definitions, binders or ``run_impl``
    to stop the current step. The tool lifecycle catches them once, prints them
    through the diagnostics printer and exits with a failing status.

Note:
    Errors that should not stop execution immediately are better reported as
    error diagnostics (see `toolcore.diagnostic.DiagnosticsEngine.emit_error`);
    they still fail the run when it ends.
"""

from __future__ import annotations

import click

from toolcore.core.exit_codes import ExitCode


class ToolError(click.ClickException):
    """Base class for all ToolCore errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (no styling)."""
        return str(getattr(self, "message", ""))


class ArgumentParserError(ToolError):
    """The argument list was rejected by the tool's argument schema.

    Args:
        message (str): What was wrong with the arguments.
        usage (str | None): The usage line to show alongside the error.
    """

    def __init__(self, message: str, *, usage: str | None = None) -> None:
        super().__init__(message)
        self.usage = usage


class ArgumentBindingError(ToolError):
    """A parsed value could not be bound onto the options object.

    Args:
        option (str): Name of the option whose value failed to bind.
        reason (str): Why binding failed.
    """

    def __init__(self, option: str, reason: str) -> None:
        super().__init__(f"invalid value for '{option}': {reason}")
        self.option = option
        self.reason = reason


class DiagnosticsReportedErrors(ToolError):
    """Raised internally when a run finished but error diagnostics were emitted.

    Nothing is printed for this error: the diagnostics were printed when they
    were emitted.
    """

    def __init__(self) -> None:
        super().__init__("diagnostics reported errors")


class InvalidInputError(ToolError):
    """Tool-specific fatal input condition.

    Args:
        problem (str): Description of the problem, shown verbatim.
    """

    def __init__(self, problem: str) -> None:
        super().__init__(problem)
        self.problem = problem
