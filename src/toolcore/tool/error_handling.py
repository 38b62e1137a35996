# topmark:header:start
#
#   project      : ToolCore
#   file         : error_handling.py
#   file_relpath : src/toolcore/tool/error_handling.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""The single path through which raised errors are reported to the user.

Both lifecycle boundaries (construction and the ``run`` driver) call
[`handle_error`][toolcore.tool.error_handling.handle_error] exactly once per
failure. Output goes through the diagnostics printer so that raised errors and
emitted diagnostics share one format and one stream.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from toolcore.config.logging import get_logger
from toolcore.errors import ArgumentParserError, DiagnosticsReportedErrors, ToolError

if TYPE_CHECKING:
    from toolcore.diagnostic.engine import DiagnosticsEngine

logger = get_logger(__name__)


def describe_error(error: BaseException) -> str:
    """Return the user-facing message for ``error``.

    ToolCore errors use their formatted message; other exceptions use ``str()``
    and fall back to the exception type name when that is empty.
    """
    if isinstance(error, ToolError):
        message = error.format_message()
    else:
        message = str(error)
    return message or type(error).__name__


def handle_error(error: BaseException, diagnostics: DiagnosticsEngine) -> None:
    """Print ``error`` through the diagnostics printer.

    Args:
        error (BaseException): The caught error.
        diagnostics (DiagnosticsEngine): Engine whose printer receives the output.

    Behavior:
        `DiagnosticsReportedErrors` prints nothing: its diagnostics were printed
        when emitted.
        `ArgumentParserError` prints the error, then the usage line.
        Errors that are not ToolCore errors also get their traceback logged at DEBUG.
    """
    if isinstance(error, DiagnosticsReportedErrors):
        logger.debug("Run failed on %d accumulated diagnostic(s)", diagnostics.stats().n_error)
        return

    diagnostics.print_error(describe_error(error))

    if isinstance(error, ArgumentParserError):
        if error.usage:
            diagnostics.print_text(error.usage)
    elif not isinstance(error, ToolError):
        logger.debug("Unhandled %s", type(error).__name__, exc_info=error)
