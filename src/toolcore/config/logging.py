# topmark:header:start
#
#   project      : ToolCore
#   file         : logging.py
#   file_relpath : src/toolcore/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Internal logging for ToolCore.

ToolCore modules log through [`get_logger`][toolcore.config.logging.get_logger],
which hands out [`ToolcoreLogger`][toolcore.config.logging.ToolcoreLogger]
instances: standard loggers with an extra ``trace`` method one step below DEBUG.
Argument declarations, bindings and diagnostics are traced at that level.

Entry points call [`setup_logging`][toolcore.config.logging.setup_logging]
once. Records always go to ``sys.stderr``, because a tool's standard output is
reserved for its data. Logging is silent (CRITICAL) unless
``TOOLCORE_LOG_LEVEL`` or an explicit level says otherwise.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

#: Environment variable consulted by `resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: Final[str] = "TOOLCORE_LOG_LEVEL"

logging.addLevelName(TRACE_LEVEL, "TRACE")


class ToolcoreLogger(logging.Logger):
    """Logger with a ``trace`` method for ToolCore's most verbose records."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level, attributed to the caller."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.setLoggerClass(ToolcoreLogger)

#: Layout above DEBUG: ``[WARNING] message``.
LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
#: Layout at DEBUG and TRACE, which adds where the record came from.
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"

# Highest threshold first; a record takes the first style whose threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity.

    Args:
        fmt (str | None): Record layout, as for `logging.Formatter`.
        enable_color (bool): Whether to wrap records in ANSI colors.
    """

    def __init__(self, fmt: str | None = None, *, enable_color: bool = True) -> None:
        super().__init__(fmt)
        self.enable_color = enable_color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level."""
        message = super().format(record)
        if not self.enable_color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Read the log level from ``TOOLCORE_LOG_LEVEL``.

    Accepts a registered level name in any case (``trace``, ``WARN``, ...) or a
    number.

    Returns:
        int | None: The level, or None when the variable is unset, empty or not a
            known level.
    """
    value = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Install ToolCore's stderr handler on the root logger.

    Existing root handlers are replaced, so calling this again reconfigures
    instead of duplicating output.

    Args:
        level (int | None): Level to log at. ``None`` reads ``TOOLCORE_LOG_LEVEL``
            and falls back to CRITICAL.
    """
    # Imported here: toolcore.config.env logs through this module.
    from toolcore.config.env import resolve_color_mode

    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(
            LOG_FORMAT if level > logging.DEBUG else DEBUG_LOG_FORMAT,
            enable_color=resolve_color_mode(stream=sys.stderr),
        )
    )

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False


def get_logger(name: str) -> ToolcoreLogger:
    """Return the `ToolcoreLogger` called ``name`` (usually ``__name__``)."""
    return cast("ToolcoreLogger", logging.getLogger(name))
