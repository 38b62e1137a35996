# topmark:header:start
#
#   project      : ToolCore
#   file         : engine.py
#   file_relpath : src/toolcore/diagnostic/engine.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Diagnostics engine: the sink every tool reports into.

The engine accumulates [`Diagnostic`][toolcore.diagnostic.model.Diagnostic]
records in a [`DiagnosticLog`][toolcore.diagnostic.model.DiagnosticLog] and
forwards each record to its handlers as it is emitted. The first handler is
always a [`DiagnosticsPrinter`][toolcore.diagnostic.engine.DiagnosticsPrinter],
which writes one line per record to a single configurable stream
(``sys.stderr`` by default).

A process-wide engine is available through
[`get_default_diagnostics`][toolcore.diagnostic.engine.get_default_diagnostics];
it is created on first use. Components accept an explicit engine as well, and
tests should construct their own.

Diagnostics are never cleared implicitly: running several tools in one process
against the default engine accumulates their records until
[`DiagnosticsEngine.reset`][toolcore.diagnostic.engine.DiagnosticsEngine.reset]
is called.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Callable, TextIO

import click

from toolcore.config.env import resolve_color_mode
from toolcore.config.logging import get_logger
from toolcore.diagnostic.model import Diagnostic, DiagnosticLevel, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from toolcore.config.logging import ToolcoreLogger
    from toolcore.diagnostic.model import DiagnosticStats, FrozenDiagnosticLog

logger: ToolcoreLogger = get_logger(__name__)

DiagnosticsHandler = Callable[[Diagnostic], None]


def format_diagnostic(diagnostic: Diagnostic, *, enable_color: bool = False) -> str:
    """Render a diagnostic as a single line.

    The layout is ``[<location>: ]<level>: <message>``; the level prefix is
    colored with the level's color when ``enable_color`` is set.

    Args:
        diagnostic: The diagnostic to render.
        enable_color: Whether to emit ANSI color codes.

    Returns:
        The rendered line, without a trailing newline.
    """
    prefix: str = diagnostic.level.value
    if enable_color:
        prefix = diagnostic.level.color(prefix)
    line = f"{prefix}: {diagnostic.message}"
    if diagnostic.location:
        line = f"{diagnostic.location}: {line}"
    return line


class DiagnosticsPrinter:
    """Diagnostics handler that prints each record to its current stream.

    Args:
        stream (TextIO | None): Destination stream. Defaults to ``err``.
        err (TextIO | None): The error stream, target of `redirect_stdout_to_stderr`.
            Defaults to ``sys.stderr``.
        enable_color (bool | None): Force color on or off; ``None`` resolves it from
            the environment and the stream's TTY state.

    Attributes:
        stream (TextIO): Stream records are written to. Mutable: see
            `redirect_stdout_to_stderr`.
        err (TextIO): The error stream.
        enable_color (bool): Whether level prefixes are colored.
    """

    stream: TextIO
    err: TextIO
    enable_color: bool

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        err: TextIO | None = None,
        enable_color: bool | None = None,
    ) -> None:
        self.err = err if err is not None else sys.stderr
        self.stream = stream if stream is not None else self.err
        self.enable_color = (
            resolve_color_mode(stream=self.stream) if enable_color is None else enable_color
        )

    def __call__(self, diagnostic: Diagnostic) -> None:
        """Print a diagnostic record."""
        self.write_line(format_diagnostic(diagnostic, enable_color=self.enable_color))

    def write_line(self, text: str) -> None:
        """Write a raw line of text to the current stream."""
        click.echo(text, file=self.stream, color=self.enable_color)

    def redirect_stdout_to_stderr(self) -> None:
        """Point the printer at the error stream for the rest of the process."""
        self.stream = self.err


class DiagnosticsEngine:
    """Accumulates diagnostics and dispatches them to handlers.

    Args:
        printer (DiagnosticsPrinter | None): The printing handler. A default
            printer writing to ``sys.stderr`` is created when omitted.
        handlers (Iterable[DiagnosticsHandler] | None): Extra handlers invoked after
            the printer for every emitted record.
    """

    def __init__(
        self,
        printer: DiagnosticsPrinter | None = None,
        handlers: Iterable[DiagnosticsHandler] | None = None,
    ) -> None:
        self.printer: DiagnosticsPrinter = printer if printer is not None else DiagnosticsPrinter()
        self.handlers: list[DiagnosticsHandler] = [self.printer, *(handlers or ())]
        self.log: DiagnosticLog = DiagnosticLog()

    def add_handler(self, handler: DiagnosticsHandler) -> None:
        """Register an additional handler."""
        self.handlers.append(handler)

    def emit(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic and route it to every handler.

        Args:
            diagnostic: The diagnostic to record.
        """
        self.log.add(diagnostic)
        for handler in self.handlers:
            handler(diagnostic)

    def emit_info(self, message: str, *, location: str | None = None) -> None:
        """Emit an ``info`` diagnostic."""
        self.emit(Diagnostic(DiagnosticLevel.INFO, message, location))

    def emit_warning(self, message: str, *, location: str | None = None) -> None:
        """Emit a ``warning`` diagnostic."""
        self.emit(Diagnostic(DiagnosticLevel.WARNING, message, location))

    def emit_error(self, message: str, *, location: str | None = None) -> None:
        """Emit an ``error`` diagnostic."""
        self.emit(Diagnostic(DiagnosticLevel.ERROR, message, location))

    @property
    def has_errors(self) -> bool:
        """True iff at least one error-level diagnostic was emitted."""
        return self.log.has_error()

    @property
    def has_warnings(self) -> bool:
        """True iff at least one warning-level diagnostic was emitted."""
        return self.log.has_warning()

    def stats(self) -> DiagnosticStats:
        """Return per-level counts of the recorded diagnostics."""
        return self.log.stats()

    def snapshot(self) -> FrozenDiagnosticLog:
        """Return an immutable copy of the recorded diagnostics."""
        return self.log.freeze()

    def reset(self) -> None:
        """Forget every recorded diagnostic. Handlers and streams are kept."""
        logger.debug("Resetting diagnostics engine (%d record(s) dropped)", len(self.log))
        self.log.clear()

    def print_error(self, message: str) -> None:
        """Print an error line through the printer without recording it.

        Used for raised errors: they already determine the exit status, so they
        must not be counted as accumulated diagnostics.
        """
        self.printer(Diagnostic(DiagnosticLevel.ERROR, message))

    def print_text(self, text: str) -> None:
        """Print a plain line through the printer without recording it."""
        self.printer.write_line(text)

    def redirect_stdout_to_stderr(self) -> None:
        """Redirect the printer's stream to its error stream."""
        self.printer.redirect_stdout_to_stderr()

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over recorded diagnostics in emission order."""
        return iter(self.log)

    def __len__(self) -> int:
        """Return the number of recorded diagnostics."""
        return len(self.log)


_default_engine: DiagnosticsEngine | None = None


def get_default_diagnostics() -> DiagnosticsEngine:
    """Return the process-wide diagnostics engine, creating it on first use."""
    global _default_engine
    if _default_engine is None:
        logger.debug("Creating the default diagnostics engine")
        _default_engine = DiagnosticsEngine()
    return _default_engine


def reset_default_diagnostics() -> None:
    """Drop the process-wide engine; the next access creates a fresh one."""
    global _default_engine
    _default_engine = None
