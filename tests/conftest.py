# topmark:header:start
#
#   project      : ToolCore
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Pytest configuration for the ToolCore test suite.

Provides in-memory streams, a private diagnostics engine per test, a fixed
working directory, and a small ``count`` tool used to exercise the lifecycle.

Notes:
    Lifecycle construction and ``CommandLineTool.run`` end with the exit
    handler. The default handler calls ``sys.exit``; tests observe it with
    ``pytest.raises(SystemExit)`` and check ``excinfo.value.code``.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

import pytest

from toolcore.arguments.definition import ArgumentDefinition
from toolcore.console.click_console import ClickConsole
from toolcore.diagnostic.engine import (
    DiagnosticsEngine,
    DiagnosticsPrinter,
    reset_default_diagnostics,
)
from toolcore.tool.lifecycle import ToolLifecycle
from toolcore.tool.runner import CommandLineTool

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from toolcore.arguments.binder import ArgumentBinder
    from toolcore.arguments.parser import ArgumentParser
    from toolcore.filesystem import FileSystemLike
    from toolcore.tool.status import ExitHandler


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep developer environment variables, the default engine and logging setup out of tests.

    Entry points call `setup_logging`, which replaces the root logger's handlers;
    they are restored after each test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ToolCore-related variables.

    Yields:
        None: Control returns to the test.
    """
    for name in ("TOOLCORE_LOG_LEVEL", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    reset_default_diagnostics()
    yield
    reset_default_diagnostics()
    root.handlers[:] = handlers
    root.setLevel(level)


@dataclass
class Streams:
    """In-memory stand-ins for stdout and stderr."""

    out: io.StringIO
    err: io.StringIO


@pytest.fixture
def streams() -> Streams:
    """Return fresh in-memory output and error streams."""
    return Streams(out=io.StringIO(), err=io.StringIO())


@pytest.fixture
def diagnostics(streams: Streams) -> DiagnosticsEngine:
    """Return a private diagnostics engine printing to ``streams.err`` without color."""
    return DiagnosticsEngine(DiagnosticsPrinter(err=streams.err, enable_color=False))


@pytest.fixture
def console(streams: Streams) -> ClickConsole:
    """Return a colorless console writing to the in-memory streams."""
    return ClickConsole(enable_color=False, out=streams.out, err=streams.err)


class StaticFileSystem:
    """Filesystem whose working directory is fixed (or unavailable when None)."""

    def __init__(self, cwd: Path | None) -> None:
        self.cwd = cwd
        self.calls = 0

    def current_working_directory(self) -> Path | None:
        self.calls += 1
        return self.cwd


# --- A minimal tool used across lifecycle tests ---


@dataclass
class CountOptions:
    """Options of the test ``count`` tool."""

    count: int | None = None
    label: str = "items"
    verbose: bool = False


class CountArguments(ArgumentDefinition[CountOptions]):
    """``--count N [--label TEXT] [-v]``."""

    options_type = CountOptions

    @classmethod
    def define_arguments(cls, parser: ArgumentParser, binder: ArgumentBinder[CountOptions]) -> None:
        count = parser.add_option("--count", type=int, required=True)
        label = parser.add_option("--label", type=str)
        verbose = parser.add_option("--verbose", "-v", is_flag=True)
        binder.bind_field(count)
        binder.bind_field(label)
        binder.bind_field(verbose)


class CountTool(CommandLineTool[CountOptions]):
    """Tool whose ``run_impl`` delegates to a test-supplied body."""

    def __init__(
        self, lifecycle: ToolLifecycle[CountOptions], body: Callable[[CountTool], None]
    ) -> None:
        self._base = lifecycle
        self._body = body

    @property
    def base(self) -> ToolLifecycle[CountOptions]:
        return self._base

    def run_impl(self) -> None:
        self._body(self)


ToolFactory = Callable[..., CountTool]


@pytest.fixture
def make_tool(
    diagnostics: DiagnosticsEngine, console: ClickConsole, tmp_path: Path
) -> ToolFactory:
    """Return a factory building a ``count`` tool wired to the test streams.

    The factory accepts the raw argument list, an optional ``run_impl`` body and
    keyword overrides for ``definition``, ``host_program``, ``engine`` (the
    diagnostics engine), ``filesystem`` and ``exit_handler``.
    """

    def _make(
        args: Sequence[str],
        body: Callable[[CountTool], None] | None = None,
        *,
        definition: type[ArgumentDefinition[Any]] = CountArguments,
        host_program: str | None = "toolcore",
        engine: DiagnosticsEngine | None = None,
        filesystem: FileSystemLike | None = None,
        exit_handler: ExitHandler | None = None,
    ) -> CountTool:
        lifecycle: ToolLifecycle[CountOptions] = ToolLifecycle(
            definition,
            "count",
            "--count N [--label TEXT] [-v]",
            "Count things.",
            args,
            host_program=host_program,
            diagnostics=engine if engine is not None else diagnostics,
            filesystem=filesystem if filesystem is not None else StaticFileSystem(tmp_path),
            console=console,
            exit_handler=exit_handler,
        )
        return CountTool(lifecycle, body or (lambda tool: None))

    return _make


@pytest.fixture
def static_filesystem() -> type[StaticFileSystem]:
    """Expose `StaticFileSystem` to test modules."""
    return StaticFileSystem


@pytest.fixture
def count_arguments() -> type[CountArguments]:
    """Expose `CountArguments` to test modules."""
    return CountArguments
