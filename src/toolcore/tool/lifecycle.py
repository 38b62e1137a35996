# topmark:header:start
#
#   project      : ToolCore
#   file         : lifecycle.py
#   file_relpath : src/toolcore/tool/lifecycle.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Construction half of the tool lifecycle.

A [`ToolLifecycle`][toolcore.tool.lifecycle.ToolLifecycle] is created once per
process invocation. Construction is all-or-nothing: it either produces fully
bound options or terminates the process with a failing status.

Order of construction:
    1. capture the current working directory (exit early if unavailable);
    2. create the argument parser (``"<host-program> <tool-name>"``);
    3. let the argument definition declare parameters and bindings;
    4. parse the raw arguments;
    5. run the definition's post-processing hook;
    6. create empty options and bind the parsed values onto them.

Any exception raised in steps 2-6 is printed once through the diagnostics
printer and the process exits with `ExecutionStatus.FAILURE`.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Generic, NoReturn, TextIO, TypeVar

from toolcore.arguments.binder import ArgumentBinder
from toolcore.arguments.parser import ArgumentParser
from toolcore.config.logging import get_logger
from toolcore.console.click_console import ClickConsole
from toolcore.diagnostic.engine import get_default_diagnostics
from toolcore.filesystem import local_file_system
from toolcore.tool.error_handling import handle_error
from toolcore.tool.status import ExecutionStatus, exit_process

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from toolcore.arguments.definition import ArgumentDefinition
    from toolcore.config.logging import ToolcoreLogger
    from toolcore.console.api import ConsoleLike
    from toolcore.diagnostic.engine import DiagnosticsEngine
    from toolcore.filesystem import FileSystemLike
    from toolcore.tool.status import ExitHandler

logger: ToolcoreLogger = get_logger(__name__)

OptionsT = TypeVar("OptionsT")


def default_host_program() -> str:
    """Return the name the process was started as, e.g. ``"toolcore"``."""
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "python"


class ToolLifecycle(Generic[OptionsT]):
    """Parsed, bound and wired state of one tool invocation.

    Args:
        argument_definition (type[ArgumentDefinition[OptionsT]]): Declares the
            tool's parameters and options type.
        tool_name (str): Name of the tool, appended to the host program name.
        usage (str): Usage synopsis.
        overview (str): Short description of the tool.
        args (Sequence[str]): Raw arguments, without the program name.
        see_also (str | None): Optional pointer to related documentation.
        host_program (str | None): Program name prefix; defaults to the basename of
            ``sys.argv[0]``.
        diagnostics (DiagnosticsEngine | None): Engine to report into; defaults to
            the process-wide engine.
        filesystem (FileSystemLike | None): Source of the working directory.
        console (ConsoleLike | None): Console for the tool's plain output.
        exit_handler (ExitHandler | None): Process-exit boundary; defaults to
            `exit_process`.

    Attributes:
        original_working_directory (Path): Working directory at construction time.
        parser (ArgumentParser): The parser the arguments were parsed with.
        diagnostics (DiagnosticsEngine): Shared diagnostics engine.
        console (ConsoleLike): Console whose ``out`` stream is the tool's stdout.
    """

    def __init__(
        self,
        argument_definition: type[ArgumentDefinition[OptionsT]],
        tool_name: str,
        usage: str,
        overview: str,
        args: Sequence[str],
        see_also: str | None = None,
        *,
        host_program: str | None = None,
        diagnostics: DiagnosticsEngine | None = None,
        filesystem: FileSystemLike | None = None,
        console: ConsoleLike | None = None,
        exit_handler: ExitHandler | None = None,
    ) -> None:
        self.diagnostics: DiagnosticsEngine = (
            diagnostics if diagnostics is not None else get_default_diagnostics()
        )
        self.console: ConsoleLike = console if console is not None else ClickConsole()
        self._exit_handler: ExitHandler = (
            exit_handler if exit_handler is not None else exit_process
        )
        self._execution_status: ExecutionStatus = ExecutionStatus.SUCCESS

        # Capture the original working directory before anything else.
        if filesystem is None:
            filesystem = local_file_system
        cwd: Path | None = filesystem.current_working_directory()
        if cwd is None:
            self.diagnostics.emit_error("couldn't determine the current working directory")
            self.exit(ExecutionStatus.FAILURE)
        self.original_working_directory: Path = cwd

        if host_program is None:
            host_program = default_host_program()
        command_name = f"{host_program} {tool_name}"
        logger.debug("Constructing %s with args %r", command_name, list(args))
        try:
            self.parser: ArgumentParser = ArgumentParser(
                command_name=command_name,
                usage=usage,
                overview=overview,
                see_also=see_also,
            )
            binder: ArgumentBinder[OptionsT] = ArgumentBinder()
            argument_definition.define_arguments(self.parser, binder)

            result = self.parser.parse(args)
            argument_definition.postprocess_parse_result(result, self.diagnostics)

            options: OptionsT = argument_definition.make_options()
            binder.fill(result, options)
        except Exception as error:
            handle_error(error, self.diagnostics)
            self.exit(ExecutionStatus.FAILURE)

        self._options: OptionsT = options

    @property
    def options(self) -> OptionsT:
        """The bound options of this invocation."""
        return self._options

    @property
    def stdout_stream(self) -> TextIO:
        """The stream plain tool output is written to."""
        return self.console.out

    @property
    def execution_status(self) -> ExecutionStatus:
        """Current execution status; starts as SUCCESS."""
        return self._execution_status

    @execution_status.setter
    def execution_status(self, status: ExecutionStatus) -> None:
        if (
            self._execution_status is ExecutionStatus.FAILURE
            and status is not ExecutionStatus.FAILURE
        ):
            raise ValueError("execution status cannot be reset after a failure")
        self._execution_status = status

    def redirect_stdout_to_stderr(self) -> None:
        """Send the tool's plain output and diagnostics output to stderr.

        Keeps standard output free for data. There is no way back.
        """
        logger.debug("Redirecting standard output to standard error")
        self.console.redirect_stdout_to_stderr()
        self.diagnostics.redirect_stdout_to_stderr()

    def exit(self, status: ExecutionStatus) -> NoReturn:
        """Terminate with ``status`` through the exit handler.

        Raises:
            RuntimeError: If an injected exit handler returns.
        """
        if status is ExecutionStatus.FAILURE:
            self._execution_status = status
        self._exit_handler(status)
        raise RuntimeError("exit handler returned; it must terminate the run")
