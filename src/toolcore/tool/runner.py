# topmark:header:start
#
#   project      : ToolCore
#   file         : runner.py
#   file_relpath : src/toolcore/tool/runner.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Execution half of the tool lifecycle: the template-method driver.

A concrete tool holds a [`ToolLifecycle`][toolcore.tool.lifecycle.ToolLifecycle]
(exposed as `CommandLineTool.base`) and implements `CommandLineTool.run_impl`.
The driver classifies the outcome of ``run_impl``:

* returned, no error diagnostics: SUCCESS;
* returned, error diagnostics were emitted: FAILURE;
* raised: FAILURE, whatever the diagnostics say.

Example:
    ```python
    class HelloTool(CommandLineTool[HelloOptions]):
        def __init__(self, args: Sequence[str]) -> None:
            self._base = ToolLifecycle(
                HelloArguments, "hello", "[--name NAME]", "Say hello.", args
            )

        @property
        def base(self) -> ToolLifecycle[HelloOptions]:
            return self._base

        def run_impl(self) -> None:
            self.console.print(f"hello {self.options.name}")

    HelloTool(sys.argv[1:]).run()
    ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, NoReturn, TextIO, TypeVar

from toolcore.config.logging import get_logger
from toolcore.errors import DiagnosticsReportedErrors
from toolcore.tool.error_handling import handle_error
from toolcore.tool.status import ExecutionStatus

if TYPE_CHECKING:
    from pathlib import Path

    from toolcore.arguments.parser import ArgumentParser
    from toolcore.config.logging import ToolcoreLogger
    from toolcore.console.api import ConsoleLike
    from toolcore.diagnostic.engine import DiagnosticsEngine
    from toolcore.tool.lifecycle import ToolLifecycle

logger: ToolcoreLogger = get_logger(__name__)

OptionsT = TypeVar("OptionsT")


class CommandLineTool(ABC, Generic[OptionsT]):
    """Contract every ToolCore tool satisfies, plus the driver that runs it."""

    @property
    @abstractmethod
    def base(self) -> ToolLifecycle[OptionsT]:
        """The lifecycle this tool was constructed with."""

    @abstractmethod
    def run_impl(self) -> None:
        """Tool-specific logic. May raise, and may emit diagnostics."""

    # --- Accessors forwarding to the lifecycle ---

    @property
    def options(self) -> OptionsT:
        """The bound options."""
        return self.base.options

    @property
    def parser(self) -> ArgumentParser:
        """The argument parser used for this invocation."""
        return self.base.parser

    @property
    def original_working_directory(self) -> Path:
        """Working directory captured when the lifecycle was constructed."""
        return self.base.original_working_directory

    @property
    def diagnostics(self) -> DiagnosticsEngine:
        """The diagnostics engine."""
        return self.base.diagnostics

    @property
    def console(self) -> ConsoleLike:
        """Console for plain tool output."""
        return self.base.console

    @property
    def stdout_stream(self) -> TextIO:
        """The stream plain tool output is written to."""
        return self.base.stdout_stream

    @property
    def execution_status(self) -> ExecutionStatus:
        """Current execution status."""
        return self.base.execution_status

    @execution_status.setter
    def execution_status(self, status: ExecutionStatus) -> None:
        self.base.execution_status = status

    def redirect_stdout_to_stderr(self) -> None:
        """See `ToolLifecycle.redirect_stdout_to_stderr`."""
        self.base.redirect_stdout_to_stderr()

    def exit(self, status: ExecutionStatus) -> NoReturn:
        """Terminate with ``status``."""
        self.base.exit(status)

    # --- Driver ---

    def execute(self) -> ExecutionStatus:
        """Run ``run_impl`` and return the final status without exiting."""
        try:
            self.run_impl()
            if self.diagnostics.has_errors:
                raise DiagnosticsReportedErrors()
        except Exception as error:
            self.execution_status = ExecutionStatus.FAILURE
            handle_error(error, self.diagnostics)
        logger.debug("%s finished: %s", type(self).__name__, self.execution_status.value)
        return self.execution_status

    def run(self) -> NoReturn:
        """Execute the tool and exit the process with its status."""
        self.exit(self.execute())
