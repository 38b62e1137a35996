# topmark:header:start
#
#   project      : ToolCore
#   file         : test_runner.py
#   file_relpath : tests/tool/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Outcome classification by `CommandLineTool.run` and `CommandLineTool.execute`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from toolcore.core.exit_codes import ExitCode
from toolcore.errors import InvalidInputError
from toolcore.tool.status import ExecutionStatus

if TYPE_CHECKING:
    from pathlib import Path

    from toolcore.diagnostic.engine import DiagnosticsEngine

    from tests.conftest import CountTool, Streams, ToolFactory


def test_clean_run_exits_zero(make_tool: ToolFactory, streams: Streams) -> None:
    tool = make_tool(["--count=3"], lambda t: t.console.print(str(t.options.count)))

    with pytest.raises(SystemExit) as excinfo:
        tool.run()

    assert excinfo.value.code == ExitCode.SUCCESS
    assert streams.out.getvalue() == "3\n"
    assert streams.err.getvalue() == ""


@pytest.mark.parametrize("n_errors", [1, 2, 5])
def test_error_diagnostics_fail_the_run(
    make_tool: ToolFactory, streams: Streams, n_errors: int
) -> None:
    def body(tool: CountTool) -> None:
        for i in range(n_errors):
            tool.diagnostics.emit_error(f"problem {i}")

    tool = make_tool(["--count=1"], body)

    with pytest.raises(SystemExit) as excinfo:
        tool.run()

    assert excinfo.value.code == ExitCode.FAILURE
    lines = streams.err.getvalue().splitlines()
    # Each diagnostic was printed once, when emitted; nothing else is added.
    assert lines == [f"error: problem {i}" for i in range(n_errors)]


def test_warnings_alone_do_not_fail(make_tool: ToolFactory, streams: Streams) -> None:
    def body(tool: CountTool) -> None:
        tool.diagnostics.emit_warning("careful", location="input.txt")
        tool.diagnostics.emit_info("fyi")

    tool = make_tool(["--count=1"], body)

    assert tool.execute() is ExecutionStatus.SUCCESS
    assert streams.err.getvalue() == "input.txt: warning: careful\ninfo: fyi\n"


def test_raised_tool_error_fails_the_run(
    make_tool: ToolFactory, streams: Streams, diagnostics: DiagnosticsEngine
) -> None:
    def body(tool: CountTool) -> None:
        raise InvalidInputError("root manifest not found")

    tool = make_tool(["--count=1"], body)

    with pytest.raises(SystemExit) as excinfo:
        tool.run()

    assert excinfo.value.code == 1
    assert streams.err.getvalue() == "error: root manifest not found\n"
    # Raised errors are reported, not recorded.
    assert len(diagnostics) == 0


def test_unexpected_exception_fails_the_run(make_tool: ToolFactory, streams: Streams) -> None:
    def body(tool: CountTool) -> None:
        raise RuntimeError("disk on fire")

    tool = make_tool(["--count=1"], body)

    assert tool.execute() is ExecutionStatus.FAILURE
    assert streams.err.getvalue() == "error: disk on fire\n"


def test_exception_without_message_uses_type_name(
    make_tool: ToolFactory, streams: Streams
) -> None:
    def body(tool: CountTool) -> None:
        raise ValueError()

    tool = make_tool(["--count=1"], body)

    assert tool.execute() is ExecutionStatus.FAILURE
    assert streams.err.getvalue() == "error: ValueError\n"


def test_raise_after_emitting_errors_still_reports_the_raise(
    make_tool: ToolFactory, streams: Streams
) -> None:
    def body(tool: CountTool) -> None:
        tool.diagnostics.emit_error("first")
        raise InvalidInputError("second")

    tool = make_tool(["--count=1"], body)

    assert tool.execute() is ExecutionStatus.FAILURE
    assert streams.err.getvalue() == "error: first\nerror: second\n"


def test_status_set_by_the_tool_is_kept(make_tool: ToolFactory) -> None:
    def body(tool: CountTool) -> None:
        tool.execution_status = ExecutionStatus.FAILURE

    tool = make_tool(["--count=1"], body)

    assert tool.execute() is ExecutionStatus.FAILURE


def test_accessors_forward_to_the_lifecycle(
    make_tool: ToolFactory,
    diagnostics: DiagnosticsEngine,
    streams: Streams,
    tmp_path: Path,
) -> None:
    tool = make_tool(["--count=2"])

    assert tool.options is tool.base.options
    assert tool.parser is tool.base.parser
    assert tool.diagnostics is diagnostics
    assert tool.console is tool.base.console
    assert tool.stdout_stream is streams.out
    assert tool.original_working_directory == tmp_path
