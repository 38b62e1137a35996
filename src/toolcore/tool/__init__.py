# topmark:header:start
#
#   project      : ToolCore
#   file         : __init__.py
#   file_relpath : src/toolcore/tool/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Tool lifecycle: construction, execution, status and exit."""

from __future__ import annotations

from toolcore.tool.error_handling import describe_error, handle_error
from toolcore.tool.lifecycle import ToolLifecycle
from toolcore.tool.runner import CommandLineTool
from toolcore.tool.status import ExecutionStatus, ExitHandler, exit_process

__all__ = [
    "CommandLineTool",
    "ExecutionStatus",
    "ExitHandler",
    "ToolLifecycle",
    "describe_error",
    "exit_process",
    "handle_error",
]
