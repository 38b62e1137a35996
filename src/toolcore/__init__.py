# topmark:header:start
#
#   project      : ToolCore
#   file         : __init__.py
#   file_relpath : src/toolcore/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""ToolCore package.

ToolCore is a small lifecycle framework for command-line tools. It parses
process arguments into a typed options object, collects diagnostics while the
tool runs, turns the outcome into an exit status, and lets a tool move its
informational output off standard output.

The public surface is re-exported here; see `toolcore.tool.CommandLineTool`
for how a tool is put together.
"""

from __future__ import annotations

from toolcore.arguments import (
    ArgumentBinder,
    ArgumentDefinition,
    ArgumentParser,
    EnumChoiceParam,
    OptionKey,
    ParseResult,
)
from toolcore.core.exit_codes import ExitCode
from toolcore.diagnostic import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticsEngine,
    DiagnosticsPrinter,
    get_default_diagnostics,
)
from toolcore.errors import (
    ArgumentBindingError,
    ArgumentParserError,
    DiagnosticsReportedErrors,
    InvalidInputError,
    ToolError,
)
from toolcore.filesystem import FileSystemLike, LocalFileSystem
from toolcore.tool import CommandLineTool, ExecutionStatus, ToolLifecycle

__all__ = [
    "ArgumentBinder",
    "ArgumentBindingError",
    "ArgumentDefinition",
    "ArgumentParser",
    "ArgumentParserError",
    "CommandLineTool",
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticsEngine",
    "DiagnosticsPrinter",
    "DiagnosticsReportedErrors",
    "EnumChoiceParam",
    "ExecutionStatus",
    "ExitCode",
    "FileSystemLike",
    "InvalidInputError",
    "LocalFileSystem",
    "OptionKey",
    "ParseResult",
    "ToolError",
    "ToolLifecycle",
    "get_default_diagnostics",
]
