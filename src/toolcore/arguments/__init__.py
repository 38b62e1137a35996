# topmark:header:start
#
#   project      : ToolCore
#   file         : __init__.py
#   file_relpath : src/toolcore/arguments/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Argument declaration, parsing and binding for ToolCore tools."""

from __future__ import annotations

from toolcore.arguments.binder import ArgumentBinder
from toolcore.arguments.definition import ArgumentDefinition
from toolcore.arguments.parser import ArgumentParser, OptionKey, ParseResult
from toolcore.arguments.types import EnumChoiceParam

__all__ = [
    "ArgumentBinder",
    "ArgumentDefinition",
    "ArgumentParser",
    "EnumChoiceParam",
    "OptionKey",
    "ParseResult",
]
