# topmark:header:start
#
#   project      : ToolCore
#   file         : definition.py
#   file_relpath : src/toolcore/arguments/definition.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Argument definitions: how a tool declares its command line.

A tool provides a subclass of
[`ArgumentDefinition`][toolcore.arguments.definition.ArgumentDefinition] naming
its options type and implementing `define_arguments`. The options type must be
constructible without arguments (a dataclass with defaults is the usual
choice); it is populated afterwards by the binder.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

if TYPE_CHECKING:
    from toolcore.arguments.binder import ArgumentBinder
    from toolcore.arguments.parser import ArgumentParser, ParseResult
    from toolcore.diagnostic.engine import DiagnosticsEngine

OptionsT = TypeVar("OptionsT")


class ArgumentDefinition(ABC, Generic[OptionsT]):
    """Declares a tool's parameters and how they bind onto its options.

    Attributes:
        options_type (type[OptionsT]): Default-constructible options class.
    """

    options_type: ClassVar[type]

    @classmethod
    @abstractmethod
    def define_arguments(cls, parser: ArgumentParser, binder: ArgumentBinder[OptionsT]) -> None:
        """Register parameters on ``parser`` and their bindings on ``binder``."""

    @classmethod
    def postprocess_parse_result(cls, result: ParseResult, diagnostics: DiagnosticsEngine) -> None:
        """Validate the parse result beyond what the parser checks.

        Implementations may emit diagnostics or raise. The default does nothing.
        """

    @classmethod
    def make_options(cls) -> OptionsT:
        """Return a fresh, unpopulated options object."""
        options: OptionsT = cls.options_type()
        return options
