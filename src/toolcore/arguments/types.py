# topmark:header:start
#
#   project      : ToolCore
#   file         : types.py
#   file_relpath : src/toolcore/arguments/types.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Custom Click parameter types for ToolCore argument definitions."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Converts a command-line word to a member of a string-valued Enum.

    Matching ignores case, so ``--algorithm SHA256`` and ``--algorithm sha256``
    select the same member. Defaults that are already members pass through.

    Args:
        enum_cls (type[E]): The Enum whose member values are the accepted words.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self._by_word: dict[str, E] = {str(member.value).lower(): member for member in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted words, in declaration order."""
        return [str(member.value) for member in self.enum_cls]

    def convert(
        self,
        value: str | E,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the member matching ``value``, or fail with the accepted words."""
        if isinstance(value, self.enum_cls):
            return value
        member = self._by_word.get(str(value).lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete the words starting with ``incomplete``."""
        from click.shell_completion import CompletionItem

        prefix = incomplete.lower()
        return [CompletionItem(word) for word in self.choices if word.lower().startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
