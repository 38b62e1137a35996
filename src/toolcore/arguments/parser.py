# topmark:header:start
#
#   project      : ToolCore
#   file         : parser.py
#   file_relpath : src/toolcore/arguments/parser.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Click-backed argument parser for ToolCore tools.

Tools declare their options and positional arguments on an
[`ArgumentParser`][toolcore.arguments.parser.ArgumentParser]; every declaration
returns a typed [`OptionKey`][toolcore.arguments.parser.OptionKey] that is later
used to read the parsed value back from a
[`ParseResult`][toolcore.arguments.parser.ParseResult] or to bind it onto the
tool's options.

Parameter declarations accept the same keyword arguments as ``click.Option``
and ``click.Argument`` (``type``, ``default``, ``required``, ``multiple``,
``is_flag``, ``nargs``, ...), so conversion and validation are Click's.
Any Click usage error is re-raised as
[`ArgumentParserError`][toolcore.errors.ArgumentParserError].

Help output is not generated: ``--help`` is not registered implicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

import click
from click.core import ParameterSource

from toolcore.config.logging import get_logger
from toolcore.errors import ArgumentParserError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from toolcore.config.logging import ToolcoreLogger

logger: ToolcoreLogger = get_logger(__name__)

T = TypeVar("T")

#: Parameter sources that mean "the user passed this on the command line".
_EXPLICIT_SOURCES: frozenset[ParameterSource] = frozenset(
    {ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT}
)


@dataclass(frozen=True)
class OptionKey(Generic[T]):
    """Typed handle to a declared parameter.

    Attributes:
        name (str): Click's parameter name (e.g. ``"count"`` for ``--count``).
        flag (str): The first declaration, used in messages (e.g. ``"--count"``).
        positional (bool): True for positional arguments.
    """

    name: str
    flag: str
    positional: bool = False

    def __str__(self) -> str:
        """Return the user-facing spelling of the parameter."""
        return self.flag


@dataclass(frozen=True)
class ParseResult:
    """Values produced by a successful parse.

    Attributes:
        values (Mapping[str, Any]): Converted values keyed by parameter name,
            including defaults for parameters that were not given.
        explicit (frozenset[str]): Names of parameters the user actually passed.
    """

    values: Mapping[str, Any] = field(default_factory=lambda: {})
    explicit: frozenset[str] = frozenset()

    def get(self, key: OptionKey[T]) -> T | None:
        """Return the value for ``key``, or None when it has no value."""
        return cast("T | None", self.values.get(key.name))

    def is_explicit(self, key: OptionKey[Any]) -> bool:
        """Return True if the user passed ``key`` on the command line."""
        return key.name in self.explicit

    def __contains__(self, key: object) -> bool:
        """Return True if ``key`` has a (non-None) value."""
        if not isinstance(key, OptionKey):
            return False
        return self.values.get(key.name) is not None


class ArgumentParser:
    """Collects parameter declarations and parses argument lists against them.

    Args:
        command_name (str): Full command name, e.g. ``"toolcore digest"``.
        usage (str): Usage synopsis shown after the command name on errors.
        overview (str): One-paragraph description of the tool.
        see_also (str | None): Optional pointer to related documentation.
    """

    def __init__(
        self,
        command_name: str,
        usage: str,
        overview: str,
        see_also: str | None = None,
    ) -> None:
        self.command_name = command_name
        self.usage = usage
        self.overview = overview
        self.see_also = see_also
        self._params: list[click.Parameter] = []

    @property
    def params(self) -> tuple[click.Parameter, ...]:
        """The declared Click parameters, in declaration order."""
        return tuple(self._params)

    def add_option(self, *param_decls: str, **attrs: Any) -> OptionKey[Any]:
        """Declare an option (``--name``/``-n``).

        Args:
            *param_decls (str): Click parameter declarations.
            **attrs (Any): Keyword arguments forwarded to ``click.Option``.

        Returns:
            OptionKey[Any]: Handle to the declared option.
        """
        option = click.Option(list(param_decls), **attrs)
        return self._register(option, positional=False)

    def add_argument(self, param_decl: str, **attrs: Any) -> OptionKey[Any]:
        """Declare a positional argument.

        Args:
            param_decl (str): The argument's name.
            **attrs (Any): Keyword arguments forwarded to ``click.Argument``.

        Returns:
            OptionKey[Any]: Handle to the declared argument.
        """
        argument = click.Argument([param_decl], **attrs)
        return self._register(argument, positional=True)

    def _register(self, param: click.Parameter, *, positional: bool) -> OptionKey[Any]:
        if param.name is None:
            raise ValueError(f"Parameter {param.opts!r} has no name")
        if any(p.name == param.name for p in self._params):
            raise ValueError(f"Parameter '{param.name}' is declared twice")
        self._params.append(param)
        flag = param.name if positional else param.opts[0]
        logger.trace("Declared %s on %s", flag, self.command_name)
        return OptionKey(name=param.name, flag=flag, positional=positional)

    def format_usage(self) -> str:
        """Return the usage line, e.g. ``usage: toolcore digest [options] <file>...``."""
        return f"usage: {self.command_name} {self.usage}".rstrip()

    def _make_command(self) -> click.Command:
        return click.Command(
            name=self.command_name,
            params=list(self._params),
            help=self.overview,
            epilog=self.see_also,
            add_help_option=False,
        )

    def parse(self, args: Sequence[str]) -> ParseResult:
        """Parse ``args`` against the declared parameters.

        Args:
            args (Sequence[str]): The raw argument list (without the program name).

        Returns:
            ParseResult: Converted values.

        Raises:
            ArgumentParserError: If the arguments are malformed, unknown, missing
                or cannot be converted.
        """
        command = self._make_command()
        try:
            with command.make_context(self.command_name, list(args)) as ctx:
                values: dict[str, Any] = dict(ctx.params)
                explicit = frozenset(
                    name for name in values if ctx.get_parameter_source(name) in _EXPLICIT_SOURCES
                )
        except click.ClickException as exc:
            logger.debug("Argument parsing failed for %s: %s", self.command_name, exc)
            raise ArgumentParserError(exc.format_message(), usage=self.format_usage()) from exc
        logger.debug("Parsed %s: %r", self.command_name, values)
        return ParseResult(values=values, explicit=explicit)
