# topmark:header:start
#
#   project      : ToolCore
#   file         : test_argument_parser.py
#   file_relpath : tests/arguments/test_argument_parser.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Tests for `ArgumentParser`, `ParseResult` and `EnumChoiceParam`."""

from __future__ import annotations

from enum import Enum

import click
import pytest

from toolcore.arguments.parser import ArgumentParser, OptionKey
from toolcore.arguments.types import EnumChoiceParam
from toolcore.errors import ArgumentParserError


class Shape(Enum):
    CIRCLE = "circle"
    SQUARE = "square"


@pytest.fixture
def parser() -> ArgumentParser:
    return ArgumentParser("toolcore shapes", "[--shape NAME] <file>...", "Draw shapes.")


def test_add_option_returns_a_typed_key(parser: ArgumentParser) -> None:
    key = parser.add_option("--count", "-c", type=int)

    assert key == OptionKey(name="count", flag="--count")
    assert str(key) == "--count"
    assert not key.positional


def test_add_argument_returns_a_positional_key(parser: ArgumentParser) -> None:
    key = parser.add_argument("files", nargs=-1)

    assert key.positional
    assert str(key) == "files"


def test_duplicate_declaration_is_rejected(parser: ArgumentParser) -> None:
    parser.add_option("--count", type=int)

    with pytest.raises(ValueError, match="declared twice"):
        parser.add_option("--count", type=str)


def test_params_are_kept_in_declaration_order(parser: ArgumentParser) -> None:
    parser.add_option("--b")
    parser.add_option("--a")

    assert [p.name for p in parser.params] == ["b", "a"]


def test_parse_converts_values_and_tracks_explicit(parser: ArgumentParser) -> None:
    count = parser.add_option("--count", type=int, default=1)
    name = parser.add_option("--name", type=str)
    files = parser.add_argument("files", nargs=-1)

    result = parser.parse(["--name", "x", "a.txt", "b.txt"])

    assert result.get(count) == 1
    assert result.get(name) == "x"
    assert result.get(files) == ("a.txt", "b.txt")
    assert result.is_explicit(name)
    assert not result.is_explicit(count)
    assert count in result


def test_missing_values_are_not_contained(parser: ArgumentParser) -> None:
    name = parser.add_option("--name", type=str)

    result = parser.parse([])

    assert result.get(name) is None
    assert name not in result
    assert "name" not in result


def test_parse_accepts_any_sequence(parser: ArgumentParser) -> None:
    flag = parser.add_option("--flag", is_flag=True)

    assert parser.parse(("--flag",)).get(flag) is True


@pytest.mark.parametrize(
    ("args", "fragment"),
    [
        (["--count", "x"], "is not a valid integer"),
        (["--nope"], "No such option"),
        (["extra"], "unexpected extra argument"),
        (["--count"], "requires an argument"),
    ],
)
def test_malformed_arguments_raise_parser_error(
    parser: ArgumentParser, args: list[str], fragment: str
) -> None:
    parser.add_option("--count", type=int)

    with pytest.raises(ArgumentParserError) as excinfo:
        parser.parse(args)

    assert fragment in excinfo.value.format_message()
    assert excinfo.value.usage == "usage: toolcore shapes [--shape NAME] <file>..."


def test_help_is_not_a_registered_option(parser: ArgumentParser) -> None:
    with pytest.raises(ArgumentParserError, match="--help"):
        parser.parse(["--help"])


def test_parsing_twice_is_independent(parser: ArgumentParser) -> None:
    count = parser.add_option("--count", type=int)

    first = parser.parse(["--count", "1"])
    second = parser.parse([])

    assert first.get(count) == 1
    assert second.get(count) is None


def test_enum_choice_matches_case_insensitively(parser: ArgumentParser) -> None:
    shape = parser.add_option("--shape", type=EnumChoiceParam(Shape), default=Shape.CIRCLE)

    assert parser.parse(["--shape", "SQUARE"]).get(shape) is Shape.SQUARE
    assert parser.parse([]).get(shape) is Shape.CIRCLE


def test_enum_choice_lists_valid_words_on_error(parser: ArgumentParser) -> None:
    parser.add_option("--shape", type=EnumChoiceParam(Shape))

    with pytest.raises(ArgumentParserError) as excinfo:
        parser.parse(["--shape", "hexagon"])

    assert "Must be one of: circle, square" in excinfo.value.format_message()


def test_enum_choice_completion() -> None:
    param_type = EnumChoiceParam(Shape)
    command = click.Command("shapes")
    ctx = click.Context(command)
    option = click.Option(["--shape"], type=param_type)

    items = param_type.shell_complete(ctx, option, "S")

    assert [item.value for item in items] == ["square"]
    assert repr(param_type) == "EnumChoiceParam(Shape)"
