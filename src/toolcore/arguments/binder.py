# topmark:header:start
#
#   project      : ToolCore
#   file         : binder.py
#   file_relpath : src/toolcore/arguments/binder.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Binding parsed argument values onto a tool's options object.

An [`ArgumentBinder`][toolcore.arguments.binder.ArgumentBinder] records, for
each declared [`OptionKey`][toolcore.arguments.parser.OptionKey], a callback
that stores the parsed value on the options object. Callbacks are only invoked
for parameters that have a value, so the options' own defaults survive for
everything the user did not pass and Click did not default.

Example:
    ```python
    count = parser.add_option("--count", type=int, required=True)
    binder.bind(count, lambda options, value: setattr(options, "count", value))
    # or, equivalently:
    binder.bind_field(count)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from toolcore.config.logging import get_logger
from toolcore.errors import ArgumentBindingError

if TYPE_CHECKING:
    from toolcore.arguments.parser import OptionKey, ParseResult
    from toolcore.config.logging import ToolcoreLogger

logger: ToolcoreLogger = get_logger(__name__)

OptionsT = TypeVar("OptionsT")
T = TypeVar("T")
U = TypeVar("U")

_Filler = Callable[["ParseResult", OptionsT], None]


class ArgumentBinder(Generic[OptionsT]):
    """Maps parsed values onto the fields of an options object."""

    def __init__(self) -> None:
        self._fillers: list[tuple[str, _Filler[OptionsT]]] = []

    def __len__(self) -> int:
        """Return the number of registered bindings."""
        return len(self._fillers)

    def bind(self, key: OptionKey[T], body: Callable[[OptionsT, T], None]) -> None:
        """Bind a single parameter.

        Args:
            key (OptionKey[T]): The declared parameter.
            body (Callable[[OptionsT, T], None]): Stores the value on the options.
        """

        def _fill(result: ParseResult, options: OptionsT) -> None:
            value = result.get(key)
            if value is not None:
                body(options, value)

        self._fillers.append((str(key), _fill))

    def bind_field(self, key: OptionKey[Any], field_name: str | None = None) -> None:
        """Bind a parameter directly onto an attribute of the options.

        Args:
            key (OptionKey[Any]): The declared parameter.
            field_name (str | None): Attribute to set; defaults to the parameter name.
        """
        target = field_name or key.name

        def _set(options: OptionsT, value: Any) -> None:
            if not hasattr(options, target):
                raise AttributeError(f"options have no field '{target}'")
            setattr(options, target, value)

        self.bind(key, _set)

    def bind_pair(
        self,
        first: OptionKey[T],
        second: OptionKey[U],
        body: Callable[[OptionsT, T | None, U | None], None],
    ) -> None:
        """Bind two parameters together.

        The callback runs when at least one of the two has a value; the missing
        one is passed as None.

        Args:
            first (OptionKey[T]): First parameter.
            second (OptionKey[U]): Second parameter.
            body (Callable[[OptionsT, T | None, U | None], None]): Stores the values.
        """

        def _fill(result: ParseResult, options: OptionsT) -> None:
            a = result.get(first)
            b = result.get(second)
            if a is not None or b is not None:
                body(options, a, b)

        self._fillers.append((f"{first}/{second}", _fill))

    def fill(self, result: ParseResult, options: OptionsT) -> None:
        """Apply every binding to ``options``, in registration order.

        Args:
            result (ParseResult): Parsed values.
            options (OptionsT): The options object to populate in place.

        Raises:
            ArgumentBindingError: If a binding rejects its value.
        """
        for label, filler in self._fillers:
            try:
                filler(result, options)
            except ArgumentBindingError:
                raise
            except (TypeError, ValueError, AttributeError) as exc:
                logger.debug("Binding %s failed", label, exc_info=True)
                raise ArgumentBindingError(label, str(exc)) from exc
        logger.trace("Bound %d parameter(s) onto %s", len(self._fillers), type(options).__name__)
