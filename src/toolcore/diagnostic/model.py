# topmark:header:start
#
#   project      : ToolCore
#   file         : model.py
#   file_relpath : src/toolcore/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 ToolCore contributors
#
# topmark:header:end

"""Diagnostic records and the log a diagnostics engine keeps them in.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable record (level, message, optional location).
    * DiagnosticStats: per-level counts.
    * DiagnosticLog: the ordered, growing log of one engine.
    * FrozenDiagnosticLog: immutable snapshot of a log.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from toolcore.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from toolcore.config.logging import ToolcoreLogger


logger: ToolcoreLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity of a diagnostic. Only ERROR makes a run fail."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """The `yachalk` style used for this level's prefix."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """One reported problem or note.

    ``location`` is free-form (a path, ``path:line``, an option name, ...) and is
    rendered as a prefix when present.
    """

    level: DiagnosticLevel
    message: str
    location: str | None = None


@dataclass(frozen=True)
class DiagnosticStats:
    """Number of diagnostics at each level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the number of diagnostics at any level."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Diagnostics of a run, in emission order.

    Owned by a [`DiagnosticsEngine`][toolcore.diagnostic.engine.DiagnosticsEngine];
    it only grows until cleared.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, diagnostic: Diagnostic) -> None:
        """Append ``diagnostic``."""
        self.items.append(diagnostic)
        logger.trace("Recorded %s: %r", diagnostic.level.value, diagnostic.message)

    def clear(self) -> None:
        """Drop every recorded diagnostic."""
        self.items.clear()

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable copy of the current contents."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def stats(self) -> DiagnosticStats:
        """Return per-level counts."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if a warning was recorded."""
        return self._has(DiagnosticLevel.WARNING)

    def has_error(self) -> bool:
        """Return True if an error was recorded."""
        return self._has(DiagnosticLevel.ERROR)

    def _has(self, level: DiagnosticLevel) -> bool:
        return any(d.level is level for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Snapshot of a `DiagnosticLog`, unaffected by later emits."""

    items: tuple[Diagnostic, ...]

    def stats(self) -> DiagnosticStats:
        """Return per-level counts."""
        return compute_diagnostic_stats(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Count ``diagnostics`` per level.

    Args:
        diagnostics: The diagnostics to count; consumed once.

    Returns:
        The per-level counts.
    """
    counts: Counter[DiagnosticLevel] = Counter(d.level for d in diagnostics)
    return DiagnosticStats(
        n_info=counts[DiagnosticLevel.INFO],
        n_warning=counts[DiagnosticLevel.WARNING],
        n_error=counts[DiagnosticLevel.ERROR],
    )
