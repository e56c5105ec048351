"""
Fiber composition schema: shares, recipes, batch entries, and rounded results.

All types are frozen dataclasses. Construction does not validate user input:
a YarnEntry typed into a batch may carry an empty fiber name or a negative
percentage, and it is the aggregator's job to reject it with a message the
caller can show. Canonical (stored) shares are produced by
``FiberShare.normalized()``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def normalize_fiber_name(name: str) -> str:
    """Trim whitespace and upper-case the first character only.

    "wool" and "Wool" collapse to the same fiber; "merino Wool" keeps the
    rest of its casing.
    """
    name = name.strip()
    if not name:
        return name
    return name[0].upper() + name[1:]


@dataclass(frozen=True)
class FiberShare:
    """
    One fiber's share of a yarn.

    Attributes:
        name: Fiber name (e.g. "Virgin Wool").
        percentage: Share of the yarn's weight in percent.
    """

    name: str
    percentage: float

    def normalized(self) -> FiberShare:
        """Return a copy with the name in canonical form."""
        return FiberShare(name=normalize_fiber_name(self.name), percentage=self.percentage)


def percent_sum(shares: Iterable[FiberShare]) -> float:
    """Sum of the percentages of *shares* (0.0 for no shares)."""
    return sum((share.percentage for share in shares), 0.0)


@dataclass(frozen=True)
class YarnRecipe:
    """
    A named, saved fiber breakdown.

    The percentages are meant to total 100 but this is only enforced when a
    recipe is saved; recipes read back from disk may not satisfy it.
    """

    name: str
    shares: tuple[FiberShare, ...]


@dataclass(frozen=True)
class YarnEntry:
    """
    One line of a batch calculation.

    Attributes:
        grams: Weight of this yarn in the batch.
        shares: The yarn's own fiber breakdown.
        attached: False for a row that was detached from the batch upstream
            and has not been discarded yet. Detached entries are ignored.
    """

    grams: float
    shares: tuple[FiberShare, ...]
    attached: bool = True


@dataclass(frozen=True)
class RoundedShare:
    """A fiber's final share in tenths of a percent (750 == 75.0 %)."""

    name: str
    tenths: int

    @property
    def percent(self) -> float:
        return self.tenths / 10.0
