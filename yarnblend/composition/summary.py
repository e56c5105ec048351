"""
Presentation helpers around a yarn's fiber breakdown and a batch result.

These helpers carry no UI concepts: they return enums, shares, and plain
text that a presentation layer can display or place on a clipboard.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from enum import Enum

from yarnblend.composition.aggregator import PERCENT_SUM_TOLERANCE
from yarnblend.schemas.fiber import FiberShare, RoundedShare, percent_sum

DEFAULT_TABLE_HEADERS: tuple[str, str] = ("Fiber", "Share (%)")


class SumStatus(str, Enum):
    """Live state of a yarn's percentage total while it is being edited."""

    OK = "ok"
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"


def classify_percent_sum(total: float) -> SumStatus:
    """OK when *total* is strictly within 0.09 of 100, else low or high."""
    if abs(total - 100.0) < PERCENT_SUM_TOLERANCE:
        return SumStatus.OK
    return SumStatus.TOO_LOW if total < 100.0 else SumStatus.TOO_HIGH


def fill_rest(shares: Sequence[FiberShare]) -> tuple[FiberShare, ...]:
    """
    Put the gap to 100 % onto the last share.

    The gap may be negative (the last share shrinks). Nothing changes when
    there are no shares or the total is already within 0.09 of 100.
    """
    if not shares:
        return tuple(shares)
    rest = 100.0 - percent_sum(shares)
    if abs(rest) < PERCENT_SUM_TOLERANCE:
        return tuple(shares)
    last = shares[-1]
    return (*shares[:-1], replace(last, percentage=last.percentage + rest))


def format_tenths(tenths: int) -> str:
    """750 → "75.0"."""
    return f"{tenths / 10.0:.1f}"


def format_percent_input(value: float) -> str:
    """Whole numbers without decimals ("25"), anything else with one ("33.3")."""
    if abs(value - round(value)) < 1e-7:
        return str(int(round(value)))
    return f"{value:.1f}"


def composition_title(total_weight: float) -> str:
    return f"Total Composition (Total: {total_weight:.2f} g)"


def composition_table(
    shares: Iterable[RoundedShare],
    headers: Sequence[str] = DEFAULT_TABLE_HEADERS,
) -> str:
    """
    Render a batch result as tab-separated text.

    One header line, then one line per share; every line ends with a newline.
    """
    lines = ["\t".join(headers)]
    lines.extend(f"{share.name}\t{format_tenths(share.tenths)}" for share in shares)
    return "".join(f"{line}\n" for line in lines)
