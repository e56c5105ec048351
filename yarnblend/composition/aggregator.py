"""
Composition aggregator: batch entries → grams per fiber.

aggregate() validates every attached entry, converts each fiber share into a
gram weight, and merges weights for fibers that normalize to the same name
("wool" and "Wool" become one row).

Validation is fail-fast. Per entry, in order:
  1. grams must be a finite, non-negative number
  2. percentages must total 100 within ±0.09 (absolute)
  3. each share: trimmed name must be non-empty, then percentage must not
     be negative

The batch total is the sum of the entries' grams. A batch whose total is
zero yields EMPTY_TOTAL rather than an empty mapping.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from yarnblend.composition.errors import (
    EMPTY_TOTAL,
    EmptyFiberNameError,
    EmptyTotal,
    NegativeGramsError,
    NegativePercentError,
    PercentSumMismatchError,
)
from yarnblend.schemas.fiber import YarnEntry, normalize_fiber_name, percent_sum

logger = logging.getLogger(__name__)

PERCENT_SUM_TOLERANCE: float = 0.09


@dataclass(frozen=True)
class AggregatedComposition:
    """
    Grams per fiber across a batch.

    Attributes:
        weights: Normalized fiber name → accumulated grams, in first-seen order.
        total_weight: Sum of the grams of every attached entry.
    """

    weights: MappingProxyType[str, float]
    total_weight: float


AggregationOutcome = Union[AggregatedComposition, EmptyTotal]


def within_percent_tolerance(total: float) -> bool:
    """True if *total* is 100 within the save/calculate tolerance (inclusive)."""
    return abs(total - 100.0) <= PERCENT_SUM_TOLERANCE


def _validate_entry(index: int, entry: YarnEntry) -> None:
    if not math.isfinite(entry.grams) or entry.grams < 0:
        raise NegativeGramsError(index, entry.grams)

    total = percent_sum(entry.shares)
    if not within_percent_tolerance(total):
        raise PercentSumMismatchError(index, total)

    for share_index, share in enumerate(entry.shares):
        if not share.name.strip():
            raise EmptyFiberNameError(index, share_index)
        if share.percentage < 0:
            raise NegativePercentError(index, share_index, share.percentage)


def aggregate(entries: Iterable[YarnEntry]) -> AggregationOutcome:
    """
    Validate a batch and accumulate grams per fiber.

    Args:
        entries: Batch lines. Entries with ``attached=False`` are skipped
            without validation.

    Returns:
        AggregatedComposition, or EMPTY_TOTAL when the batch weighs nothing
        (no attached entries, or every entry has 0 grams).

    Raises:
        ValidationError: A subclass describing the first invalid entry.
    """
    weights: dict[str, float] = {}
    total_weight = 0.0

    for index, entry in enumerate(entries):
        if not entry.attached:
            continue

        try:
            _validate_entry(index, entry)
        except ValueError as exc:
            logger.debug("Rejected batch entry %d: %s", index, exc)
            raise

        total_weight += entry.grams
        for share in entry.shares:
            name = normalize_fiber_name(share.name)
            weights[name] = weights.get(name, 0.0) + entry.grams * (share.percentage / 100.0)

    if total_weight <= 0.0:
        logger.debug("Batch total weight is %.2f g; nothing to compute", total_weight)
        return EMPTY_TOTAL

    logger.debug("Aggregated %d fibers over %.2f g", len(weights), total_weight)
    return AggregatedComposition(weights=MappingProxyType(weights), total_weight=total_weight)
