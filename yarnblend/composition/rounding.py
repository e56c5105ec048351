"""
Largest remainder apportionment at one-decimal-place granularity.

Rounding every fiber's share to 0.1 % independently does not guarantee the
displayed shares add up to 100.0 %. apportion() rounds each share to whole
tenths of a percent, measures the shortfall or excess against 1000 tenths,
and hands out (or takes back) single tenths to the fibers whose rounding
moved them furthest from their exact value.

Ordering rules
--------------
* Output order is descending weight. Fibers with equal weight keep the order
  in which the weights mapping yields them.
* The correction ranking is a stable sort of that output order, so fibers
  with identical remainders are corrected in output order.
* At most one tenth is adjusted per fiber. If the error exceeds the number
  of fibers the remainder is left uncorrected and a warning is logged; this
  cannot happen for weights produced by ``aggregate``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from yarnblend.schemas.fiber import RoundedShare

logger = logging.getLogger(__name__)

TOTAL_TENTHS: int = 1000


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer; .5 goes away from zero (2.5 → 3, -2.5 → -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def apportion(weights: Mapping[str, float], total_weight: float) -> list[RoundedShare]:
    """
    Convert grams per fiber into tenths of a percent that sum to 1000.

    Args:
        weights: Fiber name → grams, e.g. ``AggregatedComposition.weights``.
        total_weight: Batch total in grams; must be positive.

    Returns:
        One RoundedShare per fiber, heaviest first. Empty if *weights* is empty.

    Raises:
        ValueError: If total_weight is not positive.
    """
    if total_weight <= 0:
        raise ValueError(f"total_weight must be positive, got {total_weight}")
    if not weights:
        return []

    ordered = sorted(weights.items(), key=lambda item: item[1], reverse=True)
    names = [name for name, _ in ordered]
    exact = [(grams / total_weight) * 100.0 * 10.0 for _, grams in ordered]
    tenths = [round_half_away_from_zero(value) for value in exact]

    diff = TOTAL_TENTHS - sum(tenths)
    if diff != 0:
        _correct(tenths, exact, diff)

    return [RoundedShare(name=name, tenths=t) for name, t in zip(names, tenths)]


def _correct(tenths: list[int], exact: list[float], diff: int) -> None:
    """Apply up to one tenth of correction per fiber, in place."""
    n = len(tenths)
    if diff > 0:
        # Rounded down the most → first to gain a tenth.
        ranking = sorted(range(n), key=lambda i: exact[i] - tenths[i], reverse=True)
        step = 1
    else:
        # Rounded up the most → first to lose a tenth.
        ranking = sorted(range(n), key=lambda i: tenths[i] - exact[i], reverse=True)
        step = -1

    if abs(diff) > n:
        logger.warning(
            "Rounding error of %d tenths exceeds fiber count %d; shares will sum to %d",
            diff,
            n,
            TOTAL_TENTHS - diff + step * n,
        )

    for i in ranking[: abs(diff)]:
        tenths[i] += step
