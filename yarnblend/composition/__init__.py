"""composition — batch aggregation and largest remainder rounding."""

from yarnblend.composition.aggregator import (
    PERCENT_SUM_TOLERANCE,
    AggregatedComposition,
    AggregationOutcome,
    aggregate,
    within_percent_tolerance,
)
from yarnblend.composition.errors import (
    EMPTY_TOTAL,
    EmptyFiberNameError,
    EmptyTotal,
    NegativeGramsError,
    NegativePercentError,
    PercentSumMismatchError,
    ValidationError,
)
from yarnblend.composition.rounding import TOTAL_TENTHS, apportion, round_half_away_from_zero
from yarnblend.composition.summary import (
    SumStatus,
    classify_percent_sum,
    composition_table,
    composition_title,
    fill_rest,
    format_percent_input,
    format_tenths,
)

__all__ = [
    # aggregation
    "PERCENT_SUM_TOLERANCE",
    "AggregatedComposition",
    "AggregationOutcome",
    "aggregate",
    "within_percent_tolerance",
    # errors and signals
    "ValidationError",
    "NegativeGramsError",
    "PercentSumMismatchError",
    "EmptyFiberNameError",
    "NegativePercentError",
    "EmptyTotal",
    "EMPTY_TOTAL",
    # rounding
    "TOTAL_TENTHS",
    "apportion",
    "round_half_away_from_zero",
    # summary
    "SumStatus",
    "classify_percent_sum",
    "fill_rest",
    "format_tenths",
    "format_percent_input",
    "composition_title",
    "composition_table",
]
