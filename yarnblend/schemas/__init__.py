"""
Schema definitions for yarnblend data contracts.

Provides the shared data structures (fiber shares, recipes, batch entries,
rounded results) that flow between the composition engine and the stores.
"""

from .fiber import (
    FiberShare,
    RoundedShare,
    YarnEntry,
    YarnRecipe,
    normalize_fiber_name,
    percent_sum,
)

__all__ = [
    # types
    "FiberShare",
    "YarnRecipe",
    "YarnEntry",
    "RoundedShare",
    # helpers
    "normalize_fiber_name",
    "percent_sum",
]
