"""
yarnblend — fiber composition of blended yarn batches.

Aggregates a batch of yarns (grams plus each yarn's fiber breakdown) into
whole tenths of a percent that total exactly 100.0 %, and keeps saved yarn
recipes and a fiber name catalog in two hand-formatted text files.
"""

from .composition import (
    EMPTY_TOTAL,
    AggregatedComposition,
    EmptyFiberNameError,
    EmptyTotal,
    NegativeGramsError,
    NegativePercentError,
    PercentSumMismatchError,
    SumStatus,
    ValidationError,
    aggregate,
    apportion,
    classify_percent_sum,
    composition_table,
    composition_title,
    fill_rest,
)
from .config import LibraryConfig, SeedData, load_seed_data
from .persistence import (
    YarnLibrary,
    decode_catalog,
    decode_recipes,
    encode_catalog,
    encode_recipes,
)
from .schemas import FiberShare, RoundedShare, YarnEntry, YarnRecipe, normalize_fiber_name
from .store import (
    FiberCatalog,
    RecipeShareError,
    RecipeStore,
    RecipeSumError,
    check_recipe,
    check_recipe_sum,
)

__all__ = [
    # types
    "FiberShare",
    "YarnRecipe",
    "YarnEntry",
    "RoundedShare",
    "AggregatedComposition",
    "normalize_fiber_name",
    # composition
    "aggregate",
    "apportion",
    "EmptyTotal",
    "EMPTY_TOTAL",
    "ValidationError",
    "NegativeGramsError",
    "PercentSumMismatchError",
    "EmptyFiberNameError",
    "NegativePercentError",
    "SumStatus",
    "classify_percent_sum",
    "fill_rest",
    "composition_table",
    "composition_title",
    # stores
    "FiberCatalog",
    "RecipeStore",
    "RecipeShareError",
    "RecipeSumError",
    "check_recipe",
    "check_recipe_sum",
    # persistence
    "encode_recipes",
    "decode_recipes",
    "encode_catalog",
    "decode_catalog",
    "YarnLibrary",
    # config
    "LibraryConfig",
    "SeedData",
    "load_seed_data",
]
