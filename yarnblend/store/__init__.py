"""store — in-memory fiber catalog and recipe store."""

from yarnblend.store.catalog import FiberCatalog
from yarnblend.store.recipes import (
    RecipeShareError,
    RecipeStore,
    RecipeSumError,
    check_recipe,
    check_recipe_sum,
)

__all__ = [
    "FiberCatalog",
    "RecipeStore",
    "RecipeShareError",
    "RecipeSumError",
    "check_recipe",
    "check_recipe_sum",
]
