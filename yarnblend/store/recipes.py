"""
Recipe store: saved yarn recipes keyed by name.

Recipes iterate in insertion order so selection lists stay stable. An
overwritten recipe keeps its original position.

The sum-to-100 rule and the share checks run in ``check_recipe`` at save
time only; the store itself accepts whatever it is given, including recipes
read back from a hand-edited file. Lookups trim the name the same way
``upsert`` does.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

from yarnblend.composition.aggregator import within_percent_tolerance
from yarnblend.schemas.fiber import FiberShare, YarnRecipe, percent_sum


class RecipeSumError(ValueError):
    """Raised when a recipe is saved with percentages that do not total 100."""

    def __init__(self, actual_sum: float) -> None:
        super().__init__(f"Total must be 100%. (Current: {actual_sum:.1f}%)")
        self.actual_sum = actual_sum


class RecipeShareError(ValueError):
    """Raised when a recipe is saved with a share the recipe file cannot hold."""

    def __init__(self, share_index: int, message: str) -> None:
        super().__init__(message)
        self.share_index = share_index


def check_recipe_sum(shares: Iterable[FiberShare]) -> None:
    """
    Raise RecipeSumError unless *shares* total 100 within ±0.09.

    A recipe without shares is rejected as well (its total is 0).
    """
    total = percent_sum(shares)
    if not within_percent_tolerance(total):
        raise RecipeSumError(total)


def check_recipe(shares: Sequence[FiberShare]) -> None:
    """
    Save-time checks: every share must be readable back from disk, and the
    shares must total 100 within ±0.09.

    Raises:
        RecipeShareError: A share has a blank name or a percentage that is
            negative or not finite.
        RecipeSumError: The percentages do not total 100.
    """
    for index, share in enumerate(shares):
        if not share.name.strip():
            raise RecipeShareError(index, "Fiber name must not be empty.")
        if not math.isfinite(share.percentage) or share.percentage < 0:
            raise RecipeShareError(index, "Percentage must not be negative.")
    check_recipe_sum(shares)


class RecipeStore:
    """Named collection of YarnRecipes."""

    def __init__(self, recipes: Iterable[YarnRecipe] = ()) -> None:
        self._recipes: dict[str, YarnRecipe] = {}
        for recipe in recipes:
            self.upsert(recipe.name, recipe.shares)

    def upsert(self, name: str, shares: Iterable[FiberShare]) -> YarnRecipe:
        """
        Insert or overwrite the recipe called *name*.

        The name is trimmed and share names are normalized before storing.

        Raises:
            ValueError: If the trimmed name is empty.
        """
        name = name.strip()
        if not name:
            raise ValueError("recipe name must not be empty")
        recipe = YarnRecipe(name=name, shares=tuple(share.normalized() for share in shares))
        self._recipes[name] = recipe
        return recipe

    def remove(self, name: str) -> bool:
        """Delete *name*; return False if there was no such recipe."""
        return self._recipes.pop(name.strip(), None) is not None

    def get(self, name: str) -> Optional[YarnRecipe]:
        return self._recipes.get(name.strip())

    def names(self) -> list[str]:
        return list(self._recipes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._recipes

    def __iter__(self) -> Iterator[YarnRecipe]:
        return iter(list(self._recipes.values()))

    def __len__(self) -> int:
        return len(self._recipes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecipeStore):
            return NotImplemented
        return list(self._recipes.items()) == list(other._recipes.items())

    def __repr__(self) -> str:
        return f"RecipeStore({self.names()!r})"
