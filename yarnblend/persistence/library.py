"""
YarnLibrary: the on-disk recipe store and fiber catalog.

A process owns one YarnLibrary. ``open()`` writes the seed files if they are
missing and loads both files; every mutation afterwards rewrites the
affected file immediately. Writes are whole-file overwrites with no locking
or atomic replace.

A failed write is logged and reported through the mutation's return value.
The in-memory state keeps the change, so the next successful write of the
same file persists it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from yarnblend.config.settings import LibraryConfig, SeedData, load_seed_data
from yarnblend.persistence.codec import (
    decode_catalog,
    decode_recipes,
    encode_catalog,
    encode_recipes,
)
from yarnblend.schemas.fiber import FiberShare, YarnRecipe
from yarnblend.store.catalog import FiberCatalog
from yarnblend.store.recipes import RecipeStore, check_recipe

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Return the file's text, or "" if it is missing or unreadable."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return ""


def write_text(path: Path, text: str) -> bool:
    """Overwrite *path* with *text*; log and return False on failure."""
    try:
        path.write_text(text, encoding="utf-8")
    except OSError:
        logger.exception("Could not write %s", path)
        return False
    return True


class YarnLibrary:
    """
    Recipe store and fiber catalog backed by two files.

    Attributes:
        config: File locations.
        recipes: Loaded recipes; empty until ``open()``.
        catalog: Loaded fiber names; empty until ``open()``.
    """

    def __init__(self, config: LibraryConfig, seeds: Optional[SeedData] = None) -> None:
        self.config = config
        self._seeds = seeds
        self.recipes = RecipeStore()
        self.catalog = FiberCatalog()

    # ── Startup ────────────────────────────────────────────────────────────────

    def ensure_seed_files(self) -> list[Path]:
        """Write the seed content for each missing file; return the paths written."""
        written: list[Path] = []
        recipes_path = self.config.recipes_path
        catalog_path = self.config.catalog_path
        if recipes_path.exists() and catalog_path.exists():
            return written

        seeds = self._seeds or load_seed_data()
        if not recipes_path.exists():
            if write_text(recipes_path, encode_recipes(RecipeStore(seeds.recipes))):
                logger.info("Wrote seed recipes to %s", recipes_path)
                written.append(recipes_path)
        if not catalog_path.exists():
            if write_text(catalog_path, encode_catalog(FiberCatalog(seeds.fibers))):
                logger.info("Wrote seed fiber catalog to %s", catalog_path)
                written.append(catalog_path)
        return written

    def load(self) -> None:
        """Replace the in-memory state with the files' contents."""
        self.recipes = decode_recipes(read_text(self.config.recipes_path))
        self.catalog = decode_catalog(read_text(self.config.catalog_path))
        logger.info(
            "Loaded %d recipes and %d fibers from %s",
            len(self.recipes),
            len(self.catalog),
            self.config.data_dir,
        )

    def open(self) -> YarnLibrary:
        self.ensure_seed_files()
        self.load()
        return self

    # ── Persistence ────────────────────────────────────────────────────────────

    def save_recipes(self) -> bool:
        return write_text(self.config.recipes_path, encode_recipes(self.recipes))

    def save_catalog(self) -> bool:
        return write_text(self.config.catalog_path, encode_catalog(self.catalog))

    # ── Mutations ──────────────────────────────────────────────────────────────

    def save_recipe(self, name: str, shares: Iterable[FiberShare]) -> bool:
        """
        Store a recipe (overwriting any with the same name) and persist.

        Raises:
            RecipeShareError: If a share has a blank name or a negative
                percentage.
            RecipeSumError: If the percentages do not total 100 ± 0.09.
            ValueError: If the trimmed name is empty.
        """
        shares = tuple(shares)
        check_recipe(shares)
        self.recipes.upsert(name, shares)
        return self.save_recipes()

    def delete_recipe(self, name: str) -> bool:
        """Remove a recipe and persist; False (nothing written) if it is unknown."""
        if not self.recipes.remove(name):
            return False
        return self.save_recipes()

    def get_recipe(self, name: str) -> Optional[YarnRecipe]:
        return self.recipes.get(name)

    def add_fiber(self, name: str) -> bool:
        """Add a fiber name and persist; False (nothing written) if already known."""
        if not self.catalog.add(name):
            return False
        return self.save_catalog()

    def remove_fiber(self, name: str) -> bool:
        """Remove a fiber name and persist; False (nothing written) if unknown."""
        if not self.catalog.remove(name):
            return False
        return self.save_catalog()
