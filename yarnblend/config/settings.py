"""
Library configuration and first-run seed data.

LibraryConfig says where the recipe and catalog files live. SeedData is the
content written when either file is missing; it is loaded from
``data/seeds.yaml`` next to this module so the defaults can be edited
without touching code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, cast

import yaml

from yarnblend.schemas.fiber import FiberShare, YarnRecipe

_DATA_DIR = Path(__file__).parent / "data"
_SEEDS_FILE = _DATA_DIR / "seeds.yaml"

DATA_DIR_ENV_VAR = "YARNBLEND_DATA_DIR"


@dataclass(frozen=True)
class LibraryConfig:
    """
    Locations of the persisted files.

    Attributes:
        data_dir: Directory holding both files.
        recipes_filename: Recipe file name inside data_dir.
        catalog_filename: Fiber catalog file name inside data_dir.
    """

    data_dir: Path = field(default_factory=Path.cwd)
    recipes_filename: str = "yarns.json"
    catalog_filename: str = "fibers.json"

    @property
    def recipes_path(self) -> Path:
        return self.data_dir / self.recipes_filename

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_filename

    @classmethod
    def from_env(cls) -> LibraryConfig:
        """Use $YARNBLEND_DATA_DIR when set, else the working directory."""
        data_dir = os.environ.get(DATA_DIR_ENV_VAR)
        return cls(data_dir=Path(data_dir)) if data_dir else cls()


@dataclass(frozen=True)
class SeedData:
    """Recipes and fiber names written on first run."""

    recipes: tuple[YarnRecipe, ...]
    fibers: tuple[str, ...]


def load_seed_data(path: Optional[Path] = None) -> SeedData:
    """
    Load seed content from YAML.

    Args:
        path: Seed file; defaults to the packaged ``seeds.yaml``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid YAML or lacks required keys.
    """
    path = path or _SEEDS_FILE
    try:
        with open(path, encoding="utf-8") as f:
            data = cast(dict[str, Any], yaml.safe_load(f))
    except FileNotFoundError:
        raise FileNotFoundError(f"Seed data file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse seed data file {path}: {exc}") from exc

    try:
        recipes = tuple(
            YarnRecipe(
                name=str(entry["name"]).strip(),
                shares=tuple(
                    FiberShare(name=str(share["name"]), percentage=float(share["percentage"])).normalized()
                    for share in entry["shares"]
                ),
            )
            for entry in data.get("recipes", [])
        )
        fibers = tuple(str(name) for name in data.get("fibers", []))
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Malformed seed data file {path}: {exc!r}") from exc

    return SeedData(recipes=recipes, fibers=fibers)
