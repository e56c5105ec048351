"""Tests for config.settings — file locations and seed data."""

from pathlib import Path

import pytest

from yarnblend.config.settings import DATA_DIR_ENV_VAR, LibraryConfig, load_seed_data
from yarnblend.schemas.fiber import FiberShare


class TestLibraryConfig:
    def test_default_filenames(self, tmp_path):
        config = LibraryConfig(data_dir=tmp_path)
        assert config.recipes_path == tmp_path / "yarns.json"
        assert config.catalog_path == tmp_path / "fibers.json"

    def test_default_dir_is_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert LibraryConfig().data_dir == Path.cwd()

    def test_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv(DATA_DIR_ENV_VAR, str(tmp_path))
        assert LibraryConfig.from_env().data_dir == tmp_path

    def test_from_env_unset(self, tmp_path, monkeypatch):
        monkeypatch.delenv(DATA_DIR_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        assert LibraryConfig.from_env().data_dir == Path.cwd()

    def test_is_frozen(self, tmp_path):
        config = LibraryConfig(data_dir=tmp_path)
        with pytest.raises(AttributeError):
            config.recipes_filename = "other.json"  # type: ignore[misc]


class TestLoadSeedData:
    def test_packaged_seeds(self):
        seeds = load_seed_data()
        assert [recipe.name for recipe in seeds.recipes] == ["Classic Sock Yarn"]
        assert seeds.recipes[0].shares == (
            FiberShare("Virgin Wool", 75.0),
            FiberShare("Polyamide", 25.0),
        )
        assert seeds.fibers == (
            "Cotton",
            "Virgin Wool",
            "Polyacrylic",
            "Polyamide",
            "Silk",
            "Cashmere",
        )

    def test_custom_file(self, tmp_path):
        path = tmp_path / "seeds.yaml"
        path.write_text(
            "recipes:\n"
            "  - name: Lace\n"
            "    shares:\n"
            "      - {name: mohair, percentage: 70}\n"
            "      - {name: silk, percentage: 30}\n"
            "fibers: [Mohair]\n",
            encoding="utf-8",
        )
        seeds = load_seed_data(path)
        assert seeds.recipes[0].shares[0] == FiberShare("Mohair", 70.0)
        assert seeds.fibers == ("Mohair",)

    def test_missing_sections_default_to_empty(self, tmp_path):
        path = tmp_path / "seeds.yaml"
        path.write_text("fibers: [Silk]\n", encoding="utf-8")
        seeds = load_seed_data(path)
        assert seeds.recipes == ()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Seed data file not found"):
            load_seed_data(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "seeds.yaml"
        path.write_text("recipes: [\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to parse seed data file"):
            load_seed_data(path)

    def test_recipe_without_shares(self, tmp_path):
        path = tmp_path / "seeds.yaml"
        path.write_text("recipes:\n  - name: Lace\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Malformed seed data file"):
            load_seed_data(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "seeds.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="Malformed seed data file"):
            load_seed_data(path)
