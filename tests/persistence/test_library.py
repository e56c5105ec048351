"""Tests for persistence.library — YarnLibrary bootstrap and write-after-mutation."""

import logging

import pytest

from yarnblend.config.settings import LibraryConfig, SeedData
from yarnblend.persistence.library import YarnLibrary, read_text, write_text
from yarnblend.schemas.fiber import FiberShare, YarnRecipe
from yarnblend.store.recipes import RecipeShareError, RecipeSumError

SEEDS = SeedData(
    recipes=(YarnRecipe("Sock", (FiberShare("Wool", 75.0), FiberShare("Nylon", 25.0))),),
    fibers=("Wool", "Nylon", "Silk"),
)


@pytest.fixture
def config(tmp_path):
    return LibraryConfig(data_dir=tmp_path)


@pytest.fixture
def library(config):
    return YarnLibrary(config, seeds=SEEDS).open()


class TestBootstrap:
    def test_writes_seed_files_when_missing(self, config):
        lib = YarnLibrary(config, seeds=SEEDS)
        written = lib.ensure_seed_files()
        assert written == [config.recipes_path, config.catalog_path]
        assert config.recipes_path.read_text(encoding="utf-8").startswith('{\n  "Sock": {')
        assert config.catalog_path.read_text(encoding="utf-8") == '[\n  "Nylon",\n  "Silk",\n  "Wool"\n]'

    def test_open_loads_seeds(self, library):
        assert library.recipes.names() == ["Sock"]
        assert library.catalog.names() == ["Nylon", "Silk", "Wool"]

    def test_existing_files_are_not_overwritten(self, config):
        config.recipes_path.write_text("{\n}", encoding="utf-8")
        config.catalog_path.write_text('[\n  "Linen"\n]', encoding="utf-8")
        lib = YarnLibrary(config, seeds=SEEDS)
        assert lib.ensure_seed_files() == []
        lib.load()
        assert len(lib.recipes) == 0
        assert lib.catalog.names() == ["Linen"]

    def test_only_missing_file_is_seeded(self, config):
        config.catalog_path.write_text('[\n  "Linen"\n]', encoding="utf-8")
        lib = YarnLibrary(config, seeds=SEEDS).open()
        assert lib.recipes.names() == ["Sock"]
        assert lib.catalog.names() == ["Linen"]

    def test_packaged_seeds_by_default(self, config):
        lib = YarnLibrary(config).open()
        assert lib.recipes.names() == ["Classic Sock Yarn"]
        assert len(lib.catalog) == 6

    def test_open_logs_counts(self, config, caplog):
        with caplog.at_level(logging.INFO, logger="yarnblend.persistence.library"):
            YarnLibrary(config, seeds=SEEDS).open()
        assert "Loaded 1 recipes and 3 fibers" in caplog.text


class TestRecipeMutations:
    def test_save_recipe_persists(self, library, config):
        shares = [FiberShare("alpaca", 60.0), FiberShare("silk", 40.0)]
        assert library.save_recipe("Cloud", shares) is True

        reloaded = YarnLibrary(config, seeds=SEEDS).open()
        assert reloaded.recipes.names() == ["Sock", "Cloud"]
        cloud = reloaded.get_recipe("Cloud")
        assert [(s.name, s.percentage) for s in cloud.shares] == [("Alpaca", 60.0), ("Silk", 40.0)]

    def test_save_recipe_overwrites(self, library, config):
        library.save_recipe("Sock", [FiberShare("Wool", 80.0), FiberShare("Nylon", 20.0)])
        reloaded = YarnLibrary(config, seeds=SEEDS).open()
        assert reloaded.recipes.names() == ["Sock"]
        assert reloaded.get_recipe("Sock").shares[0].percentage == 80.0

    def test_save_recipe_rejects_bad_sum(self, library, config):
        before = config.recipes_path.read_text(encoding="utf-8")
        with pytest.raises(RecipeSumError):
            library.save_recipe("Bad", [FiberShare("Wool", 50.0)])
        assert "Bad" not in library.recipes
        assert config.recipes_path.read_text(encoding="utf-8") == before

    @pytest.mark.parametrize(
        "shares",
        [
            [FiberShare("Wool", 110.0), FiberShare("Nylon", -10.0)],
            [FiberShare("Wool", 50.0), FiberShare("   ", 50.0)],
        ],
    )
    def test_save_recipe_rejects_shares_that_would_not_reload(self, library, config, shares):
        before = config.recipes_path.read_text(encoding="utf-8")
        with pytest.raises(RecipeShareError):
            library.save_recipe("Bad", shares)
        assert "Bad" not in library.recipes
        assert config.recipes_path.read_text(encoding="utf-8") == before

    def test_get_recipe_with_padded_name(self, library):
        assert library.get_recipe(" Sock ").name == "Sock"

    def test_delete_recipe_persists(self, library, config):
        assert library.delete_recipe("Sock") is True
        assert config.recipes_path.read_text(encoding="utf-8") == "{\n}"

    def test_delete_unknown_recipe(self, library):
        assert library.delete_recipe("Nope") is False


class TestFiberMutations:
    def test_add_fiber_persists(self, library, config):
        assert library.add_fiber("cashmere") is True
        assert '"Cashmere"' in config.catalog_path.read_text(encoding="utf-8")

    def test_add_existing_fiber_writes_nothing(self, library, config):
        config.catalog_path.unlink()
        assert library.add_fiber("Silk") is False
        assert not config.catalog_path.exists()

    def test_remove_fiber_persists(self, library, config):
        assert library.remove_fiber("Silk") is True
        reloaded = YarnLibrary(config, seeds=SEEDS).open()
        assert reloaded.catalog.names() == ["Nylon", "Wool"]

    def test_remove_unknown_fiber(self, library):
        assert library.remove_fiber("Hemp") is False


class TestFileErrors:
    def test_write_failure_is_reported(self, tmp_path, caplog):
        lib = YarnLibrary(LibraryConfig(data_dir=tmp_path / "missing"), seeds=SEEDS)
        with caplog.at_level(logging.ERROR, logger="yarnblend.persistence.library"):
            assert lib.add_fiber("Silk") is False
        assert "Silk" in lib.catalog
        assert "Could not write" in caplog.text

    def test_seeding_into_missing_directory(self, tmp_path):
        lib = YarnLibrary(LibraryConfig(data_dir=tmp_path / "missing"), seeds=SEEDS)
        assert lib.ensure_seed_files() == []

    def test_read_missing_file(self, tmp_path):
        assert read_text(tmp_path / "nothing.json") == ""

    def test_read_directory_warns(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="yarnblend.persistence.library"):
            assert read_text(tmp_path) == ""
        assert "Could not read" in caplog.text

    def test_write_text(self, tmp_path):
        path = tmp_path / "out.json"
        assert write_text(path, "[\n]") is True
        assert path.read_text(encoding="utf-8") == "[\n]"
