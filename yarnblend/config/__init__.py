"""config — file locations and first-run seed data."""

from yarnblend.config.settings import DATA_DIR_ENV_VAR, LibraryConfig, SeedData, load_seed_data

__all__ = ["DATA_DIR_ENV_VAR", "LibraryConfig", "SeedData", "load_seed_data"]
