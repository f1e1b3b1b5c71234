"""
Application configuration following kkb_fastapi pattern.

Each environment has its own TOML file under ``carbon_cue/cfg``.
"""
import logging
import os
from functools import lru_cache
from pathlib import Path

import toml

from carbon_cue.utils.constants import ConfigFile

__all__ = ["Config", "ConfigFile", "get_config", "get_config_file_from_env"]

CONFIG_DIR = Path(__file__).resolve().parent.parent / "cfg"


class Config:
    """Configuration loaded from a TOML file."""

    def __init__(self, config_file: str):
        self.config_file = config_file
        self.path = CONFIG_DIR / config_file
        if not self.path.exists():
            raise FileNotFoundError(f"Config file not found: {self.path}")
        self.data = toml.load(self.path)

    def section(self, name: str) -> dict:
        """Return a config section, or an empty dict when it is absent."""
        return self.data.get(name, {})

    def __repr__(self):
        return f"<Config: {self.config_file}>"


@lru_cache
def get_config(config_file: str = ConfigFile.DEVELOPMENT) -> Config:
    """
    Load (and cache) the configuration for the given file name.

    Args:
        config_file: Configuration file name (e.g., "development.toml")

    Returns:
        Config instance
    """
    logging.debug(f"Loading config from {config_file}")
    return Config(config_file)


def get_config_file_from_env() -> str:
    """Map the ENVIRONMENT variable to a config file name."""
    env = os.getenv("ENVIRONMENT", "development")
    return f"{env}.toml"
