"""Configuration module — exports Settings, load_config and settings_from_config."""

from src.config.loader import load_config, settings_from_config
from src.config.settings import Settings

__all__ = ["Settings", "load_config", "settings_from_config"]
