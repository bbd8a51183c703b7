"""
Configuration management package for PropStore.

This package provides:
- Type-safe store configuration using Pydantic settings
- Loading from environment variables and YAML/TOML/JSON config files
"""

from .settings_sources import (
    JsonConfigSettingsSource,
    TomlConfigSettingsSource,
    YamlConfigSettingsSource,
    create_config_source,
    find_config_files,
)
from .store_config import StoreConfig

__all__ = [
    "StoreConfig",
    "YamlConfigSettingsSource",
    "TomlConfigSettingsSource",
    "JsonConfigSettingsSource",
    "create_config_source",
    "find_config_files",
]
