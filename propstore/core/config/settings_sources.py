"""
Settings sources for PropStore configuration files.

This module provides Pydantic settings sources that load ``StoreConfig``
values from YAML, TOML and JSON files.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from loguru import logger
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from core.exceptions import ConfigurationError


class BaseFileConfigSettingsSource(PydanticBaseSettingsSource, ABC):
    """
    Abstract base class for file-based configuration sources.

    Files are read once, at construction. Later files override earlier ones.
    """

    def __init__(
        self,
        settings_cls: Type[BaseSettings],
        config_file: Union[str, Path, List[Union[str, Path]]]
    ):
        """
        Initialize file-based configuration source.

        Args:
            settings_cls: The settings class
            config_file: Path(s) to configuration file(s)

        Raises:
            ConfigurationError: If a file is missing or cannot be parsed
        """
        super().__init__(settings_cls)

        if isinstance(config_file, (str, Path)):
            self.config_files = [Path(config_file)]
        else:
            self.config_files = [Path(f) for f in config_file]

        self._data = self._load_files()

    def _load_files(self) -> Dict[str, Any]:
        """Load and merge data from all configuration files."""
        merged_data = {}

        for config_file in self.config_files:
            if not config_file.is_file():
                raise ConfigurationError(
                    config_key="config_file",
                    config_value=str(config_file),
                    reason=f"Config file {config_file} not found",
                )
            try:
                file_data = self.load_file(config_file)
            except (OSError, ValueError) as e:
                raise ConfigurationError(
                    config_key="config_file",
                    config_value=str(config_file),
                    reason=f"Failed to load config file {config_file}: {e}",
                ) from e

            if file_data:
                merged_data.update(file_data)
            logger.debug(f"Loaded {len(file_data or {})} config values from {config_file}")

        return merged_data

    @abstractmethod
    def load_file(self, path: Path) -> Dict[str, Any]:
        """
        Load configuration data from a specific file.

        Args:
            path: Path to the configuration file

        Returns:
            Dictionary containing configuration data
        """
        pass

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        """Get field value from configuration data."""
        if field_name in self._data:
            return self._data[field_name], field_name, True
        return None, field_name, False

    def __call__(self) -> Dict[str, Any]:
        """Return the loaded configuration data."""
        return self._data

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(config_files={[str(f) for f in self.config_files]})'


class YamlConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for YAML files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        """Load YAML configuration file."""
        import yaml

        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(str(e)) from e
            return data if isinstance(data, dict) else {}


class TomlConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for TOML files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file."""
        try:
            import tomllib
        except ImportError:
            import tomli as tomllib

        with open(path, 'rb') as f:
            return tomllib.load(f)


class JsonConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for JSON files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        """Load JSON configuration file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
            return data if isinstance(data, dict) else {}


def create_config_source(
    settings_cls: Type[BaseSettings],
    config_file: Union[str, Path],
) -> BaseFileConfigSettingsSource:
    """
    Create the settings source matching a configuration file's suffix.

    Args:
        settings_cls: Settings class
        config_file: Configuration file to load

    Returns:
        Configured settings source

    Raises:
        ConfigurationError: If the file format is not supported
    """
    config_path = Path(config_file)
    suffix = config_path.suffix.lower()

    if suffix in ('.yaml', '.yml'):
        return YamlConfigSettingsSource(settings_cls, config_path)
    elif suffix == '.toml':
        return TomlConfigSettingsSource(settings_cls, config_path)
    elif suffix == '.json':
        return JsonConfigSettingsSource(settings_cls, config_path)

    raise ConfigurationError(
        config_key="config_file",
        config_value=str(config_path),
        reason=f"Unknown config file format: {config_path}",
    )


def find_config_files(
    base_dirs: Optional[List[Union[str, Path]]] = None,
    config_names: Optional[List[str]] = None,
) -> List[Path]:
    """
    Find configuration files in common locations.

    Args:
        base_dirs: Directories to search (defaults to common config locations)
        config_names: Config file names to look for

    Returns:
        List of found configuration files in priority order
    """
    if base_dirs is None:
        base_dirs = [
            Path.cwd(),
            Path.home() / '.config' / 'propstore',
        ]
    else:
        base_dirs = [Path(d) for d in base_dirs]

    if config_names is None:
        config_names = [
            'propstore.yaml',
            'propstore.yml',
            'propstore.toml',
            'propstore.json',
            '.propstore.yaml',
            '.propstore.yml',
            '.propstore.toml',
            '.propstore.json',
        ]

    found_files = []

    for base_dir in base_dirs:
        if not base_dir.exists():
            continue

        for config_name in config_names:
            config_path = base_dir / config_name
            if config_path.is_file():
                found_files.append(config_path)

    return found_files
