"""
Store configuration for PropStore.

Configuration Sources (in order of precedence):
1. Runtime parameters (highest priority)
2. Environment variables (PROPSTORE_*)
3. Configuration file (YAML, TOML or JSON)
4. Default values (lowest priority)

Environment Variable Examples:
    PROPSTORE_BACKEND=properties
    PROPSTORE_ENCODING=latin-1
    PROPSTORE_STRICT=true
    PROPSTORE_DEBUG=true
"""

import codecs
from pathlib import Path
from typing import Any, Literal, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, EnvSettingsSource, SettingsConfigDict

from core.types import LoadMode

from .settings_sources import create_config_source


class StoreConfig(BaseSettings):
    """Configuration for building a settings store."""

    model_config = SettingsConfigDict(
        env_prefix='PROPSTORE_',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        env_file=None,
    )

    backend: Literal['properties'] = Field(
        default='properties',
        description="Storage backend for the settings object"
    )

    encoding: str = Field(
        default='utf-8',
        description="Text encoding for binary streams and files"
    )

    strict: bool = Field(
        default=False,
        description="Raise on the first malformed line instead of skipping it"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings unknown to the codecs registry."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        return v

    @property
    def load_mode(self) -> LoadMode:
        return LoadMode.from_strict(self.strict)

    @classmethod
    def load(
        cls,
        config_file: Optional[Union[str, Path]] = None,
        **override_values: Any,
    ) -> 'StoreConfig':
        """
        Load configuration from a file, the environment and overrides.

        Args:
            config_file: Optional YAML, TOML or JSON configuration file
            **override_values: Runtime parameter overrides

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If the config file is missing, unreadable or of unknown format
        """
        config_data: dict[str, Any] = {}

        if config_file is not None:
            config_data.update(create_config_source(cls, config_file)())

        # Init kwargs beat the environment in pydantic-settings, so the
        # environment is layered over the file values here
        config_data.update(EnvSettingsSource(cls)())

        config_data.update({k: v for k, v in override_values.items() if v is not None})

        return cls(**config_data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format."""
        return self.model_dump(mode='json')
