"""Tests for the settings registry and builder."""

import io

import pytest

from core.exceptions import ConfigurationError, ParsingError
from core.types import Backend, LoadMode
from interfaces.settings import Settings
from propstore.core.config import StoreConfig
from providers.stores import PropertiesStore
from registry import SettingsBuilder, SettingsRegistry, builder, create_settings, get_registry


class TestSettingsRegistry:
    """Test backend registration."""

    def test_default_backend_registered(self):
        """Test the properties backend is available out of the box."""
        registry = SettingsRegistry()
        assert registry.get_backend(Backend.PROPERTIES) is PropertiesStore

    def test_create_returns_new_instances(self):
        """Test each create call builds an independent empty store."""
        registry = SettingsRegistry()
        first = registry.create(Backend.PROPERTIES)
        second = registry.create(Backend.PROPERTIES)

        first.set_property("A", "1")

        assert second.property("A") is None

    def test_unregistered_backend(self):
        """Test an unknown backend is a configuration error."""
        registry = SettingsRegistry()
        registry._backends.clear()

        with pytest.raises(ConfigurationError, match="No settings backend registered"):
            registry.create(Backend.PROPERTIES)

    def test_register_custom_backend(self):
        """Test a backend can be replaced by another implementation."""
        class RecordingStore(PropertiesStore):
            pass

        registry = SettingsRegistry()
        registry.register_backend(Backend.PROPERTIES, RecordingStore)

        assert isinstance(registry.create(Backend.PROPERTIES), RecordingStore)

    def test_global_registry(self):
        """Test the module-level registry is shared."""
        assert get_registry() is get_registry()


class TestSettingsBuilder:
    """Test the fluent builder."""

    def test_build_properties(self):
        """Test the documented builder chain."""
        settings = builder().file_type_properties().build()

        assert isinstance(settings, PropertiesStore)
        assert settings.property_names() == set()

    def test_build_default_backend(self):
        """Test building without selecting a backend."""
        assert isinstance(builder().build(), PropertiesStore)

    def test_build_options(self):
        """Test encoding and strict options reach the store."""
        settings = builder().encoding("latin-1").strict().build()

        assert settings.encoding == "latin-1"
        assert settings.load_mode is LoadMode.STRICT
        with pytest.raises(ParsingError):
            settings.load(io.BytesIO(b"broken\n"))

    def test_builder_uses_given_registry(self):
        """Test a builder bound to a custom registry."""
        registry = SettingsRegistry()
        registry._backends.clear()

        with pytest.raises(ConfigurationError):
            SettingsBuilder(registry).build()

    def test_build_satisfies_protocol(self):
        """Test built stores expose the full Settings surface."""
        settings: Settings = builder().build()
        for name in (
            "property", "set_property", "property_slice", "set_property_slice",
            "property_names", "load", "load_from_file", "store", "store_to_file",
        ):
            assert callable(getattr(settings, name))


class TestCreateSettings:
    """Test building from configuration."""

    def test_from_config(self):
        """Test configuration values reach the store."""
        settings = create_settings(StoreConfig(encoding="utf-16", strict=True))

        assert settings.encoding == "utf-16"
        assert settings.load_mode is LoadMode.STRICT

    def test_from_environment(self, monkeypatch):
        """Test the environment is used when no config is given."""
        monkeypatch.setenv("PROPSTORE_STRICT", "true")

        settings = create_settings()

        assert settings.load_mode is LoadMode.STRICT
