"""Backend registry and settings builder for PropStore."""

from typing import TYPE_CHECKING, Any, Dict, Optional, Type

from loguru import logger

from core.exceptions import ConfigurationError
from core.types import Backend, LoadMode
from interfaces.settings import Settings
from providers.stores import PropertiesStore

if TYPE_CHECKING:
    from propstore.core.config import StoreConfig


class SettingsRegistry:
    """Registry mapping storage backends to their implementation classes."""

    def __init__(self):
        """Initialize the registry with the default backends."""
        self._backends: Dict[Backend, Type[Any]] = {}
        self._register_default_backends()

    def register_backend(self, backend: Backend, implementation: Type[Any]) -> None:
        """Register an implementation class for a backend.

        Args:
            backend: Backend identifier
            implementation: Class implementing the Settings protocol
        """
        self._backends[backend] = implementation
        logger.debug(f"Registered {implementation.__name__} as {backend.value}")

    def get_backend(self, backend: Backend) -> Type[Any]:
        """Get the implementation class for a backend.

        Raises:
            ConfigurationError: If no implementation is registered for the backend
        """
        if backend not in self._backends:
            raise ConfigurationError(
                config_key="backend",
                config_value=backend,
                reason=f"No settings backend registered for {backend.value}",
            )
        return self._backends[backend]

    def create(self, backend: Backend, **kwargs: Any) -> Settings:
        """Create a new, empty settings object for a backend."""
        implementation = self.get_backend(backend)
        return implementation(**kwargs)

    def _register_default_backends(self) -> None:
        self.register_backend(Backend.PROPERTIES, PropertiesStore)


class SettingsBuilder:
    """Fluent builder producing an empty settings object.

    Example:
        settings = builder().file_type_properties().build()
        settings.set_property("HttpPort", "8081")
    """

    def __init__(self, registry: Optional[SettingsRegistry] = None):
        self._registry = registry or get_registry()
        self._backend = Backend.PROPERTIES
        self._encoding = "utf-8"
        self._load_mode = LoadMode.LENIENT

    def file_type_properties(self) -> "SettingsBuilder":
        """Select the ``.properties`` file backend."""
        self._backend = Backend.PROPERTIES
        return self

    def backend(self, backend: Backend) -> "SettingsBuilder":
        """Select a backend by identifier."""
        self._backend = backend
        return self

    def encoding(self, encoding: str) -> "SettingsBuilder":
        """Set the text encoding for binary streams and files."""
        self._encoding = encoding
        return self

    def strict(self, strict: bool = True) -> "SettingsBuilder":
        """Make ``load`` raise on the first malformed line instead of skipping it."""
        self._load_mode = LoadMode.from_strict(strict)
        return self

    def build(self) -> Settings:
        """Build a new, empty settings object."""
        return self._registry.create(
            self._backend,
            encoding=self._encoding,
            load_mode=self._load_mode,
        )


# Global registry instance
_registry = SettingsRegistry()


def get_registry() -> SettingsRegistry:
    """Get the global settings registry instance."""
    return _registry


def builder() -> SettingsBuilder:
    """Start building a settings object on the global registry."""
    return SettingsBuilder()


def create_settings(config: Optional["StoreConfig"] = None) -> Settings:
    """Create an empty settings object from configuration.

    Args:
        config: Store configuration (environment defaults if None)

    Returns:
        Settings object for the configured backend
    """
    if config is None:
        from propstore.core.config import StoreConfig
        config = StoreConfig()

    return (
        builder()
        .backend(Backend.from_string(config.backend))
        .encoding(config.encoding)
        .strict(config.strict)
        .build()
    )


__all__ = [
    "SettingsRegistry",
    "SettingsBuilder",
    "get_registry",
    "builder",
    "create_settings",
]
