"""PropStore - Thread-safe in-memory store for .properties configuration text."""

__version__ = "0.1.0"
__description__ = "Thread-safe in-memory store for .properties configuration text"

__all__ = [
    "PropertiesStore",
    "Settings",
    "StoreConfig",
    "builder",
    "create_settings",
]


def __getattr__(name: str):
    """Lazy import to keep ``import propstore`` free of pydantic and loguru."""
    if name == "PropertiesStore":
        from providers.stores import PropertiesStore
        return PropertiesStore
    elif name == "Settings":
        from interfaces.settings import Settings
        return Settings
    elif name == "StoreConfig":
        from .core.config import StoreConfig
        return StoreConfig
    elif name == "builder":
        from registry import builder
        return builder
    elif name == "create_settings":
        from registry import create_settings
        return create_settings
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
