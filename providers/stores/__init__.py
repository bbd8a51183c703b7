"""Store providers package for PropStore - concrete settings implementations."""

from .properties_store import PropertiesStore

__all__ = [
    "PropertiesStore",
]
