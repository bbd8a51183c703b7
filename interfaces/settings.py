"""Settings protocol for PropStore - abstract interface for property list implementations."""

from pathlib import Path
from typing import BinaryIO, Protocol, Sequence, TextIO, Union

from core.models import LoadReport

Stream = Union[BinaryIO, TextIO]


class Settings(Protocol):
    """Abstract protocol for property lists.

    Defines the interface that all settings backends must follow. Every
    key and value is a string. Implementations must be safe to share
    between threads without external synchronization.
    """

    # Single values
    def property(self, key: str) -> str | None:
        """Search for the property with the specified key."""
        ...

    def set_property(self, key: str, value: str) -> None:
        """Set the property for key, creating it if it does not exist."""
        ...

    # Compound values
    def property_slice(self, key: str) -> list[str] | None:
        """Search for the property with the specified key and split it on ','."""
        ...

    def set_property_slice(self, key: str, values: Sequence[str]) -> None:
        """Set the property for key to the ','-joined values."""
        ...

    # Enumeration
    def property_names(self) -> set[str]:
        """Return all keys in the property list."""
        ...

    # Streams
    def load(self, stream: Stream) -> LoadReport:
        """Read a property list from a line-oriented input stream."""
        ...

    def load_from_file(self, path: Union[str, Path]) -> LoadReport:
        """Read a property list from a file."""
        ...

    def store(self, stream: Stream) -> None:
        """Write the property list to an output stream in a format ``load`` accepts."""
        ...

    def store_to_file(self, path: Union[str, Path]) -> None:
        """Write the property list to a file, creating or truncating it."""
        ...
