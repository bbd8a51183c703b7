"""PropStore Property Domain Model - One key/value pair of a property list."""

from dataclasses import dataclass

from ..types import Key, Value, KEY_VALUE_SEPARATOR, LINE_TERMINATOR
from ..exceptions import ValidationError


@dataclass(frozen=True)
class Property:
    """Domain model representing a single property.

    Attributes:
        key: Property name, unique within a store
        value: Raw property value (a compound value is still one string)
    """

    key: Key
    value: Value

    def __post_init__(self):
        """Validate property model after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate property model attributes."""
        if not isinstance(self.key, str):
            raise ValidationError("key", self.key, "Key must be a string")
        if not isinstance(self.value, str):
            raise ValidationError("value", self.value, "Value must be a string")
        if LINE_TERMINATOR in self.key or LINE_TERMINATOR in self.value:
            raise ValidationError(
                "key" if LINE_TERMINATOR in self.key else "value",
                self.key if LINE_TERMINATOR in self.key else self.value,
                "Property cannot contain a line terminator"
            )

    def __str__(self) -> str:
        return f"{self.key} {KEY_VALUE_SEPARATOR} {self.value}"
