"""PropStore Core Models Package - Domain model definitions.

The models follow these principles:
- Immutable data structures using dataclasses with frozen=True
- Rich type hints for better IDE support
- Clear separation between domain logic and stream handling
"""

from .property import Property
from .load_report import LineError, LoadReport

__all__ = [
    "Property",
    "LineError",
    "LoadReport",
]
