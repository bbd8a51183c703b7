"""PropStore Core Package - Domain models, types, and exceptions.

This package contains the core domain models and types that form the foundation
of the PropStore architecture. These models are independent of stream and file
handling.

Modules:
    models: Domain models for Property and LoadReport
    types: Common type definitions, enums and format constants
    exceptions: Core exception classes for error handling
"""

from .exceptions import (
    ConfigurationError,
    ParsingError,
    PropStoreError,
    ValidationError,
)
from .models import LineError, LoadReport, Property
from .types import Backend, Key, LoadMode, Value

__all__ = [
    # Domain Models
    "Property",
    "LineError",
    "LoadReport",

    # Types
    "Backend",
    "LoadMode",
    "Key",
    "Value",

    # Exceptions
    "PropStoreError",
    "ValidationError",
    "ParsingError",
    "ConfigurationError",
]

__version__ = "0.1.0"
