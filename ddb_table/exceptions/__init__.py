# Base exception class
from .base import DDBTableError

from .domain_exceptions import (
    ConfigurationError,
    ConversionError,
    ItemNotFoundError,
    ListError,
    OperationError,
    RetrievalError,
    ScanError,
    ValidationError,
    WriteError,
)

__all__ = [
    # Base exception
    "DDBTableError",

    # Domain exceptions (alphabetically ordered)
    "ConfigurationError",
    "ConversionError",
    "ItemNotFoundError",
    "ListError",
    "OperationError",
    "RetrievalError",
    "ScanError",
    "ValidationError",
    "WriteError",
]
