# Base exception class
from .base import CuteDynamoError

from .errors import (
    BACKEND_ERRORS,
    ConfigurationError,
    ConnectionError,
    SerializationError,
    UninitializedClientError,
    ValidationError,
)

__all__ = [
    # Base exception
    "CuteDynamoError",

    # Library exceptions (alphabetically ordered)
    "ConfigurationError",
    "ConnectionError",
    "SerializationError",
    "UninitializedClientError",
    "ValidationError",

    # Pass-through backend error types
    "BACKEND_ERRORS",
]
