# Core module - error taxonomy and shared response types

from .errors import (
    EventbriteError, ConfigurationError, ValidationError, CancellationError,
    TransportError, DecodeError, APIError,
)
from .types import APIModel, Pagination

__all__ = [
    "EventbriteError", "ConfigurationError", "ValidationError", "CancellationError",
    "TransportError", "DecodeError", "APIError",
    "APIModel", "Pagination",
]
