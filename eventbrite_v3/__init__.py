"""
eventbrite_v3
-------------
Async client for the Eventbrite REST API (v3).
"""

from .api import APIClient, RateLimiter, param
from .client import Eventbrite
from .core.errors import (
    APIError,
    CancellationError,
    ConfigurationError,
    DecodeError,
    EventbriteError,
    TransportError,
    ValidationError,
)
from .infra.config import ClientConfig
from .infra.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    "APIClient",
    "APIError",
    "CancellationError",
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "Eventbrite",
    "EventbriteError",
    "RateLimiter",
    "TransportError",
    "ValidationError",
    "configure_logging",
    "param",
]
