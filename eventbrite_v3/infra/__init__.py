# Infrastructure module - configuration and logging

from .config import ClientConfig, DEFAULT_BASE_URL, DEFAULT_REQUESTS_PER_SECOND
from .logging import get_logger, configure_logging, CallContext, get_call_id, generate_call_id

__all__ = [
    # Config
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_REQUESTS_PER_SECOND",
    # Logging
    "get_logger",
    "configure_logging",
    "CallContext",
    "get_call_id",
    "generate_call_id",
]
