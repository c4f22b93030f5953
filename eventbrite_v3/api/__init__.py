# API module - transport core shared by every endpoint
# One rate limiter per client, token injected on every call

from .client import APIClient, EXPAND
from .params import param, validate, to_query, to_body
from .rate_limiter import RateLimiter

__all__ = ["APIClient", "EXPAND", "RateLimiter", "param", "validate", "to_query", "to_body"]
