"""
Error Types
-----------
Typed errors raised by the transport core.

Every failure of a call reaches the caller as one of these exceptions.
Nothing is retried and nothing is swallowed, with one exception: an error
body that cannot be decoded degrades to an empty APIError.
"""

from typing import Optional


class EventbriteError(Exception):
    """Base class for all client errors."""
    pass


class ConfigurationError(EventbriteError):
    """The client is missing configuration required for the call (e.g. token)."""
    pass


class ValidationError(EventbriteError):
    """A request descriptor field marked required was left empty."""

    def __init__(self, field: str, descriptor: str = ""):
        self.field = field
        self.descriptor = descriptor
        where = f"{descriptor}." if descriptor else ""
        super().__init__(f"Required parameter '{where}{field}' is empty")


class CancellationError(EventbriteError):
    """The caller's deadline fired before the call completed."""
    pass


class TransportError(EventbriteError):
    """Network-level failure reported by the HTTP transport."""

    def __init__(self, message: str, original: Optional[BaseException] = None):
        self.original = original
        super().__init__(message)


class DecodeError(EventbriteError):
    """A response body could not be decoded into the expected shape."""

    def __init__(self, message: str, body: bytes = b""):
        self.body = body
        super().__init__(message)


class APIError(EventbriteError):
    """
    Error envelope returned by the API on a non-200 response.

    error is the stable key to branch on; error_description is developer
    text and may be localized; status_code echoes the HTTP status.
    """

    def __init__(self, error: str = "", error_description: str = "", status_code: int = 0):
        self.error = error
        self.error_description = error_description
        self.status_code = status_code
        super().__init__(
            f"Eventbrite API: [Status code - {status_code}] {error_description}"
        )

    @classmethod
    def from_payload(cls, payload: object) -> "APIError":
        """Build from a decoded error body; unknown shapes give an empty envelope."""
        if not isinstance(payload, dict):
            return cls()
        status = payload.get("status_code", 0)
        return cls(
            error=str(payload.get("error") or ""),
            error_description=str(payload.get("error_description") or ""),
            status_code=status if isinstance(status, int) else 0,
        )

    def __repr__(self) -> str:
        return f"APIError({self.error!r}, status_code={self.status_code})"
