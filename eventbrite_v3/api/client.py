"""
API Transport Core
------------------
Shared request execution for every Eventbrite endpoint.

Each call is one linear pipeline with no retries:
validate -> rate-limit -> authenticate -> transmit -> decode

Rules:
- The token travels as a query parameter and is never logged
- Every call takes one rate limit permit before any network I/O
- GET branches on status 200; POST and DELETE decode unconditionally
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional, Type, TypeVar
import asyncio
import json
import time

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from eventbrite_v3.api.params import to_body, to_query, validate
from eventbrite_v3.api.rate_limiter import RateLimiter
from eventbrite_v3.core.errors import (
    APIError,
    CancellationError,
    ConfigurationError,
    DecodeError,
    TransportError,
)
from eventbrite_v3.infra.config import ClientConfig
from eventbrite_v3.infra.logging import CallContext, get_logger

EXPAND = "venue,category,subcategories"

M = TypeVar("M", bound=BaseModel)


class APIClient:
    """
    Transport core for the Eventbrite API.

    One instance owns one rate limiter; every call made through it
    shares the limiter. Pass http_client to supply your own transport
    (its lifetime is then yours to manage).
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or ClientConfig()
        self._logger = get_logger("api.client")
        self._rate_limiter = RateLimiter(self.config.requests_per_second)
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            headers={"User-Agent": self.config.user_agent},
        )

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter

    @property
    def is_configured(self) -> bool:
        """Check if a token is configured."""
        return self.config.has_token

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Stop the rate limiter refill and close the transport if we created it."""
        self._rate_limiter.close()
        if self._owns_http_client:
            await self._http.aclose()

    # -- executors ---------------------------------------------------------

    async def get_json(
        self,
        path: str,
        descriptor: Any = None,
        result_type: Optional[Type[M]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        GET base_url + path with the descriptor flattened into the query.

        Returns the body decoded into result_type (raw JSON if None).
        Raises APIError on any non-200 status.
        """
        with CallContext():
            self._require_token()
            async with _deadline(timeout):
                await self._rate_limiter.acquire()
                if descriptor is not None:
                    validate(descriptor)
                query = self._auth_query(to_query(descriptor))
                response = await self._send("GET", path, query)

            if response.status_code == 200:
                return self._decode(response, result_type)
            raise self._decode_error(response, path)

    async def post_json(
        self,
        path: str,
        descriptor: Any = None,
        result_type: Optional[Type[M]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """POST the descriptor as a JSON body; the response is decoded whatever its status."""
        with CallContext():
            self._require_token()
            if descriptor is not None:
                validate(descriptor)
            async with _deadline(timeout):
                await self._rate_limiter.acquire()
                body = json.dumps(to_body(descriptor)).encode("utf-8")
                query = self._auth_query({})
                response = await self._send(
                    "POST", path, query,
                    content=body,
                    headers={"Content-Type": "application/json"},
                )
            return self._decode(response, result_type)

    async def delete_json(
        self,
        path: str,
        result_type: Optional[Type[M]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """DELETE base_url + path; the response is decoded whatever its status."""
        with CallContext():
            self._require_token()
            async with _deadline(timeout):
                await self._rate_limiter.acquire()
                query = self._auth_query({})
                response = await self._send("DELETE", path, query)
            return self._decode(response, result_type)

    # -- helpers -----------------------------------------------------------

    def _require_token(self) -> None:
        if not self.config.token:
            raise ConfigurationError("eventbrite: Token missing")

    def _auth_query(self, query: Dict[str, str]) -> Dict[str, str]:
        """Add the token and the fixed expansion directive."""
        query["token"] = self.config.token
        query["expand"] = EXPAND
        return query

    async def _send(
        self,
        method: str,
        path: str,
        query: Dict[str, str],
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        # Plain concatenation; callers own their slashes.
        url = self.config.base_url + path
        self._logger.debug(f"{method} {path}", extra={"method": method, "path": path})

        start = time.monotonic()
        try:
            response = await self._http.request(
                method, url, params=query, content=content, headers=headers
            )
        except httpx.TransportError as e:
            self._logger.debug(f"{method} {path} transport failure: {e!r}")
            raise TransportError(f"{method} {path} failed: {e}", original=e) from e

        elapsed_ms = (time.monotonic() - start) * 1000
        self._logger.debug(
            f"{method} {path} -> {response.status_code} ({elapsed_ms:.0f}ms)",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 1),
            },
        )
        return response

    def _decode(self, response: httpx.Response, result_type: Optional[Type[M]]) -> Any:
        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(
                f"Response body is not JSON (status {response.status_code})",
                body=response.content,
            ) from e

        if result_type is None:
            return payload

        try:
            return result_type.model_validate(payload)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Response does not match {result_type.__name__}: {e.error_count()} error(s)",
                body=response.content,
            ) from e

    def _decode_error(self, response: httpx.Response, path: str) -> APIError:
        # An undecodable error body gives an empty envelope, not a DecodeError.
        try:
            payload = response.json()
        except ValueError:
            payload = None

        error = APIError.from_payload(payload)
        self._logger.warning(
            f"GET {path} failed with HTTP {response.status_code}: {error.error or '<no error key>'}",
            extra={"path": path, "status_code": response.status_code, "error": error.error},
        )
        return error


@asynccontextmanager
async def _deadline(timeout: Optional[float]) -> AsyncIterator[None]:
    """Run the block under a deadline, surfacing expiry as CancellationError."""
    if timeout is None:
        yield
        return

    try:
        async with asyncio.timeout(timeout):
            yield
    except TimeoutError:
        raise CancellationError(f"Call deadline of {timeout}s exceeded") from None
