"""
Earnings Feed API client.

EarningsFeed owns the configuration (API key, base URL, timeout) and the
single request path used by every resource namespace. All HTTP error
classification happens here; resources and iterators never catch or
reinterpret errors.
"""

from __future__ import annotations

import asyncio
import time
from types import TracebackType
from typing import Any
from urllib.parse import urljoin

import httpx
import orjson

from earningsfeed.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, Settings, get_settings
from earningsfeed.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from earningsfeed.logging import generate_request_id, get_logger, log_context
from earningsfeed.resources import (
    CompaniesResource,
    FilingsResource,
    InsiderResource,
    InstitutionalResource,
)
from earningsfeed.version import USER_AGENT

logger = get_logger(__name__)

RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"


def format_query_value(value: Any) -> str:
    """Stringify a query parameter value.

    Booleans use the JSON spelling (true/false); everything else is str().
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: dict[str, Any] | None) -> dict[str, str]:
    """Drop absent (None) values and stringify the rest."""
    if not params:
        return {}
    return {key: format_query_value(value) for key, value in params.items() if value is not None}


def parse_reset_header(value: str | None) -> int | None:
    """Parse X-RateLimit-Reset as integer epoch seconds, or None."""
    if value is None:
        return None
    value = value.strip()
    # Plain ASCII digits only; int() would also take "1_000" and "+5"
    if not (value.isascii() and value.isdecimal()):
        return None
    return int(value)


def _error_body(response: httpx.Response) -> dict[str, Any] | None:
    """Decode an error response body, or None if it is not a JSON object."""
    try:
        data = orjson.loads(response.content)
    except orjson.JSONDecodeError:
        logger.debug("Error response body is not JSON", status_code=response.status_code)
        return None
    return data if isinstance(data, dict) else None


def _str_field(body: dict[str, Any] | None, key: str) -> str | None:
    """Return body[key] if it is a string, else None."""
    value = body.get(key) if body else None
    return value if isinstance(value, str) else None


def raise_for_status(response: httpx.Response, path: str) -> None:
    """Raise the typed error for a failed response.

    Precedence: 401, 404, 429, 400, then any other status >= 400.

    Raises:
        AuthenticationError: On 401.
        NotFoundError: On 404; the message names `path`.
        RateLimitError: On 429, with reset_at from X-RateLimit-Reset.
        ValidationError: On 400, with the body's `error` message.
        APIError: On any other status >= 400.
    """
    status = response.status_code
    if status < 400:
        return

    context = {"path": path, "status_code": status}
    if status != 429 and status < 500:
        logger.debug("Request failed", path=path, status_code=status)

    if status == 401:
        raise AuthenticationError(context=context)

    if status == 404:
        raise NotFoundError(f"Resource not found: {path}", context=context)

    if status == 429:
        reset_at = parse_reset_header(response.headers.get(RATE_LIMIT_RESET_HEADER))
        logger.warning("Rate limit exceeded", path=path, reset_at=reset_at)
        raise RateLimitError("Rate limit exceeded", reset_at=reset_at, context=context)

    body = _error_body(response)
    message = _str_field(body, "error")

    if status == 400:
        raise ValidationError(message or "Invalid request", context=context)

    if body is None:
        raise APIError(f"HTTP {status}", status_code=status, context=context)

    code = _str_field(body, "code")
    if status >= 500:
        logger.warning("Server error", path=path, status_code=status, code=code)
    raise APIError(message or "Unknown error", status_code=status, code=code, context=context)


class EarningsFeed:
    """Client for the Earnings Feed API.

    Exposes four resource namespaces: `filings`, `insider`, `institutional`
    and `companies`. Configuration is fixed at construction, so one client
    can be shared by concurrent tasks.

    Example:
        >>> async with EarningsFeed("your_api_key") as client:
        ...     page = await client.filings.list(ticker="AAPL", limit=10)
        ...     for filing in page.items:
        ...         print(f"{filing.form_type}: {filing.title}")
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout: int | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Earnings Feed API key, sent as a bearer token.
            base_url: API base URL (default: https://earningsfeed.com).
            timeout: Per-request timeout in milliseconds (default: 30000).
            http_client: Optional httpx.AsyncClient to send requests with.
                It is not closed by close().

        Raises:
            ConfigurationError: If api_key is empty or timeout is not positive.
        """
        if not api_key:
            raise ConfigurationError("An API key is required")

        timeout = DEFAULT_TIMEOUT_MS if timeout is None else timeout
        if timeout <= 0:
            raise ConfigurationError(
                "Timeout must be a positive number of milliseconds",
                context={"timeout": timeout},
            )

        self._api_key = api_key
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._timeout = timeout

        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout / 1000),
            follow_redirects=True,
        )

        self.filings = FilingsResource(self)
        self.insider = InsiderResource(self)
        self.institutional = InstitutionalResource(self)
        self.companies = CompaniesResource(self)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> EarningsFeed:
        """Create a client from EARNINGSFEED_* environment settings.

        Raises:
            ConfigurationError: If EARNINGSFEED_API_KEY is not set.
        """
        settings = settings or get_settings()
        if not settings.api_key:
            raise ConfigurationError("EARNINGSFEED_API_KEY not configured")
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout_ms,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> int:
        """Per-request timeout in milliseconds."""
        return self._timeout

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self._base_url!r}, timeout={self._timeout!r})"

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> EarningsFeed:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }

    async def _request(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send a GET request and return the decoded JSON body.

        Args:
            path: Absolute API path, e.g. "/api/v1/filings".
            params: Query parameters; None values are omitted.

        Returns:
            The decoded JSON payload, untouched.

        Raises:
            EarningsFeedError: A typed error for any status >= 400; APIError
                with status 408 when the request exceeds the timeout.
            httpx.TransportError: Network failures other than timeouts.
        """
        url = urljoin(self._base_url, path)
        query = build_query(params)

        with log_context(request_id=generate_request_id()):
            logger.debug("Sending request", path=path, params=query)
            started = time.perf_counter()

            try:
                async with asyncio.timeout(self._timeout / 1000):
                    response = await self._http_client.get(
                        url, params=query, headers=self._headers()
                    )
            except (TimeoutError, httpx.TimeoutException) as e:
                logger.warning("Request timed out", path=path, timeout_ms=self._timeout)
                raise APIError(
                    "Request timeout",
                    status_code=408,
                    context={"path": path, "timeout_ms": self._timeout},
                ) from e

            logger.debug(
                "Request completed",
                path=path,
                status_code=response.status_code,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
            )

            raise_for_status(response, path)

            try:
                return orjson.loads(response.content)
            except orjson.JSONDecodeError as e:
                raise APIError(
                    "Invalid JSON response",
                    status_code=response.status_code,
                    code="INVALID_JSON",
                    context={"path": path},
                ) from e
