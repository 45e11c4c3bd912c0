"""
Exception hierarchy for the Earnings Feed API client.

All exceptions inherit from EarningsFeedError, which provides optional context
for structured error handling and logging. Each error also carries a `kind`
tag so callers can dispatch on the failure class without isinstance checks:

    try:
        await client.filings.list(ticker="AAPL")
    except EarningsFeedError as e:
        match e.kind:
            case ErrorKind.RATE_LIMIT:
                ...
            case ErrorKind.AUTHENTICATION:
                ...

Transport failures raised by httpx (connection reset, DNS errors) are not
part of this hierarchy and propagate unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Tag identifying which taxonomy entry an error belongs to."""

    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    API = "api"
    PAGINATION = "pagination"


class EarningsFeedError(Exception):
    """Base exception for all Earnings Feed client errors.

    Attributes:
        message: Human-readable error message.
        context: Optional structured context for logging/debugging.
        kind: Taxonomy tag for this error.
    """

    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ConfigurationError(EarningsFeedError):
    """Raised when the client is constructed with invalid configuration.

    Examples:
        - Missing API key
        - Non-positive timeout
    """

    kind = ErrorKind.CONFIGURATION


class AuthenticationError(EarningsFeedError):
    """Raised on HTTP 401: the API key is missing or invalid."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(
        self,
        message: str = "Invalid or missing API key",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)


class NotFoundError(EarningsFeedError):
    """Raised on HTTP 404. The message names the requested path."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str = "Resource not found",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)


class RateLimitError(EarningsFeedError):
    """Raised on HTTP 429.

    Attributes:
        reset_at: Unix timestamp (seconds) when the limit resets, taken from
            the X-RateLimit-Reset header. None if the header was absent or
            not an integer.
    """

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        reset_at: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)
        self.reset_at = reset_at


class ValidationError(EarningsFeedError):
    """Raised on HTTP 400 with the server-supplied message."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str = "Invalid request",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)


class APIError(EarningsFeedError):
    """Raised for any other error response, and for request timeouts (408).

    Attributes:
        status_code: HTTP status code.
        code: Machine-readable error code from the response body, if any.
    """

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)
        self.status_code = status_code
        self.code = code

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.message!r}, "
            f"status_code={self.status_code!r}, code={self.code!r})"
        )


class PaginationError(EarningsFeedError):
    """Raised when a page reports more results but supplies no cursor.

    Context includes:
        - path: The endpoint being paginated
        - pages_fetched: Requests made before the inconsistency was detected
    """

    kind = ErrorKind.PAGINATION
