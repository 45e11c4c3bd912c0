"""
Earnings Feed Python SDK.

Async client for the Earnings Feed API: SEC filings, insider transactions,
institutional holdings and company profiles.

Example:
    >>> from earningsfeed import EarningsFeed
    >>> async with EarningsFeed("your_api_key") as client:
    ...     filings = await client.filings.list(ticker="AAPL", limit=10)
    ...     transactions = await client.insider.list(direction="buy")
    ...     holdings = await client.institutional.list(min_value=1_000_000_000)
    ...     company = await client.companies.get(320193)
"""

from earningsfeed.client import EarningsFeed
from earningsfeed.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    EarningsFeedError,
    ErrorKind,
    NotFoundError,
    PaginationError,
    RateLimitError,
    ValidationError,
)
from earningsfeed.pagination import PageIterator
from earningsfeed.types import (
    Address,
    Company,
    CompanySearchResponse,
    CompanySearchResult,
    Filing,
    FilingCompany,
    FilingDetail,
    FilingDocument,
    FilingRole,
    FilingsResponse,
    InsiderTransaction,
    InsiderTransactionsResponse,
    InstitutionalHolding,
    InstitutionalHoldingsResponse,
    PaginatedResponse,
    SicCode,
    Ticker,
)
from earningsfeed.version import __version__

__all__ = [
    # Client
    "EarningsFeed",
    "PageIterator",
    "__version__",
    # Errors
    "APIError",
    "AuthenticationError",
    "ConfigurationError",
    "EarningsFeedError",
    "ErrorKind",
    "NotFoundError",
    "PaginationError",
    "RateLimitError",
    "ValidationError",
    # Types
    "Address",
    "Company",
    "CompanySearchResponse",
    "CompanySearchResult",
    "Filing",
    "FilingCompany",
    "FilingDetail",
    "FilingDocument",
    "FilingRole",
    "FilingsResponse",
    "InsiderTransaction",
    "InsiderTransactionsResponse",
    "InstitutionalHolding",
    "InstitutionalHoldingsResponse",
    "PaginatedResponse",
    "SicCode",
    "Ticker",
]
