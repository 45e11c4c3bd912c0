"""
Pytest configuration and fixtures for Earnings Feed client tests.
"""

from __future__ import annotations

import os
from typing import Any, AsyncGenerator, Generator
from unittest.mock import patch

import pytest
import respx

from earningsfeed import EarningsFeed
from earningsfeed.config import clear_settings_cache

BASE_URL = "https://api.test.com"
API_KEY = "test_api_key"


@pytest.fixture
def mock_api() -> Generator[respx.MockRouter, None, None]:
    """Mock router for the test API host.

    Requests to routes that were not registered fail the test.
    """
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
async def client(mock_api: respx.MockRouter) -> AsyncGenerator[EarningsFeed, None]:
    """Client pointed at the mocked API host."""
    client = EarningsFeed(API_KEY, base_url=BASE_URL)
    yield client
    await client.close()


@pytest.fixture
def mock_env_vars() -> Generator[dict[str, str], None, None]:
    """Provide EARNINGSFEED_* environment variables for settings tests."""
    env_vars = {
        "EARNINGSFEED_API_KEY": "ef_test_key_1234567890",
        "EARNINGSFEED_BASE_URL": "https://staging.earningsfeed.test/",
        "EARNINGSFEED_TIMEOUT_MS": "5000",
        "EARNINGSFEED_LOG_LEVEL": "DEBUG",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        clear_settings_cache()
        yield env_vars


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Automatically reset settings cache before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


def make_filing(accession: str = "0000320193-24-000123", **overrides: Any) -> dict[str, Any]:
    """Build a filing payload as the API returns it."""
    payload: dict[str, Any] = {
        "accessionNumber": accession,
        "cik": 320193,
        "companyName": "Apple Inc.",
        "formType": "10-K",
        "filedAt": "2024-01-01T00:00:00Z",
        "provisional": False,
        "sizeBytes": 12345,
        "url": "https://sec.gov/...",
        "title": "Annual Report",
        "status": "final",
        "updatedAt": "2024-01-01T00:00:00Z",
        "sortedAt": "2024-01-01T00:00:00Z",
    }
    payload.update(overrides)
    return payload


def make_page(
    items: list[dict[str, Any]],
    next_cursor: str | None = None,
    has_more: bool = False,
) -> dict[str, Any]:
    """Build a paginated response payload."""
    page: dict[str, Any] = {"items": items, "hasMore": has_more}
    if next_cursor is not None:
        page["nextCursor"] = next_cursor
    return page


@pytest.fixture
def filing_payload() -> dict[str, Any]:
    return make_filing()


@pytest.fixture
def filing_detail_payload() -> dict[str, Any]:
    return {
        "accessionNumber": "0000320193-24-000126",
        "cik": 320193,
        "formType": "10-K",
        "filedAt": "2024-01-01T00:00:00Z",
        "provisional": False,
        "title": "Annual Report",
        "url": "https://sec.gov/...",
        "sizeBytes": 12345,
        "company": {"cik": 320193, "name": "Apple Inc.", "fiscalYearEnd": "0930"},
        "documents": [
            {
                "seq": 1,
                "filename": "aapl-20231230.htm",
                "docType": "10-K",
                "isPrimary": True,
            },
        ],
        "roles": [{"cik": 320193, "role": "filer"}],
    }


@pytest.fixture
def insider_payload() -> dict[str, Any]:
    return {
        "accessionNumber": "0000001-24-000001",
        "filedAt": "2024-01-01T00:00:00Z",
        "formType": "4",
        "personCik": 12345,
        "personName": "John Doe",
        "companyCik": 320193,
        "companyName": "Apple Inc.",
        "ticker": "AAPL",
        "isDirector": True,
        "isOfficer": False,
        "isTenPercentOwner": False,
        "isOther": False,
        "securityTitle": "Common Stock",
        "isDerivative": False,
        "transactionDate": "2024-01-01",
        "transactionCode": "P",
        "equitySwapInvolved": False,
        "shares": 1000,
        "pricePerShare": 150.0,
        "acquiredDisposed": "A",
        "sharesAfter": 5000,
        "directIndirect": "D",
        "transactionValue": 150000,
    }


@pytest.fixture
def holding_payload() -> dict[str, Any]:
    return {
        "cusip": "037833100",
        "issuerName": "Apple Inc.",
        "classTitle": "COM",
        "companyCik": 320193,
        "ticker": "AAPL",
        "value": 5000000000,
        "shares": 25000000,
        "sharesType": "SH",
        "investmentDiscretion": "SOLE",
        "managerCik": 1067983,
        "managerName": "Berkshire Hathaway Inc",
        "reportPeriodDate": "2024-03-31",
        "filedAt": "2024-05-15T00:00:00Z",
        "accessionNumber": "0001067983-24-000001",
    }


@pytest.fixture
def company_payload() -> dict[str, Any]:
    return {
        "cik": 320193,
        "name": "Apple Inc.",
        "entityType": "operating",
        "tickers": [{"symbol": "AAPL", "exchange": "NASDAQ", "isPrimary": True}],
        "primaryTicker": "AAPL",
        "sicCodes": [{"code": 3571, "description": "Electronic Computers"}],
        "addresses": [
            {
                "type": "business",
                "street1": "One Apple Park Way",
                "city": "Cupertino",
                "stateOrCountry": "CA",
                "zipCode": "95014",
            },
        ],
        "hasInsiderTransactions": True,
        "isInsider": False,
        "updatedAt": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def company_search_payload() -> dict[str, Any]:
    return {
        "cik": 320193,
        "name": "Apple Inc.",
        "ticker": "AAPL",
        "exchange": "NASDAQ",
        "entityType": "operating",
        "sicCode": 3571,
        "sicDescription": "Electronic Computers",
    }
