"""
Companies resource.
"""

from __future__ import annotations

from typing import ClassVar

from earningsfeed.config import API_PREFIX, DEFAULT_ITER_PAGE_SIZE
from earningsfeed.pagination import PageIterator
from earningsfeed.resources.base import BaseResource
from earningsfeed.types import Company, CompanySearchResponse, CompanySearchResult

COMPANIES_PATH = f"{API_PREFIX}/companies"
COMPANY_SEARCH_PATH = f"{COMPANIES_PATH}/search"


class CompaniesResource(BaseResource):
    """Company profiles and search: `client.companies`."""

    name = "companies"
    WIRE_NAMES: ClassVar[dict[str, str]] = {
        "q": "q",
        "ticker": "ticker",
        "sic_code": "sicCode",
        "state": "state",
        "limit": "limit",
        "cursor": "cursor",
    }

    async def get(self, cik: int) -> Company:
        """Get a company profile by CIK.

        Args:
            cik: SEC Central Index Key.

        Returns:
            Company profile with tickers, SIC codes and addresses.

        Example:
            >>> apple = await client.companies.get(320193)
            >>> apple.primary_ticker
            'AAPL'
        """
        data = await self._get(f"{COMPANIES_PATH}/{cik}")
        return Company.from_dict(data)

    async def search(
        self,
        *,
        q: str | None = None,
        ticker: str | None = None,
        sic_code: int | None = None,
        state: str | None = None,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> CompanySearchResponse:
        """Search for companies.

        Args:
            q: Free-text query on the company name.
            ticker: Filter by ticker.
            sic_code: Filter by SIC code.
            state: Filter by state code.
            limit: Results per page (1-100, default 25).
            cursor: Cursor from a previous page.
        """
        return await self._list_page(
            COMPANY_SEARCH_PATH,
            {
                "q": q,
                "ticker": ticker,
                "sic_code": sic_code,
                "state": state,
                "limit": limit,
                "cursor": cursor,
            },
            CompanySearchResult.from_dict,
        )

    def iter_search(
        self,
        *,
        q: str | None = None,
        ticker: str | None = None,
        sic_code: int | None = None,
        state: str | None = None,
        limit: int | None = None,
    ) -> PageIterator[CompanySearchResult]:
        """Iterate through every company matching the search."""
        page_size = limit if limit is not None else DEFAULT_ITER_PAGE_SIZE
        return self._paginate(
            lambda cursor: self.search(
                q=q,
                ticker=ticker,
                sic_code=sic_code,
                state=state,
                limit=page_size,
                cursor=cursor,
            ),
            COMPANY_SEARCH_PATH,
        )
