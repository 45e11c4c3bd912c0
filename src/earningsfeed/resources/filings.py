"""
SEC filings resource.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from earningsfeed.config import API_PREFIX, DEFAULT_ITER_PAGE_SIZE
from earningsfeed.pagination import PageIterator
from earningsfeed.resources.base import BaseResource
from earningsfeed.types import Filing, FilingDetail, FilingsResponse

FILINGS_PATH = f"{API_PREFIX}/filings"


class FilingsResource(BaseResource):
    """SEC filings: `client.filings`."""

    name = "filings"
    WIRE_NAMES: ClassVar[dict[str, str]] = {
        "limit": "limit",
        "cursor": "cursor",
        "forms": "forms",
        "cik": "cik",
        "ticker": "ticker",
        "status": "status",
        "start_date": "startDate",
        "end_date": "endDate",
        "q": "q",
    }
    CSV_PARAMS: ClassVar[frozenset[str]] = frozenset({"forms"})

    async def list(
        self,
        *,
        forms: str | Iterable[str] | None = None,
        ticker: str | None = None,
        cik: int | None = None,
        status: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        q: str | None = None,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> FilingsResponse:
        """List SEC filings.

        Args:
            forms: Form types, e.g. ["10-K", "10-Q"] or "10-K,10-Q".
            ticker: Filter by ticker symbol.
            cik: Filter by filer CIK.
            status: "all" (default), "provisional" or "final".
            start_date: Start date (YYYY-MM-DD).
            end_date: End date (YYYY-MM-DD).
            q: Full-text search query.
            limit: Results per page (1-100, default 25).
            cursor: Cursor from a previous page.

        Returns:
            One page of filings.

        Example:
            >>> page = await client.filings.list(ticker="AAPL", forms=["10-K", "10-Q"])
            >>> for filing in page.items:
            ...     print(filing.form_type, filing.title)
        """
        return await self._list_page(
            FILINGS_PATH,
            {
                "limit": limit,
                "cursor": cursor,
                "forms": forms,
                "cik": cik,
                "ticker": ticker,
                "status": status if status is not None else "all",
                "start_date": start_date,
                "end_date": end_date,
                "q": q,
            },
            Filing.from_dict,
        )

    def iter(
        self,
        *,
        forms: str | Iterable[str] | None = None,
        ticker: str | None = None,
        cik: int | None = None,
        status: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        q: str | None = None,
        limit: int | None = None,
    ) -> PageIterator[Filing]:
        """Iterate through every filing matching the filters.

        Pages are fetched lazily, `limit` items at a time (default 100).

        Example:
            >>> async for filing in client.filings.iter(ticker="AAPL"):
            ...     print(filing.title)
        """
        page_size = limit if limit is not None else DEFAULT_ITER_PAGE_SIZE
        return self._paginate(
            lambda cursor: self.list(
                forms=forms,
                ticker=ticker,
                cik=cik,
                status=status,
                start_date=start_date,
                end_date=end_date,
                q=q,
                limit=page_size,
                cursor=cursor,
            ),
            FILINGS_PATH,
        )

    async def get(self, accession: str) -> FilingDetail:
        """Get a filing with its documents and entity roles.

        Args:
            accession: SEC accession number, with or without dashes.

        Raises:
            NotFoundError: If no filing has this accession number.
        """
        data = await self._get(f"{FILINGS_PATH}/{accession}")
        return FilingDetail.from_dict(data)
