"""
Insider transactions resource (Forms 3, 4 and 5).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from earningsfeed.config import API_PREFIX, DEFAULT_ITER_PAGE_SIZE
from earningsfeed.pagination import PageIterator
from earningsfeed.resources.base import BaseResource
from earningsfeed.types import InsiderTransaction, InsiderTransactionsResponse

INSIDER_TRANSACTIONS_PATH = f"{API_PREFIX}/insider/transactions"


class InsiderResource(BaseResource):
    """Insider transactions: `client.insider`."""

    name = "insider"
    WIRE_NAMES: ClassVar[dict[str, str]] = {
        "limit": "limit",
        "cursor": "cursor",
        "cik": "cik",
        "ticker": "ticker",
        "person_cik": "insiderCik",
        "direction": "direction",
        "codes": "codes",
        "derivative": "derivative",
        "min_value": "minValue",
        "start_date": "startDate",
        "end_date": "endDate",
    }
    CSV_PARAMS: ClassVar[frozenset[str]] = frozenset({"codes"})

    async def list(
        self,
        *,
        ticker: str | None = None,
        cik: int | None = None,
        person_cik: int | None = None,
        direction: str | None = None,
        codes: str | Iterable[str] | None = None,
        derivative: bool | None = None,
        min_value: float | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> InsiderTransactionsResponse:
        """List insider transactions.

        Args:
            ticker: Filter by company ticker.
            cik: Filter by company CIK.
            person_cik: Filter by the insider's CIK.
            direction: "buy" or "sell".
            codes: Transaction codes, e.g. ["P", "S"].
            derivative: Only derivative (True) or non-derivative (False) rows.
            min_value: Minimum transaction value in USD.
            start_date: Start date (YYYY-MM-DD).
            end_date: End date (YYYY-MM-DD).
            limit: Results per page (1-100, default 25).
            cursor: Cursor from a previous page.
        """
        return await self._list_page(
            INSIDER_TRANSACTIONS_PATH,
            {
                "limit": limit,
                "cursor": cursor,
                "cik": cik,
                "ticker": ticker,
                "person_cik": person_cik,
                "direction": direction,
                "codes": codes,
                "derivative": derivative,
                "min_value": min_value,
                "start_date": start_date,
                "end_date": end_date,
            },
            InsiderTransaction.from_dict,
        )

    def iter(
        self,
        *,
        ticker: str | None = None,
        cik: int | None = None,
        person_cik: int | None = None,
        direction: str | None = None,
        codes: str | Iterable[str] | None = None,
        derivative: bool | None = None,
        min_value: float | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        limit: int | None = None,
    ) -> PageIterator[InsiderTransaction]:
        """Iterate through every insider transaction matching the filters.

        Example:
            >>> async for txn in client.insider.iter(direction="sell", min_value=1_000_000):
            ...     print(txn.company_name, txn.transaction_value)
        """
        page_size = limit if limit is not None else DEFAULT_ITER_PAGE_SIZE
        return self._paginate(
            lambda cursor: self.list(
                ticker=ticker,
                cik=cik,
                person_cik=person_cik,
                direction=direction,
                codes=codes,
                derivative=derivative,
                min_value=min_value,
                start_date=start_date,
                end_date=end_date,
                limit=page_size,
                cursor=cursor,
            ),
            INSIDER_TRANSACTIONS_PATH,
        )
