"""
Institutional holdings resource (13F filings).
"""

from __future__ import annotations

from typing import ClassVar

from earningsfeed.config import API_PREFIX, DEFAULT_ITER_PAGE_SIZE
from earningsfeed.pagination import PageIterator
from earningsfeed.resources.base import BaseResource
from earningsfeed.types import InstitutionalHolding, InstitutionalHoldingsResponse

INSTITUTIONAL_HOLDINGS_PATH = f"{API_PREFIX}/institutional/holdings"


class InstitutionalResource(BaseResource):
    """Institutional holdings: `client.institutional`."""

    name = "institutional"
    WIRE_NAMES: ClassVar[dict[str, str]] = {
        "limit": "limit",
        "cursor": "cursor",
        "cik": "companyCik",
        "ticker": "ticker",
        "cusip": "cusip",
        "manager_cik": "managerCik",
        "report_period": "reportPeriod",
        "put_call": "putCall",
        "min_value": "minValue",
    }

    async def list(
        self,
        *,
        cik: int | None = None,
        ticker: str | None = None,
        cusip: str | None = None,
        manager_cik: int | None = None,
        report_period: str | None = None,
        put_call: str | None = None,
        min_value: float | None = None,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> InstitutionalHoldingsResponse:
        """List institutional holdings reported on 13F filings.

        Args:
            cik: Filter by the held company's CIK.
            ticker: Filter by ticker symbol.
            cusip: Filter by CUSIP.
            manager_cik: Filter by the reporting manager's CIK.
            report_period: Quarter end date (YYYY-MM-DD).
            put_call: "put", "call" or "equity".
            min_value: Minimum position value in USD.
            limit: Results per page (1-100, default 25).
            cursor: Cursor from a previous page.
        """
        return await self._list_page(
            INSTITUTIONAL_HOLDINGS_PATH,
            {
                "limit": limit,
                "cursor": cursor,
                "cik": cik,
                "ticker": ticker,
                "cusip": cusip,
                "manager_cik": manager_cik,
                "report_period": report_period,
                "put_call": put_call,
                "min_value": min_value,
            },
            InstitutionalHolding.from_dict,
        )

    def iter(
        self,
        *,
        cik: int | None = None,
        ticker: str | None = None,
        cusip: str | None = None,
        manager_cik: int | None = None,
        report_period: str | None = None,
        put_call: str | None = None,
        min_value: float | None = None,
        limit: int | None = None,
    ) -> PageIterator[InstitutionalHolding]:
        """Iterate through every holding matching the filters.

        Example:
            >>> async for h in client.institutional.iter(manager_cik=1067983):
            ...     print(h.issuer_name, h.shares)
        """
        page_size = limit if limit is not None else DEFAULT_ITER_PAGE_SIZE
        return self._paginate(
            lambda cursor: self.list(
                cik=cik,
                ticker=ticker,
                cusip=cusip,
                manager_cik=manager_cik,
                report_period=report_period,
                put_call=put_call,
                min_value=min_value,
                limit=page_size,
                cursor=cursor,
            ),
            INSTITUTIONAL_HOLDINGS_PATH,
        )
