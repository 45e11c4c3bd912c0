"""
Shared machinery for resource namespaces.

A resource maps its keyword arguments onto the wire parameter names of one
endpoint, delegates the request to the client and wraps the JSON payload in
typed records. Errors raised by the client pass through untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Callable, ClassVar, TypeVar

from earningsfeed.config import DEFAULT_PAGE_SIZE
from earningsfeed.logging import log_context
from earningsfeed.pagination import PageFetcher, PageIterator
from earningsfeed.types import PaginatedResponse

if TYPE_CHECKING:
    from earningsfeed.client import EarningsFeed

T = TypeVar("T")


def join_csv(value: str | Iterable[str] | None) -> str | None:
    """Serialize a list filter as a comma-joined string.

    Strings pass through unchanged; None stays None.
    """
    if value is None or isinstance(value, str):
        return value
    return ",".join(value)


class BaseResource:
    """Base class for the filings, insider, institutional and companies namespaces.

    Subclasses declare:
        name: Resource name used in log context.
        WIRE_NAMES: keyword argument name -> query parameter name.
        CSV_PARAMS: keyword arguments serialized with join_csv().
    """

    name: ClassVar[str] = "resource"
    WIRE_NAMES: ClassVar[dict[str, str]] = {}
    CSV_PARAMS: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, client: EarningsFeed) -> None:
        self._client = client

    def _build_params(self, values: dict[str, Any]) -> dict[str, Any]:
        """Rename keyword arguments to wire names and serialize list filters.

        Unknown keys are an internal error: every argument a resource accepts
        must be in its WIRE_NAMES table.
        """
        params: dict[str, Any] = {}
        for key, value in values.items():
            if key in self.CSV_PARAMS:
                value = join_csv(value)
            params[self.WIRE_NAMES[key]] = value
        return params

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        with log_context(resource=self.name):
            return await self._client._request(path, params)

    async def _list_page(
        self,
        path: str,
        values: dict[str, Any],
        item_factory: Callable[[dict[str, Any]], T],
    ) -> PaginatedResponse[T]:
        if values.get("limit") is None:
            values = {**values, "limit": DEFAULT_PAGE_SIZE}
        data = await self._get(path, self._build_params(values))
        return PaginatedResponse.from_dict(data, item_factory)

    def _paginate(self, fetch_page: PageFetcher[T], path: str) -> PageIterator[T]:
        return PageIterator(fetch_page, path)
