"""
Lazy cursor-based pagination.

PageIterator holds the cursor and one buffered page. A page is requested
only when the buffer is empty and another item is demanded, so at most one
request is in flight and nothing is prefetched.
"""

from __future__ import annotations

from collections import deque
from typing import Awaitable, Callable, Generic, TypeVar

from earningsfeed.exceptions import PaginationError
from earningsfeed.logging import get_logger
from earningsfeed.types import PaginatedResponse

logger = get_logger(__name__)

T = TypeVar("T")

PageFetcher = Callable[[str | None], Awaitable[PaginatedResponse[T]]]


class PageIterator(Generic[T]):
    """Async iterator over every item of a paginated listing.

    Usage:
        async for filing in client.filings.iter(ticker="AAPL"):
            ...

    Args:
        fetch_page: Coroutine function taking the cursor (None for the first
            page) and returning one page.
        path: Endpoint path, used for logging and error context.
    """

    def __init__(self, fetch_page: PageFetcher[T], path: str) -> None:
        self._fetch_page = fetch_page
        self._path = path
        self._buffer: deque[T] = deque()
        self._cursor: str | None = None
        self._has_more = True
        self.pages_fetched = 0

    def __aiter__(self) -> PageIterator[T]:
        return self

    async def __anext__(self) -> T:
        while not self._buffer:
            if not self._has_more:
                raise StopAsyncIteration
            await self._load_next_page()
        return self._buffer.popleft()

    async def _load_next_page(self) -> None:
        if self.pages_fetched > 0 and self._cursor is None:
            raise PaginationError(
                "Server reported more results without a next cursor",
                context={"path": self._path, "pages_fetched": self.pages_fetched},
            )

        page = await self._fetch_page(self._cursor)
        self.pages_fetched += 1

        self._buffer.extend(page.items)
        self._has_more = page.has_more
        self._cursor = page.next_cursor if page.has_more else None

        logger.debug(
            "Fetched page",
            path=self._path,
            page=self.pages_fetched,
            items=len(page.items),
            has_more=page.has_more,
        )

    async def to_list(self, limit: int | None = None) -> list[T]:
        """Drain the iterator into a list, stopping after `limit` items if given."""
        items: list[T] = []
        if limit is not None and limit <= 0:
            return items
        async for item in self:
            items.append(item)
            if limit is not None and len(items) >= limit:
                break
        return items
