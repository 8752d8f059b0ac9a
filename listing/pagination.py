"""Server-side pagination controller shared by the admin lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from api.errors import ApiError, UnauthorizedError
from api.models import Page
from infrastructure.constants import DEFAULT_PAGE_LIMIT

PageFetcher = Callable[[int, int, Dict[str, Any]], Awaitable[Page]]


@dataclass
class PageState:
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT
    total: int = 0
    total_pages: int = 1

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class PaginatedList:
    """
    Holds one page of a server-paginated collection.

    The list never pages locally: page changes, filter changes and
    mutations all refetch from the server. Each fetch is tagged with a
    generation and responses from superseded fetches are discarded.
    """

    def __init__(
        self,
        fetch_page: PageFetcher,
        *,
        limit: int = DEFAULT_PAGE_LIMIT,
        filters: Optional[Dict[str, Any]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._fetch_page = fetch_page
        self.state = PageState(limit=limit)
        self.filters: Dict[str, Any] = dict(filters or {})
        self.items: List[Any] = []
        self.error: Optional[str] = None
        self.loading = False
        self.logger = logger or logging.getLogger('PaginatedList')
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def refresh(self) -> bool:
        """Fetch the current page. Returns False when the response was dropped or failed."""
        self._generation += 1
        generation = self._generation
        self.loading = True
        page, limit = self.state.page, self.state.limit

        try:
            result = await self._fetch_page(page, limit, dict(self.filters))
        except UnauthorizedError:
            if generation == self._generation:
                self.loading = False
            raise
        except ApiError as exc:
            if generation != self._generation:
                return False
            self.loading = False
            self.error = exc.message
            self.items = []
            self.logger.error("Page %s fetch failed: %s", page, exc.message)
            return False

        if generation != self._generation:
            self.logger.debug("Dropping stale page %s (gen %s, current %s)", page, generation, self._generation)
            return False

        self.loading = False
        self.error = None
        self.items = list(result.items)
        self.state = PageState(
            page=result.pagination.page,
            limit=result.pagination.limit,
            total=result.pagination.total,
            total_pages=max(1, result.pagination.total_pages),
        )
        return True

    async def go_to(self, page: int) -> bool:
        target = max(1, min(page, self.state.total_pages))
        self.state.page = target
        return await self.refresh()

    async def next_page(self) -> bool:
        if not self.state.has_next:
            return False
        return await self.go_to(self.state.page + 1)

    async def previous_page(self) -> bool:
        if not self.state.has_previous:
            return False
        return await self.go_to(self.state.page - 1)

    async def set_filters(self, **changes: Any) -> bool:
        """Apply filter changes, reset to page 1 and refetch."""
        for key, value in changes.items():
            if value in (None, ''):
                self.filters.pop(key, None)
            else:
                self.filters[key] = value
        self.state.page = 1
        return await self.refresh()

    async def mutate(self, action: Callable[[], Awaitable[Any]]) -> Any:
        """Run a mutating call, then refetch the current page."""
        outcome = await action()
        await self.refresh()
        if not self.items and self.state.page > self.state.total_pages:
            await self.go_to(self.state.total_pages)
        return outcome


__all__ = ['PageFetcher', 'PageState', 'PaginatedList']
