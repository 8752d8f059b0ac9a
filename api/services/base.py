"""Shared plumbing for the backend service wrappers."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional, TypeVar

from api.client import ApiClient
from api.models import Page, Pagination

T = TypeVar('T')


class BaseService:
    """Holds the shared :class:`ApiClient` and a component logger."""

    logger_name = 'ApiClient'

    def __init__(self, client: ApiClient, *, logger: Optional[logging.Logger] = None) -> None:
        self.client = client
        self.logger = logger or logging.getLogger(self.logger_name)


def parse_list(payload: Any, factory: Callable[[Mapping[str, Any]], T], key: Optional[str] = None) -> List[T]:
    """Build model objects from a list payload, optionally nested under ``key``."""
    items = payload
    if key and isinstance(payload, Mapping):
        items = payload.get(key)
    if not isinstance(items, list):
        return []
    return [factory(item) for item in items if isinstance(item, Mapping)]


def parse_page(
    payload: Any,
    factory: Callable[[Mapping[str, Any]], T],
    key: str,
    *,
    page: int,
    limit: int,
) -> Page:
    pagination = payload.get('pagination') if isinstance(payload, Mapping) else None
    return Page(
        items=parse_list(payload, factory, key),
        pagination=Pagination.from_api(pagination, page=page, limit=limit),
    )


__all__ = ['BaseService', 'parse_list', 'parse_page']
