"""List, filter, sort and pagination helpers."""

from .filters import (
    VenueFilters,
    apply_filters,
    filter_venues,
    sort_items,
    sort_venues,
    unique_cities,
    unique_districts,
    view_venues,
)
from .pagination import PageState, PaginatedList

__all__ = [
    'PageState',
    'PaginatedList',
    'VenueFilters',
    'apply_filters',
    'filter_venues',
    'sort_items',
    'sort_venues',
    'unique_cities',
    'unique_districts',
    'view_venues',
]
