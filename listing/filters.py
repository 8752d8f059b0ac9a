"""Pure client-side filtering and sorting of fetched collections."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from api.models import PlayerSearchListing, Reservation, Venue
from infrastructure.constants import RESERVATION_PERIODS, VENUE_SORT_KEYS

T = TypeVar('T')
Predicate = Callable[[T], bool]


def apply_filters(items: Iterable[T], predicates: Iterable[Optional[Predicate]]) -> List[T]:
    """
    Keep the items matching every active predicate.

    ``None`` entries stand for unset filters and match everything, so
    applying the same predicates to the output returns it unchanged.
    """
    active = [predicate for predicate in predicates if predicate is not None]
    return [item for item in items if all(predicate(item) for predicate in active)]


def sort_items(items: Iterable[T], key: Callable[[T], Any], *, descending: bool = False) -> List[T]:
    """Stable sort; items with a missing (``None``) key always go last."""
    present: List[T] = []
    missing: List[T] = []
    for item in items:
        (missing if key(item) is None else present).append(item)
    return sorted(present, key=key, reverse=descending) + missing


def contains_text(term: Optional[str], *getters: Callable[[T], Optional[str]]) -> Optional[Predicate]:
    """Case-insensitive substring match over any of the given attributes."""
    needle = (term or '').strip().casefold()
    if not needle:
        return None

    def predicate(item: T) -> bool:
        return any(needle in (getter(item) or '').casefold() for getter in getters)

    return predicate


def equals(value: Optional[str], getter: Callable[[T], Optional[str]]) -> Optional[Predicate]:
    if value in (None, ''):
        return None
    return lambda item: getter(item) == value


# ----------------------------------------------------------------------
# Venues
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class VenueFilters:
    """Active venue list filters; empty values mean "any"."""

    search: str = ''
    city: str = ''
    district: str = ''
    sort_by: str = 'name'

    def with_changes(self, **changes: Any) -> 'VenueFilters':
        values = {
            'search': self.search,
            'city': self.city,
            'district': self.district,
            'sort_by': self.sort_by,
        }
        values.update(changes)
        # A district only makes sense inside the chosen city
        if 'city' in changes and changes['city'] != self.city and 'district' not in changes:
            values['district'] = ''
        return VenueFilters(**values)


def filter_venues(venues: Sequence[Venue], filters: VenueFilters) -> List[Venue]:
    return apply_filters(
        venues,
        [
            contains_text(filters.search, lambda v: v.name, lambda v: v.district, lambda v: v.city),
            equals(filters.city, lambda v: v.city),
            equals(filters.district, lambda v: v.district),
        ],
    )


def sort_venues(venues: Sequence[Venue], sort_by: str = 'name') -> List[Venue]:
    """Order venues by ``name``, ``price-low``, ``price-high`` or ``rating``."""
    if sort_by not in VENUE_SORT_KEYS:
        raise ValueError(f"Unknown venue sort key: {sort_by}")

    if sort_by == 'price-low':
        return sort_items(venues, lambda v: v.price_per_hour)
    if sort_by == 'price-high':
        return sort_items(venues, lambda v: v.price_per_hour, descending=True)
    if sort_by == 'rating':
        return sort_items(venues, lambda v: v.average_rating, descending=True)
    return sort_items(venues, lambda v: v.name.casefold())


def view_venues(venues: Sequence[Venue], filters: VenueFilters) -> List[Venue]:
    return sort_venues(filter_venues(venues, filters), filters.sort_by)


def unique_cities(venues: Iterable[Venue]) -> List[str]:
    return sorted({venue.city for venue in venues if venue.city}, key=str.casefold)


def unique_districts(venues: Iterable[Venue], city: Optional[str] = None) -> List[str]:
    return sorted(
        {venue.district for venue in venues if venue.district and (not city or venue.city == city)},
        key=str.casefold,
    )


# ----------------------------------------------------------------------
# Reservations
# ----------------------------------------------------------------------
def reservation_end(reservation: Reservation) -> Optional[datetime]:
    """Naive local end of a reservation; ``None`` when its date or times are unreadable."""
    try:
        start = datetime.strptime(f"{reservation.date} {reservation.start_time or '00:00'}", "%Y-%m-%d %H:%M")
        end = datetime.strptime(f"{reservation.date} {reservation.end_time}", "%Y-%m-%d %H:%M")
    except ValueError:
        return None
    # A booking running to midnight ends on the next day
    if end <= start:
        end += timedelta(days=1)
    return end


def is_past_reservation(reservation: Reservation, now: datetime) -> bool:
    end = reservation_end(reservation)
    return end is not None and end < now


def filter_reservations(reservations: Sequence[Reservation], period: str, now: datetime) -> List[Reservation]:
    """Keep ``upcoming`` or ``past`` reservations relative to ``now``; ``all`` keeps everything."""
    if period not in RESERVATION_PERIODS:
        raise ValueError(f"Unknown reservation period: {period}")
    if period == 'upcoming':
        return apply_filters(reservations, [lambda r: not is_past_reservation(r, now)])
    if period == 'past':
        return apply_filters(reservations, [lambda r: is_past_reservation(r, now)])
    return list(reservations)


def count_periods(reservations: Sequence[Reservation], now: datetime) -> Dict[str, int]:
    past = sum(1 for reservation in reservations if is_past_reservation(reservation, now))
    return {'all': len(reservations), 'upcoming': len(reservations) - past, 'past': past}


# ----------------------------------------------------------------------
# Players wanted
# ----------------------------------------------------------------------
def unique_listing_cities(listings: Iterable[PlayerSearchListing]) -> List[str]:
    return sorted({listing.city for listing in listings if listing.city}, key=str.casefold)


def unique_listing_districts(listings: Iterable[PlayerSearchListing], city: Optional[str] = None) -> List[str]:
    return sorted(
        {listing.district for listing in listings if listing.district and (not city or listing.city == city)},
        key=str.casefold,
    )


__all__ = [
    'VenueFilters',
    'apply_filters',
    'contains_text',
    'count_periods',
    'equals',
    'filter_reservations',
    'filter_venues',
    'is_past_reservation',
    'reservation_end',
    'sort_items',
    'sort_venues',
    'unique_cities',
    'unique_districts',
    'unique_listing_cities',
    'unique_listing_districts',
    'view_venues',
]
