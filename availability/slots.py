"""Derivation of bookable slots from booked intervals."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from api.models import BookedSlot
from availability.time_utils import MINUTES_PER_DAY, format_minutes, to_minutes

logger = logging.getLogger('SlotDerivation')


@dataclass(frozen=True)
class OperatingWindow:
    """Daily opening hours; ``close`` may be ``24:00``."""

    open: str = "08:00"
    close: str = "24:00"

    def bounds(self) -> Tuple[int, int]:
        start, end = to_minutes(self.open), to_minutes(self.close)
        if end <= start:
            raise ValueError(f"Window close {self.close} must be after open {self.open}")
        return start, end


@dataclass(frozen=True)
class SlotCandidate:
    """One candidate start time in the grid."""

    start: str
    end: str
    available: bool

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start)


def overlaps(start: int, end: int, other_start: int, other_end: int) -> bool:
    """Half-open interval overlap: touching endpoints do not conflict."""
    return start < other_end and end > other_start


def _booked_interval(slot: BookedSlot) -> Optional[Tuple[int, int]]:
    try:
        start = to_minutes(slot.start_time)
        end = to_minutes(slot.end_time)
    except ValueError:
        logger.warning("Ignoring booked slot with unreadable times: %r-%r", slot.start_time, slot.end_time)
        return None
    # A booking running to midnight may come back as 00:00
    if end <= start:
        end += MINUTES_PER_DAY
    return start, end


def derive_slots(
    booked: Iterable[BookedSlot],
    window: OperatingWindow,
    granularity_minutes: int,
) -> List[SlotCandidate]:
    """
    Build the ordered slot grid for one field and date.

    Every start from window open stepping by ``granularity_minutes`` whose
    slot ends by window close is returned, tagged available when it overlaps
    none of the booked intervals.
    """
    if granularity_minutes <= 0:
        raise ValueError("Slot granularity must be positive")

    open_minutes, close_minutes = window.bounds()
    intervals = [interval for interval in map(_booked_interval, booked) if interval is not None]

    candidates: List[SlotCandidate] = []
    start = open_minutes
    while start + granularity_minutes <= close_minutes:
        end = start + granularity_minutes
        taken = any(overlaps(start, end, b_start, b_end) for b_start, b_end in intervals)
        candidates.append(
            SlotCandidate(start=format_minutes(start), end=format_minutes(end), available=not taken)
        )
        start = end

    return candidates


__all__ = ['OperatingWindow', 'SlotCandidate', 'derive_slots', 'overlaps']
