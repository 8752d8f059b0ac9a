"""Slot availability state for a single user's booking flow."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from api.errors import ApiError, ConflictError, UnauthorizedError
from api.models import BookedSlot, Reservation
from availability.slots import OperatingWindow, SlotCandidate, derive_slots
from availability.time_utils import (
    filter_future_times_for_today,
    format_minutes,
    now_in_timezone,
    parse_iso_date,
    to_minutes,
)
from infrastructure.constants import DEFAULT_PRICE_PER_HOUR, DEFAULT_SLOT_MINUTES, MAX_BOOKING_HOURS


class AvailabilityState(str, Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    ERROR = 'error'


class SlotAvailabilityError(RuntimeError):
    """Base error for availability and submission failures."""


class PastDateError(SlotAvailabilityError):
    """Raised when availability is requested for a date before today."""


class SlotUnavailableError(SlotAvailabilityError):
    """Raised when the requested range is not free in the last loaded grid."""


class InvalidDurationError(SlotAvailabilityError):
    """Raised when the booking length is outside the allowed hours."""


class SubmissionInProgressError(SlotAvailabilityError):
    """Raised when a reservation submit is already outstanding."""


class SlotTakenError(SlotAvailabilityError):
    """The server reported the slot as taken; availability has been reloaded."""

    def __init__(self, message: str, result: Optional['AvailabilityResult'] = None) -> None:
        super().__init__(message)
        self.message = message
        self.result = result


@dataclass(frozen=True)
class AvailabilityResult:
    """Outcome of one successful availability load."""

    field_id: str
    date: str
    slots: List[SlotCandidate]
    booked: List[BookedSlot] = field(default_factory=list)
    generation: int = 0

    @property
    def available_starts(self) -> List[str]:
        return [slot.start for slot in self.slots if slot.available]

    @property
    def unavailable_starts(self) -> List[str]:
        return [slot.start for slot in self.slots if not slot.available]

    def slot_at(self, start: str) -> Optional[SlotCandidate]:
        for slot in self.slots:
            if slot.start == start:
                return slot
        return None


class SlotAvailabilityResolver:
    """
    Turns booked intervals into a bookable grid and mediates reservation submits.

    One resolver serves one user's booking screen. Every load bumps a
    generation counter and a response belonging to an older generation is
    dropped, so a slow response can never overwrite a newer grid.
    """

    def __init__(
        self,
        reservation_service,
        user_id: int,
        *,
        window: Optional[OperatingWindow] = None,
        granularity_minutes: int = DEFAULT_SLOT_MINUTES,
        max_hours: int = MAX_BOOKING_HOURS,
        timezone: str = 'Europe/Istanbul',
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.reservation_service = reservation_service
        self.user_id = user_id
        self.window = window or OperatingWindow()
        self.granularity_minutes = granularity_minutes
        self.max_hours = max_hours
        self._clock = clock or (lambda: now_in_timezone(timezone))
        self.logger = logger or logging.getLogger('SlotAvailabilityResolver')

        self.state = AvailabilityState.IDLE
        self.result: Optional[AvailabilityResult] = None
        self.error: Optional[str] = None
        self._generation = 0
        self._submitting = False

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    async def load_availability(self, field_id: str, date: str) -> Optional[AvailabilityResult]:
        """
        Fetch booked intervals for ``field_id`` on ``date`` and derive the grid.

        Args:
            field_id: Field to query
            date: ISO date (``YYYY-MM-DD``)

        Returns:
            The new result, or None when the load failed (state ``error``)
            or was superseded by a newer load

        Raises:
            PastDateError: ``date`` is before today; no request is made
            UnauthorizedError: the session expired while loading
        """
        now = self._clock()
        try:
            requested = parse_iso_date(date)
        except ValueError as exc:
            raise PastDateError(f"Invalid date: {date}") from exc
        if requested < now.date():
            raise PastDateError(f"{date} is in the past")

        self._generation += 1
        generation = self._generation
        self.state = AvailabilityState.LOADING
        self.error = None
        self.logger.debug("Loading availability field=%s date=%s gen=%s", field_id, date, generation)

        try:
            _, booked = await self.reservation_service.get_available_slots(self.user_id, field_id, date)
        except UnauthorizedError:
            if generation == self._generation:
                self.state = AvailabilityState.IDLE
            raise
        except ApiError as exc:
            if generation != self._generation:
                self.logger.debug("Dropping failed load gen=%s (current %s)", generation, self._generation)
                return None
            self.state = AvailabilityState.ERROR
            self.error = exc.message
            self.logger.error("Availability load failed for field %s on %s: %s", field_id, date, exc.message)
            return None

        if generation != self._generation:
            self.logger.debug("Dropping stale availability gen=%s (current %s)", generation, self._generation)
            return None

        slots = derive_slots(booked, self.window, self.granularity_minutes)
        if requested == now.date():
            slots = self._close_past_starts(slots, now)

        self.result = AvailabilityResult(
            field_id=field_id,
            date=date,
            slots=slots,
            booked=list(booked),
            generation=generation,
        )
        self.state = AvailabilityState.READY
        self.logger.info(
            "Availability field=%s date=%s: %s/%s slots free",
            field_id,
            date,
            len(self.result.available_starts),
            len(slots),
        )
        return self.result

    async def reload(self) -> Optional[AvailabilityResult]:
        if self.result is None:
            return None
        return await self.load_availability(self.result.field_id, self.result.date)

    def _close_past_starts(self, slots: List[SlotCandidate], now: datetime) -> List[SlotCandidate]:
        upcoming = set(filter_future_times_for_today([slot.start for slot in slots], now))
        return [
            replace(slot, available=False) if slot.available and slot.start not in upcoming else slot
            for slot in slots
        ]

    # ------------------------------------------------------------------
    # Selection checks
    # ------------------------------------------------------------------
    def covered_slots(self, start: str, end: str) -> List[SlotCandidate]:
        """Return the grid slots covering ``[start, end)`` in the current result."""
        if self.result is None:
            return []
        begin, finish = to_minutes(start), to_minutes(end)
        return [
            slot
            for slot in self.result.slots
            if begin <= slot.start_minutes < finish
        ]

    def is_range_available(self, start: str, end: str) -> bool:
        if self.result is None or self.state is not AvailabilityState.READY:
            return False
        begin, finish = to_minutes(start), to_minutes(end)
        if finish <= begin:
            return False

        covered = self.covered_slots(start, end)
        expected = (finish - begin) // self.granularity_minutes
        if (finish - begin) % self.granularity_minutes or len(covered) != expected:
            return False
        return all(slot.available for slot in covered)

    def end_time_for(self, start: str, hours: int) -> str:
        return format_minutes(to_minutes(start) + hours * 60)

    def max_hours_from(self, start: str) -> int:
        """Longest duration (up to ``max_hours``) that stays free from ``start``."""
        best = 0
        for hours in range(1, self.max_hours + 1):
            end_minutes = to_minutes(start) + hours * 60
            if end_minutes > self.window.bounds()[1]:
                break
            if not self.is_range_available(start, format_minutes(end_minutes)):
                break
            best = hours
        return best

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------
    async def submit_reservation(
        self,
        field_id: str,
        date: str,
        start: str,
        end: str,
        price: float,
        *,
        base_price: Optional[float] = None,
        team_name: Optional[str] = None,
    ) -> Reservation:
        """
        Create a reservation for a range that is free in the last loaded grid.

        Raises:
            SubmissionInProgressError: another submit is still outstanding
            SlotUnavailableError: the range is not free in the current result
            SlotTakenError: the server reported a conflict; the grid was reloaded
        """
        if self._submitting:
            raise SubmissionInProgressError("A reservation request is already in progress")

        result = self.result
        if result is None or result.field_id != field_id or result.date != date:
            raise SlotUnavailableError("Availability has not been loaded for this field and date")
        if not self.is_range_available(start, end):
            raise SlotUnavailableError(f"{start}-{end} is not available")

        self._submitting = True
        try:
            reservation = await self.reservation_service.create(
                self.user_id,
                field_id=field_id,
                date=date,
                start_time=start,
                end_time=end,
                base_price=price if base_price is None else base_price,
                total_price=price,
                team_name=team_name,
            )
        except ConflictError as exc:
            self.logger.warning("Slot %s %s-%s on field %s was just taken: %s", date, start, end, field_id, exc.message)
            refreshed = await self._reload_after_conflict(field_id, date)
            raise SlotTakenError(exc.message, refreshed) from exc
        finally:
            self._submitting = False

        self.logger.info("Reservation %s created for user %s", reservation.id, self.user_id)
        return reservation

    async def book(
        self,
        start: str,
        hours: int,
        *,
        price_per_hour: Optional[float] = None,
        team_name: Optional[str] = None,
    ) -> Reservation:
        """Reserve ``hours`` consecutive hours from ``start`` on the loaded field and date."""
        if not 1 <= hours <= self.max_hours:
            raise InvalidDurationError(f"Duration must be between 1 and {self.max_hours} hours")
        if self.result is None:
            raise SlotUnavailableError("Availability has not been loaded")

        hourly = DEFAULT_PRICE_PER_HOUR if price_per_hour is None else price_per_hour
        return await self.submit_reservation(
            self.result.field_id,
            self.result.date,
            start,
            self.end_time_for(start, hours),
            hourly * hours,
            base_price=hourly,
            team_name=team_name,
        )

    async def _reload_after_conflict(self, field_id: str, date: str) -> Optional[AvailabilityResult]:
        try:
            return await self.load_availability(field_id, date)
        except PastDateError:
            self.logger.info("Skipping reload for %s, the date has passed", date)
            return None


__all__ = [
    'AvailabilityResult',
    'AvailabilityState',
    'InvalidDurationError',
    'PastDateError',
    'SlotAvailabilityError',
    'SlotAvailabilityResolver',
    'SlotTakenError',
    'SlotUnavailableError',
    'SubmissionInProgressError',
]
