import asyncio
from datetime import datetime

import pytest

from api.errors import ApiError, ConflictError
from api.models import BookedSlot, Reservation
from availability.resolver import (
    AvailabilityState,
    InvalidDurationError,
    PastDateError,
    SlotAvailabilityResolver,
    SlotTakenError,
    SlotUnavailableError,
    SubmissionInProgressError,
)
from availability.slots import OperatingWindow
from tests.helpers import DummyLogger

TODAY = "2025-06-01"
TOMORROW = "2025-06-02"


def fixed_clock():
    return datetime(2025, 6, 1, 12, 30)


class FakeReservationService:
    def __init__(self, booked=None):
        self.booked = {key: list(value) for key, value in (booked or {}).items()}
        self.load_calls = []
        self.create_calls = []
        self.load_gates = {}
        self.create_gate = None
        self.create_error = None
        self.load_error = None

    async def get_available_slots(self, user_id, field_id, date):
        self.load_calls.append((user_id, field_id, date))
        gate = self.load_gates.get(field_id)
        if gate is not None:
            await gate.wait()
        if self.load_error is not None:
            raise self.load_error
        return date, list(self.booked.get(field_id, []))

    async def create(self, user_id, **kwargs):
        self.create_calls.append(kwargs)
        if self.create_gate is not None:
            await self.create_gate.wait()
        if self.create_error is not None:
            raise self.create_error
        return Reservation(
            id="r-1",
            field_id=kwargs["field_id"],
            date=kwargs["date"],
            start_time=kwargs["start_time"],
            end_time=kwargs["end_time"],
            total_price=kwargs["total_price"],
        )


def make_resolver(service, **kwargs):
    return SlotAvailabilityResolver(
        service,
        user_id=7,
        window=OperatingWindow(open="08:00", close="16:00"),
        granularity_minutes=60,
        max_hours=3,
        clock=fixed_clock,
        logger=DummyLogger(),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_load_availability_builds_grid():
    service = FakeReservationService({"f1": [BookedSlot("10:00", "11:00")]})
    resolver = make_resolver(service)

    result = await resolver.load_availability("f1", TOMORROW)

    assert resolver.state is AvailabilityState.READY
    assert result.unavailable_starts == ["10:00"]
    assert result.available_starts[:3] == ["08:00", "09:00", "11:00"]
    assert service.load_calls == [(7, "f1", TOMORROW)]


@pytest.mark.asyncio
async def test_past_date_is_rejected_without_request():
    service = FakeReservationService()
    resolver = make_resolver(service)

    with pytest.raises(PastDateError):
        await resolver.load_availability("f1", "2025-05-31")

    assert service.load_calls == []


@pytest.mark.asyncio
async def test_today_closes_slots_that_already_started():
    service = FakeReservationService()
    resolver = make_resolver(service)

    result = await resolver.load_availability("f1", TODAY)

    assert result.available_starts == ["13:00", "14:00", "15:00"]


@pytest.mark.asyncio
async def test_stale_response_is_discarded():
    service = FakeReservationService({
        "slow": [BookedSlot("08:00", "09:00")],
        "fast": [BookedSlot("09:00", "10:00")],
    })
    service.load_gates = {"slow": asyncio.Event(), "fast": asyncio.Event()}
    resolver = make_resolver(service)

    slow = asyncio.create_task(resolver.load_availability("slow", TOMORROW))
    await asyncio.sleep(0)
    fast = asyncio.create_task(resolver.load_availability("fast", TOMORROW))
    await asyncio.sleep(0)

    service.load_gates["fast"].set()
    fast_result = await fast
    service.load_gates["slow"].set()
    slow_result = await slow

    assert slow_result is None
    assert fast_result is not None
    assert resolver.result.field_id == "fast"
    assert resolver.result.unavailable_starts == ["09:00"]


@pytest.mark.asyncio
async def test_load_failure_sets_error_state():
    service = FakeReservationService()
    service.load_error = ApiError("backend down", status_code=500)
    resolver = make_resolver(service)

    result = await resolver.load_availability("f1", TOMORROW)

    assert result is None
    assert resolver.state is AvailabilityState.ERROR
    assert resolver.error == "backend down"


@pytest.mark.asyncio
async def test_range_checks_and_max_hours():
    service = FakeReservationService({"f1": [BookedSlot("10:00", "11:00")]})
    resolver = make_resolver(service)
    await resolver.load_availability("f1", TOMORROW)

    assert resolver.is_range_available("08:00", "10:00") is True
    assert resolver.is_range_available("09:00", "11:00") is False
    assert resolver.max_hours_from("08:00") == 2
    assert resolver.max_hours_from("10:00") == 0
    assert resolver.max_hours_from("11:00") == 3
    assert resolver.max_hours_from("15:00") == 1


@pytest.mark.asyncio
async def test_book_submits_priced_range():
    service = FakeReservationService()
    resolver = make_resolver(service)
    await resolver.load_availability("f1", TOMORROW)

    reservation = await resolver.book("13:00", 2, price_per_hour=400)

    assert reservation.id == "r-1"
    call = service.create_calls[0]
    assert call["start_time"] == "13:00"
    assert call["end_time"] == "15:00"
    assert call["base_price"] == 400
    assert call["total_price"] == 800
    assert resolver.is_submitting is False


@pytest.mark.asyncio
async def test_book_rejects_locally_unavailable_range():
    service = FakeReservationService({"f1": [BookedSlot("10:00", "11:00")]})
    resolver = make_resolver(service)
    await resolver.load_availability("f1", TOMORROW)

    with pytest.raises(SlotUnavailableError):
        await resolver.book("09:00", 2)
    with pytest.raises(InvalidDurationError):
        await resolver.book("08:00", 0)

    assert service.create_calls == []


@pytest.mark.asyncio
async def test_second_submit_while_in_flight_is_refused():
    service = FakeReservationService()
    service.create_gate = asyncio.Event()
    resolver = make_resolver(service)
    await resolver.load_availability("f1", TOMORROW)

    first = asyncio.create_task(resolver.book("08:00", 1))
    await asyncio.sleep(0)
    assert resolver.is_submitting is True

    with pytest.raises(SubmissionInProgressError):
        await resolver.book("12:00", 1)

    service.create_gate.set()
    await first
    assert resolver.is_submitting is False
    assert len(service.create_calls) == 1


@pytest.mark.asyncio
async def test_conflict_reloads_and_reports_slot_taken():
    service = FakeReservationService()
    service.create_error = ConflictError("Slot already booked", status_code=409)
    resolver = make_resolver(service)
    await resolver.load_availability("f1", TOMORROW)
    service.booked["f1"] = [BookedSlot("08:00", "09:00")]

    with pytest.raises(SlotTakenError) as excinfo:
        await resolver.book("08:00", 1)

    assert excinfo.value.result is not None
    assert excinfo.value.result.slot_at("08:00").available is False
    assert len(service.load_calls) == 2
    assert resolver.is_submitting is False
