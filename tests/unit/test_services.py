import json

import httpx
import pytest

from api.client import ApiClient
from api.errors import ApiError, ClientValidationError
from api.models import AdminUser, PlayerRating
from api.services import AdminService, AuthService, RatingService, ReservationService, UserService, VenueService
from tests.helpers import DummyLogger
from users.session_store import SessionStore

BASE_URL = "http://backend.test/api/v1"
PROFILE = {"id": "u-1", "email": "ali@example.com", "firstName": "Ali", "userType": "player"}


def envelope(data=None, *, success=True, message=None):
    return {"success": success, "message": message, "data": data, "error": None}


class Recorder:
    """Routes ``(method, path)`` to canned responses and keeps every request."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        key = (request.method, request.url.path.replace("/api/v1", "", 1))
        status, body = self.routes[key]
        return httpx.Response(status, json=body)


@pytest.fixture
def store(tmp_path):
    return SessionStore(str(tmp_path / "sessions.json"))


def make_client(store, routes):
    recorder = Recorder(routes)
    client = ApiClient(BASE_URL, store, transport=httpx.MockTransport(recorder), logger=DummyLogger())
    return client, recorder


@pytest.mark.asyncio
async def test_login_persists_session(store):
    client, _ = make_client(store, {
        ("POST", "/auth/login"): (200, envelope({"token": "tok-9", "user": PROFILE})),
    })
    service = AuthService(client, store)

    session = await service.login(42, " ali@example.com ", "secret1")
    await client.aclose()

    assert session.token == "tok-9"
    assert store.get(42).subject_id == "u-1"


@pytest.mark.asyncio
async def test_login_without_token_is_an_error(store):
    client, _ = make_client(store, {
        ("POST", "/auth/login"): (200, envelope({"user": PROFILE})),
    })
    service = AuthService(client, store)

    with pytest.raises(ApiError):
        await service.login(42, "ali@example.com", "secret1")
    await client.aclose()

    assert store.get(42) is None


@pytest.mark.asyncio
async def test_register_checks_password_before_request(store):
    client, recorder = make_client(store, {})
    service = AuthService(client, store)

    with pytest.raises(ClientValidationError) as excinfo:
        await service.register(42, {"email": "a@b.co", "password": "123"})
    await client.aclose()

    assert excinfo.value.key == "validation.password_too_short"
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_available_slots_parse_booked_intervals(store):
    client, recorder = make_client(store, {
        ("GET", "/reservations/available-slots"): (200, envelope({
            "date": "2025-06-02",
            "bookedSlots": [{"startTime": "10:00:00", "endTime": "11:00:00"}],
        })),
    })
    service = ReservationService(client)

    date, booked = await service.get_available_slots(1, "f-1", "2025-06-02")
    await client.aclose()

    assert date == "2025-06-02"
    assert [(slot.start_time, slot.end_time) for slot in booked] == [("10:00", "11:00")]
    assert dict(recorder.requests[0].url.params) == {"fieldId": "f-1", "date": "2025-06-02"}


@pytest.mark.asyncio
async def test_create_reservation_sends_camel_case_payload(store):
    client, recorder = make_client(store, {
        ("POST", "/reservations"): (201, envelope({
            "id": "r-1",
            "fieldId": "f-1",
            "reservationDate": "2025-06-02",
            "startTime": "10:00:00",
            "endTime": "12:00:00",
            "totalPrice": "1000.00",
            "status": "pending",
        })),
    })
    service = ReservationService(client)

    reservation = await service.create(
        1,
        field_id="f-1",
        date="2025-06-02",
        start_time="10:00",
        end_time="12:00",
        base_price=500,
        total_price=1000,
    )
    await client.aclose()

    body = json.loads(recorder.requests[0].content)
    assert body == {
        "fieldId": "f-1",
        "reservationDate": "2025-06-02",
        "startTime": "10:00",
        "endTime": "12:00",
        "basePrice": 500,
        "totalPrice": 1000,
    }
    assert reservation.start_time == "10:00"
    assert reservation.total_price == 1000.0
    assert reservation.can_cancel


@pytest.mark.asyncio
async def test_venues_parse_fields_and_prices(store):
    client, _ = make_client(store, {
        ("GET", "/venues"): (200, envelope([
            {
                "id": "v-1",
                "name": "Arena",
                "city": "İstanbul",
                "basePricePerHour": "750.50",
                "averageRating": 4.5,
                "fields": [{"id": "f-1", "name": "Saha 1"}],
            }
        ])),
    })
    service = VenueService(client)

    venues = await service.get_all(1)
    await client.aclose()

    assert venues[0].price_per_hour == 750.5
    assert venues[0].find_field("f-1").name == "Saha 1"
    assert venues[0].find_field("nope") is None


@pytest.mark.asyncio
async def test_admin_lists_are_paginated(store):
    client, recorder = make_client(store, {
        ("GET", "/admin/users"): (200, envelope({
            "users": [{"id": "1", "email": "a@b.co", "first_name": "Ayşe", "user_type": "player", "is_active": False}],
            "pagination": {"total": 41, "page": 3, "limit": 20, "totalPages": 3},
        })),
    })
    service = AdminService(client)

    page = await service.list_users(1, page=3, search="ay", user_type=None)
    await client.aclose()

    assert page.pagination.total == 41
    assert page.pagination.total_pages == 3
    assert page.items[0].display_name == "Ayşe"
    assert page.items[0].is_active is False
    assert dict(recorder.requests[0].url.params) == {"page": "3", "limit": "20", "search": "ay"}


@pytest.mark.asyncio
async def test_admin_cannot_delete_admin_accounts(store):
    client, recorder = make_client(store, {})
    service = AdminService(client)

    with pytest.raises(ClientValidationError) as excinfo:
        await service.delete_user(1, AdminUser(id="9", email="root@example.com", user_type="admin"))
    with pytest.raises(ClientValidationError):
        await service.update_user_type(1, "9", "superuser")
    with pytest.raises(ClientValidationError):
        await service.update_reservation_status(1, "r-1", "lost")
    await client.aclose()

    assert excinfo.value.key == "validation.admin_delete_blocked"
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_rating_submit_all_reports_partial_failure(store):
    calls = []

    def handler(request):
        body = json.loads(request.content)
        calls.append(body["ratedUserId"])
        if body["ratedUserId"] == "p-2":
            return httpx.Response(400, json=envelope(success=False, message="Already rated"))
        return httpx.Response(201, json=envelope({"id": "rating"}))

    client = ApiClient(BASE_URL, store, transport=httpx.MockTransport(handler), logger=DummyLogger())
    service = RatingService(client, logger=DummyLogger())

    submitted, failed = await service.submit_all(
        1,
        "r-1",
        {"p-1": PlayerRating("p-1", speed=80), "p-2": PlayerRating("p-2")},
    )
    await client.aclose()

    assert calls == ["p-1", "p-2"]
    assert submitted == ["p-1"]
    assert failed == {"p-2": "Already rated"}


@pytest.mark.asyncio
async def test_change_password_requires_matching_confirmation(store):
    client, recorder = make_client(store, {})
    service = UserService(client, store)

    with pytest.raises(ClientValidationError) as excinfo:
        await service.change_password(1, "old-pass", "newpass1", "newpass2")
    await client.aclose()

    assert excinfo.value.key == "validation.password_mismatch"
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_upload_rejects_non_images_and_large_files(store):
    client, recorder = make_client(store, {})
    service = UserService(client, store)

    with pytest.raises(ClientValidationError) as not_image:
        await service.upload_profile_picture(1, "cv.pdf", b"%PDF", "application/pdf")
    with pytest.raises(ClientValidationError) as too_large:
        await service.upload_profile_picture(1, "big.jpg", b"0" * (5 * 1024 * 1024 + 1), "image/jpeg")
    await client.aclose()

    assert not_image.value.key == "validation.upload_not_image"
    assert too_large.value.key == "validation.upload_too_large"
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_update_profile_refreshes_stored_session(store):
    store.save(1, "tok", PROFILE)
    client, recorder = make_client(store, {
        ("PUT", "/users/profile"): (200, envelope({"phone": "05321234567"})),
    })
    service = UserService(client, store)

    await service.update_profile(1, {"phone": "05321234567", "email": "ignored@example.com"})
    await client.aclose()

    assert json.loads(recorder.requests[0].content) == {"phone": "05321234567"}
    assert store.get(1).profile["phone"] == "05321234567"
    assert store.get(1).profile["email"] == "ali@example.com"


@pytest.mark.asyncio
async def test_available_slots_drop_bookings_with_missing_times(store):
    client, _ = make_client(store, {
        ("GET", "/reservations/available-slots"): (200, envelope({
            "date": "2025-06-02",
            "bookedSlots": [
                {"startTime": "10:00:00", "endTime": None},
                {"startTime": None, "endTime": "13:00:00"},
                {"startTime": "14:00:00", "endTime": "15:00:00"},
            ],
        })),
    })
    logger = DummyLogger()
    service = ReservationService(client, logger=logger)

    _, booked = await service.get_available_slots(1, "f-1", "2025-06-02")
    await client.aclose()

    assert [(slot.start_time, slot.end_time) for slot in booked] == [("14:00", "15:00")]
    assert [level for level, _, _ in logger.records].count("warning") == 2
