import json

import pytest

from botapp.handlers.admin.handler import AdminHandler
from botapp.handlers.state import get_session_state
from botapp.i18n import get_translator
from tests.helpers import ADMIN_PROFILE, DummyContext, DummyUpdate, envelope, make_handler_deps

EN = get_translator("en")
VENUE_ROW = {
    "id": "v1",
    "name": "Kadıköy Arena",
    "location": "Kadıköy, İstanbul",
    "price_per_hour": "600.00",
    "field_type": "outdoor",
    "opening_time": "08:00:00",
    "closing_time": "23:00:00",
    "is_active": True,
}
VENUE_PAGE = envelope({"venues": [VENUE_ROW], "pagination": {"total": 1, "page": 1, "limit": 20, "totalPages": 1}})
EXPIRED = (401, envelope(success=False, message="Token expired"))


def _admin(tmp_path, routes):
    harness = make_handler_deps(tmp_path, routes, profile=ADMIN_PROFILE)
    return harness, AdminHandler(harness.deps)


@pytest.mark.asyncio
async def test_user_list_with_expired_session_redirects_once_and_renders_nothing(tmp_path):
    harness, handler = _admin(tmp_path, {("GET", "/admin/users"): EXPIRED})
    update = DummyUpdate("admin_users")

    await handler.handle_users(update, DummyContext())
    await harness.client.aclose()

    assert harness.redirects == [1]
    assert update.callback_query.edits == []
    assert harness.deps.session_store.get(1) is None


@pytest.mark.asyncio
async def test_venue_search_with_expired_session_stops_quietly(tmp_path):
    harness, handler = _admin(tmp_path, {("GET", "/admin/venues"): EXPIRED})
    update = DummyUpdate(text="arena")

    await handler.handle_venue_search_input(update, DummyContext(), "arena")
    await harness.client.aclose()

    assert harness.redirects == [1]
    assert update.message.replies == []


@pytest.mark.asyncio
async def test_venue_toggle_writes_back_the_whole_row(tmp_path):
    harness, handler = _admin(tmp_path, {
        ("GET", "/admin/venues"): (200, VENUE_PAGE),
        ("PUT", "/admin/venues/v1"): (200, envelope({**VENUE_ROW, "is_active": False})),
    })
    context = DummyContext()

    await handler.handle_venues(DummyUpdate("admin_venues"), context)
    await handler.handle_venue_detail(DummyUpdate("admin_vview_v1"), context)
    await handler.handle_venue_toggle(DummyUpdate("admin_vtoggle"), context)
    await harness.client.aclose()

    body = json.loads(harness.backend.calls("PUT", "/admin/venues/v1")[0].content)
    assert body["isActive"] is False
    assert body["name"] == "Kadıköy Arena"
    assert body["pricePerHour"] == 600.0
    assert body["openingTime"] == "08:00"
    assert harness.toast.messages == [EN.t("admin.venue_deactivated")]


@pytest.mark.asyncio
async def test_venue_price_input_rejects_non_positive_and_keeps_prompt(tmp_path):
    harness, handler = _admin(tmp_path, {})
    context = DummyContext()
    get_session_state(context).pending_input = "admin_venue_new_price"
    update = DummyUpdate(text="-5")

    await handler.handle_venue_price_input(update, context, "-5")
    await harness.client.aclose()

    assert harness.backend.requests == []
    assert get_session_state(context).pending_input == "admin_venue_new_price"
    assert EN.t("validation.price_invalid") in update.message.replies[0][0]


@pytest.mark.asyncio
async def test_venue_creation_collects_name_location_and_price(tmp_path):
    harness, handler = _admin(tmp_path, {
        ("POST", "/admin/venues"): (201, envelope({**VENUE_ROW, "id": "v2", "name": "Moda Saha"})),
        ("GET", "/admin/venues"): (200, VENUE_PAGE),
    })
    context = DummyContext()

    await handler.handle_venue_create_prompt(DummyUpdate("admin_vcreate"), context)
    assert get_session_state(context).pending_input == "admin_venue_name"
    await handler.handle_venue_name_input(DummyUpdate(text="Moda Saha"), context, "Moda Saha")
    await handler.handle_venue_location_input(DummyUpdate(text="Moda"), context, " Moda ")
    final = DummyUpdate(text="450,5")
    await handler.handle_venue_create_price_input(final, context, "450,5")
    await harness.client.aclose()

    body = json.loads(harness.backend.calls("POST", "/admin/venues")[0].content)
    assert body == {"name": "Moda Saha", "location": "Moda", "pricePerHour": 450.5}
    assert get_session_state(context).pending_input is None
    assert final.message.replies[0][0].startswith(f"✅ {EN.t('admin.venue_created')}")


@pytest.mark.asyncio
async def test_venue_delete_confirmed_returns_to_list(tmp_path):
    harness, handler = _admin(tmp_path, {
        ("GET", "/admin/venues"): (200, VENUE_PAGE),
        ("DELETE", "/admin/venues/v1"): (200, envelope(message="Deleted")),
    })
    context = DummyContext()

    await handler.handle_venues(DummyUpdate("admin_venues"), context)
    await handler.handle_venue_detail(DummyUpdate("admin_vview_v1"), context)
    await handler.handle_venue_delete_confirmed(DummyUpdate("admin_vdelete_yes"), context)
    await harness.client.aclose()

    assert len(harness.backend.calls("DELETE", "/admin/venues/v1")) == 1
    assert get_session_state(context).admin.selected_venue is None
    assert harness.toast.messages == [EN.t("admin.venue_deleted")]
