import pytest

from botapp.handlers.reservations.handler import ReservationHandler
from botapp.i18n import get_translator
from botapp.notifications import ToastKind
from tests.helpers import DummyContext, DummyUpdate, button_callbacks, envelope, make_handler_deps

EN = get_translator("en")


def _reservation(reservation_id, status, date="2099-01-10"):
    return {
        "id": reservation_id,
        "fieldId": "f1",
        "reservationDate": date,
        "startTime": "19:00:00",
        "endTime": "20:00:00",
        "totalPrice": "500.00",
        "status": status,
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["cancelled", "completed", "no_show"])
async def test_terminal_reservation_detail_offers_no_cancel(tmp_path, status):
    harness = make_handler_deps(tmp_path, {("GET", "/reservations/r1"): (200, envelope(_reservation("r1", status)))})
    handler = ReservationHandler(harness.deps)
    update = DummyUpdate("res_view_r1")

    await handler.handle_reservation_detail(update, DummyContext())
    await harness.client.aclose()

    callbacks = button_callbacks(update.callback_query.edits[-1][1]["reply_markup"])
    assert "res_cancel_r1" not in callbacks
    assert ("rate_start_r1" in callbacks) == (status == "completed")


@pytest.mark.asyncio
async def test_active_reservation_detail_offers_cancel_and_players_wanted(tmp_path):
    harness = make_handler_deps(tmp_path, {("GET", "/reservations/r1"): (200, envelope(_reservation("r1", "confirmed")))})
    handler = ReservationHandler(harness.deps)
    update = DummyUpdate("res_view_r1")

    await handler.handle_reservation_detail(update, DummyContext())
    await harness.client.aclose()

    callbacks = button_callbacks(update.callback_query.edits[-1][1]["reply_markup"])
    assert "res_cancel_r1" in callbacks
    assert "ps_create_r1" in callbacks
    assert "ps_requests_r1" in callbacks


@pytest.mark.asyncio
async def test_stale_cancel_button_on_terminal_reservation_sends_nothing(tmp_path):
    harness = make_handler_deps(tmp_path, {("GET", "/reservations/r1"): (200, envelope(_reservation("r1", "completed")))})
    handler = ReservationHandler(harness.deps)
    update = DummyUpdate("res_cancel_r1")

    await handler.handle_cancel_request(update, DummyContext())
    await harness.client.aclose()

    assert [request.method for request in harness.backend.requests] == ["GET"]
    assert update.callback_query.edits == []
    assert harness.toast.shown == [(EN.t("reservations.cannot_cancel"), ToastKind.WARNING)]


@pytest.mark.asyncio
async def test_period_switch_filters_locally(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("GET", "/reservations"): (200, envelope([
            _reservation("old", "completed", date="2020-01-10"),
            _reservation("new", "confirmed", date="2099-01-10"),
        ])),
    })
    handler = ReservationHandler(harness.deps)
    context = DummyContext()

    await handler.handle_reservations_menu(DummyUpdate("menu_reservations"), context)
    past = DummyUpdate("res_period_past")
    await handler.handle_period(past, context)
    upcoming = DummyUpdate("res_period_upcoming")
    await handler.handle_period(upcoming, context)
    await harness.client.aclose()

    assert len(harness.backend.requests) == 1
    past_callbacks = button_callbacks(past.callback_query.edits[-1][1]["reply_markup"])
    assert "res_view_old" in past_callbacks
    assert "res_view_new" not in past_callbacks
    upcoming_callbacks = button_callbacks(upcoming.callback_query.edits[-1][1]["reply_markup"])
    assert upcoming_callbacks.count("res_view_new") == 1
    assert "res_view_old" not in upcoming_callbacks
