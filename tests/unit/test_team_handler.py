import json
import types

import pytest

from botapp.handlers.state import get_session_state
from botapp.handlers.teams.handler import TeamHandler
from botapp.i18n import get_translator
from tests.helpers import DummyContext, DummyUpdate, button_callbacks, envelope, make_handler_deps

EN = get_translator("en")
MY_TEAM = {
    "team": {"id": "t1", "name": "Yıldızlar", "captainId": "u-1"},
    "members": [{"userId": "u-1", "firstName": "Ali", "role": "captain"}],
    "stats": {"eloRating": 1000},
}
NOTIFICATIONS = [
    {"id": "n1", "title": "Yeni üye", "isRead": False},
    {"id": "n2", "title": "Maç teklifi", "isRead": False},
]


def _team_routes(extra=None):
    routes = {
        ("GET", "/teams/my-team"): (200, envelope(MY_TEAM)),
        ("GET", "/teams/notifications"): (200, envelope(NOTIFICATIONS)),
    }
    routes.update(extra or {})
    return routes


@pytest.mark.asyncio
async def test_captain_sees_roster_buttons_and_unread_count(tmp_path):
    harness = make_handler_deps(tmp_path, _team_routes())
    handler = TeamHandler(harness.deps)
    update = DummyUpdate("social_team")

    await handler.handle_team(update, DummyContext())
    await harness.client.aclose()

    text, kwargs = update.callback_query.edits[-1]
    assert "Yıldızlar" in text
    callbacks = button_callbacks(kwargs["reply_markup"])
    assert {"team_invite", "team_describe", "team_logo"} <= set(callbacks)
    labels = [button.text for row in kwargs["reply_markup"].inline_keyboard for button in row]
    assert f"{EN.t('teams.notifications')} (2)" in labels


@pytest.mark.asyncio
async def test_blank_team_name_keeps_the_prompt_open(tmp_path):
    harness = make_handler_deps(tmp_path, {})
    handler = TeamHandler(harness.deps)
    context = DummyContext()
    get_session_state(context).pending_input = "team_name"
    update = DummyUpdate(text="   ")

    await handler.handle_name_input(update, context, "   ")
    await harness.client.aclose()

    assert harness.backend.requests == []
    assert get_session_state(context).pending_input == "team_name"
    assert update.message.replies[0][0].startswith(f"❌ {EN.t('validation.team_name_required')}")


@pytest.mark.asyncio
async def test_invite_search_strips_at_sign_and_hides_players_with_a_team(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("GET", "/teams/search-players"): (200, envelope([
            {"id": "u-2", "username": "deniz", "hasTeam": False},
            {"id": "u-3", "username": "derya", "hasTeam": True},
        ])),
    })
    handler = TeamHandler(harness.deps)
    context = DummyContext()
    get_session_state(context).pending_input = "team_invite_search"
    update = DummyUpdate(text="@de")

    await handler.handle_invite_search_input(update, context, "@de")
    await harness.client.aclose()

    assert dict(harness.backend.requests[0].url.params) == {"username": "de"}
    callbacks = button_callbacks(update.message.replies[-1][1]["reply_markup"])
    assert "team_pick_0" in callbacks
    assert "team_pick_1" not in callbacks


@pytest.mark.asyncio
async def test_picking_a_candidate_sends_the_invite(tmp_path):
    harness = make_handler_deps(tmp_path, _team_routes({
        ("GET", "/teams/search-players"): (200, envelope([{"id": "u-2", "username": "deniz"}])),
        ("POST", "/teams/invite"): (200, envelope(message="Davet gönderildi")),
    }))
    handler = TeamHandler(harness.deps)
    context = DummyContext()

    await handler.handle_invite_search_input(DummyUpdate(text="deniz"), context, "deniz")
    await handler.handle_invite_pick(DummyUpdate("team_pick_0"), context)
    await harness.client.aclose()

    assert json.loads(harness.backend.calls("POST", "/teams/invite")[0].content) == {"playerId": "u-2"}
    assert harness.toast.messages == ["Davet gönderildi"]


@pytest.mark.asyncio
async def test_marking_one_notification_read_updates_locally(tmp_path):
    harness = make_handler_deps(tmp_path, _team_routes({
        ("POST", "/teams/notifications/n1/read"): (200, envelope()),
    }))
    handler = TeamHandler(harness.deps)
    context = DummyContext()

    await handler.handle_notifications(DummyUpdate("team_notifications"), context)
    update = DummyUpdate("team_nread_n1")
    await handler.handle_mark_read(update, context)
    await harness.client.aclose()

    assert len(harness.backend.calls("GET", "/teams/notifications")) == 1
    assert [item.is_read for item in get_session_state(context).team.notifications] == [True, False]
    callbacks = button_callbacks(update.callback_query.edits[-1][1]["reply_markup"])
    assert "team_nread_n1" not in callbacks
    assert "team_nread_n2" in callbacks


@pytest.mark.asyncio
async def test_mark_all_read_removes_every_read_button(tmp_path):
    harness = make_handler_deps(tmp_path, _team_routes({
        ("POST", "/teams/notifications/read-all"): (200, envelope()),
    }))
    handler = TeamHandler(harness.deps)
    context = DummyContext()

    await handler.handle_notifications(DummyUpdate("team_notifications"), context)
    update = DummyUpdate("team_nread_all")
    await handler.handle_mark_all_read(update, context)
    await harness.client.aclose()

    assert button_callbacks(update.callback_query.edits[-1][1]["reply_markup"]) == ["social_team"]


@pytest.mark.asyncio
async def test_logo_upload_posts_the_image(tmp_path):
    harness = make_handler_deps(tmp_path, _team_routes({
        ("POST", "/teams/logo"): (200, envelope({"logoUrl": "/uploads/t1.jpg"})),
    }))
    handler = TeamHandler(harness.deps)
    context = DummyContext()
    get_session_state(context).pending_input = "team_logo"
    update = DummyUpdate(text="")

    async def download_as_bytearray():
        return bytearray(b"\xff\xd8logo")

    async def get_file():
        return types.SimpleNamespace(download_as_bytearray=download_as_bytearray)

    update.message.photo = [types.SimpleNamespace(file_size=300, file_unique_id="logo", get_file=get_file)]

    await handler.handle_logo_upload(update, context)
    await harness.client.aclose()

    body = harness.backend.calls("POST", "/teams/logo")[0].content
    assert b'name="logo"; filename="logo.jpg"' in body
    assert get_session_state(context).pending_input is None
    assert harness.toast.messages == [EN.t("teams.logo_uploaded")]


@pytest.mark.asyncio
async def test_team_screen_with_expired_session_redirects_once(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("GET", "/teams/my-team"): (401, envelope(success=False, message="Token expired")),
    })
    handler = TeamHandler(harness.deps)
    update = DummyUpdate("social_team")

    await handler.handle_team(update, DummyContext())
    await harness.client.aclose()

    assert harness.redirects == [1]
    assert update.callback_query.edits == []
