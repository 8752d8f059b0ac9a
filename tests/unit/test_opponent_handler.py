import json

import pytest

from botapp.handlers.opponents.handler import OpponentHandler
from botapp.handlers.state import get_session_state
from botapp.i18n import get_translator
from tests.helpers import DummyContext, DummyUpdate, button_callbacks, envelope, make_handler_deps

EN = get_translator("en")
LISTINGS = {
    "listings": [
        {
            "id": "o1",
            "teamId": "t7",
            "teamName": "Kartallar",
            "title": "Cumartesi maçı",
            "preferredDateStart": "2025-06-07",
            "preferredDateEnd": "2025-06-08",
            "matchDuration": 90,
        },
    ],
    "pagination": {"page": 1, "totalPages": 1, "total": 1},
}


@pytest.mark.asyncio
async def test_listing_creation_rejects_a_backwards_range(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("POST", "/opponent-search/listings"): (201, envelope({"id": "o9"})),
        ("GET", "/opponent-search/listings/my-team"): (200, envelope([{"id": "o9", "title": "Akşam maçı"}])),
    })
    handler = OpponentHandler(harness.deps)
    context = DummyContext()

    await handler.handle_create_prompt(DummyUpdate("opp_create"), context)
    await handler.handle_title_input(DummyUpdate(text="Akşam maçı"), context, "Akşam maçı")
    await handler.handle_date_start_input(DummyUpdate(text="07.06.2025"), context, "07.06.2025")

    backwards = DummyUpdate(text="2025-06-01")
    await handler.handle_date_end_input(backwards, context, "2025-06-01")
    assert backwards.message.replies[0][0].startswith(f"❌ {EN.t('validation.date_range')}")
    assert get_session_state(context).pending_input == "opp_date_end"

    await handler.handle_date_end_input(DummyUpdate(text="2025-06-10"), context, "2025-06-10")
    assert context.bot.sent[-1]["text"] == EN.t("opponents.choose_match_type")

    update = DummyUpdate("opp_type_competitive")
    await handler.handle_match_type(update, context)
    await harness.client.aclose()

    assert json.loads(harness.backend.calls("POST", "/opponent-search/listings")[0].content) == {
        "title": "Akşam maçı",
        "preferredDateStart": "2025-06-07",
        "preferredDateEnd": "2025-06-10",
        "matchType": "competitive",
    }
    assert harness.toast.messages == [EN.t("opponents.created")]
    assert get_session_state(context).opponents.draft == {}
    assert "Akşam maçı" in update.callback_query.edits[-1][0]


@pytest.mark.asyncio
async def test_proposal_is_sent_to_the_selected_listing(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("GET", "/opponent-search/listings/search"): (200, envelope(LISTINGS)),
        ("POST", "/opponent-search/proposals"): (201, envelope(message="Teklif gönderildi")),
    })
    handler = OpponentHandler(harness.deps)
    context = DummyContext()

    browse = DummyUpdate("social_opponents")
    await handler.handle_opponents(browse, context)
    assert "opp_view_o1" in button_callbacks(browse.callback_query.edits[-1][1]["reply_markup"])

    await handler.handle_listing_detail(DummyUpdate("opp_view_o1"), context)
    await handler.handle_propose_prompt(DummyUpdate("opp_propose"), context)

    bad_time = DummyUpdate(text="25:00")
    await handler.handle_proposal_date_input(DummyUpdate(text="2025-06-07"), context, "2025-06-07")
    await handler.handle_proposal_time_input(bad_time, context, "25:00")
    assert bad_time.message.replies[0][0].startswith(f"❌ {EN.t('validation.time_invalid')}")

    done = DummyUpdate(text="20.30")
    await handler.handle_proposal_time_input(done, context, "20.30")
    await harness.client.aclose()

    assert json.loads(harness.backend.calls("POST", "/opponent-search/proposals")[0].content) == {
        "opponentListingId": "o1",
        "targetTeamId": "t7",
        "proposedDate": "2025-06-07",
        "proposedTime": "20:30",
        "matchDuration": 90,
    }
    assert done.message.replies[-1][0].startswith("✅ Teklif gönderildi")
    assert get_session_state(context).pending_input is None
    assert len(harness.backend.calls("GET", "/listings/search")) == 1


@pytest.mark.asyncio
async def test_browsing_with_expired_session_redirects_once(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("GET", "/opponent-search/listings/search"): (401, envelope(success=False, message="Token expired")),
    })
    handler = OpponentHandler(harness.deps)
    update = DummyUpdate("social_opponents")

    await handler.handle_opponents(update, DummyContext())
    await harness.client.aclose()

    assert harness.redirects == [1]
    assert update.callback_query.edits == []
