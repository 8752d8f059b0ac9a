import json

import httpx
import pytest

from api.client import ApiClient
from api.errors import ClientValidationError
from api.models import AdminVenue, OpponentListing
from api.services import AdminService, PlayerSearchService, ProposalService, TeamService
from tests.helpers import BASE_URL, ApiRecorder, DummyLogger, envelope
from users.session_store import SessionStore


@pytest.fixture
def store(tmp_path):
    return SessionStore(str(tmp_path / "sessions.json"))


def make_client(store, routes):
    recorder = ApiRecorder(routes)
    client = ApiClient(BASE_URL, store, transport=httpx.MockTransport(recorder), logger=DummyLogger())
    return client, recorder


def _body(request):
    return json.loads(request.content)


@pytest.mark.asyncio
async def test_create_team_requires_a_name(store):
    client, recorder = make_client(store, {
        ("POST", "/teams"): (201, envelope({"id": "t1"}, message="Takım oluşturuldu")),
    })
    service = TeamService(client)

    with pytest.raises(ClientValidationError) as excinfo:
        await service.create_team(1, "   ")
    message = await service.create_team(1, " Yıldızlar ")
    await client.aclose()

    assert excinfo.value.key == "validation.team_name_required"
    assert len(recorder.requests) == 1
    assert _body(recorder.requests[0]) == {"name": "Yıldızlar"}
    assert message == "Takım oluşturuldu"


@pytest.mark.asyncio
async def test_my_team_is_none_without_membership(store):
    client, _ = make_client(store, {("GET", "/teams/my-team"): (200, envelope(None))})
    service = TeamService(client)

    assert await service.get_my_team(1) is None
    await client.aclose()


@pytest.mark.asyncio
async def test_player_search_and_invite(store):
    client, recorder = make_client(store, {
        ("GET", "/teams/search-players"): (200, envelope([
            {"id": "u-2", "username": "deniz", "firstName": "Deniz", "hasTeam": False},
        ])),
        ("POST", "/teams/invite"): (200, envelope(message="Davet gönderildi")),
    })
    service = TeamService(client)

    players = await service.search_players(1, "den")
    message = await service.invite_player(1, players[0].id)
    await client.aclose()

    assert dict(recorder.requests[0].url.params) == {"username": "den"}
    assert _body(recorder.calls("POST", "/teams/invite")[0]) == {"playerId": "u-2"}
    assert message == "Davet gönderildi"


@pytest.mark.asyncio
async def test_logo_upload_is_checked_before_sending(store):
    client, recorder = make_client(store, {
        ("POST", "/teams/logo"): (200, envelope({"logoUrl": "/uploads/t1.png"})),
    })
    service = TeamService(client)

    with pytest.raises(ClientValidationError):
        await service.upload_logo(1, "logo.pdf", b"%PDF", "application/pdf")
    url = await service.upload_logo(1, "logo.png", b"\x89PNG", "image/png")
    await client.aclose()

    assert url == "/uploads/t1.png"
    assert len(recorder.requests) == 1
    assert b'name="logo"; filename="logo.png"' in recorder.requests[0].content


@pytest.mark.asyncio
async def test_notifications_can_be_marked_read(store):
    client, recorder = make_client(store, {
        ("POST", "/teams/notifications/n1/read"): (200, envelope()),
        ("POST", "/teams/notifications/read-all"): (200, envelope()),
    })
    service = TeamService(client)

    await service.mark_notification_read(1, "n1")
    await service.mark_all_notifications_read(1)
    await client.aclose()

    assert [request.url.path for request in recorder.requests] == [
        "/api/v1/teams/notifications/n1/read",
        "/api/v1/teams/notifications/read-all",
    ]


@pytest.mark.asyncio
async def test_listing_search_keeps_only_known_filters(store):
    client, recorder = make_client(store, {
        ("GET", "/opponent-search/listings/search"): (200, envelope({
            "listings": [{"id": "o1", "teamName": "Kartallar"}],
            "pagination": {"page": 2, "totalPages": 3, "total": 21},
        })),
    })
    service = ProposalService(client)

    page = await service.search_listings(1, page=2, filters={"city": "İstanbul", "sort": "elo"})
    await client.aclose()

    params = dict(recorder.requests[0].url.params)
    assert params["city"] == "İstanbul"
    assert "sort" not in params
    assert params["page"] == "2"
    assert [listing.team_name for listing in page.items] == ["Kartallar"]


@pytest.mark.asyncio
async def test_create_listing_validates_range_and_match_type(store):
    client, recorder = make_client(store, {
        ("POST", "/opponent-search/listings"): (201, envelope({"id": "o9", "title": "Maç"})),
    })
    service = ProposalService(client)

    with pytest.raises(ClientValidationError) as backwards:
        await service.create_listing(1, "Maç", "2025-06-10", "2025-06-01")
    with pytest.raises(ClientValidationError) as unknown:
        await service.create_listing(1, "Maç", "2025-06-01", "2025-06-10", match_type="league")
    listing = await service.create_listing(1, "Maç", "2025-06-01", "2025-06-10", city="İstanbul")
    await client.aclose()

    assert backwards.value.key == "validation.date_range"
    assert unknown.value.key == "validation.invalid_choice"
    assert listing.id == "o9"
    assert _body(recorder.requests[0]) == {
        "title": "Maç",
        "preferredDateStart": "2025-06-01",
        "preferredDateEnd": "2025-06-10",
        "matchType": "friendly",
        "city": "İstanbul",
    }


@pytest.mark.asyncio
async def test_proposal_targets_the_listing_team(store):
    client, recorder = make_client(store, {
        ("POST", "/opponent-search/proposals"): (201, envelope(message="Teklif gönderildi")),
    })
    service = ProposalService(client)
    listing = OpponentListing(id="o1", team_id="t7", field_size="7v7", match_duration=90)

    await service.send(1, listing, "2025-06-07", "20:00", message="Hadi")
    await client.aclose()

    assert _body(recorder.requests[0]) == {
        "opponentListingId": "o1",
        "targetTeamId": "t7",
        "proposedDate": "2025-06-07",
        "proposedTime": "20:00",
        "matchDuration": 90,
        "fieldSize": "7v7",
        "message": "Hadi",
    }


@pytest.mark.asyncio
async def test_proposal_answer_uses_response_status(store):
    client, recorder = make_client(store, {
        ("POST", "/opponent-search/proposals/p1/respond"): (200, envelope()),
    })
    service = ProposalService(client)

    await service.respond(1, "p1", True, response_message="Görüşürüz")
    await client.aclose()

    assert _body(recorder.requests[0]) == {"response": "accepted", "responseMessage": "Görüşürüz"}


@pytest.mark.asyncio
async def test_player_search_filters_drop_empty_values(store):
    client, recorder = make_client(store, {
        ("GET", "/player-search"): (200, envelope([{"id": "s1", "playersNeeded": 2, "joinedCount": 1}])),
    })
    service = PlayerSearchService(client)

    listings = await service.get_all(1, {"city": "İstanbul", "district": "", "page": 3})
    await client.aclose()

    assert dict(recorder.requests[0].url.params) == {"city": "İstanbul"}
    assert listings[0].spots_left == 1


@pytest.mark.asyncio
async def test_player_search_create_checks_count_and_description(store):
    client, recorder = make_client(store, {
        ("POST", "/player-search"): (201, envelope(message="İlan oluşturuldu")),
    })
    service = PlayerSearchService(client)

    with pytest.raises(ClientValidationError) as too_many:
        await service.create(1, "r1", 23, "Kaleci lazım")
    with pytest.raises(ClientValidationError) as blank:
        await service.create(1, "r1", 2, "  ")
    await service.create(1, "r1", 2, " Kaleci lazım ", positions=["Kaleci"], skill_level="intermediate")
    await client.aclose()

    assert too_many.value.key == "validation.players_needed"
    assert blank.value.key == "validation.description_required"
    assert _body(recorder.requests[0]) == {
        "reservationId": "r1",
        "playersNeeded": 2,
        "description": "Kaleci lazım",
        "preferredPositions": ["Kaleci"],
        "preferredSkillLevel": "intermediate",
    }


@pytest.mark.asyncio
async def test_player_search_membership_calls(store):
    client, recorder = make_client(store, {
        ("POST", "/player-search/s1/join"): (200, envelope(message="İstek gönderildi")),
        ("POST", "/player-search/s1/leave"): (200, envelope()),
        ("PATCH", "/player-search/s1/cancel"): (200, envelope()),
        ("PATCH", "/player-search/requests/q1/accept"): (200, envelope()),
        ("PATCH", "/player-search/requests/q2/reject"): (200, envelope()),
    })
    service = PlayerSearchService(client)

    assert await service.join(1, "s1") == "İstek gönderildi"
    await service.leave(1, "s1")
    await service.cancel(1, "s1")
    await service.respond_to_request(1, "q1", True)
    await service.respond_to_request(1, "q2", False)
    await client.aclose()

    assert _body(recorder.requests[0]) == {}
    assert [(request.method, request.url.path.rsplit("/", 1)[-1]) for request in recorder.requests] == [
        ("POST", "join"),
        ("POST", "leave"),
        ("PATCH", "cancel"),
        ("PATCH", "accept"),
        ("PATCH", "reject"),
    ]


@pytest.mark.asyncio
async def test_admin_venue_creation_is_validated_locally(store):
    client, recorder = make_client(store, {
        ("POST", "/admin/venues"): (201, envelope({"id": "v9", "name": "Moda", "location": "Kadıköy"})),
    })
    service = AdminService(client)

    with pytest.raises(ClientValidationError):
        await service.create_venue(1, "Moda", "", 400.0)
    with pytest.raises(ClientValidationError):
        await service.create_venue(1, "Moda", "Kadıköy", 0)
    venue = await service.create_venue(1, "Moda", "Kadıköy", 400.0)
    await client.aclose()

    assert venue.id == "v9"
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_admin_venue_update_falls_back_to_sent_row(store):
    client, recorder = make_client(store, {
        ("PUT", "/admin/venues/v1"): (200, envelope()),
    })
    service = AdminService(client)
    venue = AdminVenue(id="v1", name="Arena", location="Kadıköy", price_per_hour=600.0, is_active=False)

    result = await service.update_venue(1, venue)
    await client.aclose()

    assert result is venue
    assert _body(recorder.requests[0])["isActive"] is False
