from api.models import (
    AdminVenue,
    Field,
    Invitation,
    JoinRequest,
    MyTeam,
    OpponentListing,
    PlayerCandidate,
    PlayerSearchListing,
    Team,
    Venue,
)


def test_null_names_become_empty_strings():
    venue = Venue.from_api({"id": "v1", "name": None, "city": None, "fields": [{"id": "f1", "name": None}]})

    assert venue.name == ""
    assert venue.city == ""
    assert venue.fields[0].name == ""
    assert Field.from_api({"id": "f2", "name": None}, "v1").name == ""
    assert Team.from_api({"id": "t1", "name": None}).name == ""
    assert Invitation.from_api({"id": "i1", "teamName": None}).team_name == ""
    assert PlayerCandidate.from_api({"id": "u1", "username": None, "firstName": None}).display_name == ""
    assert AdminVenue.from_api({"id": "v1", "name": None, "location": None}).name == ""


def test_my_team_reads_nested_team_members_and_stats():
    team = MyTeam.from_api({
        "team": {"id": "t1", "name": "Yıldızlar", "captainId": "u-1", "logoUrl": "/uploads/t1.png"},
        "members": [{"userId": "u-1", "firstName": "Ali", "role": "captain"}, {"userId": "u-2", "email": "b@x.co"}],
        "stats": {"eloRating": 1120, "totalMatches": 8, "totalWins": 5, "winRate": "62.5"},
    })

    assert team.is_captain("u-1")
    assert not team.is_captain("u-2")
    assert not team.is_captain(None)
    assert [member.display_name for member in team.members] == ["Ali", "b@x.co"]
    assert (team.elo_rating, team.total_matches, team.win_rate) == (1120, 8, "62.5")


def test_opponent_listing_trims_dates():
    listing = OpponentListing.from_api({
        "id": "o1",
        "teamName": "Kartallar",
        "title": "Cumartesi maçı",
        "preferredDateStart": "2025-06-07T00:00:00.000Z",
        "preferredDateEnd": "2025-06-08T00:00:00.000Z",
        "matchType": "competitive",
    })

    assert (listing.date_start, listing.date_end) == ("2025-06-07", "2025-06-08")
    assert listing.match_type == "competitive"
    assert listing.match_duration == 60


def test_player_search_listing_counts_spots_and_reads_venue():
    listing = PlayerSearchListing.from_api({
        "id": "s1",
        "matchDate": "2025-06-07",
        "matchTime": "20:00:00",
        "playersNeeded": 3,
        "joinedCount": 5,
        "preferredPositions": ["Kaleci"],
        "venue": {"name": "Moda Saha", "city": "İstanbul", "district": "Kadıköy"},
    })

    assert listing.spots_left == 0
    assert listing.match_time == "20:00"
    assert (listing.venue_name, listing.city, listing.district) == ("Moda Saha", "İstanbul", "Kadıköy")
    assert listing.is_open


def test_join_request_falls_back_to_email_for_name():
    request = JoinRequest.from_api({"id": "q1", "userId": "u-9", "user": {"name": None, "email": "c@x.co", "elo": 980}})

    assert request.player_name == "c@x.co"
    assert request.player_elo == 980
    assert request.is_pending


def test_admin_venue_payload_round_trips_every_column():
    venue = AdminVenue.from_api({
        "id": "v1",
        "name": "Arena",
        "location": "Kadıköy",
        "price_per_hour": "600.00",
        "has_parking": True,
        "opening_time": "08:00:00",
        "closing_time": "23:00:00",
        "is_active": False,
    })
    payload = venue.to_payload()

    assert payload["pricePerHour"] == 600.0
    assert payload["hasParking"] is True
    assert (payload["openingTime"], payload["closingTime"]) == ("08:00", "23:00")
    assert payload["isActive"] is False
    assert "id" not in payload
