import pytest

from api.models import PlayerRating, clamp_score


def test_clamp_score_bounds_and_fallback():
    assert clamp_score(-20) == 0
    assert clamp_score(140) == 100
    assert clamp_score("70") == 70
    assert clamp_score(None) == 50


def test_player_rating_clamps_on_create_and_update():
    rating = PlayerRating("u-7", speed=150, technique=-5)

    assert rating.speed == 100
    assert rating.technique == 0
    assert rating.set_score("passing", 110) == 100

    payload = rating.to_payload("r-1")
    assert payload["reservationId"] == "r-1"
    assert payload["ratedUserId"] == "u-7"
    assert payload["passingRating"] == 100
    assert payload["physicalRating"] == 50
    assert payload["showedUp"] is True


def test_player_rating_rejects_unknown_category():
    with pytest.raises(ValueError):
        PlayerRating("u-7").set_score("luck", 10)
