import json

import pytest

from users.guard import (
    REDIRECT_HOME,
    REDIRECT_LOGIN,
    NotAuthenticatedError,
    NotAuthorizedError,
    SessionGuard,
)
from users.models import UserRole
from users.session_store import SessionStore

PLAYER = {"id": "u-1", "email": "ali@example.com", "firstName": "Ali", "lastName": "Yılmaz", "userType": "player"}
ADMIN = {"id": "u-2", "email": "admin@example.com", "userType": "admin"}


@pytest.fixture
def store(tmp_path):
    return SessionStore(str(tmp_path / "sessions.json"))


def test_store_round_trips_session(store):
    saved = store.save(1, "tok-1", PLAYER)

    loaded = store.get(1)
    assert loaded == saved
    assert loaded.role is UserRole.PLAYER
    assert loaded.display_name == "Ali Yılmaz"
    assert store.get_token(1) == "tok-1"
    assert store.user_ids() == [1]


def test_store_rejects_incomplete_session(store):
    with pytest.raises(ValueError):
        store.save(1, "", PLAYER)
    with pytest.raises(ValueError):
        store.save(1, "tok", {"id": "u-1", "userType": "superuser"})

    assert store.get(1) is None


def test_malformed_record_on_disk_counts_as_absent(store, tmp_path):
    (tmp_path / "sessions.json").write_text(json.dumps({"1": {"token": "tok"}, "2": "garbage"}))

    assert store.get(1) is None
    assert store.get(2) is None
    assert store.user_ids() == []


def test_clear_reports_whether_anything_was_removed(store):
    store.save(1, "tok", PLAYER)

    assert store.clear(1) is True
    assert store.clear(1) is False
    assert store.get(1) is None


def test_update_profile_merges_fields(store):
    store.save(1, "tok", PLAYER)

    updated = store.update_profile(1, {"phone": "05321234567", "firstName": None})

    assert updated.profile["phone"] == "05321234567"
    assert updated.profile["firstName"] == "Ali"
    assert updated.token == "tok"
    assert store.update_profile(99, {"phone": "1"}) is None


def test_require_authenticated_reads_store_only(store):
    guard = SessionGuard(store)
    assert guard.require_authenticated(1) is False

    store.save(1, "tok", PLAYER)
    assert guard.require_authenticated(1) is True


def test_require_role_redirects(store):
    guard = SessionGuard(store)
    store.save(1, "tok", PLAYER)
    store.save(2, "tok", ADMIN)

    anonymous = guard.require_role(3, UserRole.PLAYER)
    assert anonymous.allowed is False
    assert anonymous.redirect == REDIRECT_LOGIN

    player_on_admin = guard.require_role(1, UserRole.ADMIN)
    assert player_on_admin.allowed is False
    assert player_on_admin.redirect == REDIRECT_HOME

    admin_on_player = guard.require_role(2, UserRole.PLAYER)
    assert admin_on_player.allowed is True
    assert admin_on_player.session.is_admin


def test_ensure_session_raises_matching_errors(store):
    guard = SessionGuard(store)
    store.save(1, "tok", PLAYER)

    with pytest.raises(NotAuthenticatedError):
        guard.ensure_session(5)
    with pytest.raises(NotAuthorizedError):
        guard.ensure_session(1, UserRole.ADMIN)
    assert guard.ensure_session(1).subject_id == "u-1"


def test_role_ranking():
    assert UserRole.ADMIN.allows(UserRole.VENUE_OWNER)
    assert UserRole.VENUE_OWNER.allows(UserRole.PLAYER)
    assert not UserRole.PLAYER.allows(UserRole.VENUE_OWNER)
    assert UserRole.parse("admin") is UserRole.ADMIN
    assert UserRole.parse("nobody") is None
