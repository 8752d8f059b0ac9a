import pytest

from botapp.handlers.router import CallbackRouter, InputRouter
from tests.helpers import DummyContext, DummyUpdate
from users.guard import REDIRECT_HOME, REDIRECT_LOGIN, SessionGuard
from users.models import UserRole
from users.session_store import SessionStore

PLAYER = {"id": "u-1", "email": "ali@example.com", "userType": "player"}


class Recorder:
    def __init__(self):
        self.calls = []

    def handler(self, name):
        async def _handle(update, context, *args):
            self.calls.append((name,) + args)
        return _handle

    async def denied(self, update, context, decision):
        self.calls.append(("denied", decision.redirect))


@pytest.fixture
def guard(tmp_path):
    return SessionGuard(SessionStore(str(tmp_path / "sessions.json")))


@pytest.mark.asyncio
async def test_exact_route_wins_over_prefix_and_prefixes_match_in_order():
    rec = Recorder()
    router = CallbackRouter(rec.handler("default"))
    router.add_routes({
        "res_cancel_yes_": rec.handler("confirm"),
        "res_cancel_": rec.handler("ask"),
        "res_cancel_all": rec.handler("all"),
    })

    for data in ("res_cancel_all", "res_cancel_yes_r1", "res_cancel_r1", "unknown"):
        await router.dispatch(DummyUpdate(data), DummyContext())

    assert rec.calls == [("all",), ("confirm",), ("ask",), ("default",)]


@pytest.mark.asyncio
async def test_protected_route_redirects_to_login_without_session(guard):
    rec = Recorder()
    router = CallbackRouter(rec.handler("default"), guard=guard, on_denied=rec.denied)
    router.add_exact("menu_reservations", rec.handler("reservations"), UserRole.PLAYER)

    await router.dispatch(DummyUpdate("menu_reservations"), DummyContext())

    assert rec.calls == [("denied", REDIRECT_LOGIN)]


@pytest.mark.asyncio
async def test_admin_route_sends_player_home(guard):
    guard.store.save(1, "tok", PLAYER)
    rec = Recorder()
    router = CallbackRouter(rec.handler("default"), guard=guard, on_denied=rec.denied)
    router.add_exact("admin_panel", rec.handler("admin"), UserRole.ADMIN)
    router.add_exact("menu_venues", rec.handler("venues"), UserRole.PLAYER)

    await router.dispatch(DummyUpdate("admin_panel"), DummyContext())
    await router.dispatch(DummyUpdate("menu_venues"), DummyContext())

    assert rec.calls == [("denied", REDIRECT_HOME), ("venues",)]


@pytest.mark.asyncio
async def test_input_router_applies_guard(guard):
    rec = Recorder()
    inputs = InputRouter(guard=guard, on_denied=rec.denied)
    inputs.add("login_email", rec.handler("email"))
    inputs.add("venue_search", rec.handler("search"), UserRole.PLAYER)

    assert inputs.has("venue_search")
    assert not inputs.has(None)
    assert await inputs.dispatch(DummyUpdate(text="x"), DummyContext(), "missing", "x") is False

    await inputs.dispatch(DummyUpdate(text="a@b.co"), DummyContext(), "login_email", "a@b.co")
    await inputs.dispatch(DummyUpdate(text="saha"), DummyContext(), "venue_search", "saha")

    assert rec.calls == [("email", "a@b.co"), ("denied", REDIRECT_LOGIN)]
