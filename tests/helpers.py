"""Shared fakes and utilities for unit tests."""

from __future__ import annotations

import types
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import httpx

from api.client import ApiClient
from api.services import (
    AdminService,
    AuthService,
    PlayerSearchService,
    ProposalService,
    RatingService,
    ReservationService,
    TeamService,
    UserService,
    VenueService,
)
from botapp.config import load_bot_config
from botapp.handlers.dependencies import CallbackDependencies
from botapp.notifications import ToastKind
from infrastructure.settings import load_settings
from users.guard import SessionGuard
from users.session_store import SessionStore


class DummyLogger:
    """Lightweight stand-in for ``logging.Logger`` that records calls."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, Tuple[Any, ...], Dict[str, Any]]] = []

    def _record(self, level: str, *args: Any, **kwargs: Any) -> None:
        self.records.append((level, args, kwargs))

    def debug(self, *args: Any, **kwargs: Any) -> None:
        self._record("debug", *args, **kwargs)

    def info(self, *args: Any, **kwargs: Any) -> None:
        self._record("info", *args, **kwargs)

    def warning(self, *args: Any, **kwargs: Any) -> None:
        self._record("warning", *args, **kwargs)

    def error(self, *args: Any, **kwargs: Any) -> None:
        self._record("error", *args, **kwargs)

    def exception(self, *args: Any, **kwargs: Any) -> None:
        self._record("exception", *args, **kwargs)

    @property
    def messages(self) -> List[Tuple[str, Any]]:
        """Return formatted messages for quick assertions."""

        formatted: List[Tuple[str, Any]] = []
        for level, args, _kwargs in self.records:
            message: Any = args[0] if args else None
            if isinstance(message, str) and len(args) > 1:
                try:
                    message = message % args[1:]
                except (TypeError, ValueError):
                    pass
            formatted.append((level, message))
        return formatted

    def levels(self) -> List[str]:
        return [level for level, _args, _kwargs in self.records]


class DummyBot:
    """Records ``send_message`` / ``delete_message`` calls made through the bot API."""

    def __init__(self) -> None:
        self.sent: List[Dict[str, Any]] = []
        self.deleted: List[Tuple[int, int]] = []
        self._next_id = 100

    async def send_message(self, chat_id: int, text: str, **kwargs: Any):
        self._next_id += 1
        self.sent.append({'chat_id': chat_id, 'text': text, **kwargs})
        return types.SimpleNamespace(message_id=self._next_id, chat_id=chat_id)

    async def delete_message(self, chat_id: int, message_id: int) -> bool:
        self.deleted.append((chat_id, message_id))
        return True


class DummyQuery:
    def __init__(self, data: str, user_id: int = 1) -> None:
        self.data = data
        self.from_user = types.SimpleNamespace(id=user_id)
        self.message = types.SimpleNamespace(message_id=55, chat_id=user_id, text=None, reply_markup=None)
        self.edits: List[Tuple[str, Dict[str, Any]]] = []
        self.answered = 0

    async def answer(self, text: Optional[str] = None, **kwargs: Any) -> None:
        self.answered += 1

    async def edit_message_text(self, text: str, **kwargs: Any) -> None:
        self.edits.append((text, kwargs))


class DummyMessage:
    def __init__(self, text: str = '', user_id: int = 1) -> None:
        self.text = text
        self.chat_id = user_id
        self.message_id = 77
        self.photo = []
        self.document = None
        self.replies: List[Tuple[str, Dict[str, Any]]] = []

    async def reply_text(self, text: str, **kwargs: Any) -> None:
        self.replies.append((text, kwargs))

    async def delete(self) -> None:
        return None


class DummyUpdate:
    def __init__(self, data: Optional[str] = None, *, text: Optional[str] = None, user_id: int = 1) -> None:
        self.callback_query = DummyQuery(data, user_id) if data is not None else None
        self.message = DummyMessage(text, user_id) if text is not None else None
        self.effective_user = types.SimpleNamespace(id=user_id, language_code='en')
        self.effective_chat = types.SimpleNamespace(id=user_id)
        self.effective_message = self.message


class DummyContext:
    def __init__(self, bot: Optional[DummyBot] = None) -> None:
        self.user_data: Dict[str, Any] = {}
        self.bot = bot or DummyBot()
        self.error: Optional[Exception] = None


# ----------------------------------------------------------------------
# Handler harness: real services over an in-memory backend
# ----------------------------------------------------------------------
BASE_URL = "http://backend.test/api/v1"
PLAYER_PROFILE = {"id": "u-1", "email": "ali@example.com", "firstName": "Ali", "userType": "player"}
ADMIN_PROFILE = {"id": "a-1", "email": "admin@example.com", "firstName": "Ayse", "userType": "admin"}


def envelope(data=None, *, success=True, message=None, error=None):
    return {"success": success, "message": message, "data": data, "error": error}


class ApiRecorder:
    """Routes ``(method, path)`` to canned ``(status, body)`` responses and keeps every request."""

    def __init__(self, routes: Dict[Tuple[str, str], Tuple[int, Any]]) -> None:
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path.replace("/api/v1", "", 1))
        if key not in self.routes:
            raise AssertionError(f"Unexpected request {key}")
        status, body = self.routes[key]
        return httpx.Response(status, json=body)

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [
            request
            for request in self.requests
            if request.method == method and request.url.path.endswith(path)
        ]


class RecordingToast:
    """Stands in for :class:`botapp.notifications.Toast` and keeps what was shown."""

    def __init__(self) -> None:
        self.shown: List[Tuple[str, ToastKind]] = []

    async def show(self, bot, chat_id: int, message: str, kind: ToastKind = ToastKind.INFO, *,
                   duration: Optional[float] = None, language: Optional[str] = None) -> int:
        self.shown.append((message, kind))
        return len(self.shown)

    @property
    def messages(self) -> List[str]:
        return [message for message, _kind in self.shown]


@dataclass
class HandlerHarness:
    deps: CallbackDependencies
    backend: ApiRecorder
    client: ApiClient
    redirects: List[int] = field(default_factory=list)

    @property
    def toast(self) -> RecordingToast:
        return self.deps.toast


def make_handler_deps(tmp_path, routes: Dict[Tuple[str, str], Tuple[int, Any]], *,
                      user_id: int = 1, profile: Optional[Dict[str, Any]] = None) -> HandlerHarness:
    """Build handler dependencies for a signed-in user; each cleared session records one redirect."""

    store = SessionStore(str(tmp_path / "sessions.json"))
    store.save(user_id, "tok-1", profile or PLAYER_PROFILE)
    backend = ApiRecorder(routes)
    redirects: List[int] = []

    def on_unauthorized(expired_user: int, message: Optional[str] = None) -> None:
        redirects.append(expired_user)

    client = ApiClient(
        BASE_URL,
        store,
        transport=httpx.MockTransport(backend),
        logger=DummyLogger(),
        on_unauthorized=on_unauthorized,
    )
    deps = CallbackDependencies(
        logger=DummyLogger(),
        config=load_bot_config(load_settings({"SESSIONS_FILE": str(tmp_path / "sessions.json")})),
        session_store=store,
        guard=SessionGuard(store),
        auth_service=AuthService(client, store),
        venue_service=VenueService(client),
        reservation_service=ReservationService(client),
        team_service=TeamService(client),
        proposal_service=ProposalService(client),
        rating_service=RatingService(client),
        user_service=UserService(client, store),
        admin_service=AdminService(client),
        player_search_service=PlayerSearchService(client),
        toast=RecordingToast(),
    )
    return HandlerHarness(deps=deps, backend=backend, client=client, redirects=redirects)


def edited_texts(update: DummyUpdate) -> List[str]:
    return [text for text, _kwargs in update.callback_query.edits]


def button_callbacks(reply_markup) -> List[str]:
    return [button.callback_data for row in reply_markup.inline_keyboard for button in row]
