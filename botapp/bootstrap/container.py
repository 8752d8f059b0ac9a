"""Dependency container wiring bot runtime components together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from api.client import ApiClient, UnauthorizedHandler
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
from monitoring.invitation_poller import InvitationPoller
from users.guard import SessionGuard
from users.session_store import SessionStore

from botapp.config import BotAppConfig
from botapp.handlers.callback_handlers import CallbackHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.notifications import Toast


@dataclass(frozen=True)
class BotDependencies:
    """Concrete dependency snapshot for the Telegram bot runtime."""

    config: BotAppConfig
    api_client: ApiClient
    session_store: SessionStore
    guard: SessionGuard
    team_service: TeamService
    toast: Toast
    invitation_poller: InvitationPoller
    callback_handler: CallbackHandler


class DependencyContainer:
    """Lazy dependency container with optional override support."""

    def __init__(
        self,
        config: BotAppConfig,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.config = config
        self._cache: Dict[str, Any] = {}
        if overrides:
            self._cache.update(overrides)

    # ------------------------------------------------------------------
    # Internal helpers
    def _resolve(self, key: str, factory: Callable[[], Any]) -> Any:
        if key not in self._cache:
            self._cache[key] = factory()
        return self._cache[key]

    def _service(self, key: str, service_cls) -> Any:
        return self._resolve(key, lambda: service_cls(self.api_client))

    # ------------------------------------------------------------------
    # Core dependencies
    @property
    def session_store(self) -> SessionStore:
        return self._resolve('session_store', lambda: SessionStore(self.config.paths.sessions_file))

    @property
    def guard(self) -> SessionGuard:
        return self._resolve('guard', lambda: SessionGuard(self.session_store))

    @property
    def api_client(self) -> ApiClient:
        """Cached HTTP client shared by every service."""

        def factory() -> ApiClient:
            return ApiClient(
                self.config.api.base_url,
                self.session_store,
                timeout=self.config.api.timeout_seconds,
            )

        return self._resolve('api_client', factory)

    @property
    def toast(self) -> Toast:
        return self._resolve('toast', lambda: Toast(duration=self.config.notifications.toast_duration_seconds))

    @property
    def auth_service(self) -> AuthService:
        return self._resolve('auth_service', lambda: AuthService(self.api_client, self.session_store))

    @property
    def user_service(self) -> UserService:
        return self._resolve('user_service', lambda: UserService(self.api_client, self.session_store))

    @property
    def team_service(self) -> TeamService:
        return self._service('team_service', TeamService)

    @property
    def invitation_poller(self) -> InvitationPoller:
        return self._resolve(
            'invitation_poller',
            lambda: InvitationPoller(self.team_service, self.session_store),
        )

    @property
    def callback_handler(self) -> CallbackHandler:

        def factory() -> CallbackHandler:
            deps = CallbackDependencies(
                logger=logging.getLogger('CallbackHandler'),
                config=self.config,
                session_store=self.session_store,
                guard=self.guard,
                auth_service=self.auth_service,
                venue_service=self._service('venue_service', VenueService),
                reservation_service=self._service('reservation_service', ReservationService),
                team_service=self.team_service,
                proposal_service=self._service('proposal_service', ProposalService),
                rating_service=self._service('rating_service', RatingService),
                user_service=self.user_service,
                admin_service=self._service('admin_service', AdminService),
                player_search_service=self._service('player_search_service', PlayerSearchService),
                toast=self.toast,
            )
            return CallbackHandler(deps)

        return self._resolve('callback_handler', factory)

    # ------------------------------------------------------------------
    def build_dependencies(self, on_unauthorized: Optional[UnauthorizedHandler] = None) -> BotDependencies:
        """Materialise and return all core dependencies."""

        client = self.api_client
        if on_unauthorized is not None:
            client.set_unauthorized_handler(on_unauthorized)

        return BotDependencies(
            config=self.config,
            api_client=client,
            session_store=self.session_store,
            guard=self.guard,
            team_service=self.team_service,
            toast=self.toast,
            invitation_poller=self.invitation_poller,
            callback_handler=self.callback_handler,
        )


__all__ = ['BotDependencies', 'DependencyContainer']
