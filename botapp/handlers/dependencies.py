"""Shared dependency container for callback domain handlers."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

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
from botapp.config import BotAppConfig
from botapp.notifications import Toast
from users.guard import SessionGuard
from users.session_store import SessionStore


@dataclass
class CallbackDependencies:
    logger: Any
    config: BotAppConfig
    session_store: SessionStore
    guard: SessionGuard
    auth_service: AuthService
    venue_service: VenueService
    reservation_service: ReservationService
    team_service: TeamService
    proposal_service: ProposalService
    rating_service: RatingService
    user_service: UserService
    admin_service: AdminService
    player_search_service: PlayerSearchService
    toast: Toast


__all__ = ["CallbackDependencies"]
