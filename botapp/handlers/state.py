"""Typed conversation state helpers for Telegram callback flows."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from telegram.ext import ContextTypes

from api.models import (
    AdminUser,
    AdminVenue,
    Invitation,
    JoinRequest,
    MatchProposal,
    MyTeam,
    OpponentListing,
    PlayerCandidate,
    PlayerRating,
    PlayerSearchListing,
    RateablePlayer,
    Reservation,
    Team,
    TeamNotification,
    Venue,
)
from listing.filters import VenueFilters
from listing.pagination import PaginatedList


@dataclass
class AuthFormState:
    """Values collected while the login or registration prompts run."""

    mode: Optional[str] = None
    email: str = ""
    password: str = ""
    first_name: str = ""
    last_name: str = ""


@dataclass
class VenueBrowseState:
    """State bucket for the venue list and its filters."""

    filters: VenueFilters = field(default_factory=VenueFilters)
    venues: List[Venue] = field(default_factory=list)
    page: int = 1
    venue: Optional[Venue] = None
    city_options: List[str] = field(default_factory=list)
    district_options: List[str] = field(default_factory=list)
    generation: int = 0


@dataclass
class BookingState:
    """State bucket for one field's booking flow."""

    venue: Optional[Venue] = None
    field_id: Optional[str] = None
    date: Optional[str] = None
    start: Optional[str] = None
    hours: Optional[int] = None
    resolver: Any = None


@dataclass
class ReservationListState:
    """The user's reservations, the period shown and the players-wanted drafting for one of them."""

    items: List[Reservation] = field(default_factory=list)
    period: str = "all"
    selected: Optional[Reservation] = None
    requests: List[JoinRequest] = field(default_factory=list)
    players_needed: Optional[int] = None


@dataclass
class RatingState:
    """Draft ratings for one reservation, kept until the bulk submit."""

    reservation_id: Optional[str] = None
    players: List[RateablePlayer] = field(default_factory=list)
    drafts: Dict[str, PlayerRating] = field(default_factory=dict)
    edited: Set[str] = field(default_factory=set)
    current: Optional[int] = None


@dataclass
class SocialState:
    invitations: List[Invitation] = field(default_factory=list)
    received: List[MatchProposal] = field(default_factory=list)
    sent: List[MatchProposal] = field(default_factory=list)


@dataclass
class TeamState:
    team: Optional[MyTeam] = None
    search_term: str = ""
    candidates: List[PlayerCandidate] = field(default_factory=list)
    notifications: List[TeamNotification] = field(default_factory=list)


@dataclass
class OpponentState:
    """Opponent listings being browsed and the listing or proposal being drafted."""

    listings: Optional[PaginatedList] = None
    mine: List[OpponentListing] = field(default_factory=list)
    selected: Optional[OpponentListing] = None
    draft: Dict[str, str] = field(default_factory=dict)


@dataclass
class PlayerSearchState:
    """Players-wanted listings with the server-side filters applied to them."""

    listings: List[PlayerSearchListing] = field(default_factory=list)
    mine: List[PlayerSearchListing] = field(default_factory=list)
    filters: Dict[str, str] = field(default_factory=dict)
    picking: str = ""
    options: List[str] = field(default_factory=list)
    joined: Set[str] = field(default_factory=set)


@dataclass
class AdminState:
    """Server-paginated admin lists and the row currently opened."""

    users: Optional[PaginatedList] = None
    reservations: Optional[PaginatedList] = None
    teams: Optional[PaginatedList] = None
    venues: Optional[PaginatedList] = None
    selected_user: Optional[AdminUser] = None
    selected_reservation: Optional[Reservation] = None
    selected_team: Optional[Team] = None
    selected_venue: Optional[AdminVenue] = None
    venue_draft: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ProfileEditState:
    """State bucket for profile edit flows."""

    current_password: str = ""
    new_password: str = ""


@dataclass
class CallbackSessionState:
    """Aggregate per-user callback session state."""

    flow: str = "main_menu"
    pending_input: Optional[str] = None
    auth: AuthFormState = field(default_factory=AuthFormState)
    venues: VenueBrowseState = field(default_factory=VenueBrowseState)
    booking: BookingState = field(default_factory=BookingState)
    reservations: ReservationListState = field(default_factory=ReservationListState)
    ratings: RatingState = field(default_factory=RatingState)
    social: SocialState = field(default_factory=SocialState)
    team: TeamState = field(default_factory=TeamState)
    opponents: OpponentState = field(default_factory=OpponentState)
    player_search: PlayerSearchState = field(default_factory=PlayerSearchState)
    admin: AdminState = field(default_factory=AdminState)
    profile: ProfileEditState = field(default_factory=ProfileEditState)


SESSION_KEY = "callback_state"


def session_from_user_data(user_data: Dict[str, Any]) -> CallbackSessionState:
    """Retrieve (or create) the session state stored in a ``user_data`` mapping."""

    state = user_data.get(SESSION_KEY)
    if isinstance(state, CallbackSessionState):
        return state

    state = CallbackSessionState()
    user_data[SESSION_KEY] = state
    return state


def get_session_state(context: ContextTypes.DEFAULT_TYPE) -> CallbackSessionState:
    """Retrieve (or create) the callback session state for the current user."""

    return session_from_user_data(context.user_data)


def reset_flow(context: ContextTypes.DEFAULT_TYPE, flow: str) -> CallbackSessionState:
    """Set the active flow identifier and drop any pending text prompt."""

    state = get_session_state(context)
    state.flow = flow
    state.pending_input = None
    return state


def expect_input(context: ContextTypes.DEFAULT_TYPE, kind: str) -> CallbackSessionState:
    """Route the user's next text message to the ``kind`` prompt."""

    state = get_session_state(context)
    state.pending_input = kind
    return state


def clear_session_state(user_data: Dict[str, Any]) -> None:
    """Remove all callback session state for a user, keeping the language choice."""

    user_data.pop(SESSION_KEY, None)


__all__ = [
    "AdminState",
    "AuthFormState",
    "BookingState",
    "CallbackSessionState",
    "OpponentState",
    "PlayerSearchState",
    "ProfileEditState",
    "RatingState",
    "ReservationListState",
    "SESSION_KEY",
    "SocialState",
    "TeamState",
    "VenueBrowseState",
    "clear_session_state",
    "expect_input",
    "get_session_state",
    "reset_flow",
    "session_from_user_data",
]
