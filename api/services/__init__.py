"""Typed wrappers around the backend REST endpoints."""

from .admin import AdminService
from .auth import AuthService
from .player_search import PlayerSearchService
from .proposals import ProposalService
from .ratings import RatingService
from .reservations import ReservationService
from .teams import TeamService
from .users import UserService
from .venues import VenueService

__all__ = [
    'AdminService',
    'AuthService',
    'PlayerSearchService',
    'ProposalService',
    'RatingService',
    'ReservationService',
    'TeamService',
    'UserService',
    'VenueService',
]
