"""
Constants Module - Centralized configuration values
===================================================

Single source of truth for the API endpoints, domain vocabularies and
limits used across the bot.
"""

# API
DEFAULT_API_URL = "http://localhost:5000/api/v1"
OVERLAPPING_RESERVATION_CODE = "OVERLAPPING_RESERVATION"

ENDPOINTS = {
    "auth_login": "/auth/login",
    "auth_register": "/auth/register",
    "auth_profile": "/auth/profile",
    "venues": "/venues",
    "venue": "/venues/{venue_id}",
    "reservations": "/reservations",
    "reservation": "/reservations/{reservation_id}",
    "reservation_cancel": "/reservations/{reservation_id}/cancel",
    "reservation_players": "/reservations/{reservation_id}/players",
    "available_slots": "/reservations/available-slots",
    "admin_stats": "/admin/stats",
    "admin_statistics": "/admin/statistics/detailed",
    "admin_users": "/admin/users",
    "admin_user": "/admin/users/{user_id}",
    "admin_user_status": "/admin/users/{user_id}/status",
    "admin_user_type": "/admin/users/{user_id}/type",
    "admin_reservations": "/admin/reservations",
    "admin_reservation_status": "/admin/reservations/{reservation_id}/status",
    "admin_teams": "/admin/teams",
    "admin_venues": "/admin/venues",
    "admin_venue": "/admin/venues/{venue_id}",
    "admin_team": "/admin/teams/{team_id}",
    "teams": "/teams",
    "my_team": "/teams/my-team",
    "team_update": "/teams/update",
    "team_logo": "/teams/logo",
    "team_search_players": "/teams/search-players",
    "team_invite": "/teams/invite",
    "team_notifications": "/teams/notifications",
    "team_notification_read": "/teams/notifications/{notification_id}/read",
    "team_notifications_read_all": "/teams/notifications/read-all",
    "my_invitations": "/teams/my-invitations",
    "invitation_respond": "/teams/invitations/{invitation_id}/respond",
    "opponent_listings": "/opponent-search/listings",
    "opponent_listings_search": "/opponent-search/listings/search",
    "opponent_listings_mine": "/opponent-search/listings/my-team",
    "proposals": "/opponent-search/proposals",
    "proposals_received": "/opponent-search/proposals/received",
    "proposals_sent": "/opponent-search/proposals/sent",
    "proposal_respond": "/opponent-search/proposals/{proposal_id}/respond",
    "ratings": "/ratings",
    "user_ratings": "/ratings/user/{user_id}",
    "profile_picture": "/users/profile-picture",
    "user_profile": "/users/profile",
    "change_password": "/users/change-password",
    "player_search": "/player-search",
    "player_search_mine": "/player-search/my/listings",
    "player_search_join": "/player-search/{search_id}/join",
    "player_search_leave": "/player-search/{search_id}/leave",
    "player_search_cancel": "/player-search/{search_id}/cancel",
    "player_search_requests": "/player-search/reservations/{reservation_id}/requests",
    "player_search_request_accept": "/player-search/requests/{request_id}/accept",
    "player_search_request_reject": "/player-search/requests/{request_id}/reject",
}

# Roles, ordered by privilege
USER_TYPES = ("player", "venue_owner", "admin")

# Reservations
RESERVATION_STATUSES = ("pending", "confirmed", "cancelled", "completed", "no_show")
TERMINAL_RESERVATION_STATUSES = frozenset({"cancelled", "completed", "no_show"})
PAYMENT_STATUSES = ("pending", "pre_authorized", "paid", "refunded", "failed")

# Invitations and match proposals
PROPOSAL_STATUSES = ("pending", "accepted", "rejected", "cancelled", "expired")
MATCH_TYPES = ("friendly", "competitive")

# Players wanted listings
PLAYER_POSITIONS = ("Kaleci", "Defans", "Orta Saha", "Forvet")
MAX_PLAYERS_NEEDED = 22

# Reservation list periods
RESERVATION_PERIODS = ("all", "upcoming", "past")

# Booking window
DEFAULT_OPENING_TIME = "08:00"
DEFAULT_CLOSING_TIME = "24:00"
DEFAULT_SLOT_MINUTES = 60
MAX_BOOKING_HOURS = 3
DEFAULT_PRICE_PER_HOUR = 500.0
BOOKING_DAYS_AHEAD = 14

# Lists
DEFAULT_PAGE_LIMIT = 20
VENUE_SORT_KEYS = ("name", "price-low", "price-high", "rating")

# Notifications
TOAST_MIN_SECONDS = 3.0
TOAST_MAX_SECONDS = 4.0
INVITATION_POLL_SECONDS = 30

# Client-side validation
MAX_UPLOAD_BYTES = 5 * 1024 * 1024
MIN_PASSWORD_LENGTH = 6

# Player ratings
RATING_MIN = 0
RATING_MAX = 100
DEFAULT_RATING_SCORE = 50
RATING_STEP = 10
RATING_CATEGORIES = ("speed", "technique", "passing", "physical")


def endpoint(name: str, **params: object) -> str:
    """Return the API path registered under ``name`` with ``params`` filled in."""
    return ENDPOINTS[name].format(**params)
