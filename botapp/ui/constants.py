"""Shared constants for Telegram UI helpers."""

from __future__ import annotations

ROLE_BADGES = {
    'admin': '👑',
    'venue_owner': '🏟️',
    'player': '⚽',
}

STATUS_BADGES = {
    'pending': '⏳',
    'confirmed': '✅',
    'cancelled': '❌',
    'completed': '🏁',
    'no_show': '🚷',
    'accepted': '✅',
    'rejected': '❌',
    'expired': '⌛',
}

VENUES_PER_PAGE = 8
SLOT_COLUMNS = 4

__all__ = ['ROLE_BADGES', 'SLOT_COLUMNS', 'STATUS_BADGES', 'VENUES_PER_PAGE']
