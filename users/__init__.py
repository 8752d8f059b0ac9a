"""User sessions, persistence and access guards."""

from .guard import GuardDecision, SessionGuard
from .models import Session, UserRole
from .session_store import SessionStore

__all__ = ['GuardDecision', 'Session', 'SessionGuard', 'SessionStore', 'UserRole']
