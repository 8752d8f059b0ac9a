"""Session guard consulted before any protected screen renders."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from users.models import Session, UserRole
from users.session_store import SessionStore

REDIRECT_LOGIN = 'login'
REDIRECT_HOME = 'home'


class SessionGuardError(RuntimeError):
    """Base error for guard failures raised by ``ensure_*`` helpers."""

    redirect = REDIRECT_LOGIN


class NotAuthenticatedError(SessionGuardError):
    """Raised when no valid session is stored for the user."""


class NotAuthorizedError(SessionGuardError):
    """Raised when the session role is below the required role."""

    redirect = REDIRECT_HOME


@dataclass(frozen=True)
class GuardDecision:
    """Outcome of a guard check: render, or redirect to ``redirect``."""

    allowed: bool
    session: Optional[Session] = None
    redirect: Optional[str] = None


class SessionGuard:
    """Pure reads of the session store; never issues a network call."""

    def __init__(self, store: SessionStore, *, logger: Optional[logging.Logger] = None) -> None:
        self.store = store
        self.logger = logger or logging.getLogger('SessionGuard')

    def require_authenticated(self, user_id: int) -> bool:
        """True only when a well-formed token + profile pair is stored."""
        try:
            return self.store.get(user_id) is not None
        except Exception as exc:
            self.logger.warning("Session lookup failed for %s: %s", user_id, exc)
            return False

    def require_role(self, user_id: int, role: UserRole) -> GuardDecision:
        """
        Check authentication and then privilege rank.

        Unauthenticated users are sent to login; authenticated users lacking
        the role are sent to the main menu instead.
        """
        try:
            session = self.store.get(user_id)
        except Exception as exc:
            self.logger.warning("Session lookup failed for %s: %s", user_id, exc)
            session = None

        if session is None:
            return GuardDecision(allowed=False, redirect=REDIRECT_LOGIN)

        if not session.role.allows(role):
            self.logger.warning(
                "User %s (%s) denied access requiring %s",
                user_id,
                session.role.value,
                role.value,
            )
            return GuardDecision(allowed=False, session=session, redirect=REDIRECT_HOME)

        return GuardDecision(allowed=True, session=session)

    def ensure_session(self, user_id: int, role: UserRole = UserRole.PLAYER) -> Session:
        """Return the session or raise the matching :class:`SessionGuardError`."""
        decision = self.require_role(user_id, role)
        if decision.allowed and decision.session is not None:
            return decision.session
        if decision.redirect == REDIRECT_HOME:
            raise NotAuthorizedError(role.value)
        raise NotAuthenticatedError()


__all__ = [
    'GuardDecision',
    'NotAuthenticatedError',
    'NotAuthorizedError',
    'REDIRECT_HOME',
    'REDIRECT_LOGIN',
    'SessionGuard',
    'SessionGuardError',
]
