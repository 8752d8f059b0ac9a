"""Session and role models for signed-in bot users."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class UserRole(Enum):
    """Account types known to the backend, ranked by privilege."""

    PLAYER = 'player'
    VENUE_OWNER = 'venue_owner'
    ADMIN = 'admin'

    @property
    def rank(self) -> int:
        return _ROLE_RANK[self]

    def allows(self, required: 'UserRole') -> bool:
        """Return True when this role equals or outranks ``required``."""
        return self.rank >= required.rank

    @classmethod
    def parse(cls, value: Any) -> Optional['UserRole']:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return None


_ROLE_RANK = {
    UserRole.PLAYER: 0,
    UserRole.VENUE_OWNER: 1,
    UserRole.ADMIN: 2,
}


@dataclass(frozen=True)
class Session:
    """
    Locally persisted proof of authentication.

    A session always carries both the bearer token and the profile returned
    by the login/registration response.
    """

    subject_id: str
    role: UserRole
    token: str
    profile: Dict[str, Any] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        first = self.profile.get('firstName') or self.profile.get('first_name') or ''
        last = self.profile.get('lastName') or self.profile.get('last_name') or ''
        name = f"{first} {last}".strip()
        return name or self.profile.get('email') or self.subject_id

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    def to_record(self) -> Dict[str, Any]:
        """Serialise into the ``{token, user}`` shape kept on disk."""
        return {'token': self.token, 'user': dict(self.profile)}

    @classmethod
    def from_record(cls, record: Any) -> Optional['Session']:
        """
        Build a session from a persisted record.

        Returns None for anything short of a well-formed token + profile pair,
        including an unknown role or a missing subject id.
        """
        if not isinstance(record, Mapping):
            return None

        token = record.get('token')
        profile = record.get('user')
        if not isinstance(token, str) or not token or not isinstance(profile, Mapping):
            return None

        subject_id = profile.get('id')
        role = UserRole.parse(profile.get('userType') or profile.get('user_type'))
        if subject_id in (None, '') or role is None:
            return None

        return cls(subject_id=str(subject_id), role=role, token=token, profile=dict(profile))


__all__ = ['Session', 'UserRole']
