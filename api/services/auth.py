"""Authentication calls and the session writes that follow them."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from api.errors import ApiError
from api.services.base import BaseService
from api.validation import validate_password
from infrastructure.constants import endpoint
from users.models import Session
from users.session_store import SessionStore


class AuthService(BaseService):
    """Login, registration, profile lookup and logout."""

    logger_name = 'AuthService'

    def __init__(self, client, store: SessionStore, **kwargs: Any) -> None:
        super().__init__(client, **kwargs)
        self.store = store

    async def login(self, user_id: int, email: str, password: str) -> Session:
        response = await self.client.post(
            endpoint('auth_login'),
            user_id=user_id,
            json={'email': email.strip(), 'password': password},
        )
        return self._persist(user_id, response.data)

    async def register(self, user_id: int, data: Mapping[str, Any]) -> Session:
        """
        Register a new account and sign the Telegram user in with it.

        Args:
            user_id: Telegram user id that will own the session
            data: Registration fields (email, password, firstName, lastName,
                  optional phone and userType)
        """
        validate_password(str(data.get('password') or ''))
        payload: Dict[str, Any] = {key: value for key, value in data.items() if value not in (None, '')}
        response = await self.client.post(endpoint('auth_register'), user_id=user_id, json=payload)
        return self._persist(user_id, response.data)

    async def get_profile(self, user_id: int) -> Dict[str, Any]:
        response = await self.client.get(endpoint('auth_profile'), user_id=user_id)
        return dict(response.data or {})

    def logout(self, user_id: int) -> bool:
        removed = self.store.clear(user_id)
        self.logger.info("User %s logged out (session removed=%s)", user_id, removed)
        return removed

    def current_session(self, user_id: int) -> Optional[Session]:
        return self.store.get(user_id)

    def _persist(self, user_id: int, data: Any) -> Session:
        token = data.get('token') if isinstance(data, Mapping) else None
        profile = data.get('user') if isinstance(data, Mapping) else None
        if not token or not isinstance(profile, Mapping):
            raise ApiError('Authentication response did not include a session')

        try:
            session = self.store.save(user_id, token, profile)
        except ValueError as exc:
            raise ApiError(str(exc)) from exc

        self.logger.info("User %s signed in as %s", user_id, session.role.value)
        return session


__all__ = ['AuthService']
