"""Profile maintenance calls for the signed-in user."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from api.services.base import BaseService
from api.validation import validate_password_change, validate_upload
from infrastructure.constants import endpoint
from users.session_store import SessionStore

PROFILE_FIELDS = ('firstName', 'lastName', 'phone')


class UserService(BaseService):

    logger_name = 'UserService'

    def __init__(self, client, store: SessionStore, **kwargs: Any) -> None:
        super().__init__(client, **kwargs)
        self.store = store

    async def upload_profile_picture(
        self,
        user_id: int,
        filename: str,
        content: bytes,
        content_type: str,
    ) -> Dict[str, Any]:
        validate_upload(len(content), content_type)
        response = await self.client.post(
            endpoint('profile_picture'),
            user_id=user_id,
            files={'profilePicture': (filename, content, content_type)},
        )
        data = dict(response.data or {})
        if 'profileData' in data:
            self.store.update_profile(user_id, {'profileData': data['profileData']})
        return data

    async def update_profile(self, user_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        payload = {key: value for key, value in data.items() if key in PROFILE_FIELDS}
        response = await self.client.put(endpoint('user_profile'), user_id=user_id, json=payload)
        self.store.update_profile(user_id, payload)
        return dict(response.data or {})

    async def change_password(
        self,
        user_id: int,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> str:
        validate_password_change(new_password, confirm_password)
        response = await self.client.post(
            endpoint('change_password'),
            user_id=user_id,
            json={'currentPassword': current_password, 'newPassword': new_password},
        )
        self.logger.info("User %s changed password", user_id)
        return response.message or ''


__all__ = ['PROFILE_FIELDS', 'UserService']
