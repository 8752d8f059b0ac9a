"""Team membership, roster management, invitation and notification calls."""

from __future__ import annotations

from typing import List, Mapping, Optional

from api.errors import ClientValidationError
from api.models import Invitation, MyTeam, PlayerCandidate, TeamNotification
from api.services.base import BaseService, parse_list
from api.validation import validate_upload
from infrastructure.constants import endpoint


class TeamService(BaseService):

    logger_name = 'TeamService'

    async def get_my_team(self, user_id: int) -> Optional[MyTeam]:
        """The user's team, or None while they belong to none."""
        response = await self.client.get(endpoint('my_team'), user_id=user_id)
        return MyTeam.from_api(response.data) if response.data else None

    async def create_team(self, user_id: int, name: str, description: Optional[str] = None) -> str:
        name = (name or '').strip()
        if not name:
            raise ClientValidationError("Team name is required", key='validation.team_name_required')
        payload = {'name': name}
        if description:
            payload['description'] = description
        response = await self.client.post(endpoint('teams'), user_id=user_id, json=payload)
        self.logger.info("User %s created team %s", user_id, name)
        return response.message or ''

    async def update_description(self, user_id: int, description: str) -> str:
        response = await self.client.put(
            endpoint('team_update'),
            user_id=user_id,
            json={'description': description},
        )
        return response.message or ''

    async def upload_logo(self, user_id: int, filename: str, content: bytes, content_type: str) -> Optional[str]:
        """Replace the team logo; only the captain may. Returns the new logo URL."""
        validate_upload(len(content), content_type)
        response = await self.client.post(
            endpoint('team_logo'),
            user_id=user_id,
            files={'logo': (filename, content, content_type)},
        )
        data = response.data if isinstance(response.data, Mapping) else {}
        self.logger.info("User %s uploaded a team logo (%s bytes)", user_id, len(content))
        return data.get('logoUrl')

    async def search_players(self, user_id: int, username: str) -> List[PlayerCandidate]:
        response = await self.client.get(
            endpoint('team_search_players'),
            user_id=user_id,
            params={'username': username},
        )
        return parse_list(response.data, PlayerCandidate.from_api)

    async def invite_player(self, user_id: int, player_id: str, message: Optional[str] = None) -> str:
        payload = {'playerId': player_id}
        if message:
            payload['message'] = message
        response = await self.client.post(endpoint('team_invite'), user_id=user_id, json=payload)
        self.logger.info("User %s invited player %s", user_id, player_id)
        return response.message or ''

    async def get_my_invitations(self, user_id: int) -> List[Invitation]:
        response = await self.client.get(endpoint('my_invitations'), user_id=user_id)
        return parse_list(response.data, Invitation.from_api)

    async def respond_to_invitation(self, user_id: int, invitation_id: str, accept: bool) -> str:
        """Accept or reject an invitation and return the server's message."""
        response = await self.client.post(
            endpoint('invitation_respond', invitation_id=invitation_id),
            user_id=user_id,
            json={'accept': accept},
        )
        self.logger.info("User %s answered invitation %s accept=%s", user_id, invitation_id, accept)
        return response.message or ''

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    async def get_notifications(self, user_id: int) -> List[TeamNotification]:
        response = await self.client.get(endpoint('team_notifications'), user_id=user_id)
        return parse_list(response.data, TeamNotification.from_api)

    async def mark_notification_read(self, user_id: int, notification_id: str) -> None:
        await self.client.post(
            endpoint('team_notification_read', notification_id=notification_id),
            user_id=user_id,
        )

    async def mark_all_notifications_read(self, user_id: int) -> None:
        await self.client.post(endpoint('team_notifications_read_all'), user_id=user_id)


__all__ = ['TeamService']
