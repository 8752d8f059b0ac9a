"""Players-wanted listings and the join requests sent to them."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from api.errors import ClientValidationError
from api.models import JoinRequest, PlayerSearchListing
from api.services.base import BaseService, parse_list
from infrastructure.constants import MAX_PLAYERS_NEEDED, endpoint

PLAYER_SEARCH_FILTERS = ('city', 'district', 'skillLevel', 'playerPosition')


class PlayerSearchService(BaseService):

    logger_name = 'PlayerSearchService'

    async def get_all(self, user_id: int, filters: Optional[Mapping[str, Any]] = None) -> List[PlayerSearchListing]:
        params = {key: value for key, value in (filters or {}).items() if key in PLAYER_SEARCH_FILTERS and value}
        response = await self.client.get(endpoint('player_search'), user_id=user_id, params=params)
        return parse_list(response.data, PlayerSearchListing.from_api)

    async def get_mine(self, user_id: int) -> List[PlayerSearchListing]:
        response = await self.client.get(endpoint('player_search_mine'), user_id=user_id)
        return parse_list(response.data, PlayerSearchListing.from_api)

    async def create(
        self,
        user_id: int,
        reservation_id: str,
        players_needed: int,
        description: str,
        positions: Sequence[str] = (),
        skill_level: Optional[str] = None,
    ) -> str:
        """Open a listing for one of the user's own reservations."""
        if not 1 <= players_needed <= MAX_PLAYERS_NEEDED:
            raise ClientValidationError(
                f"Players needed must be between 1 and {MAX_PLAYERS_NEEDED}",
                key='validation.players_needed',
            )
        if not (description or '').strip():
            raise ClientValidationError("A description is required", key='validation.description_required')
        payload = {
            'reservationId': reservation_id,
            'playersNeeded': players_needed,
            'description': description.strip(),
            'preferredPositions': list(positions),
        }
        if skill_level:
            payload['preferredSkillLevel'] = skill_level
        response = await self.client.post(endpoint('player_search'), user_id=user_id, json=payload)
        self.logger.info("User %s is looking for %s players for reservation %s", user_id, players_needed, reservation_id)
        return response.message or ''

    async def join(self, user_id: int, search_id: str, message: Optional[str] = None) -> str:
        payload = {'message': message} if message else {}
        response = await self.client.post(
            endpoint('player_search_join', search_id=search_id),
            user_id=user_id,
            json=payload,
        )
        self.logger.info("User %s asked to join player search %s", user_id, search_id)
        return response.message or ''

    async def leave(self, user_id: int, search_id: str) -> str:
        response = await self.client.post(endpoint('player_search_leave', search_id=search_id), user_id=user_id)
        self.logger.info("User %s left player search %s", user_id, search_id)
        return response.message or ''

    async def cancel(self, user_id: int, search_id: str) -> str:
        response = await self.client.patch(endpoint('player_search_cancel', search_id=search_id), user_id=user_id)
        self.logger.info("User %s cancelled player search %s", user_id, search_id)
        return response.message or ''

    async def get_requests(self, user_id: int, reservation_id: str) -> List[JoinRequest]:
        response = await self.client.get(
            endpoint('player_search_requests', reservation_id=reservation_id),
            user_id=user_id,
        )
        return parse_list(response.data, JoinRequest.from_api)

    async def respond_to_request(self, user_id: int, request_id: str, accept: bool) -> str:
        name = 'player_search_request_accept' if accept else 'player_search_request_reject'
        response = await self.client.patch(endpoint(name, request_id=request_id), user_id=user_id)
        self.logger.info("User %s answered join request %s accept=%s", user_id, request_id, accept)
        return response.message or ''


__all__ = ['PLAYER_SEARCH_FILTERS', 'PlayerSearchService']
