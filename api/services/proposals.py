"""Opponent listings and the match proposals exchanged between teams."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from api.errors import ClientValidationError
from api.models import MatchProposal, OpponentListing, Page
from api.services.base import BaseService, parse_list, parse_page
from infrastructure.constants import DEFAULT_PAGE_LIMIT, MATCH_TYPES, endpoint

OPPONENT_SEARCH_FILTERS = ('city', 'district', 'minElo', 'maxElo', 'dateStart', 'dateEnd', 'matchType', 'fieldSize')


class ProposalService(BaseService):

    logger_name = 'ProposalService'

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------
    async def search_listings(
        self,
        user_id: int,
        page: int = 1,
        limit: int = DEFAULT_PAGE_LIMIT,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> Page:
        """Other teams' open listings; the server leaves the user's own team out."""
        params: Dict[str, Any] = {key: value for key, value in (filters or {}).items() if key in OPPONENT_SEARCH_FILTERS}
        params.update(page=page, limit=limit)
        response = await self.client.get(endpoint('opponent_listings_search'), user_id=user_id, params=params)
        return parse_page(response.data, OpponentListing.from_api, 'listings', page=page, limit=limit)

    async def get_my_team_listings(self, user_id: int) -> List[OpponentListing]:
        response = await self.client.get(endpoint('opponent_listings_mine'), user_id=user_id)
        return parse_list(response.data, OpponentListing.from_api)

    async def create_listing(
        self,
        user_id: int,
        title: str,
        date_start: str,
        date_end: str,
        *,
        match_type: str = 'friendly',
        description: Optional[str] = None,
        city: Optional[str] = None,
        district: Optional[str] = None,
    ) -> OpponentListing:
        if not title or not date_start or not date_end:
            raise ClientValidationError("Title and date range are required", key='validation.listing_required')
        if date_end < date_start:
            raise ClientValidationError("The range ends before it starts", key='validation.date_range')
        if match_type not in MATCH_TYPES:
            raise ClientValidationError(f"Unknown match type: {match_type}", key='validation.invalid_choice')
        payload: Dict[str, Any] = {
            'title': title,
            'preferredDateStart': date_start,
            'preferredDateEnd': date_end,
            'matchType': match_type,
            'description': description,
            'city': city,
            'district': district,
        }
        response = await self.client.post(
            endpoint('opponent_listings'),
            user_id=user_id,
            json={key: value for key, value in payload.items() if value not in (None, '')},
        )
        self.logger.info("User %s opened opponent listing %r", user_id, title)
        return OpponentListing.from_api(response.data or {})

    # ------------------------------------------------------------------
    # Proposals
    # ------------------------------------------------------------------
    async def send(
        self,
        user_id: int,
        listing: OpponentListing,
        proposed_date: str,
        proposed_time: str,
        message: Optional[str] = None,
    ) -> str:
        """Propose a match to the team behind ``listing``."""
        payload: Dict[str, Any] = {
            'opponentListingId': listing.id,
            'targetTeamId': listing.team_id,
            'proposedDate': proposed_date,
            'proposedTime': proposed_time,
            'matchDuration': listing.match_duration,
        }
        if listing.field_size:
            payload['fieldSize'] = listing.field_size
        if message:
            payload['message'] = message
        response = await self.client.post(endpoint('proposals'), user_id=user_id, json=payload)
        self.logger.info("User %s proposed a match to team %s", user_id, listing.team_id)
        return response.message or ''

    async def get_received(self, user_id: int) -> List[MatchProposal]:
        response = await self.client.get(endpoint('proposals_received'), user_id=user_id)
        return parse_list(response.data, MatchProposal.from_api)

    async def get_sent(self, user_id: int) -> List[MatchProposal]:
        response = await self.client.get(endpoint('proposals_sent'), user_id=user_id)
        return parse_list(response.data, MatchProposal.from_api)

    async def respond(
        self,
        user_id: int,
        proposal_id: str,
        accept: bool,
        response_message: Optional[str] = None,
    ) -> str:
        payload: Dict[str, Any] = {'response': 'accepted' if accept else 'rejected'}
        if response_message:
            payload['responseMessage'] = response_message
        response = await self.client.post(
            endpoint('proposal_respond', proposal_id=proposal_id),
            user_id=user_id,
            json=payload,
        )
        self.logger.info("User %s answered proposal %s accept=%s", user_id, proposal_id, accept)
        return response.message or ''


__all__ = ['OPPONENT_SEARCH_FILTERS', 'ProposalService']
