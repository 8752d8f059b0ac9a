"""Venue catalogue calls."""

from __future__ import annotations

from typing import List, Optional

from api.models import Venue
from api.services.base import BaseService, parse_list
from infrastructure.constants import endpoint


class VenueService(BaseService):

    async def get_all(
        self,
        user_id: int,
        city: Optional[str] = None,
        district: Optional[str] = None,
    ) -> List[Venue]:
        response = await self.client.get(
            endpoint('venues'),
            user_id=user_id,
            params={'city': city, 'district': district},
        )
        return parse_list(response.data, Venue.from_api)

    async def get_by_id(self, user_id: int, venue_id: str) -> Venue:
        response = await self.client.get(endpoint('venue', venue_id=venue_id), user_id=user_id)
        return Venue.from_api(response.data or {})


__all__ = ['VenueService']
