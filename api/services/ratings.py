"""Player rating submission and aggregate lookups."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from api.errors import ApiError, UnauthorizedError
from api.models import PlayerRating
from api.services.base import BaseService
from infrastructure.constants import endpoint


class RatingService(BaseService):

    async def create(self, user_id: int, reservation_id: str, rating: PlayerRating) -> Dict[str, Any]:
        response = await self.client.post(
            endpoint('ratings'),
            user_id=user_id,
            json=rating.to_payload(reservation_id),
        )
        return dict(response.data or {})

    async def submit_all(
        self,
        user_id: int,
        reservation_id: str,
        drafts: Mapping[str, PlayerRating],
    ) -> Tuple[List[str], Dict[str, str]]:
        """
        Submit the given draft ratings one by one.

        A failed rating does not stop the others, but an expired session
        does: the remaining requests would only repeat the 401.

        Returns:
            Tuple of (player ids submitted, player id -> error message)

        Raises:
            UnauthorizedError: the session expired part way through
        """
        submitted: List[str] = []
        failed: Dict[str, str] = {}
        for player_id, rating in drafts.items():
            try:
                await self.create(user_id, reservation_id, rating)
            except UnauthorizedError:
                self.logger.info("Rating submit stopped after %s of %s: session expired", len(submitted), len(drafts))
                raise
            except ApiError as exc:
                self.logger.warning("Rating for %s failed: %s", player_id, exc.message)
                failed[player_id] = exc.message
            else:
                submitted.append(player_id)
        return submitted, failed

    async def get_user_ratings(self, user_id: int, rated_user_id: str) -> Dict[str, Any]:
        response = await self.client.get(
            endpoint('user_ratings', user_id=rated_user_id),
            user_id=user_id,
        )
        return dict(response.data or {})


__all__ = ['RatingService']
