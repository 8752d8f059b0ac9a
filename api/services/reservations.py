"""Reservation calls, including the booked-slot lookup."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from api.models import BookedSlot, RateablePlayer, Reservation
from api.services.base import BaseService, parse_list
from infrastructure.constants import endpoint


class ReservationService(BaseService):

    async def get_my_reservations(self, user_id: int) -> List[Reservation]:
        response = await self.client.get(endpoint('reservations'), user_id=user_id)
        return parse_list(response.data, Reservation.from_api)

    async def get_by_id(self, user_id: int, reservation_id: str) -> Reservation:
        response = await self.client.get(
            endpoint('reservation', reservation_id=reservation_id),
            user_id=user_id,
        )
        return Reservation.from_api(response.data or {})

    async def get_available_slots(
        self,
        user_id: int,
        field_id: str,
        date: str,
    ) -> Tuple[str, List[BookedSlot]]:
        """Return the date echoed by the backend and the intervals already booked."""
        response = await self.client.get(
            endpoint('available_slots'),
            user_id=user_id,
            params={'fieldId': field_id, 'date': date},
        )
        data = response.data if isinstance(response.data, dict) else {}
        booked = []
        for slot in parse_list(data, BookedSlot.from_api, 'bookedSlots'):
            if not slot.start_time or not slot.end_time:
                self.logger.warning("Skipping booked slot without times on field %s %s", field_id, date)
                continue
            booked.append(slot)
        return str(data.get('date') or date), booked

    async def create(
        self,
        user_id: int,
        *,
        field_id: str,
        date: str,
        start_time: str,
        end_time: str,
        base_price: float,
        total_price: float,
        team_name: Optional[str] = None,
    ) -> Reservation:
        payload: Dict[str, Any] = {
            'fieldId': field_id,
            'reservationDate': date,
            'startTime': start_time,
            'endTime': end_time,
            'basePrice': base_price,
            'totalPrice': total_price,
        }
        if team_name:
            payload['teamName'] = team_name

        response = await self.client.post(endpoint('reservations'), user_id=user_id, json=payload)
        self.logger.info(
            "Reservation created for user %s: field=%s %s %s-%s",
            user_id,
            field_id,
            date,
            start_time,
            end_time,
        )
        return Reservation.from_api(response.data or {})

    async def cancel(self, user_id: int, reservation_id: str) -> None:
        await self.client.patch(
            endpoint('reservation_cancel', reservation_id=reservation_id),
            user_id=user_id,
        )
        self.logger.info("Reservation %s cancelled by user %s", reservation_id, user_id)

    async def get_players(self, user_id: int, reservation_id: str) -> List[RateablePlayer]:
        response = await self.client.get(
            endpoint('reservation_players', reservation_id=reservation_id),
            user_id=user_id,
        )
        return parse_list(response.data, RateablePlayer.from_api)


__all__ = ['ReservationService']
