"""Administrator dashboard calls; all lists are server-paginated."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from api.errors import ClientValidationError
from api.models import AdminUser, AdminVenue, Page, Reservation, Team
from api.services.base import BaseService, parse_page
from infrastructure.constants import DEFAULT_PAGE_LIMIT, RESERVATION_STATUSES, USER_TYPES, endpoint


class AdminService(BaseService):

    logger_name = 'AdminService'

    async def get_stats(self, user_id: int) -> Dict[str, Any]:
        response = await self.client.get(endpoint('admin_stats'), user_id=user_id)
        return dict(response.data or {})

    async def get_detailed_statistics(self, user_id: int) -> Dict[str, Any]:
        response = await self.client.get(endpoint('admin_statistics'), user_id=user_id)
        return dict(response.data or {})

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    async def list_users(
        self,
        user_id: int,
        page: int = 1,
        limit: int = DEFAULT_PAGE_LIMIT,
        search: Optional[str] = None,
        user_type: Optional[str] = None,
    ) -> Page:
        response = await self.client.get(
            endpoint('admin_users'),
            user_id=user_id,
            params={'page': page, 'limit': limit, 'search': search, 'userType': user_type},
        )
        return parse_page(response.data, AdminUser.from_api, 'users', page=page, limit=limit)

    async def update_user_status(self, user_id: int, target_id: str, is_active: bool) -> None:
        await self.client.patch(
            endpoint('admin_user_status', user_id=target_id),
            user_id=user_id,
            json={'isActive': is_active},
        )
        self.logger.info("Admin %s set user %s active=%s", user_id, target_id, is_active)

    async def update_user_type(self, user_id: int, target_id: str, user_type: str) -> None:
        if user_type not in USER_TYPES:
            raise ClientValidationError(f"Unknown user type: {user_type}", key='validation.invalid_choice')
        await self.client.patch(
            endpoint('admin_user_type', user_id=target_id),
            user_id=user_id,
            json={'userType': user_type},
        )
        self.logger.info("Admin %s set user %s type=%s", user_id, target_id, user_type)

    async def delete_user(self, user_id: int, target: AdminUser) -> None:
        """Delete an account; admin accounts are never deletable from here."""
        if target.is_admin:
            raise ClientValidationError(
                "Administrator accounts cannot be deleted",
                key='validation.admin_delete_blocked',
            )
        await self.client.delete(endpoint('admin_user', user_id=target.id), user_id=user_id)
        self.logger.warning("Admin %s deleted user %s", user_id, target.id)

    # ------------------------------------------------------------------
    # Reservations
    # ------------------------------------------------------------------
    async def list_reservations(
        self,
        user_id: int,
        page: int = 1,
        limit: int = DEFAULT_PAGE_LIMIT,
        status: Optional[str] = None,
    ) -> Page:
        response = await self.client.get(
            endpoint('admin_reservations'),
            user_id=user_id,
            params={'page': page, 'limit': limit, 'status': status},
        )
        return parse_page(response.data, Reservation.from_api, 'reservations', page=page, limit=limit)

    async def update_reservation_status(self, user_id: int, reservation_id: str, status: str) -> None:
        if status not in RESERVATION_STATUSES:
            raise ClientValidationError(f"Unknown status: {status}", key='validation.invalid_choice')
        await self.client.patch(
            endpoint('admin_reservation_status', reservation_id=reservation_id),
            user_id=user_id,
            json={'status': status},
        )
        self.logger.info("Admin %s set reservation %s status=%s", user_id, reservation_id, status)

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------
    async def list_teams(
        self,
        user_id: int,
        page: int = 1,
        limit: int = DEFAULT_PAGE_LIMIT,
        search: Optional[str] = None,
    ) -> Page:
        response = await self.client.get(
            endpoint('admin_teams'),
            user_id=user_id,
            params={'page': page, 'limit': limit, 'search': search},
        )
        return parse_page(response.data, Team.from_api, 'teams', page=page, limit=limit)

    async def get_team(self, user_id: int, team_id: str) -> Team:
        response = await self.client.get(endpoint('admin_team', team_id=team_id), user_id=user_id)
        data = response.data if isinstance(response.data, Mapping) else {}
        team_payload = dict(data.get('team') or {})
        team_payload['members'] = data.get('members') or []
        return Team.from_api(team_payload)

    async def delete_team(self, user_id: int, team_id: str) -> None:
        await self.client.delete(endpoint('admin_team', team_id=team_id), user_id=user_id)
        self.logger.warning("Admin %s deleted team %s", user_id, team_id)

    # ------------------------------------------------------------------
    # Venues
    # ------------------------------------------------------------------
    async def list_venues(
        self,
        user_id: int,
        page: int = 1,
        limit: int = DEFAULT_PAGE_LIMIT,
        search: Optional[str] = None,
    ) -> Page:
        response = await self.client.get(
            endpoint('admin_venues'),
            user_id=user_id,
            params={'page': page, 'limit': limit, 'search': search},
        )
        return parse_page(response.data, AdminVenue.from_api, 'venues', page=page, limit=limit)

    async def create_venue(self, user_id: int, name: str, location: str, price_per_hour: float) -> AdminVenue:
        if not (name or '').strip() or not (location or '').strip():
            raise ClientValidationError("Venue name and location are required", key='validation.venue_required')
        if price_per_hour <= 0:
            raise ClientValidationError("Price must be positive", key='validation.price_invalid')
        response = await self.client.post(
            endpoint('admin_venues'),
            user_id=user_id,
            json={'name': name.strip(), 'location': location.strip(), 'pricePerHour': price_per_hour},
        )
        self.logger.info("Admin %s created venue %s", user_id, name)
        return AdminVenue.from_api(response.data or {})

    async def update_venue(self, user_id: int, venue: AdminVenue) -> AdminVenue:
        """Write back every column of ``venue``; callers pass a copy with their changes applied."""
        response = await self.client.put(
            endpoint('admin_venue', venue_id=venue.id),
            user_id=user_id,
            json=venue.to_payload(),
        )
        self.logger.info("Admin %s updated venue %s", user_id, venue.id)
        data = response.data if isinstance(response.data, Mapping) else None
        return AdminVenue.from_api(data) if data else venue

    async def delete_venue(self, user_id: int, venue_id: str) -> None:
        await self.client.delete(endpoint('admin_venue', venue_id=venue_id), user_id=user_id)
        self.logger.warning("Admin %s deleted venue %s", user_id, venue_id)


__all__ = ['AdminService']
