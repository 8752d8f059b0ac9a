"""Admin panel callback handlers."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Awaitable, Dict, Optional

from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError, UnauthorizedError
from api.models import Page
from botapp.error_handler import ErrorHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import expect_input, get_session_state, reset_flow
from botapp.notifications import ToastKind
from botapp.ui.telegram_ui import TelegramUI
from botapp.validation import ValidationHelpers
from infrastructure.constants import RESERVATION_STATUSES, USER_TYPES
from listing.pagination import PaginatedList


class AdminHandler(CallbackResponseMixin):
    """
    Admin screens. Every route here is registered with the admin role, so
    the guard has already run by the time a method is entered.

    The four lists are :class:`PaginatedList` instances kept in the user's
    :class:`AdminState`; paging, filtering and every mutation go back to the
    server.
    """

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------
    async def handle_admin_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reset_flow(context, 'admin')
        tr = self._translator(update, context)
        try:
            stats = await self.deps.admin_service.get_stats(self._user_id(update))
        except ApiError as exc:
            await self._show_api_error(update, context, exc)
            return
        await self._render(
            update,
            TelegramUI.format_admin_dashboard(stats, tr.get_language()),
            TelegramUI.create_admin_menu_keyboard(tr.get_language()),
        )

    async def handle_statistics(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        tr = self._translator(update, context)
        back = TelegramUI.create_back_keyboard('menu_admin', tr.get_language())
        try:
            stats = await self.deps.admin_service.get_detailed_statistics(self._user_id(update))
        except ApiError as exc:
            await self._show_api_error(update, context, exc, back)
            return
        await self._render(update, TelegramUI.format_detailed_statistics(stats, tr.get_language()), back)

    # ------------------------------------------------------------------
    # List plumbing
    # ------------------------------------------------------------------
    def _list_for(self, update: Update, context: ContextTypes.DEFAULT_TYPE, name: str) -> PaginatedList:
        """Return the admin list ``name``, creating it on first use."""
        state = get_session_state(context).admin
        existing = getattr(state, name)
        if existing is not None:
            return existing

        user_id = self._user_id(update)
        service = self.deps.admin_service

        async def fetch_users(page: int, limit: int, filters: Dict[str, Any]) -> Page:
            return await service.list_users(
                user_id, page, limit, search=filters.get('search'), user_type=filters.get('user_type'),
            )

        async def fetch_reservations(page: int, limit: int, filters: Dict[str, Any]) -> Page:
            return await service.list_reservations(user_id, page, limit, status=filters.get('status'))

        async def fetch_teams(page: int, limit: int, filters: Dict[str, Any]) -> Page:
            return await service.list_teams(user_id, page, limit, search=filters.get('search'))

        async def fetch_venues(page: int, limit: int, filters: Dict[str, Any]) -> Page:
            return await service.list_venues(user_id, page, limit, search=filters.get('search'))

        fetchers = {
            'users': fetch_users,
            'reservations': fetch_reservations,
            'teams': fetch_teams,
            'venues': fetch_venues,
        }
        paginated = PaginatedList(fetchers[name], limit=self.deps.config.api.page_limit, logger=self.logger)
        setattr(state, name, paginated)
        return paginated

    async def _render_list(self, update: Update, context: ContextTypes.DEFAULT_TYPE, name: str,
                           notice: Optional[str] = None) -> None:
        paginated = self._list_for(update, context, name)
        tr = self._translator(update, context)
        language = tr.get_language()

        text = TelegramUI.format_admin_list_message(
            f"admin.{name}_title",
            paginated.state,
            paginated.filters,
            not paginated.items,
            language,
            error=paginated.error,
        )
        if notice:
            text = f"{notice}\n\n{text}"

        if name == 'users':
            keyboard = TelegramUI.create_admin_users_keyboard(paginated.items, paginated.state, paginated.filters, language)
        elif name == 'reservations':
            keyboard = TelegramUI.create_admin_reservations_keyboard(paginated.items, paginated.state, paginated.filters, language)
        elif name == 'venues':
            keyboard = TelegramUI.create_admin_venues_keyboard(paginated.items, paginated.state, language)
        else:
            keyboard = TelegramUI.create_admin_teams_keyboard(paginated.items, paginated.state, language)
        await self._render(update, text, keyboard)

    async def _fetch(self, call: Awaitable[bool]) -> bool:
        """Await a list fetch. False means the session expired and the screen stops here."""
        try:
            await call
        except UnauthorizedError:
            self.logger.info("Admin list fetch stopped: session expired")
            return False
        return True

    async def _open_list(self, update: Update, context: ContextTypes.DEFAULT_TYPE, name: str) -> None:
        paginated = self._list_for(update, context, name)
        if not await self._fetch(paginated.refresh()):
            return
        await self._render_list(update, context, name)

    async def handle_page(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """``admin_page_<list>_prev`` / ``admin_page_<list>_next``."""
        name, _, direction = self._callback_suffix(update, 'admin_page_').rpartition('_')
        if name not in ('users', 'reservations', 'teams', 'venues'):
            return
        paginated = self._list_for(update, context, name)
        if direction == 'next':
            fetched = await self._fetch(paginated.next_page())
        elif direction == 'prev':
            fetched = await self._fetch(paginated.previous_page())
        else:
            return
        if not fetched:
            return
        await self._render_list(update, context, name)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    async def handle_users(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        get_session_state(context).pending_input = None
        await self._open_list(update, context, 'users')

    async def handle_user_type_filter(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        value = self._callback_suffix(update, 'admin_ufilter_')
        if value != 'all' and value not in USER_TYPES:
            return
        paginated = self._list_for(update, context, 'users')
        if not await self._fetch(paginated.set_filters(user_type=None if value == 'all' else value)):
            return
        await self._render_list(update, context, 'users')

    async def handle_user_search_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        expect_input(context, 'admin_user_search')
        tr = self._translator(update, context)
        await self._render(update, tr.t("admin.search_prompt"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_user_search_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_search_term(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'search', value)
            return
        get_session_state(context).pending_input = None
        if not await self._fetch(self._list_for(update, context, 'users').set_filters(search=value)):
            return
        await self._render_list(update, context, 'users')

    async def handle_user_detail(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        user_id = self._callback_suffix(update, 'admin_uview_')
        paginated = self._list_for(update, context, 'users')
        user = next((item for item in paginated.items if item.id == user_id), None)
        if user is None:
            await self._render_list(update, context, 'users')
            return
        get_session_state(context).admin.selected_user = user
        await self._render_user(update, context)

    async def _render_user(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        user = get_session_state(context).admin.selected_user
        tr = self._translator(update, context)
        text = TelegramUI.format_admin_user_detail(user, tr.get_language())
        if notice:
            text = f"{notice}\n\n{text}"
        await self._render(update, text, TelegramUI.create_admin_user_detail_keyboard(user, tr.get_language()))

    async def handle_user_toggle(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).admin
        user = state.selected_user
        if user is None:
            await self.handle_users(update, context)
            return

        tr = self._translator(update, context)
        paginated = self._list_for(update, context, 'users')
        target_active = not user.is_active
        try:
            await paginated.mutate(
                lambda: self.deps.admin_service.update_user_status(self._user_id(update), user.id, target_active)
            )
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('admin_users', tr.get_language()))
            return

        state.selected_user = self._fresh_user(paginated, user.id) or replace(user, is_active=target_active)
        await self._toast(update, context, tr.t("admin.user_activated" if target_active else "admin.user_deactivated"))
        await self._render_user(update, context)

    async def handle_user_type_change(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).admin
        user = state.selected_user
        user_type = self._callback_suffix(update, 'admin_utype_')
        if user is None:
            await self.handle_users(update, context)
            return

        tr = self._translator(update, context)
        paginated = self._list_for(update, context, 'users')
        try:
            await paginated.mutate(
                lambda: self.deps.admin_service.update_user_type(self._user_id(update), user.id, user_type)
            )
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('admin_users', tr.get_language()))
            return

        state.selected_user = self._fresh_user(paginated, user.id) or replace(user, user_type=user_type)
        await self._toast(update, context, tr.t("admin.user_type_changed", role=tr.t(f"role.{user_type}")))
        await self._render_user(update, context)

    async def handle_user_delete(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        user = get_session_state(context).admin.selected_user
        tr = self._translator(update, context)
        if user is None:
            await self.handle_users(update, context)
            return
        if user.is_admin:
            await self._toast(update, context, tr.t("admin.delete_locked"), ToastKind.WARNING)
            return
        await self._render(
            update,
            tr.t("admin.delete_user_confirm", name=user.display_name),
            TelegramUI.create_confirm_keyboard('admin_udelete_yes', f'admin_uview_{user.id}', tr.get_language()),
            parse_mode=None,
        )

    async def handle_user_delete_confirmed(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).admin
        user = state.selected_user
        if user is None:
            await self.handle_users(update, context)
            return

        tr = self._translator(update, context)
        paginated = self._list_for(update, context, 'users')
        try:
            await paginated.mutate(lambda: self.deps.admin_service.delete_user(self._user_id(update), user))
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('admin_users', tr.get_language()))
            return

        state.selected_user = None
        await self._toast(update, context, tr.t("admin.user_deleted"))
        await self._render_list(update, context, 'users')

    @staticmethod
    def _fresh_user(paginated: PaginatedList, user_id: str):
        return next((item for item in paginated.items if item.id == user_id), None)

    # ------------------------------------------------------------------
    # Reservations
    # ------------------------------------------------------------------
    async def handle_reservations(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._open_list(update, context, 'reservations')

    async def handle_reservation_status_filter(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        value = self._callback_suffix(update, 'admin_rfilter_')
        if value != 'all' and value not in RESERVATION_STATUSES:
            return
        paginated = self._list_for(update, context, 'reservations')
        if not await self._fetch(paginated.set_filters(status=None if value == 'all' else value)):
            return
        await self._render_list(update, context, 'reservations')

    async def handle_reservation_detail(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reservation_id = self._callback_suffix(update, 'admin_rview_')
        paginated = self._list_for(update, context, 'reservations')
        reservation = next((item for item in paginated.items if item.id == reservation_id), None)
        if reservation is None:
            await self._render_list(update, context, 'reservations')
            return
        get_session_state(context).admin.selected_reservation = reservation
        tr = self._translator(update, context)
        await self._render(
            update,
            TelegramUI.format_admin_reservation_detail(reservation, tr.get_language()),
            TelegramUI.create_admin_reservation_detail_keyboard(reservation, tr.get_language()),
        )

    async def handle_reservation_status_change(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).admin
        reservation = state.selected_reservation
        status = self._callback_suffix(update, 'admin_rstatus_')
        if reservation is None:
            await self.handle_reservations(update, context)
            return

        tr = self._translator(update, context)
        paginated = self._list_for(update, context, 'reservations')
        try:
            await paginated.mutate(
                lambda: self.deps.admin_service.update_reservation_status(self._user_id(update), reservation.id, status)
            )
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('admin_reservations', tr.get_language()))
            return

        updated = next((item for item in paginated.items if item.id == reservation.id), None)
        state.selected_reservation = updated or replace(reservation, status=status)
        await self._toast(update, context, tr.t("admin.status_updated", status=tr.t(f"status.{status}")))
        await self._render(
            update,
            TelegramUI.format_admin_reservation_detail(state.selected_reservation, tr.get_language()),
            TelegramUI.create_admin_reservation_detail_keyboard(state.selected_reservation, tr.get_language()),
        )

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------
    async def handle_teams(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        get_session_state(context).pending_input = None
        await self._open_list(update, context, 'teams')

    async def handle_team_search_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        expect_input(context, 'admin_team_search')
        tr = self._translator(update, context)
        await self._render(update, tr.t("admin.search_prompt"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_team_search_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_search_term(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'search', value)
            return
        get_session_state(context).pending_input = None
        if not await self._fetch(self._list_for(update, context, 'teams').set_filters(search=value)):
            return
        await self._render_list(update, context, 'teams')

    async def handle_team_search_clear(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if not await self._fetch(self._list_for(update, context, 'teams').set_filters(search=None)):
            return
        await self._render_list(update, context, 'teams')

    async def handle_team_detail(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        team_id = self._callback_suffix(update, 'admin_tview_')
        tr = self._translator(update, context)
        try:
            team = await self.deps.admin_service.get_team(self._user_id(update), team_id)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('admin_teams', tr.get_language()))
            return
        get_session_state(context).admin.selected_team = team
        await self._render(
            update,
            TelegramUI.format_admin_team_detail(team, tr.get_language()),
            TelegramUI.create_admin_team_detail_keyboard(tr.get_language()),
        )

    async def handle_team_delete(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        team = get_session_state(context).admin.selected_team
        if team is None:
            await self.handle_teams(update, context)
            return
        tr = self._translator(update, context)
        await self._render(
            update,
            tr.t("admin.delete_team_confirm", name=team.name),
            TelegramUI.create_confirm_keyboard('admin_tdelete_yes', f'admin_tview_{team.id}', tr.get_language()),
            parse_mode=None,
        )

    async def handle_team_delete_confirmed(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).admin
        team = state.selected_team
        if team is None:
            await self.handle_teams(update, context)
            return

        tr = self._translator(update, context)
        paginated = self._list_for(update, context, 'teams')
        try:
            await paginated.mutate(lambda: self.deps.admin_service.delete_team(self._user_id(update), team.id))
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('admin_teams', tr.get_language()))
            return

        state.selected_team = None
        await self._toast(update, context, tr.t("admin.team_deleted"))
        await self._render_list(update, context, 'teams')

    # ------------------------------------------------------------------
    # Venues
    # ------------------------------------------------------------------
    async def handle_venues(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context)
        state.pending_input = None
        state.admin.venue_draft = {}
        await self._open_list(update, context, 'venues')

    async def handle_venue_search_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        expect_input(context, 'admin_venue_search')
        tr = self._translator(update, context)
        await self._render(update, tr.t("admin.search_prompt"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_venue_search_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_search_term(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'search', value)
            return
        get_session_state(context).pending_input = None
        if not await self._fetch(self._list_for(update, context, 'venues').set_filters(search=value)):
            return
        await self._render_list(update, context, 'venues')

    async def handle_venue_search_clear(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if not await self._fetch(self._list_for(update, context, 'venues').set_filters(search=None)):
            return
        await self._render_list(update, context, 'venues')

    async def handle_venue_detail(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        venue_id = self._callback_suffix(update, 'admin_vview_')
        paginated = self._list_for(update, context, 'venues')
        venue = next((item for item in paginated.items if item.id == venue_id), None)
        if venue is None:
            await self._render_list(update, context, 'venues')
            return
        get_session_state(context).admin.selected_venue = venue
        await self._render_venue(update, context)

    async def _render_venue(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        venue = get_session_state(context).admin.selected_venue
        tr = self._translator(update, context)
        text = TelegramUI.format_admin_venue_detail(venue, tr.get_language())
        if notice:
            text = f"{notice}\n\n{text}"
        await self._render(update, text, TelegramUI.create_admin_venue_detail_keyboard(venue, tr.get_language()))

    async def _save_venue(self, update: Update, context: ContextTypes.DEFAULT_TYPE, changed) -> bool:
        """PUT the whole venue row; the detail screen shows the refetched row when it is on the page."""
        state = get_session_state(context).admin
        tr = self._translator(update, context)
        paginated = self._list_for(update, context, 'venues')
        try:
            saved = await paginated.mutate(lambda: self.deps.admin_service.update_venue(self._user_id(update), changed))
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('admin_venues', tr.get_language()))
            return False
        state.selected_venue = next((item for item in paginated.items if item.id == changed.id), None) or saved
        return True

    async def handle_venue_toggle(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        venue = get_session_state(context).admin.selected_venue
        if venue is None:
            await self.handle_venues(update, context)
            return
        tr = self._translator(update, context)
        target_active = not venue.is_active
        if not await self._save_venue(update, context, replace(venue, is_active=target_active)):
            return
        await self._toast(update, context, tr.t("admin.venue_activated" if target_active else "admin.venue_deactivated"))
        await self._render_venue(update, context)

    async def handle_venue_price_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if get_session_state(context).admin.selected_venue is None:
            await self.handle_venues(update, context)
            return
        expect_input(context, 'admin_venue_new_price')
        tr = self._translator(update, context)
        await self._render(update, tr.t("admin.venue_enter_price"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_venue_price_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        venue = get_session_state(context).admin.selected_venue
        price = self._parse_price(text)
        if price is None:
            await ErrorHandler.handle_validation_error(update, context, 'pricePerHour', 'validation.price_invalid')
            return
        get_session_state(context).pending_input = None
        if venue is None:
            await self.handle_venues(update, context)
            return
        tr = self._translator(update, context)
        if not await self._save_venue(update, context, replace(venue, price_per_hour=price)):
            return
        await self._render_venue(update, context, notice=f"✅ {tr.t('admin.venue_updated')}")

    async def handle_venue_delete(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        venue = get_session_state(context).admin.selected_venue
        if venue is None:
            await self.handle_venues(update, context)
            return
        tr = self._translator(update, context)
        await self._render(
            update,
            tr.t("admin.delete_venue_confirm", name=venue.name),
            TelegramUI.create_confirm_keyboard('admin_vdelete_yes', f'admin_vview_{venue.id}', tr.get_language()),
            parse_mode=None,
        )

    async def handle_venue_delete_confirmed(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).admin
        venue = state.selected_venue
        if venue is None:
            await self.handle_venues(update, context)
            return

        tr = self._translator(update, context)
        paginated = self._list_for(update, context, 'venues')
        try:
            await paginated.mutate(lambda: self.deps.admin_service.delete_venue(self._user_id(update), venue.id))
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('admin_venues', tr.get_language()))
            return

        state.selected_venue = None
        await self._toast(update, context, tr.t("admin.venue_deleted"))
        await self._render_list(update, context, 'venues')

    # Creation asks for name, then location, then hourly price.
    async def handle_venue_create_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        get_session_state(context).admin.venue_draft = {}
        expect_input(context, 'admin_venue_name')
        tr = self._translator(update, context)
        await self._render(update, tr.t("admin.venue_enter_name"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_venue_name_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        if not text.strip():
            await ErrorHandler.handle_validation_error(update, context, 'name', 'validation.venue_required')
            return
        get_session_state(context).admin.venue_draft['name'] = text.strip()
        expect_input(context, 'admin_venue_location')
        tr = self._translator(update, context)
        await self._reply(update, context, tr.t("admin.venue_enter_location"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_venue_location_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        if not text.strip():
            await ErrorHandler.handle_validation_error(update, context, 'location', 'validation.venue_required')
            return
        get_session_state(context).admin.venue_draft['location'] = text.strip()
        expect_input(context, 'admin_venue_price')
        tr = self._translator(update, context)
        await self._reply(update, context, tr.t("admin.venue_enter_price"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_venue_create_price_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        price = self._parse_price(text)
        if price is None:
            await ErrorHandler.handle_validation_error(update, context, 'pricePerHour', 'validation.price_invalid')
            return

        session = get_session_state(context)
        draft = session.admin.venue_draft
        session.pending_input = None
        tr = self._translator(update, context)
        paginated = self._list_for(update, context, 'venues')
        try:
            await paginated.mutate(
                lambda: self.deps.admin_service.create_venue(
                    self._user_id(update), draft.get('name', ''), draft.get('location', ''), price,
                )
            )
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('admin_venues', tr.get_language()))
            return

        session.admin.venue_draft = {}
        await self._render_list(update, context, 'venues', notice=f"✅ {tr.t('admin.venue_created')}")

    @staticmethod
    def _parse_price(text: str) -> Optional[float]:
        try:
            price = float((text or '').strip().replace(',', '.'))
        except ValueError:
            return None
        return price if price > 0 else None
