"""Players-wanted callbacks: browsing, joining, and the organizer's side."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError, ClientValidationError
from botapp.error_handler import ErrorHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import expect_input, get_session_state, reset_flow
from botapp.notifications import ToastKind
from botapp.ui.telegram_ui import TelegramUI
from botapp.validation import ValidationHelpers
from infrastructure.constants import PLAYER_POSITIONS
from listing.filters import unique_listing_cities, unique_listing_districts

MENU_FILTERS = ('city', 'district', 'playerPosition')


class PlayerSearchHandler(CallbackResponseMixin):
    """
    Players-wanted listings.

    Filters are sent to the server; the city and district choices offered
    are the ones present in the listings loaded so far. Listings joined
    in this session are remembered so they offer Leave instead of Join.
    """

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    async def handle_player_search(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reset_flow(context, 'player_search')
        await self._load_and_render(update, context)

    async def _load_and_render(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        state = get_session_state(context).player_search
        tr = self._translator(update, context)
        try:
            state.listings = await self.deps.player_search_service.get_all(self._user_id(update), state.filters)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_social(update, context))
            return

        text = TelegramUI.format_player_searches_message(state.listings, state.filters, tr.get_language())
        if notice:
            text = f"{notice}\n\n{text}"
        await self._render(
            update,
            text,
            TelegramUI.create_player_search_keyboard(state.listings, state.joined, state.filters, tr.get_language()),
        )

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------
    async def handle_filter_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        key = self._callback_suffix(update, 'ps_filter_')
        state = get_session_state(context).player_search
        if key == 'clear':
            state.filters = {}
            await self._load_and_render(update, context)
            return
        if key not in MENU_FILTERS:
            return

        if key == 'city':
            options = unique_listing_cities(state.listings)
        elif key == 'district':
            options = unique_listing_districts(state.listings, state.filters.get('city'))
        else:
            options = list(PLAYER_POSITIONS)
        current = state.filters.get(key, '')
        if current and current not in options:
            options.insert(0, current)

        state.picking = key
        state.options = options
        tr = self._translator(update, context)
        await self._render(
            update,
            tr.t(f"player_search.choose_{key}"),
            TelegramUI.create_filter_options_keyboard(options, current, tr.get_language()),
        )

    async def handle_filter_option(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).player_search
        choice = self._callback_suffix(update, 'ps_opt_')
        if not state.picking:
            await self._load_and_render(update, context)
            return

        if choice == 'all':
            state.filters.pop(state.picking, None)
        elif choice.isdigit() and int(choice) < len(state.options):
            state.filters[state.picking] = state.options[int(choice)]
        else:
            return
        # A district from another city would filter everything out
        if state.picking == 'city':
            state.filters.pop('district', None)
        state.picking = ''
        state.options = []
        await self._load_and_render(update, context)

    # ------------------------------------------------------------------
    # Join and leave
    # ------------------------------------------------------------------
    async def handle_join(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        search_id = self._callback_suffix(update, 'ps_join_')
        state = get_session_state(context).player_search
        tr = self._translator(update, context)
        try:
            message = await self.deps.player_search_service.join(self._user_id(update), search_id)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_search(update, context))
            return
        state.joined.add(search_id)
        await self._toast(update, context, message or tr.t("social.join_requested"))
        await self._load_and_render(update, context)

    async def handle_leave(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        search_id = self._callback_suffix(update, 'ps_leave_')
        state = get_session_state(context).player_search
        tr = self._translator(update, context)
        try:
            message = await self.deps.player_search_service.leave(self._user_id(update), search_id)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_search(update, context))
            return
        state.joined.discard(search_id)
        await self._toast(update, context, message or tr.t("player_search.left"), ToastKind.INFO)
        await self._load_and_render(update, context)

    # ------------------------------------------------------------------
    # The user's own listings
    # ------------------------------------------------------------------
    async def handle_mine(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).player_search
        tr = self._translator(update, context)
        try:
            state.mine = await self.deps.player_search_service.get_mine(self._user_id(update))
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_search(update, context))
            return
        await self._render(
            update,
            TelegramUI.format_my_player_searches(state.mine, tr.get_language()),
            TelegramUI.create_my_player_searches_keyboard(state.mine, tr.get_language()),
        )

    async def handle_cancel(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        search_id = self._callback_suffix(update, 'ps_cancel_')
        tr = self._translator(update, context)
        try:
            message = await self.deps.player_search_service.cancel(self._user_id(update), search_id)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_search(update, context))
            return
        self.logger.info("User %s closed player search %s", self._user_id(update), search_id)
        await self._toast(update, context, message or tr.t("player_search.cancelled"), ToastKind.INFO)
        await self.handle_mine(update, context)

    # ------------------------------------------------------------------
    # Organizer side, opened from a reservation's detail screen
    # ------------------------------------------------------------------
    async def handle_create_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reservation_id = self._callback_suffix(update, 'ps_create_')
        state = get_session_state(context).reservations
        if state.selected is None or state.selected.id != reservation_id:
            return
        state.players_needed = None
        expect_input(context, 'ps_players_needed')
        tr = self._translator(update, context)
        await self._render(update, tr.t("player_search.enter_players_needed"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_players_needed_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_players_needed(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'playersNeeded', value)
            return
        get_session_state(context).reservations.players_needed = int(value)
        expect_input(context, 'ps_description')
        tr = self._translator(update, context)
        await self._reply(update, context, tr.t("player_search.enter_description"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_description_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        session = get_session_state(context)
        state = session.reservations
        tr = self._translator(update, context)
        if state.selected is None or state.players_needed is None:
            session.pending_input = None
            await self._render(update, tr.t("error.generic"), TelegramUI.create_back_keyboard('menu_reservations', tr.get_language()))
            return

        back = TelegramUI.create_back_keyboard(f'res_view_{state.selected.id}', tr.get_language())
        try:
            message = await self.deps.player_search_service.create(
                self._user_id(update), state.selected.id, state.players_needed, text,
            )
        except ClientValidationError as exc:
            await ErrorHandler.handle_validation_error(update, context, 'description', exc.key)
            return
        except ApiError as exc:
            session.pending_input = None
            await self._show_api_error(update, context, exc, back)
            return

        session.pending_input = None
        state.players_needed = None
        await self._render(update, f"✅ {message or tr.t('player_search.created')}", back)

    async def handle_requests(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reservation_id = self._callback_suffix(update, 'ps_requests_')
        state = get_session_state(context).reservations
        tr = self._translator(update, context)
        try:
            state.requests = await self.deps.player_search_service.get_requests(self._user_id(update), reservation_id)
        except ApiError as exc:
            await self._show_api_error(
                update, context, exc, TelegramUI.create_back_keyboard(f'res_view_{reservation_id}', tr.get_language()),
            )
            return
        await self._render_requests(update, context, reservation_id)

    async def _render_requests(self, update: Update, context: ContextTypes.DEFAULT_TYPE, reservation_id: str) -> None:
        state = get_session_state(context).reservations
        tr = self._translator(update, context)
        await self._render(
            update,
            TelegramUI.format_join_requests(state.requests, tr.get_language()),
            TelegramUI.create_join_requests_keyboard(state.requests, reservation_id, tr.get_language()),
        )

    async def handle_request_accept(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._respond(update, context, self._callback_suffix(update, 'ps_req_accept_'), True)

    async def handle_request_reject(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._respond(update, context, self._callback_suffix(update, 'ps_req_reject_'), False)

    async def _respond(self, update: Update, context: ContextTypes.DEFAULT_TYPE, request_id: str, accept: bool) -> None:
        state = get_session_state(context).reservations
        reservation_id = state.selected.id if state.selected else ''
        tr = self._translator(update, context)
        try:
            message = await self.deps.player_search_service.respond_to_request(self._user_id(update), request_id, accept)
        except ApiError as exc:
            await self._show_api_error(
                update, context, exc, TelegramUI.create_back_keyboard(f'res_view_{reservation_id}', tr.get_language()),
            )
            return

        status = 'accepted' if accept else 'rejected'
        state.requests = [replace(item, status=status) if item.id == request_id else item for item in state.requests]
        await self._render_requests(update, context, reservation_id)
        await self._toast(
            update,
            context,
            message or tr.t(f"player_search.request_{status}"),
            ToastKind.SUCCESS if accept else ToastKind.INFO,
        )

    def _back_to_search(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        return TelegramUI.create_back_keyboard('social_search', self._translator(update, context).get_language())

    def _back_to_social(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        return TelegramUI.create_back_keyboard('menu_social', self._translator(update, context).get_language())
