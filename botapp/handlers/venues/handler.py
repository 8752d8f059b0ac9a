"""Venue list, filter pickers and venue detail callbacks."""

from __future__ import annotations

from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError
from botapp.error_handler import ErrorHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import expect_input, get_session_state, reset_flow
from botapp.ui.telegram_ui import TelegramUI
from botapp.ui.venues import page_count, page_slice
from botapp.validation import ValidationHelpers
from infrastructure.constants import VENUE_SORT_KEYS
from listing.filters import VenueFilters, unique_cities, unique_districts, view_venues


class VenueHandler(CallbackResponseMixin):
    """
    Venue browsing.

    The backend returns the whole venue list; search, city, district and
    sort are applied locally through :mod:`listing.filters`, and every
    filter change returns the view to its first page.
    """

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    async def handle_venues_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        session = get_session_state(context)
        if session.flow != 'venues' or not session.venues.venues:
            reset_flow(context, 'venues')
            if not await self._load_venues(update, context):
                return
        session.pending_input = None
        await self._render_list(update, context)

    async def _load_venues(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> bool:
        state = get_session_state(context).venues
        state.generation += 1
        generation = state.generation

        try:
            venues = await self.deps.venue_service.get_all(self._user_id(update))
        except ApiError as exc:
            if generation == state.generation:
                await self._show_api_error(update, context, exc)
            return False

        if generation != state.generation:
            self.logger.debug("Dropping stale venue list (gen %s, current %s)", generation, state.generation)
            return False

        state.venues = venues
        state.page = 1
        self.logger.info("Loaded %s venues for user %s", len(venues), self._user_id(update))
        return True

    async def _render_list(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).venues
        tr = self._translator(update, context)
        visible = view_venues(state.venues, state.filters)
        total_pages = page_count(len(visible))
        state.page = max(1, min(state.page, total_pages))

        text = TelegramUI.format_venue_list_message(visible, state.filters, len(visible), tr.get_language())
        keyboard = TelegramUI.create_venue_list_keyboard(
            page_slice(visible, state.page),
            state.page,
            total_pages,
            tr.get_language(),
        )
        await self._render(update, text, keyboard)

    async def _apply_filters(self, update: Update, context: ContextTypes.DEFAULT_TYPE, filters: VenueFilters) -> None:
        session = get_session_state(context)
        session.venues.filters = filters
        session.venues.page = 1
        session.pending_input = None
        await self._render_list(update, context)

    async def handle_page(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        try:
            page = int(self._callback_suffix(update, 'venue_page_'))
        except ValueError:
            return
        get_session_state(context).venues.page = page
        await self._render_list(update, context)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    async def handle_search_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        expect_input(context, 'venue_search')
        tr = self._translator(update, context)
        await self._render(
            update,
            tr.t("venues.search_prompt"),
            TelegramUI.create_back_keyboard('menu_venues', tr.get_language()),
        )

    async def handle_search_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_search_term(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(
                update,
                context,
                'search',
                value,
                reply_markup=TelegramUI.create_back_keyboard('menu_venues', self._translator(update, context).get_language()),
            )
            return
        state = get_session_state(context).venues
        await self._apply_filters(update, context, state.filters.with_changes(search=value))

    # ------------------------------------------------------------------
    # Sort / city / district pickers
    # ------------------------------------------------------------------
    async def handle_sort_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        tr = self._translator(update, context)
        current = get_session_state(context).venues.filters.sort_by
        await self._render(update, tr.t("venues.choose_sort"), TelegramUI.create_sort_keyboard(current, tr.get_language()))

    async def handle_sort_selection(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        key = self._callback_suffix(update, 'venue_sort_')
        if key not in VENUE_SORT_KEYS:
            return
        state = get_session_state(context).venues
        await self._apply_filters(update, context, state.filters.with_changes(sort_by=key))

    async def handle_city_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).venues
        state.city_options = unique_cities(state.venues)
        tr = self._translator(update, context)
        await self._render(
            update,
            tr.t("venues.choose_city"),
            TelegramUI.create_choice_keyboard(state.city_options, 'venue_city', state.filters.city, tr.get_language()),
        )

    async def handle_city_selection(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).venues
        city = self._pick_option(self._callback_suffix(update, 'venue_city_'), state.city_options)
        if city is None:
            return
        await self._apply_filters(update, context, state.filters.with_changes(city=city))

    async def handle_district_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).venues
        state.district_options = unique_districts(state.venues, state.filters.city or None)
        tr = self._translator(update, context)
        await self._render(
            update,
            tr.t("venues.choose_district"),
            TelegramUI.create_choice_keyboard(
                state.district_options,
                'venue_district',
                state.filters.district,
                tr.get_language(),
            ),
        )

    async def handle_district_selection(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).venues
        district = self._pick_option(self._callback_suffix(update, 'venue_district_'), state.district_options)
        if district is None:
            return
        await self._apply_filters(update, context, state.filters.with_changes(district=district))

    async def handle_clear_filters(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._apply_filters(update, context, VenueFilters())

    @staticmethod
    def _pick_option(suffix: str, options) -> Optional[str]:
        """``all`` maps to the empty filter; an index outside ``options`` is ignored."""
        if suffix == 'all':
            return ''
        try:
            return options[int(suffix)]
        except (ValueError, IndexError):
            return None

    # ------------------------------------------------------------------
    # Detail
    # ------------------------------------------------------------------
    async def handle_venue_detail(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        venue_id = self._callback_suffix(update, 'venue_view_')
        tr = self._translator(update, context)
        try:
            venue = await self.deps.venue_service.get_by_id(self._user_id(update), venue_id)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('menu_venues', tr.get_language()))
            return

        session = get_session_state(context)
        session.venues.venue = venue
        session.flow = 'venues'
        await self._render(
            update,
            TelegramUI.format_venue_detail(venue, tr.get_language()),
            TelegramUI.create_venue_detail_keyboard(venue, tr.get_language()),
        )
