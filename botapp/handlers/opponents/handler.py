"""Opponent listing search, the team's own listings and match proposals."""

from __future__ import annotations

from typing import Any, Awaitable, Dict, Optional

from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError, UnauthorizedError
from api.models import Page
from botapp.error_handler import ErrorHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import expect_input, get_session_state, reset_flow
from botapp.ui.telegram_ui import TelegramUI
from botapp.validation import ValidationHelpers
from infrastructure.constants import MATCH_TYPES
from listing.pagination import PaginatedList


class OpponentHandler(CallbackResponseMixin):
    """
    Teams looking for an opponent.

    Browsing is server-paginated like the admin lists. Opening a listing and
    proposing a match are two short prompt chains whose answers live in
    :attr:`OpponentState.draft` until the final request is sent.
    """

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    def _listings(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> PaginatedList:
        state = get_session_state(context).opponents
        if state.listings is not None:
            return state.listings

        user_id = self._user_id(update)
        service = self.deps.proposal_service

        async def fetch(page: int, limit: int, filters: Dict[str, Any]) -> Page:
            return await service.search_listings(user_id, page, limit, filters)

        state.listings = PaginatedList(fetch, limit=self.deps.config.api.page_limit, logger=self.logger)
        return state.listings

    async def _fetch(self, call: Awaitable[bool]) -> bool:
        try:
            await call
        except UnauthorizedError:
            self.logger.info("Opponent listing fetch stopped: session expired")
            return False
        return True

    async def handle_opponents(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reset_flow(context, 'opponents')
        get_session_state(context).opponents.draft = {}
        if not await self._fetch(self._listings(update, context).refresh()):
            return
        await self._render_listings(update, context)

    async def _render_listings(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        paginated = self._listings(update, context)
        tr = self._translator(update, context)
        text = TelegramUI.format_opponent_listings_message(
            paginated.items, paginated.state, tr.get_language(), error=paginated.error,
        )
        if notice:
            text = f"{notice}\n\n{text}"
        await self._render(
            update,
            text,
            TelegramUI.create_opponent_listings_keyboard(paginated.items, paginated.state, tr.get_language()),
        )

    async def handle_page(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        direction = self._callback_suffix(update, 'opp_page_')
        paginated = self._listings(update, context)
        if direction == 'next':
            fetched = await self._fetch(paginated.next_page())
        elif direction == 'prev':
            fetched = await self._fetch(paginated.previous_page())
        else:
            return
        if not fetched:
            return
        await self._render_listings(update, context)

    async def handle_listing_detail(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        listing_id = self._callback_suffix(update, 'opp_view_')
        paginated = self._listings(update, context)
        listing = next((item for item in paginated.items if item.id == listing_id), None)
        if listing is None:
            await self._render_listings(update, context)
            return

        get_session_state(context).opponents.selected = listing
        tr = self._translator(update, context)
        await self._render(
            update,
            TelegramUI.format_opponent_listing_detail(listing, tr.get_language()),
            TelegramUI.create_opponent_listing_detail_keyboard(tr.get_language()),
        )

    async def handle_my_listings(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).opponents
        tr = self._translator(update, context)
        try:
            state.mine = await self.deps.proposal_service.get_my_team_listings(self._user_id(update))
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back(update, context))
            return
        await self._render(
            update,
            TelegramUI.format_my_opponent_listings(state.mine, tr.get_language()),
            self._back(update, context),
        )

    # ------------------------------------------------------------------
    # New listing: title, first date, last date, match type
    # ------------------------------------------------------------------
    async def handle_create_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        get_session_state(context).opponents.draft = {}
        expect_input(context, 'opp_title')
        tr = self._translator(update, context)
        await self._render(update, tr.t("opponents.enter_title"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_title_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        title = (text or '').strip()
        if not title:
            await ErrorHandler.handle_validation_error(update, context, 'title', 'validation.listing_required')
            return
        get_session_state(context).opponents.draft['title'] = title
        await self._ask(update, context, 'opp_date_start', 'opponents.enter_date_start')

    async def handle_date_start_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_date(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'preferredDateStart', value)
            return
        get_session_state(context).opponents.draft['date_start'] = value
        await self._ask(update, context, 'opp_date_end', 'opponents.enter_date_end')

    async def handle_date_end_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        session = get_session_state(context)
        is_valid, value = ValidationHelpers.validate_date(text)
        if is_valid and value < session.opponents.draft.get('date_start', ''):
            is_valid, value = False, 'validation.date_range'
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'preferredDateEnd', value)
            return

        session.opponents.draft['date_end'] = value
        session.pending_input = None
        tr = self._translator(update, context)
        await self._reply(update, context, tr.t("opponents.choose_match_type"), TelegramUI.create_match_type_keyboard(tr.get_language()))

    async def handle_match_type(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        match_type = self._callback_suffix(update, 'opp_type_')
        state = get_session_state(context).opponents
        draft = state.draft
        if match_type not in MATCH_TYPES or not draft.get('date_end'):
            await self.handle_opponents(update, context)
            return

        tr = self._translator(update, context)
        try:
            await self.deps.proposal_service.create_listing(
                self._user_id(update),
                draft['title'],
                draft['date_start'],
                draft['date_end'],
                match_type=match_type,
            )
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back(update, context))
            return

        state.draft = {}
        await self._toast(update, context, tr.t("opponents.created"))
        await self.handle_my_listings(update, context)

    # ------------------------------------------------------------------
    # Proposal to the selected listing: date, then time
    # ------------------------------------------------------------------
    async def handle_propose_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).opponents
        if state.selected is None:
            await self.handle_opponents(update, context)
            return
        state.draft = {}
        tr = self._translator(update, context)
        expect_input(context, 'opp_proposal_date')
        await self._render(
            update,
            tr.t("opponents.enter_proposal_date", start=state.selected.date_start, end=state.selected.date_end),
            TelegramUI.create_cancel_input_keyboard(tr.get_language()),
        )

    async def handle_proposal_date_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_date(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'proposedDate', value)
            return
        get_session_state(context).opponents.draft['proposed_date'] = value
        await self._ask(update, context, 'opp_proposal_time', 'opponents.enter_proposal_time')

    async def handle_proposal_time_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_time(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'proposedTime', value)
            return

        session = get_session_state(context)
        session.pending_input = None
        state = session.opponents
        tr = self._translator(update, context)
        if state.selected is None:
            await self.handle_opponents(update, context)
            return

        try:
            message = await self.deps.proposal_service.send(
                self._user_id(update), state.selected, state.draft.get('proposed_date', ''), value,
            )
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back(update, context))
            return

        state.draft = {}
        await self._render_listings(update, context, notice=f"✅ {message or tr.t('opponents.proposal_sent')}")

    async def _ask(self, update: Update, context: ContextTypes.DEFAULT_TYPE, kind: str, prompt_key: str) -> None:
        expect_input(context, kind)
        tr = self._translator(update, context)
        await self._reply(update, context, tr.t(prompt_key), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    def _back(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        return TelegramUI.create_back_keyboard('social_opponents', self._translator(update, context).get_language())
