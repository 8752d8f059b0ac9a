"""Player rating callbacks: roster, draft editor and bulk submit."""

from __future__ import annotations

from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError
from api.models import PlayerRating
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import RatingState, expect_input, get_session_state, reset_flow
from botapp.notifications import ToastKind
from botapp.ui.ratings import RATING_FLAGS
from botapp.ui.telegram_ui import TelegramUI
from botapp.ui.text_blocks import escape_telegram_markdown
from infrastructure.constants import RATING_CATEGORIES, RATING_STEP

MAX_COMMENT_LENGTH = 500


class RatingHandler(CallbackResponseMixin):
    """Drafts live in :class:`RatingState` until the user submits them all at once."""

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    async def handle_rating_start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reservation_id = self._callback_suffix(update, 'rate_start_')
        tr = self._translator(update, context)
        try:
            players = await self.deps.reservation_service.get_players(self._user_id(update), reservation_id)
        except ApiError as exc:
            await self._show_api_error(
                update, context, exc,
                TelegramUI.create_back_keyboard(f'res_view_{reservation_id}', tr.get_language()),
            )
            return

        session = reset_flow(context, 'ratings')
        session.ratings = RatingState(
            reservation_id=reservation_id,
            players=players,
            drafts={player.user_id: PlayerRating(rated_user_id=player.user_id) for player in players},
        )
        await self._render_overview(update, context)

    async def _render_overview(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        state = get_session_state(context).ratings
        state.current = None
        tr = self._translator(update, context)
        text = TelegramUI.format_rating_overview(state.players, state.drafts, sorted(state.edited), tr.get_language())
        if notice:
            text = f"{notice}\n\n{text}"
        await self._render(
            update,
            text,
            TelegramUI.create_rating_players_keyboard(
                state.players, state.drafts, sorted(state.edited), state.reservation_id, tr.get_language()
            ),
        )

    async def _render_editor(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).ratings
        player = state.players[state.current]
        draft = state.drafts[player.user_id]
        tr = self._translator(update, context)
        await self._render(
            update,
            TelegramUI.format_rating_editor(player, draft, tr.get_language()),
            TelegramUI.create_rating_editor_keyboard(draft, tr.get_language()),
        )

    def _current_draft(self, context: ContextTypes.DEFAULT_TYPE) -> Optional[PlayerRating]:
        state = get_session_state(context).ratings
        if state.current is None or not 0 <= state.current < len(state.players):
            return None
        return state.drafts.get(state.players[state.current].user_id)

    async def handle_player_selection(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).ratings
        try:
            index = int(self._callback_suffix(update, 'rate_player_'))
        except ValueError:
            return
        if not 0 <= index < len(state.players) or state.players[index].user_id not in state.drafts:
            await self._render_overview(update, context)
            return
        state.current = index
        await self._render_editor(update, context)

    async def handle_score_adjust(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        draft = self._current_draft(context)
        if draft is None:
            await self._render_overview(update, context)
            return

        category, _, direction = self._callback_suffix(update, 'rate_adj_').rpartition('_')
        if category not in RATING_CATEGORIES or direction not in ('up', 'down'):
            return
        step = RATING_STEP if direction == 'up' else -RATING_STEP
        before = getattr(draft, category)
        if draft.set_score(category, before + step) == before:
            # Already at the bound
            return
        get_session_state(context).ratings.edited.add(draft.rated_user_id)
        await self._render_editor(update, context)

    async def handle_flag_toggle(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        draft = self._current_draft(context)
        if draft is None:
            await self._render_overview(update, context)
            return
        flag = self._callback_suffix(update, 'rate_flag_')
        if flag not in RATING_FLAGS:
            return
        setattr(draft, flag, not getattr(draft, flag))
        get_session_state(context).ratings.edited.add(draft.rated_user_id)
        await self._render_editor(update, context)

    async def handle_comment_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if self._current_draft(context) is None:
            await self._render_overview(update, context)
            return
        expect_input(context, 'rating_comment')
        tr = self._translator(update, context)
        await self._render(update, tr.t("ratings.comment_prompt"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_comment_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        session = get_session_state(context)
        session.pending_input = None
        draft = self._current_draft(context)
        if draft is None:
            await self._render_overview(update, context)
            return
        draft.comment = (text or '').strip()[:MAX_COMMENT_LENGTH]
        session.ratings.edited.add(draft.rated_user_id)
        await self._render_editor(update, context)

    async def handle_back(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._render_overview(update, context)

    async def handle_save(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Keep the current draft as is, even untouched defaults, and move to the next unsaved player."""
        state = get_session_state(context).ratings
        draft = self._current_draft(context)
        if draft is None:
            await self._render_overview(update, context)
            return
        state.edited.add(draft.rated_user_id)
        for index, player in enumerate(state.players):
            if player.user_id in state.drafts and player.user_id not in state.edited:
                state.current = index
                await self._render_editor(update, context)
                return
        await self._render_overview(update, context)

    async def handle_submit(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).ratings
        tr = self._translator(update, context)
        if not state.reservation_id or not state.drafts:
            await self._render_overview(update, context)
            return

        # Only players the user actually rated or saved are sent
        rated = {player_id: draft for player_id, draft in state.drafts.items() if player_id in state.edited}
        if not rated:
            await self._toast(update, context, tr.t("ratings.nothing_to_submit"), ToastKind.WARNING)
            await self._render_overview(update, context)
            return

        try:
            submitted, failed = await self.deps.rating_service.submit_all(
                self._user_id(update),
                state.reservation_id,
                rated,
            )
        except ApiError as exc:
            await self._show_api_error(
                update, context, exc,
                TelegramUI.create_back_keyboard(f'res_view_{state.reservation_id}', tr.get_language()),
            )
            return
        for player_id in submitted:
            state.drafts.pop(player_id, None)
            state.edited.discard(player_id)
        self.logger.info(
            "User %s rated %s players for reservation %s (%s failed)",
            self._user_id(update), len(submitted), state.reservation_id, len(failed),
        )

        if failed:
            first_error = next(iter(failed.values()))
            await self._render_overview(
                update,
                context,
                notice=tr.t("ratings.partial_failure", failed=len(failed), reason=escape_telegram_markdown(first_error)),
            )
            await self._toast(update, context, tr.t("ratings.partial_failure_short", failed=len(failed)), ToastKind.WARNING)
            return

        reservation_id = state.reservation_id
        get_session_state(context).ratings = RatingState()
        await self._render(
            update,
            tr.t("ratings.submitted", count=len(submitted)),
            TelegramUI.create_back_keyboard(f'res_view_{reservation_id}', tr.get_language()),
        )
        await self._toast(update, context, tr.t("ratings.submitted", count=len(submitted)))
