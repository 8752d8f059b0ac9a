"""Team screen callbacks: creation, roster invites, logo and notifications."""

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
from botapp.ui.telegram_ui import TelegramUI


class TeamHandler(CallbackResponseMixin):
    """
    The user's team.

    Roster changes (invite, description, logo) are captain-only; the buttons
    are hidden for other members and the backend refuses them anyway.
    """

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    async def handle_team(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reset_flow(context, 'team')
        await self._show_team(update, context)

    async def _show_team(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        state = get_session_state(context).team
        tr = self._translator(update, context)
        user_id = self._user_id(update)
        try:
            state.team = await self.deps.team_service.get_my_team(user_id)
            state.notifications = (
                await self.deps.team_service.get_notifications(user_id) if state.team else []
            )
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_social(update, context))
            return

        text = TelegramUI.format_team_message(state.team, tr.get_language())
        if notice:
            text = f"{notice}\n\n{text}"
        unread = sum(1 for item in state.notifications if not item.is_read)
        await self._render(
            update,
            text,
            TelegramUI.create_team_keyboard(state.team, self._is_captain(update, context), unread, tr.get_language()),
        )

    def _is_captain(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> bool:
        team = get_session_state(context).team.team
        session = self.deps.session_store.get(self._user_id(update))
        return bool(team and session and team.is_captain(session.subject_id))

    # ------------------------------------------------------------------
    # Create and describe
    # ------------------------------------------------------------------
    async def handle_create_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._prompt(update, context, 'team_name', 'teams.enter_name')

    async def handle_name_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        tr = self._translator(update, context)
        try:
            message = await self.deps.team_service.create_team(self._user_id(update), text)
        except ClientValidationError as exc:
            await ErrorHandler.handle_validation_error(update, context, 'name', exc.key)
            return
        except ApiError as exc:
            get_session_state(context).pending_input = None
            await self._show_api_error(update, context, exc, self._back_to_team(update, context))
            return

        get_session_state(context).pending_input = None
        await self._show_team(update, context, notice=f"✅ {message or tr.t('teams.created')}")

    async def handle_describe_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._prompt(update, context, 'team_description', 'teams.enter_description')

    async def handle_description_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        get_session_state(context).pending_input = None
        tr = self._translator(update, context)
        try:
            await self.deps.team_service.update_description(self._user_id(update), text.strip())
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_team(update, context))
            return
        await self._show_team(update, context, notice=f"✅ {tr.t('teams.updated')}")

    # ------------------------------------------------------------------
    # Invite
    # ------------------------------------------------------------------
    async def handle_invite_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._prompt(update, context, 'team_invite_search', 'teams.enter_username')

    async def handle_invite_search_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        term = (text or '').strip().lstrip('@')
        if not term:
            await ErrorHandler.handle_validation_error(update, context, 'username', 'validation.search_empty')
            return

        session = get_session_state(context)
        session.pending_input = None
        state = session.team
        tr = self._translator(update, context)
        try:
            state.candidates = await self.deps.team_service.search_players(self._user_id(update), term)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_team(update, context))
            return

        state.search_term = term
        await self._render(
            update,
            TelegramUI.format_candidates_message(state.candidates, term, tr.get_language()),
            TelegramUI.create_candidates_keyboard(state.candidates, tr.get_language()),
        )

    async def handle_invite_pick(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).team
        tr = self._translator(update, context)
        suffix = self._callback_suffix(update, 'team_pick_')
        if not suffix.isdigit() or int(suffix) >= len(state.candidates):
            await self._show_team(update, context)
            return

        candidate = state.candidates[int(suffix)]
        try:
            message = await self.deps.team_service.invite_player(self._user_id(update), candidate.id)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_team(update, context))
            return

        self.logger.info("User %s invited player %s", self._user_id(update), candidate.id)
        await self._toast(update, context, message or tr.t("teams.invited", name=candidate.display_name))
        await self._show_team(update, context)

    # ------------------------------------------------------------------
    # Logo
    # ------------------------------------------------------------------
    async def handle_logo_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._prompt(update, context, 'team_logo', 'teams.send_logo')

    async def handle_logo_upload(self, update: Update, context: ContextTypes.DEFAULT_TYPE, _value=None) -> None:
        tr = self._translator(update, context)
        upload = await self._read_upload(update, context, 'logo')
        if upload is None:
            return
        filename, content, content_type = upload

        get_session_state(context).pending_input = None
        try:
            await self.deps.team_service.upload_logo(self._user_id(update), filename, content, content_type)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_team(update, context))
            return

        await self._toast(update, context, tr.t("teams.logo_uploaded"))
        await self._show_team(update, context)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    async def handle_notifications(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).team
        try:
            state.notifications = await self.deps.team_service.get_notifications(self._user_id(update))
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_team(update, context))
            return
        await self._render_notifications(update, context)

    async def _render_notifications(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).team
        tr = self._translator(update, context)
        await self._render(
            update,
            TelegramUI.format_notifications_message(state.notifications, tr.get_language()),
            TelegramUI.create_notifications_keyboard(state.notifications, tr.get_language()),
        )

    async def handle_mark_read(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        notification_id = self._callback_suffix(update, 'team_nread_')
        state = get_session_state(context).team
        try:
            await self.deps.team_service.mark_notification_read(self._user_id(update), notification_id)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_team(update, context))
            return

        state.notifications = [
            replace(item, is_read=True) if item.id == notification_id else item
            for item in state.notifications
        ]
        await self._render_notifications(update, context)

    async def handle_mark_all_read(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).team
        try:
            await self.deps.team_service.mark_all_notifications_read(self._user_id(update))
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_team(update, context))
            return

        state.notifications = [replace(item, is_read=True) for item in state.notifications]
        await self._render_notifications(update, context)

    async def _prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE, kind: str, prompt_key: str) -> None:
        expect_input(context, kind)
        tr = self._translator(update, context)
        await self._render(update, tr.t(prompt_key), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    def _back_to_team(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        return TelegramUI.create_back_keyboard('social_team', self._translator(update, context).get_language())

    def _back_to_social(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        return TelegramUI.create_back_keyboard('menu_social', self._translator(update, context).get_language())
