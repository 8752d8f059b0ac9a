"""Social menu, team invitation and match-proposal callbacks."""

from __future__ import annotations

from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import get_session_state, reset_flow
from botapp.notifications import ToastKind
from botapp.ui.telegram_ui import TelegramUI


class SocialHandler(CallbackResponseMixin):
    """
    Social screens.

    A successful accept or reject removes the item from the local list
    instead of refetching, so the screen updates without another round trip.
    """

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    async def handle_social_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reset_flow(context, 'social')
        state = get_session_state(context).social
        tr = self._translator(update, context)
        await self._render(
            update,
            f"*{tr.t('social.title')}*",
            TelegramUI.create_social_menu_keyboard(len(state.invitations), tr.get_language()),
        )

    # ------------------------------------------------------------------
    # Invitations
    # ------------------------------------------------------------------
    async def handle_invitations(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).social
        try:
            state.invitations = await self.deps.team_service.get_my_invitations(self._user_id(update))
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_social(update, context))
            return
        await self._render_invitations(update, context)

    async def _render_invitations(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).social
        tr = self._translator(update, context)
        await self._render(
            update,
            TelegramUI.format_invitations_message(state.invitations, tr.get_language()),
            TelegramUI.create_invitations_keyboard(state.invitations, tr.get_language()),
        )

    async def handle_invitation_accept(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._respond_to_invitation(update, context, self._callback_suffix(update, 'inv_accept_'), True)

    async def handle_invitation_reject(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._respond_to_invitation(update, context, self._callback_suffix(update, 'inv_reject_'), False)

    async def _respond_to_invitation(self, update: Update, context: ContextTypes.DEFAULT_TYPE,
                                     invitation_id: str, accept: bool) -> None:
        state = get_session_state(context).social
        tr = self._translator(update, context)
        try:
            message = await self.deps.team_service.respond_to_invitation(self._user_id(update), invitation_id, accept)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_social(update, context))
            return

        state.invitations = [item for item in state.invitations if item.id != invitation_id]
        fallback = tr.t("social.invitation_accepted") if accept else tr.t("social.invitation_rejected")
        await self._render_invitations(update, context)
        await self._toast(update, context, message or fallback, ToastKind.SUCCESS if accept else ToastKind.INFO)

    # ------------------------------------------------------------------
    # Match proposals
    # ------------------------------------------------------------------
    async def handle_proposals(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).social
        user_id = self._user_id(update)
        try:
            state.received = await self.deps.proposal_service.get_received(user_id)
            state.sent = await self.deps.proposal_service.get_sent(user_id)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_social(update, context))
            return
        await self._render_proposals(update, context)

    async def _render_proposals(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).social
        tr = self._translator(update, context)
        await self._render(
            update,
            TelegramUI.format_proposals_message(state.received, state.sent, tr.get_language()),
            TelegramUI.create_proposals_keyboard(state.received, tr.get_language()),
        )

    async def handle_proposal_accept(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._respond_to_proposal(update, context, self._callback_suffix(update, 'prop_accept_'), True)

    async def handle_proposal_reject(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._respond_to_proposal(update, context, self._callback_suffix(update, 'prop_reject_'), False)

    async def _respond_to_proposal(self, update: Update, context: ContextTypes.DEFAULT_TYPE,
                                   proposal_id: str, accept: bool) -> None:
        state = get_session_state(context).social
        tr = self._translator(update, context)
        try:
            message = await self.deps.proposal_service.respond(self._user_id(update), proposal_id, accept)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, self._back_to_social(update, context))
            return

        state.received = [item for item in state.received if item.id != proposal_id]
        fallback = tr.t("social.proposal_accepted") if accept else tr.t("social.proposal_rejected")
        await self._render_proposals(update, context)
        await self._toast(update, context, message or fallback, ToastKind.SUCCESS if accept else ToastKind.INFO)

    def _back_to_social(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        return TelegramUI.create_back_keyboard('menu_social', self._translator(update, context).get_language())
