"""Sign-in, registration, language and main menu callbacks."""

from __future__ import annotations

from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError
from botapp.error_handler import ErrorHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import AuthFormState, clear_session_state, expect_input, get_session_state, reset_flow
from botapp.i18n import set_user_language
from botapp.messages.message_handlers import MessageHandlers
from botapp.notifications import ToastKind
from botapp.ui.telegram_ui import TelegramUI
from botapp.ui.text_blocks import escape_telegram_markdown
from botapp.validation import ValidationHelpers
from users.guard import REDIRECT_LOGIN, GuardDecision


class AuthHandler(CallbackResponseMixin):
    """Handles the signed-out screens and the main menu."""

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    # ------------------------------------------------------------------
    # Landing screens
    # ------------------------------------------------------------------
    async def show_main_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE,
                             notice: Optional[str] = None) -> None:
        session = self.deps.session_store.get(self._user_id(update))
        if session is None:
            await self.show_auth_screen(update, context)
            return

        tr = self._translator(update, context)
        badge = TelegramUI.format_user_role_badge(session.role.value)
        text = f"{tr.t('welcome.title', name=escape_telegram_markdown(session.display_name))} {badge}\n\n{tr.t('welcome.message')}"
        if notice:
            text = f"{notice}\n\n{text}"

        pending = len(get_session_state(context).social.invitations)
        keyboard = TelegramUI.create_main_menu_keyboard(
            is_admin=session.is_admin,
            pending_invitations=pending,
            language=tr.get_language(),
        )
        await self._render(update, text, keyboard)

    async def show_auth_screen(self, update: Update, context: ContextTypes.DEFAULT_TYPE,
                               notice_key: Optional[str] = None) -> None:
        tr = self._translator(update, context)
        text = tr.t("auth.welcome")
        if notice_key:
            text = f"{tr.t(notice_key)}\n\n{text}"
        await self._render(update, text, TelegramUI.create_auth_keyboard(tr.get_language()))

    async def handle_back_to_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reset_flow(context, 'main_menu')
        await self.show_main_menu(update, context)

    async def handle_access_denied(self, update: Update, context: ContextTypes.DEFAULT_TYPE,
                                   decision: GuardDecision) -> None:
        """Redirect a guarded route that failed its session check."""
        reset_flow(context, 'main_menu')
        if decision.redirect == REDIRECT_LOGIN:
            await self.show_auth_screen(update, context, notice_key='auth.login_required')
            return

        ErrorHandler.log_error_context(update, context, 'guarded_route', {'redirect': decision.redirect})
        tr = self._translator(update, context)
        await self.show_main_menu(update, context, notice=tr.t('error.access_denied'))

    async def handle_noop(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Inert buttons (labels, locked actions, taken slots)."""
        return None

    async def handle_input_cancel(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reset_flow(context, 'main_menu')
        await self.show_main_menu(update, context)

    # ------------------------------------------------------------------
    # Login / registration
    # ------------------------------------------------------------------
    async def handle_login_start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if self.deps.guard.require_authenticated(self._user_id(update)):
            await self.show_main_menu(update, context)
            return

        state = reset_flow(context, 'login')
        state.auth = AuthFormState(mode='login')
        expect_input(context, 'login_email')
        tr = self._translator(update, context)
        await self._render(update, tr.t("auth.enter_email"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_register_start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if self.deps.guard.require_authenticated(self._user_id(update)):
            await self.show_main_menu(update, context)
            return

        state = reset_flow(context, 'register')
        state.auth = AuthFormState(mode='register')
        expect_input(context, 'register_email')
        tr = self._translator(update, context)
        await self._render(update, tr.t("auth.register_email"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_logout(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        self.deps.auth_service.logout(self._user_id(update))
        clear_session_state(context.user_data)
        await self.show_auth_screen(update, context, notice_key='auth.logged_out')

    async def handle_login_email(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_email(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'email', value)
            return

        state = get_session_state(context)
        state.auth.email = value
        expect_input(context, 'login_password')
        tr = self._translator(update, context)
        await self._render(update, tr.t("auth.enter_password"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_login_password(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        # The password must not stay in the chat history
        await MessageHandlers.delete_message_safe(update.message)

        state = get_session_state(context)
        tr = self._translator(update, context)
        try:
            session = await self.deps.auth_service.login(self._user_id(update), state.auth.email, text)
        except ApiError as exc:
            reset_flow(context, 'main_menu')
            await self._reply(update, context, f"❌ {exc.message}", TelegramUI.create_auth_keyboard(tr.get_language()))
            return

        reset_flow(context, 'main_menu')
        state.auth = AuthFormState()
        await self._toast(update, context, tr.t("auth.signed_in", name=session.display_name))
        await self._send_main_menu(update, context)

    async def handle_register_email(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_email(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'email', value)
            return

        get_session_state(context).auth.email = value
        expect_input(context, 'register_password')
        tr = self._translator(update, context)
        await self._render(update, tr.t("auth.register_password"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_register_password(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        await MessageHandlers.delete_message_safe(update.message)
        is_valid, value = ValidationHelpers.validate_password(text)
        if not is_valid:
            await self._reply(update, context, f"❌ {self._translator(update, context).t(value)}",
                              TelegramUI.create_cancel_input_keyboard(self._translator(update, context).get_language()))
            return

        get_session_state(context).auth.password = value
        expect_input(context, 'register_first_name')
        tr = self._translator(update, context)
        await self._reply(update, context, tr.t("auth.enter_first_name"),
                          TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_register_first_name(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_name(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'first_name', value)
            return

        get_session_state(context).auth.first_name = value
        expect_input(context, 'register_last_name')
        tr = self._translator(update, context)
        await self._render(update, tr.t("auth.enter_last_name"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_register_last_name(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        is_valid, value = ValidationHelpers.validate_name(text)
        if not is_valid:
            await ErrorHandler.handle_validation_error(update, context, 'last_name', value)
            return

        state = get_session_state(context)
        form = state.auth
        tr = self._translator(update, context)
        try:
            session = await self.deps.auth_service.register(
                self._user_id(update),
                {
                    'email': form.email,
                    'password': form.password,
                    'firstName': form.first_name,
                    'lastName': value,
                    'userType': 'player',
                },
            )
        except ApiError as exc:
            reset_flow(context, 'main_menu')
            state.auth = AuthFormState()
            await self._show_api_error(update, context, exc, TelegramUI.create_auth_keyboard(tr.get_language()))
            return

        reset_flow(context, 'main_menu')
        state.auth = AuthFormState()
        await self._toast(update, context, tr.t("auth.registered", name=session.display_name))
        await self._send_main_menu(update, context)

    # ------------------------------------------------------------------
    # Language
    # ------------------------------------------------------------------
    async def handle_language_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        tr = self._translator(update, context)
        await self._render(update, tr.t("language.title"), TelegramUI.create_language_keyboard(tr.get_language()))

    async def handle_language_selection(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        language = set_user_language(context, self._callback_suffix(update, 'lang_'))
        self.logger.info("User %s switched language to %s", self._user_id(update), language)
        tr = self._translator(update, context)
        await self.show_main_menu(update, context, notice=tr.t("language.changed"))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    async def _send_main_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.callback_query:
            await self.show_main_menu(update, context)
            return
        session = self.deps.session_store.get(self._user_id(update))
        tr = self._translator(update, context)
        keyboard = TelegramUI.create_main_menu_keyboard(
            is_admin=bool(session and session.is_admin),
            pending_invitations=len(get_session_state(context).social.invitations),
            language=tr.get_language(),
        )
        name = escape_telegram_markdown(session.display_name) if session else ''
        await context.bot.send_message(
            chat_id=update.effective_chat.id,
            text=f"{tr.t('welcome.title', name=name)}\n\n{tr.t('welcome.message')}",
            parse_mode='Markdown',
            reply_markup=keyboard,
        )
