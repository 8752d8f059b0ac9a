"""Profile management callbacks."""

from __future__ import annotations

from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError, ClientValidationError, UnauthorizedError
from botapp.error_handler import ErrorHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import ProfileEditState, expect_input, get_session_state, reset_flow
from botapp.messages.message_handlers import MessageHandlers
from botapp.ui.telegram_ui import TelegramUI
from botapp.validation import ValidationHelpers

# pending input kind -> (backend field, validator, prompt key)
_PROFILE_FIELD_PROMPTS = {
    'profile_first_name': ('firstName', ValidationHelpers.validate_name, 'profile.enter_first_name'),
    'profile_last_name': ('lastName', ValidationHelpers.validate_name, 'profile.enter_last_name'),
    'profile_phone': ('phone', ValidationHelpers.validate_phone_number, 'profile.enter_phone'),
}


class ProfileHandler(CallbackResponseMixin):
    """Handles profile viewing and editing callbacks."""

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    async def handle_profile_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reset_flow(context, 'profile')
        await self._show_profile(update, context)

    async def _show_profile(self, update: Update, context: ContextTypes.DEFAULT_TYPE,
                            notice: Optional[str] = None, *, as_new_message: bool = False) -> None:
        tr = self._translator(update, context)
        try:
            profile = await self.deps.auth_service.get_profile(self._user_id(update))
            ratings = await self._received_ratings(update, profile)
        except ApiError as exc:
            await self._show_api_error(update, context, exc)
            return

        message = TelegramUI.format_user_profile_message(profile, tr.get_language(), ratings=ratings)
        if notice:
            message = f"{notice}\n\n{message}"
        keyboard = TelegramUI.create_profile_keyboard(tr.get_language())
        if as_new_message:
            await self._reply(update, context, message, keyboard, parse_mode='Markdown')
        else:
            await self._render(update, message, keyboard)

    async def _received_ratings(self, update: Update, profile) -> Optional[dict]:
        """Rating averages are optional on the card; only an expired session aborts it."""
        rated_user_id = profile.get('id')
        if not rated_user_id:
            return None
        try:
            return await self.deps.rating_service.get_user_ratings(self._user_id(update), str(rated_user_id))
        except UnauthorizedError:
            raise
        except ApiError as exc:
            self.logger.warning("Could not load ratings for user %s: %s", self._user_id(update), exc.message)
            return None

    # ------------------------------------------------------------------
    # Name and phone
    # ------------------------------------------------------------------
    async def handle_edit_first_name(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._start_field_edit(update, context, 'profile_first_name')

    async def handle_edit_last_name(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._start_field_edit(update, context, 'profile_last_name')

    async def handle_edit_phone(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._start_field_edit(update, context, 'profile_phone')

    async def _start_field_edit(self, update: Update, context: ContextTypes.DEFAULT_TYPE, kind: str) -> None:
        _, _, prompt_key = _PROFILE_FIELD_PROMPTS[kind]
        expect_input(context, kind)
        tr = self._translator(update, context)
        await self._render(update, tr.t(prompt_key), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_first_name_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        await self._save_field(update, context, 'profile_first_name', text)

    async def handle_last_name_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        await self._save_field(update, context, 'profile_last_name', text)

    async def handle_phone_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        await self._save_field(update, context, 'profile_phone', text)

    async def _save_field(self, update: Update, context: ContextTypes.DEFAULT_TYPE, kind: str, text: str) -> None:
        api_field, validator, _ = _PROFILE_FIELD_PROMPTS[kind]
        is_valid, value = validator(text)
        if not is_valid:
            # Keep the prompt pending so the next message retries the same field
            await ErrorHandler.handle_validation_error(update, context, api_field, value)
            return

        get_session_state(context).pending_input = None
        tr = self._translator(update, context)
        try:
            await self.deps.user_service.update_profile(self._user_id(update), {api_field: value})
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('menu_profile', tr.get_language()))
            return

        self.logger.info("User %s updated %s", self._user_id(update), api_field)
        await self._toast(update, context, tr.t("profile.updated"))
        await self._show_profile(update, context)

    # ------------------------------------------------------------------
    # Password
    # ------------------------------------------------------------------
    async def handle_change_password(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        session = get_session_state(context)
        session.profile = ProfileEditState()
        expect_input(context, 'password_current')
        tr = self._translator(update, context)
        await self._render(update, tr.t("profile.enter_current_password"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_current_password_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        await MessageHandlers.delete_message_safe(update.message)
        session = get_session_state(context)
        session.profile.current_password = text
        expect_input(context, 'password_new')
        tr = self._translator(update, context)
        await self._reply(update, context, tr.t("profile.enter_new_password"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_new_password_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        await MessageHandlers.delete_message_safe(update.message)
        tr = self._translator(update, context)
        is_valid, value = ValidationHelpers.validate_password(text)
        if not is_valid:
            await self._reply(
                update, context,
                f"❌ {tr.t(value)}\n\n{tr.t('validation.try_again')}",
                TelegramUI.create_cancel_input_keyboard(tr.get_language()),
            )
            return

        session = get_session_state(context)
        session.profile.new_password = value
        expect_input(context, 'password_confirm')
        await self._reply(update, context, tr.t("profile.confirm_new_password"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_confirm_password_input(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str) -> None:
        await MessageHandlers.delete_message_safe(update.message)
        session = get_session_state(context)
        tr = self._translator(update, context)
        form = session.profile

        try:
            await self.deps.user_service.change_password(
                self._user_id(update),
                form.current_password,
                form.new_password,
                text,
            )
        except ClientValidationError as exc:
            # Mismatch: ask for the new password again
            expect_input(context, 'password_new')
            form.new_password = ''
            await self._reply(
                update, context,
                f"❌ {tr.t(exc.key) if exc.key else exc.message}\n\n{tr.t('profile.enter_new_password')}",
                TelegramUI.create_cancel_input_keyboard(tr.get_language()),
            )
            return
        except ApiError as exc:
            session.pending_input = None
            session.profile = ProfileEditState()
            await self._reply(
                update, context,
                f"❌ {exc.message or tr.t('error.generic')}",
                TelegramUI.create_back_keyboard('menu_profile', tr.get_language()),
            )
            return

        session.pending_input = None
        session.profile = ProfileEditState()
        await self._toast(update, context, tr.t("profile.password_changed"))
        await self._show_profile(update, context, as_new_message=True)

    # ------------------------------------------------------------------
    # Picture
    # ------------------------------------------------------------------
    async def handle_photo_prompt(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        expect_input(context, 'profile_photo')
        tr = self._translator(update, context)
        await self._render(update, tr.t("profile.send_picture"), TelegramUI.create_cancel_input_keyboard(tr.get_language()))

    async def handle_photo_upload(self, update: Update, context: ContextTypes.DEFAULT_TYPE, _value=None) -> None:
        """Accept a Telegram photo or an image document as the new profile picture."""
        tr = self._translator(update, context)
        upload = await self._read_upload(update, context, 'profilePicture')
        if upload is None:
            return
        filename, content, content_type = upload

        get_session_state(context).pending_input = None
        try:
            await self.deps.user_service.upload_profile_picture(self._user_id(update), filename, content, content_type)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('menu_profile', tr.get_language()))
            return

        self.logger.info("User %s uploaded a profile picture (%s bytes)", self._user_id(update), len(content))
        await self._toast(update, context, tr.t("profile.picture_uploaded"))
        await self._show_profile(update, context)
