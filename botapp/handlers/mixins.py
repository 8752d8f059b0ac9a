"""Shared mixins for handler utilities."""

from __future__ import annotations

from typing import Optional, Tuple

from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError, ClientValidationError
from api.validation import validate_upload
from botapp.error_handler import ErrorHandler
from botapp.i18n import get_user_translator
from botapp.i18n.translator import Translator
from botapp.messages.message_handlers import MessageHandlers
from botapp.notifications import ToastKind


class CallbackResponseMixin:
    """Provides helper callbacks for answering and editing Telegram messages."""

    async def _render(self, update: Update, text: str, reply_markup=None, **kwargs) -> None:
        """Edit the callback message, or reply when the update is a text message."""
        await MessageHandlers.edit_or_reply(update, text, reply_markup=reply_markup, **kwargs)

    async def _reply(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str, reply_markup=None, **kwargs) -> None:
        """Send a new message; the prompt being answered may already be deleted."""
        chat = update.effective_chat
        await context.bot.send_message(chat_id=chat.id, text=text, reply_markup=reply_markup, **kwargs)

    def _translator(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> Translator:
        return get_user_translator(update, context)

    @staticmethod
    def _user_id(update: Update) -> int:
        return update.effective_user.id

    @staticmethod
    def _callback_suffix(update: Update, prefix: str) -> str:
        data = update.callback_query.data or ''
        return data[len(prefix):] if data.startswith(prefix) else ''

    async def _show_api_error(self, update: Update, context: ContextTypes.DEFAULT_TYPE,
                              error: ApiError, reply_markup=None) -> None:
        await ErrorHandler.handle_api_error(update, context, error, reply_markup=reply_markup)

    async def _toast(self, update: Update, context: ContextTypes.DEFAULT_TYPE,
                     message: str, kind: ToastKind = ToastKind.SUCCESS) -> None:
        chat = update.effective_chat
        if chat is None:
            return
        await self.deps.toast.show(
            context.bot,
            chat.id,
            message,
            kind,
            language=self._translator(update, context).get_language(),
        )

    async def _read_upload(self, update: Update, context: ContextTypes.DEFAULT_TYPE,
                           api_field: str) -> Optional[Tuple[str, bytes, str]]:
        """Download a photo or image document as ``(filename, content, content_type)``.

        Size and type are checked against Telegram's metadata before anything
        is downloaded; a rejected upload shows the validation error and
        returns None so the prompt stays open.
        """
        message = update.message
        if message.photo:
            source = message.photo[-1]
            size, content_type = source.file_size or 0, 'image/jpeg'
            filename = f"{source.file_unique_id}.jpg"
        elif message.document:
            source = message.document
            size, content_type = source.file_size or 0, source.mime_type
            filename = source.file_name or f"{source.file_unique_id}"
        else:
            await ErrorHandler.handle_validation_error(update, context, api_field, 'validation.upload_not_image')
            return None

        try:
            validate_upload(size, content_type)
        except ClientValidationError as exc:
            await ErrorHandler.handle_validation_error(update, context, api_field, exc.key)
            return None

        telegram_file = await source.get_file()
        return filename, bytes(await telegram_file.download_as_bytearray()), content_type


__all__ = ["CallbackResponseMixin"]
