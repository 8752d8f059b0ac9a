"""
Centralized Error Handling System for the Halısaha bot
Provides user-friendly error handling across all bot operations
"""

import logging
from typing import Optional
from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError, ClientValidationError, TransportError, UnauthorizedError
from botapp.i18n import get_user_translator
from .ui.telegram_ui import TelegramUI


class ErrorHandler:
    """
    Centralized error handling for the bot

    Provides static methods for handling different types of errors
    with appropriate user messaging and logging
    """

    @staticmethod
    async def _send(update: Update, text: str, reply_markup=None, parse_mode: Optional[str] = 'Markdown') -> None:
        logger = logging.getLogger('ErrorHandler')
        if update.callback_query:
            await update.callback_query.edit_message_text(
                text,
                parse_mode=parse_mode,
                reply_markup=reply_markup
            )
        elif update.message:
            await update.message.reply_text(
                text,
                parse_mode=parse_mode,
                reply_markup=reply_markup
            )
        else:
            logger.warning("Unable to send error message - no callback query or message available")

    @staticmethod
    async def handle_telegram_error(update: Update, context: ContextTypes.DEFAULT_TYPE, error: Exception) -> None:
        """
        Main entry point for handling errors that occur during Telegram updates

        Logs error details and sends a generic, user-friendly error message to the user
        with a fallback navigation option.

        Args:
            update: The telegram update that caused the error
            context: The callback context
            error: The exception that occurred
        """
        logger = logging.getLogger('ErrorHandler')

        # Repeated button presses re-send identical content
        error_message_str = str(error).lower()
        if "message is not modified" in error_message_str:
            logger.warning(f"Telegram message not modified (user likely clicked button multiple times): {error}")
            return

        logger.error(f"Telegram error occurred: {type(error).__name__}: {error}", exc_info=True)

        if update and update.effective_user:
            logger.error(f"Error context - User ID: {update.effective_user.id}")

        if not update:
            logger.warning("No update object available - cannot send error message to user")
            return

        try:
            tr = get_user_translator(update, context)
            reply_markup = TelegramUI.create_back_to_menu_keyboard(tr.get_language())
            await ErrorHandler._send(update, tr.t("error.unexpected"), reply_markup)
        except Exception as send_error:
            logger.error(f"Failed to send error message to user: {send_error}", exc_info=True)

    @staticmethod
    async def handle_api_error(update: Update, context: ContextTypes.DEFAULT_TYPE,
                               error: ApiError, reply_markup=None) -> None:
        """
        Show a backend failure to the user

        A 401 is not rendered here: by the time it reaches a handler the session
        is already cleared and the user was sent back to the sign-in screen.

        Args:
            update: The telegram update being handled
            context: The callback context
            error: The failure raised by the API layer
            reply_markup: Keyboard to show with the message, defaults to back-to-menu
        """
        logger = logging.getLogger('ErrorHandler')
        user_id = update.effective_user.id if update and update.effective_user else "Unknown"

        if isinstance(error, UnauthorizedError):
            logger.info(f"Session expired mid-request - User: {user_id}")
            return

        tr = get_user_translator(update, context)
        if isinstance(error, ClientValidationError):
            text = f"❌ {tr.t(error.key)}" if error.key else f"❌ {error.message}"
            logger.info(f"Client validation failed - User: {user_id}, Key: {error.key}")
        elif isinstance(error, TransportError):
            text = tr.t("error.network")
            logger.warning(f"Backend unreachable - User: {user_id}: {error.message}")
        else:
            text = f"❌ {error.message or tr.t('error.generic')}"
            logger.warning(f"API error - User: {user_id}, Status: {error.status_code}, Message: {error.message}")

        if reply_markup is None:
            reply_markup = TelegramUI.create_back_to_menu_keyboard(tr.get_language())
        try:
            await ErrorHandler._send(update, text, reply_markup, parse_mode=None)
        except Exception as send_error:
            logger.error(f"Failed to send API error message: {send_error}", exc_info=True)

    @staticmethod
    async def handle_user_authorization_error(update: Update, context: ContextTypes.DEFAULT_TYPE,
                                            operation: str) -> None:
        """
        Handle role check failures with security logging

        Args:
            update: The telegram update that caused the error
            context: The callback context
            operation: The operation that required the missing role
        """
        logger = logging.getLogger('ErrorHandler')

        user_id = update.effective_user.id if update.effective_user else "Unknown"
        logger.warning(f"Authorization failure - User: {user_id}, Operation: {operation}")

        try:
            tr = get_user_translator(update, context)
            reply_markup = TelegramUI.create_back_to_menu_keyboard(tr.get_language())
            await ErrorHandler._send(update, tr.t("error.access_denied"), reply_markup)
        except Exception as send_error:
            logger.error(f"Failed to send authorization error message: {send_error}", exc_info=True)

    @staticmethod
    async def handle_validation_error(update: Update, context: ContextTypes.DEFAULT_TYPE,
                                    field: str, reason_key: str, reply_markup=None) -> None:
        """
        Handle input validation errors with specific guidance

        Args:
            update: The telegram update that carried the bad input
            context: The callback context
            field: The field that failed validation
            reason_key: i18n key describing the failure
            reply_markup: Keyboard for the re-prompt, defaults to cancel-input
        """
        logger = logging.getLogger('ErrorHandler')

        user_id = update.effective_user.id if update.effective_user else "Unknown"
        logger.info(f"Validation error - User: {user_id}, Field: {field}, Reason: {reason_key}")

        try:
            tr = get_user_translator(update, context)
            if reply_markup is None:
                reply_markup = TelegramUI.create_cancel_input_keyboard(tr.get_language())
            await ErrorHandler._send(
                update,
                f"❌ {tr.t(reason_key)}\n\n{tr.t('validation.try_again')}",
                reply_markup,
                parse_mode=None,
            )
        except Exception as send_error:
            logger.error(f"Failed to send validation error message: {send_error}", exc_info=True)

    @staticmethod
    def log_error_context(update: Update, context: ContextTypes.DEFAULT_TYPE,
                         operation: str, additional_context: Optional[dict] = None) -> None:
        """
        Log error context for debugging without message text
        """
        logger = logging.getLogger('ErrorHandler')

        context_info = {
            'operation': operation,
            'user_id': update.effective_user.id if update.effective_user else None,
            'chat_id': update.effective_chat.id if update.effective_chat else None,
            'callback_data': update.callback_query.data if update.callback_query else None,
        }

        if additional_context:
            context_info.update(additional_context)

        logger.debug(f"Error context: {context_info}")
