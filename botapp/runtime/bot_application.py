"""Telegram bot runtime application wiring."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from telegram import Update
from telegram.ext import Application, ContextTypes

from botapp.bootstrap.container import DependencyContainer
from botapp.commands.handlers import register_core_handlers
from botapp.config import BotAppConfig, load_bot_config
from botapp.error_handler import ErrorHandler
from botapp.handlers.state import clear_session_state
from botapp.i18n import get_translator, get_user_language, get_user_translator
from botapp.runtime.lifecycle import LifecycleManager
from botapp.ui.telegram_ui import TelegramUI
from users.models import UserRole


class BotApplication:
    """Assemble dependencies and handlers for the Telegram bot runtime."""

    def __init__(self, config: Optional[BotAppConfig] = None) -> None:
        self.logger = logging.getLogger('HalisahaBot')
        self.config = config or load_bot_config()
        self.token = self.config.telegram.token
        self.container = DependencyContainer(self.config)
        dependencies = self.container.build_dependencies(self._on_session_expired)

        self.api_client = dependencies.api_client
        self.session_store = dependencies.session_store
        self.guard = dependencies.guard
        self.callback_handler = dependencies.callback_handler
        self.lifecycle = LifecycleManager(dependencies, logger=self.logger)
        self.application = None

    async def start_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /start: main menu when signed in, the sign-in screen otherwise."""
        await self.callback_handler.auth.show_main_menu(update, context)

    async def login_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        await self.callback_handler.auth.handle_login_start(update, context)

    async def register_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        await self.callback_handler.auth.handle_register_start(update, context)

    async def logout_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        await self.callback_handler.auth.handle_logout(update, context)

    async def stop_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /stop command for graceful shutdown (admin only)."""

        user_id = update.effective_user.id
        tr = get_user_translator(update, context)
        decision = self.guard.require_role(user_id, UserRole.ADMIN)
        if not decision.allowed:
            await self._send_message(update, context, tr.t('error.access_denied'))
            return

        await self._send_message(update, context, tr.t('admin.shutting_down'))
        self.logger.info("Graceful shutdown requested by admin user %s", user_id)
        asyncio.create_task(self._graceful_shutdown())

    async def _graceful_shutdown(self) -> None:
        await self.lifecycle.graceful_shutdown()

    async def _on_session_expired(self, user_id: int, message: Optional[str] = None) -> None:
        """Send the user back to the sign-in screen after the backend rejected their token.

        The API client calls this once per expired session; concurrent 401s for the
        same session are absorbed before they get here.
        """

        application = self.application
        if application is None:
            self.logger.warning("Session expired for %s before the application started", user_id)
            return

        user_data = application.user_data.get(user_id)
        if user_data is not None:
            clear_session_state(user_data)

        tr = get_translator(get_user_language(user_data))
        try:
            await application.bot.send_message(
                chat_id=user_id,
                text=tr.t('auth.session_expired'),
                reply_markup=TelegramUI.create_auth_keyboard(tr.get_language()),
            )
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.error("Failed to send session expiry notice to %s: %s", user_id, exc)

    async def error_handler(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Central error handler for Telegram exceptions."""
        await ErrorHandler.handle_telegram_error(update, context, context.error)

    def run(self) -> None:
        """Run the Telegram bot using asyncio-ready Application."""

        app = Application.builder().token(self.token).build()
        register_core_handlers(app, self)

        app.post_init = self._post_init
        app.post_stop = self._post_stop

        self.application = app
        self.logger.info("Starting async bot against %s", self.config.api.base_url)
        app.run_polling()

    async def _post_init(self, application) -> None:
        """Initialize async components after the Telegram app starts."""
        self.application = application
        await self.lifecycle.post_init(application)

    async def _post_stop(self, application) -> None:
        """Clean up async components after the Telegram app stops."""
        await self.lifecycle.post_stop(application)
        self.application = None

    async def _send_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE, text: str, **kwargs) -> None:
        """Reply to the current chat, falling back to context.bot when needed."""

        if update.message:
            await update.message.reply_text(text, **kwargs)
            return

        chat = update.effective_chat
        if not chat:
            self.logger.warning("No chat available to deliver message")
            return

        await context.bot.send_message(chat_id=chat.id, text=text, **kwargs)


__all__ = ['BotApplication']
