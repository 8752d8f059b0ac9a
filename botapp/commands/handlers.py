"""Utilities to register Telegram command, message and callback handlers."""

from __future__ import annotations

from telegram.ext import Application, CallbackQueryHandler, CommandHandler, MessageHandler, filters


def register_core_handlers(application: Application, bot) -> None:
    """Wire up the bot's commands, free-text prompts, uploads, callbacks and error handler."""

    application.add_handler(CommandHandler("start", bot.start_command))
    application.add_handler(CommandHandler("login", bot.login_command))
    application.add_handler(CommandHandler("register", bot.register_command))
    application.add_handler(CommandHandler("logout", bot.logout_command))
    application.add_handler(CommandHandler("stop", bot.stop_command))
    application.add_handler(CallbackQueryHandler(bot.callback_handler.handle_callback))
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, bot.callback_handler.handle_text))
    application.add_handler(MessageHandler(filters.PHOTO | filters.Document.ALL, bot.callback_handler.handle_upload))
    application.add_error_handler(bot.error_handler)


__all__ = ['register_core_handlers']
