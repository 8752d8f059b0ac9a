"""Telegram application layer with lazy exports to avoid heavy imports."""

__all__ = ["HalisahaBot", "BotApplication"]


def __getattr__(name):
    if name == "HalisahaBot":
        from .app import HalisahaBot as _HalisahaBot

        return _HalisahaBot
    if name == "BotApplication":
        from .runtime.bot_application import BotApplication as _BotApplication

        return _BotApplication
    raise AttributeError(f"module 'botapp' has no attribute {name!r}")
