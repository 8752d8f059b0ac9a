"""Helper functions for i18n in handlers and UI components."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .languages import resolve_language
from .translator import Translator, create_translator

LANGUAGE_KEY = 'language'


def get_translator(language: Optional[str] = None) -> Translator:
    """Get a translator instance for a specific language.

    Args:
        language: Language code ('tr' or 'en'). If None, uses default (Turkish)

    Returns:
        Translator instance
    """
    return create_translator(language)


def get_user_language(user_data: Optional[Mapping[str, Any]], telegram_code: Optional[str] = None) -> str:
    """Chosen language from ``user_data``, else the Telegram client language."""
    if user_data and user_data.get(LANGUAGE_KEY):
        return resolve_language(user_data[LANGUAGE_KEY]).value
    return resolve_language(telegram_code).value


def get_user_translator(update, context) -> Translator:
    """Get a translator for the user behind ``update``.

    Args:
        update: Telegram update (its effective user supplies the client language)
        context: Callback context whose ``user_data`` may hold a chosen language

    Returns:
        Translator instance configured for the user's language (defaults to Turkish)
    """
    user = getattr(update, 'effective_user', None)
    code = getattr(user, 'language_code', None)
    user_data = getattr(context, 'user_data', None)
    return create_translator(get_user_language(user_data, code))


def set_user_language(context, language: str) -> str:
    resolved = resolve_language(language).value
    context.user_data[LANGUAGE_KEY] = resolved
    return resolved
