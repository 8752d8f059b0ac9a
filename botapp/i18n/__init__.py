"""Internationalization (i18n) module for multi-language support.

This module provides translation services for the bot, supporting
Turkish (default) and English languages.

Usage:
    from botapp.i18n import translate, Translator, Language, get_user_translator

    # Simple translation
    text = translate('menu.venues', language='en')

    # Translation with parameters
    text = translate('booking.hours_option', language='tr', hours=2)

    # Translator for the user behind an update
    translator = get_user_translator(update, context)
    text = translator.t('welcome.title')
"""

from .helpers import (
    LANGUAGE_KEY,
    get_translator,
    get_user_language,
    get_user_translator,
    set_user_language,
)
from .languages import DEFAULT_LANGUAGE, LANGUAGE_FLAGS, LANGUAGE_NAMES, Language, resolve_language
from .translator import Translator, create_translator, translate

__all__ = [
    'Language',
    'DEFAULT_LANGUAGE',
    'LANGUAGE_KEY',
    'LANGUAGE_NAMES',
    'LANGUAGE_FLAGS',
    'Translator',
    'create_translator',
    'translate',
    'get_translator',
    'get_user_language',
    'get_user_translator',
    'resolve_language',
    'set_user_language',
]
