"""Translation service for internationalization support."""

from __future__ import annotations

from typing import Any, Optional

from .languages import DEFAULT_LANGUAGE, Language
from .strings import STRINGS


class Translator:
    """Handles translation of strings based on user language preference."""

    def __init__(self, language: str | Language = DEFAULT_LANGUAGE):
        """Initialize translator with a specific language.

        Args:
            language: Language code ('tr', 'en') or Language enum
        """
        if isinstance(language, Language):
            self.language = language.value
        else:
            self.language = str(language)

    def t(self, key: str, **params: Any) -> str:
        """Translate a key to the current language with optional parameter substitution.

        Args:
            key: Translation key (e.g., 'menu.venues')
            **params: Parameters to substitute in the translated string

        Returns:
            Translated string with parameters substituted

        Example:
            >>> translator = Translator('en')
            >>> translator.t('booking.hours_option', hours=2)
            '2 h'
        """
        lang_strings = STRINGS.get(self.language, STRINGS[DEFAULT_LANGUAGE.value])
        translated = lang_strings.get(key)

        # Fallback to default language if key not found
        if translated is None:
            translated = STRINGS[DEFAULT_LANGUAGE.value].get(key, f"[{key}]")

        if params:
            try:
                translated = translated.format(**params)
            except KeyError:
                # Missing parameter: return string as-is
                pass

        return translated

    def get_language(self) -> str:
        return self.language


def create_translator(language: Optional[str | Language] = None) -> Translator:
    """Factory function to create a translator instance.

    Args:
        language: Optional language code. If None, uses DEFAULT_LANGUAGE

    Returns:
        Translator instance
    """
    if language is None:
        language = DEFAULT_LANGUAGE
    return Translator(language)


_default_translator = Translator(DEFAULT_LANGUAGE)


def translate(key: str, language: Optional[str | Language] = None, **params: Any) -> str:
    """Convenience function to translate a string.

    Example:
        >>> translate('menu.venues', language='en')
        '🏟️ Venues'
    """
    if language is None:
        return _default_translator.t(key, **params)
    return Translator(language).t(key, **params)
