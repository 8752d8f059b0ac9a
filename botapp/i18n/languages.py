"""Language constants and enums for internationalization."""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported languages."""
    TURKISH = "tr"
    ENGLISH = "en"


# Default language for new users
DEFAULT_LANGUAGE = Language.TURKISH

# Language display names
LANGUAGE_NAMES = {
    Language.TURKISH: "Türkçe",
    Language.ENGLISH: "English",
}

# Language flags for UI
LANGUAGE_FLAGS = {
    Language.TURKISH: "🇹🇷",
    Language.ENGLISH: "🇬🇧",
}


def resolve_language(code: str | None) -> Language:
    """Map a Telegram ``language_code`` (``en-GB``, ``tr``...) onto a supported language."""
    if code:
        prefix = code.split('-', 1)[0].lower()
        for language in Language:
            if language.value == prefix:
                return language
    return DEFAULT_LANGUAGE
