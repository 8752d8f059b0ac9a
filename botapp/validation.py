"""
Validation utility functions
Handles free-text input typed into the bot before it reaches the backend
"""

from datetime import datetime
from typing import Tuple
import re

from infrastructure.constants import MAX_PLAYERS_NEEDED, MIN_PASSWORD_LENGTH

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
NAME_PATTERN = r"^[a-zA-ZÀ-ÿĀ-žçÇğĞıİöÖşŞüÜ\s\-'\.]+$"


class ValidationHelpers:
    """Collection of validation helper functions

    Each helper returns ``(is_valid, cleaned_value_or_error_key)``; the error
    side is an i18n key so handlers can render it in the user's language.
    """

    @staticmethod
    def validate_email(email: str) -> Tuple[bool, str]:
        email = (email or '').strip().lower()

        if re.match(EMAIL_PATTERN, email):
            return True, email
        if '@' not in email:
            return False, 'validation.email_missing_at'
        if '.' not in email.split('@', 1)[1]:
            return False, 'validation.email_domain'
        return False, 'validation.email_invalid'

    @staticmethod
    def validate_phone_number(phone: str) -> Tuple[bool, str]:
        """
        Validate a Turkish phone number
        Accepts 05XXXXXXXXX, 5XXXXXXXXX and +905XXXXXXXXX; returns the 11-digit form
        """
        digits_only = ''.join(c for c in (phone or '') if c.isdigit())

        if digits_only.startswith('90') and len(digits_only) == 12:
            digits_only = '0' + digits_only[2:]
        elif len(digits_only) == 10 and not digits_only.startswith('0'):
            digits_only = '0' + digits_only

        if len(digits_only) < 11:
            return False, 'validation.phone_too_short'
        if len(digits_only) > 11:
            return False, 'validation.phone_too_long'
        return True, digits_only

    @staticmethod
    def validate_name(name: str) -> Tuple[bool, str]:
        name = (name or '').strip()

        if not name:
            return False, 'validation.name_empty'
        if len(name) < 2:
            return False, 'validation.name_too_short'
        if len(name) > 50:
            return False, 'validation.name_too_long'
        if not re.match(NAME_PATTERN, name):
            return False, 'validation.name_invalid'

        # Clean up multiple spaces
        return True, ' '.join(name.split())

    @staticmethod
    def validate_password(password: str) -> Tuple[bool, str]:
        if len(password or '') < MIN_PASSWORD_LENGTH:
            return False, 'validation.password_too_short'
        return True, password

    @staticmethod
    def validate_search_term(term: str) -> Tuple[bool, str]:
        term = ' '.join((term or '').split())
        if len(term) > 100:
            return False, 'validation.search_too_long'
        return True, term

    @staticmethod
    def validate_date(value: str) -> Tuple[bool, str]:
        """Accept ``YYYY-MM-DD`` or ``DD.MM.YYYY``; returns the ISO form"""
        value = (value or '').strip()
        for pattern in ("%Y-%m-%d", "%d.%m.%Y"):
            try:
                return True, datetime.strptime(value, pattern).strftime("%Y-%m-%d")
            except ValueError:
                continue
        return False, 'validation.date_invalid'

    @staticmethod
    def validate_time(value: str) -> Tuple[bool, str]:
        value = (value or '').strip().replace('.', ':')
        try:
            return True, datetime.strptime(value, "%H:%M").strftime("%H:%M")
        except ValueError:
            return False, 'validation.time_invalid'

    @staticmethod
    def validate_players_needed(value: str) -> Tuple[bool, str]:
        value = (value or '').strip()
        if not value.isdigit() or not 1 <= int(value) <= MAX_PLAYERS_NEEDED:
            return False, 'validation.players_needed'
        return True, value
