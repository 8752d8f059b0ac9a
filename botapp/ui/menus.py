"""Menu-related keyboard builders for the Telegram UI."""

from __future__ import annotations

from typing import List, Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from botapp.i18n import LANGUAGE_FLAGS, LANGUAGE_NAMES, Language, get_translator
from listing.pagination import PageState


def create_main_menu_keyboard(is_admin: bool = False, pending_invitations: int = 0, language: Optional[str] = None) -> InlineKeyboardMarkup:
    """Create the main menu keyboard.

    Args:
        is_admin: Whether the signed-in user has the admin role
        pending_invitations: Number of open team invitations shown on the social button
        language: Language code ('tr' or 'en'). Defaults to Turkish if None.
    """
    tr = get_translator(language)

    if pending_invitations > 0:
        social_text = tr.t("menu.social_pending", count=pending_invitations)
    else:
        social_text = tr.t("menu.social")

    keyboard = [
        [
            InlineKeyboardButton(tr.t("menu.venues"), callback_data='menu_venues'),
            InlineKeyboardButton(tr.t("menu.reservations"), callback_data='menu_reservations'),
        ],
        [
            InlineKeyboardButton(social_text, callback_data='menu_social'),
            InlineKeyboardButton(tr.t("menu.profile"), callback_data='menu_profile'),
        ],
    ]

    if is_admin:
        keyboard.append([InlineKeyboardButton(tr.t("menu.admin_panel"), callback_data='menu_admin')])

    keyboard.append([InlineKeyboardButton(tr.t("menu.logout"), callback_data='auth_logout')])
    return InlineKeyboardMarkup(keyboard)


def create_auth_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    """Keyboard shown to signed-out users."""
    tr = get_translator(language)
    keyboard = [
        [
            InlineKeyboardButton(tr.t("auth.login_button"), callback_data='auth_login'),
            InlineKeyboardButton(tr.t("auth.register_button"), callback_data='auth_register'),
        ],
        [InlineKeyboardButton(tr.t("menu.language"), callback_data='menu_language')],
    ]
    return InlineKeyboardMarkup(keyboard)


def create_back_to_menu_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    """Create a standard "Back to Menu" inline keyboard."""
    tr = get_translator(language)
    keyboard = [[InlineKeyboardButton(tr.t("nav.back_to_menu"), callback_data='back_to_menu')]]
    return InlineKeyboardMarkup(keyboard)


def create_back_keyboard(callback_data: str, language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    return InlineKeyboardMarkup([[InlineKeyboardButton(tr.t("nav.back"), callback_data=callback_data)]])


def create_cancel_input_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    """Keyboard attached to free-text prompts."""
    tr = get_translator(language)
    return InlineKeyboardMarkup([[InlineKeyboardButton(tr.t("nav.cancel"), callback_data='input_cancel')]])


def create_confirm_keyboard(yes_data: str, no_data: str, language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    return InlineKeyboardMarkup(
        [[
            InlineKeyboardButton(tr.t("action.yes"), callback_data=yes_data),
            InlineKeyboardButton(tr.t("action.no"), callback_data=no_data),
        ]]
    )


def create_language_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard = [
        [
            InlineKeyboardButton(
                f"{LANGUAGE_FLAGS[lang]} {LANGUAGE_NAMES[lang]}",
                callback_data=f'lang_{lang.value}',
            )
            for lang in Language
        ],
        [InlineKeyboardButton(tr.t("nav.back_to_menu"), callback_data='back_to_menu')],
    ]
    return InlineKeyboardMarkup(keyboard)


def create_pagination_row(prefix: str, state: PageState, language: Optional[str] = None) -> List[InlineKeyboardButton]:
    """
    Previous / "page x of y" / next buttons for a server-paginated list.

    Disabled directions render as inert ``noop`` buttons so the row keeps
    its shape on the first and last pages.
    """
    tr = get_translator(language)
    previous = (
        InlineKeyboardButton(tr.t("nav.previous"), callback_data=f'{prefix}_prev')
        if state.has_previous
        else InlineKeyboardButton("·", callback_data='noop')
    )
    following = (
        InlineKeyboardButton(tr.t("nav.next"), callback_data=f'{prefix}_next')
        if state.has_next
        else InlineKeyboardButton("·", callback_data='noop')
    )
    label = InlineKeyboardButton(
        tr.t("nav.page_label", page=state.page, total=state.total_pages),
        callback_data='noop',
    )
    return [previous, label, following]


__all__ = [
    'create_auth_keyboard',
    'create_back_keyboard',
    'create_back_to_menu_keyboard',
    'create_cancel_input_keyboard',
    'create_confirm_keyboard',
    'create_language_keyboard',
    'create_main_menu_keyboard',
    'create_pagination_row',
]
