"""Profile view and edit keyboards."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from botapp.i18n import get_translator
from botapp.ui.constants import ROLE_BADGES
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown

DEFAULT_ELO = 1000

RATING_AVERAGE_KEYS = (
    ('speed', 'avgSpeed'),
    ('technique', 'avgTechnique'),
    ('passing', 'avgPassing'),
    ('physical', 'avgPhysical'),
)


def format_user_role_badge(user_type: Optional[str]) -> str:
    return ROLE_BADGES.get(user_type or 'player', '⚽')


def format_user_profile_message(
    profile: Mapping[str, Any],
    language: Optional[str] = None,
    ratings: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Render the profile card.

    Args:
        profile: Backend user object (camelCase keys)
        language: Language code for labels
        ratings: Averages from the ratings the user received, when loaded

    Returns:
        Markdown text
    """
    tr = get_translator(language)
    user_type = profile.get('userType') or profile.get('user_type') or 'player'
    name = f"{profile.get('firstName', '')} {profile.get('lastName', '')}".strip()

    builder = MarkdownBlockBuilder()
    builder.heading(f"{format_user_role_badge(user_type)} *{escape_telegram_markdown(name or profile.get('email', ''))}*")
    builder.blank()
    builder.field(tr.t("profile.email"), profile.get('email'))
    builder.field(tr.t("profile.phone"), profile.get('phone') or tr.t("profile.not_set"))
    builder.field(tr.t("profile.role"), tr.t(f"role.{user_type}"))
    builder.blank()
    builder.line(f"{tr.t('profile.elo')}: {profile.get('eloRating') or DEFAULT_ELO}")
    if profile.get('trustScore') is not None:
        builder.line(f"{tr.t('profile.trust')}: {profile.get('trustScore')}")
    builder.line(f"{tr.t('profile.matches')}: {profile.get('totalMatchesPlayed') or 0}")
    builder.line(
        tr.t(
            "profile.streaks",
            current=profile.get('currentStreak') or 0,
            longest=profile.get('longestStreak') or 0,
        )
    )

    if ratings is not None:
        _append_ratings(builder, ratings, tr)

    profile_data = profile.get('profileData') or {}
    if isinstance(profile_data, Mapping) and profile_data.get('profilePicture'):
        builder.blank().line(tr.t("profile.has_picture"))
    return builder.build()


def _append_ratings(builder: MarkdownBlockBuilder, ratings: Mapping[str, Any], tr) -> None:
    total = int(ratings.get('totalRatingsReceived') or 0)
    builder.blank().line(tr.t("profile.ratings_title"))
    if not total:
        builder.line(tr.t("profile.no_ratings"))
        return
    builder.line(tr.t("profile.ratings_overall", overall=ratings.get('avgOverall') or 0, count=total))
    for category, key in RATING_AVERAGE_KEYS:
        builder.line(f"{tr.t(f'ratings.{category}')}: {ratings.get(key) or 0}")


def create_profile_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    return InlineKeyboardMarkup([
        [
            InlineKeyboardButton(tr.t("profile.edit_first_name"), callback_data='profile_edit_first_name'),
            InlineKeyboardButton(tr.t("profile.edit_last_name"), callback_data='profile_edit_last_name'),
        ],
        [
            InlineKeyboardButton(tr.t("profile.edit_phone"), callback_data='profile_edit_phone'),
            InlineKeyboardButton(tr.t("profile.change_password"), callback_data='profile_password'),
        ],
        [
            InlineKeyboardButton(tr.t("profile.upload_picture"), callback_data='profile_photo'),
            InlineKeyboardButton(tr.t("menu.language"), callback_data='menu_language'),
        ],
        [InlineKeyboardButton(tr.t("nav.back_to_menu"), callback_data='back_to_menu')],
    ])


__all__ = ['create_profile_keyboard', 'format_user_profile_message', 'format_user_role_badge']
