"""Team screen, player invitations and team notifications."""

from __future__ import annotations

from typing import List, Optional, Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from api.models import MyTeam, PlayerCandidate, TeamNotification
from botapp.i18n import get_translator
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown


def format_team_message(team: Optional[MyTeam], language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("social.team_title")).blank()
    if team is None:
        return builder.line(tr.t("social.no_team")).build()

    builder.line(f"*{escape_telegram_markdown(team.name)}*")
    if team.description:
        builder.line(f"_{escape_telegram_markdown(team.description)}_")
    builder.blank()
    builder.field("ELO", team.elo_rating)
    builder.line(tr.t("teams.record", matches=team.total_matches, wins=team.total_wins, rate=team.win_rate))
    if team.logo_url:
        builder.line(tr.t("teams.has_logo"))

    if team.members:
        builder.blank().line(tr.t("social.members", count=len(team.members)))
        for member in team.members:
            badge = "©️ " if member.role == 'captain' or member.user_id == team.captain_id else ""
            elo = f" (ELO {member.elo_rating})" if member.elo_rating else ""
            builder.bullet(f"{badge}{escape_telegram_markdown(member.display_name)}{elo}")
    return builder.build()


def create_team_keyboard(
    team: Optional[MyTeam],
    is_captain: bool,
    unread: int = 0,
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = []
    if team is None:
        keyboard.append([InlineKeyboardButton(tr.t("teams.create_button"), callback_data='team_create')])
    elif is_captain:
        keyboard.append([InlineKeyboardButton(tr.t("teams.invite_button"), callback_data='team_invite')])
        keyboard.append([
            InlineKeyboardButton(tr.t("teams.edit_description"), callback_data='team_describe'),
            InlineKeyboardButton(tr.t("teams.upload_logo"), callback_data='team_logo'),
        ])
    notifications = tr.t("teams.notifications")
    if unread:
        notifications = f"{notifications} ({unread})"
    keyboard.append([InlineKeyboardButton(notifications, callback_data='team_notifications')])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_social')])
    return InlineKeyboardMarkup(keyboard)


def format_candidates_message(candidates: Sequence[PlayerCandidate], term: str, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("teams.candidates_title", term=escape_telegram_markdown(term))).blank()
    if not candidates:
        return builder.line(tr.t("teams.no_candidates")).build()
    for candidate in candidates:
        suffix = tr.t("teams.has_team") if candidate.has_team else ""
        elo = f" (ELO {candidate.elo_rating})" if candidate.elo_rating else ""
        builder.bullet(f"{escape_telegram_markdown(candidate.display_name)}{elo} {suffix}".rstrip())
    return builder.build()


def create_candidates_keyboard(candidates: Sequence[PlayerCandidate], language: Optional[str] = None) -> InlineKeyboardMarkup:
    """Players who already have a team cannot be invited and get no button."""
    tr = get_translator(language)
    keyboard = [
        [InlineKeyboardButton(tr.t("teams.invite_player", name=candidate.display_name), callback_data=f'team_pick_{index}')]
        for index, candidate in enumerate(candidates)
        if not candidate.has_team
    ]
    keyboard.append([
        InlineKeyboardButton(tr.t("teams.search_again"), callback_data='team_invite'),
        InlineKeyboardButton(tr.t("nav.back"), callback_data='social_team'),
    ])
    return InlineKeyboardMarkup(keyboard)


def format_notifications_message(notifications: Sequence[TeamNotification], language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("teams.notifications_title")).blank()
    if not notifications:
        return builder.line(tr.t("teams.no_notifications")).build()
    for notification in notifications:
        marker = "▫️" if notification.is_read else "🔔"
        builder.line(f"{marker} *{escape_telegram_markdown(notification.title)}*")
        if notification.message:
            builder.line(f"   {escape_telegram_markdown(notification.message)}")
    return builder.build()


def create_notifications_keyboard(notifications: Sequence[TeamNotification], language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    unread = [item for item in notifications if not item.is_read]
    keyboard = [
        [InlineKeyboardButton(f"✔️ {item.title}", callback_data=f'team_nread_{item.id}')]
        for item in unread
    ]
    if unread:
        keyboard.append([InlineKeyboardButton(tr.t("teams.mark_all_read"), callback_data='team_nread_all')])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='social_team')])
    return InlineKeyboardMarkup(keyboard)


__all__ = [
    'create_candidates_keyboard',
    'create_notifications_keyboard',
    'create_team_keyboard',
    'format_candidates_message',
    'format_notifications_message',
    'format_team_message',
]
