"""Player rating views: player roster and the per-player draft editor."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from api.models import PlayerRating, RateablePlayer
from botapp.i18n import get_translator
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown
from infrastructure.constants import RATING_CATEGORIES

RATING_FLAGS = ('showed_up', 'was_late', 'caused_trouble')


def format_rating_overview(
    players: Sequence[RateablePlayer],
    drafts: Mapping[str, PlayerRating],
    edited: Sequence[str],
    language: Optional[str] = None,
) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("ratings.title")).blank()
    if not players:
        return builder.line(tr.t("ratings.no_players")).build()
    builder.line(tr.t("ratings.overview_prompt"))
    builder.blank().line(tr.t("ratings.pending_count", count=len(drafts), edited=len(edited)))
    return builder.build()


def create_rating_players_keyboard(
    players: Sequence[RateablePlayer],
    drafts: Mapping[str, PlayerRating],
    edited: Sequence[str],
    reservation_id: str,
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = []
    for index, player in enumerate(players):
        if player.user_id not in drafts:
            mark = "☑️"
        elif player.user_id in edited:
            mark = "✏️"
        else:
            mark = "▫️"
        keyboard.append([InlineKeyboardButton(f"{mark} {player.display_name}", callback_data=f'rate_player_{index}')])
    if any(player_id in drafts for player_id in edited):
        keyboard.append([InlineKeyboardButton(tr.t("ratings.submit_all"), callback_data='rate_submit')])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data=f'res_view_{reservation_id}')])
    return InlineKeyboardMarkup(keyboard)


def format_rating_editor(player: RateablePlayer, draft: PlayerRating, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("ratings.editor_title", name=escape_telegram_markdown(player.display_name))).blank()
    for category in RATING_CATEGORIES:
        builder.line(f"{tr.t(f'ratings.{category}')}: {getattr(draft, category)}")
    builder.blank()
    for flag in RATING_FLAGS:
        builder.line(f"{'✅' if getattr(draft, flag) else '⬜'} {tr.t(f'ratings.{flag}')}")
    if draft.comment:
        builder.blank().line(f"💬 _{escape_telegram_markdown(draft.comment)}_")
    return builder.build()


def create_rating_editor_keyboard(draft: PlayerRating, language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = [
        [
            InlineKeyboardButton("➖", callback_data=f'rate_adj_{category}_down'),
            InlineKeyboardButton(f"{tr.t(f'ratings.{category}')} {getattr(draft, category)}", callback_data='noop'),
            InlineKeyboardButton("➕", callback_data=f'rate_adj_{category}_up'),
        ]
        for category in RATING_CATEGORIES
    ]
    for flag in RATING_FLAGS:
        keyboard.append([InlineKeyboardButton(
            f"{'✅' if getattr(draft, flag) else '⬜'} {tr.t(f'ratings.{flag}')}",
            callback_data=f'rate_flag_{flag}',
        )])
    keyboard.append([InlineKeyboardButton(tr.t("ratings.comment_button"), callback_data='rate_comment')])
    keyboard.append([
        InlineKeyboardButton(tr.t("ratings.save"), callback_data='rate_save'),
        InlineKeyboardButton(tr.t("ratings.done"), callback_data='rate_back'),
    ])
    return InlineKeyboardMarkup(keyboard)


__all__ = [
    'RATING_FLAGS',
    'create_rating_editor_keyboard',
    'create_rating_players_keyboard',
    'format_rating_editor',
    'format_rating_overview',
]
