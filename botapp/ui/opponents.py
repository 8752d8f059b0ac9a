"""Opponent listing views and the match proposal form."""

from __future__ import annotations

from typing import List, Optional, Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from api.models import OpponentListing
from botapp.i18n import get_translator
from botapp.ui.constants import STATUS_BADGES
from botapp.ui.menus import create_pagination_row
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown
from infrastructure.constants import MATCH_TYPES
from listing.pagination import PageState


def _listing_label(listing: OpponentListing) -> str:
    elo = f" · ELO {listing.team_elo}" if listing.team_elo else ""
    return f"{listing.team_name or listing.title}{elo} ({listing.date_start}…{listing.date_end})"


def format_opponent_listings_message(
    listings: Sequence[OpponentListing],
    state: PageState,
    language: Optional[str] = None,
    error: Optional[str] = None,
) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("opponents.title")).blank()
    if error:
        builder.line(f"❌ {escape_telegram_markdown(error)}").blank()
    if not listings:
        return builder.line(tr.t("opponents.empty")).build()
    builder.line(tr.t("opponents.count", count=state.total))
    return builder.build()


def create_opponent_listings_keyboard(
    listings: Sequence[OpponentListing],
    state: PageState,
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = [
        [InlineKeyboardButton(_listing_label(listing), callback_data=f'opp_view_{listing.id}')]
        for listing in listings
    ]
    if state.total_pages > 1:
        keyboard.append(create_pagination_row('opp_page', state, language))
    keyboard.append([
        InlineKeyboardButton(tr.t("opponents.my_listings"), callback_data='opp_mine'),
        InlineKeyboardButton(tr.t("opponents.create_button"), callback_data='opp_create'),
    ])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_social')])
    return InlineKeyboardMarkup(keyboard)


def format_opponent_listing_detail(listing: OpponentListing, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(f"⚔️ *{escape_telegram_markdown(listing.title or listing.team_name)}*").blank()
    builder.field(tr.t("reservations.team"), listing.team_name)
    builder.field("ELO", listing.team_elo)
    builder.field(tr.t("opponents.dates"), f"{listing.date_start} - {listing.date_end}")
    location = ", ".join(part for part in (listing.district, listing.city) if part)
    builder.field(tr.t("venues.address"), location)
    builder.field(tr.t("opponents.match_type"), tr.t(f"opponents.type_{listing.match_type}") if listing.match_type in MATCH_TYPES else listing.match_type)
    builder.field(tr.t("opponents.duration"), tr.t("opponents.minutes", minutes=listing.match_duration))
    if listing.description:
        builder.blank().line(escape_telegram_markdown(listing.description))
    return builder.build()


def create_opponent_listing_detail_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    return InlineKeyboardMarkup([
        [InlineKeyboardButton(tr.t("opponents.propose_button"), callback_data='opp_propose')],
        [InlineKeyboardButton(tr.t("nav.back"), callback_data='social_opponents')],
    ])


def format_my_opponent_listings(listings: Sequence[OpponentListing], language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("opponents.my_title")).blank()
    if not listings:
        return builder.line(tr.t("opponents.my_empty")).build()
    for listing in listings:
        badge = STATUS_BADGES.get(listing.status, "🟢" if listing.status == 'active' else "")
        builder.bullet(f"{badge} {escape_telegram_markdown(listing.title)} ({listing.date_start} - {listing.date_end})".strip())
    return builder.build()


def create_match_type_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    return InlineKeyboardMarkup([
        [
            InlineKeyboardButton(tr.t(f"opponents.type_{match_type}"), callback_data=f'opp_type_{match_type}')
            for match_type in MATCH_TYPES
        ],
        [InlineKeyboardButton(tr.t("nav.cancel"), callback_data='social_opponents')],
    ])


__all__ = [
    'create_match_type_keyboard',
    'create_opponent_listing_detail_keyboard',
    'create_opponent_listings_keyboard',
    'format_my_opponent_listings',
    'format_opponent_listing_detail',
    'format_opponent_listings_message',
]
