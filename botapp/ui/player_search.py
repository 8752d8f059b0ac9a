"""Players-wanted listings, their filters and the join requests they receive."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Set

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from api.models import JoinRequest, PlayerSearchListing
from botapp.i18n import get_translator
from botapp.ui.constants import STATUS_BADGES
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown

# filter key -> label key
FILTER_LABELS = (
    ('city', 'venues.filter_city'),
    ('district', 'venues.filter_district'),
    ('playerPosition', 'player_search.filter_position'),
)


def _listing_line(listing: PlayerSearchListing, tr) -> str:
    when = f"{listing.match_date} {listing.match_time}".strip()
    line = tr.t("social.player_search_line", when=when, spots=listing.spots_left)
    place = ", ".join(part for part in (listing.venue_name, listing.district) if part)
    if place:
        line = f"{line} · {escape_telegram_markdown(place)}"
    return line


def format_player_searches_message(
    listings: Sequence[PlayerSearchListing],
    filters: Mapping[str, str],
    language: Optional[str] = None,
) -> str:
    """Open "players wanted" listings with the spots still free."""
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("social.player_search_title"))
    active = [
        tr.t(label, value=escape_telegram_markdown(filters[key]))
        for key, label in FILTER_LABELS
        if filters.get(key)
    ]
    if active:
        builder.blank().bullets(active)
    builder.blank()
    if not listings:
        return builder.line(tr.t("social.no_player_searches")).build()
    for listing in listings:
        builder.bullet(_listing_line(listing, tr))
        if listing.positions:
            builder.line(f"   {tr.t('player_search.positions')}: {escape_telegram_markdown(', '.join(listing.positions))}")
        if listing.description:
            builder.line(f"   _{escape_telegram_markdown(listing.description)}_")
    return builder.build()


def create_player_search_keyboard(
    listings: Sequence[PlayerSearchListing],
    joined: Set[str],
    filters: Mapping[str, str],
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = []
    for listing in listings:
        if listing.id in joined:
            keyboard.append([InlineKeyboardButton(
                tr.t("player_search.leave_button", when=listing.match_date),
                callback_data=f'ps_leave_{listing.id}',
            )])
        elif listing.spots_left > 0:
            keyboard.append([InlineKeyboardButton(
                tr.t("social.join_button", when=listing.match_date),
                callback_data=f'ps_join_{listing.id}',
            )])
    keyboard.append([
        InlineKeyboardButton(tr.t("venues.city_button"), callback_data='ps_filter_city'),
        InlineKeyboardButton(tr.t("venues.district_button"), callback_data='ps_filter_district'),
        InlineKeyboardButton(tr.t("player_search.position_button"), callback_data='ps_filter_playerPosition'),
    ])
    if any(filters.values()):
        keyboard.append([InlineKeyboardButton(tr.t("venues.clear_button"), callback_data='ps_filter_clear')])
    keyboard.append([
        InlineKeyboardButton(tr.t("player_search.mine_button"), callback_data='ps_mine'),
        InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_social'),
    ])
    return InlineKeyboardMarkup(keyboard)


def create_filter_options_keyboard(options: Sequence[str], current: str, language: Optional[str] = None) -> InlineKeyboardMarkup:
    """One button per option; ``ps_opt_all`` clears the filter being picked."""
    tr = get_translator(language)
    keyboard = [[InlineKeyboardButton(
        f"{'✅ ' if not current else ''}{tr.t('venues.any_option')}",
        callback_data='ps_opt_all',
    )]]
    keyboard.extend(
        [InlineKeyboardButton(f"{'✅ ' if option == current else ''}{option}", callback_data=f'ps_opt_{index}')]
        for index, option in enumerate(options)
    )
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='social_search')])
    return InlineKeyboardMarkup(keyboard)


def format_my_player_searches(listings: Sequence[PlayerSearchListing], language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("player_search.mine_title")).blank()
    if not listings:
        return builder.line(tr.t("player_search.mine_empty")).build()
    for listing in listings:
        badge = "🟢" if listing.is_open else STATUS_BADGES.get(listing.status, "▫️")
        builder.bullet(f"{badge} {_listing_line(listing, tr)}")
    return builder.build()


def create_my_player_searches_keyboard(listings: Sequence[PlayerSearchListing], language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard = [
        [InlineKeyboardButton(
            tr.t("player_search.cancel_button", when=listing.match_date),
            callback_data=f'ps_cancel_{listing.id}',
        )]
        for listing in listings
        if listing.is_open
    ]
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='social_search')])
    return InlineKeyboardMarkup(keyboard)


def format_join_requests(requests: Sequence[JoinRequest], language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("player_search.requests_title")).blank()
    if not requests:
        return builder.line(tr.t("player_search.no_requests")).build()
    for request in requests:
        elo = f" (ELO {request.player_elo})" if request.player_elo else ""
        builder.bullet(f"{STATUS_BADGES.get(request.status, '')} {escape_telegram_markdown(request.player_name)}{elo}".strip())
        if request.message:
            builder.line(f"   _{escape_telegram_markdown(request.message)}_")
    return builder.build()


def create_join_requests_keyboard(
    requests: Sequence[JoinRequest],
    reservation_id: str,
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    """Accept/reject rows for requests still waiting on the organizer."""
    tr = get_translator(language)
    keyboard = [
        [
            InlineKeyboardButton(f"✅ {request.player_name}", callback_data=f'ps_req_accept_{request.id}'),
            InlineKeyboardButton(tr.t("action.reject"), callback_data=f'ps_req_reject_{request.id}'),
        ]
        for request in requests
        if request.is_pending
    ]
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data=f'res_view_{reservation_id}')])
    return InlineKeyboardMarkup(keyboard)


__all__ = [
    'FILTER_LABELS',
    'create_filter_options_keyboard',
    'create_join_requests_keyboard',
    'create_my_player_searches_keyboard',
    'create_player_search_keyboard',
    'format_join_requests',
    'format_my_player_searches',
    'format_player_searches_message',
]
