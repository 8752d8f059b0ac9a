"""Venue browsing views: filterable list and venue detail."""

from __future__ import annotations

from typing import List, Optional, Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from api.models import Venue
from botapp.i18n import get_translator
from botapp.ui.constants import VENUES_PER_PAGE
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown, format_price
from infrastructure.constants import VENUE_SORT_KEYS
from listing.filters import VenueFilters


def page_count(total: int, per_page: int = VENUES_PER_PAGE) -> int:
    return max(1, (total + per_page - 1) // per_page)


def page_slice(items: Sequence[Venue], page: int, per_page: int = VENUES_PER_PAGE) -> List[Venue]:
    start = (max(1, page) - 1) * per_page
    return list(items[start:start + per_page])


def format_venue_list_message(venues: Sequence[Venue], filters: VenueFilters, total: int, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("venues.title"))

    active = []
    if filters.search:
        active.append(tr.t("venues.filter_search", value=escape_telegram_markdown(filters.search)))
    if filters.city:
        active.append(tr.t("venues.filter_city", value=escape_telegram_markdown(filters.city)))
    if filters.district:
        active.append(tr.t("venues.filter_district", value=escape_telegram_markdown(filters.district)))
    active.append(tr.t("venues.filter_sort", value=tr.t(f"venues.sort_{filters.sort_by}")))
    builder.blank().bullets(active)

    if not venues:
        return builder.blank().line(tr.t("venues.empty")).build()

    builder.blank().line(tr.t("venues.count", count=total))
    return builder.build()


def _venue_label(venue: Venue) -> str:
    rating = f" ⭐{venue.average_rating:.1f}" if venue.average_rating else ""
    price = f" · {format_price(venue.price_per_hour)}" if venue.price_per_hour else ""
    return f"{venue.name} ({venue.district or venue.city}){price}{rating}"


def create_venue_list_keyboard(
    venues: Sequence[Venue],
    page: int,
    total_pages: int,
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    """Venue buttons for one display page plus the filter controls."""
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = [
        [InlineKeyboardButton(_venue_label(venue), callback_data=f'venue_view_{venue.id}')]
        for venue in venues
    ]

    if total_pages > 1:
        keyboard.append([
            InlineKeyboardButton(tr.t("nav.previous"), callback_data=f'venue_page_{page - 1}')
            if page > 1 else InlineKeyboardButton("·", callback_data='noop'),
            InlineKeyboardButton(tr.t("nav.page_label", page=page, total=total_pages), callback_data='noop'),
            InlineKeyboardButton(tr.t("nav.next"), callback_data=f'venue_page_{page + 1}')
            if page < total_pages else InlineKeyboardButton("·", callback_data='noop'),
        ])

    keyboard.append([
        InlineKeyboardButton(tr.t("venues.search_button"), callback_data='venue_search'),
        InlineKeyboardButton(tr.t("venues.sort_button"), callback_data='venue_sort_menu'),
    ])
    keyboard.append([
        InlineKeyboardButton(tr.t("venues.city_button"), callback_data='venue_city_menu'),
        InlineKeyboardButton(tr.t("venues.district_button"), callback_data='venue_district_menu'),
    ])
    keyboard.append([
        InlineKeyboardButton(tr.t("venues.clear_button"), callback_data='venue_clear'),
        InlineKeyboardButton(tr.t("nav.back_to_menu"), callback_data='back_to_menu'),
    ])
    return InlineKeyboardMarkup(keyboard)


def create_choice_keyboard(
    options: Sequence[str],
    prefix: str,
    selected: str = '',
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    """City / district pickers; options are addressed by index to stay within callback limits."""
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = []
    for index in range(0, len(options), 2):
        row = []
        for offset, option in enumerate(options[index:index + 2]):
            mark = "✅ " if option == selected else ""
            row.append(InlineKeyboardButton(f"{mark}{option}", callback_data=f'{prefix}_{index + offset}'))
        keyboard.append(row)
    keyboard.append([InlineKeyboardButton(tr.t("venues.any_option"), callback_data=f'{prefix}_all')])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_venues')])
    return InlineKeyboardMarkup(keyboard)


def create_sort_keyboard(current: str, language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard = [
        [InlineKeyboardButton(
            f"{'✅ ' if key == current else ''}{tr.t(f'venues.sort_{key}')}",
            callback_data=f'venue_sort_{key}',
        )]
        for key in VENUE_SORT_KEYS
    ]
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_venues')])
    return InlineKeyboardMarkup(keyboard)


def format_venue_detail(venue: Venue, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(f"🏟️ *{escape_telegram_markdown(venue.name)}*").blank()
    location = ", ".join(part for part in (venue.address, venue.district, venue.city) if part)
    builder.field(tr.t("venues.address"), location)
    builder.field(tr.t("venues.phone"), venue.phone)
    builder.line(f"{tr.t('venues.price')}: {format_price(venue.price_per_hour)}")
    if venue.average_rating:
        builder.line(tr.t("venues.rating", rating=f"{venue.average_rating:.1f}", count=venue.total_reviews))
    if venue.description:
        builder.blank().line(escape_telegram_markdown(venue.description))

    builder.blank()
    active_fields = [item for item in venue.fields if item.is_active]
    if not active_fields:
        builder.line(tr.t("venues.no_fields"))
    else:
        builder.line(tr.t("venues.fields_title"))
        for item in active_fields:
            extras = []
            if item.surface_type:
                extras.append(item.surface_type)
            if item.has_lighting:
                extras.append("💡")
            if item.has_roof:
                extras.append("🏠")
            suffix = f" ({', '.join(extras)})" if extras else ""
            builder.bullet(f"{escape_telegram_markdown(item.name)}{escape_telegram_markdown(suffix)}")
    return builder.build()


def create_venue_detail_keyboard(venue: Venue, language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard = [
        [InlineKeyboardButton(tr.t("venues.book_field", name=item.name), callback_data=f'book_field_{item.id}')]
        for item in venue.fields
        if item.is_active
    ]
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_venues')])
    return InlineKeyboardMarkup(keyboard)


__all__ = [
    'create_choice_keyboard',
    'create_sort_keyboard',
    'create_venue_detail_keyboard',
    'create_venue_list_keyboard',
    'format_venue_detail',
    'format_venue_list_message',
    'page_count',
    'page_slice',
]
