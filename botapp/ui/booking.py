"""Booking flow views: date choice, slot grid, duration and confirmation."""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from api.models import Field, Reservation, Venue
from availability.resolver import AvailabilityResult
from botapp.i18n import get_translator
from botapp.ui.constants import SLOT_COLUMNS
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown, format_price, format_time_range

_WEEKDAY_KEYS = [
    "day.monday",
    "day.tuesday",
    "day.wednesday",
    "day.thursday",
    "day.friday",
    "day.saturday",
    "day.sunday",
]


def format_date_label(value: date, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    return f"{tr.t(_WEEKDAY_KEYS[value.weekday()])} {value.strftime('%d.%m')}"


def create_date_keyboard(dates: Sequence[date], venue_id: str, language: Optional[str] = None) -> InlineKeyboardMarkup:
    """Bookable dates, two per row, today first."""
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = []
    for index in range(0, len(dates), 2):
        keyboard.append([
            InlineKeyboardButton(
                format_date_label(day, language),
                callback_data=f'book_date_{day.isoformat()}',
            )
            for day in dates[index:index + 2]
        ])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data=f'venue_view_{venue_id}')])
    return InlineKeyboardMarkup(keyboard)


def format_date_prompt(venue: Venue, field: Field, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    return (
        MarkdownBlockBuilder()
        .heading(tr.t("booking.title"))
        .blank()
        .line(f"🏟️ {escape_telegram_markdown(venue.name)} · {escape_telegram_markdown(field.name)}")
        .blank()
        .line(tr.t("booking.date_prompt"))
        .build()
    )


def create_slot_keyboard(result: AvailabilityResult, language: Optional[str] = None) -> InlineKeyboardMarkup:
    """
    Slot grid for one date.

    Unavailable starts are rendered as inert ``noop`` buttons so they stay
    visible without being selectable.
    """
    tr = get_translator(language)
    buttons = [
        InlineKeyboardButton(f"🟢 {slot.start}", callback_data=f'book_slot_{slot.start}')
        if slot.available
        else InlineKeyboardButton(f"🚫 {slot.start}", callback_data='noop')
        for slot in result.slots
    ]
    keyboard = [buttons[index:index + SLOT_COLUMNS] for index in range(0, len(buttons), SLOT_COLUMNS)]
    keyboard.append([InlineKeyboardButton(tr.t("booking.change_date"), callback_data='book_dates')])
    return InlineKeyboardMarkup(keyboard)


def format_slot_grid_message(
    venue: Venue,
    field: Field,
    result: AvailabilityResult,
    language: Optional[str] = None,
    *,
    notice: Optional[str] = None,
) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder()
    if notice:
        builder.line(notice).blank()
    builder.heading(tr.t("booking.slots_title", date=result.date))
    builder.line(f"🏟️ {escape_telegram_markdown(venue.name)} · {escape_telegram_markdown(field.name)}")
    builder.blank()
    if result.available_starts:
        builder.line(tr.t("booking.slots_prompt"))
    else:
        builder.line(tr.t("booking.no_slots"))
    return builder.build()


def create_retry_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    return InlineKeyboardMarkup([
        [InlineKeyboardButton(tr.t("action.retry"), callback_data='book_retry')],
        [InlineKeyboardButton(tr.t("booking.change_date"), callback_data='book_dates')],
    ])


def create_duration_keyboard(
    max_hours: int,
    price_per_hour: float,
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard = [
        [InlineKeyboardButton(
            f"{tr.t('booking.hours_option', hours=hours)} · {format_price(price_per_hour * hours)}",
            callback_data=f'book_hours_{hours}',
        )]
        for hours in range(1, max_hours + 1)
    ]
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='book_slots')])
    return InlineKeyboardMarkup(keyboard)


def format_booking_summary(
    venue: Venue,
    field: Field,
    booking_date: str,
    start: str,
    end: str,
    hours: int,
    total_price: float,
    language: Optional[str] = None,
) -> str:
    tr = get_translator(language)
    return (
        MarkdownBlockBuilder()
        .heading(tr.t("booking.confirm_title"))
        .blank()
        .field(tr.t("booking.venue"), venue.name)
        .field(tr.t("booking.field"), field.name)
        .field(tr.t("booking.date"), booking_date)
        .field(tr.t("booking.time"), format_time_range(start, end))
        .line(f"{tr.t('booking.duration')}: {tr.t('booking.hours_option', hours=hours)}")
        .line(f"{tr.t('booking.total')}: {format_price(total_price)}")
        .blank()
        .line(tr.t("booking.confirm_prompt"))
        .build()
    )


def create_booking_confirmation_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    return InlineKeyboardMarkup([
        [
            InlineKeyboardButton(tr.t("action.confirm"), callback_data='book_confirm'),
            InlineKeyboardButton(tr.t("nav.cancel"), callback_data='book_cancel'),
        ],
        [InlineKeyboardButton(tr.t("nav.back"), callback_data='book_slots')],
    ])


def format_booking_success(reservation: Reservation, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    return (
        MarkdownBlockBuilder()
        .heading(tr.t("booking.success_title"))
        .blank()
        .field(tr.t("booking.date"), reservation.date)
        .field(tr.t("booking.time"), format_time_range(reservation.start_time, reservation.end_time))
        .line(f"{tr.t('booking.total')}: {format_price(reservation.total_price)}")
        .field(tr.t("reservations.status"), tr.t(f"status.{reservation.status}"))
        .build()
    )


__all__ = [
    'create_booking_confirmation_keyboard',
    'create_date_keyboard',
    'create_duration_keyboard',
    'create_retry_keyboard',
    'create_slot_keyboard',
    'format_booking_success',
    'format_booking_summary',
    'format_date_label',
    'format_date_prompt',
    'format_slot_grid_message',
]
