"""My-reservations list and detail views."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from api.models import Reservation
from botapp.i18n import get_translator
from botapp.ui.constants import STATUS_BADGES
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown, format_price, format_time_range
from infrastructure.constants import RESERVATION_PERIODS


def _reservation_label(reservation: Reservation) -> str:
    badge = STATUS_BADGES.get(reservation.status, '•')
    place = reservation.venue_name or reservation.field_name or ''
    return f"{badge} {reservation.date} {format_time_range(reservation.start_time, reservation.end_time)} {place}".strip()


def format_reservations_list(reservations: Sequence[Reservation], language: Optional[str] = None, period: str = "all") -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("reservations.title"))
    if period != "all":
        builder.line(tr.t(f"reservations.period_{period}"))
    builder.blank()
    if not reservations:
        return builder.line(tr.t("reservations.empty")).build()
    return builder.line(tr.t("reservations.count", count=len(reservations))).build()


def create_reservations_keyboard(
    reservations: Sequence[Reservation],
    language: Optional[str] = None,
    period: str = "all",
    counts: Optional[Mapping[str, int]] = None,
) -> InlineKeyboardMarkup:
    """Reservation rows under an all / upcoming / past switch showing each count."""
    tr = get_translator(language)
    counts = counts or {}
    keyboard = [[
        InlineKeyboardButton(
            f"{'✅ ' if option == period else ''}{tr.t(f'reservations.period_{option}')} ({counts.get(option, 0)})",
            callback_data=f'res_period_{option}',
        )
        for option in RESERVATION_PERIODS
    ]]
    keyboard.extend(
        [InlineKeyboardButton(_reservation_label(item), callback_data=f'res_view_{item.id}')]
        for item in reservations
    )
    keyboard.append([InlineKeyboardButton(tr.t("nav.back_to_menu"), callback_data='back_to_menu')])
    return InlineKeyboardMarkup(keyboard)


def format_reservation_detail(reservation: Reservation, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("reservations.detail_title")).blank()
    builder.field(tr.t("booking.venue"), reservation.venue_name)
    builder.field(tr.t("booking.field"), reservation.field_name)
    builder.field(tr.t("booking.date"), reservation.date)
    builder.field(tr.t("booking.time"), format_time_range(reservation.start_time, reservation.end_time))
    builder.line(f"{tr.t('booking.total')}: {format_price(reservation.total_price)}")
    builder.line(
        f"{tr.t('reservations.status')}: {STATUS_BADGES.get(reservation.status, '')} "
        f"{escape_telegram_markdown(tr.t(f'status.{reservation.status}'))}"
    )
    if reservation.payment_status:
        builder.field(tr.t("reservations.payment"), tr.t(f"payment.{reservation.payment_status}"))
    builder.field(tr.t("reservations.team"), reservation.team_name)
    return builder.build()


def create_reservation_detail_keyboard(reservation: Reservation, language: Optional[str] = None) -> InlineKeyboardMarkup:
    """Cancel is only offered while the reservation is not in a terminal status."""
    tr = get_translator(language)
    keyboard = []
    if reservation.can_cancel:
        keyboard.append([InlineKeyboardButton(tr.t("reservations.cancel_button"), callback_data=f'res_cancel_{reservation.id}')])
    if reservation.status == 'completed':
        keyboard.append([InlineKeyboardButton(tr.t("ratings.rate_players"), callback_data=f'rate_start_{reservation.id}')])
    elif reservation.status in ('pending', 'confirmed'):
        keyboard.append([
            InlineKeyboardButton(tr.t("player_search.find_players"), callback_data=f'ps_create_{reservation.id}'),
            InlineKeyboardButton(tr.t("player_search.requests_button"), callback_data=f'ps_requests_{reservation.id}'),
        ])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_reservations')])
    return InlineKeyboardMarkup(keyboard)


def create_cancel_confirmation_keyboard(reservation_id: str, language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    return InlineKeyboardMarkup([[
        InlineKeyboardButton(tr.t("reservations.cancel_yes"), callback_data=f'res_cancel_yes_{reservation_id}'),
        InlineKeyboardButton(tr.t("action.no"), callback_data=f'res_view_{reservation_id}'),
    ]])


__all__ = [
    'create_cancel_confirmation_keyboard',
    'create_reservation_detail_keyboard',
    'create_reservations_keyboard',
    'format_reservation_detail',
    'format_reservations_list',
]
