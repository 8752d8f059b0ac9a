"""Static booking callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram.ext import ContextTypes
from telegram import Update

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    """Return callback mappings for booking-related actions."""

    return {
        'book_dates': handler.handle_dates,
        'book_retry': handler.handle_retry,
        'book_slots': handler.handle_back_to_slots,
        'book_confirm': handler.handle_confirm,
        'book_cancel': handler.handle_cancel,
        'book_field_': handler.handle_field_selection,
        'book_date_': handler.handle_date_selection,
        'book_slot_': handler.handle_slot_selection,
        'book_hours_': handler.handle_duration_selection,
    }
