"""Static reservation callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    # res_cancel_yes_ must be registered ahead of res_cancel_
    return {
        'menu_reservations': handler.handle_reservations_menu,
        'res_period_': handler.handle_period,
        'res_view_': handler.handle_reservation_detail,
        'res_cancel_yes_': handler.handle_cancel_confirmed,
        'res_cancel_': handler.handle_cancel_request,
    }
