"""Static rating callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    return {
        'rate_comment': handler.handle_comment_prompt,
        'rate_back': handler.handle_back,
        'rate_save': handler.handle_save,
        'rate_submit': handler.handle_submit,
        'rate_start_': handler.handle_rating_start,
        'rate_player_': handler.handle_player_selection,
        'rate_adj_': handler.handle_score_adjust,
        'rate_flag_': handler.handle_flag_toggle,
    }


def build_input_routes(handler) -> Dict[str, Callable]:
    return {
        'rating_comment': handler.handle_comment_input,
    }
