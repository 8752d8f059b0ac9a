"""Static players-wanted callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    return {
        'social_search': handler.handle_player_search,
        'ps_mine': handler.handle_mine,
        'ps_filter_': handler.handle_filter_menu,
        'ps_opt_': handler.handle_filter_option,
        'ps_join_': handler.handle_join,
        'ps_leave_': handler.handle_leave,
        'ps_cancel_': handler.handle_cancel,
        'ps_create_': handler.handle_create_prompt,
        'ps_req_accept_': handler.handle_request_accept,
        'ps_req_reject_': handler.handle_request_reject,
        'ps_requests_': handler.handle_requests,
    }


def build_input_routes(handler) -> Dict[str, Callable]:
    return {
        'ps_players_needed': handler.handle_players_needed_input,
        'ps_description': handler.handle_description_input,
    }
