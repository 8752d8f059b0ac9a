"""Static opponent-search callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    return {
        'social_opponents': handler.handle_opponents,
        'opp_mine': handler.handle_my_listings,
        'opp_create': handler.handle_create_prompt,
        'opp_propose': handler.handle_propose_prompt,
        'opp_page_': handler.handle_page,
        'opp_view_': handler.handle_listing_detail,
        'opp_type_': handler.handle_match_type,
    }


def build_input_routes(handler) -> Dict[str, Callable]:
    return {
        'opp_title': handler.handle_title_input,
        'opp_date_start': handler.handle_date_start_input,
        'opp_date_end': handler.handle_date_end_input,
        'opp_proposal_date': handler.handle_proposal_date_input,
        'opp_proposal_time': handler.handle_proposal_time_input,
    }
