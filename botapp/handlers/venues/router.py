"""Static venue callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    """Return callback mappings for venue browsing; trailing ``_`` marks a prefix."""

    return {
        'menu_venues': handler.handle_venues_menu,
        'venue_search': handler.handle_search_prompt,
        'venue_sort_menu': handler.handle_sort_menu,
        'venue_city_menu': handler.handle_city_menu,
        'venue_district_menu': handler.handle_district_menu,
        'venue_clear': handler.handle_clear_filters,
        'venue_page_': handler.handle_page,
        'venue_sort_': handler.handle_sort_selection,
        'venue_city_': handler.handle_city_selection,
        'venue_district_': handler.handle_district_selection,
        'venue_view_': handler.handle_venue_detail,
    }


def build_input_routes(handler) -> Dict[str, Callable]:
    return {
        'venue_search': handler.handle_search_input,
    }
