"""Static admin callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    """Return callback mappings for admin actions; all are admin-only."""

    return {
        'menu_admin': handler.handle_admin_menu,
        'admin_statistics': handler.handle_statistics,
        'admin_users': handler.handle_users,
        'admin_usearch': handler.handle_user_search_prompt,
        'admin_utoggle': handler.handle_user_toggle,
        'admin_udelete_yes': handler.handle_user_delete_confirmed,
        'admin_udelete': handler.handle_user_delete,
        'admin_reservations': handler.handle_reservations,
        'admin_teams': handler.handle_teams,
        'admin_tsearch': handler.handle_team_search_prompt,
        'admin_tclear': handler.handle_team_search_clear,
        'admin_tdelete_yes': handler.handle_team_delete_confirmed,
        'admin_tdelete': handler.handle_team_delete,
        'admin_venues': handler.handle_venues,
        'admin_vsearch': handler.handle_venue_search_prompt,
        'admin_vclear': handler.handle_venue_search_clear,
        'admin_vcreate': handler.handle_venue_create_prompt,
        'admin_vtoggle': handler.handle_venue_toggle,
        'admin_vprice': handler.handle_venue_price_prompt,
        'admin_vdelete_yes': handler.handle_venue_delete_confirmed,
        'admin_vdelete': handler.handle_venue_delete,
        'admin_page_': handler.handle_page,
        'admin_ufilter_': handler.handle_user_type_filter,
        'admin_uview_': handler.handle_user_detail,
        'admin_utype_': handler.handle_user_type_change,
        'admin_rfilter_': handler.handle_reservation_status_filter,
        'admin_rview_': handler.handle_reservation_detail,
        'admin_rstatus_': handler.handle_reservation_status_change,
        'admin_tview_': handler.handle_team_detail,
        'admin_vview_': handler.handle_venue_detail,
    }


def build_input_routes(handler) -> Dict[str, Callable]:
    return {
        'admin_user_search': handler.handle_user_search_input,
        'admin_team_search': handler.handle_team_search_input,
        'admin_venue_search': handler.handle_venue_search_input,
        'admin_venue_name': handler.handle_venue_name_input,
        'admin_venue_location': handler.handle_venue_location_input,
        'admin_venue_price': handler.handle_venue_create_price_input,
        'admin_venue_new_price': handler.handle_venue_price_input,
    }
