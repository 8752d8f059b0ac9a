"""Facade over the modular Telegram UI helpers."""

from __future__ import annotations

from .admin import (
    create_admin_menu_keyboard as _create_admin_menu_keyboard,
    create_admin_reservation_detail_keyboard as _create_admin_reservation_detail_keyboard,
    create_admin_reservations_keyboard as _create_admin_reservations_keyboard,
    create_admin_team_detail_keyboard as _create_admin_team_detail_keyboard,
    create_admin_teams_keyboard as _create_admin_teams_keyboard,
    create_admin_user_detail_keyboard as _create_admin_user_detail_keyboard,
    create_admin_users_keyboard as _create_admin_users_keyboard,
    create_admin_venue_detail_keyboard as _create_admin_venue_detail_keyboard,
    create_admin_venues_keyboard as _create_admin_venues_keyboard,
    format_admin_dashboard as _format_admin_dashboard,
    format_admin_list_message as _format_admin_list_message,
    format_admin_reservation_detail as _format_admin_reservation_detail,
    format_admin_team_detail as _format_admin_team_detail,
    format_admin_user_detail as _format_admin_user_detail,
    format_admin_venue_detail as _format_admin_venue_detail,
    format_detailed_statistics as _format_detailed_statistics,
)
from .booking import (
    create_booking_confirmation_keyboard as _create_booking_confirmation_keyboard,
    create_date_keyboard as _create_date_keyboard,
    create_duration_keyboard as _create_duration_keyboard,
    create_retry_keyboard as _create_retry_keyboard,
    create_slot_keyboard as _create_slot_keyboard,
    format_booking_success as _format_booking_success,
    format_booking_summary as _format_booking_summary,
    format_date_prompt as _format_date_prompt,
    format_slot_grid_message as _format_slot_grid_message,
)
from .menus import (
    create_auth_keyboard as _create_auth_keyboard,
    create_back_keyboard as _create_back_keyboard,
    create_back_to_menu_keyboard as _create_back_to_menu_keyboard,
    create_cancel_input_keyboard as _create_cancel_input_keyboard,
    create_confirm_keyboard as _create_confirm_keyboard,
    create_language_keyboard as _create_language_keyboard,
    create_main_menu_keyboard as _create_main_menu_keyboard,
    create_pagination_row as _create_pagination_row,
)
from .opponents import (
    create_match_type_keyboard as _create_match_type_keyboard,
    create_opponent_listing_detail_keyboard as _create_opponent_listing_detail_keyboard,
    create_opponent_listings_keyboard as _create_opponent_listings_keyboard,
    format_my_opponent_listings as _format_my_opponent_listings,
    format_opponent_listing_detail as _format_opponent_listing_detail,
    format_opponent_listings_message as _format_opponent_listings_message,
)
from .player_search import (
    create_filter_options_keyboard as _create_filter_options_keyboard,
    create_join_requests_keyboard as _create_join_requests_keyboard,
    create_my_player_searches_keyboard as _create_my_player_searches_keyboard,
    create_player_search_keyboard as _create_player_search_keyboard,
    format_join_requests as _format_join_requests,
    format_my_player_searches as _format_my_player_searches,
    format_player_searches_message as _format_player_searches_message,
)
from .profile import (
    create_profile_keyboard as _create_profile_keyboard,
    format_user_profile_message as _format_user_profile_message,
    format_user_role_badge as _format_user_role_badge,
)
from .ratings import (
    create_rating_editor_keyboard as _create_rating_editor_keyboard,
    create_rating_players_keyboard as _create_rating_players_keyboard,
    format_rating_editor as _format_rating_editor,
    format_rating_overview as _format_rating_overview,
)
from .reservations import (
    create_cancel_confirmation_keyboard as _create_cancel_confirmation_keyboard,
    create_reservation_detail_keyboard as _create_reservation_detail_keyboard,
    create_reservations_keyboard as _create_reservations_keyboard,
    format_reservation_detail as _format_reservation_detail,
    format_reservations_list as _format_reservations_list,
)
from .social import (
    create_invitations_keyboard as _create_invitations_keyboard,
    create_proposals_keyboard as _create_proposals_keyboard,
    create_social_menu_keyboard as _create_social_menu_keyboard,
    format_invitations_message as _format_invitations_message,
    format_proposals_message as _format_proposals_message,
)
from .teams import (
    create_candidates_keyboard as _create_candidates_keyboard,
    create_notifications_keyboard as _create_notifications_keyboard,
    create_team_keyboard as _create_team_keyboard,
    format_candidates_message as _format_candidates_message,
    format_notifications_message as _format_notifications_message,
    format_team_message as _format_team_message,
)
from .venues import (
    create_choice_keyboard as _create_choice_keyboard,
    create_sort_keyboard as _create_sort_keyboard,
    create_venue_detail_keyboard as _create_venue_detail_keyboard,
    create_venue_list_keyboard as _create_venue_list_keyboard,
    format_venue_detail as _format_venue_detail,
    format_venue_list_message as _format_venue_list_message,
)


class TelegramUI:
    """Single import point mapping to the modular UI helpers."""

    create_main_menu_keyboard = staticmethod(_create_main_menu_keyboard)
    create_auth_keyboard = staticmethod(_create_auth_keyboard)
    create_back_to_menu_keyboard = staticmethod(_create_back_to_menu_keyboard)
    create_back_keyboard = staticmethod(_create_back_keyboard)
    create_cancel_input_keyboard = staticmethod(_create_cancel_input_keyboard)
    create_confirm_keyboard = staticmethod(_create_confirm_keyboard)
    create_language_keyboard = staticmethod(_create_language_keyboard)
    create_pagination_row = staticmethod(_create_pagination_row)

    format_venue_list_message = staticmethod(_format_venue_list_message)
    create_venue_list_keyboard = staticmethod(_create_venue_list_keyboard)
    create_choice_keyboard = staticmethod(_create_choice_keyboard)
    create_sort_keyboard = staticmethod(_create_sort_keyboard)
    format_venue_detail = staticmethod(_format_venue_detail)
    create_venue_detail_keyboard = staticmethod(_create_venue_detail_keyboard)

    format_date_prompt = staticmethod(_format_date_prompt)
    create_date_keyboard = staticmethod(_create_date_keyboard)
    format_slot_grid_message = staticmethod(_format_slot_grid_message)
    create_slot_keyboard = staticmethod(_create_slot_keyboard)
    create_retry_keyboard = staticmethod(_create_retry_keyboard)
    create_duration_keyboard = staticmethod(_create_duration_keyboard)
    format_booking_summary = staticmethod(_format_booking_summary)
    create_booking_confirmation_keyboard = staticmethod(_create_booking_confirmation_keyboard)
    format_booking_success = staticmethod(_format_booking_success)

    format_reservations_list = staticmethod(_format_reservations_list)
    create_reservations_keyboard = staticmethod(_create_reservations_keyboard)
    format_reservation_detail = staticmethod(_format_reservation_detail)
    create_reservation_detail_keyboard = staticmethod(_create_reservation_detail_keyboard)
    create_cancel_confirmation_keyboard = staticmethod(_create_cancel_confirmation_keyboard)

    create_social_menu_keyboard = staticmethod(_create_social_menu_keyboard)
    format_invitations_message = staticmethod(_format_invitations_message)
    create_invitations_keyboard = staticmethod(_create_invitations_keyboard)
    format_proposals_message = staticmethod(_format_proposals_message)
    create_proposals_keyboard = staticmethod(_create_proposals_keyboard)

    format_team_message = staticmethod(_format_team_message)
    create_team_keyboard = staticmethod(_create_team_keyboard)
    format_candidates_message = staticmethod(_format_candidates_message)
    create_candidates_keyboard = staticmethod(_create_candidates_keyboard)
    format_notifications_message = staticmethod(_format_notifications_message)
    create_notifications_keyboard = staticmethod(_create_notifications_keyboard)

    format_opponent_listings_message = staticmethod(_format_opponent_listings_message)
    create_opponent_listings_keyboard = staticmethod(_create_opponent_listings_keyboard)
    format_opponent_listing_detail = staticmethod(_format_opponent_listing_detail)
    create_opponent_listing_detail_keyboard = staticmethod(_create_opponent_listing_detail_keyboard)
    format_my_opponent_listings = staticmethod(_format_my_opponent_listings)
    create_match_type_keyboard = staticmethod(_create_match_type_keyboard)

    format_player_searches_message = staticmethod(_format_player_searches_message)
    create_player_search_keyboard = staticmethod(_create_player_search_keyboard)
    create_filter_options_keyboard = staticmethod(_create_filter_options_keyboard)
    format_my_player_searches = staticmethod(_format_my_player_searches)
    create_my_player_searches_keyboard = staticmethod(_create_my_player_searches_keyboard)
    format_join_requests = staticmethod(_format_join_requests)
    create_join_requests_keyboard = staticmethod(_create_join_requests_keyboard)

    format_rating_overview = staticmethod(_format_rating_overview)
    create_rating_players_keyboard = staticmethod(_create_rating_players_keyboard)
    format_rating_editor = staticmethod(_format_rating_editor)
    create_rating_editor_keyboard = staticmethod(_create_rating_editor_keyboard)

    format_user_profile_message = staticmethod(_format_user_profile_message)
    format_user_role_badge = staticmethod(_format_user_role_badge)
    create_profile_keyboard = staticmethod(_create_profile_keyboard)

    create_admin_menu_keyboard = staticmethod(_create_admin_menu_keyboard)
    format_admin_dashboard = staticmethod(_format_admin_dashboard)
    format_detailed_statistics = staticmethod(_format_detailed_statistics)
    format_admin_list_message = staticmethod(_format_admin_list_message)
    create_admin_users_keyboard = staticmethod(_create_admin_users_keyboard)
    format_admin_user_detail = staticmethod(_format_admin_user_detail)
    create_admin_user_detail_keyboard = staticmethod(_create_admin_user_detail_keyboard)
    create_admin_reservations_keyboard = staticmethod(_create_admin_reservations_keyboard)
    format_admin_reservation_detail = staticmethod(_format_admin_reservation_detail)
    create_admin_reservation_detail_keyboard = staticmethod(_create_admin_reservation_detail_keyboard)
    create_admin_teams_keyboard = staticmethod(_create_admin_teams_keyboard)
    format_admin_team_detail = staticmethod(_format_admin_team_detail)
    create_admin_team_detail_keyboard = staticmethod(_create_admin_team_detail_keyboard)
    create_admin_venues_keyboard = staticmethod(_create_admin_venues_keyboard)
    format_admin_venue_detail = staticmethod(_format_admin_venue_detail)
    create_admin_venue_detail_keyboard = staticmethod(_create_admin_venue_detail_keyboard)


__all__ = ['TelegramUI']
