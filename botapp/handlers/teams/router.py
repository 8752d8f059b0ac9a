"""Static team callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    # team_nread_all is an exact key, so it wins over the team_nread_ prefix
    return {
        'social_team': handler.handle_team,
        'team_create': handler.handle_create_prompt,
        'team_describe': handler.handle_describe_prompt,
        'team_invite': handler.handle_invite_prompt,
        'team_logo': handler.handle_logo_prompt,
        'team_notifications': handler.handle_notifications,
        'team_nread_all': handler.handle_mark_all_read,
        'team_pick_': handler.handle_invite_pick,
        'team_nread_': handler.handle_mark_read,
    }


def build_input_routes(handler) -> Dict[str, Callable]:
    """Pending text prompts; ``team_logo`` receives photo and document messages."""

    return {
        'team_name': handler.handle_name_input,
        'team_description': handler.handle_description_input,
        'team_invite_search': handler.handle_invite_search_input,
        'team_logo': handler.handle_logo_upload,
    }
