"""Static profile callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    """Return callback mappings for profile management actions."""

    return {
        'menu_profile': handler.handle_profile_menu,
        'profile_edit_first_name': handler.handle_edit_first_name,
        'profile_edit_last_name': handler.handle_edit_last_name,
        'profile_edit_phone': handler.handle_edit_phone,
        'profile_password': handler.handle_change_password,
        'profile_photo': handler.handle_photo_prompt,
    }


def build_input_routes(handler) -> Dict[str, Callable]:
    """Pending text prompts; ``profile_photo`` receives photo and document messages."""

    return {
        'profile_first_name': handler.handle_first_name_input,
        'profile_last_name': handler.handle_last_name_input,
        'profile_phone': handler.handle_phone_input,
        'password_current': handler.handle_current_password_input,
        'password_new': handler.handle_new_password_input,
        'password_confirm': handler.handle_confirm_password_input,
        'profile_photo': handler.handle_photo_upload,
    }
