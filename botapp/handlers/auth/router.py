"""Static auth and navigation callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    """Routes reachable without a session."""

    return {
        'auth_login': handler.handle_login_start,
        'auth_register': handler.handle_register_start,
        'menu_language': handler.handle_language_menu,
        'lang_': handler.handle_language_selection,
        'input_cancel': handler.handle_input_cancel,
        'back_to_menu': handler.handle_back_to_menu,
        'noop': handler.handle_noop,
    }


def build_protected_routes(handler) -> Dict[str, CallbackFn]:
    return {
        'auth_logout': handler.handle_logout,
    }


def build_input_routes(handler) -> Dict[str, Callable]:
    """Text prompts answered while signed out."""

    return {
        'login_email': handler.handle_login_email,
        'login_password': handler.handle_login_password,
        'register_email': handler.handle_register_email,
        'register_password': handler.handle_register_password,
        'register_first_name': handler.handle_register_first_name,
        'register_last_name': handler.handle_register_last_name,
    }
