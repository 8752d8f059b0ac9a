"""Static social callback route definitions."""

from __future__ import annotations
from typing import Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], object]


def build_routes(handler) -> Dict[str, CallbackFn]:
    return {
        'menu_social': handler.handle_social_menu,
        'social_invitations': handler.handle_invitations,
        'social_proposals': handler.handle_proposals,
        'inv_accept_': handler.handle_invitation_accept,
        'inv_reject_': handler.handle_invitation_reject,
        'prop_accept_': handler.handle_proposal_accept,
        'prop_reject_': handler.handle_proposal_reject,
    }
