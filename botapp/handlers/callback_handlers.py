"""Callback dispatcher wiring domain handlers and router."""

from __future__ import annotations

import logging

from telegram import Update
from telegram.ext import ContextTypes

from botapp.handlers.admin import router as admin_routes
from botapp.handlers.admin.handler import AdminHandler
from botapp.handlers.auth import router as auth_routes
from botapp.handlers.auth.handler import AuthHandler
from botapp.handlers.booking import router as booking_routes
from botapp.handlers.booking.handler import BookingHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.opponents import router as opponent_routes
from botapp.handlers.opponents.handler import OpponentHandler
from botapp.handlers.player_search import router as player_search_routes
from botapp.handlers.player_search.handler import PlayerSearchHandler
from botapp.handlers.profile import router as profile_routes
from botapp.handlers.profile.handler import ProfileHandler
from botapp.handlers.ratings import router as rating_routes
from botapp.handlers.ratings.handler import RatingHandler
from botapp.handlers.reservations import router as reservation_routes
from botapp.handlers.reservations.handler import ReservationHandler
from botapp.handlers.router import CallbackRouter, InputRouter
from botapp.handlers.social import router as social_routes
from botapp.handlers.social.handler import SocialHandler
from botapp.handlers.state import get_session_state
from botapp.handlers.teams import router as team_routes
from botapp.handlers.teams.handler import TeamHandler
from botapp.handlers.venues import router as venue_routes
from botapp.handlers.venues.handler import VenueHandler
from botapp.notifications import TOAST_DISMISS_CALLBACK
from users.models import UserRole

# Pending prompts that accept a photo or image document
UPLOAD_INPUTS = ('profile_photo', 'team_logo')


class CallbackHandler:
    """Main entrypoint invoked by Telegram callback queries and free-text messages."""

    def __init__(self, deps: CallbackDependencies) -> None:
        self.logger = logging.getLogger('CallbackHandler')
        self.deps = deps

        self.auth = AuthHandler(self.deps)
        self.venues = VenueHandler(self.deps)
        self.booking = BookingHandler(self.deps)
        self.reservations = ReservationHandler(self.deps)
        self.social = SocialHandler(self.deps)
        self.teams = TeamHandler(self.deps)
        self.opponents = OpponentHandler(self.deps)
        self.player_search = PlayerSearchHandler(self.deps)
        self.ratings = RatingHandler(self.deps)
        self.profile = ProfileHandler(self.deps)
        self.admin = AdminHandler(self.deps)

        self.router = CallbackRouter(
            self.auth.handle_back_to_menu,
            guard=deps.guard,
            on_denied=self.auth.handle_access_denied,
        )
        self.inputs = InputRouter(guard=deps.guard, on_denied=self.auth.handle_access_denied)
        self._register_routes()

    def _register_routes(self) -> None:
        """Register routes; signed-in screens need a player session, admin screens the admin role."""

        self.router.add_exact(TOAST_DISMISS_CALLBACK, self._handle_toast_dismiss)
        self.router.add_routes(auth_routes.build_routes(self.auth))
        self.router.add_routes(auth_routes.build_protected_routes(self.auth), UserRole.PLAYER)
        self.router.add_routes(venue_routes.build_routes(self.venues), UserRole.PLAYER)
        self.router.add_routes(booking_routes.build_routes(self.booking), UserRole.PLAYER)
        self.router.add_routes(reservation_routes.build_routes(self.reservations), UserRole.PLAYER)
        self.router.add_routes(social_routes.build_routes(self.social), UserRole.PLAYER)
        self.router.add_routes(team_routes.build_routes(self.teams), UserRole.PLAYER)
        self.router.add_routes(opponent_routes.build_routes(self.opponents), UserRole.PLAYER)
        self.router.add_routes(player_search_routes.build_routes(self.player_search), UserRole.PLAYER)
        self.router.add_routes(rating_routes.build_routes(self.ratings), UserRole.PLAYER)
        self.router.add_routes(profile_routes.build_routes(self.profile), UserRole.PLAYER)
        self.router.add_routes(admin_routes.build_routes(self.admin), UserRole.ADMIN)

        self.inputs.add_routes(auth_routes.build_input_routes(self.auth))
        self.inputs.add_routes(venue_routes.build_input_routes(self.venues), UserRole.PLAYER)
        self.inputs.add_routes(rating_routes.build_input_routes(self.ratings), UserRole.PLAYER)
        self.inputs.add_routes(team_routes.build_input_routes(self.teams), UserRole.PLAYER)
        self.inputs.add_routes(opponent_routes.build_input_routes(self.opponents), UserRole.PLAYER)
        self.inputs.add_routes(player_search_routes.build_input_routes(self.player_search), UserRole.PLAYER)
        self.inputs.add_routes(profile_routes.build_input_routes(self.profile), UserRole.PLAYER)
        self.inputs.add_routes(admin_routes.build_input_routes(self.admin), UserRole.ADMIN)

    async def handle_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Answer query and delegate to the registered handler."""

        query = update.callback_query
        if query:
            try:
                await query.answer()
            except Exception as exc:  # pragma: no cover - defensive guard
                self.logger.warning("Failed to answer callback query: %s", exc)

            callback_data = query.data
            self.logger.info("Received callback %s from user %s", callback_data, update.effective_user.id if update.effective_user else 'Unknown')

        await self.router.dispatch(update, context)

    async def handle_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Deliver a typed message to the prompt that asked for it, else show the menu."""

        if not update.message:
            return
        kind = get_session_state(context).pending_input
        if self.inputs.has(kind):
            self.logger.debug("Text input for %s from user %s", kind, update.effective_user.id)
            await self.inputs.dispatch(update, context, kind, update.message.text or '')
            return
        await self.auth.show_main_menu(update, context)

    async def handle_upload(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Photos and documents only mean something while a picture prompt is open."""

        if not update.message:
            return
        kind = get_session_state(context).pending_input
        if kind in UPLOAD_INPUTS:
            await self.inputs.dispatch(update, context, kind, None)
            return
        await self.auth.show_main_menu(update, context)

    async def _handle_toast_dismiss(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        query = update.callback_query
        chat = update.effective_chat
        if chat is None or query.message is None:
            return
        await self.deps.toast.dismiss(context.bot, chat.id, query.message.message_id)
