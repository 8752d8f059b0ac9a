"""My-reservations list, detail and cancellation callbacks."""

from __future__ import annotations

from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from api.errors import ApiError
from api.models import Reservation
from availability.time_utils import now_in_timezone
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import get_session_state, reset_flow
from botapp.notifications import ToastKind
from botapp.ui.telegram_ui import TelegramUI
from infrastructure.constants import RESERVATION_PERIODS
from listing.filters import count_periods, filter_reservations


class ReservationHandler(CallbackResponseMixin):
    """Lists the user's reservations; every cancel is followed by a refetch."""

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    async def handle_reservations_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reset_flow(context, 'reservations')
        await self._load_and_render(update, context)

    async def _load_and_render(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        state = get_session_state(context).reservations
        try:
            state.items = await self.deps.reservation_service.get_my_reservations(self._user_id(update))
        except ApiError as exc:
            await self._show_api_error(update, context, exc)
            return

        state.selected = None
        await self._render_list(update, context, notice)

    async def _render_list(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        state = get_session_state(context).reservations
        tr = self._translator(update, context)
        # Reservation dates and times are venue-local wall clock values
        now = now_in_timezone(self.deps.config.booking.timezone).replace(tzinfo=None)
        shown = filter_reservations(state.items, state.period, now)
        text = TelegramUI.format_reservations_list(shown, tr.get_language(), state.period)
        if notice:
            text = f"{notice}\n\n{text}"
        await self._render(
            update,
            text,
            TelegramUI.create_reservations_keyboard(shown, tr.get_language(), state.period, count_periods(state.items, now)),
        )

    async def handle_period(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Switch between all, upcoming and past without refetching."""
        period = self._callback_suffix(update, 'res_period_')
        if period not in RESERVATION_PERIODS:
            return
        get_session_state(context).reservations.period = period
        await self._render_list(update, context)

    async def handle_reservation_detail(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reservation = await self._fetch(update, context, self._callback_suffix(update, 'res_view_'))
        if reservation is None:
            return
        tr = self._translator(update, context)
        await self._render(
            update,
            TelegramUI.format_reservation_detail(reservation, tr.get_language()),
            TelegramUI.create_reservation_detail_keyboard(reservation, tr.get_language()),
        )

    async def handle_cancel_request(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reservation = await self._fetch(update, context, self._callback_suffix(update, 'res_cancel_'))
        if reservation is None:
            return

        tr = self._translator(update, context)
        if not reservation.can_cancel:
            await self._toast(update, context, tr.t("reservations.cannot_cancel"), ToastKind.WARNING)
            return
        await self._render(
            update,
            tr.t("reservations.cancel_confirm", date=reservation.date, start=reservation.start_time),
            TelegramUI.create_cancel_confirmation_keyboard(reservation.id, tr.get_language()),
        )

    async def handle_cancel_confirmed(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        reservation_id = self._callback_suffix(update, 'res_cancel_yes_')
        state = get_session_state(context).reservations
        tr = self._translator(update, context)

        known = state.selected if state.selected and state.selected.id == reservation_id else None
        if known is not None and not known.can_cancel:
            await self._toast(update, context, tr.t("reservations.cannot_cancel"), ToastKind.WARNING)
            return

        try:
            await self.deps.reservation_service.cancel(self._user_id(update), reservation_id)
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('menu_reservations', tr.get_language()))
            return

        self.logger.info("User %s cancelled reservation %s", self._user_id(update), reservation_id)
        await self._toast(update, context, tr.t("reservations.cancelled"))
        await self._load_and_render(update, context)

    async def _fetch(self, update: Update, context: ContextTypes.DEFAULT_TYPE, reservation_id: str) -> Optional[Reservation]:
        state = get_session_state(context).reservations
        try:
            reservation = await self.deps.reservation_service.get_by_id(self._user_id(update), reservation_id)
        except ApiError as exc:
            tr = self._translator(update, context)
            await self._show_api_error(update, context, exc, TelegramUI.create_back_keyboard('menu_reservations', tr.get_language()))
            return None
        state.selected = reservation
        return reservation
