"""Booking flow callbacks: date, slot grid, duration, confirmation."""

from __future__ import annotations

from typing import Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.ext import ContextTypes

from api.errors import ApiError
from availability import (
    AvailabilityState,
    InvalidDurationError,
    OperatingWindow,
    PastDateError,
    SlotAvailabilityResolver,
    SlotTakenError,
    SlotUnavailableError,
    SubmissionInProgressError,
)
from availability.time_utils import booking_dates, now_in_timezone
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import BookingState, get_session_state, reset_flow
from botapp.notifications import ToastKind
from botapp.ui.telegram_ui import TelegramUI
from infrastructure.constants import BOOKING_DAYS_AHEAD


class BookingHandler(CallbackResponseMixin):
    """Drives one :class:`SlotAvailabilityResolver` per booking screen."""

    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    def _build_resolver(self, user_id: int) -> SlotAvailabilityResolver:
        booking = self.deps.config.booking
        return SlotAvailabilityResolver(
            self.deps.reservation_service,
            user_id,
            window=OperatingWindow(booking.opening_time, booking.closing_time),
            granularity_minutes=booking.slot_minutes,
            max_hours=booking.max_booking_hours,
            timezone=booking.timezone,
        )

    def _price_per_hour(self, state: BookingState) -> float:
        if state.venue is not None and state.venue.price_per_hour:
            return state.venue.price_per_hour
        return self.deps.config.booking.default_price_per_hour

    # ------------------------------------------------------------------
    # Field and date
    # ------------------------------------------------------------------
    async def handle_field_selection(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        field_id = self._callback_suffix(update, 'book_field_')
        session = get_session_state(context)
        venue = session.venues.venue
        tr = self._translator(update, context)

        if venue is None or venue.find_field(field_id) is None:
            await self._render(update, tr.t("booking.field_missing"), TelegramUI.create_back_keyboard('menu_venues', tr.get_language()))
            return

        reset_flow(context, 'booking')
        session.booking = BookingState(
            venue=venue,
            field_id=field_id,
            resolver=self._build_resolver(self._user_id(update)),
        )
        await self._render_dates(update, context)

    async def handle_dates(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).booking
        if not await self._ensure_flow(update, context, state):
            return
        state.start = None
        state.hours = None
        await self._render_dates(update, context)

    async def _render_dates(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        state = get_session_state(context).booking
        tr = self._translator(update, context)
        today = now_in_timezone(self.deps.config.booking.timezone).date()
        text = TelegramUI.format_date_prompt(state.venue, state.venue.find_field(state.field_id), tr.get_language())
        if notice:
            text = f"{notice}\n\n{text}"
        await self._render(
            update,
            text,
            TelegramUI.create_date_keyboard(booking_dates(BOOKING_DAYS_AHEAD, today), state.venue.id, tr.get_language()),
        )

    async def handle_date_selection(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).booking
        if not await self._ensure_flow(update, context, state):
            return
        state.date = self._callback_suffix(update, 'book_date_')
        state.start = None
        state.hours = None
        await self._load_and_render(update, context)

    async def _load_and_render(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        state = get_session_state(context).booking
        tr = self._translator(update, context)
        try:
            result = await state.resolver.load_availability(state.field_id, state.date)
        except PastDateError:
            await self._render_dates(update, context, notice=tr.t("booking.past_date"))
            return
        except ApiError as exc:
            await self._show_api_error(update, context, exc)
            return

        if result is None:
            # Superseded loads render nothing; the newer load owns the screen
            if state.resolver.state is AvailabilityState.ERROR:
                await self._render(
                    update,
                    f"❌ {state.resolver.error}\n\n{tr.t('booking.load_failed')}",
                    TelegramUI.create_retry_keyboard(tr.get_language()),
                    parse_mode=None,
                )
            return
        await self._render_grid(update, context, notice=notice)

    async def _render_grid(self, update: Update, context: ContextTypes.DEFAULT_TYPE, notice: Optional[str] = None) -> None:
        state = get_session_state(context).booking
        result = state.resolver.result
        tr = self._translator(update, context)
        field = state.venue.find_field(state.field_id)
        await self._render(
            update,
            TelegramUI.format_slot_grid_message(state.venue, field, result, tr.get_language(), notice=notice),
            TelegramUI.create_slot_keyboard(result, tr.get_language()),
        )

    async def handle_retry(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).booking
        if not await self._ensure_flow(update, context, state) or not state.date:
            return
        await self._load_and_render(update, context)

    async def handle_back_to_slots(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).booking
        if not await self._ensure_flow(update, context, state) or not state.date:
            return
        state.start = None
        state.hours = None
        await self._load_and_render(update, context)

    # ------------------------------------------------------------------
    # Slot and duration
    # ------------------------------------------------------------------
    async def handle_slot_selection(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).booking
        if not await self._ensure_flow(update, context, state) or state.resolver.result is None:
            return

        start = self._callback_suffix(update, 'book_slot_')
        tr = self._translator(update, context)
        max_hours = state.resolver.max_hours_from(start)
        if max_hours == 0:
            await self._render_grid(update, context, notice=tr.t("booking.slot_unavailable"))
            return

        state.start = start
        state.hours = None
        await self._render(
            update,
            tr.t("booking.duration_prompt", start=start),
            TelegramUI.create_duration_keyboard(max_hours, self._price_per_hour(state), tr.get_language()),
        )

    async def handle_duration_selection(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).booking
        if not await self._ensure_flow(update, context, state) or not state.start:
            return

        tr = self._translator(update, context)
        try:
            hours = int(self._callback_suffix(update, 'book_hours_'))
        except ValueError:
            return
        if not 1 <= hours <= state.resolver.max_hours_from(state.start):
            await self._render_grid(update, context, notice=tr.t("booking.slot_unavailable"))
            return

        state.hours = hours
        end = state.resolver.end_time_for(state.start, hours)
        field = state.venue.find_field(state.field_id)
        await self._render(
            update,
            TelegramUI.format_booking_summary(
                state.venue,
                field,
                state.date,
                state.start,
                end,
                hours,
                self._price_per_hour(state) * hours,
                tr.get_language(),
            ),
            TelegramUI.create_booking_confirmation_keyboard(tr.get_language()),
        )

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------
    async def handle_confirm(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = get_session_state(context).booking
        if not await self._ensure_flow(update, context, state) or not state.start or not state.hours:
            return

        tr = self._translator(update, context)
        if state.resolver.is_submitting:
            await self._toast(update, context, tr.t("booking.submit_in_progress"), ToastKind.WARNING)
            return

        await self._render(update, tr.t("booking.submitting"))
        try:
            reservation = await state.resolver.book(
                state.start,
                state.hours,
                price_per_hour=self._price_per_hour(state),
            )
        except SubmissionInProgressError:
            await self._toast(update, context, tr.t("booking.submit_in_progress"), ToastKind.WARNING)
            return
        except (SlotUnavailableError, InvalidDurationError):
            await self._render_grid(update, context, notice=tr.t("booking.slot_unavailable"))
            return
        except SlotTakenError as exc:
            self.logger.info("User %s lost slot %s %s to another booking", self._user_id(update), state.date, state.start)
            state.start = None
            state.hours = None
            if exc.result is not None:
                await self._render_grid(update, context, notice=tr.t("booking.slot_taken"))
            else:
                await self._render(
                    update,
                    tr.t("booking.slot_taken"),
                    TelegramUI.create_retry_keyboard(tr.get_language()),
                )
            await self._toast(update, context, tr.t("booking.slot_taken"), ToastKind.WARNING)
            return
        except ApiError as exc:
            await self._show_api_error(update, context, exc, TelegramUI.create_retry_keyboard(tr.get_language()))
            return

        get_session_state(context).booking = BookingState()
        reset_flow(context, 'main_menu')
        keyboard = InlineKeyboardMarkup([
            [InlineKeyboardButton(tr.t("menu.reservations"), callback_data='menu_reservations')],
            [InlineKeyboardButton(tr.t("nav.back_to_menu"), callback_data='back_to_menu')],
        ])
        await self._render(update, TelegramUI.format_booking_success(reservation, tr.get_language()), keyboard)
        await self._toast(update, context, tr.t("booking.created"))

    async def handle_cancel(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        session = get_session_state(context)
        venue = session.booking.venue
        session.booking = BookingState()
        tr = self._translator(update, context)
        if venue is None:
            await self._render(update, tr.t("booking.cancelled"), TelegramUI.create_back_to_menu_keyboard(tr.get_language()))
            return
        session.flow = 'venues'
        await self._render(
            update,
            TelegramUI.format_venue_detail(venue, tr.get_language()),
            TelegramUI.create_venue_detail_keyboard(venue, tr.get_language()),
        )

    async def _ensure_flow(self, update: Update, context: ContextTypes.DEFAULT_TYPE, state: BookingState) -> bool:
        """A stale button from an abandoned booking screen sends the user back to the venues."""
        if state.resolver is not None and state.venue is not None and state.field_id:
            return True
        tr = self._translator(update, context)
        await self._render(update, tr.t("booking.expired"), TelegramUI.create_back_keyboard('menu_venues', tr.get_language()))
        return False
