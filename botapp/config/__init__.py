"""Structured configuration loaders for the Telegram bot runtime."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from infrastructure.settings import AppSettings, get_settings


@dataclass(frozen=True)
class TelegramConfig:
    """Telegram-specific settings for the bot runtime."""

    token: str
    production_mode: bool


@dataclass(frozen=True)
class ApiConfig:
    """Backend connection parameters."""

    base_url: str
    timeout_seconds: float
    page_limit: int


@dataclass(frozen=True)
class BookingConfig:
    """Operating window and pricing used to build the slot grid."""

    timezone: str
    opening_time: str
    closing_time: str
    slot_minutes: int
    max_booking_hours: int
    default_price_per_hour: float


@dataclass(frozen=True)
class NotificationConfig:
    toast_duration_seconds: float
    invitation_poll_interval: int


@dataclass(frozen=True)
class PathsConfig:
    """File-system locations for persisted state."""

    data_directory: str
    sessions_file: str


@dataclass(frozen=True)
class BotAppConfig:
    """Aggregated configuration snapshot for the Telegram bot."""

    telegram: TelegramConfig
    api: ApiConfig
    booking: BookingConfig
    notifications: NotificationConfig
    paths: PathsConfig

    @property
    def timezone(self) -> str:
        return self.booking.timezone


def _build_config_from_settings(settings: AppSettings) -> BotAppConfig:
    """Translate :class:`AppSettings` values into runtime config objects."""

    telegram = TelegramConfig(
        token=settings.bot_token,
        production_mode=settings.production_mode,
    )

    api = ApiConfig(
        base_url=settings.api_base_url,
        timeout_seconds=settings.api_timeout_seconds,
        page_limit=settings.page_limit,
    )

    booking = BookingConfig(
        timezone=settings.timezone,
        opening_time=settings.opening_time,
        closing_time=settings.closing_time,
        slot_minutes=settings.slot_minutes,
        max_booking_hours=settings.max_booking_hours,
        default_price_per_hour=settings.default_price_per_hour,
    )

    notifications = NotificationConfig(
        toast_duration_seconds=settings.toast_duration_seconds,
        invitation_poll_interval=settings.invitation_poll_interval,
    )

    paths = PathsConfig(
        data_directory=settings.data_directory,
        sessions_file=settings.sessions_file,
    )

    return BotAppConfig(
        telegram=telegram,
        api=api,
        booking=booking,
        notifications=notifications,
        paths=paths,
    )


def load_bot_config(settings: Optional[AppSettings] = None) -> BotAppConfig:
    """Load the Telegram bot configuration from shared application settings."""

    if settings is None:
        settings = get_settings()
    return _build_config_from_settings(settings)


__all__ = [
    'ApiConfig',
    'BookingConfig',
    'BotAppConfig',
    'NotificationConfig',
    'PathsConfig',
    'TelegramConfig',
    'load_bot_config',
]
