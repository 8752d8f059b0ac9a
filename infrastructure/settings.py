"""Centralized application settings.

All runtime configuration is read here once from the environment (optionally
seeded from a ``.env`` file) and exposed as an immutable :class:`AppSettings`
snapshot. Other modules call :func:`get_settings` instead of reading
``os.environ`` directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv

from . import constants


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    """Normalize environment strings such as "true"/"1" into booleans."""

    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _to_int(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value is not None else default
    except (TypeError, ValueError):
        return default


def _to_float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value is not None else default
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class AppSettings:
    """Immutable snapshot of high-level configuration values."""

    bot_token: str
    production_mode: bool
    api_base_url: str
    api_timeout_seconds: float
    timezone: str
    opening_time: str
    closing_time: str
    slot_minutes: int
    max_booking_hours: int
    default_price_per_hour: float
    toast_duration_seconds: float
    invitation_poll_interval: int
    page_limit: int
    sessions_file: str
    data_directory: str
    log_directory: str


def load_settings(env: Optional[Mapping[str, str]] = None) -> AppSettings:
    """Load configuration from the environment and fall back to defaults."""

    if env is None:
        load_dotenv(override=False)
        env = os.environ

    data_directory = env.get("DATA_DIRECTORY", "data")

    return AppSettings(
        bot_token=env.get("TELEGRAM_BOT_TOKEN", ""),
        production_mode=_to_bool(env.get("PRODUCTION_MODE"), default=False),
        api_base_url=env.get("HALISAHA_API_URL", constants.DEFAULT_API_URL).rstrip("/"),
        api_timeout_seconds=_to_float(env.get("API_TIMEOUT_SECONDS"), 10.0),
        timezone=env.get("BOT_TIMEZONE", "Europe/Istanbul"),
        opening_time=env.get("OPENING_TIME", constants.DEFAULT_OPENING_TIME),
        closing_time=env.get("CLOSING_TIME", constants.DEFAULT_CLOSING_TIME),
        slot_minutes=_to_int(env.get("SLOT_MINUTES"), constants.DEFAULT_SLOT_MINUTES),
        max_booking_hours=_to_int(env.get("MAX_BOOKING_HOURS"), constants.MAX_BOOKING_HOURS),
        default_price_per_hour=_to_float(
            env.get("DEFAULT_PRICE_PER_HOUR"), constants.DEFAULT_PRICE_PER_HOUR
        ),
        toast_duration_seconds=_to_float(
            env.get("TOAST_DURATION_SECONDS"), constants.TOAST_MIN_SECONDS
        ),
        invitation_poll_interval=_to_int(
            env.get("INVITATION_POLL_INTERVAL"), constants.INVITATION_POLL_SECONDS
        ),
        page_limit=_to_int(env.get("PAGE_LIMIT"), constants.DEFAULT_PAGE_LIMIT),
        sessions_file=env.get("SESSIONS_FILE", os.path.join(data_directory, "sessions.json")),
        data_directory=data_directory,
        log_directory=env.get("LOG_DIRECTORY", "logs"),
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached :class:`AppSettings` instance."""

    return load_settings()
