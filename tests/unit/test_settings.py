from botapp.config import load_bot_config
from infrastructure.settings import load_settings


def test_load_settings_defaults():
    settings = load_settings({})

    assert settings.api_base_url == "http://localhost:5000/api/v1"
    assert settings.opening_time == "08:00"
    assert settings.closing_time == "24:00"
    assert settings.max_booking_hours == 3
    assert settings.toast_duration_seconds == 3.0
    assert settings.sessions_file.endswith("sessions.json")
    assert settings.production_mode is False


def test_load_settings_reads_overrides_and_ignores_bad_numbers():
    settings = load_settings({
        "TELEGRAM_BOT_TOKEN": "123:abc",
        "HALISAHA_API_URL": "https://api.example.com/api/v1/",
        "PRODUCTION_MODE": "yes",
        "PAGE_LIMIT": "not-a-number",
        "TOAST_DURATION_SECONDS": "3.5",
        "DATA_DIRECTORY": "/srv/bot",
    })

    assert settings.bot_token == "123:abc"
    assert settings.api_base_url == "https://api.example.com/api/v1"
    assert settings.production_mode is True
    assert settings.page_limit == 20
    assert settings.toast_duration_seconds == 3.5
    assert settings.sessions_file == "/srv/bot/sessions.json"


def test_load_bot_config_groups_settings():
    config = load_bot_config(load_settings({"BOT_TIMEZONE": "UTC", "INVITATION_POLL_INTERVAL": "0"}))

    assert config.timezone == "UTC"
    assert config.booking.slot_minutes == 60
    assert config.notifications.invitation_poll_interval == 0
    assert config.api.page_limit == 20
