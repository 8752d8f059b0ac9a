from datetime import date, datetime

import pytest

from availability.time_utils import (
    booking_dates,
    filter_future_times_for_today,
    format_minutes,
    parse_iso_date,
    parse_time_string,
    to_minutes,
)


def test_parse_time_string_accepts_seconds_and_end_of_day():
    assert parse_time_string("08:30") == (8, 30)
    assert parse_time_string("08:30:00") == (8, 30)
    assert parse_time_string("24:00") == (24, 0)
    assert to_minutes("24:00") == 1440
    assert format_minutes(1440) == "24:00"
    assert format_minutes(75) == "01:15"


@pytest.mark.parametrize("value", ["0800", "25:00", "10:60", "1:2:3:4"])
def test_parse_time_string_rejects_bad_values(value):
    with pytest.raises(ValueError):
        parse_time_string(value)


def test_booking_dates_starts_today():
    dates = booking_dates(3, reference=date(2025, 12, 31))

    assert dates == [date(2025, 12, 31), date(2026, 1, 1), date(2026, 1, 2)]
    assert parse_iso_date("2026-01-02") == dates[-1]


def test_filter_future_times_for_today_filters_past():
    current = datetime(2025, 1, 5, 10, 30)
    times = ["09:00", "10:15", "10:30", "10:45", "11:00"]

    assert filter_future_times_for_today(times, current_time=current) == ["10:45", "11:00"]


def test_filter_future_times_keeps_unparseable_entries():
    current = datetime(2025, 1, 5, 10, 30)

    assert filter_future_times_for_today(["soon", "09:00"], current_time=current) == ["soon"]
