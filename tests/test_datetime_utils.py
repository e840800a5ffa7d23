from datetime import datetime, timedelta, timezone

from lecture_attendance.common.datetime_utils import (
    format_countdown,
    from_epoch_seconds,
    seconds_until,
    to_epoch_seconds,
    truncate_to_seconds,
)
from lecture_attendance.settings import get_settings_module


def test_format_countdown():
    assert format_countdown(0) == "0:00"
    assert format_countdown(59) == "0:59"
    assert format_countdown(3000) == "50:00"
    assert format_countdown(-4) == "0:00"


def test_seconds_until_never_negative():
    now = datetime(2026, 3, 2, 10, 0, 0, tzinfo=timezone.utc)

    assert seconds_until(now + timedelta(minutes=1), now) == 60
    assert seconds_until(now - timedelta(minutes=1), now) == 0


def test_epoch_conversion_is_exact_to_the_second():
    value = datetime(2026, 3, 2, 10, 50, 0, 123456, tzinfo=timezone.utc)

    assert from_epoch_seconds(to_epoch_seconds(value)) == truncate_to_seconds(value)


def test_aware_values_are_converted_to_utc():
    ict = timezone(timedelta(hours=7))

    assert truncate_to_seconds(datetime(2026, 3, 2, 17, 0, 0, tzinfo=ict)) == datetime(2026, 3, 2, 10, 0, 0, tzinfo=timezone.utc)


def test_settings_module_from_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "lecture_attendance.settings.production"

    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "lecture_attendance.settings.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "lecture_attendance.settings.development"
