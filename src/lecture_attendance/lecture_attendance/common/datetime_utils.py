from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time, truncated to whole seconds.

    Note: Wrapped so tests can patch/mock easier.
    """
    return truncate_to_seconds(datetime.now(timezone.utc))


def as_utc(value: datetime) -> datetime:
    """Naive values are taken as UTC; aware values are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def truncate_to_seconds(value: datetime) -> datetime:
    """Drop sub-second precision."""
    return as_utc(value).replace(microsecond=0)


def to_epoch_seconds(value: datetime) -> int:
    return int(truncate_to_seconds(value).timestamp())


def from_epoch_seconds(seconds: int) -> datetime:
    return datetime.fromtimestamp(int(seconds), tz=timezone.utc)


def seconds_until(deadline: datetime, now: datetime) -> int:
    """Whole seconds left before deadline, never negative."""
    remaining = (truncate_to_seconds(deadline) - truncate_to_seconds(now)).total_seconds()
    return max(0, int(remaining))


def format_countdown(seconds: int) -> str:
    """Format a countdown as m:ss (e.g. 49:59)."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"
