from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes (e.g. read back from SQLite) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """
    Return the current UTC time, strictly later than ``previous``.

    Two updates landing on the same clock tick still get increasing values.
    """
    now = utc_now()
    if previous is None:
        return now
    previous = ensure_utc(previous)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
