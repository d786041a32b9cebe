"""Timestamp helpers shared by all entities."""

from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def touch(previous: datetime) -> datetime:
    """Return a fresh ``updated_at`` strictly later than ``previous``.

    Two mutations inside the same clock tick must still be ordered.
    """
    now = utcnow()
    if now <= previous:
        now = previous + timedelta(microseconds=1)
    return now
