"""Date helpers shared by the models and the store."""

from datetime import datetime, timedelta, timezone
from typing import Any


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_datetime(value: Any) -> datetime:
    """
    Coerce a stored date value back into a datetime.

    Accepts datetimes, ISO-8601 strings (a trailing ``Z`` is allowed) and
    epoch milliseconds, which is how dates come back from a JSON snapshot.

    Raises:
        ValueError: If the value cannot be interpreted as a date
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return ensure_utc(datetime.fromisoformat(text))
    raise ValueError(f"Cannot interpret {value!r} as a date")


def days_from_now(days: int) -> datetime:
    """Return an aware UTC datetime ``days`` calendar days from now."""
    return utcnow() + timedelta(days=days)
