"""Helpers for date and datetime normalization."""

from datetime import date, datetime, time


def coerce_datetime(value) -> datetime | None:
    """Normalize stored timestamps to naive datetimes.

    Args:
        value: datetime, date, ISO string or None.

    Returns:
        datetime | None: Parsed timestamp, or None when absent or invalid.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.replace(tzinfo=None)
    return parsed


__all__ = ["coerce_datetime"]
