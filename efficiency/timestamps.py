"""Scan timestamp coercion helpers.

Scan exports carry timestamps as native datetimes, ISO-8601 strings, or epoch
milliseconds depending on the tool that produced them. Everything is normalized
to timezone-aware UTC datetimes so spans can be compared safely.
"""

from __future__ import annotations

from datetime import datetime, timezone

MILLISECONDS_PER_HOUR = 3_600_000

_FALLBACK_FORMATS = (
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
)


def coerce_scan_time(value: object) -> datetime | None:
    """Coerce a raw scan time into a timezone-aware UTC datetime.

    Args:
        value: A datetime (naive values are treated as UTC), an ISO-8601 string,
            or an int/float count of epoch milliseconds.

    Returns:
        Parsed datetime, or None when the value is missing or unparseable.
    """

    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        return _parse_text_timestamp(value)
    return None


def hours_between(start: datetime, end: datetime) -> float:
    """Return the elapsed hours from `start` to `end`.

    Args:
        start: Earlier timestamp.
        end: Later timestamp.

    Returns:
        Millisecond difference divided by 3,600,000.
    """

    delta_ms = (end - start).total_seconds() * 1000.0
    return delta_ms / MILLISECONDS_PER_HOUR


def _parse_text_timestamp(value: str) -> datetime | None:
    """Parse a timestamp string, trying ISO-8601 before spreadsheet formats."""

    cleaned = value.strip()
    if not cleaned:
        return None
    if cleaned.endswith(("Z", "z")):
        cleaned = cleaned[:-1] + "+00:00"
    try:
        return _as_utc(datetime.fromisoformat(cleaned))
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            parsed = datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
        return _as_utc(parsed)
    return None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
