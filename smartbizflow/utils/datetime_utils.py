"""
Timezone-aware datetime helpers.
- Store timestamps as ISO-8601 UTC strings with a Z suffix.
- Parse them back into aware datetimes when comparing.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

UTC = timezone.utc


def now_utc() -> datetime:
    """Current time in UTC (timezone-aware). Use for createdAt, updatedAt, checkIn, etc."""
    return datetime.now(UTC)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """If dt is naive, treat as UTC and return timezone-aware UTC. If already aware, convert to UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    else:
        dt = dt.astimezone(UTC)
    return dt


def iso_8601_utc(dt: Optional[datetime]) -> Optional[str]:
    """ISO-8601 with Z for UTC, always with microseconds so strings sort chronologically."""
    if dt is None:
        return None
    utc = ensure_utc(dt)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def parse_iso(value: Union[str, date, datetime, None]) -> Optional[datetime]:
    """
    Parse an ISO-8601 string (date or datetime, with or without Z) into an aware UTC datetime.
    Plain dates become midnight UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return ensure_utc(datetime.fromisoformat(text))
    except ValueError:
        parsed = date.fromisoformat(text[:10])
        return datetime(parsed.year, parsed.month, parsed.day, tzinfo=UTC)


def next_timestamp(previous: Optional[str]) -> str:
    """
    Timestamp for a mutation that must sort strictly after `previous`.
    Clock resolution can repeat a value within a tight loop, so bump by one microsecond.
    """
    current = now_utc()
    try:
        last = parse_iso(previous) if previous else None
    except ValueError:
        last = None
    if last is not None and current <= last:
        current = last + timedelta(microseconds=1)
    return iso_8601_utc(current)
