"""Timestamp helpers shared by the feed adapters and the aggregator."""

from __future__ import annotations

from datetime import datetime, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_iso(dt: datetime) -> str:
    """Format an aware datetime as ISO 8601 UTC with a ``Z`` suffix."""
    dt = dt.astimezone(timezone.utc)
    timespec = "milliseconds" if dt.microsecond else "seconds"
    return dt.isoformat(timespec=timespec).replace("+00:00", "Z")


def epoch_ms_to_iso(time_ms: int | float) -> str:
    """Convert epoch milliseconds (USGS ``properties.time``) to ISO 8601."""
    return to_iso(datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc))


def parse_iso(value: str | None) -> datetime | None:
    """Parse an ISO 8601 string into an aware UTC datetime, or None."""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def normalize_iso(value: str | None, default: datetime | None = None) -> str:
    """Return *value* in canonical form, passing unparseable text through.

    Empty values fall back to *default* (now, when not given).
    """
    dt = parse_iso(value)
    if dt is not None:
        return to_iso(dt)
    if value:
        return value
    return to_iso(default or datetime.now(tz=timezone.utc))


def sort_key(value: str) -> datetime:
    """Sort key for event dates; unparseable dates sort as the oldest."""
    return parse_iso(value) or EPOCH
