"""Summary statistics over an aggregated event sequence."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from requests import Session

from disaster_watch.aggregator import fetch_all_disasters
from disaster_watch.config import DisasterWatchConfig
from disaster_watch.models import DisasterEvent, DisasterStats

UNKNOWN_REGION = "unknown"


def region_of(event: DisasterEvent) -> str:
    """Approximate an event's country as the text after the last comma.

    Uses the location name, falling back to the description. This is
    string splitting, not geocoding: "Springfield, USA" gives "USA", and
    text without a comma gives ``UNKNOWN_REGION``.
    """
    place = event.place or ""
    if "," not in place:
        return UNKNOWN_REGION
    return place.rsplit(",", 1)[1].strip() or UNKNOWN_REGION


def compute_stats(events: Iterable[DisasterEvent]) -> DisasterStats:
    """Reduce events to totals, severity counts, regions and categories."""
    events = list(events)
    severities = Counter(e.severity for e in events)
    return DisasterStats(
        total_events=len(events),
        critical_events=severities["critical"],
        high_events=severities["high"],
        countries=len({region_of(e) for e in events}),
        by_category=dict(Counter(e.category for e in events)),
    )


async def fetch_disaster_stats(
    config: DisasterWatchConfig | None = None,
    session: Session | None = None,
) -> DisasterStats:
    """Aggregate both feeds and summarize the result."""
    return compute_stats(await fetch_all_disasters(config=config, session=session))
