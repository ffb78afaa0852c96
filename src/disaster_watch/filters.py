"""Event filters used by the CLI and the HTTP API."""

from __future__ import annotations

from collections.abc import Iterable

from disaster_watch.geo import haversine
from disaster_watch.models import SEVERITY_ORDER, DisasterEvent

ALL = "all"


def _matches_search(event: DisasterEvent, needle: str) -> bool:
    needle = needle.lower()
    return needle in event.place.lower() or needle in event.title.lower()


def filter_events(
    events: Iterable[DisasterEvent],
    category: str | None = None,
    severity: str | None = None,
    min_severity: str | None = None,
    search: str | None = None,
    near: tuple[float, float] | None = None,
    radius_km: float | None = None,
    categories: Iterable[str] | None = None,
    locations: Iterable[str] | None = None,
) -> list[DisasterEvent]:
    """Filter events, keeping their input order.

    ``None`` or ``"all"`` disables a filter. *categories* keeps events in
    any of the listed categories and *locations* keeps events whose place
    mentions any of the listed names; empty collections disable both. The
    radius filter applies only when both *near* and *radius_km* are given.
    """
    wanted = set(categories or ())
    places = [loc.lower() for loc in locations or ()]
    min_rank = (
        SEVERITY_ORDER[min_severity] if min_severity and min_severity != ALL else None
    )

    result: list[DisasterEvent] = []
    for event in events:
        if category and category != ALL and event.category != category:
            continue
        if wanted and event.category not in wanted:
            continue
        if severity and severity != ALL and event.severity != severity:
            continue
        if min_rank is not None and SEVERITY_ORDER[event.severity] < min_rank:
            continue
        if search and not _matches_search(event, search):
            continue
        if places and not any(p in event.place.lower() for p in places):
            continue
        if near is not None and radius_km is not None:
            lat, lon = event.location.coordinates
            if haversine(near[0], near[1], lat, lon) > radius_km:
                continue
        result.append(event)
    return result


def active_alerts(events: Iterable[DisasterEvent]) -> int:
    """Count events at high or critical severity."""
    return sum(1 for e in events if SEVERITY_ORDER[e.severity] >= SEVERITY_ORDER["high"])
