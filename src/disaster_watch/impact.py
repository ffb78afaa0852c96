"""Rough people-affected estimates for display.

The figures are placeholders keyed on category and severity, not a model.
Nothing downstream should treat them as data.
"""

from __future__ import annotations

from collections.abc import Iterable

from disaster_watch.models import DisasterEvent

ESTIMATED_AFFECTED: dict[str, dict[str, int]] = {
    "earthquake": {"low": 1_000, "medium": 5_000, "high": 25_000, "critical": 100_000},
    "wildfire": {"low": 500, "medium": 2_000, "high": 10_000, "critical": 50_000},
    "hurricane": {"low": 10_000, "medium": 50_000, "high": 200_000, "critical": 1_000_000},
    "flood": {"low": 2_000, "medium": 10_000, "high": 50_000, "critical": 200_000},
    "volcano": {"low": 5_000, "medium": 15_000, "high": 75_000, "critical": 300_000},
    "other": {"low": 1_000, "medium": 5_000, "high": 20_000, "critical": 100_000},
}


def estimate_affected(event: DisasterEvent) -> int:
    table = ESTIMATED_AFFECTED.get(event.category, ESTIMATED_AFFECTED["other"])
    return table[event.severity]


def total_affected(events: Iterable[DisasterEvent]) -> int:
    return sum(estimate_affected(e) for e in events)
