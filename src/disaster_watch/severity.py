"""Heuristic severity classification.

Neither feed reports severity uniformly, so every event gets one of four
levels derived only from its category and (for earthquakes) magnitude.
"""

from __future__ import annotations

from disaster_watch.models import Severity

# (lower bound, level), checked from the top
EARTHQUAKE_THRESHOLDS: tuple[tuple[float, Severity], ...] = (
    (7.0, "critical"),
    (6.0, "high"),
    (4.0, "medium"),
)

CATEGORY_DEFAULTS: dict[str, Severity] = {
    "wildfire": "high",
    "hurricane": "critical",
    "flood": "medium",
    "volcano": "high",
}


def classify_severity(category: str, magnitude: float | None = None) -> Severity:
    """Classify an event as low, medium, high or critical.

    Earthquakes with a known magnitude are graded on the magnitude scale;
    other categories get a fixed default, and everything else is medium.
    """
    if category == "earthquake" and magnitude is not None:
        for lower, level in EARTHQUAKE_THRESHOLDS:
            if magnitude >= lower:
                return level
        return "low"

    return CATEGORY_DEFAULTS.get(category, "medium")
