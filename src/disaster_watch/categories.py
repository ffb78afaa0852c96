"""Mapping of upstream category vocabularies onto the shared categories."""

from __future__ import annotations

from disaster_watch.models import Category

# NASA EONET v3 category ids
EONET_CATEGORY_MAP: dict[str, Category] = {
    "wildfires": "wildfire",
    "severeStorms": "hurricane",
    "floods": "flood",
    "earthquakes": "earthquake",
    "volcanoes": "volcano",
    "drought": "drought",
    "dustHaze": "dust",
    "landslides": "landslide",
    "manmade": "other",
    "seaLakeIce": "ice",
    "snow": "snow",
    "tempExtremes": "heatwave",
    "waterColor": "water",
}


def normalize_category(
    token: str | None,
    mapping: dict[str, Category] = EONET_CATEGORY_MAP,
) -> Category:
    """Return the shared category for an upstream token, or ``"other"``."""
    if not token:
        return "other"
    return mapping.get(token, "other")
