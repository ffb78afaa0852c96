"""GeoJSON exporter for disaster events."""

from __future__ import annotations

import json
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from disaster_watch.impact import estimate_affected
from disaster_watch.models import DisasterEvent


def _make_event_feature(event: DisasterEvent) -> dict[str, Any]:
    """Create a GeoJSON Point Feature for an event."""
    return {
        "type": "Feature",
        "id": event.id,
        "geometry": {
            "type": "Point",
            "coordinates": [event.location.longitude, event.location.latitude],
        },
        "properties": {
            "title": event.title,
            "description": event.description,
            "category": event.category,
            "severity": event.severity,
            "date": event.date,
            "source": event.source,
            "place": event.place,
            "magnitude": event.magnitude,
            "url": event.url,
            "estimated_affected": estimate_affected(event),
        },
    }


def export_geojson(
    events: list[DisasterEvent],
    output_path: Path,
) -> Path:
    """Export events as a GeoJSON FeatureCollection of Points.

    GeoJSON coordinates are [longitude, latitude] per RFC 7946, the reverse of
    ``Location.coordinates``.
    """
    geojson = {
        "type": "FeatureCollection",
        "metadata": {
            "generated": datetime.now(tz=timezone.utc).isoformat(),
            "source": "disaster-watch",
            "event_count": len(events),
            "by_source": dict(Counter(e.source for e in events)),
        },
        "features": [_make_event_feature(e) for e in events],
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(geojson, f, indent=2, ensure_ascii=False)

    return output_path
