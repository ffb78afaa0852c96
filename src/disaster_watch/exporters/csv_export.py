"""CSV exporter for disaster events."""

from __future__ import annotations

import csv
from pathlib import Path

from disaster_watch.models import DisasterEvent

FIELDNAMES = [
    "id",
    "date",
    "source",
    "category",
    "severity",
    "magnitude",
    "title",
    "place",
    "latitude",
    "longitude",
    "url",
]


def export_csv(
    events: list[DisasterEvent],
    output_path: Path,
) -> Path:
    """Export events as a flat CSV with one row per event."""
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()

        for event in events:
            writer.writerow({
                "id": event.id,
                "date": event.date,
                "source": event.source,
                "category": event.category,
                "severity": event.severity,
                "magnitude": "" if event.magnitude is None else event.magnitude,
                "title": event.title,
                "place": event.place,
                "latitude": event.location.latitude,
                "longitude": event.location.longitude,
                "url": event.url or "",
            })

    return output_path
