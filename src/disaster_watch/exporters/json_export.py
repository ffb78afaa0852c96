"""JSON exporter for disaster events.

Each event keeps the nested ``location`` object from the model and gains a
flat ``place`` label and ``latitude``/``longitude`` copies, so consumers do
not have to know that coordinates are stored as a (lat, lon) pair.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from disaster_watch.models import DisasterEvent


def event_record(event: DisasterEvent) -> dict[str, Any]:
    """Return the JSON-ready mapping for one event."""
    record = asdict(event)
    record["place"] = event.place
    record["latitude"] = event.location.latitude
    record["longitude"] = event.location.longitude
    return record


def export_json(
    events: list[DisasterEvent],
    output_path: Path,
    indent: int = 2,
) -> Path:
    """Write *events* as a JSON array, newest first as given.

    Non-ASCII place names (e.g. ``Ōita, Japan``) are written as-is.
    """
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump([event_record(e) for e in events], f, indent=indent, ensure_ascii=False)
    return output_path
