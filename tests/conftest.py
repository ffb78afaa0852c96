"""Shared fixtures for disaster_watch tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from disaster_watch.config import DisasterWatchConfig
from disaster_watch.models import DisasterEvent, Location

# 2024-01-02T00:00:00Z and 2024-01-01T00:00:00Z
JAN_2_MS = 1704153600000
JAN_1_MS = 1704067200000


def _usgs_feature(
    id: str,
    mag: float | None,
    time_ms: int,
    place: str = "10 km N of Somewhere, Japan",
    coordinates: list | None = None,
) -> dict:
    return {
        "type": "Feature",
        "id": id,
        "properties": {
            "mag": mag,
            "place": place,
            "time": time_ms,
            "url": f"https://earthquake.usgs.gov/earthquakes/eventpage/{id}",
            "title": f"M {mag} - {place}",
        },
        "geometry": {
            "type": "Point",
            "coordinates": coordinates if coordinates is not None else [141.5, 38.3, 30.0],
        },
    }


def _eonet_event(
    id: str,
    category: str | None = "wildfires",
    geometry: list[dict] | None = None,
    title: str = "Wildfire, Sonoma County, USA",
    description: str | None = None,
) -> dict:
    return {
        "id": id,
        "title": title,
        "description": description,
        "link": f"https://eonet.gsfc.nasa.gov/api/v3/events/{id}",
        "categories": [{"id": category, "title": category}] if category else [],
        "sources": [],
        "geometry": geometry
        if geometry is not None
        else [
            {
                "date": "2024-01-01T12:00:00Z",
                "type": "Point",
                "coordinates": [-122.7, 38.5],
            }
        ],
    }


@pytest.fixture
def usgs_feature():
    """Factory for one USGS GeoJSON feature dict."""
    return _usgs_feature


@pytest.fixture
def eonet_event():
    """Factory for one EONET v3 event dict."""
    return _eonet_event


@pytest.fixture
def sample_usgs_response() -> dict:
    return {
        "type": "FeatureCollection",
        "features": [
            _usgs_feature("us7000a", 7.5, JAN_2_MS, coordinates=[142.0, 37.0, 10.0]),
            _usgs_feature("us7000b", 3.2, JAN_1_MS, place="5 km E of Springfield, USA"),
        ],
    }


@pytest.fixture
def sample_eonet_response() -> dict:
    return {
        "title": "EONET Events",
        "events": [
            _eonet_event(
                "EONET_1",
                "severeStorms",
                geometry=[
                    {
                        "date": "2023-12-30T00:00:00Z",
                        "type": "Point",
                        "coordinates": [-60.0, 15.0],
                        "magnitudeValue": 35.0,
                        "magnitudeUnit": "kts",
                    },
                    {
                        "date": "2024-01-01T06:00:00Z",
                        "type": "Point",
                        "coordinates": [-62.5, 16.25],
                        "magnitudeValue": 65.0,
                        "magnitudeUnit": "kts",
                    },
                ],
                title="Hurricane Test",
            ),
            _eonet_event("EONET_2", "wildfires"),
        ],
    }


@pytest.fixture
def config(tmp_path: Path) -> DisasterWatchConfig:
    """Config with defaults, writing to tmp_path, no retries."""
    return DisasterWatchConfig(
        output_file=tmp_path / "output.json",
        http_retries=0,
        store_dir=tmp_path / "store",
    )


def _make_event(
    id: str,
    date: str,
    category: str = "earthquake",
    severity: str = "medium",
    name: str | None = "Springfield, USA",
    description: str = "",
    coordinates: tuple[float, float] = (0.0, 0.0),
    source: str = "USGS",
    magnitude: float | None = None,
    title: str | None = None,
) -> DisasterEvent:
    return DisasterEvent(
        id=id,
        title=title or f"Event {id}",
        description=description,
        category=category,  # type: ignore[arg-type]
        location=Location(coordinates=coordinates, name=name),
        date=date,
        severity=severity,  # type: ignore[arg-type]
        source=source,  # type: ignore[arg-type]
        magnitude=magnitude,
    )


@pytest.fixture
def make_event():
    """Factory for DisasterEvent objects with sensible defaults."""
    return _make_event


@pytest.fixture
def sample_events() -> list[DisasterEvent]:
    """Pre-built events, newest first."""
    return [
        _make_event(
            "eq1", "2024-01-05T00:00:00Z", severity="critical", magnitude=7.2,
            name="Near Tokyo, Japan", coordinates=(35.7, 140.2),
        ),
        _make_event(
            "eq2", "2024-01-04T00:00:00Z", severity="low", magnitude=3.1,
            name="Springfield, USA", coordinates=(39.8, -89.6),
        ),
        _make_event(
            "wf1", "2024-01-03T00:00:00Z", category="wildfire", severity="high",
            name="Sonoma Fire", source="NASA EONET", coordinates=(38.5, -122.7),
        ),
        _make_event(
            "fl1", "2024-01-02T00:00:00Z", category="flood", severity="medium",
            name=None, description="Flooding in Porto Alegre, Brazil",
            source="NASA EONET", coordinates=(-30.0, -51.2),
        ),
    ]
