"""Data models for the disaster aggregation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Category = Literal[
    "earthquake",
    "hurricane",
    "flood",
    "wildfire",
    "tornado",
    "heatwave",
    "volcano",
    "drought",
    "dust",
    "landslide",
    "ice",
    "snow",
    "water",
    "other",
]
Severity = Literal["low", "medium", "high", "critical"]
Source = Literal["USGS", "NASA EONET"]

CATEGORIES: tuple[str, ...] = Category.__args__  # type: ignore[attr-defined]
SEVERITIES: tuple[str, ...] = Severity.__args__  # type: ignore[attr-defined]

SEVERITY_ORDER: dict[str, int] = {"low": 0, "medium": 1, "high": 2, "critical": 3}

USGS_SOURCE: Source = "USGS"
EONET_SOURCE: Source = "NASA EONET"


@dataclass(frozen=True)
class Location:
    """Where an event happened, as (latitude, longitude)."""

    coordinates: tuple[float, float] = (0.0, 0.0)
    name: str | None = None

    @property
    def latitude(self) -> float:
        return self.coordinates[0]

    @property
    def longitude(self) -> float:
        return self.coordinates[1]


@dataclass(frozen=True)
class DisasterEvent:
    """A single normalized event from either upstream feed."""

    id: str
    title: str
    description: str
    category: Category
    location: Location
    date: str
    severity: Severity
    source: Source
    url: str | None = None
    magnitude: float | None = None
    affected_area: str | None = None

    @property
    def place(self) -> str:
        """Location name, falling back to the description."""
        return self.location.name or self.description


@dataclass
class DisasterStats:
    """Summary counts derived from an aggregated event sequence."""

    total_events: int = 0
    critical_events: int = 0
    high_events: int = 0
    countries: int = 0
    by_category: dict[str, int] = field(default_factory=dict)


@dataclass
class WatchPreferences:
    """Saved filter preferences for the watch list."""

    categories: list[str] = field(default_factory=list)
    min_severity: Severity | None = None
    locations: list[str] = field(default_factory=list)
