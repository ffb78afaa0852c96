"""Geographic utilities: coordinate handling and Haversine distance."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the great-circle distance in km between two points on Earth."""
    earth_radius_km = 6371.0
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return earth_radius_km * 2 * math.asin(math.sqrt(a))


def _finite(value: Any) -> float:
    try:
        f = float(value)
    except (TypeError, ValueError):
        return 0.0
    return f if math.isfinite(f) else 0.0


def first_position(coordinates: Sequence[Any]) -> Sequence[Any]:
    """Return the first [lon, lat] position of a Point or nested Polygon."""
    position: Any = coordinates
    while position and isinstance(position[0], (list, tuple)):
        position = position[0]
    return position or []


def to_lat_lon(coordinates: Sequence[Any] | None) -> tuple[float, float]:
    """Swap GeoJSON [lon, lat, ...] into a finite (latitude, longitude) pair.

    Missing or non-numeric axes become 0.0.
    """
    position = first_position(coordinates or [])
    lon = _finite(position[0]) if len(position) > 0 else 0.0
    lat = _finite(position[1]) if len(position) > 1 else 0.0
    return (lat, lon)


def format_coordinates(coordinates: tuple[float, float]) -> str:
    """Render (lat, lon) as e.g. ``35.6762°N, 139.6503°E``."""
    lat, lon = coordinates
    lat_dir = "N" if lat >= 0 else "S"
    lon_dir = "E" if lon >= 0 else "W"
    return f"{abs(lat):.4f}°{lat_dir}, {abs(lon):.4f}°{lon_dir}"


def parse_lat_lon(text: str) -> tuple[float, float]:
    """Parse ``"lat,lon"`` into a validated (latitude, longitude) pair."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected 'lat,lon', got {text!r}")
    lat, lon = float(parts[0]), float(parts[1])
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        raise ValueError(f"Coordinates out of range: {text!r}")
    return (lat, lon)
