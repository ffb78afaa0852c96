"""Pydantic schemas for the upstream feed payloads.

Only the fields the adapters read are declared; anything else in the
payload is ignored. Optional upstream fields are optional here too, and
an explicit ``null`` is treated the same as a missing field.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def _none_to_empty(value: Any) -> Any:
    return [] if value is None else value


# -- USGS GeoJSON summary feed ------------------------------------------------


class UsgsProperties(_Upstream):
    mag: float | None = None
    place: str | None = None
    time: int
    url: str | None = None
    title: str | None = None


class UsgsGeometry(_Upstream):
    coordinates: list[float | None] = Field(default_factory=list)

    @field_validator("coordinates", mode="before")
    @classmethod
    def coordinates_or_empty(cls, value: Any) -> Any:
        return _none_to_empty(value)


class UsgsFeature(_Upstream):
    id: str
    properties: UsgsProperties
    geometry: UsgsGeometry | None = None


class UsgsFeatureCollection(_Upstream):
    features: list[Any]


# -- NASA EONET v3 events -----------------------------------------------------


class EonetCategory(_Upstream):
    id: str | None = None
    title: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def unknown_id_to_none(cls, value: Any) -> str | None:
        # Non-string ids cannot match the category table.
        return value if isinstance(value, str) else None


class EonetGeometry(_Upstream):
    date: str | None = None
    type: str | None = None
    # Point: [lon, lat]; Polygon: [[[lon, lat], ...]]
    coordinates: list[Any] = Field(default_factory=list)
    magnitude_value: float | None = Field(default=None, alias="magnitudeValue")
    magnitude_unit: str | None = Field(default=None, alias="magnitudeUnit")

    @field_validator("coordinates", mode="before")
    @classmethod
    def coordinates_or_empty(cls, value: Any) -> Any:
        return _none_to_empty(value)


class EonetEvent(_Upstream):
    id: str
    title: str | None = None
    description: str | None = None
    link: str | None = None
    categories: list[EonetCategory] = Field(default_factory=list)
    geometry: list[EonetGeometry] = Field(default_factory=list)

    @field_validator("categories", "geometry", mode="before")
    @classmethod
    def lists_or_empty(cls, value: Any) -> Any:
        return _none_to_empty(value)


class EonetEventList(_Upstream):
    events: list[Any]
