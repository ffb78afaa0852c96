"""Configuration model for the disaster aggregation pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

OutputFormat = Literal["json", "geojson", "csv"]

USGS_SIGNIFICANT_WEEK_URL = (
    "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/significant_week.geojson"
)
EONET_EVENTS_URL = "https://eonet.gsfc.nasa.gov/api/v3/events"


class DisasterWatchConfig(BaseSettings):
    """All configurable parameters for the aggregation pipeline.

    Values can be set via constructor arguments, environment variables
    prefixed with DISASTER_WATCH_, or defaults.
    """

    model_config = {"env_prefix": "DISASTER_WATCH_"}

    usgs_feed_url: str = Field(
        default=USGS_SIGNIFICANT_WEEK_URL, description="USGS significant-week GeoJSON feed."
    )
    eonet_events_url: str = Field(
        default=EONET_EVENTS_URL, description="NASA EONET v3 events endpoint."
    )
    eonet_limit: int = Field(
        default=50, ge=1, le=500, description="Maximum number of EONET events."
    )
    eonet_days: int = Field(
        default=30, ge=1, le=365, description="EONET lookback window in days."
    )
    request_timeout: int = Field(
        default=30, ge=5, le=300, description="HTTP request timeout in seconds."
    )
    adapter_timeout: float = Field(
        default=45.0, ge=1.0, le=600.0,
        description="Upper bound in seconds for each feed during aggregation.",
    )
    http_retries: int = Field(
        default=3, ge=0, le=10, description="Retries for transient HTTP errors."
    )
    output_file: Path = Field(
        default=Path("disasters.json"), description="Output file path."
    )
    output_format: OutputFormat = Field(
        default="json", description="Output format: json, geojson, or csv."
    )
    store_dir: Path | None = Field(
        default=None,
        description="Directory for saved preferences. Defaults to the user cache dir.",
    )
