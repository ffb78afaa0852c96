"""USGS earthquake feed adapter."""

from __future__ import annotations

import logging

from pydantic import ValidationError
from requests import Session

from disaster_watch.config import USGS_SIGNIFICANT_WEEK_URL
from disaster_watch.dates import epoch_ms_to_iso
from disaster_watch.geo import to_lat_lon
from disaster_watch.http import create_session
from disaster_watch.models import USGS_SOURCE, DisasterEvent, Location
from disaster_watch.schemas import UsgsFeature, UsgsFeatureCollection
from disaster_watch.severity import classify_severity

logger = logging.getLogger(__name__)


def _to_event(feature: UsgsFeature) -> DisasterEvent:
    props = feature.properties
    magnitude = props.mag
    place = props.place or props.title or ""
    if magnitude is not None:
        title = f"M{magnitude:.1f} Earthquake"
    else:
        title = props.title or "Earthquake"

    coordinates = feature.geometry.coordinates if feature.geometry else []
    return DisasterEvent(
        id=feature.id,
        title=title,
        description=place,
        category="earthquake",
        location=Location(coordinates=to_lat_lon(coordinates), name=place or None),
        date=epoch_ms_to_iso(props.time),
        severity=classify_severity("earthquake", magnitude),
        source=USGS_SOURCE,
        url=props.url,
        magnitude=magnitude,
        affected_area=place or None,
    )


def fetch_earthquakes(
    url: str = USGS_SIGNIFICANT_WEEK_URL,
    timeout: float = 30,
    session: Session | None = None,
) -> list[DisasterEvent]:
    """Fetch significant earthquakes from the past week.

    Returns an empty list on HTTP errors, network failures or an
    undecodable body (non-fatal). Features that fail validation are
    skipped individually.
    """
    if session is None:
        session = create_session()

    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
        collection = UsgsFeatureCollection.model_validate(resp.json())
    except Exception:
        logger.warning("Failed to fetch USGS earthquakes", exc_info=True)
        return []

    events: list[DisasterEvent] = []
    for raw in collection.features:
        try:
            feature = UsgsFeature.model_validate(raw)
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed USGS feature %s: %s",
                raw.get("id", "?") if isinstance(raw, dict) else "?",
                exc.errors()[0]["msg"],
            )
            continue
        events.append(_to_event(feature))

    logger.debug("USGS feed returned %d earthquakes", len(events))
    return events
