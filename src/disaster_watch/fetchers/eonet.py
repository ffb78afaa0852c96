"""NASA EONET multi-hazard feed adapter."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from pydantic import ValidationError
from requests import Session

from disaster_watch.categories import normalize_category
from disaster_watch.config import EONET_EVENTS_URL
from disaster_watch.dates import normalize_iso
from disaster_watch.geo import to_lat_lon
from disaster_watch.http import create_session
from disaster_watch.models import EONET_SOURCE, DisasterEvent, Location
from disaster_watch.schemas import EonetEvent, EonetEventList
from disaster_watch.severity import classify_severity

logger = logging.getLogger(__name__)


def _to_event(event: EonetEvent, fetched_at: datetime) -> DisasterEvent:
    """Build a DisasterEvent from the first category and latest geometry."""
    category = normalize_category(event.categories[0].id if event.categories else None)
    latest = event.geometry[-1] if event.geometry else None
    title = event.title or ""

    if latest is not None:
        coordinates = to_lat_lon(latest.coordinates)
        date = normalize_iso(latest.date, default=fetched_at)
        magnitude = latest.magnitude_value
    else:
        coordinates = (0.0, 0.0)
        date = normalize_iso(None, default=fetched_at)
        magnitude = None

    return DisasterEvent(
        id=event.id,
        title=title,
        description=event.description or title,
        category=category,
        location=Location(coordinates=coordinates, name=title or None),
        date=date,
        severity=classify_severity(category, magnitude),
        source=EONET_SOURCE,
        url=event.link,
        magnitude=magnitude,
        affected_area=title or None,
    )


def fetch_eonet_events(
    url: str = EONET_EVENTS_URL,
    limit: int = 50,
    days: int = 30,
    timeout: float = 30,
    session: Session | None = None,
) -> list[DisasterEvent]:
    """Fetch natural events from NASA EONET for the trailing *days*.

    Returns an empty list on HTTP errors, network failures or an
    undecodable body (non-fatal). Events that fail validation are skipped.
    Events without geometry are placed at (0, 0) and dated at fetch time.
    """
    if session is None:
        session = create_session()

    try:
        resp = session.get(url, params={"limit": limit, "days": days}, timeout=timeout)
        resp.raise_for_status()
        payload = EonetEventList.model_validate(resp.json())
    except Exception:
        logger.warning("Failed to fetch EONET events", exc_info=True)
        return []

    fetched_at = datetime.now(tz=timezone.utc)
    events: list[DisasterEvent] = []
    for raw in payload.events:
        try:
            event = EonetEvent.model_validate(raw)
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed EONET event %s: %s",
                raw.get("id", "?") if isinstance(raw, dict) else "?",
                exc.errors()[0]["msg"],
            )
            continue
        events.append(_to_event(event, fetched_at))

    logger.debug("EONET feed returned %d events", len(events))
    return events
