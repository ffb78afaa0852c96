"""FastAPI wrapper for the disaster aggregation pipeline."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Annotated, Any

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from disaster_watch import __version__
from disaster_watch.aggregator import fetch_all_disasters
from disaster_watch.config import DisasterWatchConfig
from disaster_watch.exporters import event_record
from disaster_watch.filters import filter_events
from disaster_watch.models import Category, Severity
from disaster_watch.stats import compute_stats

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncGenerator[None, None]:
    """Store startup state for the /health endpoint."""
    application.state.start_time = datetime.now(tz=timezone.utc)
    application.state.last_run = None
    application.state.run_count = 0
    yield


app = FastAPI(
    title="Disaster Watch API",
    description="Natural-disaster events aggregated from USGS and NASA EONET.",
    version=__version__,
    lifespan=lifespan,
)


def _record_run() -> None:
    app.state.last_run = datetime.now(tz=timezone.utc)
    app.state.run_count += 1


def _upstream_error(exc: Exception) -> JSONResponse:
    """502 body for a failed aggregation.

    Feed outages never get here: the aggregator turns them into empty
    results. This covers an invalid environment configuration (pydantic
    ``ValidationError`` from ``DisasterWatchConfig``) and programming errors.
    """
    return JSONResponse(
        status_code=502,
        content={"detail": f"Upstream aggregation error: {exc}"},
    )


@app.get("/health")
def health() -> dict[str, Any]:
    """Server health check with uptime, version, and run count."""
    now = datetime.now(tz=timezone.utc)
    return {
        "status": "ok",
        "version": __version__,
        "uptime_seconds": round((now - app.state.start_time).total_seconds(), 1),
        "last_run": app.state.last_run.isoformat() if app.state.last_run else None,
        "run_count": app.state.run_count,
    }


@app.get("/disasters")
async def get_disasters(
    category: Annotated[
        Category | None, Query(description="Only this category."),
    ] = None,
    severity: Annotated[
        Severity | None, Query(description="Only this severity."),
    ] = None,
    min_severity: Annotated[
        Severity | None, Query(description="Only this severity or worse."),
    ] = None,
    search: Annotated[
        str | None, Query(description="Text to match in place or title."),
    ] = None,
    lat: Annotated[
        float | None, Query(ge=-90.0, le=90.0, description="Latitude of the centre point."),
    ] = None,
    lon: Annotated[
        float | None, Query(ge=-180.0, le=180.0, description="Longitude of the centre point."),
    ] = None,
    radius_km: Annotated[
        float | None, Query(gt=0.0, description="Radius in km around lat/lon."),
    ] = None,
) -> JSONResponse:
    """Return current events, newest first, optionally filtered."""
    try:
        events = await fetch_all_disasters(DisasterWatchConfig())
    except Exception as exc:
        logger.exception("Aggregation failed")
        return _upstream_error(exc)

    _record_run()

    near = (lat, lon) if lat is not None and lon is not None else None
    events = filter_events(
        events,
        category=category,
        severity=severity,
        min_severity=min_severity,
        search=search,
        near=near,
        radius_km=radius_km,
    )
    return JSONResponse(content=[event_record(e) for e in events])


@app.get("/stats")
async def get_stats() -> JSONResponse:
    """Return summary counts for current events."""
    try:
        events = await fetch_all_disasters(DisasterWatchConfig())
    except Exception as exc:
        logger.exception("Aggregation failed")
        return _upstream_error(exc)

    _record_run()
    return JSONResponse(content=asdict(compute_stats(events)))
