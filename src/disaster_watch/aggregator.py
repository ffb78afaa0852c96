"""Aggregator: fetch both feeds side by side, merge, sort newest first."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from concurrent.futures import Executor, ThreadPoolExecutor

from requests import Session

from disaster_watch.config import DisasterWatchConfig
from disaster_watch.dates import sort_key
from disaster_watch.fetchers.eonet import fetch_eonet_events
from disaster_watch.fetchers.usgs import fetch_earthquakes
from disaster_watch.http import create_session
from disaster_watch.models import DisasterEvent

logger = logging.getLogger(__name__)

Adapter = Callable[[], list[DisasterEvent]]


async def _run_adapter(
    adapter: Adapter, executor: Executor, timeout: float
) -> list[DisasterEvent]:
    """Run a blocking adapter on *executor*, bounded by *timeout*."""
    loop = asyncio.get_running_loop()
    return await asyncio.wait_for(loop.run_in_executor(executor, adapter), timeout=timeout)


def sort_by_date(events: list[DisasterEvent]) -> list[DisasterEvent]:
    """Return *events* ordered by date, most recent first."""
    return sorted(events, key=lambda e: sort_key(e.date), reverse=True)


async def fetch_all_disasters(
    config: DisasterWatchConfig | None = None,
    session: Session | None = None,
) -> list[DisasterEvent]:
    """Fetch USGS and EONET events concurrently and merge them.

    Waits for both feeds and inspects each outcome on its own: a feed that
    raises or exceeds ``config.adapter_timeout`` contributes no events. An
    empty result means no current events, not an error.

    Adapters run on a private thread pool that is released without joining,
    so a timed-out feed never holds up the caller. Each request is also
    capped at ``adapter_timeout`` so abandoned threads end soon after.
    """
    if config is None:
        config = DisasterWatchConfig()
    if session is None:
        session = create_session(retries=config.http_retries)

    request_timeout = min(config.request_timeout, config.adapter_timeout)
    adapters: dict[str, Adapter] = {
        "USGS": lambda: fetch_earthquakes(
            url=config.usgs_feed_url,
            timeout=request_timeout,
            session=session,
        ),
        "EONET": lambda: fetch_eonet_events(
            url=config.eonet_events_url,
            limit=config.eonet_limit,
            days=config.eonet_days,
            timeout=request_timeout,
            session=session,
        ),
    }

    executor = ThreadPoolExecutor(
        max_workers=len(adapters), thread_name_prefix="disaster-watch"
    )
    try:
        outcomes = await asyncio.gather(
            *(
                _run_adapter(fn, executor, config.adapter_timeout)
                for fn in adapters.values()
            ),
            return_exceptions=True,
        )
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    merged: list[DisasterEvent] = []
    for name, outcome in zip(adapters, outcomes, strict=True):
        if isinstance(outcome, asyncio.TimeoutError):
            logger.warning("%s feed timed out after %.0fs", name, config.adapter_timeout)
            continue
        if isinstance(outcome, BaseException):
            logger.warning("%s feed failed: %s", name, outcome, exc_info=outcome)
            continue
        logger.info("%s: %d events", name, len(outcome))
        merged.extend(outcome)

    return sort_by_date(merged)
