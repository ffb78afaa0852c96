"""Shared HTTP session with retry/backoff."""

from __future__ import annotations

from requests import Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from disaster_watch import __version__

USER_AGENT = f"disaster-watch/{__version__}"


def create_session(
    retries: int = 3,
    backoff_factor: float = 0.5,
    status_forcelist: tuple[int, ...] = (429, 500, 502, 503, 504),
    pool_size: int = 4,
) -> Session:
    """Create a requests Session for the upstream feeds.

    GETs are retried with exponential backoff (0s, 0.5s, 1s for the
    defaults) on the listed status codes. The pool is sized so both feeds
    can hold a connection at once when fetched side by side.
    """
    retry = Retry(
        total=retries,
        backoff_factor=backoff_factor,
        status_forcelist=status_forcelist,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(
        max_retries=retry, pool_connections=pool_size, pool_maxsize=pool_size
    )
    session = Session()
    session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session
