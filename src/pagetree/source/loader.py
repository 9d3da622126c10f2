"""Read page markup from a local file or an http(s) URL."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from pagetree.source.errors import SourceError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def read_source(
    location: str,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Return the markup at *location*.

    URLs are fetched with httpx (redirects followed); anything else is read
    as a UTF-8 file. Raises :class:`SourceError` on any failure.
    """
    if not is_url(location):
        path = Path(location)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SourceError(f"Cannot read {path}: {exc}", location=location) from exc

    owns_client = client is None
    http = client or httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        logger.info("Fetching %s", location)
        resp = http.get(location)
    except httpx.HTTPError as exc:
        raise SourceError(f"Cannot fetch {location}: {exc}", location=location) from exc
    finally:
        if owns_client:
            http.close()

    if resp.status_code >= 300:
        raise SourceError(
            f"Cannot fetch {location}: HTTP {resp.status_code}", location=location
        )
    return resp.text
