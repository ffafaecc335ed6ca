"""HTTP fetcher for the relay listing page."""

from __future__ import annotations

import httpx

from nodewatch.config import settings
from nodewatch.scraper.models import RawPage

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (compatible; nodewatch/0.1; +https://github.com/nodewatch)"
    )
}


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    No retries are attempted; the poller simply tries again on its next
    cycle.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.HTTPError: On any transport-level failure.
    """
    with httpx.Client(
        headers=_DEFAULT_HEADERS,
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        html = response.text
        status_code = response.status_code

    return RawPage(url=url, html=html, status_code=status_code)
