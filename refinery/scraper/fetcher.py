"""Plain HTTP fetcher used as the first stage of every extraction."""

from __future__ import annotations

import httpx

from refinery.scraper.models import RawPage

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (compatible; MarkdownRefinery/0.1; "
        "+https://github.com/markdown-refinery)"
    )
}


def fetch_url(url: str, timeout: float = 30.0) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Redirects are followed.  No delay is applied here; pacing between URLs
    is the runner's job.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.TimeoutException: If the request exceeds *timeout* seconds.
        httpx.TransportError: On connection-level failures.
    """
    with httpx.Client(
        headers=_DEFAULT_HEADERS,
        timeout=timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        return RawPage(url=url, html=response.text, status_code=response.status_code)
