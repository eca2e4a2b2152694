"""HTTP fetcher for a single Codeless Code case page."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from codeless.config import settings
from codeless.scraper.errors import BodyDecodeError, TransportError, UnexpectedStatusError
from codeless.scraper.models import RawPage

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {
    "User-Agent": "codeless-koan/0.1 (+https://thecodelesscode.com)"
}


def fetch_case_page(url: Optional[str] = None) -> RawPage:
    """Fetch *url* (default: ``settings.case_url``) and return a :class:`RawPage`.

    Exactly one GET is issued; redirects are followed and nothing is retried.

    Raises:
        TransportError: If no response was received at all.
        UnexpectedStatusError: If the final status is anything but ``200``.
        BodyDecodeError: If the body could not be read or decoded.
    """
    url = url or settings.case_url
    logger.debug("Fetching %s", url)

    try:
        with httpx.Client(
            headers=_DEFAULT_HEADERS,
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            with client.stream("GET", url) as response:
                final_url = str(response.url)
                if response.status_code != 200:
                    raise UnexpectedStatusError(response.status_code, final_url)

                try:
                    response.read()
                except (
                    httpx.DecodingError,
                    httpx.ReadError,
                    httpx.RemoteProtocolError,
                    httpx.StreamError,
                ) as exc:
                    raise BodyDecodeError(exc) from exc

                # httpx falls back to utf-8 and replaces undecodable bytes.
                html = response.text
                status_code = response.status_code
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise TransportError(url, exc) from exc

    logger.debug("Fetched %s (%d characters)", final_url, len(html))
    return RawPage(url=final_url, html=html, status_code=status_code)
