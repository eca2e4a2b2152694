"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class RawPage:
    """The raw HTTP response for a single case fetch.

    ``url`` is the final URL after redirects, which differs from the
    requested one when the random endpoint forwards to a concrete case.
    """

    url: str
    html: str
    status_code: int


@dataclass
class Case:
    """A scraped case: its title and the concatenated koan text, if any."""

    title: str
    text: Optional[str] = None
