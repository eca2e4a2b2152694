"""Scraper package: case fetch & koan extraction."""

from codeless.scraper.errors import (
    BodyDecodeError,
    FetchError,
    TransportError,
    UnexpectedStatusError,
)
from codeless.scraper.extractor import (
    extract_case,
    extract_case_from_page,
    extract_koan_text,
    extract_title,
    parse_document,
)
from codeless.scraper.fetcher import fetch_case_page
from codeless.scraper.models import Case, RawPage

__all__ = [
    "fetch_case_page",
    "parse_document",
    "extract_title",
    "extract_koan_text",
    "extract_case",
    "extract_case_from_page",
    "Case",
    "RawPage",
    "FetchError",
    "TransportError",
    "UnexpectedStatusError",
    "BodyDecodeError",
]
