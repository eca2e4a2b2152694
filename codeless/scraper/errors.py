"""Errors raised while fetching a case page."""

from __future__ import annotations


class FetchError(Exception):
    """Base class for every failure that ends a fetch."""


class TransportError(FetchError):
    """The request never produced a response (DNS, connect, TLS, timeout)."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause!r}")


class UnexpectedStatusError(FetchError):
    """The server answered with something other than ``200``."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Got response code {status_code} for {url}")


class BodyDecodeError(FetchError):
    """The response body could not be read to completion or decoded."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Could not parse body, got error: {cause}")
