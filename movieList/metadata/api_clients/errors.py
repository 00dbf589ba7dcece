"""Failure kinds raised by the HTTP layer and propagated unchanged by the gateways."""

from __future__ import annotations


class FetchError(Exception):
    """Base class for every failed fetch."""


class InvalidURL(FetchError):
    """The request URL (or the configuration it is built from) is unusable."""


class TransportError(FetchError):
    """The round trip itself failed: timeout, DNS, refused connection, TLS, HTTP status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NoData(FetchError):
    """The server answered with an empty body."""


class DecodingError(FetchError):
    """The body is not JSON or does not have the expected shape."""
