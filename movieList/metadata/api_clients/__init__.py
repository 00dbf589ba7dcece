"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around the external REST APIs.
Build one `HttpClient` and hand it to each client; there are no module singletons.
"""

from movieList.metadata.api_clients.errors import (
    DecodingError,
    FetchError,
    InvalidURL,
    NoData,
    TransportError,
)
from movieList.metadata.api_clients.http_client    import HttpClient
from movieList.metadata.api_clients.tmdb_client    import TMDBClient
from movieList.metadata.api_clients.youtube_client import YTClient

__all__ = [
    "HttpClient",
    "TMDBClient",
    "YTClient",
    "FetchError",
    "InvalidURL",
    "TransportError",
    "NoData",
    "DecodingError",
]
