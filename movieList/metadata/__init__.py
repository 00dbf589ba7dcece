"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – dataclasses + bookmark store
* api_clients – TMDb / YouTube clients over one HttpClient
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieList.metadata.core import (
    AddOutcome,
    Bookmark,
    BookmarkStore,
    MovieSummary,
    RemoveOutcome,
    SeriesSummary,
    TrailerResult,
)

# ── API clients ───────────────────────────────────────────────────────────
from movieList.metadata.api_clients import (
    DecodingError,
    FetchError,
    HttpClient,
    InvalidURL,
    NoData,
    TMDBClient,
    TransportError,
    YTClient,
)

__all__ = [
    "AddOutcome",
    "Bookmark",
    "BookmarkStore",
    "MovieSummary",
    "RemoveOutcome",
    "SeriesSummary",
    "TrailerResult",
    "DecodingError",
    "FetchError",
    "HttpClient",
    "InvalidURL",
    "NoData",
    "TMDBClient",
    "TransportError",
    "YTClient",
]
