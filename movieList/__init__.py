"""
movieList
~~~~~~~~~

Catalog core for the movie/TV browsing app.

Exports:
  - API clients: HttpClient, TMDBClient, YTClient and the FetchError family
  - Records: MovieSummary, SeriesSummary, TrailerResult, Bookmark
  - My List: BookmarkStore, AddOutcome, RemoveOutcome
  - Search/home helpers: Debouncer, SearchFeed, HomeFeed, HomeSection, load_home
"""

# records + my list
from movieList.metadata.core import (
    AddOutcome,
    Bookmark,
    BookmarkStore,
    MovieSummary,
    RemoveOutcome,
    SeriesSummary,
    TrailerResult,
    image_url,
)

# API clients
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

# search / home helpers
from movieList.debouncer import Debouncer
from movieList.catalog import HomeFeed, HomeSection, SearchFeed, load_home

__all__ = [
    # records + my list
    "AddOutcome", "Bookmark", "BookmarkStore", "MovieSummary",
    "RemoveOutcome", "SeriesSummary", "TrailerResult", "image_url",
    # API clients
    "DecodingError", "FetchError", "HttpClient", "InvalidURL", "NoData",
    "TMDBClient", "TransportError", "YTClient",
    # search / home helpers
    "Debouncer", "HomeFeed", "HomeSection", "SearchFeed", "load_home",
]
