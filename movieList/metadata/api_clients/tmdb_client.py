from __future__ import annotations

from typing import Any

from movieList.settings import TMDB_API_KEY, TMDB_BASE_URL
from movieList.utils import is_http_url
from movieList.metadata.api_clients.errors import InvalidURL
from movieList.metadata.api_clients.http_client import HttpClient
from movieList.metadata.core.models import MovieSummary, SeriesSummary, results_of

_MOVIE_PAGE  = results_of(MovieSummary.from_json)
_SERIES_PAGE = results_of(SeriesSummary.from_json)

_LIST_PARAMS = {"language": "en-US", "page": "1"}
_DISCOVER_PARAMS = {
    "language": "en-US",
    "sort_by": "popularity.desc",
    "include_adult": "false",
    "include_video": "false",
    "page": "1",
    "with_watch_monetization_types": "flatrate",
}


class TMDBClient:
    """Typed catalog slices from The Movie Database (TMDb).

    Every call is one GET through the shared `HttpClient`; only the
    ``results`` array comes back, in TMDb's order.
    """

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(self, http: HttpClient, api_key: str | None = None, base_url: str | None = None):
        self.http = http
        self.api_key = api_key or TMDB_API_KEY
        self.base_url = (base_url or TMDB_BASE_URL or "").rstrip("/")
        if not self.api_key:
            raise InvalidURL("No TMDb api key passed or configured")
        if not is_http_url(self.base_url):
            raise InvalidURL(f"Bad TMDb base URL: {self.base_url!r}")

    def build_url(self, path: str, **params: Any) -> str:
        """Absolute request URL for *path* with the api key and *params*."""
        return self.http.prepare_url(
            f"{self.base_url}{path}", {"api_key": self.api_key, **params}
        )

    async def _page(self, shape, path: str, **params: Any) -> list:
        return await self.http.fetch_json(self.build_url(path, **params), shape)

    # ------------------------------------------------------------------
    # Public – catalog slices
    # ------------------------------------------------------------------
    async def trending_movies(self) -> list[MovieSummary]:
        return await self._page(_MOVIE_PAGE, "/trending/movie/day")

    async def trending_series(self) -> list[SeriesSummary]:
        return await self._page(_SERIES_PAGE, "/trending/tv/day")

    async def popular(self) -> list[MovieSummary]:
        return await self._page(_MOVIE_PAGE, "/movie/popular", **_LIST_PARAMS)

    async def upcoming(self) -> list[MovieSummary]:
        return await self._page(_MOVIE_PAGE, "/movie/upcoming", **_LIST_PARAMS)

    async def top_rated(self) -> list[MovieSummary]:
        return await self._page(_MOVIE_PAGE, "/movie/top_rated", **_LIST_PARAMS)

    async def discover(self) -> list[MovieSummary]:
        return await self._page(_MOVIE_PAGE, "/discover/movie", **_DISCOVER_PARAMS)

    async def search(self, query: str) -> list[MovieSummary]:
        """Movies matching *query*.

        Callers should drop blank queries before calling; a query that is
        empty once trimmed raises `InvalidURL` instead of hitting TMDb.
        """
        if not isinstance(query, str) or not query.strip():
            raise InvalidURL("Empty search query")
        return await self._page(_MOVIE_PAGE, "/search/movie", query=query)
