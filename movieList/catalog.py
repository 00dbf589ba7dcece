from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from movieList.debouncer import Debouncer
from movieList.metadata.api_clients import FetchError, TMDBClient
from movieList.metadata.core.models import MovieSummary, Summary

PageOrError = Union[List[Summary], FetchError]


class HomeSection(Enum):
    """Home screen rows, in display order."""
    TRENDING_MOVIES = ("Trending Movies", "trending_movies")
    TRENDING_TV     = ("Trending TV", "trending_series")
    POPULAR         = ("Popular", "popular")
    UPCOMING        = ("Upcoming Movies", "upcoming")
    TOP_RATED       = ("Top Rated", "top_rated")

    def __init__(self, title: str, operation: str):
        self.title = title
        self.operation = operation


@dataclass
class HomeFeed:
    """One page (or the error it failed with) per home section."""
    sections: Dict[HomeSection, PageOrError] = field(default_factory=dict)

    def page(self, section: HomeSection) -> List[Summary]:
        """Titles for *section*; an empty list when that row failed."""
        value = self.sections.get(section)
        return value if isinstance(value, list) else []

    def error(self, section: HomeSection) -> Optional[FetchError]:
        value = self.sections.get(section)
        return value if isinstance(value, FetchError) else None

    @property
    def failed(self) -> List[HomeSection]:
        return [s for s in HomeSection if self.error(s) is not None]

    def hero(self, rng: random.Random | None = None) -> Optional[MovieSummary]:
        """Random trending movie for the header, or None when there is none."""
        movies = self.page(HomeSection.TRENDING_MOVIES)
        if not movies:
            return None
        return (rng or random).choice(movies)


async def load_home(tmdb: TMDBClient) -> HomeFeed:
    """
    Fetch every home row concurrently.

    A failing row is stored as its `FetchError` and never hides the others.
    Anything that isn't a `FetchError` is a bug and propagates.
    """
    sections = list(HomeSection)
    results = await asyncio.gather(
        *(getattr(tmdb, s.operation)() for s in sections),
        return_exceptions=True,
    )
    feed = HomeFeed()
    for section, result in zip(sections, results):
        if isinstance(result, BaseException) and not isinstance(result, FetchError):
            raise result
        feed.sections[section] = result
    return feed


class SearchFeed:
    """
    Search-as-you-type glue: blank text clears the results right away,
    anything else reaches TMDb once the debounce window goes quiet.

    Results arrive in completion order; a slow earlier search can still land
    after a newer one, so callers that care should compare `last_query`.
    """

    def __init__(self,
                 tmdb: TMDBClient,
                 on_results: Callable[[str, List[MovieSummary]], None],
                 on_error: Callable[[str, FetchError], None],
                 debouncer: Debouncer | None = None):
        self.tmdb = tmdb
        self.on_results = on_results
        self.on_error = on_error
        self.debouncer = debouncer or Debouncer()
        self.last_query = ""

    def update_query(self, text: str) -> None:
        query = (text or "").strip()
        self.last_query = query
        if not query:
            self.debouncer.cancel()
            self.on_results("", [])
            return
        self.debouncer.schedule(lambda: self._run(text))

    async def _run(self, text: str) -> None:
        query = text.strip()
        try:
            movies = await self.tmdb.search(text)
        except FetchError as exc:
            self.on_error(query, exc)
            return
        self.on_results(query, movies)
