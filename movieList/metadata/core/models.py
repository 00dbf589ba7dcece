# Catalog dataclasses (+ the JSON shapes that build them)
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, TypeVar, Union

from movieList.settings import TMDB_IMAGE_BASE_URL, YOUTUBE_EMBED_URL, YOUTUBE_WATCH_URL

R = TypeVar("R")


# ─── field readers ───────────────────────────────────────────────────────
def _require(data: dict, key: str, kind: type | tuple[type, ...]) -> Any:
    value = data[key]                                    # KeyError → missing
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(f"{key!r} has unexpected type {type(value).__name__}")
    return value


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{key!r} must be str or null, got {type(value).__name__}")
    return value


def _require_number(data: dict, key: str) -> float:
    return float(_require(data, key, (int, float)))


def _require_object(data: Any) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def image_url(path: str | None) -> str | None:
    """Full TMDb image URL for a poster/backdrop path, or None when absent."""
    if not path:
        return None
    return f"{TMDB_IMAGE_BASE_URL}{path}"


# ─── catalog records ─────────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class MovieSummary:
    id: int
    title: str
    overview: str
    poster_path: str | None
    backdrop_path: str | None
    vote_average: float
    release_date: str

    @classmethod
    def from_json(cls, data: Any) -> MovieSummary:
        data = _require_object(data)
        return cls(
            id=_require(data, "id", int),
            title=_require(data, "title", str),
            overview=_require(data, "overview", str),
            poster_path=_optional_str(data, "poster_path"),
            backdrop_path=_optional_str(data, "backdrop_path"),
            vote_average=_require_number(data, "vote_average"),
            release_date=_require(data, "release_date", str),
        )

    @property
    def display_title(self) -> str:
        return self.title

    @property
    def poster_url(self) -> str | None:
        return image_url(self.poster_path)

    @property
    def backdrop_url(self) -> str | None:
        return image_url(self.backdrop_path)


@dataclass(frozen=True, slots=True)
class SeriesSummary:
    id: int
    name: str
    overview: str
    poster_path: str | None
    backdrop_path: str | None
    vote_average: float
    first_air_date: str

    @classmethod
    def from_json(cls, data: Any) -> SeriesSummary:
        data = _require_object(data)
        return cls(
            id=_require(data, "id", int),
            name=_require(data, "name", str),
            overview=_require(data, "overview", str),
            poster_path=_optional_str(data, "poster_path"),
            backdrop_path=_optional_str(data, "backdrop_path"),
            vote_average=_require_number(data, "vote_average"),
            first_air_date=_require(data, "first_air_date", str),
        )

    @property
    def display_title(self) -> str:
        return self.name

    @property
    def poster_url(self) -> str | None:
        return image_url(self.poster_path)

    @property
    def backdrop_url(self) -> str | None:
        return image_url(self.backdrop_path)


Summary = Union[MovieSummary, SeriesSummary]


def results_of(record: Callable[[Any], R]) -> Callable[[Any], list[R]]:
    """
    Shape for a TMDb list envelope ``{"results": [...]}``.

    Every item goes through *record*; one bad item fails the whole page.
    Pagination keys (``page``, ``total_pages`` …) are ignored.
    """
    def decode(payload: Any) -> list[R]:
        results = _require(_require_object(payload), "results", list)
        return [record(item) for item in results]
    return decode


# ─── trailers ────────────────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class TrailerResult:
    video_id: str | None = None

    @classmethod
    def from_search(cls, payload: Any) -> TrailerResult:
        """Decode a YouTube search envelope ``{"items": [{"id": {"videoId": …}}]}``."""
        items = _require(_require_object(payload), "items", list)
        if not items:
            return cls()
        first = _require(_require_object(items[0]), "id", dict)
        return cls(video_id=_optional_str(first, "videoId"))

    @property
    def found(self) -> bool:
        return self.video_id is not None

    @property
    def watch_url(self) -> str | None:
        return f"{YOUTUBE_WATCH_URL}{self.video_id}" if self.found else None

    @property
    def embed_url(self) -> str | None:
        return f"{YOUTUBE_EMBED_URL}{self.video_id}?playsinline=1" if self.found else None


# ─── my list ─────────────────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class Bookmark:
    title: str
    overview: str
    image_path: str

    @classmethod
    def from_summary(cls, summary: Summary) -> Bookmark:
        """Bookmark a catalog record; prefers the backdrop like the preview drawer."""
        return cls(
            title=summary.display_title,
            overview=summary.overview,
            image_path=summary.backdrop_path or summary.poster_path or "",
        )

    @classmethod
    def from_record(cls, record: Any) -> Bookmark:
        record = _require_object(record)
        return cls(
            title=_require(record, "title", str),
            overview=_require(record, "overview", str),
            image_path=_require(record, "imagePath", str),
        )

    def to_record(self) -> dict[str, str]:
        return {"title": self.title, "overview": self.overview, "imagePath": self.image_path}
