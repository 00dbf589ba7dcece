"""
metadata.core
~~~~~~~~~~~~~
Catalog dataclasses and the local "My List" store.
"""

from movieList.metadata.core.models import (
    Bookmark,
    MovieSummary,
    SeriesSummary,
    TrailerResult,
    image_url,
)
from movieList.metadata.core.bookmarks import (
    AddOutcome,
    BookmarkStore,
    RemoveOutcome,
    decode_bookmarks,
    encode_bookmarks,
)

__all__ = [
    "Bookmark",
    "MovieSummary",
    "SeriesSummary",
    "TrailerResult",
    "image_url",
    "AddOutcome",
    "BookmarkStore",
    "RemoveOutcome",
    "decode_bookmarks",
    "encode_bookmarks",
]
