"""metadata.core.bookmarks
Local "My List" of saved titles.

The whole list lives in one JSON document under a single record key and is
rewritten on every change, so a crash never leaves half a list behind.
"""

from __future__ import annotations
import json
import os
import tempfile
import threading
from enum import Enum
from pathlib import Path
from typing import List

from movieList.settings import BOOKMARKS_KEY, BOOKMARKS_PATH
from movieList.utils import log_debug
from movieList.metadata.core.models import Bookmark


class AddOutcome(Enum):
    ADDED = "added"
    ALREADY_EXISTS = "already_exists"


class RemoveOutcome(Enum):
    REMOVED = "removed"
    INDEX_OUT_OF_RANGE = "index_out_of_range"


_write_lock = threading.RLock()      # one writer at a time across every store in the process


# ─── persistence boundary ────────────────────────────────────────────────
def encode_bookmarks(bookmarks: List[Bookmark], key: str = BOOKMARKS_KEY) -> str:
    """Serialize *bookmarks* as ``{key: [{title, overview, imagePath}, …]}``."""
    doc = {key: [b.to_record() for b in bookmarks]}
    return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"


def decode_bookmarks(text: str, key: str = BOOKMARKS_KEY) -> List[Bookmark]:
    """Inverse of `encode_bookmarks`.

    Entries missing one of the three string fields are skipped; a document
    that is not JSON at all raises ValueError.
    """
    doc = json.loads(text) if text.strip() else {}
    records = doc.get(key, []) if isinstance(doc, dict) else []
    if not isinstance(records, list):
        return []

    out: List[Bookmark] = []
    for record in records:
        try:
            out.append(Bookmark.from_record(record))
        except (KeyError, TypeError):
            log_debug(f"Skipping malformed bookmark entry: {record!r}")
    return out


def _write_atomic(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise


# ─── store ───────────────────────────────────────────────────────────────
class BookmarkStore:
    """Sole owner of the persisted list; callers read snapshots and submit intents."""

    def __init__(self, path: Path | str | None = None, key: str = BOOKMARKS_KEY):
        self.path = Path(path) if path is not None else BOOKMARKS_PATH
        self.key = key

    # ───────────────────────────── readers ──────────────────────────
    def list(self) -> List[Bookmark]:
        with _write_lock:
            return self._load()

    def contains(self, title: str) -> bool:
        with _write_lock:
            return any(b.title == title for b in self._load())

    @property
    def count(self) -> int:
        with _write_lock:
            return len(self._load())

    def __len__(self) -> int:
        return self.count

    # ───────────────────────────── writers ──────────────────────────
    def add(self, bookmark: Bookmark) -> AddOutcome:
        """Append *bookmark* unless its title is already listed (exact match)."""
        with _write_lock:
            items = self._load()
            if any(b.title == bookmark.title for b in items):
                log_debug(f"My List: “{bookmark.title}” already listed")
                return AddOutcome.ALREADY_EXISTS
            self._persist(items + [bookmark])
        log_debug(f"My List: added “{bookmark.title}”")
        return AddOutcome.ADDED

    def remove(self, index: int) -> RemoveOutcome:
        """Drop the entry at *index*; negative indices count as out of range."""
        with _write_lock:
            items = self._load()
            if not 0 <= index < len(items):
                return RemoveOutcome.INDEX_OUT_OF_RANGE
            removed = items.pop(index)
            self._persist(items)
        log_debug(f"My List: removed “{removed.title}”")
        return RemoveOutcome.REMOVED

    # ───────────────────────────── internals ────────────────────────
    def _load(self) -> List[Bookmark]:
        if not self.path.exists():
            return []
        try:
            return decode_bookmarks(self.path.read_text(encoding="utf-8"), self.key)
        except (OSError, ValueError) as exc:
            log_debug(f"My List: unreadable {self.path.name} ({exc}); starting empty")
            return []

    def _persist(self, items: List[Bookmark]) -> None:
        _write_atomic(self.path, encode_bookmarks(items, self.key))

    def __repr__(self) -> str:
        return f"BookmarkStore(path={str(self.path)!r}, count={self.count})"

