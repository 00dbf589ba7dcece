from datetime import datetime
from urllib.parse import urlparse

from movieList.settings import LOG_PATH


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    entry = f"[{ts}] {message}\n"
    with LOG_PATH.open("a", encoding="utf-8") as f:
        f.write(entry)


def is_http_url(url: object) -> bool:
    """True for an absolute http(s) URL with a host part."""
    if not isinstance(url, str) or not url.strip():
        return False
    parts = urlparse(url.strip())
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def strip_query(url: str) -> str:
    """Drop the query string (and the credentials in it) before logging a URL."""
    return str(url).split("?", 1)[0]
