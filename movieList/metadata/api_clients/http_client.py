from __future__ import annotations

import asyncio
import json
import threading
from typing import Any, Callable, List, TypeVar
from urllib.parse import quote, urlencode

import requests

from movieList.settings import HTTP_TIMEOUT_SECONDS
from movieList.utils import is_http_url, log_debug, strip_query
from movieList.metadata.api_clients.errors import (
    DecodingError,
    InvalidURL,
    NoData,
    TransportError,
)

T = TypeVar("T")


class HttpClient:
    """
    JSON-over-HTTPS fetch-and-decode primitive shared by the API clients.

    One GET per call: no retry, no caching, no rate limiting. The blocking
    `requests` call runs in the loop's default executor so callers only ever
    get their result after awaiting.

    `requests.Session` is not documented as thread-safe, so every executor
    thread gets its own session from *session_factory*. An injected *session*
    is used as-is from all threads.
    """

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(self, session: requests.Session | None = None, timeout: float | None = None,
                 session_factory: Callable[[], requests.Session] = requests.Session):
        self.session = session
        self.session_factory = session_factory
        self.timeout = HTTP_TIMEOUT_SECONDS if timeout is None else timeout
        self._local = threading.local()
        self._opened: List[requests.Session] = []
        self._opened_lock = threading.Lock()

    def close(self) -> None:
        if self.session is not None:
            self.session.close()
        with self._opened_lock:
            opened, self._opened = self._opened, []
        for session in opened:
            session.close()

    def _session(self) -> requests.Session:
        if self.session is not None:
            return self.session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = self.session_factory()
            with self._opened_lock:
                self._opened.append(session)
        return session

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    @staticmethod
    def prepare_url(url: str, params: dict[str, Any] | None = None) -> str:
        """Return *url* with *params* percent-encoded into its query string
        (spaces as %20, not the form-style +).

        Raises `InvalidURL` when the result is not an absolute http(s) URL.
        """
        if not is_http_url(url):
            raise InvalidURL(f"Not an http(s) URL: {url!r}")
        url = url.strip()
        if params:
            query = urlencode(params, quote_via=quote)
            url = f"{url}{'&' if '?' in url else '?'}{query}"
        prepared = requests.models.PreparedRequest()
        try:
            prepared.prepare_url(url, None)
        except (requests.exceptions.InvalidURL,
                requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as exc:
            raise InvalidURL(str(exc)) from exc
        return prepared.url

    async def fetch_json(self, url: str, shape: Callable[[Any], T]) -> T:
        """
        GET *url* and decode its JSON body through *shape*.

        Parameters
        ----------
        url
            Fully built request URL.
        shape
            Callable turning the parsed JSON into the typed result. It must
            raise KeyError / TypeError / ValueError on a mismatch.

        Raises
        ------
        InvalidURL, TransportError, NoData, DecodingError
        """
        url = self.prepare_url(url)
        body = await asyncio.to_thread(self._get, url)
        return self._decode(body, shape)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _get(self, url: str) -> bytes:
        try:
            resp = self._session().get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            log_debug(f"HTTP transport error ({type(exc).__name__}) for {strip_query(url)}")
            raise TransportError(str(exc)) from exc

        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            log_debug(f"HTTP {resp.status_code} from {strip_query(resp.url)}")
            raise TransportError(str(exc), status_code=resp.status_code) from exc

        if not resp.content:
            log_debug(f"HTTP empty body from {strip_query(resp.url)}")
            raise NoData(f"Empty response body ({resp.status_code})")
        return resp.content

    @staticmethod
    def _decode(body: bytes, shape: Callable[[Any], T]) -> T:
        try:
            payload = json.loads(body)
        except ValueError as exc:
            log_debug(f"JSON parse error: {exc}")
            raise DecodingError(f"Response is not valid JSON: {exc}") from exc

        try:
            return shape(payload)
        except (KeyError, TypeError, ValueError) as exc:
            log_debug(f"JSON shape mismatch: {exc!r}")
            raise DecodingError(f"Unexpected response shape: {exc!r}") from exc
