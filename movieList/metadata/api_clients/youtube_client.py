from __future__ import annotations

from movieList.settings import YOUTUBE_API_KEY, YOUTUBE_SEARCH_URL
from movieList.utils import is_http_url
from movieList.metadata.api_clients.errors import InvalidURL
from movieList.metadata.api_clients.http_client import HttpClient
from movieList.metadata.core.models import TrailerResult

TRAILER_SUFFIX = "trailer"


class YTClient:
    """
    A thin wrapper for the YT Data API search endpoint
    """
    def __init__(self, http: HttpClient, api_key: str | None = None, search_url: str | None = None):
        self.http = http
        self.api_key = api_key or YOUTUBE_API_KEY
        self.search_url = search_url or YOUTUBE_SEARCH_URL
        if not self.api_key:
            raise InvalidURL("No YouTube api key passed or configured")
        if not is_http_url(self.search_url):
            raise InvalidURL(f"Bad YouTube search URL: {self.search_url!r}")

    def build_url(self, title: str) -> str:
        params = {
            "part": "snippet",
            "type": "video",
            "maxResults": "1",
            "q": f"{title} {TRAILER_SUFFIX}",
            "key": self.api_key,
        }
        return self.http.prepare_url(self.search_url, params)

    async def find_trailer(self, title: str) -> TrailerResult:
        """First video hit for “<title> trailer”.

        Zero hits is a normal outcome: the result simply has no `video_id`.
        """
        return await self.http.fetch_json(self.build_url(title), TrailerResult.from_search)
