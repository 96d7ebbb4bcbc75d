from typing import Any, Dict, List, Optional

from mixtape_app import config
from mixtape_app.core import MusicService, Track, UpstreamError

from .providers import SearchProvider


class YouTubeSearchProvider(SearchProvider):
    """Video search through the YouTube Data API v3, keyed by API key."""

    service = MusicService.YOUTUBE
    limit = config.SEARCH_LIMITS["youtube"]

    def __init__(
        self,
        api_key: Optional[str],
        api_base: str = config.YOUTUBE_API_BASE,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.api_key = api_key
        self.api_base = api_base

    def _fetch(self, query: str) -> Dict[str, Any]:
        if not self.api_key:
            raise UpstreamError("YouTube API key not configured")
        return self._get_json(
            f"{self.api_base}/search",
            params={
                "q": query,
                "part": "snippet",
                "type": "video",
                "maxResults": self.limit,
                "key": self.api_key,
            },
        )

    def _parse(self, payload: Dict[str, Any]) -> List[Track]:
        tracks: List[Track] = []
        for item in payload["items"]:
            snippet = item["snippet"]
            thumbnails = snippet.get("thumbnails") or {}
            thumbnail = thumbnails.get("high") or thumbnails.get("default") or {}
            tracks.append(
                self._track(
                    service_id=item["id"]["videoId"],
                    title=snippet["title"],
                    artist=snippet.get("channelTitle") or "",
                    image_url=thumbnail.get("url") or "",
                )
            )
        return tracks
