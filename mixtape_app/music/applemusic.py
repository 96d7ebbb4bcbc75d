from typing import Any, Dict, List, Optional

from mixtape_app import config
from mixtape_app.core import MusicService, Track, UpstreamError

from .providers import SearchProvider

ARTWORK_SIZE = "300"


class AppleMusicSearchProvider(SearchProvider):
    """Catalog song search with a pre-issued Apple Music developer token."""

    service = MusicService.APPLE_MUSIC
    limit = config.SEARCH_LIMITS["applemusic"]

    def __init__(
        self,
        developer_token: Optional[str],
        storefront: str = config.APPLE_MUSIC_STOREFRONT,
        api_base: str = config.APPLE_MUSIC_API_BASE,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.developer_token = developer_token
        self.storefront = storefront
        self.api_base = api_base

    def _fetch(self, query: str) -> Dict[str, Any]:
        if not self.developer_token:
            raise UpstreamError("Apple Music token not configured")
        return self._get_json(
            f"{self.api_base}/catalog/{self.storefront}/search",
            params={"term": query, "types": "songs", "limit": self.limit},
            headers={"Authorization": f"Bearer {self.developer_token}"},
        )

    def _parse(self, payload: Dict[str, Any]) -> List[Track]:
        results = payload.get("results") or {}
        songs = (results.get("songs") or {}).get("data") or []

        tracks: List[Track] = []
        for song in songs:
            attributes = song["attributes"]
            artwork_url = (attributes.get("artwork") or {}).get("url") or ""
            tracks.append(
                self._track(
                    service_id=song["id"],
                    title=attributes["name"],
                    artist=attributes["artistName"],
                    image_url=artwork_url.replace("{w}", ARTWORK_SIZE).replace(
                        "{h}", ARTWORK_SIZE
                    ),
                )
            )
        return tracks
