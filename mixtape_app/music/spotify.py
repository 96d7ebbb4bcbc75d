import time
from typing import Any, Callable, Dict, List, Optional

import requests

from mixtape_app import config
from mixtape_app.core import MusicService, Track, UpstreamError, log_step, log_warning

from .providers import SearchProvider
from .token_cache import AccessToken, InMemoryTokenCache, TokenCache


class SpotifyClientCredentials:
    """
    Spotify app token via the OAuth client-credentials flow.

    The token is reused while clock() < expiry, where
    expiry = issue time + expires_in - safety_margin.
    """

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        cache: Optional[TokenCache] = None,
        clock: Callable[[], float] = time.time,
        session: Optional[requests.Session] = None,
        safety_margin: int = config.SPOTIFY_TOKEN_SAFETY_MARGIN,
        token_url: str = config.SPOTIFY_TOKEN_URL,
        timeout: float = config.HTTP_TIMEOUT_SECONDS,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.cache = cache if cache is not None else InMemoryTokenCache()
        self.clock = clock
        self.session = session or requests.Session()
        self.safety_margin = safety_margin
        self.token_url = token_url
        self.timeout = timeout

    def _request_token(self) -> Dict[str, Any]:
        if not self.client_id or not self.client_secret:
            raise UpstreamError("Spotify client credentials not configured")

        log_step("Requesting Spotify client-credentials token...")
        try:
            r = self.session.post(
                self.token_url,
                data={"grant_type": "client_credentials"},
                auth=(self.client_id, self.client_secret),
                timeout=self.timeout,
            )
            r.raise_for_status()
            return r.json()
        except (requests.RequestException, ValueError) as exc:
            log_warning(f"Error fetching Spotify access token: {exc}")
            raise UpstreamError("Failed to authenticate with Spotify") from exc

    def get_access_token(self) -> str:
        now = self.clock()
        cached = self.cache.get()
        if cached is not None and cached.is_valid(now):
            return cached.token

        token_info = self._request_token()
        try:
            token = AccessToken(
                token=str(token_info["access_token"]),
                expiry=now + float(token_info["expires_in"]) - self.safety_margin,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamError("Spotify token response is malformed") from exc

        self.cache.set(token)
        return token.token


class SpotifySearchProvider(SearchProvider):
    service = MusicService.SPOTIFY
    limit = config.SEARCH_LIMITS["spotify"]

    def __init__(
        self,
        credentials: SpotifyClientCredentials,
        session: Optional[requests.Session] = None,
        api_base: str = config.SPOTIFY_API_BASE,
        **kwargs: Any,
    ):
        super().__init__(session=session, **kwargs)
        self.credentials = credentials
        self.api_base = api_base

    def _fetch(self, query: str) -> Dict[str, Any]:
        token = self.credentials.get_access_token()
        return self._get_json(
            f"{self.api_base}/search",
            params={"q": query, "type": "track", "limit": self.limit},
            headers={"Authorization": f"Bearer {token}"},
        )

    def _parse(self, payload: Dict[str, Any]) -> List[Track]:
        tracks: List[Track] = []
        for item in payload["tracks"]["items"]:
            images = (item.get("album") or {}).get("images") or [{}]
            tracks.append(
                self._track(
                    service_id=item["id"],
                    title=item["name"],
                    artist=", ".join(a["name"] for a in item["artists"]),
                    image_url=(images[0] or {}).get("url") or "",
                )
            )
        return tracks
