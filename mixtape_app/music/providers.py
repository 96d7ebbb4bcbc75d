from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import requests

from mixtape_app import config
from mixtape_app.core import MusicService, Track, UpstreamError


class SearchProvider(ABC):
    """
    Abstract music search backend.

    Each provider exposes:
      - service : the MusicService tag stamped on every returned Track
      - limit   : max number of results requested and returned

    Concrete providers implement `_fetch()` and `_parse()`; `search()` turns
    any transport, status or payload problem into UpstreamError, never
    returning a partial list.
    """

    service: MusicService
    limit: int = 10

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = config.HTTP_TIMEOUT_SECONDS,
    ):
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        try:
            r = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as exc:
            raise UpstreamError(f"{self.service.value} search request failed: {exc}") from exc
        except ValueError as exc:
            raise UpstreamError(f"{self.service.value} returned invalid JSON") from exc

    def _track(self, service_id: str, title: str, artist: str, image_url: str) -> Track:
        return Track(
            id=f"{self.service.value}-{service_id}",
            title=title,
            artist=artist,
            image_url=image_url or "",
            service_id=service_id,
            service=self.service,
        )

    @abstractmethod
    def _fetch(self, query: str) -> Dict[str, Any]:
        """Call the upstream search endpoint and return its JSON payload."""
        raise NotImplementedError

    @abstractmethod
    def _parse(self, payload: Dict[str, Any]) -> List[Track]:
        """Map the upstream payload to normalized tracks."""
        raise NotImplementedError

    def search(self, query: str) -> List[Track]:
        """
        Run a free-text track search and return at most `limit` tracks.
        """
        payload = self._fetch(query)
        try:
            tracks = self._parse(payload)
        except (KeyError, TypeError, IndexError, ValueError, AttributeError) as exc:
            raise UpstreamError(
                f"{self.service.value} returned an unexpected payload"
            ) from exc
        return tracks[: self.limit]
