from typing import Dict, Iterable, List

from mixtape_app import config
from mixtape_app.core import (
    MusicService,
    Track,
    UpstreamError,
    ValidationError,
    log_info,
    log_warning,
)

from .applemusic import AppleMusicSearchProvider
from .providers import SearchProvider
from .spotify import SpotifyClientCredentials, SpotifySearchProvider
from .youtube import YouTubeSearchProvider


def parse_service(value: str) -> MusicService:
    """
    Validate a service selector coming from the outside world.

    Raises ValidationError for anything outside the MusicService set.
    """
    try:
        return MusicService(value)
    except ValueError:
        raise ValidationError("Invalid music service") from None


class MusicLookupGateway:
    """
    Routes a free-text query to the provider registered for a service and
    returns normalized tracks.

    Any provider failure is logged and re-raised as a single UpstreamError
    ("Failed to search music"); callers never see partial results.
    """

    def __init__(self, providers: Iterable[SearchProvider]):
        self.providers: Dict[MusicService, SearchProvider] = {
            p.service: p for p in providers
        }

    def search(self, query: str, service: MusicService | str) -> List[Track]:
        if not query or not query.strip():
            raise ValidationError("Search query is required")

        if not isinstance(service, MusicService):
            service = parse_service(service)

        provider = self.providers.get(service)
        if provider is None:
            raise ValidationError(f"Music service {service.value!r} is not available")

        try:
            tracks = provider.search(query.strip())
        except UpstreamError as exc:
            log_warning(f"Music search error ({service.value}): {exc.message}")
            raise UpstreamError("Failed to search music") from exc

        log_info(f"{service.value} search {query!r}: {len(tracks)} tracks.")
        return tracks


def build_default_gateway() -> MusicLookupGateway:
    """
    Build the gateway from configuration, with one process-wide Spotify
    token cache owned by the gateway's credentials object.
    """
    credentials = SpotifyClientCredentials(
        config.SPOTIFY_CLIENT_ID,
        config.SPOTIFY_CLIENT_SECRET,
    )
    return MusicLookupGateway(
        [
            SpotifySearchProvider(credentials),
            YouTubeSearchProvider(config.YOUTUBE_API_KEY),
            AppleMusicSearchProvider(config.APPLE_MUSIC_TOKEN),
        ]
    )
