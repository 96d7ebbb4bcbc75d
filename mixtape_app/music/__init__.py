"""Public façade for the mixtape_app.music package.

This module exposes the music lookup gateway, its search providers and the
client-credentials token cache used for Spotify.
"""

from .applemusic import AppleMusicSearchProvider
from .gateway import MusicLookupGateway, build_default_gateway, parse_service
from .providers import SearchProvider
from .spotify import SpotifyClientCredentials, SpotifySearchProvider
from .token_cache import AccessToken, InMemoryTokenCache, TokenCache
from .youtube import YouTubeSearchProvider

__all__ = [
    "MusicLookupGateway",
    "build_default_gateway",
    "parse_service",
    "SearchProvider",
    "SpotifySearchProvider",
    "YouTubeSearchProvider",
    "AppleMusicSearchProvider",
    "SpotifyClientCredentials",
    "AccessToken",
    "TokenCache",
    "InMemoryTokenCache",
]
