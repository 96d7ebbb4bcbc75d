from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from mixtape_app.core import MusicService, Track
from mixtape_app.music import MusicLookupGateway

from ..dependencies import get_music_gateway

router = APIRouter()
spotify_router = APIRouter()


@router.get("/search", response_model=List[Track])
def search_music(
    query: Optional[str] = Query(default=None),
    service: str = Query(default=MusicService.SPOTIFY.value),
    gateway: MusicLookupGateway = Depends(get_music_gateway),
) -> List[Track]:
    """
    Search one music service and return normalized tracks.

    Examples:
      - /music/search?query=daft+punk
      - /music/search?query=daft+punk&service=youtube
    """
    return gateway.search(query or "", service)


@spotify_router.get("/search", response_model=List[Track])
def search_spotify(
    q: Optional[str] = Query(default=None),
    gateway: MusicLookupGateway = Depends(get_music_gateway),
) -> List[Track]:
    """
    Spotify-only search, kept for clients using the ?q= parameter.
    """
    return gateway.search(q or "", MusicService.SPOTIFY)
