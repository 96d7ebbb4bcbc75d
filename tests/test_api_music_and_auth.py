from typing import List

from mixtape_app.api.dependencies import get_music_gateway
from mixtape_app.api.fastapi_app import app
from mixtape_app.core import MusicService, Track, UpstreamError, UserProfile
from mixtape_app.music import MusicLookupGateway, SearchProvider

from conftest import FakeSession, auth


class CannedProvider(SearchProvider):
    def __init__(self, service: MusicService, error: Exception | None = None):
        super().__init__(session=FakeSession())
        self.service = service
        self.error = error

    def _fetch(self, query: str) -> dict:
        if self.error:
            raise self.error
        return {"query": query}

    def _parse(self, payload: dict) -> List[Track]:
        return [
            Track(
                id=f"{self.service.value}-1",
                title=payload["query"],
                artist="Artist",
                service_id="1",
                service=self.service,
            )
        ]


def _use_gateway(*providers: SearchProvider) -> None:
    gateway = MusicLookupGateway(providers)
    app.dependency_overrides[get_music_gateway] = lambda: gateway


def test_music_search_defaults_to_spotify(client) -> None:
    _use_gateway(CannedProvider(MusicService.SPOTIFY), CannedProvider(MusicService.YOUTUBE))

    response = client.get("/music/search", params={"query": "daft punk"})

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": "spotify-1",
            "title": "daft punk",
            "artist": "Artist",
            "imageUrl": "",
            "serviceId": "1",
            "service": "spotify",
        }
    ]


def test_music_search_selects_service(client) -> None:
    _use_gateway(CannedProvider(MusicService.SPOTIFY), CannedProvider(MusicService.YOUTUBE))

    response = client.get("/music/search", params={"query": "queen", "service": "youtube"})

    assert response.status_code == 200
    assert response.json()[0]["service"] == "youtube"


def test_music_search_requires_query(client) -> None:
    _use_gateway(CannedProvider(MusicService.SPOTIFY))

    response = client.get("/music/search")

    assert response.status_code == 400
    assert response.json() == {"error": "Search query is required"}


def test_music_search_rejects_invalid_service(client) -> None:
    _use_gateway(CannedProvider(MusicService.SPOTIFY))

    response = client.get("/music/search", params={"query": "queen", "service": "napster"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid music service"}


def test_music_search_upstream_failure_is_502(client) -> None:
    _use_gateway(CannedProvider(MusicService.SPOTIFY, error=UpstreamError("boom")))

    response = client.get("/music/search", params={"query": "queen"})

    assert response.status_code == 502
    assert response.json() == {"error": "Failed to search music"}


def test_spotify_search_endpoint_uses_q_parameter(client) -> None:
    _use_gateway(CannedProvider(MusicService.SPOTIFY))

    response = client.get("/spotify/search", params={"q": "get lucky"})

    assert response.status_code == 200
    assert response.json()[0]["title"] == "get lucky"


def test_verify_token_returns_uid(client) -> None:
    response = client.post("/auth/verify", json={"idToken": "token-u1"})

    assert response.status_code == 200
    assert response.json() == {"uid": "u1"}


def test_verify_token_requires_token(client) -> None:
    response = client.post("/auth/verify", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "ID token is required"}


def test_verify_invalid_token_is_401(client) -> None:
    response = client.post("/auth/verify", json={"idToken": "forged"})

    assert response.status_code == 401


def test_get_user_info(client, verifier) -> None:
    verifier.profiles["u1"] = UserProfile(
        uid="u1", display_name="Ada", email="ada@example.com", photo_url=None
    )

    response = client.get("/auth/users/u1")

    assert response.status_code == 200
    assert response.json() == {
        "uid": "u1",
        "displayName": "Ada",
        "email": "ada@example.com",
        "photoURL": None,
    }
    assert client.get("/auth/users/ghost").status_code == 404


def test_update_profile_for_current_user(client, verifier) -> None:
    response = client.put(
        "/auth/profile",
        json={"displayName": "DJ Ada", "photoURL": "https://img.example/ada.png"},
        headers=auth("u1"),
    )

    assert response.status_code == 200
    assert response.json()["displayName"] == "DJ Ada"
    assert verifier.profiles["u1"].photo_url == "https://img.example/ada.png"


def test_update_profile_requires_data_and_auth(client) -> None:
    assert client.put("/auth/profile", json={"displayName": "x"}).status_code == 401

    empty = client.put("/auth/profile", json={}, headers=auth("u1"))
    assert empty.status_code == 400
