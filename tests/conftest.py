from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
import requests
from fastapi.testclient import TestClient

from mixtape_app.api.dependencies import (
    get_identity_verifier,
    get_mixtape_store,
    get_music_gateway,
)
from mixtape_app.api.fastapi_app import app
from mixtape_app.core import AuthenticationError, NotFoundError, UserProfile
from mixtape_app.data import InMemoryMixtapeStore


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    """Stand-in for requests.Session returning queued responses and recording calls."""

    def __init__(self, *responses: FakeResponse):
        self.responses: List[FakeResponse] = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def _next(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            raise AssertionError(f"Unexpected {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._next("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._next("POST", url, **kwargs)


class FakeVerifier:
    """IdentityVerifier accepting "token-<uid>" credentials."""

    def __init__(self) -> None:
        self.profiles: Dict[str, UserProfile] = {}

    def verify(self, credential: str) -> str:
        if not credential.startswith("token-"):
            raise AuthenticationError("Unauthorized")
        return credential[len("token-") :]

    def get_user(self, uid: str) -> UserProfile:
        if uid not in self.profiles:
            raise NotFoundError("User not found")
        return self.profiles[uid]

    def update_profile(
        self,
        uid: str,
        display_name: Optional[str] = None,
        photo_url: Optional[str] = None,
    ) -> UserProfile:
        current = self.profiles.get(uid, UserProfile(uid=uid))
        changes = {}
        if display_name is not None:
            changes["display_name"] = display_name
        if photo_url is not None:
            changes["photo_url"] = photo_url
        profile = current.model_copy(update=changes)
        self.profiles[uid] = profile
        return profile


class SpyStore(InMemoryMixtapeStore):
    """In-memory store recording every mutating call."""

    def __init__(self, documents: Optional[Dict[str, Dict[str, Any]]] = None):
        super().__init__(documents)
        self.writes: List[tuple] = []

    def add(self, record):
        self.writes.append(("add", record))
        return super().add(record)

    def update(self, mixtape_id, partial):
        self.writes.append(("update", mixtape_id, partial))
        return super().update(mixtape_id, partial)

    def delete(self, mixtape_id):
        self.writes.append(("delete", mixtape_id))
        return super().delete(mixtape_id)


def track_payload(n: int = 1, service: str = "spotify") -> Dict[str, Any]:
    return {
        "id": f"{service}-{n}",
        "title": f"Song {n}",
        "artist": "Test Artist",
        "imageUrl": f"https://img.example/{n}.jpg",
        "serviceId": str(n),
        "service": service,
    }


def mixtape_document(
    created_by: str = "u1",
    collaborators: Optional[List[str]] = None,
    is_public: bool = False,
    title: str = "Road trip",
    created_at: datetime = datetime(2025, 1, 1, tzinfo=timezone.utc),
) -> Dict[str, Any]:
    return {
        "title": title,
        "description": "",
        "coverImage": "",
        "tracks": [track_payload(1)],
        "note": "for you",
        "createdBy": created_by,
        "createdAt": created_at.isoformat(),
        "updatedAt": created_at.isoformat(),
        "collaborators": collaborators or [],
        "isPublic": is_public,
    }


@pytest.fixture
def store() -> SpyStore:
    return SpyStore(
        {
            "m1": mixtape_document(created_by="u1", collaborators=["u2"]),
            "pub": mixtape_document(created_by="u3", is_public=True, title="Public"),
        }
    )


@pytest.fixture
def verifier() -> FakeVerifier:
    return FakeVerifier()


@pytest.fixture
def client(store: SpyStore, verifier: FakeVerifier):
    app.dependency_overrides[get_mixtape_store] = lambda: store
    app.dependency_overrides[get_identity_verifier] = lambda: verifier
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_mixtape_store, None)
        app.dependency_overrides.pop(get_identity_verifier, None)
        app.dependency_overrides.pop(get_music_gateway, None)


def auth(uid: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer token-{uid}"}
