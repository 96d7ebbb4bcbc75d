"""FastAPI dependency wiring.

Each factory builds one process-wide instance from configuration. Tests
swap them through `app.dependency_overrides`.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header

from mixtape_app import config
from mixtape_app.core import AuthenticationError, log_info
from mixtape_app.data import (
    InMemoryMixtapeStore,
    JsonFileMixtapeStore,
    MixtapeRepository,
    MixtapeStore,
)
from mixtape_app.identity import IdentityVerifier, extract_bearer_token
from mixtape_app.mixtapes import MixtapeService
from mixtape_app.music import MusicLookupGateway, build_default_gateway


@lru_cache(maxsize=None)
def get_mixtape_store() -> MixtapeStore:
    backend = config.MIXTAPE_STORE_BACKEND
    log_info(f"Mixtape store backend: {backend}")

    if backend == "memory":
        return InMemoryMixtapeStore()
    if backend == "json":
        return JsonFileMixtapeStore(config.MIXTAPE_STORE_FILE)
    if backend == "firestore":
        from mixtape_app.data.firestore import create_firestore_store

        return create_firestore_store()
    raise RuntimeError(f"Unknown MIXTAPE_STORE_BACKEND: {backend!r}")


def get_mixtape_service(
    store: MixtapeStore = Depends(get_mixtape_store),
) -> MixtapeService:
    return MixtapeService(MixtapeRepository(store))


@lru_cache(maxsize=None)
def get_identity_verifier() -> IdentityVerifier:
    from mixtape_app.identity.firebase import FirebaseIdentityVerifier

    return FirebaseIdentityVerifier()


@lru_cache(maxsize=None)
def get_music_gateway() -> MusicLookupGateway:
    return build_default_gateway()


def get_optional_user_id(
    authorization: Optional[str] = Header(default=None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> Optional[str]:
    """
    Requester id from the bearer token, or None for anonymous requests.

    A token that is present but invalid is rejected with 401 rather than
    being downgraded to anonymous.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        return None
    return verifier.verify(token)


def get_current_user_id(
    user_id: Optional[str] = Depends(get_optional_user_id),
) -> str:
    if user_id is None:
        raise AuthenticationError()
    return user_id
