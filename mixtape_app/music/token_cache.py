"""Access token cache for the client-credentials flow."""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class AccessToken:
    """
    Cached bearer token.

    - token  : opaque access token
    - expiry : absolute time (same clock as the issuer's) after which the
               token must not be used anymore
    """

    token: str
    expiry: float

    def is_valid(self, now: float) -> bool:
        return now < self.expiry


class TokenCache(Protocol):
    def get(self) -> Optional[AccessToken]: ...

    def set(self, token: AccessToken) -> None: ...


class InMemoryTokenCache:
    """
    Single-slot cache.

    The slot holds an immutable AccessToken and is replaced by a single
    assignment, so concurrent readers never see a half-written pair. There
    is no locking: two callers finding it expired may both fetch, and the
    last write wins.
    """

    def __init__(self, token: Optional[AccessToken] = None):
        self._token = token

    def get(self) -> Optional[AccessToken]:
        return self._token

    def set(self, token: AccessToken) -> None:
        self._token = token
