from typing import Optional, Protocol

from mixtape_app.core import UserProfile


class IdentityVerifier(Protocol):
    """
    Contract with the external identity provider.

    verify() must raise AuthenticationError for an invalid or expired
    credential; other provider failures surface as UpstreamError.
    """

    def verify(self, credential: str) -> str: ...

    def get_user(self, uid: str) -> UserProfile: ...

    def update_profile(
        self,
        uid: str,
        display_name: Optional[str] = None,
        photo_url: Optional[str] = None,
    ) -> UserProfile: ...


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Return the token from an "Authorization: Bearer <token>" header value.

    Returns None when the header is absent or uses another scheme; an empty
    bearer token is returned as "" so callers can reject it.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip()
