from typing import Optional

from firebase_admin import auth, exceptions as firebase_exceptions

from mixtape_app.core import (
    AuthenticationError,
    NotFoundError,
    UpstreamError,
    UserProfile,
    log_step,
    log_warning,
)
from mixtape_app.firebase_app import get_firebase_app


def _to_profile(record: auth.UserRecord) -> UserProfile:
    return UserProfile(
        uid=record.uid,
        display_name=record.display_name,
        email=record.email,
        photo_url=record.photo_url,
    )


class FirebaseIdentityVerifier:
    """IdentityVerifier backed by Firebase Auth (firebase-admin)."""

    def __init__(self, app=None):
        self._app = app

    @property
    def app(self):
        # Initialized on first use so anonymous requests never touch Firebase.
        if self._app is None:
            self._app = get_firebase_app()
        return self._app

    def verify(self, credential: str) -> str:
        if not credential:
            raise AuthenticationError("ID token is required")
        try:
            decoded = auth.verify_id_token(credential, app=self.app)
        except (
            auth.InvalidIdTokenError,
            auth.ExpiredIdTokenError,
            auth.RevokedIdTokenError,
            auth.UserDisabledError,
            ValueError,
        ) as exc:
            log_warning(f"Token verification failed: {exc}")
            raise AuthenticationError("Unauthorized") from exc
        except firebase_exceptions.FirebaseError as exc:
            raise UpstreamError("Identity provider unavailable") from exc
        return decoded["uid"]

    def get_user(self, uid: str) -> UserProfile:
        try:
            record = auth.get_user(uid, app=self.app)
        except auth.UserNotFoundError as exc:
            raise NotFoundError("User not found") from exc
        except firebase_exceptions.FirebaseError as exc:
            raise UpstreamError("Failed to get user info") from exc
        return _to_profile(record)

    def update_profile(
        self,
        uid: str,
        display_name: Optional[str] = None,
        photo_url: Optional[str] = None,
    ) -> UserProfile:
        log_step(f"Updating profile for user {uid}...")
        try:
            record = auth.update_user(
                uid,
                display_name=display_name,
                photo_url=photo_url,
                app=self.app,
            )
        except auth.UserNotFoundError as exc:
            raise NotFoundError("User not found") from exc
        except firebase_exceptions.FirebaseError as exc:
            raise UpstreamError("Failed to update profile") from exc
        return _to_profile(record)
