from fastapi import APIRouter, Depends

from mixtape_app.core import UserProfile, ValidationError
from mixtape_app.identity import IdentityVerifier

from ..dependencies import get_current_user_id, get_identity_verifier
from .schemas import ProfileUpdateRequest, VerifyTokenRequest, VerifyTokenResponse

router = APIRouter()


@router.post("/verify", response_model=VerifyTokenResponse)
def verify_token(
    body: VerifyTokenRequest,
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> VerifyTokenResponse:
    """
    Exchange an identity-provider ID token for the stable user id.
    """
    if not body.id_token:
        raise ValidationError("ID token is required")
    return VerifyTokenResponse(uid=verifier.verify(body.id_token))


@router.get("/users/{uid}", response_model=UserProfile)
def get_user_info(
    uid: str,
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> UserProfile:
    return verifier.get_user(uid)


@router.put("/profile", response_model=UserProfile)
def update_profile(
    body: ProfileUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> UserProfile:
    """
    Update the caller's display name and/or photo URL.
    """
    if body.display_name is None and body.photo_url is None:
        raise ValidationError("Profile data is required")
    return verifier.update_profile(
        user_id,
        display_name=body.display_name,
        photo_url=body.photo_url,
    )
