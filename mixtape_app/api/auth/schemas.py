"""Pydantic schemas for the auth API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VerifyTokenRequest(BaseModel):
    id_token: str = Field(default="", alias="idToken")


class VerifyTokenResponse(BaseModel):
    uid: str


class ProfileUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    display_name: Optional[str] = Field(default=None, alias="displayName")
    photo_url: Optional[str] = Field(default=None, alias="photoURL")
