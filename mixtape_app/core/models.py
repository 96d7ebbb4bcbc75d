from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class MusicService(str, Enum):
    """Closed set of music services a track can come from."""

    SPOTIFY = "spotify"
    YOUTUBE = "youtube"
    APPLE_MUSIC = "applemusic"


class CamelModel(BaseModel):
    """
    Base model for documents exchanged with the front-end and the store.

    - Python attributes are snake_case
    - JSON / document keys are camelCase (coverImage, isPublic, createdBy...)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Track(CamelModel):
    """
    Normalized track descriptor.

    - id        : "<service>-<serviceId>"
    - serviceId : identifier within the source service
    - service   : one of MusicService
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: str
    title: str
    artist: str
    image_url: str = ""
    service_id: str
    service: MusicService


class Mixtape(CamelModel):
    id: str
    title: str
    description: str = ""
    cover_image: str = ""
    tracks: List[Track] = Field(default_factory=list)
    note: str = ""
    created_by: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    collaborators: List[str] = Field(default_factory=list)
    is_public: bool = False

    @field_validator("collaborators")
    @classmethod
    def _dedupe_collaborators(cls, value: List[str]) -> List[str]:
        # Set semantics; first occurrence wins so output stays stable.
        return list(dict.fromkeys(value))


class UserProfile(CamelModel):
    uid: str
    display_name: Optional[str] = None
    email: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")


class MixtapeCreate(CamelModel):
    """
    Body of a creation request.

    Unknown keys (including createdBy / createdAt) are ignored: ownership and
    timestamps always come from the server.
    """

    title: str = ""
    description: str = ""
    cover_image: str = ""
    tracks: List[Track] = Field(default_factory=list)
    note: str = ""
    collaborators: List[str] = Field(default_factory=list)
    is_public: bool = False


class MixtapeUpdate(CamelModel):
    """Partial update; only fields present (and not null) are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = None
    tracks: Optional[List[Track]] = None
    note: Optional[str] = None
    collaborators: Optional[List[str]] = None
    is_public: Optional[bool] = None

    def to_document(self) -> dict:
        return self.model_dump(
            by_alias=True, mode="json", exclude_unset=True, exclude_none=True
        )
