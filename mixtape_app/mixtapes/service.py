from datetime import datetime, timezone
from typing import Callable, List, Optional

from mixtape_app.core import (
    AuthenticationError,
    Mixtape,
    MixtapeCreate,
    MixtapeUpdate,
    NotFoundError,
    ValidationError,
    ensure_deletable,
    ensure_readable,
    ensure_writable,
    filter_mutable_fields,
    log_info,
    log_step,
    log_success,
)
from mixtape_app.data import MixtapeRepository, mixtape_to_document


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MixtapeService:
    """
    Mixtape use cases.

    Every mutating operation loads the current document, runs the access
    policy, and only then talks to the store. When a check fails the store
    is not called at all.
    """

    def __init__(
        self,
        repository: MixtapeRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.repository = repository
        self._clock = clock

    def _require_user(self, requester_id: Optional[str]) -> str:
        if not requester_id:
            raise AuthenticationError()
        return requester_id

    def _load(self, mixtape_id: str) -> Mixtape:
        mixtape = self.repository.get(mixtape_id)
        if mixtape is None:
            raise NotFoundError("Mixtape not found")
        return mixtape

    def list_mixtapes(self, requester_id: Optional[str]) -> List[Mixtape]:
        """
        Authenticated requesters get their own mixtapes, anonymous ones
        get public mixtapes. Newest first.
        """
        if requester_id:
            mixtapes = self.repository.list_by_owner(requester_id)
        else:
            mixtapes = self.repository.list_public()
        return sorted(mixtapes, key=lambda m: m.created_at, reverse=True)

    def get_mixtape(self, mixtape_id: str, requester_id: Optional[str]) -> Mixtape:
        mixtape = self._load(mixtape_id)
        ensure_readable(mixtape, requester_id)
        return mixtape

    def create_mixtape(
        self, data: MixtapeCreate, requester_id: Optional[str]
    ) -> Mixtape:
        owner_id = self._require_user(requester_id)

        if not data.title.strip() or not data.tracks:
            raise ValidationError("Title and tracks are required")

        now = self._clock()
        draft = Mixtape(
            id="",
            title=data.title,
            description=data.description,
            cover_image=data.cover_image,
            tracks=data.tracks,
            note=data.note,
            created_by=owner_id,
            created_at=now,
            updated_at=now,
            collaborators=data.collaborators,
            is_public=data.is_public,
        )

        log_step(f"Creating mixtape {data.title!r} for user {owner_id}...")
        mixtape_id = self.repository.add(mixtape_to_document(draft))
        log_success(f"Mixtape {mixtape_id} created.")
        return draft.model_copy(update={"id": mixtape_id})

    def update_mixtape(
        self,
        mixtape_id: str,
        changes: MixtapeUpdate,
        requester_id: Optional[str],
    ) -> Mixtape:
        """
        Apply a partial update.

        Collaborators silently lose owner-only fields (title, isPublic,
        collaborators). If nothing is left to apply, the store is not called
        and the current mixtape is returned unchanged.
        """
        requester_id = self._require_user(requester_id)
        mixtape = self._load(mixtape_id)
        ensure_writable(mixtape, requester_id)

        updates = filter_mutable_fields(mixtape, requester_id, changes.to_document())
        if "title" in updates and not str(updates["title"]).strip():
            raise ValidationError("Title cannot be empty")

        if not updates:
            log_info(f"Nothing to update on mixtape {mixtape_id}.")
            return mixtape

        updates["updatedAt"] = self._clock().isoformat()

        log_step(f"Updating mixtape {mixtape_id} ({', '.join(sorted(updates))})...")
        self.repository.update(mixtape_id, updates)

        document = {**mixtape_to_document(mixtape), **updates, "id": mixtape_id}
        return Mixtape.model_validate(document)

    def delete_mixtape(self, mixtape_id: str, requester_id: Optional[str]) -> None:
        requester_id = self._require_user(requester_id)
        mixtape = self._load(mixtape_id)
        ensure_deletable(mixtape, requester_id)

        log_step(f"Deleting mixtape {mixtape_id}...")
        self.repository.delete(mixtape_id)
