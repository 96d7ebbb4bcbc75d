from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from mixtape_app.core import Mixtape, UpstreamError, log_warning

from .stores import MixtapeStore, Record


def mixtape_to_document(mixtape: Mixtape) -> Record:
    """Serialize a Mixtape to its camelCase store document (without id)."""
    return mixtape.model_dump(by_alias=True, mode="json", exclude={"id"})


class MixtapeRepository:
    """Repository translating between store records and Mixtape models."""

    def __init__(self, store: MixtapeStore):
        self.store = store

    def _parse(self, record: Record) -> Mixtape:
        return Mixtape.model_validate(record)

    def _parse_many(self, records: List[Record]) -> List[Mixtape]:
        mixtapes: List[Mixtape] = []
        for record in records:
            try:
                mixtapes.append(self._parse(record))
            except PydanticValidationError:
                # Skip malformed documents instead of failing the whole listing.
                log_warning(f"Skipping malformed mixtape document {record.get('id')!r}.")
                continue
        return mixtapes

    def get(self, mixtape_id: str) -> Optional[Mixtape]:
        record = self.store.get(mixtape_id)
        if record is None:
            return None
        try:
            return self._parse(record)
        except PydanticValidationError as exc:
            raise UpstreamError("Stored mixtape is malformed") from exc

    def list_by_owner(self, owner_id: str) -> List[Mixtape]:
        return self._parse_many(self.store.query({"createdBy": owner_id}))

    def list_public(self) -> List[Mixtape]:
        return self._parse_many(self.store.query({"isPublic": True}))

    def add(self, document: Record) -> str:
        return self.store.add(document)

    def update(self, mixtape_id: str, partial: Dict[str, Any]) -> None:
        self.store.update(mixtape_id, partial)

    def delete(self, mixtape_id: str) -> None:
        self.store.delete(mixtape_id)
