from typing import Any, Dict, List, Optional

from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions
from google.cloud.firestore_v1.base_query import FieldFilter

from mixtape_app import config
from mixtape_app.core import NotFoundError, UpstreamError, log_step
from mixtape_app.firebase_app import get_firebase_app

from .stores import Record, _strip_id, _with_id


class FirestoreMixtapeStore:
    """Store backed by a Firestore collection, one document per mixtape."""

    def __init__(self, client: Any, collection: str = config.MIXTAPES_COLLECTION):
        self._collection = client.collection(collection)

    def get(self, mixtape_id: str) -> Optional[Record]:
        try:
            snapshot = self._collection.document(mixtape_id).get()
        except google_exceptions.GoogleAPIError as exc:
            raise UpstreamError("Failed to get mixtape") from exc

        if not snapshot.exists:
            return None
        return _with_id(snapshot.id, snapshot.to_dict() or {})

    def query(self, filters: Dict[str, Any]) -> List[Record]:
        query = self._collection
        for field, value in filters.items():
            query = query.where(filter=FieldFilter(field, "==", value))

        try:
            snapshots = list(query.stream())
        except google_exceptions.GoogleAPIError as exc:
            raise UpstreamError("Failed to get mixtapes") from exc

        return [_with_id(s.id, s.to_dict() or {}) for s in snapshots]

    def add(self, record: Record) -> str:
        try:
            _update_time, doc_ref = self._collection.add(_strip_id(record))
        except google_exceptions.GoogleAPIError as exc:
            raise UpstreamError("Failed to create mixtape") from exc
        return doc_ref.id

    def update(self, mixtape_id: str, partial: Record) -> None:
        try:
            self._collection.document(mixtape_id).update(_strip_id(partial))
        except google_exceptions.NotFound as exc:
            raise NotFoundError("Mixtape not found") from exc
        except google_exceptions.GoogleAPIError as exc:
            raise UpstreamError("Failed to update mixtape") from exc

    def delete(self, mixtape_id: str) -> None:
        try:
            self._collection.document(mixtape_id).delete()
        except google_exceptions.GoogleAPIError as exc:
            raise UpstreamError("Failed to delete mixtape") from exc


def create_firestore_store() -> FirestoreMixtapeStore:
    log_step("Connecting mixtape store to Firestore...")
    client = firestore.client(app=get_firebase_app())
    return FirestoreMixtapeStore(client)
