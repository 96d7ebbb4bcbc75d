"""Mixtape document stores.

Every store implements the same narrow contract over camelCase documents:

    get(id)            -> record | None
    query(filters)     -> list of records (equality on every key of filters)
    add(record)        -> generated id
    update(id, partial)-> None   (shallow merge, last write wins)
    delete(id)         -> None

Returned records always carry their id under "id"; the id is never stored
inside the document itself.
"""

import copy
import json
import os
from pathlib import Path
import tempfile
import threading
from typing import Any, Dict, List, Optional, Protocol
from uuid import uuid4

from mixtape_app.core import NotFoundError, UpstreamError, log_error

Record = Dict[str, Any]


class MixtapeStore(Protocol):
    def get(self, mixtape_id: str) -> Optional[Record]: ...

    def query(self, filters: Dict[str, Any]) -> List[Record]: ...

    def add(self, record: Record) -> str: ...

    def update(self, mixtape_id: str, partial: Record) -> None: ...

    def delete(self, mixtape_id: str) -> None: ...


def _strip_id(record: Record) -> Record:
    return {k: v for k, v in record.items() if k != "id"}


def _with_id(mixtape_id: str, document: Record) -> Record:
    return {"id": mixtape_id, **copy.deepcopy(document)}


def _matches(document: Record, filters: Dict[str, Any]) -> bool:
    return all(document.get(field) == value for field, value in filters.items())


class InMemoryMixtapeStore:
    """Dict-backed store, used by tests and the "memory" backend."""

    def __init__(self, documents: Optional[Dict[str, Record]] = None):
        self._documents: Dict[str, Record] = copy.deepcopy(documents or {})

    def get(self, mixtape_id: str) -> Optional[Record]:
        document = self._documents.get(mixtape_id)
        if document is None:
            return None
        return _with_id(mixtape_id, document)

    def query(self, filters: Dict[str, Any]) -> List[Record]:
        return [
            _with_id(doc_id, document)
            for doc_id, document in self._documents.items()
            if _matches(document, filters)
        ]

    def add(self, record: Record) -> str:
        mixtape_id = uuid4().hex
        self._documents[mixtape_id] = copy.deepcopy(_strip_id(record))
        return mixtape_id

    def update(self, mixtape_id: str, partial: Record) -> None:
        document = self._documents.get(mixtape_id)
        if document is None:
            raise NotFoundError("Mixtape not found")
        document.update(copy.deepcopy(_strip_id(partial)))

    def delete(self, mixtape_id: str) -> None:
        self._documents.pop(mixtape_id, None)


class JsonFileMixtapeStore:
    """
    Store persisting the whole collection as one JSON object on disk:

      {
        "<id>": { "title": "...", "createdBy": "...", ... },
        ...
      }

    Writes go through a temporary file in the same directory followed by
    os.replace, so readers see either the previous or the new collection,
    never a truncated file. Mutations hold a per-instance lock across the
    load and the save, so concurrent writes to different mixtapes are all
    kept; overlapping updates to one mixtape are last-write-wins.

    A file that cannot be decoded is never overwritten: reads and writes
    fail with UpstreamError until it is repaired.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, Record]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            log_error(f"Mixtape store file {self.path} is corrupted.")
            raise UpstreamError("Mixtape store is corrupted") from exc
        except OSError as exc:
            raise UpstreamError("Failed to read mixtape store") from exc

        if not isinstance(data, dict):
            log_error(f"Mixtape store file {self.path} has invalid structure.")
            raise UpstreamError("Mixtape store is corrupted")
        return {k: v for k, v in data.items() if isinstance(v, dict)}

    def _save(self, documents: Dict[str, Record]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path_str = tempfile.mkstemp(
            dir=str(self.path.parent),
            prefix=self.path.name,
            suffix=".tmp",
        )
        tmp_path = Path(tmp_path_str)

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(documents, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise UpstreamError("Failed to write mixtape store") from exc

    def get(self, mixtape_id: str) -> Optional[Record]:
        document = self._load().get(mixtape_id)
        if document is None:
            return None
        return _with_id(mixtape_id, document)

    def query(self, filters: Dict[str, Any]) -> List[Record]:
        return [
            _with_id(doc_id, document)
            for doc_id, document in self._load().items()
            if _matches(document, filters)
        ]

    def add(self, record: Record) -> str:
        mixtape_id = uuid4().hex
        with self._lock:
            documents = self._load()
            documents[mixtape_id] = _strip_id(record)
            self._save(documents)
        return mixtape_id

    def update(self, mixtape_id: str, partial: Record) -> None:
        with self._lock:
            documents = self._load()
            if mixtape_id not in documents:
                raise NotFoundError("Mixtape not found")
            documents[mixtape_id].update(_strip_id(partial))
            self._save(documents)

    def delete(self, mixtape_id: str) -> None:
        with self._lock:
            documents = self._load()
            if documents.pop(mixtape_id, None) is not None:
                self._save(documents)
