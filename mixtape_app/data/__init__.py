"""Public façade for the mixtape_app.data package.

This module exposes the mixtape store contract, its local implementations
and the repository. The Firestore store lives in mixtape_app.data.firestore
and is imported on demand so that firebase-admin is only loaded when that
backend is configured.
"""

from .repositories import MixtapeRepository, mixtape_to_document
from .stores import InMemoryMixtapeStore, JsonFileMixtapeStore, MixtapeStore

__all__ = [
    "MixtapeStore",
    "InMemoryMixtapeStore",
    "JsonFileMixtapeStore",
    "MixtapeRepository",
    "mixtape_to_document",
]
