"""Persistence for the job board collections."""

from .repository import JobBoardRepository
from .store import (
    APPLICATIONS_KEY,
    COLLECTION_KEYS,
    INQUIRIES_KEY,
    JOBS_KEY,
    CorruptStoreDataError,
    KeyValueStore,
    StoreError,
    UnknownCollectionError,
)

__all__ = [
    "APPLICATIONS_KEY",
    "COLLECTION_KEYS",
    "INQUIRIES_KEY",
    "JOBS_KEY",
    "CorruptStoreDataError",
    "JobBoardRepository",
    "KeyValueStore",
    "StoreError",
    "UnknownCollectionError",
]
