"""Key-value store for the job board collections.

Each collection is kept as one JSON document under its own key in an SQLite
table, mirroring a browser-local key-value store.
"""

import json
import os
from typing import Any, Dict, List, Optional

import aiosqlite

from ..errors import JobBoardError
from ..logging_config import get_structured_logger
from .fixtures import initial_job_records

logger = get_structured_logger(__name__)

JOBS_KEY = "jobs"
APPLICATIONS_KEY = "employeeApplications"
INQUIRIES_KEY = "employerInquiries"

COLLECTION_KEYS = (JOBS_KEY, APPLICATIONS_KEY, INQUIRIES_KEY)


class StoreError(JobBoardError):
    """Base exception for store operations."""

    pass


class CorruptStoreDataError(StoreError):
    """Raised when a stored collection cannot be decoded or fails validation."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Corrupt data under store key {key!r}: {reason}")


class UnknownCollectionError(StoreError):
    """Raised for a key that is not one of the known collections."""

    pass


class StoreNotInitializedError(StoreError):
    """Raised when the store is used before ``ainit()`` or after ``close()``."""

    pass


class KeyValueStore:
    """Holds the three job board collections as JSON text in SQLite."""

    def __init__(self, db_path: str):
        """Initialize the store handle.

        Args:
            db_path: Path to the SQLite file, or ``:memory:``
        """
        self.db_path = db_path
        self._conn: Optional[aiosqlite.Connection] = None

    async def ainit(self) -> "KeyValueStore":
        """
        Open the connection and create the backing table, so callers can do:

            store = await KeyValueStore(path).ainit()
        """
        if self._conn is not None:
            return self

        if self.db_path != ":memory:":
            db_dirname = os.path.dirname(self.db_path)
            if db_dirname:
                os.makedirs(db_dirname, exist_ok=True)

        self._conn = await aiosqlite.connect(self.db_path)
        await self._conn.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
            )
        """)
        await self._conn.commit()
        logger.info("store opened", db_path=self.db_path)
        return self

    async def close(self) -> None:
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.info("store closed", db_path=self.db_path)

    def _connection(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise StoreNotInitializedError(f"Store at {self.db_path} is not open")
        return self._conn

    @staticmethod
    def _check_key(key: str) -> None:
        if key not in COLLECTION_KEYS:
            raise UnknownCollectionError(f"Unknown collection key: {key!r}")

    async def _get_raw(self, key: str) -> Optional[str]:
        async with self._connection().execute(
            "SELECT value FROM kv_store WHERE key = ?", (key,)
        ) as cursor:
            row = await cursor.fetchone()
        return row[0] if row else None

    async def has_key(self, key: str) -> bool:
        """True if ``key`` holds a non-empty value."""
        self._check_key(key)
        return bool(await self._get_raw(key))

    async def load(self, key: str) -> List[Dict[str, Any]]:
        """Load a collection.

        Args:
            key: One of the collection keys

        Returns:
            The decoded records; an empty list if the key was never written.

        Raises:
            CorruptStoreDataError: If the stored text is not a JSON array of objects
        """
        self._check_key(key)
        raw = await self._get_raw(key)
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("undecodable collection", key=key, error=str(e))
            raise CorruptStoreDataError(key, f"invalid JSON ({e.msg} at position {e.pos})") from e

        if not isinstance(data, list):
            raise CorruptStoreDataError(key, f"expected a JSON array, got {type(data).__name__}")
        for index, record in enumerate(data):
            if not isinstance(record, dict):
                raise CorruptStoreDataError(key, f"record {index} is not a JSON object")
        return data

    async def save(self, key: str, records: List[Dict[str, Any]]) -> None:
        """Serialize ``records`` and overwrite ``key``."""
        self._check_key(key)
        await self._put_raw(key, json.dumps(records))
        logger.debug("collection saved", key=key, count=len(records))

    async def _put_raw(self, key: str, value: str) -> None:
        conn = self._connection()
        await conn.execute(
            """
            INSERT INTO kv_store (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                                           updated_at = CURRENT_TIMESTAMP
            """,
            (key, value),
        )
        await conn.commit()

    async def seed(self) -> List[str]:
        """Write fixture data under every key that has never been written.

        Returns:
            The keys that were seeded.
        """
        seeded = []
        for key in COLLECTION_KEYS:
            if await self.has_key(key):
                continue
            records = initial_job_records() if key == JOBS_KEY else []
            await self.save(key, records)
            seeded.append(key)

        if seeded:
            logger.info("store seeded", keys=seeded)
        return seeded

    async def dump(self) -> Dict[str, List[Dict[str, Any]]]:
        """Return every collection, keyed by its store key."""
        return {key: await self.load(key) for key in COLLECTION_KEYS}

    async def clear(self) -> None:
        conn = self._connection()
        await conn.execute("DELETE FROM kv_store")
        await conn.commit()
        logger.warning("store cleared", db_path=self.db_path)
