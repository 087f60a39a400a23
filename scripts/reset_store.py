"""Script to wipe the job board store and reseed the fixture jobs."""

import asyncio
from pathlib import Path

from jobboard.config import settings
from jobboard.db.store import KeyValueStore


async def reset_store(db_path: str) -> None:
    if db_path != ":memory:" and not Path(db_path).exists():
        print(f"Store not found at {db_path}, creating it")

    store = await KeyValueStore(db_path).ainit()
    try:
        await store.clear()
        seeded = await store.seed()
        print(f"Successfully reset store at {db_path} (seeded: {', '.join(seeded)})")
    except Exception as e:
        print(f"Error resetting store: {e}")
        raise
    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(reset_store(settings.store_path))
