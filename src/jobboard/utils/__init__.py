"""Small helpers shared by the data-access layer."""

import uuid
from datetime import datetime, timezone


def generate_id() -> str:
    """Collision-free record id (random UUID4, hex form)."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
