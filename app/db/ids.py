# app/db/ids.py
import uuid
from datetime import datetime, timezone


def new_id() -> str:
    """Opaque row identifier (random UUID4 as 32 hex chars)."""
    return uuid.uuid4().hex


def utc_now_iso() -> str:
    # e.g. 2026-01-01T12:00:00.123456Z, sorts lexically in time order
    return datetime.now(tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
