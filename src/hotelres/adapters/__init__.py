from __future__ import annotations

from .base import SNAPSHOT_FORMAT, SNAPSHOT_VERSION, SnapshotAdapter
from .json_adapter import JsonSnapshotAdapter
from .sqlite_adapter import SQLiteSnapshotAdapter

from hotelres.exceptions import AdapterError


def create_adapter(db_url: str) -> SnapshotAdapter:
    """Picks an adapter from the URL scheme: sqlite:///path, json:///path or a bare path."""
    if not db_url:
        raise AdapterError("Database URL is empty")
    if db_url.startswith("sqlite:///"):
        return SQLiteSnapshotAdapter(db_url)
    if db_url.startswith("json:///"):
        return JsonSnapshotAdapter(db_url.replace("json:///", "", 1))
    if "://" in db_url:
        raise AdapterError(f"Unsupported database URL: {db_url}")
    return JsonSnapshotAdapter(db_url)


__all__ = [
    "SNAPSHOT_FORMAT",
    "SNAPSHOT_VERSION",
    "SnapshotAdapter",
    "JsonSnapshotAdapter",
    "SQLiteSnapshotAdapter",
    "create_adapter",
]
