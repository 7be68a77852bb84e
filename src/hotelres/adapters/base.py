from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable

SNAPSHOT_FORMAT = "hotelres-snapshot"
SNAPSHOT_VERSION = 1


@runtime_checkable
class SnapshotAdapter(Protocol):
    """Storage for one whole-state snapshot. Failures surface as DatabaseError."""

    def exists(self) -> bool: ...

    def read(self) -> Dict[str, Any]: ...

    def write(self, snapshot: Dict[str, Any]) -> None: ...

    def describe(self) -> str: ...
