from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

from hotelres.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class JsonSnapshotAdapter:
    """Keeps the snapshot as a single JSON document on disk."""

    def __init__(self, path: str):
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path.resolve())

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> Dict[str, Any]:
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError, RecursionError) as e:
            logger.error(f"Could not read snapshot {self.path}: {e}")
            raise DatabaseError(f"Could not read snapshot {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise DatabaseError(f"Snapshot {self.path} does not contain a JSON object")
        return data

    def write(self, snapshot: Dict[str, Any]) -> None:
        """Writes to a temporary file in the same directory, then replaces the target."""
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(self.path.parent))
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(snapshot, fh, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Could not write snapshot {self.path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise DatabaseError(f"Could not write snapshot {self.path}: {e}") from e
