from __future__ import annotations

import logging
import os
import sqlite3
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from hotelres.adapters.base import SNAPSHOT_FORMAT
from hotelres.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class SQLiteSnapshotAdapter:
    """Stores the snapshot in a SQLite file. Each write replaces every row."""

    def __init__(self, db_url: str):
        # Format: sqlite:///path
        if db_url.startswith("sqlite:///"):
            self.db_path = db_url.replace("sqlite:///", "", 1)
        else:
            self.db_path = db_url
        logger.debug(f"SQLiteSnapshotAdapter using {self.db_path}")

    def describe(self) -> str:
        return str(Path(self.db_path).resolve())

    @contextmanager
    def _conn(self, path: Optional[str] = None) -> Iterator[sqlite3.Connection]:
        path = path or self.db_path
        try:
            conn = sqlite3.connect(path)
        except sqlite3.Error as e:
            logger.error(f"Database connection error: {e}")
            raise DatabaseError(f"Could not open {path}: {e}") from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    # ------------------------------------
    # Lifecycle
    # ------------------------------------
    def _create_tables(self, cur: sqlite3.Cursor) -> None:
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS meta (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS rooms (
                position INTEGER NOT NULL,
                id INTEGER PRIMARY KEY,
                room_type TEXT NOT NULL,
                price_per_night REAL NOT NULL
            )
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS bookings (
                position INTEGER NOT NULL,
                booking_id TEXT PRIMARY KEY,
                room_id INTEGER NOT NULL,
                guest_name TEXT NOT NULL,
                check_in TEXT NOT NULL,
                check_out TEXT NOT NULL,
                amount_paid REAL NOT NULL,
                FOREIGN KEY(room_id) REFERENCES rooms(id)
            )
            """
        )

    def exists(self) -> bool:
        if not Path(self.db_path).is_file():
            return False
        try:
            with self._conn() as conn:
                row = conn.execute(
                    "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'meta'"
                ).fetchone()
                return row is not None
        except (sqlite3.Error, DatabaseError) as e:
            # Unreadable file still counts as present so the load path reports it.
            logger.warning(f"Could not inspect {self.db_path}: {e}")
            return True

    # ------------------------------------
    # Snapshot
    # ------------------------------------
    def read(self) -> Dict[str, Any]:
        try:
            with self._conn() as conn:
                meta = {r["key"]: r["value"] for r in conn.execute("SELECT key, value FROM meta")}
                rooms = [
                    {k: r[k] for k in ("id", "room_type", "price_per_night")}
                    for r in conn.execute("SELECT * FROM rooms ORDER BY position")
                ]
                bookings = [
                    {k: r[k] for k in ("booking_id", "room_id", "guest_name", "check_in", "check_out", "amount_paid")}
                    for r in conn.execute("SELECT * FROM bookings ORDER BY position")
                ]
        except sqlite3.Error as e:
            logger.error(f"SQLite error while reading snapshot: {e}")
            raise DatabaseError(f"Could not read snapshot from {self.db_path}: {e}") from e

        try:
            version = int(meta["version"])
        except (KeyError, ValueError) as e:
            raise DatabaseError(f"Snapshot in {self.db_path} has no valid version") from e

        return {
            "format": meta.get("format", SNAPSHOT_FORMAT),
            "version": version,
            "rooms": rooms,
            "bookings": bookings,
        }

    def _fill(self, conn: sqlite3.Connection, snapshot: Dict[str, Any]) -> None:
        with conn:
            cur = conn.cursor()
            self._create_tables(cur)
            cur.executemany(
                "INSERT INTO meta (key, value) VALUES (?, ?)",
                [("format", str(snapshot["format"])), ("version", str(snapshot["version"]))],
            )
            cur.executemany(
                "INSERT INTO rooms (position, id, room_type, price_per_night) VALUES (?, ?, ?, ?)",
                [
                    (pos, r["id"], r["room_type"], r["price_per_night"])
                    for pos, r in enumerate(snapshot.get("rooms", []))
                ],
            )
            cur.executemany(
                """
                INSERT INTO bookings (position, booking_id, room_id, guest_name, check_in, check_out, amount_paid)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    (pos, b["booking_id"], b["room_id"], b["guest_name"], b["check_in"], b["check_out"], b["amount_paid"])
                    for pos, b in enumerate(snapshot.get("bookings", []))
                ],
            )

    def write(self, snapshot: Dict[str, Any]) -> None:
        """Builds a fresh database next to the target, then replaces it.

        The previous file is never opened, so an unreadable one gets overwritten.
        """
        target = Path(self.db_path)
        tmp_name = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=str(target.parent))
            os.close(fd)
            with self._conn(tmp_name) as conn:
                self._fill(conn, snapshot)
            os.replace(tmp_name, target)
        except (sqlite3.Error, OSError, DatabaseError) as e:
            logger.error(f"SQLite error while writing snapshot: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise DatabaseError(f"Could not write snapshot to {self.db_path}: {e}") from e
