from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import List, Optional


class SQLiteRecordStore:
    """SQLite persistence for the key-value record namespace."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(self.path)
        self.conn.row_factory = sqlite3.Row
        self._init_schema()

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def _init_schema(self) -> None:
        self.conn.execute(
            """
            CREATE TABLE IF NOT EXISTS records (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                seq INTEGER NOT NULL
            )
            """
        )
        self.conn.execute("CREATE INDEX IF NOT EXISTS idx_records_seq ON records(seq)")
        self.conn.commit()

    def get(self, key: str) -> Optional[str]:
        row = self.conn.execute("SELECT value FROM records WHERE key=?", (key,)).fetchone()
        if not row:
            return None
        return str(row["value"])

    def put(self, key: str, value: str) -> None:
        # seq is assigned on first insert only, so overwrites keep their listing position.
        self.conn.execute(
            """
            INSERT INTO records (key, value, seq)
            VALUES (?, ?, (SELECT COALESCE(MAX(seq), 0) + 1 FROM records))
            ON CONFLICT(key) DO UPDATE SET value=excluded.value
            """,
            (key, value),
        )
        self.conn.commit()

    def delete(self, key: str) -> None:
        self.conn.execute("DELETE FROM records WHERE key=?", (key,))
        self.conn.commit()

    def list(self, prefix: str) -> List[str]:
        # substr comparison keeps '%' and '_' in prefixes literal.
        rows = self.conn.execute(
            "SELECT key FROM records WHERE substr(key, 1, ?) = ? ORDER BY seq",
            (len(prefix), prefix),
        ).fetchall()
        return [str(r["key"]) for r in rows]
