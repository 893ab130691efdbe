"""SQLite-backed configuration store."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from agreedisclaimer.storage.schema import SCHEMA


class SqliteConfigStore:
    """Key/value configuration in a SQLite file.

    Each call opens its own connection, so values written by another
    process are seen on the next read.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Open a connection whose statements form one transaction.

        Commits when the block exits normally and rolls back when it raises.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def initialize(self) -> None:
        """Create the appconfig table on first use; existing values are kept."""
        with self.connection() as conn:
            conn.executescript(SCHEMA)

    def get_value(
        self, namespace: str, key: str, default: Optional[str] = None
    ) -> Optional[str]:
        """Retrieve a value, or ``default`` if the key is not stored."""
        with self.connection() as conn:
            row = conn.execute(
                "SELECT configvalue FROM appconfig WHERE appid = ? AND configkey = ?",
                (namespace, key),
            ).fetchone()
            return row["configvalue"] if row else default

    def set_value(self, namespace: str, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        with self.connection() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO appconfig (appid, configkey, configvalue)
                   VALUES (?, ?, ?)""",
                (namespace, key, value),
            )

    def list_values(self, namespace: str) -> dict[str, str]:
        """Return all stored values of a namespace."""
        with self.connection() as conn:
            cursor = conn.execute(
                """SELECT configkey, configvalue FROM appconfig
                   WHERE appid = ? ORDER BY configkey""",
                (namespace,),
            )
            return {row["configkey"]: row["configvalue"] for row in cursor}
