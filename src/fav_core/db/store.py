from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from fav_core.db.migrate import applied_migrations, apply_migrations
from fav_core.errors import StorageInit


@dataclass(frozen=True)
class Store:
    """Handle on the fav SQLite database.

    The handle only carries the location; every operation opens its own
    connection through `transaction()` and closes it when done.
    """

    db_path: Path

    @classmethod
    def init(cls, location: str | Path) -> Store:
        db_path = Path(location).expanduser()
        if db_path.is_dir():
            raise StorageInit(f"Database location {db_path} is a directory")
        apply_migrations(db_path)
        return cls(db_path=db_path)

    def connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    @contextmanager
    def transaction(self, conn: sqlite3.Connection | None = None) -> Iterator[sqlite3.Connection]:
        """Run a block as one atomic unit.

        When `conn` is given the block joins the caller's transaction and the
        caller stays responsible for committing it.
        """

        if conn is not None:
            yield conn
            return

        own = self.connect()
        try:
            with own:
                yield own
        finally:
            own.close()

    def schema_version(self) -> list[str]:
        with self.transaction() as conn:
            return applied_migrations(conn)
