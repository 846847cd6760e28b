from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from fav_core.db.migrations import MIGRATIONS
from fav_core.errors import SchemaMigration, StorageInit

logger = logging.getLogger(__name__)


def ensure_db_parent_dir(db_path: Path) -> None:
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageInit(f"Cannot create {db_path.parent}: {e}") from e


def applied_migrations(conn: sqlite3.Connection) -> list[str]:
    return [
        row[0]
        for row in conn.execute(
            "SELECT name FROM schema_migrations ORDER BY name ASC;"
        ).fetchall()
    ]


def apply_migrations(db_path: Path) -> list[str]:
    """Apply all known migrations to a SQLite DB.

    - Safe to run multiple times.
    - Works from blank DB -> latest.

    Returns the names of the migrations applied by this call.
    """

    ensure_db_parent_dir(db_path)

    try:
        conn = sqlite3.connect(db_path)
    except sqlite3.Error as e:
        raise StorageInit(f"Cannot open database {db_path}: {e}") from e

    try:
        conn.execute("PRAGMA foreign_keys = ON;")
        conn.execute(
            "CREATE TABLE IF NOT EXISTS schema_migrations ("
            " name TEXT PRIMARY KEY,"
            " applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))"
            ");"
        )
        conn.commit()
    except sqlite3.Error as e:
        conn.close()
        raise StorageInit(f"Cannot open database {db_path}: {e}") from e

    newly_applied: list[str] = []
    try:
        applied = set(applied_migrations(conn))

        for name, sql in MIGRATIONS:
            if name in applied:
                continue

            try:
                with conn:
                    conn.executescript(sql)
                    conn.execute("INSERT INTO schema_migrations (name) VALUES (?);", (name,))
            except sqlite3.Error as e:
                raise SchemaMigration(name, str(e)) from e

            logger.info("Applied migration %s to %s", name, db_path)
            newly_applied.append(name)
    finally:
        conn.close()

    return newly_applied
