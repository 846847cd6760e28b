from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass

from fav_core.db.store import Store
from fav_core.errors import DuplicatePath, NotFound
from fav_core.paths import normalize_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FavoriteRow:
    id: int
    path: str
    created_at: str


@dataclass(frozen=True)
class FavoriteDetail:
    path: str
    aliases: list[str]
    created_at: str


def _favorite_from_db_row(row: sqlite3.Row) -> FavoriteRow:
    return FavoriteRow(
        id=int(row["id"]),
        path=row["path"],
        created_at=row["created_at"],
    )


class FavoriteRepository:
    """Favorites table access.

    Every path argument goes through `normalize_path`, so callers may pass
    either raw user input or an already canonical string.
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    def add(self, path: str, *, conn: sqlite3.Connection | None = None) -> int:
        canonical = normalize_path(path)

        with self._store.transaction(conn) as c:
            try:
                cur = c.execute("INSERT INTO favorites (path) VALUES (?);", (canonical,))
            except sqlite3.IntegrityError as e:
                raise DuplicatePath(canonical) from e

        favorite_id = cur.lastrowid
        if favorite_id is None:
            raise RuntimeError("Failed to read favorite id after insert")
        logger.debug("Added favorite %s (id=%s)", canonical, favorite_id)
        return int(favorite_id)

    def get_by_id(
        self, favorite_id: int, *, conn: sqlite3.Connection | None = None
    ) -> FavoriteRow | None:
        with self._store.transaction(conn) as c:
            row = c.execute(
                "SELECT id, path, created_at FROM favorites WHERE id = ?;",
                (favorite_id,),
            ).fetchone()

        return _favorite_from_db_row(row) if row is not None else None

    def get_by_path(
        self, path: str, *, conn: sqlite3.Connection | None = None
    ) -> FavoriteRow | None:
        canonical = normalize_path(path)

        with self._store.transaction(conn) as c:
            row = c.execute(
                "SELECT id, path, created_at FROM favorites WHERE path = ?;",
                (canonical,),
            ).fetchone()

        return _favorite_from_db_row(row) if row is not None else None

    def list(self) -> list[str]:
        with self._store.transaction() as c:
            rows = c.execute("SELECT path FROM favorites ORDER BY id ASC;").fetchall()
        return [r["path"] for r in rows]

    def list_details(self) -> list[FavoriteDetail]:
        with self._store.transaction() as c:
            rows = c.execute(
                """
                SELECT f.id, f.path, f.created_at, a.name
                FROM favorites f
                LEFT JOIN aliases a ON a.favorite_id = f.id
                ORDER BY f.id ASC, a.id ASC;
                """.strip()
            ).fetchall()

        details: dict[int, FavoriteDetail] = {}
        for r in rows:
            detail = details.get(r["id"])
            if detail is None:
                detail = FavoriteDetail(path=r["path"], aliases=[], created_at=r["created_at"])
                details[r["id"]] = detail
            if r["name"] is not None:
                detail.aliases.append(r["name"])
        return list(details.values())

    def remove(self, path: str, *, conn: sqlite3.Connection | None = None) -> None:
        """Delete a favorite; its aliases go with it (ON DELETE CASCADE)."""

        canonical = normalize_path(path)

        with self._store.transaction(conn) as c:
            cur = c.execute("DELETE FROM favorites WHERE path = ?;", (canonical,))

        if cur.rowcount == 0:
            raise NotFound("path", canonical)
        logger.debug("Removed favorite %s", canonical)
