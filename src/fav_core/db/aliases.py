from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterable
from dataclasses import dataclass

from fav_core.db.favorites import FavoriteRepository
from fav_core.db.store import Store
from fav_core.errors import DuplicateAlias, FavoriteNotFound, InvalidAlias, NotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AliasRow:
    id: int
    favorite_id: int
    name: str
    created_at: str


def _alias_from_db_row(row: sqlite3.Row) -> AliasRow:
    return AliasRow(
        id=int(row["id"]),
        favorite_id=int(row["favorite_id"]),
        name=row["name"],
        created_at=row["created_at"],
    )


class AliasRepository:
    def __init__(self, store: Store, favorites: FavoriteRepository) -> None:
        self._store = store
        self._favorites = favorites

    def attach(
        self,
        favorite_id: int,
        names: Iterable[str],
        *,
        conn: sqlite3.Connection | None = None,
    ) -> None:
        """Bind every name in `names` to the favorite.

        All or nothing: the first duplicate, empty name or missing favorite
        aborts the batch and rolls back the names inserted before it.
        """

        batch = list(names)
        for name in batch:
            if not name or not name.strip():
                raise InvalidAlias(name)

        with self._store.transaction(conn) as c:
            if self._favorites.get_by_id(favorite_id, conn=c) is None:
                raise FavoriteNotFound(favorite_id)

            for name in batch:
                try:
                    c.execute(
                        "INSERT INTO aliases (favorite_id, name) VALUES (?, ?);",
                        (favorite_id, name),
                    )
                except sqlite3.IntegrityError as e:
                    raise DuplicateAlias(name) from e

        logger.debug("Attached %d alias(es) to favorite %s", len(batch), favorite_id)

    def find_by_name(
        self, name: str, *, conn: sqlite3.Connection | None = None
    ) -> AliasRow | None:
        with self._store.transaction(conn) as c:
            row = c.execute(
                "SELECT id, favorite_id, name, created_at FROM aliases WHERE name = ?;",
                (name,),
            ).fetchone()

        return _alias_from_db_row(row) if row is not None else None

    def find_by_id(
        self, alias_id: int, *, conn: sqlite3.Connection | None = None
    ) -> AliasRow | None:
        with self._store.transaction(conn) as c:
            row = c.execute(
                "SELECT id, favorite_id, name, created_at FROM aliases WHERE id = ?;",
                (alias_id,),
            ).fetchone()

        return _alias_from_db_row(row) if row is not None else None

    def names_for_favorite(
        self, favorite_id: int, *, conn: sqlite3.Connection | None = None
    ) -> list[str]:
        with self._store.transaction(conn) as c:
            rows = c.execute(
                "SELECT name FROM aliases WHERE favorite_id = ? ORDER BY id ASC;",
                (favorite_id,),
            ).fetchall()
        return [r["name"] for r in rows]

    def list_names(self) -> list[str]:
        with self._store.transaction() as c:
            rows = c.execute("SELECT name FROM aliases ORDER BY id ASC;").fetchall()
        return [r["name"] for r in rows]

    def remove_by_name(self, name: str, *, conn: sqlite3.Connection | None = None) -> None:
        with self._store.transaction(conn) as c:
            cur = c.execute("DELETE FROM aliases WHERE name = ?;", (name,))

        if cur.rowcount == 0:
            raise NotFound("alias", name)
        logger.debug("Removed alias %s", name)
