from __future__ import annotations

import sqlite3

import pytest

from fav_core.db.aliases import AliasRepository
from fav_core.db.favorites import FavoriteRepository
from fav_core.db.store import Store
from fav_core.errors import ConsistencyViolation
from fav_core.resolve import ById, ByName, ByRecord, ResolutionService


def _service(store: Store) -> tuple[FavoriteRepository, AliasRepository, ResolutionService]:
    favorites = FavoriteRepository(store)
    aliases = AliasRepository(store, favorites)
    return favorites, aliases, ResolutionService(store, favorites, aliases)


def test_resolve_by_name_id_and_record(store: Store) -> None:
    favorites, aliases, resolver = _service(store)
    fid = favorites.add("/home/u/docs")
    aliases.attach(fid, ["d"])
    record = aliases.find_by_name("d")
    assert record is not None

    assert resolver.resolve(ByName("d")) == "/home/u/docs"
    assert resolver.resolve(ById(record.id)) == "/home/u/docs"
    assert resolver.resolve(ByRecord(record)) == "/home/u/docs"


def test_resolve_follows_favorite_id_not_alias_id(store: Store) -> None:
    favorites, aliases, resolver = _service(store)
    first = favorites.add("/first")
    second = favorites.add("/second")
    # The alias gets id 1 while pointing at the second favorite.
    aliases.attach(second, ["s"])
    aliases.attach(first, ["f"])

    assert resolver.resolve(ByName("s")) == "/second"
    assert resolver.resolve(ByName("f")) == "/first"


def test_resolve_unknown_returns_none(store: Store) -> None:
    _, _, resolver = _service(store)
    assert resolver.resolve(ByName("never-inserted")) is None
    assert resolver.resolve(ById(999)) is None


def test_resolve_after_favorite_removed_returns_none(store: Store) -> None:
    favorites, aliases, resolver = _service(store)
    fid = favorites.add("/gone")
    aliases.attach(fid, ["g"])
    stale = aliases.find_by_name("g")
    assert stale is not None

    favorites.remove("/gone")

    assert resolver.resolve(ByName("g")) is None
    assert resolver.resolve(ByRecord(stale)) is None


def test_resolve_reports_dangling_alias(store: Store) -> None:
    favorites, aliases, resolver = _service(store)
    fid = favorites.add("/corrupt")
    aliases.attach(fid, ["c"])

    # Simulate a database edited with foreign keys switched off.
    conn = sqlite3.connect(store.db_path)
    try:
        conn.execute("PRAGMA foreign_keys = OFF;")
        conn.execute("DELETE FROM favorites WHERE id = ?;", (fid,))
        conn.commit()
    finally:
        conn.close()

    with pytest.raises(ConsistencyViolation):
        resolver.resolve(ByName("c"))


def test_resolve_rejects_unknown_reference_type(store: Store) -> None:
    _, _, resolver = _service(store)
    with pytest.raises(TypeError):
        resolver.resolve("d")  # type: ignore[arg-type]


def test_alias_names_for_path(store: Store) -> None:
    favorites, aliases, resolver = _service(store)
    fid = favorites.add("/home/u/docs")
    favorites.add("/home/u/bare")
    aliases.attach(fid, ["d", "docs"])

    assert resolver.alias_names_for_path("/home/u/docs") == ["d", "docs"]
    assert resolver.alias_names_for_path("/home/u/./docs/") == ["d", "docs"]
    assert resolver.alias_names_for_path("/home/u/bare") == []
    assert resolver.alias_names_for_path("/not/a/favorite") == []
