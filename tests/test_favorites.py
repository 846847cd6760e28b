from __future__ import annotations

import pytest

from fav_core.db.aliases import AliasRepository
from fav_core.db.favorites import FavoriteRepository
from fav_core.db.store import Store
from fav_core.errors import DuplicatePath, NotFound


def test_add_then_list_contains_path_once(store: Store) -> None:
    favorites = FavoriteRepository(store)

    favorite_id = favorites.add("/home/u/docs")

    assert isinstance(favorite_id, int)
    assert favorites.list().count("/home/u/docs") == 1


def test_add_duplicate_path_fails(store: Store) -> None:
    favorites = FavoriteRepository(store)
    favorites.add("/a")

    with pytest.raises(DuplicatePath):
        favorites.add("/a")

    assert favorites.list() == ["/a"]


def test_add_equivalent_spelling_is_a_duplicate(store: Store) -> None:
    favorites = FavoriteRepository(store)
    favorites.add("/srv/data")

    with pytest.raises(DuplicatePath) as excinfo:
        favorites.add("/srv/./other/../data/")

    assert excinfo.value.path == "/srv/data"


def test_ids_are_monotonic_and_list_keeps_insertion_order(store: Store) -> None:
    favorites = FavoriteRepository(store)

    ids = [favorites.add(p) for p in ("/z", "/a", "/m")]

    assert ids == sorted(ids)
    assert len(set(ids)) == 3
    assert favorites.list() == ["/z", "/a", "/m"]


def test_ids_are_not_reused_after_delete(store: Store) -> None:
    favorites = FavoriteRepository(store)
    first = favorites.add("/one")
    favorites.remove("/one")

    second = favorites.add("/two")

    assert second > first


def test_point_lookups(store: Store) -> None:
    favorites = FavoriteRepository(store)
    favorite_id = favorites.add("/home/u/music")

    by_id = favorites.get_by_id(favorite_id)
    by_path = favorites.get_by_path("/home/u/music/")

    assert by_id is not None
    assert by_id == by_path
    assert by_id.path == "/home/u/music"
    assert by_id.created_at.endswith("Z")
    assert favorites.get_by_id(favorite_id + 100) is None
    assert favorites.get_by_path("/nowhere") is None


def test_remove_missing_path_fails(store: Store) -> None:
    with pytest.raises(NotFound):
        FavoriteRepository(store).remove("/missing")


def test_remove_cascades_to_aliases(store: Store) -> None:
    favorites = FavoriteRepository(store)
    aliases = AliasRepository(store, favorites)
    keep = favorites.add("/keep")
    drop = favorites.add("/drop")
    aliases.attach(keep, ["k"])
    aliases.attach(drop, ["d1", "d2"])

    favorites.remove("/drop")

    assert favorites.list() == ["/keep"]
    assert aliases.list_names() == ["k"]
    with store.transaction() as conn:
        orphans = conn.execute(
            """
            SELECT COUNT(1) FROM aliases
            WHERE favorite_id NOT IN (SELECT id FROM favorites);
            """.strip()
        ).fetchone()[0]
    assert orphans == 0


def test_list_details_groups_aliases_per_favorite(store: Store) -> None:
    favorites = FavoriteRepository(store)
    aliases = AliasRepository(store, favorites)
    docs = favorites.add("/docs")
    favorites.add("/bare")
    aliases.attach(docs, ["d", "documents"])

    details = favorites.list_details()

    assert [d.path for d in details] == ["/docs", "/bare"]
    assert details[0].aliases == ["d", "documents"]
    assert details[1].aliases == []
    assert all(d.created_at for d in details)
