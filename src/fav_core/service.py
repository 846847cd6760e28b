from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from fav_core.db.aliases import AliasRepository
from fav_core.db.favorites import FavoriteDetail, FavoriteRepository
from fav_core.db.store import Store
from fav_core.errors import InvalidPath, NotFound
from fav_core.paths import normalize_path
from fav_core.resolve import ByName, ResolutionService

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    ok: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Resolution:
    name: str
    path: str | None


def _unique(names: Iterable[str]) -> list[str]:
    # Keeps first-seen order.
    return list(dict.fromkeys(names))


class FavService:
    """Operations the command line calls into.

    Paths are normalized on the way in; names are passed through untouched.
    """

    def __init__(self, store: Store) -> None:
        self.store = store
        self.favorites = FavoriteRepository(store)
        self.aliases = AliasRepository(store, self.favorites)
        self.resolver = ResolutionService(store, self.favorites, self.aliases)

    def add_favorite(self, path: str, names: Iterable[str] = ()) -> str:
        """Add `path` and its initial aliases in a single transaction."""

        canonical = normalize_path(path)
        batch = _unique(names)

        with self.store.transaction() as conn:
            favorite_id = self.favorites.add(canonical, conn=conn)
            if batch:
                self.aliases.attach(favorite_id, batch, conn=conn)

        logger.info("Added %s with %d alias(es)", canonical, len(batch))
        return canonical

    def get_alias_names(self, path: str) -> list[str]:
        return self.resolver.alias_names_for_path(normalize_path(path))

    def get_path(self, name: str) -> str | None:
        return self.resolver.resolve(ByName(name))

    def set_aliases(self, path: str, names: Iterable[str]) -> None:
        canonical = normalize_path(path)
        batch = _unique(names)
        if not batch:
            return

        with self.store.transaction() as conn:
            favorite = self.favorites.get_by_path(canonical, conn=conn)
            if favorite is None:
                raise NotFound("path", canonical)
            self.aliases.attach(favorite.id, batch, conn=conn)

    def remove_aliases(self, names: Iterable[str]) -> BatchResult:
        result = BatchResult()
        for name in names:
            try:
                self.aliases.remove_by_name(name)
            except NotFound:
                result.missing.append(name)
                continue
            result.ok.append(name)
        return result

    def remove_paths(self, paths: Iterable[str]) -> BatchResult:
        result = BatchResult()
        for path in paths:
            try:
                canonical = normalize_path(path)
            except InvalidPath:
                result.invalid.append(path)
                continue
            try:
                self.favorites.remove(canonical)
            except NotFound:
                result.missing.append(canonical)
                continue
            result.ok.append(canonical)
        return result

    def resolve(self, names: Iterable[str]) -> list[Resolution]:
        return [Resolution(name=name, path=self.get_path(name)) for name in names]

    def list_paths(self) -> list[str]:
        return self.favorites.list()

    def list_aliases(self) -> list[str]:
        return self.aliases.list_names()

    def list_details(self) -> list[FavoriteDetail]:
        return self.favorites.list_details()
