from __future__ import annotations

from dataclasses import dataclass

from fav_core.db.aliases import AliasRepository, AliasRow
from fav_core.db.favorites import FavoriteRepository
from fav_core.db.store import Store
from fav_core.errors import ConsistencyViolation


@dataclass(frozen=True)
class ByName:
    name: str


@dataclass(frozen=True)
class ById:
    alias_id: int


@dataclass(frozen=True)
class ByRecord:
    alias: AliasRow


AliasReference = ByName | ById | ByRecord


class ResolutionService:
    """Map alias references to favorite paths, and paths back to alias names."""

    def __init__(
        self,
        store: Store,
        favorites: FavoriteRepository,
        aliases: AliasRepository,
    ) -> None:
        self._store = store
        self._favorites = favorites
        self._aliases = aliases

    def resolve(self, reference: AliasReference) -> str | None:
        with self._store.transaction() as conn:
            if isinstance(reference, ByRecord):
                alias: AliasRow | None = reference.alias
            elif isinstance(reference, ByName):
                alias = self._aliases.find_by_name(reference.name, conn=conn)
            elif isinstance(reference, ById):
                alias = self._aliases.find_by_id(reference.alias_id, conn=conn)
            else:
                raise TypeError(f"Unsupported alias reference: {reference!r}")

            if alias is None:
                return None

            favorite = self._favorites.get_by_id(alias.favorite_id, conn=conn)

            # A record fetched earlier may have been cascaded away with its
            # favorite; that is a stale reference, not corruption.
            if favorite is None and isinstance(reference, ByRecord):
                if self._aliases.find_by_id(alias.id, conn=conn) is None:
                    return None

        if favorite is None:
            raise ConsistencyViolation(
                f"Alias {alias.name!r} (id={alias.id}) points at missing favorite "
                f"{alias.favorite_id}"
            )
        return favorite.path

    def alias_names_for_path(self, path: str) -> list[str]:
        with self._store.transaction() as conn:
            favorite = self._favorites.get_by_path(path, conn=conn)
            if favorite is None:
                return []
            return self._aliases.names_for_favorite(favorite.id, conn=conn)
