from __future__ import annotations


class FavError(Exception):
    """Base class for every error raised by fav_core."""


class InvalidPath(FavError, ValueError):
    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"Invalid path {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


class InvalidAlias(FavError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid alias name {name!r}")
        self.name = name


class DuplicatePath(FavError):
    def __init__(self, path: str) -> None:
        super().__init__(f"{path} is already a favorite")
        self.path = path


class DuplicateAlias(FavError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Alias {name!r} already exists")
        self.name = name


class NotFound(FavError):
    def __init__(self, kind: str, value: object) -> None:
        super().__init__(f"{value} was not found")
        self.kind = kind
        self.value = value


class FavoriteNotFound(NotFound):
    def __init__(self, favorite_id: int) -> None:
        super().__init__("favorite", favorite_id)
        self.favorite_id = favorite_id


class StorageInit(FavError):
    """The database file could not be opened or created."""


class SchemaMigration(FavError):
    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"Migration {name} failed: {message}")
        self.name = name


class ConsistencyViolation(FavError):
    """An alias references a favorite that no longer exists.

    Foreign keys are enforced with ON DELETE CASCADE, so seeing this means the
    database was modified outside of fav_core (or with foreign keys disabled).
    """
