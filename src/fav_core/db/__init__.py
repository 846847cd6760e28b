from __future__ import annotations

from pathlib import Path

from fav_core.config import FavConfig
from fav_core.home import FavPaths

DEFAULT_DB_FILENAME = "fav.db"


def resolve_db_path(paths: FavPaths, config: FavConfig | None = None) -> Path:
    """Resolve the fav SQLite database path.

    Defaults to ${FAV_HOME}/fav.db; `paths.db_path` in config.json overrides it.
    """

    raw = config.paths.db_path if config is not None else None
    if raw is None or not raw.strip():
        return paths.home / DEFAULT_DB_FILENAME

    candidate = Path(raw).expanduser()
    if not candidate.is_absolute():
        candidate = paths.home / candidate
    return candidate.resolve()
