from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FavPaths:
    home: Path
    logs_dir: Path

    @property
    def config_path(self) -> Path:
        return self.home / "config.json"


def resolve_fav_home(environ: dict[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ

    raw = (env.get("FAV_HOME") or "").strip()
    if raw:
        candidate = Path(raw).expanduser()
        # Relative overrides hang off the user's home, never the CWD.
        if not candidate.is_absolute():
            candidate = (Path.home() / candidate).resolve()
        else:
            candidate = candidate.resolve()
        return candidate

    return (Path.home() / ".config" / "fav").resolve()


def ensure_fav_layout(home: Path) -> FavPaths:
    home.mkdir(parents=True, exist_ok=True)

    logs_dir = home / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    return FavPaths(home=home, logs_dir=logs_dir)
