from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from fav_core.home import FavPaths


class PathOverrides(BaseModel):
    db_path: str | None = Field(
        default=None,
        description="Database file; if relative, resolved under FAV_HOME",
    )


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING")
    to_file: bool = Field(default=True, description="Also write logs to logs/fav.log")
    max_size_mb: int = Field(
        default=1, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=3, ge=1, description="Number of log archives to keep.")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {value}")
        return name


class FavConfig(BaseModel):
    version: str = Field(default="1")
    paths: PathOverrides = Field(default_factory=PathOverrides)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_fav_config(paths: FavPaths) -> FavConfig:
    """Load config from ${FAV_HOME}/config.json.

    - If missing: returns defaults.
    - Validation is performed by Pydantic.
    """

    config_path = paths.config_path
    if not config_path.exists():
        return FavConfig()

    raw = _read_json(config_path)
    return FavConfig.model_validate(raw)


def write_fav_config(paths: FavPaths, config: FavConfig) -> None:
    payload = config.model_dump(mode="json", exclude_none=True)
    paths.home.mkdir(parents=True, exist_ok=True)
    paths.config_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
