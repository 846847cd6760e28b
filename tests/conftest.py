from __future__ import annotations

from pathlib import Path

import pytest

from fav_core.db.store import Store
from fav_core.service import FavService


@pytest.fixture
def store(tmp_path: Path) -> Store:
    return Store.init(tmp_path / "fav.db")


@pytest.fixture
def service(store: Store) -> FavService:
    return FavService(store)
