from __future__ import annotations

from pathlib import Path

from fav_core.home import ensure_fav_layout, resolve_fav_home


def test_resolve_fav_home_from_env(tmp_path: Path) -> None:
    home = resolve_fav_home({"FAV_HOME": str(tmp_path)})
    assert home == tmp_path.resolve()


def test_resolve_fav_home_relative_env_is_under_user_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    home = resolve_fav_home({"FAV_HOME": "bookmarks"})
    assert home == (tmp_path / "bookmarks").resolve()


def test_resolve_fav_home_default(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    home = resolve_fav_home({})
    assert home == (tmp_path / ".config" / "fav").resolve()


def test_ensure_fav_layout_creates_required_dirs(tmp_path: Path) -> None:
    paths = ensure_fav_layout(tmp_path / "fav")

    assert paths.home.is_dir()
    assert paths.logs_dir.is_dir()
    assert paths.config_path == tmp_path / "fav" / "config.json"
