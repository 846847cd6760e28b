from __future__ import annotations

MIGRATIONS: list[tuple[str, str]] = [
    (
        "0001_init",
        """
PRAGMA foreign_keys = ON;

CREATE TABLE IF NOT EXISTS favorites (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    path TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now')),
    UNIQUE(path)
);

CREATE TABLE IF NOT EXISTS aliases (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    favorite_id INTEGER NOT NULL,
    name TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now')),
    UNIQUE(name),
    FOREIGN KEY(favorite_id) REFERENCES favorites(id) ON DELETE CASCADE
);
""",
    ),
    (
        "0002_alias_favorite_index",
        """
CREATE INDEX IF NOT EXISTS idx_aliases_favorite_id ON aliases(favorite_id);
""",
    ),
]
