from __future__ import annotations

import ntpath
import os
import sys

from fav_core.errors import InvalidPath

_WINDOWS_FORBIDDEN = frozenset('<>:"|?*')


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def check_windows_grammar(raw: str) -> None:
    """Reject characters the Windows path grammar does not allow.

    The drive designator (``C:``) and UNC prefix are split off first, so the
    only legal colon is the one in the drive.
    """

    _drive, rest = ntpath.splitdrive(raw)
    for ch in rest:
        if ch in _WINDOWS_FORBIDDEN:
            raise InvalidPath(raw, f"character {ch!r} is not allowed")
        if ord(ch) < 32:
            raise InvalidPath(raw, "control characters are not allowed")


def normalize_path(raw: str, *, cwd: str | os.PathLike[str] | None = None) -> str:
    """Return the canonical string form of ``raw``.

    Normalization is purely textual: ``.`` and ``..`` segments and repeated
    separators are collapsed, relative paths are anchored at ``cwd`` (default:
    the process working directory). The filesystem is never consulted, so the
    target does not need to exist and symlinks are not followed.
    """

    if not raw or not raw.strip():
        raise InvalidPath(raw, "path is empty")
    if "\x00" in raw:
        raise InvalidPath(raw, "path contains a NUL character")
    if _is_windows():
        check_windows_grammar(raw)

    base = os.path.abspath(os.fspath(cwd)) if cwd is not None else os.getcwd()
    canonical = os.path.normpath(os.path.join(base, raw))
    # POSIX normpath keeps exactly two leading slashes; Linux treats them as one.
    if not _is_windows() and canonical.startswith("//"):
        canonical = "/" + canonical.lstrip("/")
    return canonical
