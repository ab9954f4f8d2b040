"""Last component and parent of a slash-separated path."""

from __future__ import annotations

from typing import Optional


def basename(path: Optional[str]) -> str:
    """Return the last component of path, ignoring trailing slashes."""
    if not path:
        return "."
    if set(path) == {"/"}:
        return "/"
    stripped = path.rstrip("/")
    return stripped[stripped.rfind("/") + 1:]


def dirname(path: Optional[str]) -> str:
    """Return path without its last component; "." when there is no slash."""
    if not path:
        return "."
    if "/" not in path:
        return "."
    stripped = path.rstrip("/")
    i = stripped.rfind("/")
    return stripped[:i] if i > 0 else "/"