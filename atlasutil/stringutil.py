"""Small helpers for working with strings."""

from __future__ import annotations

from collections.abc import Iterable


def contains(items: Iterable[str], s: str) -> bool:
    """Return True if at least one string in ``items`` equals ``s``."""
    return s in items