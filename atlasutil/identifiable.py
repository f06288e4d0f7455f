"""Set operations on objects matched by their identifier."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """An object with a key that groups, intersects and subtracts it."""

    def identifier(self) -> Any:
        """Return the key the object is matched by."""
        raise NotImplementedError


def _items(data: Iterable[Any] | None) -> list[Identifiable]:
    items = list(data or ())
    for item in items:
        if not isinstance(item, Identifiable):
            raise TypeError(f"{type(item).__name__} is not Identifiable")
    return items


def difference(
    left: Iterable[Identifiable] | None, right: Iterable[Identifiable] | None
) -> list[Identifiable]:
    """Return the elements of ``left`` whose identifier appears in no element of ``right``."""
    left_items = _items(left)
    right_ids = [item.identifier() for item in _items(right)]
    return [item for item in left_items if item.identifier() not in right_ids]


def intersection(
    left: Iterable[Identifiable] | None, right: Iterable[Identifiable] | None
) -> list[tuple[Identifiable, Identifiable]]:
    """Return ``(left, right)`` pairs of elements sharing an identifier, in ``left`` order."""
    left_items = _items(left)
    right_keyed = [(item.identifier(), item) for item in _items(right)]
    return [
        (l_item, r_item)
        for l_item in left_items
        for r_id, r_item in right_keyed
        if r_id == l_item.identifier()
    ]