"""List transformations applied once a remote mutation is confirmed.

Each function returns a new list; the input is never modified. An id that
is not present is a silent no-op.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Optional, Protocol, TypeVar


class _HasId(Protocol):
    id: int


T = TypeVar("T", bound=_HasId)


def find_by_id(collection: Iterable[T], record_id: int) -> Optional[T]:
    return next((item for item in collection if item.id == record_id), None)


def apply_update(collection: Iterable[T], record_id: int, new_value: T) -> list[T]:
    """Replace the element with id *record_id* by *new_value*."""
    return [new_value if item.id == record_id else item for item in collection]


def apply_delete(collection: Iterable[T], record_id: int) -> list[T]:
    return [item for item in collection if item.id != record_id]


def apply_insert(collection: Iterable[T], value: T) -> list[T]:
    """Append *value*, or replace the element already carrying its id."""
    items = list(collection)
    if find_by_id(items, value.id) is not None:
        return apply_update(items, value.id, value)
    return [*items, value]


def remove_where(collection: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    return [item for item in collection if not predicate(item)]
