"""Helpers for lists used as dynamic arrays, plus a key/value pair type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar

__all__ = [
    "INDEX_NONE",
    "Pair",
    "find_index",
    "add_unique",
    "remove_every",
    "remove_single",
    "remove_at",
    "remove_all",
    "insert_at",
]

INDEX_NONE = -1

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


@dataclass
class Pair(Generic[K, V]):
    """A key and a value that compare equal when both parts are equal."""

    key: K = None  # type: ignore[assignment]
    value: V = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value


def find_index(items: List[T], item: T) -> int:
    """Return the index of the first element equal to ``item``, or ``INDEX_NONE``."""
    for index, element in enumerate(items):
        if element == item:
            return index
    return INDEX_NONE


def add_unique(items: List[T], item: T) -> int:
    """Append ``item`` unless an equal element exists; return its index."""
    index = find_index(items, item)
    if index != INDEX_NONE:
        return index
    items.append(item)
    return len(items) - 1


def remove_every(items: List[T], item: T) -> int:
    """Remove every element equal to ``item``; return how many were removed."""
    return remove_all(items, lambda element: element == item)


def remove_single(items: List[T], item: T) -> bool:
    """Remove the first element equal to ``item``; return whether one was found."""
    index = find_index(items, item)
    if index == INDEX_NONE:
        return False
    del items[index]
    return True


def remove_at(items: List[T], index: int) -> None:
    """Remove the element at ``index``; an index out of range is ignored."""
    if 0 <= index < len(items):
        del items[index]


def remove_all(items: List[T], predicate: Callable[[T], bool]) -> int:
    """Remove every element for which ``predicate`` holds, keeping order.

    Return how many elements were removed.
    """
    old_size = len(items)
    items[:] = [element for element in items if not predicate(element)]
    return old_size - len(items)


def insert_at(items: List[T], index: int, values: Iterable[T]) -> int:
    """Insert ``values`` in order before position ``index``; return ``index``.

    Raise ``IndexError`` when ``index`` is not within ``0 .. len(items)``.
    """
    if not 0 <= index <= len(items):
        raise IndexError("Index out of range in insert_at")
    items[index:index] = list(values)
    return index