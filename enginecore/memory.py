"""Heap allocation bookkeeping and index-size limits for containers."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Dict, Tuple

__all__ = [
    "AllocationType",
    "AllocationTracker",
    "index_type_bounds",
    "tracker",
]

_UINT64_MASK = (1 << 64) - 1
_SUPPORTED_INDEX_SIZES = (8, 16, 32, 64)


class AllocationType(IntEnum):
    """What an allocation was made for."""

    OBJECT = 0
    CONTAINER = 1


class AllocationTracker:
    """Thread-safe running totals of live bytes and allocations per kind.

    Totals are unsigned 64-bit counters, so freeing more than was
    allocated wraps around instead of going negative.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bytes: Dict[AllocationType, int] = {kind: 0 for kind in AllocationType}
        self._count: Dict[AllocationType, int] = {kind: 0 for kind in AllocationType}

    @staticmethod
    def _kind(kind: AllocationType | int) -> AllocationType:
        try:
            return AllocationType(kind)
        except ValueError:
            raise ValueError(f"unknown allocation type: {kind!r}") from None

    @staticmethod
    def _size(size: int) -> int:
        if size < 0:
            raise ValueError(f"allocation size must not be negative: {size}")
        return size

    def record_alloc(self, kind: AllocationType | int, size: int) -> None:
        """Count one allocation of ``size`` bytes."""
        kind = self._kind(kind)
        size = self._size(size)
        with self._lock:
            self._bytes[kind] = (self._bytes[kind] + size) & _UINT64_MASK
            self._count[kind] = (self._count[kind] + 1) & _UINT64_MASK

    def record_free(self, kind: AllocationType | int, size: int) -> None:
        """Count the release of one allocation of ``size`` bytes."""
        kind = self._kind(kind)
        size = self._size(size)
        with self._lock:
            self._bytes[kind] = (self._bytes[kind] - size) & _UINT64_MASK
            self._count[kind] = (self._count[kind] - 1) & _UINT64_MASK

    def bytes(self, kind: AllocationType | int) -> int:
        """Return the bytes currently allocated for ``kind``."""
        kind = self._kind(kind)
        with self._lock:
            return self._bytes[kind]

    def count(self, kind: AllocationType | int) -> int:
        """Return the number of live allocations for ``kind``."""
        kind = self._kind(kind)
        with self._lock:
            return self._count[kind]


tracker = AllocationTracker()


def index_type_bounds(index_size: int) -> Tuple[int, int]:
    """Return the signed range of a container index that is ``index_size`` bits wide.

    Only 8, 16, 32 and 64 bit indices are supported.
    """
    if index_size not in _SUPPORTED_INDEX_SIZES:
        raise ValueError(f"Unsupported allocator index size: {index_size}")
    half = 1 << (index_size - 1)
    return -half, half - 1