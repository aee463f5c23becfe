"""Engine-wide enumerations and the unique id generator."""

from __future__ import annotations

import threading
from enum import IntEnum

__all__ = ["EndPlayReason", "UUIDGenerator", "gen_uuid"]

_UINT32_MASK = 0xFFFFFFFF


class EndPlayReason(IntEnum):
    """Why an object stops playing."""

    DESTROYED = 0
    WORLD_TRANSITION = 1
    QUIT = 2


class UUIDGenerator:
    """Hands out sequential 32-bit ids, wrapping around after the maximum."""

    def __init__(self, start: int = 0) -> None:
        self.next_uuid = start & _UINT32_MASK
        self._lock = threading.Lock()

    def generate(self) -> int:
        """Return the next id."""
        with self._lock:
            uuid = self.next_uuid
            self.next_uuid = (uuid + 1) & _UINT32_MASK
            return uuid


_default_generator = UUIDGenerator()


def gen_uuid() -> int:
    """Return the next id from the shared generator."""
    return _default_generator.generate()