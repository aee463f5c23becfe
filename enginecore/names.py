"""Interned, case-insensitive names with an optional trailing number."""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional

from enginecore.strings import equals, string_hash

__all__ = ["NameEntry", "NamePool", "Name"]

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_NUMBER_MASK = 0x7FFFFFFF
_LEN_MASK = 0x3FF
_INT32_MAX = 0x7FFFFFFF


@dataclass(eq=False)
class NameEntry:
    """A stored string with a small header used for quick comparison."""

    is_wide: bool = False
    probe_hash: int = 0
    length: int = 0
    data: str = ""

    @classmethod
    def for_string(cls, text: str, slot_hash: int) -> "NameEntry":
        # The probe tag only records whether the slot hash is non-zero.
        return cls(
            probe_hash=1 if slot_hash else 0,
            length=len(text) & _LEN_MASK,
            data=text,
        )

    @property
    def header(self) -> int:
        """The header packed into 16 bits: wide flag, 5-bit tag, 10-bit length."""
        return (
            int(self.is_wide)
            | (self.probe_hash & 0x1F) << 1
            | (self.length & _LEN_MASK) << 6
        )

    def is_empty(self) -> bool:
        return self.header == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameEntry):
            return NotImplemented
        return self.header == other.header and equals(self.data, other.data)

    __hash__ = None  # type: ignore[assignment]


@dataclass
class _Table:
    """One open-addressed pool with a small ring of recently found slots."""

    label: str
    size: int
    cache_size: int
    entries: List[NameEntry] = field(init=False)
    cache: List[List[int]] = field(init=False)
    cursor: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.entries = [NameEntry() for _ in range(self.size)]
        self.cache = [[0, 0] for _ in range(self.cache_size)]

    def _cached(self, slot_hash: int) -> Optional[int]:
        i = self.cursor
        for _ in range(self.cache_size):
            cached_hash, cached_id = self.cache[i]
            if cached_hash == slot_hash:
                return cached_id
            i = (i - 1) % self.cache_size
        return None

    def _remember(self, slot_hash: int, index: int) -> None:
        if self.cache[self.cursor][1] != index:
            self.cursor = (self.cursor + 1) % self.cache_size
            self.cache[self.cursor] = [slot_hash, index]

    def find_or_add(self, text: str) -> int:
        slot_hash = string_hash(text) % self.size

        cached_id = self._cached(slot_hash)
        if cached_id is not None and equals(text, self.entries[cached_id].data):
            return cached_id

        entry = NameEntry.for_string(text, slot_hash)
        index = slot_hash
        while True:
            slot = self.entries[index]
            if slot.is_empty():
                self.entries[index] = entry
                return index
            if slot == entry:
                self._remember(slot_hash, index)
                return index
            index = (index + 1) % self.size
            if index == slot_hash:
                break

        logger.warning("%s name pool is full.", self.label)
        return 0

    def names(self) -> List[str]:
        return [entry.data for entry in self.entries if not entry.is_empty()]


class NamePool:
    """Stores display strings and lower-cased comparison strings by slot index."""

    POOL_SIZE: ClassVar[int] = 128
    CACHE_SIZE: ClassVar[int] = 4
    _shared: ClassVar[Optional["NamePool"]] = None

    def __init__(self) -> None:
        self._comparison = _Table("Comparison", self.POOL_SIZE, self.CACHE_SIZE)
        self._display = _Table("Display", self.POOL_SIZE, self.CACHE_SIZE)

    @classmethod
    def shared(cls) -> "NamePool":
        """Return the process-wide pool, creating it on first use."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def find_or_add_comparison_name(self, name: str) -> int:
        """Return the slot of a lower-case comparison name, storing it if new."""
        return self._comparison.find_or_add(name)

    def find_or_add_display_name(self, name: str) -> int:
        """Return the slot of a display name, storing it if new."""
        return self._display.find_or_add(name)

    def resolve_comparison(self, index: int) -> str:
        return self._comparison.entries[index].data

    def resolve_display(self, index: int) -> str:
        return self._display.entries[index].data

    def comparison_names(self) -> List[str]:
        """Return every stored comparison name in slot order."""
        return self._comparison.names()

    def display_names(self) -> List[str]:
        """Return every stored display name in slot order."""
        return self._display.names()


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class Name:
    """A pooled name such as ``"Player13"``.

    The trailing digits become ``number`` stored plus one, so ``"Player"``
    has number 0, ``"Player0"`` number 1 and ``"Player13"`` number 14.
    Names are equal when their text matches ignoring case.
    """

    MISMATCH: ClassVar[int] = -2147483648

    def __init__(
        self,
        text: Optional[str] = None,
        number: Optional[int] = None,
        *,
        pool: Optional[NamePool] = None,
    ) -> None:
        self.display_index = 0
        self.comparison_index = 0
        self.number = 0
        self.is_valid = False
        self._pool = pool if pool is not None else NamePool.shared()

        if text is None:
            return
        if number is not None:
            self._intern(text)
            self.number = number & _NUMBER_MASK
            return
        self._parse(text)

    def _intern(self, text: str) -> None:
        self.display_index = self._pool.find_or_add_display_name(text)
        self.comparison_index = self._pool.find_or_add_comparison_name(_ascii_lower(text))
        self.is_valid = True

    def _parse(self, text: str) -> None:
        logger.debug("Name constructor : %s", text)
        if not text:
            return

        stem = text.rstrip(_DIGITS)
        digits = text[len(stem):]
        if digits:
            value = int(digits)
            if value > _INT32_MAX:
                raise OverflowError(f"name number out of range: {digits}")
            self.number = (value + 1) & _NUMBER_MASK
        else:
            self.number = 0

        if not stem:
            logger.warning("Invalid name: %s", text)
            return
        self._intern(stem)

    def compare(self, other: "Name") -> int:
        """Difference of numbers for the same name, else ``MISMATCH``."""
        if self.comparison_index == other.comparison_index:
            return self.number - other.number
        return self.MISMATCH

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.comparison_index == other.comparison_index

    def __hash__(self) -> int:
        return hash(self.comparison_index)

    def __str__(self) -> str:
        display = self._pool.resolve_display(self.display_index)
        if self.number:
            return display + str(self.number - 1)
        return display

    def __repr__(self) -> str:
        return f"Name({str(self)!r})"