"""
Array based symbol table where the items are kept in the order of the keys.
"""

import logging
from typing import Generic

from symboltables.interface import I, SymbolTable
from symboltables.types import K

logger = logging.getLogger(__name__)


class ArraySymbolTable(SymbolTable[I, K], Generic[I, K]):
    """
    Ordered array of fixed capacity.

    Insertion moves larger items one slot to the right to make room, in the
    same manner as insertion sort. Search is a linear scan that stops at the
    first key greater than or equal to the searched one.
    """

    def __init__(self, m: int) -> None:
        if m < 0:
            raise ValueError(f"Capacity must be non-negative, got {m}")
        self._items: list[I | None] = [None] * m
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def count(self) -> int:
        return self._count

    def _position(self, key: K) -> int:
        """Index of the first item whose key is >= key."""
        i = 0
        while i < self._count:
            item = self._items[i]
            assert item is not None
            if not item.key() < key:
                break
            i += 1
        return i

    def search(self, key: K) -> I | None:
        i = self._position(key)
        if i < self._count:
            item = self._items[i]
            if item is not None and item.key() == key:
                return item
        return None

    def insert(self, item: I) -> None:
        if item.null():
            logger.debug("Insert of a null item ignored")
            return
        if self._count == self.capacity:
            raise OverflowError(f"Array symbol table is full ({self.capacity} items)")

        i = self._count
        while i > 0:
            previous = self._items[i - 1]
            assert previous is not None
            if not item.key() < previous.key():
                break
            self._items[i] = previous
            i -= 1
        self._items[i] = item
        self._count += 1

    def find_index(self, item: I) -> int | None:
        """Find the index of the given item if it exists."""
        for i in range(self._count):
            if self._items[i] == item:
                return i
        return None

    def remove(self, item: I) -> None:
        i = self.find_index(item)
        if i is None:
            logger.debug(f"Remove of absent key {item.key()} ignored")
            return

        # Shift the tail left so the removed slot is overwritten
        for j in range(i, self._count - 1):
            self._items[j] = self._items[j + 1]
        self._count -= 1
        self._items[self._count] = None

    def select(self, k: int) -> I:
        if not 0 <= k < self._count:
            raise IndexError(f"Rank {k} outside of [0, {self._count})")
        item = self._items[k]
        assert item is not None
        return item

    def show(self) -> list[I]:
        return [
            item
            for item in self._items[: self._count]
            if item is not None and not item.null()
        ]
