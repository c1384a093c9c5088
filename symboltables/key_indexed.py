"""
Key indexed symbol table.

Keys are non-negative integers smaller than a sentinel `m` and are used
directly as indices into an array. Empty slots hold null items.
"""

from collections.abc import Callable
from typing import Generic

from symboltables.interface import I, SymbolTable
from symboltables.item import DoubleItem


class KeyIndexedSymbolTable(SymbolTable[I, int], Generic[I]):
    def __init__(self, m: int, null_item: Callable[[], I] = DoubleItem) -> None:
        if m < 0:
            raise ValueError(f"Capacity must be non-negative, got {m}")
        self.m = m
        self._null_item = null_item
        self._items: list[I] = [null_item() for _ in range(m)]

    def _check(self, key: int) -> None:
        if not 0 <= key < self.m:
            raise IndexError(f"Key {key} outside of [0, {self.m})")

    def count(self) -> int:
        return sum(1 for item in self._items if not item.null())

    def search(self, key: int) -> I | None:
        self._check(key)
        item = self._items[key]
        return None if item.null() else item

    def insert(self, item: I) -> None:
        self._check(item.key())
        self._items[item.key()] = item

    def remove(self, item: I) -> None:
        self._check(item.key())
        self._items[item.key()] = self._null_item()

    def select(self, k: int) -> I | None:
        """Scan slots in index order, returning None when fewer than k+1 items exist."""
        for item in self._items:
            if not item.null():
                if k == 0:
                    return item
                k -= 1
        return None

    def show(self) -> list[I]:
        return [item for item in self._items if not item.null()]
