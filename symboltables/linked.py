"""
Linked list based (unordered) symbol table.

Insertion prepends to the list, so order-dependent operations (`select`,
`show`) have to sort the items first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from symboltables.interface import I, SymbolTable
from symboltables.types import K


@dataclass
class ListNode(Generic[I]):
    item: I
    next: ListNode[I] | None = None


class LinkedSymbolTable(SymbolTable[I, K], Generic[I, K]):
    def __init__(self) -> None:
        self.head: ListNode[I] | None = None
        self._count = 0

    def count(self) -> int:
        return self._count

    @staticmethod
    def search_r(link: ListNode[I] | None, key: K) -> I | None:
        """Recursive search along the list."""
        if link is None:
            return None
        if link.item.key() == key:
            return link.item
        return LinkedSymbolTable.search_r(link.next, key)

    def search(self, key: K) -> I | None:
        return LinkedSymbolTable.search_r(self.head, key)

    def insert(self, item: I) -> None:
        # Null items mark empty slots, they are never stored
        if item.null():
            return
        self.head = ListNode(item, self.head)
        self._count += 1

    def remove(self, item: I) -> None:
        previous: ListNode[I] | None = None
        current = self.head
        while current is not None:
            if current.item.key() == item.key():
                if previous is None:
                    self.head = current.next
                else:
                    previous.next = current.next
                self._count -= 1
                return
            previous, current = current, current.next

    def _items(self) -> list[I]:
        items = []
        current = self.head
        while current is not None:
            items.append(current.item)
            current = current.next
        return items

    def select(self, k: int) -> I:
        if not 0 <= k < self._count:
            raise IndexError(f"Rank {k} outside of [0, {self._count})")
        return self.show()[k]

    def show(self) -> list[I]:
        # sorted() is stable: duplicates keep most recent first
        return sorted(self._items(), key=lambda item: item.key())
