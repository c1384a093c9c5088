"""
The interface of item based symbol tables.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from symboltables.item import Item
from symboltables.types import K

I = TypeVar("I", bound=Item)


class SymbolTable(ABC, Generic[I, K]):
    """Symbol table storing items and retrieving them by key."""

    @abstractmethod
    def count(self) -> int:
        """Return the item count."""
        ...

    @abstractmethod
    def search(self, key: K) -> I | None:
        """Find an item with the given key."""
        ...

    @abstractmethod
    def insert(self, item: I) -> None: ...

    @abstractmethod
    def remove(self, item: I) -> None:
        """Remove the item with the same key as `item`, if present."""
        ...

    @abstractmethod
    def select(self, k: int) -> I | None:
        """Select the k-th smallest item (0-based)."""
        ...

    @abstractmethod
    def show(self) -> list[I]:
        """Return the items in key order."""
        ...

    def __len__(self) -> int:
        return self.count()


__all__ = ["I", "SymbolTable"]
