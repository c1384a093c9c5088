"""
Items that can be stored in the item based symbol tables.

Items:
    Item         - Abstract keyed record, equal when keys are equal
    GenericItem  - Any ordered key with an arbitrary value
    DoubleItem   - Integer key with a float payload, null at MAX_KEY
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic

import numpy as np

from symboltables.types import K

MAX_KEY = 1000


class Item(ABC, Generic[K]):
    """Interface of items that can be stored in a symbol table."""

    @abstractmethod
    def key(self) -> K: ...

    @abstractmethod
    def null(self) -> bool:
        """True for the sentinel item marking an empty slot."""
        ...

    @abstractmethod
    def rand(self, rng: np.random.Generator | None = None) -> None:
        """Fill the item with random content in place."""
        ...

    # Items are equal if their keys are equal.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())


@dataclass(eq=False)
class GenericItem(Item[K]):
    """
    Item wrapping any ordered key and an arbitrary value.

    The null key defaults to the default value of the key's type
    (`0` for ints, `""` for strings).
    """

    key_value: K
    value: Any = None
    null_key: K | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.null_key is None:
            self.null_key = type(self.key_value)()

    def key(self) -> K:
        return self.key_value

    def null(self) -> bool:
        return self.key_value == self.null_key

    def rand(self, rng: np.random.Generator | None = None) -> None:
        raise NotImplementedError("GenericItem has no random key distribution")


@dataclass(eq=False)
class DoubleItem(Item[int]):
    """Integer keyed item carrying a float. The default item is null."""

    key_val: int = MAX_KEY
    info: float = 0.0

    @classmethod
    def with_key(cls, key_val: int) -> DoubleItem:
        return cls(key_val, 0.0)

    def key(self) -> int:
        return self.key_val

    def null(self) -> bool:
        return self.key_val == MAX_KEY

    def rand(self, rng: np.random.Generator | None = None) -> None:
        # Keys stay below the sentinel so a random item is never null
        rng = rng if rng is not None else np.random.default_rng()
        self.key_val = int(rng.integers(0, MAX_KEY))
        self.info = float(rng.random())


__all__ = ["MAX_KEY", "Item", "GenericItem", "DoubleItem"]
