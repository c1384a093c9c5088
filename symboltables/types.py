"""
Core type abstractions shared by every symbol table.

Types:
    Comparable      - Protocol for keys supporting a total order
    K, V            - Key and value type variables
    EmptyTableError - Raised when a query needs at least one key
"""

from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """Keys must be totally ordered: `<` and `==` are all the tables use."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __eq__(self, other: object, /) -> bool: ...


K = TypeVar("K", bound=Comparable)
V = TypeVar("V")


class EmptyTableError(Exception):
    """Raised when min/max/delete_min/delete_max is called on an empty table."""

    pass


__all__ = ["Comparable", "K", "V", "EmptyTableError"]
