"""
Ordered symbol table backed by a binary search tree.

Each node keeps the number of nodes in the subtree rooted at it, which gives
rank and select in time proportional to the height of the tree.

Operations:
    put / get / contains / delete        - Basic symbol table API
    min / max / delete_min / delete_max  - Extremes (raise on empty table)
    floor / ceiling                      - Closest keys around a given key
    rank / select                        - Order statistics
    keys / keys_in_range / size_in_range - Ordered iteration and range counts
    statistics                           - Average put cost in compares
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic

from symboltables.nodes import Node, resize, size
from symboltables.statistics import CostTrace, SymbolTableStatistics
from symboltables.traversal import height, inorder, level_order
from symboltables.types import K, V, EmptyTableError

logger = logging.getLogger(__name__)


class BST(Generic[K, V]):
    """
    Unbalanced binary search tree.

    A `None` value means "absent": `put(key, None)` deletes the key.
    """

    def __init__(self, trace: CostTrace | None = None) -> None:
        self.root: Node[K, V] | None = None
        # Number of compares for the put operation
        self.compares_put = 0
        self.trace = trace

    # -------------------------------------------------------------------------
    # Size

    def size(self) -> int:
        """Return the number of key, value pairs in the table."""
        return size(self.root)

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[K]:
        return (node.key for node in inorder(self.root))

    # -------------------------------------------------------------------------
    # Search

    def get(self, key: K) -> V | None:
        """Return the value paired with the given key, or None."""
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node.value
        return None

    def contains(self, key: K) -> bool:
        return self.get(key) is not None

    # -------------------------------------------------------------------------
    # Insertion

    def put(self, key: K, value: V | None) -> None:
        """
        Put the key, value pair into the table. Update the value if found,
        if not add the new key value pair.
        """
        if value is None:
            self.delete(key)
            return

        before = self.compares_put
        self.root = self._put(self.root, key, value)
        if self.trace is not None:
            self.trace.record(self.compares_put - before)

    def _put(self, node: Node[K, V] | None, key: K, value: V) -> Node[K, V]:
        if node is None:
            return Node(key, value)
        self.compares_put += 1
        if key < node.key:
            node.left = self._put(node.left, key, value)
        elif node.key < key:
            node.right = self._put(node.right, key, value)
        else:
            node.value = value
        resize(node)
        return node

    # -------------------------------------------------------------------------
    # Deletion

    def _require_non_empty(self, operation: str) -> None:
        if self.is_empty():
            raise EmptyTableError(f"{operation} called on an empty table")

    def delete_min(self) -> None:
        """Delete the smallest key (and value) from the table."""
        self._require_non_empty("delete_min")
        assert self.root is not None
        self.root = self._delete_min(self.root)

    def _delete_min(self, node: Node[K, V]) -> Node[K, V] | None:
        if node.left is None:
            return node.right
        node.left = self._delete_min(node.left)
        resize(node)
        return node

    def delete_max(self) -> None:
        """Delete the largest key (and value) from the table."""
        self._require_non_empty("delete_max")
        assert self.root is not None
        self.root = self._delete_max(self.root)

    def _delete_max(self, node: Node[K, V]) -> Node[K, V] | None:
        if node.right is None:
            return node.left
        node.right = self._delete_max(node.right)
        resize(node)
        return node

    def delete(self, key: K) -> None:
        """Delete the key (and value) from the table, if present."""
        if not self.contains(key):
            logger.debug(f"Delete of absent key {key!r} ignored")
            return
        self.root = self._delete(self.root, key)

    def _delete(self, node: Node[K, V] | None, key: K) -> Node[K, V] | None:
        if node is None:
            return None
        if key < node.key:
            node.left = self._delete(node.left, key)
        elif node.key < key:
            node.right = self._delete(node.right, key)
        else:
            if node.right is None:
                return node.left
            if node.left is None:
                return node.right
            # Hibbard deletion: replace by the successor
            successor = self._min_node(node.right)
            successor.right = self._delete_min(node.right)
            successor.left = node.left
            node = successor
        resize(node)
        return node

    # -------------------------------------------------------------------------
    # Ordered operations

    @staticmethod
    def _min_node(node: Node[K, V]) -> Node[K, V]:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _max_node(node: Node[K, V]) -> Node[K, V]:
        while node.right is not None:
            node = node.right
        return node

    def min(self) -> K:
        """
        Return the smallest key.

        If the left link of the root is null, the smallest key is the key at
        the root. If not, it is the smallest key in the left subtree.
        """
        self._require_non_empty("min")
        assert self.root is not None
        return self._min_node(self.root).key

    def max(self) -> K:
        """Return the largest key."""
        self._require_non_empty("max")
        assert self.root is not None
        return self._max_node(self.root).key

    def floor(self, key: K) -> K | None:
        """
        Return the largest key <= to the given key.

        If the given key is less than the key at the root, the floor must be
        in the left subtree. If it is greater, the floor could be in the right
        subtree, but only if there is a key smaller than or equal to `key`
        there; if not (or if the keys are equal), the key at the root is the
        floor.
        """
        best: K | None = None
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                best = node.key
                node = node.right
            else:
                return node.key
        return best

    def ceiling(self, key: K) -> K | None:
        """Return the smallest key >= to the given key."""
        best: K | None = None
        node = self.root
        while node is not None:
            if node.key < key:
                node = node.right
            elif key < node.key:
                best = node.key
                node = node.left
            else:
                return node.key
        return best

    def rank(self, key: K) -> int:
        """Number of keys less than the given key."""
        result = 0
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                result += size(node.left) + 1
                node = node.right
            else:
                return result + size(node.left)
        return result

    def select(self, k: int) -> K:
        """
        Return the key of rank k, i.e. the key such that precisely k other
        keys in the tree are smaller.

        With the keys A C E H R S X, select(3) is H.
        """
        if not 0 <= k < self.size():
            raise ValueError(f"Rank {k} outside of [0, {self.size()})")
        node = self.root
        while node is not None:
            left_size = size(node.left)
            if k < left_size:
                node = node.left
            elif k > left_size:
                k -= left_size + 1
                node = node.right
            else:
                return node.key
        raise AssertionError("Subtree sizes are inconsistent")

    # -------------------------------------------------------------------------
    # Range operations

    def keys(self) -> list[K]:
        """Return all keys in the table in sorted order."""
        return list(self)

    def keys_in_range(self, lo: K, hi: K) -> list[K]:
        """Return keys in [lo..hi] in sorted order."""
        result: list[K] = []
        if hi < lo:
            return result
        self._keys_in_range(self.root, result, lo, hi)
        return result

    def _keys_in_range(
        self, node: Node[K, V] | None, acc: list[K], lo: K, hi: K
    ) -> None:
        if node is None:
            return
        if lo < node.key:
            self._keys_in_range(node.left, acc, lo, hi)
        if not node.key < lo and not hi < node.key:
            acc.append(node.key)
        if node.key < hi:
            self._keys_in_range(node.right, acc, lo, hi)

    def size_in_range(self, lo: K, hi: K) -> int:
        """Return the number of keys in [lo..hi]."""
        if hi < lo:
            return 0
        if self.contains(hi):
            return self.rank(hi) - self.rank(lo) + 1
        return self.rank(hi) - self.rank(lo)

    # -------------------------------------------------------------------------
    # Shape and display

    def height(self) -> int:
        return height(self.root)

    def level_order(self) -> list[K]:
        """Keys in breadth-first order, root first."""
        return [node.key for node in level_order(self.root)]

    def show(self) -> list[str]:
        """Display the tree nodes in order."""
        lines = [
            f"(k: {node.key!r}, v: {node.value!r}, n: {node.size})"
            for node in inorder(self.root)
        ]
        for line in lines:
            print(line)
        return lines

    def statistics(self, total_puts: int) -> SymbolTableStatistics:
        """Get the collected statistics."""
        return SymbolTableStatistics.from_counts(self.compares_put, total_puts)

    # -------------------------------------------------------------------------
    # Integrity checks

    def is_bst(self) -> bool:
        """In-order traversal is strictly increasing."""
        previous: K | None = None
        for node in inorder(self.root):
            if previous is not None and not previous < node.key:
                return False
            previous = node.key
        return True

    def is_size_consistent(self) -> bool:
        return all(
            node.size == size(node.left) + size(node.right) + 1
            for node in inorder(self.root)
        )

    def is_rank_consistent(self) -> bool:
        if any(self.rank(self.select(i)) != i for i in range(self.size())):
            return False
        return all(self.select(self.rank(key)) == key for key in self)
