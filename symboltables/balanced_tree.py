"""
Left-leaning red-black BST.

A red-black BST encodes a 2-3 tree: a red link binds two nodes into a
3-node. The left-leaning variant keeps every red link on the left, which
leaves three local transformations to restore the invariants after an
insertion or a deletion:

    rotate_left   - turn a right-leaning red link into a left-leaning one
    rotate_right  - temporarily lean a red link to the right
    flip_colors   - split (or build, on the way down when deleting) a 4-node

Invariants:
    - red links lean left
    - no node has two red links connected to it
    - every path from the root to a null link has the same number of black links

The read-only operations (get, floor, rank, ...) are inherited unchanged from
the plain BST: a red-black BST is a BST.
"""

from __future__ import annotations

from typing import Generic

from typing_extensions import override

from symboltables.nodes import BLACK, RED, Node, is_red, resize
from symboltables.ordered import BST
from symboltables.types import K, V


class RedBlackBST(BST[K, V], Generic[K, V]):
    # -------------------------------------------------------------------------
    # Local transformations

    @staticmethod
    def rotate_left(h: Node[K, V]) -> Node[K, V]:
        x = h.right
        assert x is not None and is_red(x)
        h.right = x.left
        x.left = h
        x.color = h.color
        h.color = RED
        x.size = h.size
        resize(h)
        return x

    @staticmethod
    def rotate_right(h: Node[K, V]) -> Node[K, V]:
        x = h.left
        assert x is not None and is_red(x)
        h.left = x.right
        x.right = h
        x.color = h.color
        h.color = RED
        x.size = h.size
        resize(h)
        return x

    @staticmethod
    def flip_colors(h: Node[K, V]) -> None:
        """Flip the colours of a node and its two children."""
        assert h.left is not None and h.right is not None
        h.color = not h.color
        h.left.color = not h.left.color
        h.right.color = not h.right.color

    @staticmethod
    def _balance(h: Node[K, V]) -> Node[K, V]:
        if is_red(h.right) and not is_red(h.left):
            h = RedBlackBST.rotate_left(h)
        if is_red(h.left) and h.left is not None and is_red(h.left.left):
            h = RedBlackBST.rotate_right(h)
        if is_red(h.left) and is_red(h.right):
            RedBlackBST.flip_colors(h)
        resize(h)
        return h

    @staticmethod
    def _move_red_left(h: Node[K, V]) -> Node[K, V]:
        """
        Assuming h is red and both h.left and h.left.left are black, make
        h.left or one of its children red.
        """
        RedBlackBST.flip_colors(h)
        assert h.right is not None
        if is_red(h.right.left):
            h.right = RedBlackBST.rotate_right(h.right)
            h = RedBlackBST.rotate_left(h)
            RedBlackBST.flip_colors(h)
        return h

    @staticmethod
    def _move_red_right(h: Node[K, V]) -> Node[K, V]:
        """
        Assuming h is red and both h.right and h.right.left are black, make
        h.right or one of its children red.
        """
        RedBlackBST.flip_colors(h)
        assert h.left is not None
        if is_red(h.left.left):
            h = RedBlackBST.rotate_right(h)
            RedBlackBST.flip_colors(h)
        return h

    # -------------------------------------------------------------------------
    # Insertion

    @override
    def put(self, key: K, value: V | None) -> None:
        if value is None:
            self.delete(key)
            return

        before = self.compares_put
        self.root = self._put(self.root, key, value)
        self.root.color = BLACK
        if self.trace is not None:
            self.trace.record(self.compares_put - before)

    @override
    def _put(self, node: Node[K, V] | None, key: K, value: V) -> Node[K, V]:
        if node is None:
            return Node(key, value, color=RED)

        self.compares_put += 1
        if key < node.key:
            node.left = self._put(node.left, key, value)
        elif node.key < key:
            node.right = self._put(node.right, key, value)
        else:
            node.value = value

        # Fix up any right-leaning links on the way up
        if is_red(node.right) and not is_red(node.left):
            node = self.rotate_left(node)
        if is_red(node.left) and node.left is not None and is_red(node.left.left):
            node = self.rotate_right(node)
        if is_red(node.left) and is_red(node.right):
            self.flip_colors(node)
        resize(node)
        return node

    # -------------------------------------------------------------------------
    # Deletion

    def _prepare_root(self) -> None:
        assert self.root is not None
        # If both children of root are black, set root to red
        if not is_red(self.root.left) and not is_red(self.root.right):
            self.root.color = RED

    def _restore_root(self) -> None:
        if self.root is not None:
            self.root.color = BLACK

    @override
    def delete_min(self) -> None:
        self._require_non_empty("delete_min")
        self._prepare_root()
        assert self.root is not None
        self.root = self._delete_min(self.root)
        self._restore_root()

    @override
    def _delete_min(self, node: Node[K, V]) -> Node[K, V] | None:
        if node.left is None:
            return None
        if not is_red(node.left) and not is_red(node.left.left):
            node = self._move_red_left(node)
        assert node.left is not None
        node.left = self._delete_min(node.left)
        return self._balance(node)

    @override
    def delete_max(self) -> None:
        self._require_non_empty("delete_max")
        self._prepare_root()
        assert self.root is not None
        self.root = self._delete_max(self.root)
        self._restore_root()

    @override
    def _delete_max(self, node: Node[K, V]) -> Node[K, V] | None:
        if is_red(node.left):
            node = self.rotate_right(node)
        if node.right is None:
            return None
        if not is_red(node.right) and not is_red(node.right.left):
            node = self._move_red_right(node)
        assert node.right is not None
        node.right = self._delete_max(node.right)
        return self._balance(node)

    @override
    def delete(self, key: K) -> None:
        if not self.contains(key):
            return
        self._prepare_root()
        self.root = self._delete(self.root, key)
        self._restore_root()

    @override
    def _delete(self, node: Node[K, V] | None, key: K) -> Node[K, V] | None:
        # The key is known to be present, so the search never hits a null link
        assert node is not None
        if key < node.key:
            assert node.left is not None
            if not is_red(node.left) and not is_red(node.left.left):
                node = self._move_red_left(node)
            node.left = self._delete(node.left, key)
        else:
            if is_red(node.left):
                node = self.rotate_right(node)
            if key == node.key and node.right is None:
                return None
            assert node.right is not None
            if not is_red(node.right) and not is_red(node.right.left):
                node = self._move_red_right(node)
            if key == node.key:
                assert node.right is not None
                successor = self._min_node(node.right)
                node.key = successor.key
                node.value = successor.value
                node.right = self._delete_min(node.right)
            else:
                node.right = self._delete(node.right, key)
        return self._balance(node)

    # -------------------------------------------------------------------------
    # Integrity checks

    def is_23(self) -> bool:
        """No red right links and no node connected to two red links."""

        def check(node: Node[K, V] | None) -> bool:
            if node is None:
                return True
            if is_red(node.right):
                return False
            if node is not self.root and is_red(node) and is_red(node.left):
                return False
            return check(node.left) and check(node.right)

        return check(self.root)

    def is_balanced(self) -> bool:
        """Every path from the root to a null link has the same black height."""
        black = 0
        node = self.root
        while node is not None:
            if not is_red(node):
                black += 1
            node = node.left

        def check(node: Node[K, V] | None, remaining: int) -> bool:
            if node is None:
                return remaining == 0
            if not is_red(node):
                remaining -= 1
            return check(node.left, remaining) and check(node.right, remaining)

        return check(self.root, black)

    def is_red_black(self) -> bool:
        return (
            self.is_bst()
            and self.is_size_consistent()
            and self.is_23()
            and self.is_balanced()
            and not is_red(self.root)
        )

    def black_height(self) -> int:
        result = 0
        node = self.root
        while node is not None:
            if not is_red(node):
                result += 1
            node = node.left
        return result


__all__ = ["RedBlackBST"]
