"""
Binary Search Tree

A symbol table implementation of items using binary search trees. Items
with equal keys are allowed: they are inserted in the right subtree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from symboltables.interface import I, SymbolTable
from symboltables.traversal import inorder
from symboltables.types import K


@dataclass
class ItemNode(Generic[I]):
    item: I
    left: ItemNode[I] | None = None
    right: ItemNode[I] | None = None
    n: int = 1  # nodes in subtree rooted here


def _size(link: ItemNode | None) -> int:
    return 0 if link is None else link.n


class BinarySearchTree(SymbolTable[I, K], Generic[I, K]):
    def __init__(self) -> None:
        self.head: ItemNode[I] | None = None

    def count(self) -> int:
        return _size(self.head)

    @staticmethod
    def insert_r(link: ItemNode[I] | None, item: I) -> ItemNode[I]:
        """Recursive implementation of insert."""
        if link is None:
            return ItemNode(item)
        if item.key() < link.item.key():
            link.left = BinarySearchTree.insert_r(link.left, item)
        else:
            link.right = BinarySearchTree.insert_r(link.right, item)
        link.n = _size(link.left) + _size(link.right) + 1
        return link

    @staticmethod
    def search_r(link: ItemNode[I] | None, key: K) -> I | None:
        """Recursive implementation of search."""
        if link is None:
            return None
        node_key = link.item.key()
        if key < node_key:
            return BinarySearchTree.search_r(link.left, key)
        if node_key < key:
            return BinarySearchTree.search_r(link.right, key)
        return link.item

    def search(self, key: K) -> I | None:
        return BinarySearchTree.search_r(self.head, key)

    def insert(self, item: I) -> None:
        if item.null():
            return
        self.head = BinarySearchTree.insert_r(self.head, item)

    @staticmethod
    def _remove_min(link: ItemNode[I]) -> ItemNode[I] | None:
        if link.left is None:
            return link.right
        link.left = BinarySearchTree._remove_min(link.left)
        link.n = _size(link.left) + _size(link.right) + 1
        return link

    @staticmethod
    def remove_r(link: ItemNode[I] | None, key: K) -> ItemNode[I] | None:
        """
        Hibbard deletion: a node with two children is replaced by its
        successor, the minimum of its right subtree.
        """
        if link is None:
            return None
        node_key = link.item.key()
        if key < node_key:
            link.left = BinarySearchTree.remove_r(link.left, key)
        elif node_key < key:
            link.right = BinarySearchTree.remove_r(link.right, key)
        else:
            if link.right is None:
                return link.left
            if link.left is None:
                return link.right
            successor = link.right
            while successor.left is not None:
                successor = successor.left
            successor.right = BinarySearchTree._remove_min(link.right)
            successor.left = link.left
            link = successor
        link.n = _size(link.left) + _size(link.right) + 1
        return link

    def remove(self, item: I) -> None:
        self.head = BinarySearchTree.remove_r(self.head, item.key())

    def select(self, k: int) -> I:
        if not 0 <= k < self.count():
            raise IndexError(f"Rank {k} outside of [0, {self.count()})")
        link = self.head
        while link is not None:
            left_size = _size(link.left)
            if k < left_size:
                link = link.left
            elif k > left_size:
                k -= left_size + 1
                link = link.right
            else:
                return link.item
        raise AssertionError("Subtree sizes are inconsistent")

    def show(self) -> list[I]:
        return [node.item for node in inorder(self.head)]
