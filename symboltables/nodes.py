"""
Node type for the ordered key/value trees.

Both the plain BST and the red-black BST use the same node. The colour of a
node is the colour of the link from its parent; plain BSTs leave every node
black.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from symboltables.types import K, V

RED = True
BLACK = False


@dataclass
class Node(Generic[K, V]):
    key: K
    value: V
    size: int = 1  # nodes in subtree rooted here
    color: bool = BLACK
    left: Node[K, V] | None = None
    right: Node[K, V] | None = None


def size(node: Node | None) -> int:
    return 0 if node is None else node.size


def is_red(node: Node | None) -> bool:
    return node is not None and node.color == RED


def resize(node: Node) -> None:
    """Recompute the subtree count from the children."""
    node.size = size(node.left) + size(node.right) + 1


__all__ = ["RED", "BLACK", "Node", "size", "is_red", "resize"]
