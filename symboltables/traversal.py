"""
Binary tree traversal utilities.

Works on any node type exposing `left` and `right` links (None for null).

Traversals:
    inorder(root)     - Yields nodes left subtree first, then node, then right
    level_order(root) - Yields nodes level by level, root first

Measures:
    height(root)      - Number of links on the longest path (-1 when empty)
"""

from collections import deque
from typing import Iterator, Protocol, Self


class BinaryNode(Protocol):
    @property
    def left(self) -> Self | None: ...

    @property
    def right(self) -> Self | None: ...


def inorder[N: BinaryNode](root: N | None) -> Iterator[N]:
    """Yields nodes in key order."""
    stack: list[N] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def level_order[N: BinaryNode](root: N | None) -> Iterator[N]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        current = queue.popleft()
        yield current
        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)


def height(root: BinaryNode | None) -> int:
    """Height of the tree; a single node has height 0."""
    if root is None:
        return -1
    result = -1
    level = [root]
    while level:
        result += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return result
