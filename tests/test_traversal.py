"""Tests for symboltables/traversal.py"""

from symboltables.nodes import Node
from symboltables.traversal import height, inorder, level_order


def sample_tree() -> Node:
    """
    Tree structure:
            D
           / \\
          B   F
         / \\   \\
        A   C   G
    """
    a, c, g = Node("A", 0), Node("C", 0), Node("G", 0)
    b = Node("B", 0, left=a, right=c)
    f = Node("F", 0, right=g)
    return Node("D", 0, left=b, right=f)


def keys(nodes) -> list[str]:
    return [node.key for node in nodes]


class TestTraversals:
    def test_none_root(self):
        assert list(inorder(None)) == []
        assert list(level_order(None)) == []

    def test_single_node(self):
        single = Node("A", 0)
        assert keys(inorder(single)) == ["A"]
        assert keys(level_order(single)) == ["A"]

    def test_multi_level_tree(self):
        root = sample_tree()
        assert keys(inorder(root)) == ["A", "B", "C", "D", "F", "G"]
        assert keys(level_order(root)) == ["D", "B", "F", "A", "C", "G"]


class TestHeight:
    def test_empty_and_single(self):
        assert height(None) == -1
        assert height(Node("A", 0)) == 0

    def test_multi_level_tree(self):
        assert height(sample_tree()) == 2

    def test_degenerate_chain(self):
        root = Node(0, 0)
        current = root
        for key in range(1, 5000):
            current.right = Node(key, 0)
            current = current.right
        assert height(root) == 4999
        assert len(list(inorder(root))) == 5000
