"""Tests for utils/display.py and the explorer helpers."""

import io

from rich.console import Console

from symboltables.balanced_tree import RedBlackBST
from symboltables.ordered import BST
from symboltables.statistics import SymbolTableStatistics
from utils.display import display_statistics, display_table, table_to_rich_tree
from utils.io.table_explorer import key_summary


def render(renderable_or_table, display=None) -> str:
    console = Console(file=io.StringIO(), width=100, color_system=None)
    if display is None:
        console.print(renderable_or_table)
    else:
        display(renderable_or_table, console)
    return console.file.getvalue()


def make_tree(factory=BST):
    tree = factory()
    for key in "SXEACRHMLP":
        tree.put(key, 0)
    return tree


class TestDisplayTable:
    def test_root_and_children(self):
        output = render(make_tree(), display_table)
        assert output.splitlines()[0].strip() == "BST"
        assert "S = 0 (10)" in output
        assert "L E = 0 (8)" in output
        assert "R X = 0 (1)" in output
        assert "L A = 0 (2)" in output

    def test_left_child_rendered_first(self):
        output = render(make_tree(), display_table)
        assert output.index("L E") < output.index("R X")

    def test_every_key_rendered(self):
        tree = make_tree(RedBlackBST)
        output = render(table_to_rich_tree(tree))
        for key in "ACEHLMPRSX":
            assert f"{key} = 0" in output

    def test_empty(self):
        assert "(empty)" in render(table_to_rich_tree(BST()))

    def test_statistics(self):
        console = Console(file=io.StringIO(), width=100, color_system=None)
        display_statistics(SymbolTableStatistics(3.6), 10, console)
        assert "Average put cost: 3.60 compares" in console.file.getvalue()


class TestKeySummary:
    def test_middle_key(self):
        tree = make_tree()
        summary = key_summary(tree, "H").plain
        assert "Rank: 3 of 10" in summary
        assert "Previous key: 'E'" in summary
        assert "Next key: 'L'" in summary

    def test_extremes(self):
        tree = make_tree()
        assert "Previous key: -" in key_summary(tree, "A").plain
        assert "Next key: -" in key_summary(tree, "X").plain
