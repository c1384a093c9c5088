from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from symboltables.nodes import Node, is_red
from symboltables.ordered import BST
from symboltables.statistics import SymbolTableStatistics, theoretical_put_cost


def node_label(node: Node, side: str = "") -> Text:
    """Key, value and subtree size; nodes reached by a red link are red."""
    label = Text(f"{side} " if side else "", style="dim")
    label.append(str(node.key), style="bold red" if is_red(node) else "bold")
    label.append(f" = {node.value!r}", style="dim")
    label.append(f" ({node.size})", style="cyan")
    return label


def table_to_rich_tree(table: BST, title: str = "root") -> Tree:
    """Convert a BST to a Rich Tree, children tagged L or R."""
    tree = Tree(Text(title, style="italic"))
    if table.root is None:
        tree.add(Text("(empty)", style="dim"))
        return tree

    stack: list[tuple[Node, Tree, str]] = [(table.root, tree, "")]
    while stack:
        node, parent, side = stack.pop()
        branch = parent.add(node_label(node, side))
        # Right pushed first so the left child is rendered first
        if node.right is not None:
            stack.append((node.right, branch, "R"))
        if node.left is not None:
            stack.append((node.left, branch, "L"))
    return tree


def display_table(table: BST, console: Console | None = None) -> None:
    console = console if console is not None else Console()
    console.print(table_to_rich_tree(table, type(table).__name__))


def display_statistics(
    statistics: SymbolTableStatistics, size: int, console: Console | None = None
) -> None:
    console = console if console is not None else Console()
    console.print(
        f"Average put cost: {statistics.average_put_cost:.2f} compares "
        f"(random BST expectation ~{theoretical_put_cost(size):.2f})"
    )
