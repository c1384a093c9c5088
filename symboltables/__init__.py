"""
Symbol tables from Sedgewick & Wayne, Algorithms (4th edition), chapter 3.

Item based tables (store `Item`s, looked up by `item.key()`):
- KeyIndexedSymbolTable for small integer keys
- ArraySymbolTable keeping items in key order
- LinkedSymbolTable, an unordered linked list
- BinarySearchTree, allowing duplicate keys

Ordered key/value tables:
- BST, an unbalanced binary search tree with rank/select support
- RedBlackBST, a left-leaning red-black BST with the same API

Client:
- FrequencyCounter, counting word occurrences in a text

Example Usage:
    >>> from symboltables import RedBlackBST
    >>> st = RedBlackBST[str, int]()
    >>> for i, key in enumerate("SEARCHEXAMPLE"):
    ...     st.put(key, i)
    >>> st.keys()
    ['A', 'C', 'E', 'H', 'L', 'M', 'P', 'R', 'S', 'X']
    >>> st.rank("H"), st.select(3)
    (3, 'H')
"""

from __future__ import annotations

from symboltables.types import Comparable, EmptyTableError, K, V

# Items and the item based tables
from symboltables.item import MAX_KEY, DoubleItem, GenericItem, Item
from symboltables.interface import SymbolTable
from symboltables.key_indexed import KeyIndexedSymbolTable
from symboltables.array import ArraySymbolTable
from symboltables.linked import LinkedSymbolTable
from symboltables.binary_search_tree import BinarySearchTree

# Ordered key/value tables
from symboltables.nodes import Node
from symboltables.ordered import BST
from symboltables.balanced_tree import RedBlackBST
from symboltables.statistics import (
    CostTrace,
    SymbolTableStatistics,
    theoretical_put_cost,
)

# Client
from symboltables.frequency_counter import FrequencyCounter

# Table implementations by command line name
TABLE_FACTORIES: dict[str, type[BST]] = {"bst": BST, "rbt": RedBlackBST}

__all__ = [
    # Types
    "Comparable",
    "EmptyTableError",
    "K",
    "V",
    # Items
    "MAX_KEY",
    "Item",
    "GenericItem",
    "DoubleItem",
    # Item tables
    "SymbolTable",
    "KeyIndexedSymbolTable",
    "ArraySymbolTable",
    "LinkedSymbolTable",
    "BinarySearchTree",
    # Ordered tables
    "Node",
    "BST",
    "RedBlackBST",
    "CostTrace",
    "SymbolTableStatistics",
    "theoretical_put_cost",
    # Client
    "FrequencyCounter",
    "TABLE_FACTORIES",
]
