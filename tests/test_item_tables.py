"""Tests for the item based symbol tables."""

import pytest

from symboltables.array import ArraySymbolTable
from symboltables.binary_search_tree import BinarySearchTree
from symboltables.item import DoubleItem, GenericItem
from symboltables.key_indexed import KeyIndexedSymbolTable
from symboltables.linked import LinkedSymbolTable


def keys(items) -> list:
    return [item.key() for item in items]


class TestKeyIndexedSymbolTable:
    def test_select(self):
        st = KeyIndexedSymbolTable(10)
        for i in range(10):
            st.insert(DoubleItem.with_key(i))

        # select 5th smallest item
        assert st.select(5) == DoubleItem.with_key(5)
        assert st.count() == 10

    def test_remove(self):
        st = KeyIndexedSymbolTable(10)
        for i in range(10):
            st.insert(DoubleItem.with_key(i))

        st.remove(DoubleItem.with_key(3))
        assert st.count() == 9
        assert st.search(3) is None
        assert st.select(3) == DoubleItem.with_key(4)
        assert 3 not in keys(st.show())

    def test_select_past_the_end(self):
        st = KeyIndexedSymbolTable(10)
        st.insert(DoubleItem.with_key(2))
        assert st.select(1) is None

    def test_search_and_insert_overwrite(self):
        st = KeyIndexedSymbolTable(5)
        st.insert(DoubleItem(4, 0.5))
        st.insert(DoubleItem(4, 0.75))
        found = st.search(4)
        assert found is not None and found.info == 0.75
        assert len(st) == 1

    def test_key_out_of_range(self):
        st = KeyIndexedSymbolTable(10)
        with pytest.raises(IndexError):
            st.search(10)
        with pytest.raises(IndexError):
            st.insert(DoubleItem.with_key(42))

    def test_custom_null_item(self):
        st = KeyIndexedSymbolTable(3, null_item=lambda: GenericItem(0))
        st.insert(GenericItem(2, "two"))
        assert st.count() == 1
        assert keys(st.show()) == [2]


class TestArraySymbolTable:
    def test_search_select_show(self):
        st = ArraySymbolTable(10)
        i1 = DoubleItem.with_key(10)
        i2 = DoubleItem.with_key(20)
        i3 = DoubleItem.with_key(15)
        st.insert(i1)
        st.insert(i2)
        st.insert(i3)

        # an item that exists
        assert st.search(15) == DoubleItem.with_key(15)
        # non-existent items
        assert st.search(150) is None
        assert st.search(12) is None
        assert st.search(1) is None

        assert st.select(1) == DoubleItem.with_key(15)
        assert st.show() == [i1, i3, i2]

    def test_remove(self):
        st = ArraySymbolTable(10)
        for key in (10, 20, 15):
            st.insert(DoubleItem.with_key(key))

        # remove the item with key 15
        st.remove(DoubleItem.with_key(15))
        assert keys(st.show()) == [10, 20]
        assert st.count() == 2

        # removing an absent item is a no-op
        st.remove(DoubleItem.with_key(99))
        assert st.count() == 2

    def test_full_table(self):
        st = ArraySymbolTable(2)
        st.insert(DoubleItem.with_key(1))
        st.insert(DoubleItem.with_key(2))
        with pytest.raises(OverflowError):
            st.insert(DoubleItem.with_key(3))

    def test_reuse_after_remove(self):
        st = ArraySymbolTable(2)
        st.insert(DoubleItem.with_key(1))
        st.insert(DoubleItem.with_key(2))
        st.remove(DoubleItem.with_key(1))
        st.insert(DoubleItem.with_key(0))
        assert keys(st.show()) == [0, 2]

    def test_select_out_of_range(self):
        st = ArraySymbolTable(4)
        st.insert(DoubleItem.with_key(1))
        with pytest.raises(IndexError):
            st.select(1)

    def test_empty_search(self):
        assert ArraySymbolTable(3).search(1) is None

    def test_null_item_is_not_stored(self):
        """A null item leaves count, show and select untouched."""
        st = ArraySymbolTable(2)
        st.insert(DoubleItem())
        assert st.count() == 0
        assert st.show() == []
        with pytest.raises(IndexError):
            st.select(0)

        st.insert(DoubleItem.with_key(3))
        st.insert(DoubleItem())
        assert st.count() == 1
        assert st.select(0) == DoubleItem.with_key(3)


class TestLinkedSymbolTable:
    def test_search(self):
        st = LinkedSymbolTable()
        for key in (10, 20, 15):
            st.insert(DoubleItem.with_key(key))

        assert st.search(15) == DoubleItem.with_key(15)
        # non-existent item
        assert st.search(150) is None

    def test_show_and_select_are_ordered(self):
        st = LinkedSymbolTable()
        for key in (10, 20, 15):
            st.insert(DoubleItem.with_key(key))

        assert keys(st.show()) == [10, 15, 20]
        assert st.select(0) == DoubleItem.with_key(10)
        assert st.select(2) == DoubleItem.with_key(20)
        with pytest.raises(IndexError):
            st.select(3)

    def test_remove_head_middle_and_absent(self):
        st = LinkedSymbolTable()
        for key in (10, 20, 15):
            st.insert(DoubleItem.with_key(key))

        st.remove(DoubleItem.with_key(15))  # head
        st.remove(DoubleItem.with_key(20))
        st.remove(DoubleItem.with_key(99))
        assert st.count() == 1
        assert keys(st.show()) == [10]

    def test_null_item_is_not_stored(self):
        """A null item leaves count, show and select untouched."""
        st = LinkedSymbolTable()
        st.insert(DoubleItem())
        assert st.count() == 0
        assert st.show() == []
        with pytest.raises(IndexError):
            st.select(0)


class TestBinarySearchTree:
    def test_binary_search_tree(self):
        bst = BinarySearchTree()

        i1 = DoubleItem.with_key(10)
        i2 = DoubleItem.with_key(9)
        i3 = DoubleItem.with_key(15)
        i4 = DoubleItem.with_key(8)

        for item in (i1, i2, i3, i4):
            bst.insert(item)

        assert bst.show() == [i4, i2, i1, i3]
        assert bst.search(15) == DoubleItem.with_key(15)
        assert bst.search(9) == DoubleItem.with_key(9)
        # non-existent item
        assert bst.search(150) is None
        assert bst.count() == 4

    def test_remove_node_with_two_children(self):
        bst = BinarySearchTree()
        for key in (10, 9, 15, 8, 12, 20):
            bst.insert(DoubleItem.with_key(key))

        bst.remove(DoubleItem.with_key(10))
        assert keys(bst.show()) == [8, 9, 12, 15, 20]
        assert bst.count() == 5
        assert bst.search(10) is None

    def test_remove_leaf_and_absent(self):
        bst = BinarySearchTree()
        for key in (10, 9, 15):
            bst.insert(DoubleItem.with_key(key))

        bst.remove(DoubleItem.with_key(9))
        bst.remove(DoubleItem.with_key(42))
        assert keys(bst.show()) == [10, 15]

    def test_select(self):
        bst = BinarySearchTree()
        for key in (10, 9, 15, 8):
            bst.insert(DoubleItem.with_key(key))

        assert [bst.select(k).key() for k in range(4)] == [8, 9, 10, 15]
        with pytest.raises(IndexError):
            bst.select(4)

    def test_duplicate_keys(self):
        bst = BinarySearchTree()
        bst.insert(DoubleItem(9, 0.1))
        bst.insert(DoubleItem(9, 0.2))

        assert bst.count() == 2
        assert keys(bst.show()) == [9, 9]
        found = bst.search(9)
        assert found is not None and found.info == 0.1

    def test_null_item_is_not_stored(self):
        """A null item leaves count, show and select untouched."""
        bst = BinarySearchTree()
        bst.insert(DoubleItem())
        assert bst.count() == 0
        assert bst.show() == []
        with pytest.raises(IndexError):
            bst.select(0)
