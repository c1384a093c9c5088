"""Tests for symboltables/item.py"""

import numpy as np
import pytest

from symboltables.item import MAX_KEY, DoubleItem, GenericItem


class TestDoubleItem:
    def test_default_is_null(self):
        assert DoubleItem().null()
        assert DoubleItem().key() == MAX_KEY

    def test_with_key(self):
        item = DoubleItem.with_key(5)
        assert item.key() == 5
        assert item.info == 0.0
        assert not item.null()

    def test_equality_uses_keys_only(self):
        assert DoubleItem(5, 0.25) == DoubleItem.with_key(5)
        assert DoubleItem(5, 0.25) != DoubleItem.with_key(6)
        assert hash(DoubleItem(5, 0.25)) == hash(DoubleItem.with_key(5))

    def test_rand_never_produces_null(self):
        rng = np.random.default_rng(42)
        item = DoubleItem()
        for _ in range(100):
            item.rand(rng)
            assert 0 <= item.key() < MAX_KEY
            assert 0.0 <= item.info < 1.0
            assert not item.null()

    def test_rand_is_reproducible_with_seed(self):
        first, second = DoubleItem(), DoubleItem()
        first.rand(np.random.default_rng(7))
        second.rand(np.random.default_rng(7))
        assert first.key() == second.key()
        assert first.info == second.info


class TestGenericItem:
    def test_null_key_defaults_to_type_default(self):
        assert GenericItem("").null()
        assert not GenericItem("a").null()
        assert GenericItem(0).null()
        assert not GenericItem(3, "three").null()

    def test_explicit_null_key(self):
        assert GenericItem(-1, null_key=-1).null()
        assert not GenericItem(0, null_key=-1).null()

    def test_value_is_kept(self):
        item = GenericItem("key", 42)
        assert item.key() == "key"
        assert item.value == 42

    def test_rand_not_supported(self):
        with pytest.raises(NotImplementedError):
            GenericItem("a").rand()

    def test_items_with_same_key_are_equal(self):
        assert GenericItem("a", 1) == GenericItem("a", 2)
