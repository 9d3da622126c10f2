"""Tests for sibling order keys and node id generation."""

import re

import pytest

from pagetree.engine.ids import new_id, new_link_id
from pagetree.engine.ordering import key_for, keys_for
from pagetree.engine.registry import Slot

ID_RE = re.compile(r"^6Z-[0-9a-f]{12}-0$")


# ---------------------------------------------------------------------------
# Order keys
# ---------------------------------------------------------------------------


class TestKeyFor:
    def test_first_keys(self):
        assert key_for(0) == "a0"
        assert key_for(1) == "a1"

    def test_single_digit_block(self):
        assert key_for(9) == "a9"
        assert key_for(10) == "aA"
        assert key_for(36) == "aa"
        assert key_for(61) == "az"

    def test_two_digit_block_follows(self):
        assert key_for(62) == "b00"
        assert key_for(63) == "b01"
        assert key_for(62 + 62 * 62 - 1) == "bzz"
        assert key_for(62 + 62 * 62) == "c000"

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            key_for(-1)

    def test_keys_for(self):
        assert keys_for(3) == ["a0", "a1", "a2"]
        assert keys_for(0) == []

    def test_hundreds_of_siblings_strictly_increasing(self):
        keys = keys_for(1000)
        assert all(a < b for a, b in zip(keys, keys[1:]))
        assert len(set(keys)) == 1000

    def test_key_depends_only_on_position(self):
        assert key_for(123) == key_for(123)
        assert keys_for(200)[150] == key_for(150)

    def test_slot_order_key(self):
        assert Slot("parent", 0).order_key == "a0"
        assert Slot("parent", 62).order_key == "b00"


# ---------------------------------------------------------------------------
# Ids
# ---------------------------------------------------------------------------


class TestIds:
    def test_shape(self):
        assert ID_RE.match(new_id())

    def test_ten_thousand_ids_are_distinct(self):
        ids = [new_id() for _ in range(10_000)]
        assert len(set(ids)) == 10_000

    def test_link_id_shape(self):
        assert re.match(r"^link-[0-9a-f]{5}$", new_link_id())
