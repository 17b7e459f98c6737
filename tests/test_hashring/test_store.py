"""
Unit tests for the ordered ring store
"""

import random

import pytest

from hashring.core.store import RingStore
from hashring.errors import NoServerNodes


@pytest.fixture
def store():
    store = RingStore()
    store.insert(100, "a")
    store.insert(300, "c")
    store.insert(200, "b")
    return store


class TestRingStore:
    """Test ordered storage and successor search"""

    def test_iterates_in_key_order(self):
        store = RingStore()
        keys = random.Random(7).sample(range(1 << 40), 50)
        for key in keys:
            store.insert(key, str(key))

        assert list(store) == sorted(keys)
        assert [k for k, _ in store.items()] == sorted(keys)

    def test_insert_overwrites_on_collision(self, store):
        previous = store.insert(200, "z")
        assert previous == "b"
        assert store.successor(200) == (200, "z")
        assert len(store) == 3

    def test_discard(self, store):
        assert store.discard(200) == "b"
        assert 200 not in store
        assert store.discard(200) is None
        assert len(store) == 2

    def test_successor_exact_match(self, store):
        assert store.successor(200) == (200, "b")

    def test_successor_between_keys(self, store):
        assert store.successor(101) == (200, "b")
        assert store.successor(0) == (100, "a")

    def test_successor_wraps_around(self, store):
        """Positions past the largest key belong to the smallest key"""
        assert store.successor(301) == (100, "a")
        assert store.successor((1 << 64) - 1) == (100, "a")

    def test_successor_on_empty_store(self):
        with pytest.raises(NoServerNodes):
            RingStore().successor(5)

    def test_empty_store_is_falsy(self):
        assert len(RingStore()) == 0
        assert not RingStore()

    def test_corrupted_ordering_raises(self, store, monkeypatch):
        """A failed lookup inside a non-empty store is reported, not asserted"""
        from hashring.errors import RingCorruptedError

        def broken_peekitem(index=-1):
            raise IndexError(index)

        monkeypatch.setattr(store._entries, "peekitem", broken_peekitem)
        with pytest.raises(RingCorruptedError):
            store.successor(150)
