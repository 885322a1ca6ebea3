import pytest

from linkedkit.lfu_cache import LFUCache


def test_source_example():
    cache = LFUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    assert cache.get(3) == 3
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_missing_key_returns_minus_one():
    cache = LFUCache(1)
    assert cache.get(7) == -1


def test_zero_capacity_stores_nothing():
    cache = LFUCache(0)
    cache.put(1, 1)
    assert cache.get(1) == -1
    assert len(cache) == 0


def test_update_existing_key_keeps_size():
    cache = LFUCache(2)
    cache.put(1, 10)
    cache.put(1, 20)
    assert len(cache) == 1
    assert cache.get(1) == 20


def test_tie_evicts_least_recent():
    cache = LFUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    assert "a" not in cache
    assert "b" in cache and "c" in cache


def test_update_counts_as_use():
    cache = LFUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 5)
    cache.put("c", 3)
    assert "b" not in cache
    assert cache.get("a") == 5


@pytest.mark.parametrize("capacity", [1, 2, 5])
def test_size_never_exceeds_capacity(capacity):
    cache = LFUCache(capacity)
    for key in range(20):
        cache.put(key, key)
        assert len(cache) <= capacity
    assert len(cache) == capacity