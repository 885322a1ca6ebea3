import pytest

from linkedkit.lru_cache import LRUCache


def test_worked_example():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_missing_key_returns_minus_one():
    cache = LRUCache(1)
    assert cache.get(7) == -1


def test_update_existing_key_does_not_evict():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(1, 10)
    assert len(cache) == 2
    assert cache.get(1) == 10
    assert cache.get(2) == 2


def test_update_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(1, 5)
    cache.put(3, 3)
    assert 2 not in cache
    assert cache.get(1) == 5
    assert cache.get(3) == 3


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(10):
        cache.put(key, key)
        assert len(cache) <= 3
    assert [cache.get(key) for key in (7, 8, 9)] == [7, 8, 9]
    assert cache.get(6) == -1


def test_capacity_one():
    cache = LRUCache(1)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == -1
    assert cache.get(2) == 2


@pytest.mark.parametrize("capacity", [0, -1])
def test_non_positive_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)