import threading

import pytest

from knowhere.lru_cache import LRUCache, hash_vec


def test_put_and_get_round_trip():
    cache = LRUCache(4)
    cache.put("a", 1)
    cache.put("b", 2)
    assert cache.get("a") == 1
    assert cache.get("b") == 2
    assert len(cache) == 2


def test_missing_key_returns_default():
    cache = LRUCache(2)
    assert cache.get("x") is None
    assert cache.get("x", -1) == -1


def test_evicts_least_recently_used():
    cache = LRUCache(2)
    cache.put(1, "one")
    cache.put(2, "two")
    cache.get(1)
    cache.put(3, "three")
    assert 2 not in cache
    assert 1 in cache
    assert 3 in cache
    assert len(cache) == 2


def test_put_existing_key_replaces_without_growth():
    cache = LRUCache(2)
    cache.put("k", 1)
    cache.put("k", 2)
    assert len(cache) == 1
    assert cache.get("k") == 2


def test_reput_refreshes_recency():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)
    assert "b" not in cache
    assert cache.get("a") == 10


def test_zero_capacity_holds_nothing():
    cache = LRUCache(0)
    cache.put("a", 1)
    assert len(cache) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LRUCache(-1)


def test_concurrent_puts_respect_capacity():
    cache = LRUCache(50)

    def worker(offset):
        for i in range(200):
            cache.put(offset * 1000 + i, i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(cache) == 50


def test_hash_vec_fixed_values():
    assert hash_vec([]) == 0
    assert hash_vec([0.0]) == 0
    # IEEE-754 single precision bit pattern of 1.0
    assert hash_vec([1.0]) == 0x3F800000


def test_hash_vec_deterministic_and_order_sensitive():
    a = hash_vec([1.0, 2.0, 3.0])
    assert a == hash_vec([1.0, 2.0, 3.0])
    assert a != hash_vec([3.0, 2.0, 1.0])
    assert 0 <= hash_vec([1e30] * 100) < 2**64