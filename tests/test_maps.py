import threading

import pytest

from objutil.maps import Entry, Map, StrKeyMap, SyncMap


@pytest.mark.parametrize("factory", [Map, SyncMap])
def test_map_cases(factory):
    m = factory()
    m.put("aaa", "111")
    assert m.get("aaa") == "111"
    m.put("AAA", "222")
    assert m.get("aaa") == "111"
    assert m.get("AAA") == "222"

    assert m.get_if_absent("333", lambda k: "bbb") == "bbb"
    assert len(m) == 3
    assert m.get_if_absent("333", lambda k: "ccc") == "bbb"
    assert len(m) == 3

    assert m.contains_keys("aaa", "333") is True
    assert m.contains_keys("aaa", "333", "x") is False
    assert m.contains_any_keys("x", "y", "aaa") is True
    assert m.contains_any_keys("x", "y", "z") is False

    assert m.remove("aaa") is True
    assert len(m) == 2
    assert m.remove("hhh") is False
    assert len(m) == 2


@pytest.mark.parametrize("factory", [Map, SyncMap])
def test_get_entry_and_default(factory):
    m = factory()
    m.put("k", 1)
    assert m.get_entry("k") == Entry("k", 1)
    assert m.get_entry("missing") is None
    assert m.get("missing") is None
    assert m.get("missing", 0) == 0


@pytest.mark.parametrize("factory", [Map, SyncMap])
def test_views_and_empty(factory):
    m = factory()
    assert m.is_empty() is True
    m.put("a", 1)
    m.put("b", 2)
    assert m.is_empty() is False
    assert sorted(m.keys()) == ["a", "b"]
    assert sorted(m.values()) == [1, 2]
    assert sorted(m.items()) == [("a", 1), ("b", 2)]
    assert sorted(m) == ["a", "b"]
    assert m.raw() == {"a": 1, "b": 2}


@pytest.mark.parametrize("factory", [Map, SyncMap])
def test_remove_all_and_put_all(factory):
    m = factory()
    m.put_all({"a": 1, "b": 2, "c": 3})
    m.remove_all("a", "c", "zzz")
    assert m.raw() == {"b": 2}


def test_str_key_map_cases():
    m = StrKeyMap(True)
    m.put("aaa", "111")
    m.put("AAA", "111")
    assert len(m) == 2

    m2 = StrKeyMap(False)
    m2.put("aaa", "111")
    assert m2.get("aaa") == "111"
    m2.put("AAA", "222")
    assert m2.get("aaa") == "222"
    assert len(m2) == 1
    m2.put("bbb", "333")
    m2.put("BBB", "444")
    assert "AAA" in m2.keys()
    assert "BBB" in m2.keys()

    assert m2.get("ccc", "") == ""

    m2.remove("bBb")
    assert len(m2) == 1

    m3 = StrKeyMap(True)
    m3.put("aaa", "111")
    m3.put("Aaa", "222")
    m3.put("CCC", "333")
    assert len(m3) == 3
    m2.put_all(m3)
    assert len(m2) == 2

    assert m3.raw() == {"aaa": "111", "Aaa": "222", "CCC": "333"}


def test_str_key_map_raw_is_a_copy():
    m = StrKeyMap(False)
    m.put("Key", 1)
    raw = m.raw()
    raw["other"] = 2
    assert len(m) == 1
    assert m.contains_keys("KEY") is True


def test_sync_map_concurrent_puts():
    m = SyncMap()

    def worker(n):
        for i in range(200):
            m.put((n, i), i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(m) == 1600


def test_sync_map_get_if_absent_calls_once():
    m = SyncMap()
    calls = []
    barrier = threading.Barrier(8)

    def factory(k):
        calls.append(k)
        return "value"

    results = []

    def worker():
        barrier.wait()
        results.append(m.get_if_absent("key", factory))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert calls == ["key"]
    assert results == ["value"] * 8
    assert len(m) == 1