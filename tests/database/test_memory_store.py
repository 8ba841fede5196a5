from __future__ import annotations

import threading

import pytest

from src.qr_attendance.qr_attendance.core.exceptions import DuplicateKeyError
from src.qr_attendance.qr_attendance.database.memory_store import InMemoryCollection


def _collection():
    return InMemoryCollection("things", {"id": lambda r: r["id"], "code": lambda r: r["code"]})


def test_insert_and_point_lookup():
    c = _collection()
    c.insert({"id": 1, "code": "a"})

    assert c.get("id", 1) == {"id": 1, "code": "a"}
    assert c.get("code", "a")["id"] == 1
    assert c.get("code", "zzz") is None


def test_duplicate_on_any_unique_key_leaves_store_untouched():
    c = _collection()
    c.insert({"id": 1, "code": "a"})

    with pytest.raises(DuplicateKeyError) as exc:
        c.insert({"id": 2, "code": "a"})

    assert exc.value.collection == "things"
    assert exc.value.key == "code"
    assert len(c) == 1
    assert c.get("id", 2) is None


def test_find_keeps_insertion_order():
    c = _collection()
    for i in range(5):
        c.insert({"id": i, "code": f"c{i}"})

    assert [r["id"] for r in c.find(lambda r: r["id"] % 2 == 0)] == [0, 2, 4]
    assert [r["id"] for r in c.all()] == [0, 1, 2, 3, 4]


def test_requires_a_unique_key():
    with pytest.raises(ValueError):
        InMemoryCollection("empty", {})


def test_concurrent_inserts_of_same_key_admit_one():
    c = _collection()
    workers = 12
    barrier = threading.Barrier(workers)
    wins = []

    def attempt(n):
        barrier.wait()
        try:
            c.insert({"id": n, "code": "same"})
            wins.append(n)
        except DuplicateKeyError:
            pass

    threads = [threading.Thread(target=attempt, args=(n,)) for n in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(wins) == 1
    assert len(c) == 1
