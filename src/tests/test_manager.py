import threading

import pytest

from task_queue import (
    EMPTY,
    BoundedFirstCollection,
    BoundedLastCollection,
    QueueExistsError,
    QueueManager,
    QueueNotFoundError,
    QueueSettings,
)


def test_create_by_name_and_settings():
    manager = QueueManager()
    uploads = manager.create("uploads", capacity=2)
    jobs = manager.create(QueueSettings(name="jobs", kind="fifo"), initial=["a"])
    assert isinstance(uploads, BoundedLastCollection)
    assert isinstance(jobs, BoundedFirstCollection)
    assert manager.get("jobs") is jobs
    assert sorted(manager.names()) == ["jobs", "uploads"]
    assert "uploads" in manager
    assert len(manager) == 2


def test_duplicate_name_rejected():
    manager = QueueManager()
    manager.create("jobs")
    with pytest.raises(QueueExistsError):
        manager.create("jobs", kind="first")


def test_unknown_name():
    manager = QueueManager()
    with pytest.raises(QueueNotFoundError) as excinfo:
        manager.pop("missing")
    assert isinstance(excinfo.value, KeyError)
    assert "missing" in str(excinfo.value)


def test_push_pop_follow_collection_rules():
    manager = QueueManager()
    manager.create("uploads", capacity=2)
    for item in ("a", "b", "c"):
        manager.push("uploads", item)
    assert manager.snapshot("uploads") == ["b", "c"]
    assert manager.pop("uploads") == "b"
    assert manager.pop("uploads") == "c"
    assert manager.pop("uploads") is EMPTY
    manager.push("uploads", "d")
    assert manager.pop("uploads") is EMPTY


def test_drain_terminates_cursor():
    manager = QueueManager()
    manager.create("jobs", kind="first", initial=[1, 2, 3])
    assert manager.drain("jobs") == [3, 2, 1]
    manager.push("jobs", 4)
    assert manager.drain("jobs") == []
    assert manager.stats()["jobs"] == {"kind": "first", "count": 1, "capacity": None, "exhausted": True}


def test_remove():
    manager = QueueManager()
    created = manager.create("jobs")
    assert manager.remove("jobs") is created
    assert "jobs" not in manager
    with pytest.raises(QueueNotFoundError):
        manager.remove("jobs")


def test_stats():
    manager = QueueManager()
    manager.create("uploads", capacity=3, initial=[1])
    assert manager.stats() == {
        "uploads": {"kind": "last", "count": 1, "capacity": 3, "exhausted": False}
    }


def test_concurrent_pushes_respect_capacity():
    manager = QueueManager()
    manager.create("uploads", capacity=50)

    def worker(offset):
        for i in range(500):
            manager.push("uploads", offset + i)

    threads = [threading.Thread(target=worker, args=(n * 1000,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert manager.stats()["uploads"]["count"] == 50


def test_string_capacity_matches_direct_construction():
    manager = QueueManager()
    managed = manager.create("uploads", capacity="3")
    direct = BoundedLastCollection(capacity="3")
    assert managed.capacity == direct.capacity
    for i in range(5):
        manager.push("uploads", i)
    assert manager.stats()["uploads"]["count"] == 5
