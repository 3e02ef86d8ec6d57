from concurrent.futures import ThreadPoolExecutor

import pytest

from app.core.exceptions import InvalidInputError
from app.services import VisitCounterService


def test_increment_counts_per_key():
    counter = VisitCounterService()
    for _ in range(5):
        counter.increment("GET")
    counter.increment("POST")

    assert counter.get_count("GET") == 5
    assert counter.get_count("POST") == 1
    assert counter.get_count("general") == 0


def test_increment_returns_new_value():
    counter = VisitCounterService()
    assert counter.increment("general") == 1
    assert counter.increment("general") == 2


def test_none_key_is_rejected():
    counter = VisitCounterService()
    with pytest.raises(InvalidInputError):
        counter.increment(None)
    with pytest.raises(InvalidInputError):
        counter.get_count(None)


def test_get_all_is_read_only_snapshot():
    counter = VisitCounterService()
    counter.increment("GET")
    snapshot = counter.get_all()

    with pytest.raises(TypeError):
        snapshot["GET"] = 100

    counter.increment("GET")
    assert snapshot["GET"] == 1
    assert counter.get_all()["GET"] == 2


def test_concurrent_increments_are_not_lost():
    counter = VisitCounterService()
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: counter.increment("GET"), range(1000)))
    assert counter.get_count("GET") == 1000
