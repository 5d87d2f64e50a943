"""Tests for the cached store dependencies."""

import threading

import pytest
from gitflow_api import services
from gitflow_api.services import get_feature_store, get_user_store

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def empty_cache(monkeypatch):
    monkeypatch.setattr(services, "_services_cache", {})


def test_store_dependencies_are_cached() -> None:
    assert get_user_store() is get_user_store()
    assert get_feature_store() is get_feature_store()
    assert get_user_store() is not get_feature_store()


def test_concurrent_first_use_builds_one_store() -> None:
    thread_count = 16
    barrier = threading.Barrier(thread_count)
    stores = []

    def fetch() -> None:
        barrier.wait()
        stores.append(get_user_store())

    threads = [threading.Thread(target=fetch) for _ in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(stores) == thread_count
    assert all(store is stores[0] for store in stores)
