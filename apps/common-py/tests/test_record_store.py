"""Tests for the in-memory record stores."""

import threading
from datetime import UTC, datetime

import pytest
from gitflow_common.models.feature import Feature
from gitflow_common.models.user import User
from gitflow_common.services.feature_store import FeatureStore
from gitflow_common.services.user_store import UserStore

pytestmark = pytest.mark.unit

NEW_USER = {"name": "Test User", "email": "test@example.com", "is_active": True}


def _ids(store) -> list[int]:
    return [record.id for record in store.list_all()]


class TestListAll:
    def test_returns_seed_users(self, user_store: UserStore) -> None:
        users = user_store.list_all()

        assert [user.name for user in users] == ["John Doe", "Jane Smith", "Bob Johnson"]
        assert all(isinstance(user, User) for user in users)

    def test_consecutive_calls_are_equal(self, user_store: UserStore) -> None:
        assert user_store.list_all() == user_store.list_all()

    def test_returned_list_is_a_snapshot(self, user_store: UserStore) -> None:
        users = user_store.list_all()
        users.clear()

        assert len(user_store.list_all()) == 3

    def test_returned_records_are_copies(self, user_store: UserStore) -> None:
        users = user_store.list_all()
        users[0].name = "Mallory"

        assert user_store.get_by_id(1).name == "John Doe"

    def test_seed_records_are_not_shared_between_stores(self) -> None:
        first, second = UserStore(), UserStore()
        first.update(1, {"name": "Changed"})

        assert second.get_by_id(1).name == "John Doe"


class TestGetById:
    def test_returns_matching_user(self, user_store: UserStore) -> None:
        user = user_store.get_by_id(1)

        assert user is not None
        assert user.id == 1
        assert user.name == "John Doe"
        assert user.email == "john.doe@example.com"

    @pytest.mark.parametrize("record_id", [999, -1, 0])
    def test_unknown_id_returns_none(self, user_store: UserStore, record_id: int) -> None:
        assert user_store.get_by_id(record_id) is None


class TestCreate:
    def test_create_assigns_next_id_and_timestamp(self, user_store: UserStore) -> None:
        before = datetime.now(UTC)
        user = user_store.create(NEW_USER)

        assert user.id == 4
        assert user.name == NEW_USER["name"]
        assert user.email == NEW_USER["email"]
        assert user.is_active is True
        assert user.created_at >= before

    def test_create_then_get_round_trips(self, user_store: UserStore) -> None:
        created = user_store.create(NEW_USER)

        assert user_store.get_by_id(created.id) == created

    def test_create_assigns_unique_ids(self, user_store: UserStore) -> None:
        first = user_store.create({"name": "User 1", "email": "user1@example.com", "is_active": True})
        second = user_store.create({"name": "User 2", "email": "user2@example.com", "is_active": True})

        assert first.id != second.id

    def test_create_in_empty_store_starts_at_one(self) -> None:
        store = UserStore(users=[])

        assert store.create(NEW_USER).id == 1

    def test_create_ignores_caller_id_and_timestamp(self, user_store: UserStore) -> None:
        stamp = datetime(2000, 1, 1, tzinfo=UTC)
        user = user_store.create({**NEW_USER, "id": 1, "created_at": stamp})

        assert user.id == 4
        assert user.created_at != stamp
        assert user_store.get_by_id(1).name == "John Doe"

    def test_deleted_ids_are_not_reused(self, user_store: UserStore) -> None:
        created = user_store.create(NEW_USER)
        user_store.delete(created.id)

        assert user_store.create(NEW_USER).id == created.id + 1


class TestUpdate:
    def test_update_merges_fields(self, user_store: UserStore) -> None:
        original = user_store.get_by_id(1)
        updated = user_store.update(1, {"name": "Updated Name", "is_active": False})

        assert updated is not None
        assert updated.id == 1
        assert updated.name == "Updated Name"
        assert updated.is_active is False
        assert updated.email == original.email
        assert updated.created_at == original.created_at
        assert user_store.get_by_id(1) == updated

    def test_update_never_overwrites_id_or_timestamp(self, user_store: UserStore) -> None:
        original = user_store.get_by_id(2)
        updated = user_store.update(2, {"id": 99, "created_at": datetime(2000, 1, 1, tzinfo=UTC)})

        assert updated.id == 2
        assert updated.created_at == original.created_at
        assert user_store.get_by_id(99) is None

    def test_update_ignores_unknown_fields(self, user_store: UserStore) -> None:
        updated = user_store.update(1, {"nickname": "JD"})

        assert updated == user_store.get_by_id(1)
        assert not hasattr(updated, "nickname")

    def test_update_unknown_id_returns_none(self, user_store: UserStore) -> None:
        before = user_store.list_all()

        assert user_store.update(999, {"name": "Updated Name"}) is None
        assert user_store.list_all() == before


class TestDelete:
    def test_delete_removes_user(self, user_store: UserStore) -> None:
        assert user_store.delete(1) is True
        assert user_store.get_by_id(1) is None

    def test_second_delete_returns_false(self, user_store: UserStore) -> None:
        user_store.delete(1)

        assert user_store.delete(1) is False

    def test_delete_unknown_id_returns_false(self, user_store: UserStore) -> None:
        assert user_store.delete(999) is False
        assert len(user_store) == 3


def test_create_and_delete_preserve_order(user_store: UserStore) -> None:
    assert _ids(user_store) == [1, 2, 3]

    assert user_store.create(NEW_USER).id == 4
    assert user_store.delete(2) is True

    assert _ids(user_store) == [1, 3, 4]


class TestFeatureStore:
    def test_returns_seed_features(self, feature_store: FeatureStore) -> None:
        features = feature_store.list_all()

        assert [feature.name for feature in features] == ["Git Flow Integration", "CI/CD Pipeline"]
        for feature in features:
            assert isinstance(feature, Feature)
            assert isinstance(feature.description, str)
            assert isinstance(feature.is_enabled, bool)
            assert isinstance(feature.created_at, datetime)

    def test_get_by_id(self, feature_store: FeatureStore) -> None:
        feature = feature_store.get_by_id(1)

        assert feature is not None
        assert feature.name == "Git Flow Integration"
        assert feature_store.get_by_id(999) is None

    def test_toggle_flips_enabled_flag(self, feature_store: FeatureStore) -> None:
        initial = feature_store.get_by_id(1)
        toggled = feature_store.toggle_flag(1)

        assert toggled is not None
        assert toggled.is_enabled is not initial.is_enabled
        assert toggled.id == initial.id
        assert toggled.created_at == initial.created_at

    def test_toggle_persists(self, feature_store: FeatureStore) -> None:
        toggled = feature_store.toggle_flag(2)

        assert feature_store.get_by_id(2).is_enabled == toggled.is_enabled

    def test_toggle_twice_restores_state(self, feature_store: FeatureStore) -> None:
        feature_store.toggle_flag(1)
        feature_store.toggle_flag(1)

        assert feature_store.get_by_id(1).is_enabled is True

    def test_toggle_unknown_id_returns_none(self, feature_store: FeatureStore) -> None:
        before = feature_store.list_all()

        assert feature_store.toggle_flag(999) is None
        assert feature_store.list_all() == before


def test_concurrent_creates_get_unique_contiguous_ids(user_store: UserStore) -> None:
    thread_count = 32
    barrier = threading.Barrier(thread_count)
    created: list[User] = []
    created_lock = threading.Lock()

    def create_one(index: int) -> None:
        barrier.wait()
        user = user_store.create({"name": f"User {index}", "email": f"user{index}@example.com"})
        with created_lock:
            created.append(user)

    threads = [threading.Thread(target=create_one, args=(index,)) for index in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(user.id for user in created) == list(range(4, 4 + thread_count))
    assert len(user_store) == 3 + thread_count
    for user in created:
        assert user_store.get_by_id(user.id) == user
