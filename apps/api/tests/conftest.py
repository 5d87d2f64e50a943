"""Pytest configuration and fixtures."""

import pytest
from gitflow_api.main import app
from gitflow_api.services import get_feature_store, get_user_store
from gitflow_common.services.feature_store import FeatureStore
from gitflow_common.services.user_store import UserStore
from fastapi.testclient import TestClient


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")


@pytest.fixture
def user_store() -> UserStore:
    """Fresh user store for a single test."""
    return UserStore()


@pytest.fixture
def feature_store() -> FeatureStore:
    """Fresh feature store for a single test."""
    return FeatureStore()


@pytest.fixture
def client(user_store: UserStore, feature_store: FeatureStore):
    """Create a FastAPI test client backed by fresh stores."""
    app.dependency_overrides[get_user_store] = lambda: user_store
    app.dependency_overrides[get_feature_store] = lambda: feature_store
    yield TestClient(app)
    app.dependency_overrides.clear()
