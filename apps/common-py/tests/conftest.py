"""Pytest configuration for common-py tests."""

import pytest
from gitflow_common.services.feature_store import FeatureStore
from gitflow_common.services.user_store import UserStore


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests that make real API calls"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running"
    )


@pytest.fixture
def user_store() -> UserStore:
    """User store seeded with the three demo users."""
    return UserStore()


@pytest.fixture
def feature_store() -> FeatureStore:
    """Feature store seeded with the two demo features."""
    return FeatureStore()
