"""Common services package."""

from gitflow_common.services.feature_store import FeatureStore
from gitflow_common.services.record_store import RecordStore
from gitflow_common.services.user_store import UserStore

__all__ = [
    "FeatureStore",
    "RecordStore",
    "UserStore",
]
