"""Service initialization and dependency injection."""

import logging
import threading

from gitflow_common.services.feature_store import FeatureStore
from gitflow_common.services.user_store import UserStore

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache = {}
# Sync dependencies run in the thread pool; first use must build one instance only
_services_lock = threading.Lock()


def get_user_store() -> UserStore:
    """Get the process-wide user store.

    Returns:
        UserStore instance seeded with the demo users
    """
    with _services_lock:
        if "user_store" not in _services_cache:
            _services_cache["user_store"] = UserStore()
            logger.info("Initialized UserStore")

        return _services_cache["user_store"]


def get_feature_store() -> FeatureStore:
    """Get the process-wide feature store.

    Returns:
        FeatureStore instance seeded with the demo features
    """
    with _services_lock:
        if "feature_store" not in _services_cache:
            _services_cache["feature_store"] = FeatureStore()
            logger.info("Initialized FeatureStore")

        return _services_cache["feature_store"]
