"""In-memory feature flag store."""

import logging
from datetime import UTC, datetime

from gitflow_common.models.feature import Feature
from gitflow_common.services.record_store import RecordStore

logger = logging.getLogger(__name__)

SEED_FEATURES = [
    Feature(
        id=1,
        name="Git Flow Integration",
        description="Complete Git Flow workflow with branch protection",
        is_enabled=True,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    ),
    Feature(
        id=2,
        name="CI/CD Pipeline",
        description="GitHub Actions with lint, test, build, and security checks",
        is_enabled=True,
        created_at=datetime(2024, 1, 2, tzinfo=UTC),
    ),
]


class FeatureStore(RecordStore[Feature]):
    """Store for demo feature flags."""

    record_type = Feature

    def __init__(self, features: list[Feature] | None = None) -> None:
        super().__init__(SEED_FEATURES if features is None else features)

    def toggle_flag(self, feature_id: int) -> Feature | None:
        """Flip a feature's enabled flag.

        Args:
            feature_id: Identifier of the feature to toggle

        Returns:
            The updated feature, or None if no feature has ``feature_id``
        """
        with self._lock:
            index = self._find_index(feature_id)
            if index is None:
                return None

            feature = self._records[index]
            feature.is_enabled = not feature.is_enabled
            logger.info("Feature %s is now %s", feature_id, "enabled" if feature.is_enabled else "disabled")
            return self._copy(feature)
