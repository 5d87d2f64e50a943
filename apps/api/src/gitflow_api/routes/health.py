"""Health check routes."""

from gitflow_api.config import Settings, get_settings
from gitflow_api.models.health import HealthCheckResponse
from gitflow_api.services import get_feature_store, get_user_store
from gitflow_common.services.feature_store import FeatureStore
from gitflow_common.services.user_store import UserStore
from fastapi import APIRouter, Depends

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
    users: UserStore = Depends(get_user_store),
    features: FeatureStore = Depends(get_feature_store),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and record counts
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        user_count=len(users),
        feature_count=len(features),
    )
