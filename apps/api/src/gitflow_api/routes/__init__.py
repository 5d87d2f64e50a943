"""Route initialization module."""

from gitflow_api.routes.feature import router as feature_router
from gitflow_api.routes.health import router as health_router
from gitflow_api.routes.root import router as root_router
from gitflow_api.routes.user import router as user_router
from gitflow_api.routes.workflow import router as workflow_router
from fastapi import APIRouter

# Create main API router
api_router = APIRouter(prefix="/api")


# Include sub-routers
api_router.include_router(health_router)
api_router.include_router(user_router)
api_router.include_router(feature_router)
api_router.include_router(workflow_router)


__all__ = ["api_router", "root_router"]
