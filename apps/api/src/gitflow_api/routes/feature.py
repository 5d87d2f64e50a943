"""Demo feature flag routes."""

from gitflow_api.models.envelope import ApiResponse
from gitflow_api.routes.params import parse_identifier
from gitflow_api.services import get_feature_store
from gitflow_common.models.feature import Feature
from gitflow_common.services.feature_store import FeatureStore
from fastapi import APIRouter, Depends, HTTPException, status

router = APIRouter(prefix="/features", tags=["features"], redirect_slashes=False)

FEATURE_NOT_FOUND = "Demo feature not found"


@router.get("", response_model=ApiResponse[list[Feature]])
@router.get("/", response_model=ApiResponse[list[Feature]])
async def list_features(store: FeatureStore = Depends(get_feature_store)) -> ApiResponse[list[Feature]]:
    return ApiResponse[list[Feature]](success=True, data=store.list_all(), message="Demo features retrieved successfully")


@router.get("/{feature_id}", response_model=ApiResponse[Feature])
async def get_feature(feature_id: str, store: FeatureStore = Depends(get_feature_store)) -> ApiResponse[Feature]:
    record_id = parse_identifier(feature_id)
    feature = store.get_by_id(record_id) if record_id is not None else None
    if feature is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=FEATURE_NOT_FOUND)
    return ApiResponse[Feature](success=True, data=feature, message="Demo feature retrieved successfully")


@router.post("/{feature_id}/toggle", response_model=ApiResponse[Feature])
async def toggle_feature(feature_id: str, store: FeatureStore = Depends(get_feature_store)) -> ApiResponse[Feature]:
    """Flip a feature's enabled flag."""
    record_id = parse_identifier(feature_id)
    feature = store.toggle_flag(record_id) if record_id is not None else None
    if feature is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=FEATURE_NOT_FOUND)
    return ApiResponse[Feature](success=True, data=feature, message="Demo feature toggled successfully")
