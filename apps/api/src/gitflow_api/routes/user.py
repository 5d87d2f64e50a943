"""User API routes."""

import logging
from typing import Any

from gitflow_api.errors import ApiError
from gitflow_api.models.envelope import ApiResponse
from gitflow_api.routes.params import parse_identifier, to_field_names
from gitflow_api.services import get_user_store
from gitflow_common.models.user import User
from gitflow_common.services.user_store import UserStore
from gitflow_common.services.validation import validate_user_fields
from fastapi import APIRouter, Body, Depends, HTTPException, status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

USER_NOT_FOUND = "User not found"


def _check_fields(fields: dict[str, Any]) -> None:
    result = validate_user_fields(fields)
    if not result.is_valid:
        logger.info("Rejected user payload: %s", result.errors)
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Invalid user data", "; ".join(result.errors))


@router.get("", response_model=ApiResponse[list[User]])
@router.get("/", response_model=ApiResponse[list[User]])
async def list_users(store: UserStore = Depends(get_user_store)) -> ApiResponse[list[User]]:
    return ApiResponse[list[User]](success=True, data=store.list_all(), message="Users retrieved successfully")


@router.get("/{user_id}", response_model=ApiResponse[User])
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> ApiResponse[User]:
    record_id = parse_identifier(user_id)
    user = store.get_by_id(record_id) if record_id is not None else None
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return ApiResponse[User](success=True, data=user, message="User retrieved successfully")


@router.post("", response_model=ApiResponse[User], status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ApiResponse[User], status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: dict[str, Any] = Body(...),
    store: UserStore = Depends(get_user_store),
) -> ApiResponse[User]:
    """Create a user.

    ``name`` and ``email`` are required; ``isActive`` defaults to true.
    """
    fields = {"name": None, "email": None} | to_field_names(payload, User)
    _check_fields(fields)
    user = store.create(fields)
    return ApiResponse[User](success=True, data=user, message="User created successfully")


@router.patch("/{user_id}", response_model=ApiResponse[User])
async def update_user(
    user_id: str,
    payload: dict[str, Any] = Body(...),
    store: UserStore = Depends(get_user_store),
) -> ApiResponse[User]:
    """Apply a partial update. Unknown fields are ignored."""
    record_id = parse_identifier(user_id)
    if record_id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)

    fields = to_field_names(payload, User)
    _check_fields(fields)
    user = store.update(record_id, fields)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return ApiResponse[User](success=True, data=user, message="User updated successfully")


@router.delete("/{user_id}", response_model=ApiResponse[bool])
async def delete_user(user_id: str, store: UserStore = Depends(get_user_store)) -> ApiResponse[bool]:
    record_id = parse_identifier(user_id)
    if record_id is None or not store.delete(record_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return ApiResponse[bool](success=True, data=True, message="User deleted successfully")
