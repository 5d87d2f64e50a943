"""Root welcome route."""

from gitflow_api.models.envelope import ApiResponse
from fastapi import APIRouter

router = APIRouter(tags=["root"])


@router.get("/", response_model=ApiResponse[str])
async def welcome() -> ApiResponse[str]:
    return ApiResponse[str](
        success=True,
        data="Hello World! Git Flow Demo API",
        message="Welcome to the demo application",
    )
