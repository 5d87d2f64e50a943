"""Uniform response envelope for every API route."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope wrapping a route result."""

    success: bool = Field(..., description="Whether the request succeeded")
    data: DataT | None = Field(None, description="Result payload, null on failure")
    message: str = Field(..., description="Human-readable outcome")
    error: str | None = Field(None, description="Error detail, if any")


def error_content(message: str, error: str | None = None) -> dict[str, Any]:
    """Failure envelope as a JSON-ready dict."""
    return ApiResponse[None](success=False, message=message, error=error).model_dump()
