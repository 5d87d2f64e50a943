"""User record model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User entity model."""

    id: int = Field(..., description="Unique identifier for the user")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp, set once")
    is_active: bool = Field(True, alias="isActive", description="Whether the user account is active")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "John Doe",
                "email": "john.doe@example.com",
                "createdAt": "2024-01-01T00:00:00Z",
                "isActive": True,
            }
        },
    )
