"""Health check response models."""

from pydantic import BaseModel, ConfigDict, Field


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str | None = None
    user_count: int = Field(0, alias="userCount")
    feature_count: int = Field(0, alias="featureCount")
    message: str = "API is healthy"

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "status": "ok",
                "version": "0.1.0",
                "environment": "development",
                "userCount": 3,
                "featureCount": 2,
                "message": "API is healthy",
            }
        },
    )
