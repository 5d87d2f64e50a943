"""Feature flag record model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Feature(BaseModel):
    """Demo feature flag."""

    id: int = Field(..., description="Unique identifier for the feature")
    name: str = Field(..., description="Feature name")
    description: str = Field("", description="What the feature does")
    is_enabled: bool = Field(False, alias="isEnabled", description="Whether the feature is switched on")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp, set once")

    model_config = ConfigDict(populate_by_name=True)
