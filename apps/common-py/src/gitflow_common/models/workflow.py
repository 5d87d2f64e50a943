"""Workflow check models."""

from datetime import datetime

from pydantic import BaseModel, Field


class WorkflowCheckResult(BaseModel):
    """Result of validating a single AI workflow name."""

    success: bool = Field(..., description="Whether the workflow name is recognised")
    message: str = Field(..., description="Human-readable outcome")
    timestamp: datetime = Field(..., description="When the check started")
