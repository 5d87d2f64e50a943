"""API response models."""

from gitflow_api.models.envelope import ApiResponse, error_content
from gitflow_api.models.health import HealthCheckResponse

__all__ = ["ApiResponse", "HealthCheckResponse", "error_content"]
