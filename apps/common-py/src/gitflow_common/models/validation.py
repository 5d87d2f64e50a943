"""Validation result model."""

from pydantic import BaseModel, ConfigDict, Field


class ValidationResult(BaseModel):
    """Outcome of a validation check.

    Every violated rule is listed in ``errors``; the check never stops at the
    first failure.
    """

    is_valid: bool = Field(..., alias="isValid")
    errors: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=errors)
