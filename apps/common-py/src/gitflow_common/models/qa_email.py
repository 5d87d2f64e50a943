"""QA notification email models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IssueDetails(BaseModel):
    """Issue payload as exported by the CI workflow."""

    number: int | str
    title: str
    html_url: str = ""
    body: str | None = None
    labels: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class PullRequestDetails(BaseModel):
    """Merged pull request payload as exported by the CI workflow."""

    number: int | str
    title: str
    html_url: str = ""
    user: Any = None

    model_config = ConfigDict(extra="allow")


class QAEmail(BaseModel):
    """Generated email content."""

    subject: str
    body: str
    is_fallback: bool = False
