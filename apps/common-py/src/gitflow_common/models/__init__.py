"""Common models package."""

from gitflow_common.models.feature import Feature
from gitflow_common.models.qa_email import IssueDetails, PullRequestDetails, QAEmail
from gitflow_common.models.user import User
from gitflow_common.models.validation import ValidationResult
from gitflow_common.models.workflow import WorkflowCheckResult

__all__ = [
    "Feature",
    "IssueDetails",
    "PullRequestDetails",
    "QAEmail",
    "User",
    "ValidationResult",
    "WorkflowCheckResult",
]
