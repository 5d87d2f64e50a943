"""AI workflow self-checks exposed by the demo API."""

from datetime import UTC, datetime

from gitflow_common.models.workflow import WorkflowCheckResult

VALID_WORKFLOW_PATTERNS = ("ai-commit", "ai-pr", "ai-workflow")

SUITE_WORKFLOWS = (
    "ai-commit workflow",
    "ai-pr workflow",
    "ai-workflow complete",
    "invalid-workflow",
)


def validate_workflow(workflow_name: str) -> WorkflowCheckResult:
    """Check whether ``workflow_name`` refers to a known AI workflow."""
    started_at = datetime.now(UTC)

    if not workflow_name or not workflow_name.strip():
        return WorkflowCheckResult(success=False, message="Workflow name is required", timestamp=started_at)

    lowered = workflow_name.lower()
    is_valid = any(pattern in lowered for pattern in VALID_WORKFLOW_PATTERNS)
    message = (
        f"Workflow '{workflow_name}' validated successfully"
        if is_valid
        else f"Invalid workflow name: {workflow_name}"
    )
    return WorkflowCheckResult(success=is_valid, message=message, timestamp=started_at)


def format_result(result: WorkflowCheckResult) -> str:
    """Render a result as a single log-style line."""
    status = "✅ PASS" if result.success else "❌ FAIL"
    return f"[{result.timestamp.isoformat()}] {status}: {result.message}"


def run_suite() -> list[WorkflowCheckResult]:
    """Run the fixed workflow check suite."""
    return [validate_workflow(name) for name in SUITE_WORKFLOWS]
