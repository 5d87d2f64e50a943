"""AI workflow self-check routes."""

from gitflow_api.models.envelope import ApiResponse
from gitflow_common.services.workflow_check import format_result, run_suite
from fastapi import APIRouter

router = APIRouter(prefix="/test", tags=["workflow"])


@router.get("/ai-workflow", response_model=ApiResponse[list[str]])
async def run_ai_workflow_checks() -> ApiResponse[list[str]]:
    """Run the AI workflow check suite and return formatted results."""
    results = [format_result(result) for result in run_suite()]
    return ApiResponse[list[str]](success=True, data=results, message="AI workflow test suite completed")
