"""Scene analysis router."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ....analysis import PromptValidationError
from ..dependencies import AnalysisServiceDep, RateLimited
from ..errors import ANALYSIS_FAILED, ApiError, method_not_allowed
from ..models.requests import AnalyzeRequest
from ..models.responses import AnalyzeData, AnalyzeResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/openai", tags=["analysis"])


@router.post("/analyze", response_model=AnalyzeResponse, dependencies=[RateLimited])
def analyze_prompt(
    request: AnalyzeRequest,
    service: AnalysisServiceDep,
) -> AnalyzeResponse:
    """Analyze a prompt into scenes, characters and complexity."""
    try:
        result = service.analyze(request.prompt)
    except PromptValidationError:
        raise
    except Exception as e:
        logger.exception("Scene analysis failed")
        raise ApiError(f"Failed to analyze prompt: {e}", ANALYSIS_FAILED)

    logger.info(
        "Analyzed prompt: %d scene(s), %s",
        result.scene_count,
        result.complexity.value,
    )
    return AnalyzeResponse(data=AnalyzeData.from_result(result))


@router.api_route(
    "/analyze",
    methods=["GET", "PUT", "DELETE", "PATCH"],
    include_in_schema=False,
)
def analyze_wrong_method(request: Request) -> JSONResponse:
    return method_not_allowed(request.method)
