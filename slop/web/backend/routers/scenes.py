"""Combined enhancement and scene analysis router."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ....analysis import PromptValidationError
from ..dependencies import EnhancerDep, RateLimited
from ..errors import ANALYSIS_FAILED, ApiError, method_not_allowed
from ..models.requests import EnhanceRequest
from ..models.responses import AnalyzeScenesMetadata, AnalyzeScenesResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


@router.post(
    "/analyze-scenes",
    response_model=AnalyzeScenesResponse,
    response_model_exclude_none=True,
    dependencies=[RateLimited],
)
def analyze_scenes(
    request: EnhanceRequest,
    enhancer: EnhancerDep,
) -> AnalyzeScenesResponse:
    """Enhance a prompt and return the full scene analysis alongside it."""
    try:
        result = enhancer.enhance(
            request.prompt,
            include_web_search=request.include_web_search,
            include_scene_analysis=True,
        )
    except PromptValidationError:
        raise
    except Exception as e:
        logger.exception("Scene analysis failed")
        raise ApiError(f"Failed to analyze scenes: {e}", ANALYSIS_FAILED)

    return AnalyzeScenesResponse(
        original_prompt=result.original_prompt,
        enhanced_prompt=result.enhanced_prompt,
        scene_analysis=result.scene_analysis,
        metadata=AnalyzeScenesMetadata(
            tokens_used=result.metadata.tokens_used,
            processing_time=result.metadata.processing_time_ms,
            model=result.metadata.model,
            timestamp=result.metadata.timestamp,
        ),
    )


@router.api_route(
    "/analyze-scenes",
    methods=["GET", "PUT", "DELETE", "PATCH"],
    include_in_schema=False,
)
def analyze_scenes_wrong_method(request: Request) -> JSONResponse:
    return method_not_allowed(request.method)
