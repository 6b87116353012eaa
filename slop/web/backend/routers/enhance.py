"""Prompt enhancement router."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ....analysis import PromptValidationError
from ..dependencies import EnhancerDep, RateLimited
from ..errors import ENHANCEMENT_FAILED, ApiError, method_not_allowed
from ..models.requests import EnhanceRequest
from ..models.responses import EnhanceData, EnhanceMetadata, EnhanceResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/openai", tags=["enhancement"])


@router.post(
    "/enhance",
    response_model=EnhanceResponse,
    response_model_exclude_none=True,
    dependencies=[RateLimited],
)
def enhance_prompt(
    request: EnhanceRequest,
    enhancer: EnhancerDep,
) -> EnhanceResponse:
    """Enhance a prompt into one Veo3 prompt per scene."""
    try:
        result = enhancer.enhance(
            request.prompt,
            include_web_search=request.include_web_search,
        )
    except PromptValidationError:
        raise
    except Exception as e:
        logger.exception("Prompt enhancement failed")
        raise ApiError(f"Failed to enhance prompt: {e}", ENHANCEMENT_FAILED)

    scene_count = (
        result.scene_analysis.scene_count
        if result.scene_analysis
        else len(result.enhanced_prompts)
    )
    logger.info(
        "Enhanced prompt into %d scene prompt(s) in %dms",
        len(result.enhanced_prompts),
        result.metadata.processing_time_ms,
    )

    return EnhanceResponse(
        data=EnhanceData(
            original_prompt=result.original_prompt,
            enhanced_prompts=result.enhanced_prompts,
            scene_count=scene_count,
            web_search_context=result.trend_context.summary if result.trend_context else None,
            metadata=EnhanceMetadata(
                processing_time=result.metadata.processing_time_ms,
                tokens_used=result.metadata.tokens_used,
            ),
        )
    )


@router.api_route(
    "/enhance",
    methods=["GET", "PUT", "DELETE", "PATCH"],
    include_in_schema=False,
)
def enhance_wrong_method(request: Request) -> JSONResponse:
    return method_not_allowed(request.method)
