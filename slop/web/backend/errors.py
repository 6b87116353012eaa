"""JSON error envelope and exception handlers."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...analysis.validator import PromptValidationError
from .models.responses import ApiErrorResponse
from .rate_limit import RateLimitExceeded

logger = logging.getLogger(__name__)

INVALID_REQUEST_FORMAT = "INVALID_REQUEST_FORMAT"
RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
ANALYSIS_FAILED = "ANALYSIS_FAILED"
ENHANCEMENT_FAILED = "ENHANCEMENT_FAILED"
METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"


class ApiError(Exception):
    """An error that maps directly onto an HTTP error response."""

    def __init__(self, message: str, code: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


def error_response(
    message: str,
    code: str,
    status_code: int,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ApiErrorResponse(
        error=message,
        code=code,
        status=status_code,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


def method_not_allowed(method: str) -> JSONResponse:
    return error_response(
        f"Method {method} not supported. Use POST.",
        METHOD_NOT_ALLOWED,
        status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": "POST"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain errors into the JSON error envelope."""

    @app.exception_handler(PromptValidationError)
    async def handle_prompt_validation(request: Request, exc: PromptValidationError) -> JSONResponse:
        logger.warning("Validation failed: %s", exc.message)
        return error_response(exc.message, exc.code.value, status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Malformed request body on %s", request.url.path)
        return error_response(
            "Request body must be a valid JSON object",
            INVALID_REQUEST_FORMAT,
            status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limit(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        info = exc.info
        logger.warning("Rate limit exceeded on %s", request.url.path)
        return error_response(
            str(exc),
            RATE_LIMIT_EXCEEDED,
            status.HTTP_429_TOO_MANY_REQUESTS,
            headers={
                "Retry-After": str(info.retry_after_seconds),
                "X-RateLimit-Limit": str(info.limit),
                "X-RateLimit-Remaining": str(info.remaining),
                "X-RateLimit-Reset": str(int(info.reset_at * 1000)),
            },
        )

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        return error_response(exc.message, exc.code, exc.status_code)
