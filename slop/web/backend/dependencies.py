"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from ...analysis import SceneAnalysisService
from ...config import Config
from ...enhance import PromptEnhancer
from .config import WebConfig
from .rate_limit import RateLimiter, RateLimitExceeded


@lru_cache
def get_config() -> WebConfig:
    """Get the web configuration (cached)."""
    return WebConfig()


def get_app_config(request: Request) -> Config:
    """Get the application config the app was built with."""
    return request.app.state.app_config


def get_analysis_service(request: Request) -> SceneAnalysisService:
    """Get the shared scene analysis service."""
    return request.app.state.analysis_service


def get_enhancer(request: Request) -> PromptEnhancer:
    """Get the shared prompt enhancer."""
    return request.app.state.enhancer


def get_rate_limiter(request: Request) -> RateLimiter:
    """Get the shared rate limiter."""
    return request.app.state.rate_limiter


def client_key(request: Request) -> str:
    """Identify the caller, preferring the first forwarded address."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def enforce_rate_limit(
    request: Request,
    app_config: Annotated[Config, Depends(get_app_config)],
    limiter: Annotated[RateLimiter, Depends(get_rate_limiter)],
) -> None:
    """Reject the request with RateLimitExceeded when over budget."""
    if not app_config.rate_limit.enabled:
        return
    info = limiter.check(client_key(request))
    if not info.allowed:
        raise RateLimitExceeded(info)


# Type aliases for cleaner router signatures
AnalysisServiceDep = Annotated[SceneAnalysisService, Depends(get_analysis_service)]
EnhancerDep = Annotated[PromptEnhancer, Depends(get_enhancer)]
RateLimited = Depends(enforce_rate_limit)
