"""FastAPI application factory."""

import logging
import time

from dotenv import find_dotenv, load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ...analysis import SceneAnalysisService
from ...config import Config, load_config
from ...enhance import PromptEnhancer
from ...understanding import LLMProvider, get_llm_provider
from .config import WebConfig
from .dependencies import get_config
from .errors import register_exception_handlers
from .rate_limit import LimitsRateLimiter, RateLimiter
from .routers import analyze_router, enhance_router, scenes_router

logger = logging.getLogger(__name__)


def create_app(
    config: WebConfig | None = None,
    app_config: Config | None = None,
    llm: LLMProvider | None = None,
    rate_limiter: RateLimiter | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Services are built once here and shared through ``app.state``.

    Args:
        config: Optional web configuration. Uses defaults if not provided.
        app_config: Optional application config. Loaded from
            ``config.config_path`` (or ``config.yaml``) if not provided.
        llm: Optional completion service. Chosen from ``app_config`` if not provided.
        rate_limiter: Optional rate limiter. In-memory if not provided.

    Returns:
        The FastAPI application.
    """
    if config is None or app_config is None:
        # Settings below read the environment, so .env must be loaded first
        load_dotenv(find_dotenv(usecwd=True))
    if config is None:
        config = get_config()
    if app_config is None:
        app_config = load_config(config.config_path)
    if llm is None:
        llm = get_llm_provider(app_config)
    if rate_limiter is None:
        rate_limiter = LimitsRateLimiter(
            max_requests=app_config.rate_limit.max_requests,
            window_seconds=app_config.rate_limit.window_seconds,
        )

    app = FastAPI(
        title="Slop API",
        description="Scene analysis and Veo3 prompt enhancement for short-form video",
        version="0.1.0",
    )

    analysis_service = SceneAnalysisService(llm, app_config.validation)
    app.state.app_config = app_config
    app.state.llm = llm
    app.state.analysis_service = analysis_service
    app.state.enhancer = PromptEnhancer(llm, app_config, analysis_service)
    app.state.rate_limiter = rate_limiter

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.0fms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    register_exception_handlers(app)

    # Include routers
    app.include_router(analyze_router, prefix="/api")
    app.include_router(enhance_router, prefix="/api")
    app.include_router(scenes_router, prefix="/api")

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    logger.info("Slop API ready (provider: %s)", type(llm).__name__)
    return app
