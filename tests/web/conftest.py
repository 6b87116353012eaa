"""Test fixtures for web backend tests."""

import pytest
from fastapi.testclient import TestClient

from slop.config import Config, LLMConfig
from slop.understanding import MockLLMProvider
from slop.web.backend.app import create_app
from slop.web.backend.config import WebConfig
from slop.web.backend.rate_limit import LimitsRateLimiter


@pytest.fixture
def web_config() -> WebConfig:
    """Web configuration for tests."""
    return WebConfig(config_path=None)


@pytest.fixture
def app_config() -> Config:
    """Application configuration using the mock provider."""
    return Config(llm=LLMConfig(provider="mock", api_key=""))


@pytest.fixture
def rate_limiter() -> LimitsRateLimiter:
    """A generous limiter so functional tests are never throttled."""
    return LimitsRateLimiter(max_requests=1000, window_seconds=60)


@pytest.fixture
def test_client(
    web_config: WebConfig, app_config: Config, rate_limiter: LimitsRateLimiter
) -> TestClient:
    """Create a test client backed by the mock completion service."""
    app = create_app(
        config=web_config,
        app_config=app_config,
        llm=MockLLMProvider(app_config.llm),
        rate_limiter=rate_limiter,
    )
    return TestClient(app)
