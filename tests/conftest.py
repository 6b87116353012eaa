"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from slop.config import Config, LLMConfig
from slop.understanding import CompletionServiceError, LLMProvider, MockLLMProvider


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-llm-tests",
        action="store_true",
        default=False,
        help="Run LLM integration tests (expensive, makes real API calls)",
    )


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "llm_integration: mark test as requiring real LLM calls"
    )


def pytest_collection_modifyitems(config, items):
    """Skip LLM tests unless --run-llm-tests is provided."""
    if not config.getoption("--run-llm-tests", default=False):
        skip_llm = pytest.mark.skip(
            reason="LLM integration tests skipped. Use --run-llm-tests to run."
        )
        for item in items:
            if "llm_integration" in item.keywords:
                item.add_marker(skip_llm)


@pytest.fixture
def mock_config() -> Config:
    """Provide a test configuration with mock LLM provider."""
    return Config(llm=LLMConfig(provider="mock", api_key=""))


@pytest.fixture
def mock_llm(mock_config: Config) -> MockLLMProvider:
    """Deterministic completion service."""
    return MockLLMProvider(mock_config.llm)


@pytest.fixture
def failing_llm() -> MagicMock:
    """Completion service that fails every call."""
    llm = MagicMock(spec=LLMProvider)
    llm.complete.side_effect = CompletionServiceError("service unavailable")
    return llm


@pytest.fixture
def simple_prompt() -> str:
    """A prompt that fits in one 8-second clip."""
    return "A capybara relaxing in a hot spring while a monkey washes its back"


@pytest.fixture
def sequential_prompt() -> str:
    """A long prompt describing clearly separate events."""
    return (
        "A busy restaurant kitchen during the dinner rush. First, the chef preps "
        "ingredients. Then, after that, he accidentally starts a fire, and finally "
        "the fire department arrives. Steam rises from every pot while the line "
        "cooks shout orders across the room and the head waiter rushes plates out "
        "to hungry guests in the dining room."
    )
