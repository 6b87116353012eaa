"""Completion service providers."""

from .llm_provider import (
    Completion,
    CompletionServiceError,
    LLMProvider,
    MockLLMProvider,
    OpenAILLMProvider,
    get_llm_provider,
)

__all__ = [
    "Completion",
    "CompletionServiceError",
    "LLMProvider",
    "MockLLMProvider",
    "OpenAILLMProvider",
    "get_llm_provider",
]
