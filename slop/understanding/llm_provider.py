"""LLM Provider abstraction and implementations."""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

import openai

from ..config import Config, LLMConfig

logger = logging.getLogger(__name__)


class CompletionServiceError(Exception):
    """The completion service could not produce a usable response."""

    pass


@dataclass(frozen=True)
class Completion:
    """Text returned by one completion call."""

    text: str
    tokens_used: int = 0
    model: str = ""


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    def __init__(self, config: LLMConfig):
        self.config = config

    @abstractmethod
    def complete(
        self,
        prompt: str,
        system_prompt: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        model: str | None = None,
    ) -> Completion:
        """Run one completion request.

        Args:
            prompt: The user content
            system_prompt: Optional system instruction
            max_tokens: Response token budget (defaults to config)
            temperature: Sampling temperature (defaults to config)
            model: Model override (defaults to config.model)

        Returns:
            The completion text with usage information

        Raises:
            CompletionServiceError: If the service fails or returns nothing
        """
        pass

class OpenAILLMProvider(LLMProvider):
    """LLM provider backed by the OpenAI chat completions API.

    The SDK client is created on first use so a missing API key only
    surfaces as a CompletionServiceError, which callers turn into their
    heuristic fallback.
    """

    def __init__(self, config: LLMConfig, client: openai.OpenAI | None = None):
        super().__init__(config)
        self._client = client

    def _get_client(self) -> openai.OpenAI:
        if self._client is None:
            if not self.config.api_key:
                raise CompletionServiceError(
                    "OPENAI_API_KEY environment variable is required. "
                    "Add it to your .env file."
                )
            self._client = openai.OpenAI(
                api_key=self.config.api_key,
                timeout=self.config.timeout,
                max_retries=self.config.max_retries,
            )
        return self._client

    def complete(
        self,
        prompt: str,
        system_prompt: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        model: str | None = None,
    ) -> Completion:
        client = self._get_client()

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = client.chat.completions.create(
                model=model or self.config.model,
                messages=messages,
                max_tokens=max_tokens or self.config.max_tokens,
                temperature=(
                    temperature if temperature is not None else self.config.temperature
                ),
            )
        except openai.OpenAIError as e:
            raise CompletionServiceError(describe_openai_error(e)) from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise CompletionServiceError("No content returned from OpenAI")

        tokens_used = response.usage.total_tokens if response.usage else 0
        return Completion(text=content, tokens_used=tokens_used, model=response.model)


def describe_openai_error(error: Exception) -> str:
    """Turn an OpenAI SDK error into a user-facing message."""
    if isinstance(error, openai.AuthenticationError):
        return "Invalid OpenAI API key. Please check your configuration."
    if isinstance(error, openai.RateLimitError):
        return "OpenAI API rate limit exceeded. Please try again in a moment."
    if isinstance(error, openai.BadRequestError):
        return "Invalid request format. Please check your prompt and try again."
    if isinstance(error, openai.APITimeoutError):
        return "Request to OpenAI timed out. Please try again."
    if isinstance(error, openai.APIConnectionError):
        return "Network error. Please check your connection and try again."
    if isinstance(error, openai.InternalServerError):
        return "OpenAI service is temporarily unavailable. Please try again later."
    return f"OpenAI API error: {error}"


class MockLLMProvider(LLMProvider):
    """Mock LLM provider that returns deterministic responses for testing.

    Each call site is recognised by its system instruction, so the mock
    can stand in for the whole scene analysis and enhancement pipeline
    without an API key.
    """

    HUMAN_WORDS = ["person", "man", "woman", "guy", "girl", "chef", "teacher", "friend", "worker"]

    def complete(
        self,
        prompt: str,
        system_prompt: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        model: str | None = None,
    ) -> Completion:
        system_lower = (system_prompt or "").lower()

        if "scene analyst" in system_lower:
            text = self._mock_complexity(prompt)
        elif "character analyst" in system_lower:
            text = self._mock_characters(prompt)
        elif "character designer" in system_lower:
            text = self._mock_character_description(prompt)
        elif "scene director" in system_lower:
            text = self._mock_scene_breakdown(prompt)
        elif "trend researcher" in system_lower:
            text = self._mock_trends(prompt)
        elif "video content creator" in system_lower:
            text = self._mock_enhancement(prompt)
        else:
            raise CompletionServiceError("Mock provider has no response for this instruction")

        return Completion(
            text=text,
            tokens_used=len(text.split()),
            model=model or "mock",
        )

    def _mock_complexity(self, prompt: str) -> str:
        lower = prompt.lower()
        if "then" in lower and ("finally" in lower or "later" in lower):
            return (
                "The prompt describes sequential events. "
                "Recommendation: multiple scenes, 3 scenes."
            )
        return (
            "The action fits comfortably in one 8-second clip. "
            "Recommendation: single scene."
        )

    def _mock_characters(self, prompt: str) -> str:
        lower = prompt.lower()
        found = [
            word for word in self.HUMAN_WORDS
            if re.search(rf"\b{word}s?\b", lower)
        ]
        if not found:
            return "No human characters found."
        lines = ["Human characters found:"]
        lines.extend(f"- {word}" for word in found)
        return "\n".join(lines)

    def _mock_character_description(self, prompt: str) -> str:
        match = re.search(r'Character:\s*"([^"]*)"', prompt)
        name = match.group(1) if match else "person"
        return (
            f"The {name} is a confident adult, age early 30s, with an upright posture. "
            "Short curly black hair with a neat side part. "
            "Bright hazel eyes, thick eyebrows and a warm, friendly smile. "
            "Wears a navy blue denim apron over a crisp white linen shirt. "
            "Accessories include a silver wristwatch and minimal gold jewelry. "
            "A distinctive small scar above the left eyebrow."
        )

    def _mock_scene_breakdown(self, prompt: str) -> str:
        match = re.search(r"into (\d+) scenes", prompt)
        count = int(match.group(1)) if match else 2
        return "\n".join(
            f"SCENE: Part {n} of the story unfolds in a bright kitchen. "
            "Visual: handheld close-up under warm lighting. "
            "Audio: upbeat music and ambient kitchen sound."
            for n in range(1, count + 1)
        )

    def _mock_trends(self, prompt: str) -> str:
        return (
            "Current trends for this topic:\n"
            "- Fast cuts synced to a trending audio clip\n"
            "- POV framing is going viral this week\n"
            "- Popular hashtags: #fyp #viral\n"
            "Keep the hook in the first second."
        )

    def _mock_enhancement(self, prompt: str) -> str:
        match = re.search(r"exactly (\d+) lines", prompt)
        if match:
            count = int(match.group(1))
            return "\n".join(
                f"SCENE: Vertical 9:16 shot {n}, cinematic lighting, smooth camera "
                "move, upbeat background music."
                for n in range(1, count + 1)
            )
        return (
            "A vertical 9:16 cinematic shot with warm natural lighting and a slow "
            "push-in camera move. Upbeat background music plays as the action "
            "unfolds in a single continuous 8-second take."
        )


def get_llm_provider(config: Config | None = None) -> LLMProvider:
    """Get the appropriate LLM provider based on configuration.

    Args:
        config: Configuration object. If None, loads default config.

    Returns:
        An LLM provider instance.

    Raises:
        ValueError: If provider name is not recognized.
    """
    if config is None:
        from ..config import load_config

        config = load_config()

    provider_name = config.llm.provider.lower()

    if provider_name == "mock":
        return MockLLMProvider(config.llm)
    elif provider_name == "openai":
        return OpenAILLMProvider(config.llm)
    else:
        raise ValueError(f"Unknown LLM provider: {provider_name}")
