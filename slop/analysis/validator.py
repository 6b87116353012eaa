"""Prompt validation."""

from enum import Enum
from typing import Any

from ..config import ValidationConfig
from .sanitizer import sanitize


class ValidationErrorCode(str, Enum):
    """Machine-readable reasons a prompt was rejected."""

    INVALID_PROMPT_TYPE = "INVALID_PROMPT_TYPE"
    MISSING_PROMPT = "MISSING_PROMPT"
    PROMPT_TOO_SHORT = "PROMPT_TOO_SHORT"
    PROMPT_TOO_LONG = "PROMPT_TOO_LONG"
    FORBIDDEN_CONTENT = "FORBIDDEN_CONTENT"


class PromptValidationError(ValueError):
    """A user-supplied prompt was rejected."""

    def __init__(self, message: str, code: ValidationErrorCode):
        super().__init__(message)
        self.message = message
        self.code = code


def validate_prompt(raw: Any, config: ValidationConfig | None = None) -> str:
    """Validate and sanitize a user prompt.

    Args:
        raw: The prompt exactly as received from the client
        config: Length bounds and blocklist (defaults apply if omitted)

    Returns:
        The sanitized prompt

    Raises:
        PromptValidationError: If the prompt is not usable
    """
    config = config or ValidationConfig()

    if not isinstance(raw, str):
        raise PromptValidationError(
            "Prompt must be a string", ValidationErrorCode.INVALID_PROMPT_TYPE
        )

    sanitized = sanitize(raw)

    if not sanitized:
        raise PromptValidationError(
            "Prompt is required and cannot be empty", ValidationErrorCode.MISSING_PROMPT
        )

    if len(sanitized) < config.min_length:
        raise PromptValidationError(
            f"Prompt must be at least {config.min_length} character long",
            ValidationErrorCode.PROMPT_TOO_SHORT,
        )

    if len(sanitized) > config.max_length:
        raise PromptValidationError(
            f"Prompt must be no more than {config.max_length} characters long",
            ValidationErrorCode.PROMPT_TOO_LONG,
        )

    lower_prompt = sanitized.lower()
    for word in config.forbidden_words:
        if word.lower() in lower_prompt:
            raise PromptValidationError(
                "Prompt contains inappropriate content",
                ValidationErrorCode.FORBIDDEN_CONTENT,
            )

    return sanitized
