"""Prompt-to-scene analysis: validation, classification, characters and breakdown."""

from .breakdown import SceneBreakdownGenerator
from .characters import CharacterDescriptionGenerator, CharacterIdentifier
from .complexity import ComplexityClassifier
from .mapper import map_characters_to_scenes
from .sanitizer import sanitize
from .service import SceneAnalysisService
from .validator import PromptValidationError, ValidationErrorCode, validate_prompt

__all__ = [
    "CharacterDescriptionGenerator",
    "CharacterIdentifier",
    "ComplexityClassifier",
    "PromptValidationError",
    "SceneAnalysisService",
    "SceneBreakdownGenerator",
    "ValidationErrorCode",
    "map_characters_to_scenes",
    "sanitize",
    "validate_prompt",
]
