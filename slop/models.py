"""
Core data models used across the application.

Includes models for:
- Scene breakdowns (one entry per 8-second video segment)
- Character descriptions used to keep a face consistent across scenes
- The aggregate scene analysis result returned to the frontend

All models serialize with camelCase field names so the JSON matches what
the browser client expects, while Python code uses snake_case attributes.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


MAX_SCENE_DURATION_SECONDS = 8
MAX_SCENES = 5
MAX_CHARACTERS = 3


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ============================================================================
# ENUMS
# ============================================================================


class Complexity(str, Enum):
    """Overall complexity of a prompt."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class RecommendedApproach(str, Enum):
    """How the video should be generated."""

    SINGLE = "single"
    MULTI_SCENE = "multi-scene"


# ============================================================================
# SCENE MODELS
# ============================================================================


class SceneInfo(CamelModel):
    """A single independently describable video segment."""

    scene_number: int = Field(ge=1)
    description: str
    duration: int = MAX_SCENE_DURATION_SECONDS
    characters: list[str] = Field(default_factory=list)
    visual_elements: list[str] = Field(default_factory=list, max_length=3)
    audio_elements: list[str] = Field(default_factory=list, max_length=3)


class CharacterDescription(CamelModel):
    """
    Visual description of one human character.

    The wording is meant to be pasted verbatim into every scene prompt so
    the video model renders the same face and outfit each time.
    """

    character_id: str = Field(pattern=r"^char_\d+$")
    name: str
    detailed_description: str
    age: str
    hair: str
    clothing: str
    facial_features: str
    accessories: str
    unique_identifiers: list[str] = Field(default_factory=list, max_length=3)


# ============================================================================
# INTERMEDIATE ANALYSIS RECORDS
# ============================================================================


class ComplexityAnalysis(CamelModel):
    """Output of the complexity classifier."""

    is_multi_scene: bool
    scene_count: int = Field(ge=1, le=MAX_SCENES)
    complexity: Complexity


class CharacterAnalysis(CamelModel):
    """Output of the character identifier."""

    requires_consistency: bool
    characters: list[str] = Field(default_factory=list, max_length=MAX_CHARACTERS)


# ============================================================================
# AGGREGATE RESULT
# ============================================================================


class SceneAnalysisResult(CamelModel):
    """Everything the frontend needs to plan a short-form video."""

    is_multi_scene: bool
    scene_count: int = Field(ge=1, le=MAX_SCENES)
    scenes: list[SceneInfo]
    complexity: Complexity
    recommended_approach: RecommendedApproach
    requires_character_consistency: bool
    character_descriptions: list[CharacterDescription] = Field(default_factory=list)
    scene_character_mappings: dict[int, list[str]] = Field(default_factory=dict)
