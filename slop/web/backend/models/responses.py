"""Pydantic response models for API endpoints."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from ....models import (
    CamelModel,
    CharacterDescription,
    Complexity,
    RecommendedApproach,
    SceneAnalysisResult,
    SceneInfo,
)


class ApiErrorResponse(CamelModel):
    """Error envelope shared by every endpoint."""

    success: Literal[False] = False
    error: str
    code: str
    status: int
    timestamp: datetime


class SceneBreakdown(CamelModel):
    """One scene as shown in the analyze response."""

    scene_number: int
    description: str
    duration: int
    characters: list[str]

    @classmethod
    def from_scene(cls, scene: SceneInfo) -> "SceneBreakdown":
        return cls(
            scene_number=scene.scene_number,
            description=scene.description,
            duration=scene.duration,
            characters=list(scene.characters),
        )


class AnalyzeData(CamelModel):
    """Scene analysis payload."""

    scene_count: int
    scene_breakdown: list[SceneBreakdown]
    complexity: Complexity
    recommended_approach: RecommendedApproach
    is_multi_scene: bool
    requires_character_consistency: bool
    character_descriptions: list[CharacterDescription] = Field(default_factory=list)
    scene_character_mappings: dict[int, list[str]] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: SceneAnalysisResult) -> "AnalyzeData":
        return cls(
            scene_count=result.scene_count,
            scene_breakdown=[SceneBreakdown.from_scene(scene) for scene in result.scenes],
            complexity=result.complexity,
            recommended_approach=result.recommended_approach,
            is_multi_scene=result.is_multi_scene,
            requires_character_consistency=result.requires_character_consistency,
            character_descriptions=list(result.character_descriptions),
            scene_character_mappings=dict(result.scene_character_mappings),
        )


class AnalyzeResponse(CamelModel):
    """Response for POST /api/openai/analyze."""

    success: Literal[True] = True
    data: AnalyzeData


class EnhanceMetadata(CamelModel):
    """Timing and token usage of an enhancement."""

    processing_time: int
    tokens_used: int


class EnhanceData(CamelModel):
    """Enhanced prompts ready for video generation."""

    original_prompt: str
    enhanced_prompts: list[str]
    scene_count: int
    web_search_context: Optional[str] = None
    metadata: EnhanceMetadata


class EnhanceResponse(CamelModel):
    """Response for POST /api/openai/enhance."""

    success: Literal[True] = True
    data: EnhanceData


class AnalyzeScenesMetadata(CamelModel):
    """Metadata for the combined analyze-scenes endpoint."""

    tokens_used: int
    processing_time: int
    model: str
    timestamp: datetime


class AnalyzeScenesResponse(CamelModel):
    """Response for POST /api/analyze-scenes."""

    success: Literal[True] = True
    original_prompt: str
    enhanced_prompt: str
    scene_analysis: Optional[SceneAnalysisResult] = None
    metadata: AnalyzeScenesMetadata
