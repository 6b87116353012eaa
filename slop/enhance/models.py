"""Data models for prompt enhancement."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..models import CamelModel, SceneAnalysisResult


class TrendContext(CamelModel):
    """Trend awareness attached to an enhancement."""

    query: str
    trends: list[str] = Field(default_factory=list)
    summary: str
    searched_at: datetime


class ProcessingMetadata(CamelModel):
    """Cost and timing of one enhancement."""

    tokens_used: int = 0
    processing_time_ms: int = 0
    web_search_used: bool = False
    model: str
    timestamp: datetime


class EnhancementResult(CamelModel):
    """Enhanced Veo3 prompt text for a user prompt."""

    original_prompt: str
    enhanced_prompt: str
    enhanced_prompts: list[str] = Field(default_factory=list)
    scene_analysis: Optional[SceneAnalysisResult] = None
    trend_context: Optional[TrendContext] = None
    metadata: ProcessingMetadata
