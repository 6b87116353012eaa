"""Veo3 prompt enhancement layered on scene analysis."""

from .enhancer import PromptEnhancer, split_enhanced_prompts
from .models import EnhancementResult, ProcessingMetadata, TrendContext

__all__ = [
    "EnhancementResult",
    "ProcessingMetadata",
    "PromptEnhancer",
    "TrendContext",
    "split_enhanced_prompts",
]
