"""
Prompt enhancement for Veo3 video generation.

Builds on the scene analysis: single-scene prompts become one detailed
9:16 video prompt, multi-scene prompts become one ``SCENE:`` line per
8-second clip with the character descriptions repeated verbatim so each
clip renders the same people.
"""

import logging
import re
import time
from datetime import datetime, timezone

from ..config import Config
from ..models import SceneAnalysisResult
from ..analysis.prompts import (
    CHARACTER_CONSISTENCY_INSTRUCTIONS,
    ENHANCEMENT_SYSTEM_PROMPT,
    ENHANCEMENT_WEB_SEARCH_SYSTEM_PROMPT,
    MULTI_SCENE_ENHANCEMENT_INSTRUCTIONS,
    TREND_RESEARCH_SYSTEM_PROMPT,
    TREND_RESEARCH_USER_TEMPLATE,
)
from ..analysis.service import SceneAnalysisService
from ..analysis.validator import validate_prompt
from ..understanding.llm_provider import LLMProvider
from .models import EnhancementResult, ProcessingMetadata, TrendContext

logger = logging.getLogger(__name__)

FALLBACK_MODEL = "heuristic"
MAX_TRENDS = 5
TREND_SUMMARY_LENGTH = 200

_SCENE_LINE = re.compile(r"^SCENE:\s*")
_TREND_MARKERS = ("trend", "viral", "popular", "#")


def split_enhanced_prompts(enhanced_prompt: str) -> list[str]:
    """One prompt per ``SCENE:`` line, or the whole text as a single prompt."""
    if "SCENE:" not in enhanced_prompt:
        return [enhanced_prompt]

    prompts = []
    for line in enhanced_prompt.splitlines():
        stripped = line.strip()
        if stripped.startswith("SCENE:"):
            text = _SCENE_LINE.sub("", stripped).strip()
            if text:
                prompts.append(text)
    return prompts or [enhanced_prompt]


def parse_trends(content: str) -> list[str]:
    trends = [
        line.strip()
        for line in content.splitlines()
        if any(marker in line.lower() for marker in _TREND_MARKERS)
    ]
    return trends[:MAX_TRENDS]


def _character_block(analysis: SceneAnalysisResult | None) -> str:
    if analysis is None or not analysis.character_descriptions:
        return ""
    descriptions = "\n".join(
        f"- {character.name}: {character.detailed_description}"
        for character in analysis.character_descriptions
    )
    return CHARACTER_CONSISTENCY_INSTRUCTIONS.format(descriptions=descriptions)


def build_enhancement_request(prompt: str, analysis: SceneAnalysisResult | None) -> str:
    """User content for the enhancement call."""
    characters = _character_block(analysis)

    if analysis is None or not analysis.is_multi_scene:
        return f"{prompt}\n{characters}" if characters else prompt

    scenes = "\n".join(
        f"{scene.scene_number}. {scene.description}" for scene in analysis.scenes
    )
    instructions = MULTI_SCENE_ENHANCEMENT_INSTRUCTIONS.format(
        scene_count=analysis.scene_count,
        scenes=scenes,
        characters=characters,
    )
    return f'Prompt: "{prompt}"\n\n{instructions}'


def build_fallback_enhancement(prompt: str, analysis: SceneAnalysisResult | None) -> str:
    """Deterministic enhanced text assembled from the analysis alone."""
    if analysis is None or not analysis.is_multi_scene:
        text = f"{prompt} Vertical 9:16 video, single 8-second shot."
        if analysis is not None and analysis.character_descriptions:
            text += " " + " ".join(
                c.detailed_description for c in analysis.character_descriptions
            )
        return text

    by_id = {c.character_id: c for c in analysis.character_descriptions}
    lines = []
    for scene in analysis.scenes:
        line = f"SCENE: {scene.description}"
        appearances = [
            by_id[character_id].detailed_description
            for character_id in analysis.scene_character_mappings.get(scene.scene_number, [])
            if character_id in by_id
        ]
        if appearances:
            line += " " + " ".join(appearances)
        lines.append(line)
    return "\n".join(lines)


class PromptEnhancer:
    """Transforms user prompts into Veo3-ready video prompts."""

    def __init__(
        self,
        llm: LLMProvider,
        config: Config | None = None,
        analysis_service: SceneAnalysisService | None = None,
    ):
        """Initialize the enhancer.

        Args:
            llm: Completion service.
            config: Application config (model names, token budgets, validation).
            analysis_service: Scene analysis to layer on. Created if not provided.
        """
        self.llm = llm
        self.config = config or Config()
        self.analysis_service = analysis_service or SceneAnalysisService(
            llm, self.config.validation
        )

    def enhance(
        self,
        user_prompt: object,
        include_web_search: bool = False,
        include_scene_analysis: bool = True,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> EnhancementResult:
        """Enhance a prompt.

        Raises:
            PromptValidationError: If the prompt fails validation.
        """
        start = time.perf_counter()
        prompt = validate_prompt(user_prompt, self.config.validation)

        analysis = (
            self.analysis_service.analyze(prompt) if include_scene_analysis else None
        )

        system_prompt = (
            ENHANCEMENT_WEB_SEARCH_SYSTEM_PROMPT if include_web_search else ENHANCEMENT_SYSTEM_PROMPT
        )

        try:
            completion = self.llm.complete(
                build_enhancement_request(prompt, analysis),
                system_prompt=system_prompt,
                max_tokens=max_tokens or self.config.llm.max_tokens,
                temperature=temperature if temperature is not None else self.config.llm.temperature,
                model=self.config.llm.enhancement_model,
            )
            enhanced_prompt = completion.text.strip()
            tokens_used = completion.tokens_used
            model = completion.model or self.config.llm.enhancement_model
        except Exception as e:
            logger.warning("Enhancement unavailable, building prompt from analysis: %s", e)
            enhanced_prompt = build_fallback_enhancement(prompt, analysis)
            tokens_used = 0
            model = FALLBACK_MODEL

        now = datetime.now(timezone.utc)
        trend_context = None
        if include_web_search:
            trend_context = TrendContext(
                query=prompt,
                trends=["Current TikTok trends integrated", "Viral format awareness applied"],
                summary=f'Enhanced prompt with current trend awareness for "{prompt}"',
                searched_at=now,
            )

        return EnhancementResult(
            original_prompt=user_prompt if isinstance(user_prompt, str) else prompt,
            enhanced_prompt=enhanced_prompt,
            enhanced_prompts=split_enhanced_prompts(enhanced_prompt),
            scene_analysis=analysis,
            trend_context=trend_context,
            metadata=ProcessingMetadata(
                tokens_used=tokens_used,
                processing_time_ms=int((time.perf_counter() - start) * 1000),
                web_search_used=include_web_search,
                model=model,
                timestamp=now,
            ),
        )

    def research_trends(self, topic: str) -> TrendContext:
        """Ask the completion service for current trends around a topic."""
        try:
            completion = self.llm.complete(
                TREND_RESEARCH_USER_TEMPLATE.format(topic=topic),
                system_prompt=TREND_RESEARCH_SYSTEM_PROMPT,
                max_tokens=300,
                temperature=0.7,
                model=self.config.llm.enhancement_model,
            )
        except Exception as e:
            logger.warning("Trend research unavailable: %s", e)
            return TrendContext(
                query=topic,
                trends=[],
                summary=f'Unable to research trends for "{topic}" due to API limitations.',
                searched_at=datetime.now(timezone.utc),
            )

        content = completion.text
        summary = content[:TREND_SUMMARY_LENGTH]
        if len(content) > TREND_SUMMARY_LENGTH:
            summary += "..."
        return TrendContext(
            query=topic,
            trends=parse_trends(content),
            summary=summary,
            searched_at=datetime.now(timezone.utc),
        )
