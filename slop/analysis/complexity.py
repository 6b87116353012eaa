"""
Single vs multi-scene classification.

TikTok content defaults to one 8-second scene. A prompt is only split
into several scenes when it passes a deliberately conservative gate:

1. at least two distinct strong sequence keywords appear,
2. the prompt is longer than 250 characters, and
3. "then" is used together with "after", "later" or "finally".

The completion service is consulted for an explicit scene count, but it
cannot turn a prompt that fails the gate into a multi-scene one.
"""

import logging
import re

from ..models import MAX_SCENES, Complexity, ComplexityAnalysis
from ..understanding.llm_provider import LLMProvider
from .prompts import SCENE_ANALYSIS_SYSTEM_PROMPT, SCENE_ANALYSIS_USER_TEMPLATE

logger = logging.getLogger(__name__)

STRONG_SEQUENCE_KEYWORDS = [
    "then",
    "next",
    "after that",
    "later",
    "finally",
    "first",
    "second",
    "third",
    "step 1",
    "step 2",
    "step 3",
    "part 1",
    "part 2",
    "part 3",
]

MULTI_SCENE_MIN_LENGTH = 250
MIN_MULTI_SCENE_COUNT = 2
MIN_SPLIT_SEGMENTS = 3

SEQUENCE_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(kw) for kw in STRONG_SEQUENCE_KEYWORDS) + r")\b",
    re.IGNORECASE,
)
_KEYWORD_PATTERNS = [
    re.compile(rf"\b{re.escape(kw)}\b", re.IGNORECASE) for kw in STRONG_SEQUENCE_KEYWORDS
]
_THEN_WORD = re.compile(r"\bthen\b", re.IGNORECASE)
_CLOSING_WORDS = ("after", "later", "finally")
_MULTI_RECOMMENDATION = re.compile(
    r"\b(?:multiple|several|multi-scene|multi scene)\b", re.IGNORECASE
)
_SCENE_COUNT = re.compile(r"(\d+)\s*scenes?\b", re.IGNORECASE)


def count_distinct_keywords(prompt: str) -> int:
    """Number of different strong sequence keywords present."""
    return sum(1 for pattern in _KEYWORD_PATTERNS if pattern.search(prompt))


def passes_multi_scene_gate(prompt: str) -> bool:
    """All three multi-scene conditions hold."""
    lower = prompt.lower()
    has_keywords = count_distinct_keywords(prompt) >= 2
    is_long = len(prompt) > MULTI_SCENE_MIN_LENGTH
    has_then_sequence = bool(_THEN_WORD.search(lower)) and any(
        word in lower for word in _CLOSING_WORDS
    )
    return has_keywords and is_long and has_then_sequence


def clamp_scene_count(count: int) -> int:
    return max(MIN_MULTI_SCENE_COUNT, min(count, MAX_SCENES))


def estimate_scene_count(prompt: str) -> int:
    """One scene plus one per sequence keyword occurrence, kept within 2-5."""
    return clamp_scene_count(1 + len(SEQUENCE_PATTERN.findall(prompt)))


def label_complexity(is_multi_scene: bool, scene_count: int) -> Complexity:
    if not is_multi_scene:
        return Complexity.SIMPLE
    if scene_count > 2:
        return Complexity.COMPLEX
    return Complexity.MODERATE


def _build_analysis(is_multi_scene: bool, scene_count: int) -> ComplexityAnalysis:
    if not is_multi_scene:
        scene_count = 1
    return ComplexityAnalysis(
        is_multi_scene=is_multi_scene,
        scene_count=scene_count,
        complexity=label_complexity(is_multi_scene, scene_count),
    )


class ComplexityClassifier:
    """Decides how many 8-second scenes a prompt needs."""

    def __init__(self, llm: LLMProvider):
        self.llm = llm

    def classify(self, prompt: str) -> ComplexityAnalysis:
        """Classify a sanitized prompt, falling back to heuristics on failure."""
        try:
            completion = self.llm.complete(
                SCENE_ANALYSIS_USER_TEMPLATE.format(prompt=prompt),
                system_prompt=SCENE_ANALYSIS_SYSTEM_PROMPT,
                max_tokens=300,
                temperature=0.3,
            )
        except Exception as e:
            logger.warning("Scene analysis unavailable, using heuristic: %s", e)
            return self.classify_heuristic(prompt)

        return self._interpret(prompt, completion.text)

    def _interpret(self, prompt: str, analysis_text: str) -> ComplexityAnalysis:
        recommends_multi = bool(_MULTI_RECOMMENDATION.search(analysis_text))
        is_multi_scene = passes_multi_scene_gate(prompt)

        if not is_multi_scene:
            if recommends_multi:
                logger.debug("Ignoring multi-scene recommendation for short-form prompt")
            return _build_analysis(False, 1)

        scene_count = estimate_scene_count(prompt)
        match = _SCENE_COUNT.search(analysis_text)
        if recommends_multi and match:
            scene_count = clamp_scene_count(int(match.group(1)))

        return _build_analysis(True, scene_count)

    def classify_heuristic(self, prompt: str) -> ComplexityAnalysis:
        """Deterministic classification without the completion service."""
        segments = SEQUENCE_PATTERN.split(prompt)
        is_multi_scene = passes_multi_scene_gate(prompt) and len(segments) > MIN_SPLIT_SEGMENTS
        if not is_multi_scene:
            return _build_analysis(False, 1)
        return _build_analysis(True, clamp_scene_count(len(segments)))
