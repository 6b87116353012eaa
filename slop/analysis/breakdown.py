"""Scene breakdown into 8-second segments."""

import logging
import math
import re

from ..models import MAX_SCENE_DURATION_SECONDS, SceneInfo
from ..understanding.llm_provider import LLMProvider
from .characters import split_sentences
from .prompts import SCENE_BREAKDOWN_SYSTEM_PROMPT, SCENE_BREAKDOWN_USER_TEMPLATE

logger = logging.getLogger(__name__)

SCENE_LINE_MAX_LENGTH = 300
SCENE_SECTION_MAX_LENGTH = 200
MAX_ELEMENTS = 3

_SCENE_PREFIX = re.compile(r"^scene:\s*", re.IGNORECASE)
# The heading swallows the separator that follows it ("Scene 1:", "Scene 2 -")
_SCENE_HEADING = re.compile(r"scene\s*\d+[\s:.\-–]*", re.IGNORECASE)


def extract_elements(text: str, *keywords: str) -> list[str]:
    """Up to three sentences mentioning any of the keywords."""
    elements = [
        sentence
        for sentence in split_sentences(text)
        if any(keyword in sentence.lower() for keyword in keywords)
    ]
    return elements[:MAX_ELEMENTS]


def create_single_scene(prompt: str) -> SceneInfo:
    """The whole prompt as one 8-second scene."""
    return SceneInfo(scene_number=1, description=prompt, duration=MAX_SCENE_DURATION_SECONDS)


def _build_scene(scene_number: int, description: str) -> SceneInfo:
    return SceneInfo(
        scene_number=scene_number,
        description=description,
        duration=MAX_SCENE_DURATION_SECONDS,
        visual_elements=extract_elements(description, "visual"),
        audio_elements=extract_elements(description, "audio", "sound", "music"),
    )


def parse_scene_breakdown(scene_text: str, expected_scene_count: int) -> list[SceneInfo]:
    """Parse a director response into exactly ``expected_scene_count`` scenes.

    ``SCENE:`` lines are preferred. Responses that ignore the format are
    split on "Scene N" headings instead. Missing scenes are padded with
    placeholders.
    """
    descriptions = []
    for line in scene_text.splitlines():
        stripped = line.strip()
        if _SCENE_PREFIX.match(stripped):
            description = _SCENE_PREFIX.sub("", stripped).strip()
            if description:
                descriptions.append(description[:SCENE_LINE_MAX_LENGTH])

    if not descriptions:
        sections = _SCENE_HEADING.split(scene_text)[1:]
        descriptions = [
            section.strip()[:SCENE_SECTION_MAX_LENGTH]
            for section in sections
            if section.strip()
        ]
        if descriptions:
            logger.debug("No SCENE: lines found, parsed %d scene headings", len(descriptions))

    scenes = [
        _build_scene(number, description)
        for number, description in enumerate(descriptions[:expected_scene_count], start=1)
    ]

    while len(scenes) < expected_scene_count:
        number = len(scenes) + 1
        scenes.append(
            SceneInfo(
                scene_number=number,
                description=f"Additional scene {number} continuation",
                duration=MAX_SCENE_DURATION_SECONDS,
            )
        )

    return scenes


def create_basic_scene_breakdown(prompt: str, scene_count: int) -> list[SceneInfo]:
    """Slice the prompt into ``scene_count`` equal-length chunks."""
    chunk_length = math.ceil(len(prompt) / scene_count) if prompt else 0
    return [
        SceneInfo(
            scene_number=i + 1,
            description=prompt[i * chunk_length:(i + 1) * chunk_length].strip(),
            duration=MAX_SCENE_DURATION_SECONDS,
        )
        for i in range(scene_count)
    ]


class SceneBreakdownGenerator:
    """Splits a prompt into self-contained scene prompts."""

    def __init__(self, llm: LLMProvider):
        self.llm = llm

    def breakdown(self, prompt: str, scene_count: int) -> list[SceneInfo]:
        if scene_count == 1:
            return [create_single_scene(prompt)]

        try:
            completion = self.llm.complete(
                SCENE_BREAKDOWN_USER_TEMPLATE.format(scene_count=scene_count, prompt=prompt),
                system_prompt=SCENE_BREAKDOWN_SYSTEM_PROMPT,
                max_tokens=600,
                temperature=0.4,
            )
        except Exception as e:
            logger.warning("Scene breakdown unavailable, slicing prompt: %s", e)
            return create_basic_scene_breakdown(prompt, scene_count)

        return parse_scene_breakdown(completion.text, scene_count)
