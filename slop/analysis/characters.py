"""
Human character identification and appearance descriptions.

Characters only matter when the same person has to look the same in
several independently generated clips, so animals and objects are
ignored and at most three characters are tracked.
"""

import logging
import re

from ..models import MAX_CHARACTERS, CharacterAnalysis, CharacterDescription
from ..understanding.llm_provider import LLMProvider
from .prompts import (
    CHARACTER_ANALYSIS_SYSTEM_PROMPT,
    CHARACTER_ANALYSIS_USER_TEMPLATE,
    CHARACTER_DESCRIPTION_SYSTEM_PROMPT,
    CHARACTER_DESCRIPTION_USER_TEMPLATE,
)

logger = logging.getLogger(__name__)

NO_CHARACTER_PHRASES = [
    "no human characters",
    "no human character",
    "no humans",
    "no people",
    "no characters",
    "none found",
    "there are no human",
]

HUMAN_ROLE_KEYWORDS = ["character", "person", "man", "woman", "friend", "chef", "teacher", "worker"]
FALLBACK_HUMAN_KEYWORDS = ["person", "man", "woman", "guy", "girl", "chef", "teacher", "friend", "worker"]
ANIMAL_KEYWORDS = ["capybara", "dog", "cat", "animal"]

CONSISTENCY_SEQUENCE_WORDS = ["then", "next", "after", "later", "continues", "goes"]
CONSISTENCY_LITERAL_WORDS = ["same", "character", "person"]
PRONOUN_PATTERN = re.compile(r"\b(?:he|she|they|him|her|them)\b", re.IGNORECASE)
FALLBACK_SEQUENCE_PATTERN = re.compile(r"\b(?:then|next|after)\b", re.IGNORECASE)

MAX_FALLBACK_CHARACTERS = 2
MAX_UNIQUE_IDENTIFIERS = 3

DEFAULT_AGE = "in their 20s"
DEFAULT_HAIR = "shoulder-length brown hair"
DEFAULT_CLOTHING = "casual clothing"
DEFAULT_FACIAL_FEATURES = "friendly expression"
DEFAULT_ACCESSORIES = "minimal jewelry"

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_UNIQUE_WORDS = ("distinctive", "unique", "specific", "particular")


def mentions_any(text: str, words: list[str]) -> bool:
    """True if any word appears as a whole word (plural allowed)."""
    return any(re.search(rf"\b{re.escape(word)}s?\b", text, re.IGNORECASE) for word in words)


def needs_character_consistency(prompt: str) -> bool:
    """Does the prompt suggest the same person recurs across shots?"""
    lower = prompt.lower()
    if any(word in lower for word in CONSISTENCY_SEQUENCE_WORDS):
        return True
    if PRONOUN_PATTERN.search(lower):
        return True
    return any(word in lower for word in CONSISTENCY_LITERAL_WORDS)


def extract_character_names(character_text: str) -> list[str]:
    """Pull human character labels out of a free-text LLM answer."""
    lower_text = character_text.lower()
    if any(phrase in lower_text for phrase in NO_CHARACTER_PHRASES):
        return []

    characters: list[str] = []
    for line in character_text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.endswith(":"):
            continue
        if mentions_any(stripped, ANIMAL_KEYWORDS):
            continue
        if not mentions_any(stripped, HUMAN_ROLE_KEYWORDS):
            continue

        cleaned = re.sub(r"[^\w\s]", "", stripped)
        cleaned = re.sub(r"^\d+\s+", "", cleaned.strip())
        cleaned = " ".join(cleaned.split())
        if cleaned and cleaned not in characters:
            characters.append(cleaned)

    return characters[:MAX_CHARACTERS]


class CharacterIdentifier:
    """Finds human characters that need a consistent appearance."""

    def __init__(self, llm: LLMProvider):
        self.llm = llm

    def identify(self, prompt: str) -> CharacterAnalysis:
        try:
            completion = self.llm.complete(
                CHARACTER_ANALYSIS_USER_TEMPLATE.format(prompt=prompt),
                system_prompt=CHARACTER_ANALYSIS_SYSTEM_PROMPT,
                max_tokens=200,
                temperature=0.3,
            )
        except Exception as e:
            logger.warning("Character analysis unavailable, using heuristic: %s", e)
            return self.identify_heuristic(prompt)

        characters = extract_character_names(completion.text)
        return CharacterAnalysis(
            requires_consistency=bool(characters) and needs_character_consistency(prompt),
            characters=characters,
        )

    def identify_heuristic(self, prompt: str) -> CharacterAnalysis:
        """Keyword scan used when the completion service is unavailable."""
        found = [word for word in FALLBACK_HUMAN_KEYWORDS if mentions_any(prompt, [word])]

        if not found:
            if mentions_any(prompt, ANIMAL_KEYWORDS):
                logger.debug("Animal-only prompt, no characters to track")
            return CharacterAnalysis(requires_consistency=False, characters=[])

        characters = found[:MAX_FALLBACK_CHARACTERS]
        has_reference = bool(
            PRONOUN_PATTERN.search(prompt) or FALLBACK_SEQUENCE_PATTERN.search(prompt)
        )
        return CharacterAnalysis(requires_consistency=has_reference, characters=characters)


def split_sentences(text: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def extract_detail(text: str, *keywords: str) -> str:
    """First sentence mentioning any keyword, or "" if none does."""
    for sentence in split_sentences(text):
        lower = sentence.lower()
        if any(keyword in lower for keyword in keywords):
            return sentence
    return ""


def extract_unique_details(text: str) -> list[str]:
    details = [
        sentence
        for sentence in split_sentences(text)
        if any(word in sentence.lower() for word in _UNIQUE_WORDS)
    ]
    return details[:MAX_UNIQUE_IDENTIFIERS]


def parse_character_description(
    character: str, description_text: str, index: int
) -> CharacterDescription:
    """Build a CharacterDescription from the designer's free text."""
    return CharacterDescription(
        character_id=f"char_{index + 1}",
        name=character,
        detailed_description=description_text.strip(),
        age=extract_detail(description_text, "age") or DEFAULT_AGE,
        hair=extract_detail(description_text, "hair") or DEFAULT_HAIR,
        clothing=extract_detail(description_text, "clothing", "wear") or DEFAULT_CLOTHING,
        facial_features=(
            extract_detail(description_text, "face", "features", "eyes")
            or DEFAULT_FACIAL_FEATURES
        ),
        accessories=(
            extract_detail(description_text, "accessories", "jewelry") or DEFAULT_ACCESSORIES
        ),
        unique_identifiers=extract_unique_details(description_text),
    )


def create_basic_character_description(character: str, index: int) -> CharacterDescription:
    """Generic description built from the character label alone."""
    return CharacterDescription(
        character_id=f"char_{index + 1}",
        name=character,
        detailed_description=(
            f"A person described as {character} with distinctive features for video consistency."
        ),
        age="in their 20s or 30s",
        hair="medium-length hair",
        clothing="appropriate attire for the scene",
        facial_features="clear, expressive features",
        accessories="minimal accessories",
        unique_identifiers=[f"distinctive {character} appearance"],
    )


class CharacterDescriptionGenerator:
    """Writes reusable appearance descriptions, one completion call per character."""

    def __init__(self, llm: LLMProvider):
        self.llm = llm

    def describe(self, prompt: str, characters: list[str]) -> list[CharacterDescription]:
        descriptions: list[CharacterDescription] = []

        for index, character in enumerate(characters):
            try:
                completion = self.llm.complete(
                    CHARACTER_DESCRIPTION_USER_TEMPLATE.format(prompt=prompt, character=character),
                    system_prompt=CHARACTER_DESCRIPTION_SYSTEM_PROMPT,
                    max_tokens=400,
                    temperature=0.5,
                )
            except Exception as e:
                logger.warning("Character description unavailable, using generic: %s", e)
                return self.describe_basic(characters)

            descriptions.append(parse_character_description(character, completion.text, index))

        return descriptions

    def describe_basic(self, characters: list[str]) -> list[CharacterDescription]:
        return [
            create_basic_character_description(character, index)
            for index, character in enumerate(characters)
        ]
