"""Scene analysis pipeline."""

import logging

from ..config import ValidationConfig
from ..models import RecommendedApproach, SceneAnalysisResult
from ..understanding.llm_provider import LLMProvider
from .breakdown import SceneBreakdownGenerator
from .characters import CharacterDescriptionGenerator, CharacterIdentifier
from .complexity import ComplexityClassifier
from .mapper import map_characters_to_scenes
from .validator import validate_prompt

logger = logging.getLogger(__name__)


class SceneAnalysisService:
    """Analyzes a prompt for scene requirements and character consistency.

    Every component degrades to a deterministic heuristic when the
    completion service fails, so ``analyze`` only raises for prompts that
    fail validation.
    """

    def __init__(self, llm: LLMProvider, validation: ValidationConfig | None = None):
        """Initialize the service.

        Args:
            llm: Completion service shared by all components.
            validation: Prompt length bounds and blocklist.
        """
        self.llm = llm
        self.validation = validation or ValidationConfig()
        self.classifier = ComplexityClassifier(llm)
        self.identifier = CharacterIdentifier(llm)
        self.describer = CharacterDescriptionGenerator(llm)
        self.breakdown = SceneBreakdownGenerator(llm)

    def analyze(self, user_prompt: object) -> SceneAnalysisResult:
        """Run the full analysis for one prompt.

        Raises:
            PromptValidationError: If the prompt is missing, too long or forbidden.
        """
        prompt = validate_prompt(user_prompt, self.validation)

        complexity = self.classifier.classify(prompt)
        characters = self.identifier.identify(prompt)

        scenes = self.breakdown.breakdown(prompt, complexity.scene_count)

        descriptions = (
            self.describer.describe(prompt, characters.characters)
            if characters.requires_consistency
            else []
        )

        mappings = map_characters_to_scenes(scenes, descriptions)
        scenes = [
            scene.model_copy(update={"characters": mappings[scene.scene_number]})
            for scene in scenes
        ]

        logger.info(
            "Analyzed prompt: %d scene(s), complexity=%s, characters=%d, consistency=%s",
            complexity.scene_count,
            complexity.complexity.value,
            len(descriptions),
            characters.requires_consistency,
        )

        return SceneAnalysisResult(
            is_multi_scene=complexity.is_multi_scene,
            scene_count=complexity.scene_count,
            scenes=scenes,
            complexity=complexity.complexity,
            recommended_approach=(
                RecommendedApproach.MULTI_SCENE
                if complexity.is_multi_scene
                else RecommendedApproach.SINGLE
            ),
            requires_character_consistency=characters.requires_consistency,
            character_descriptions=descriptions,
            scene_character_mappings=mappings,
        )
