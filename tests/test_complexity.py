"""Tests for single vs multi-scene classification."""

from unittest.mock import MagicMock

import pytest

from slop.analysis.complexity import (
    ComplexityClassifier,
    count_distinct_keywords,
    estimate_scene_count,
    passes_multi_scene_gate,
)
from slop.models import Complexity
from slop.understanding import Completion, LLMProvider


def scripted_llm(text: str) -> MagicMock:
    llm = MagicMock(spec=LLMProvider)
    llm.complete.return_value = Completion(text=text, tokens_used=10, model="scripted")
    return llm


class TestKeywordHelpers:
    """Tests for the keyword gate helpers."""

    def test_counts_distinct_keywords(self) -> None:
        """Test that repeated keywords count once."""
        assert count_distinct_keywords("First this, then that, then more") == 2

    def test_keywords_match_whole_words(self) -> None:
        """Test that keywords inside other words are ignored."""
        assert count_distinct_keywords("Strengthen the firstborn's resolve") == 0

    def test_gate_requires_length(self) -> None:
        """Test that short sequential prompts stay single."""
        assert not passes_multi_scene_gate("First he cooks, then later he eats, finally he sleeps")

    def test_gate_requires_then(self, sequential_prompt: str) -> None:
        """Test that the then-plus-closing-word condition is required."""
        assert passes_multi_scene_gate(sequential_prompt)
        without_then = sequential_prompt.replace("Then, after that,", "Next")
        assert not passes_multi_scene_gate(without_then)

    def test_estimate_is_clamped(self) -> None:
        """Test that the estimated scene count stays within 2-5."""
        assert estimate_scene_count("no keywords here") == 2
        assert estimate_scene_count("first then next later finally then next") == 5


class TestComplexityClassifier:
    """Tests for ComplexityClassifier."""

    def test_simple_prompt_is_single_scene(self, mock_llm, simple_prompt: str) -> None:
        """Test the capybara prompt stays one scene."""
        result = ComplexityClassifier(mock_llm).classify(simple_prompt)
        assert result.is_multi_scene is False
        assert result.scene_count == 1
        assert result.complexity == Complexity.SIMPLE

    def test_sequential_prompt_is_multi_scene(self, mock_llm, sequential_prompt: str) -> None:
        """Test the chef prompt uses the count the service recommends."""
        result = ComplexityClassifier(mock_llm).classify(sequential_prompt)
        assert result.is_multi_scene is True
        assert result.scene_count == 3
        assert result.complexity == Complexity.COMPLEX

    def test_service_cannot_force_multi_scene(self) -> None:
        """Test that a multi-scene recommendation for a short prompt is ignored."""
        llm = scripted_llm("This needs multiple scenes, 4 scenes total.")
        result = ComplexityClassifier(llm).classify("First a cat jumps, then finally it lands")
        assert result.is_multi_scene is False
        assert result.scene_count == 1

    def test_gate_wins_over_single_recommendation(self, sequential_prompt: str) -> None:
        """Test that a passing prompt is multi-scene with an estimated count."""
        llm = scripted_llm("Recommendation: single scene.")
        result = ComplexityClassifier(llm).classify(sequential_prompt)
        assert result.is_multi_scene is True
        assert result.scene_count == estimate_scene_count(sequential_prompt)

    def test_recommended_count_is_clamped(self, sequential_prompt: str) -> None:
        """Test that an out-of-range count is clamped to five."""
        llm = scripted_llm("Use multiple scenes, 9 scenes.")
        result = ComplexityClassifier(llm).classify(sequential_prompt)
        assert result.scene_count == 5

    def test_two_scenes_is_moderate(self, sequential_prompt: str) -> None:
        """Test the moderate label for two scenes."""
        llm = scripted_llm("Use multiple scenes, 2 scenes.")
        result = ComplexityClassifier(llm).classify(sequential_prompt)
        assert result.scene_count == 2
        assert result.complexity == Complexity.MODERATE

    def test_service_called_with_scene_budget(self, simple_prompt: str) -> None:
        """Test the completion parameters."""
        llm = scripted_llm("single scene")
        ComplexityClassifier(llm).classify(simple_prompt)
        kwargs = llm.complete.call_args.kwargs
        assert kwargs["max_tokens"] == 300
        assert kwargs["temperature"] == 0.3
        assert "scene analyst" in kwargs["system_prompt"]

    def test_falls_back_to_heuristic(self, failing_llm, sequential_prompt: str) -> None:
        """Test that a failing service still yields a classification."""
        result = ComplexityClassifier(failing_llm).classify(sequential_prompt)
        assert result.is_multi_scene is True
        assert 2 <= result.scene_count <= 5

    def test_heuristic_short_prompt_is_single(self, failing_llm) -> None:
        """Test that the heuristic keeps short prompts single."""
        result = ComplexityClassifier(failing_llm).classify("First a dog runs, then later it sleeps")
        assert result.is_multi_scene is False
        assert result.scene_count == 1

    @pytest.mark.parametrize(
        "prompt",
        [
            "A cat dancing",
            "First, then, finally",
            "A capybara relaxing in a hot spring while a monkey washes its back",
        ],
    )
    def test_single_scene_invariants(self, mock_llm, prompt: str) -> None:
        """Test that single-scene results are always count 1 and simple."""
        result = ComplexityClassifier(mock_llm).classify(prompt)
        assert result.is_multi_scene == (result.scene_count > 1)
        assert (result.complexity == Complexity.SIMPLE) == (not result.is_multi_scene)

    def test_short_twist_stays_single(self, mock_llm) -> None:
        """Test that a small twist does not split the clip."""
        result = ComplexityClassifier(mock_llm).classify("Capybaras jumping on trampoline, one falls off")
        assert result.is_multi_scene is False
        assert result.scene_count == 1
