"""Tests for scene breakdown and character mapping."""

from unittest.mock import MagicMock

from slop.analysis import map_characters_to_scenes
from slop.analysis.breakdown import (
    SceneBreakdownGenerator,
    create_basic_scene_breakdown,
    parse_scene_breakdown,
)
from slop.analysis.characters import create_basic_character_description
from slop.models import SceneInfo
from slop.understanding import LLMProvider


class TestParseSceneBreakdown:
    """Tests for parse_scene_breakdown()."""

    def test_scene_lines(self) -> None:
        """Test parsing of SCENE: lines with element extraction."""
        text = (
            "SCENE: A chef chops onions. Visual: close-up of the knife. Audio: crisp chopping sound.\n"
            "scene: The pan bursts into flames. Music swells.\n"
        )
        scenes = parse_scene_breakdown(text, 2)
        assert [s.scene_number for s in scenes] == [1, 2]
        assert scenes[0].description.startswith("A chef chops onions")
        assert scenes[0].visual_elements == ["Visual: close-up of the knife"]
        assert scenes[0].audio_elements == ["Audio: crisp chopping sound"]
        assert scenes[1].audio_elements == ["Music swells"]
        assert all(s.duration == 8 for s in scenes)

    def test_scene_line_truncated(self) -> None:
        """Test that long scene lines are cut to 300 characters."""
        scenes = parse_scene_breakdown("SCENE: " + "x" * 500, 1)
        assert len(scenes[0].description) == 300

    def test_heading_fallback(self) -> None:
        """Test splitting on 'Scene N' headings when no SCENE: lines exist."""
        text = "Scene 1 - the chef cooks.\nScene 2 - the kitchen burns."
        scenes = parse_scene_breakdown(text, 2)
        assert scenes[0].description == "the chef cooks."
        assert scenes[1].description == "the kitchen burns."

    def test_heading_fallback_with_colons(self) -> None:
        """Test that the separator after a numbered heading is dropped."""
        text = "Scene 1: A woman opens a gift.\n\nScene 2. She hugs her friend."
        scenes = parse_scene_breakdown(text, 2)
        assert [s.description for s in scenes] == [
            "A woman opens a gift.",
            "She hugs her friend.",
        ]

    def test_pads_missing_scenes(self) -> None:
        """Test that short responses are padded to the expected count."""
        scenes = parse_scene_breakdown("SCENE: Only one scene here", 3)
        assert len(scenes) == 3
        assert scenes[1].description == "Additional scene 2 continuation"
        assert scenes[2].description == "Additional scene 3 continuation"

    def test_extra_scenes_dropped(self) -> None:
        """Test that extra scenes beyond the expected count are ignored."""
        text = "\n".join(f"SCENE: scene {n}" for n in range(1, 6))
        assert len(parse_scene_breakdown(text, 2)) == 2

    def test_unstructured_text_becomes_placeholders(self) -> None:
        """Test that text with no scene markers yields placeholders."""
        scenes = parse_scene_breakdown("I cannot help with that.", 2)
        assert [s.description for s in scenes] == [
            "Additional scene 1 continuation",
            "Additional scene 2 continuation",
        ]


class TestBasicSceneBreakdown:
    """Tests for the slicing fallback."""

    def test_slices_evenly(self) -> None:
        """Test equal-length slices that cover the prompt."""
        scenes = create_basic_scene_breakdown("abcdefghij", 3)
        assert [s.description for s in scenes] == ["abcd", "efgh", "ij"]
        assert [s.scene_number for s in scenes] == [1, 2, 3]

    def test_slices_are_trimmed(self) -> None:
        """Test that slice whitespace is stripped."""
        scenes = create_basic_scene_breakdown("one two three four", 2)
        assert scenes[0].description == "one two t"
        assert scenes[1].description == "hree four"


class TestSceneBreakdownGenerator:
    """Tests for SceneBreakdownGenerator."""

    def test_single_scene_skips_service(self) -> None:
        """Test that one scene never calls the completion service."""
        llm = MagicMock(spec=LLMProvider)
        scenes = SceneBreakdownGenerator(llm).breakdown("A cat dancing", 1)
        assert scenes == [SceneInfo(scene_number=1, description="A cat dancing")]
        llm.complete.assert_not_called()

    def test_multi_scene_with_mock(self, mock_llm) -> None:
        """Test that the requested count is produced."""
        scenes = SceneBreakdownGenerator(mock_llm).breakdown("A long story", 4)
        assert [s.scene_number for s in scenes] == [1, 2, 3, 4]
        assert all(s.visual_elements and s.audio_elements for s in scenes)

    def test_failure_falls_back_to_slicing(self, failing_llm) -> None:
        """Test the slicing fallback."""
        scenes = SceneBreakdownGenerator(failing_llm).breakdown("abcdefghij", 2)
        assert [s.description for s in scenes] == ["abcde", "fghij"]


class TestMapCharactersToScenes:
    """Tests for map_characters_to_scenes()."""

    def test_every_character_in_every_scene(self) -> None:
        scenes = create_basic_scene_breakdown("abcdefghij", 2)
        characters = [
            create_basic_character_description("chef", 0),
            create_basic_character_description("waiter", 1),
        ]
        assert map_characters_to_scenes(scenes, characters) == {
            1: ["char_1", "char_2"],
            2: ["char_1", "char_2"],
        }

    def test_no_characters(self) -> None:
        scenes = create_basic_scene_breakdown("abc", 1)
        assert map_characters_to_scenes(scenes, []) == {1: []}
