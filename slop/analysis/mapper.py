"""Scene to character assignment."""

from ..models import CharacterDescription, SceneInfo


def map_characters_to_scenes(
    scenes: list[SceneInfo], characters: list[CharacterDescription]
) -> dict[int, list[str]]:
    """Map each scene number to the character ids appearing in it.

    Every character is placed in every scene; there is no per-scene
    selection yet.
    """
    character_ids = [character.character_id for character in characters]
    return {scene.scene_number: list(character_ids) for scene in scenes}
