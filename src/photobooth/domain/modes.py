"""Transformation modes offered by the photobooth."""

from dataclasses import dataclass
from enum import StrEnum


class ModeKey(StrEnum):
    """Closed set of mode identifiers, including the custom slot."""

    CUSTOM = "custom"
    CARTOON = "cartoon"
    BANANA = "banana"
    EIGHTIES = "80s"
    NINETEENTH_CENTURY = "19century"
    ANIME = "anime"
    BEARD = "beard"
    COMIC = "comic"
    OLD = "old"
    BABY = "baby"
    EMPEROR = "emperor"


@dataclass(frozen=True)
class Mode:
    """A named transformation instruction."""

    key: ModeKey
    display_name: str
    emoji: str
    instruction: str


CUSTOM_DISPLAY_NAME = "Custom"
CUSTOM_EMOJI = "✏️"

CATALOG: tuple[Mode, ...] = (
    Mode(
        key=ModeKey.CARTOON,
        display_name="Cartoon",
        emoji="😃",
        instruction=(
            "Transform this image into a cute simple cartoon. "
            "Use minimal lines and solid colors."
        ),
    ),
    Mode(
        key=ModeKey.BANANA,
        display_name="Banana",
        emoji="🍌",
        instruction="Make the person in the photo wear a banana costume.",
    ),
    Mode(
        key=ModeKey.EIGHTIES,
        display_name="80s",
        emoji="✨",
        instruction=(
            "Make the person in the photo look like a 1980s yearbook photo. "
            "Feel free to change the hairstyle and clothing."
        ),
    ),
    Mode(
        key=ModeKey.NINETEENTH_CENTURY,
        display_name="19th Cent.",
        emoji="🎩",
        instruction=(
            "Make the photo look like a 19th century daguerreotype. "
            "Feel free to change the background to make it period appropriate "
            "and add props like Victorian clothing. "
            "Try to keep the perspective the same."
        ),
    ),
    Mode(
        key=ModeKey.ANIME,
        display_name="Anime",
        emoji="🍣",
        instruction=(
            "Make the person in the photo look like a photorealistic anime "
            "character with exaggerated features."
        ),
    ),
    Mode(
        key=ModeKey.BEARD,
        display_name="Big Beard",
        emoji="🧔🏻",
        instruction="Make the person in the photo look like they have a huge beard.",
    ),
    Mode(
        key=ModeKey.COMIC,
        display_name="Comic Book",
        emoji="💥",
        instruction=(
            "Transform the photo into a comic book panel with bold outlines, "
            "halftone dots, and speech bubbles."
        ),
    ),
    Mode(
        key=ModeKey.OLD,
        display_name="Old",
        emoji="👵🏻",
        instruction="Make the person in the photo look extremely old.",
    ),
    Mode(
        key=ModeKey.BABY,
        display_name="Baby",
        emoji="👶",
        instruction=(
            "Make the person in the photo look like a baby sucking a baby pacifier."
        ),
    ),
    Mode(
        key=ModeKey.EMPEROR,
        display_name="Emperor",
        emoji="👑",
        instruction=(
            "Make the person in the photo look like an emperor in a chinese movie "
            "about the Tang dynasty."
        ),
    ),
)
