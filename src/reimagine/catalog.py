"""Future occupation themes offered to the user."""

from dataclasses import asdict, dataclass
from enum import Enum


@dataclass(frozen=True)
class Theme:
    """Declarative theme definition."""

    id: str
    title: str
    description: str
    prompt: str
    color: str


class Occupation(Enum):
    """Enum of themes in display order (single source of truth)."""

    INTERSTELLAR_EXPLORER = Theme(
        id="interstellar-explorer",
        title="Interstellar Explorer",
        description="Venture beyond the stars in a sleek, futuristic space suit.",
        prompt=(
            "Transform the person in the photo into an Interstellar Explorer. "
            "They should be wearing a highly detailed, sleek, futuristic white and "
            "chrome space suit with glowing blue accents. The background should be "
            "the interior of a high-tech spaceship bridge with a view of a colorful "
            "nebula through a massive window. Maintain the person's facial features "
            "and identity perfectly. Cinematic lighting, photorealistic, 8k "
            "resolution."
        ),
        color="from-blue-500 to-indigo-600",
    )
    CYBERNETIC_SURGEON = Theme(
        id="cybernetic-surgeon",
        title="Cybernetic Surgeon",
        description="Master of bio-tech integration in a high-tech medical bay.",
        prompt=(
            "Transform the person in the photo into a Cybernetic Surgeon. They "
            "should be wearing advanced medical scrubs with integrated fiber-optic "
            "sensors and a sleek head-mounted augmented reality display. One arm "
            "should have subtle, elegant cybernetic enhancements. The background is "
            "a sterile, glowing blue futuristic operating room with holographic "
            "medical charts. Maintain facial identity. Photorealistic, professional "
            "lighting."
        ),
        color="from-emerald-500 to-teal-600",
    )
    DEEP_SEA_ARCHITECT = Theme(
        id="deep-sea-architect",
        title="Deep Sea Architect",
        description="Designing the underwater cities of tomorrow.",
        prompt=(
            "Transform the person in the photo into a Deep Sea Architect. They are "
            "wearing a specialized lightweight diving suit with bioluminescent "
            "trim. They are standing in front of a massive glass dome overlooking a "
            "sprawling, glowing underwater city with futuristic submersibles. "
            "Maintain facial identity. Ethereal underwater lighting, vibrant "
            "colors, photorealistic."
        ),
        color="from-cyan-500 to-blue-600",
    )
    GALACTIC_DIPLOMAT = Theme(
        id="galactic-diplomat",
        title="Galactic Diplomat",
        description="The voice of humanity in the intergalactic council.",
        prompt=(
            "Transform the person in the photo into a Galactic Diplomat. They are "
            "wearing elegant, flowing futuristic robes made of iridescent, "
            "light-emitting fabric. The setting is a grand, sun-drenched council "
            "chamber with alien architecture and holographic star maps in the "
            "background. Maintain facial identity. Regal atmosphere, soft "
            "cinematic lighting, high detail."
        ),
        color="from-purple-500 to-pink-600",
    )
    QUANTUM_AI_ENGINEER = Theme(
        id="quantum-ai-engineer",
        title="Quantum AI Engineer",
        description="Architecting the minds of the next generation.",
        prompt=(
            "Transform the person in the photo into a Quantum AI Engineer. They "
            "are wearing a minimalist tech-wear outfit with subtle glowing "
            "circuits. They are surrounded by floating, complex quantum data "
            "visualizations and glowing neural network structures in a dark, "
            "high-tech lab. Maintain facial identity. Cyberpunk aesthetic, high "
            "contrast, neon accents, photorealistic."
        ),
        color="from-orange-500 to-red-600",
    )


THEMES: tuple[Theme, ...] = tuple(entry.value for entry in Occupation)
DEFAULT_THEME = THEMES[0]


def get_theme(theme_id: str) -> Theme:
    """Return the theme with the given id or raise ``KeyError``."""
    for theme in THEMES:
        if theme.id == theme_id:
            return theme
    raise KeyError(theme_id)


def themes_payload() -> list[dict[str, str]]:
    """Return themes formatted for the JSON API."""
    return [asdict(theme) for theme in THEMES]
