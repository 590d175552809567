"""Preset inputs for the derivation engine.

These are starting points a brand or platform copies and then edits: a
default modular scale, the standard text styles bound to it, viewing
conditions per platform, palette options and the WCAG contrast levels.
"""

from typing import Final

from design_token_engine.domain.colors import PaletteOptions
from design_token_engine.domain.typography import (
    DistanceScaleConfig,
    ScaleConfig,
    TypeStyle,
)
from design_token_engine.domain.value_objects import (
    ChromaPreset,
    Lighting,
    LightnessPreset,
    ScaleMethod,
    TextType,
)

# =============================================================================
# Typography
# =============================================================================

DEFAULT_SCALE: Final[ScaleConfig] = ScaleConfig(
    base_size=16.0,
    ratio=1.25,  # Major third
    steps_up=6,
    steps_down=2,
    method=ScaleMethod.MODULAR,
)

DEFAULT_TYPE_STYLES: Final[tuple[TypeStyle, ...]] = (
    TypeStyle(
        id="display",
        name="Display",
        scale_step="f6",
        font_weight=700,
        line_height=1.1,
        letter_spacing=-0.02,
    ),
    TypeStyle(
        id="h1",
        name="Heading 1",
        scale_step="f5",
        font_weight=700,
        line_height=1.2,
        letter_spacing=-0.01,
    ),
    TypeStyle(
        id="h2",
        name="Heading 2",
        scale_step="f4",
        font_weight=600,
        line_height=1.25,
    ),
    TypeStyle(
        id="h3",
        name="Heading 3",
        scale_step="f3",
        font_weight=600,
        line_height=1.3,
    ),
    TypeStyle(
        id="h4",
        name="Heading 4",
        scale_step="f2",
        font_weight=600,
        line_height=1.35,
    ),
    TypeStyle(
        id="h5",
        name="Heading 5",
        scale_step="f1",
        font_weight=600,
        line_height=1.4,
    ),
    TypeStyle(
        id="body",
        name="Body",
        scale_step="f0",
    ),
    TypeStyle(
        id="small",
        name="Small",
        scale_step="f-1",
        line_height=1.45,
    ),
    TypeStyle(
        id="tiny",
        name="Tiny",
        scale_step="f-2",
        line_height=1.4,
        letter_spacing=0.01,
    ),
)

# Viewing distance in cm, ppi of the medium
PLATFORM_DISTANCE_PRESETS: Final[dict[str, DistanceScaleConfig]] = {
    "web": DistanceScaleConfig(viewing_distance=50.0, ppi=96.0),
    "mobile": DistanceScaleConfig(viewing_distance=30.0, ppi=160.0),
    "outdoor": DistanceScaleConfig(
        viewing_distance=300.0,
        text_type=TextType.ISOLATED,
        lighting=Lighting.MODERATE,
        ppi=72.0,
    ),
    "print": DistanceScaleConfig(viewing_distance=40.0, ppi=300.0),
}

# =============================================================================
# Color
# =============================================================================

DEFAULT_PALETTE_OPTIONS: Final[dict[str, object]] = {
    "lightness_preset": LightnessPreset.LINEAR,
    "chroma_preset": ChromaPreset.CONSTANT,
    "lightness_range": (0.05, 0.95),
    "chroma_range": (0.01, 0.4),
    "hue_shift": 0.0,
    "lock_base_color": True,
}

WCAG_THRESHOLDS: Final[dict[str, float]] = {
    "aa_large": 3.0,
    "aa_normal": 4.5,
    "aaa": 7.0,
}


def default_palette_options(**overrides: object) -> PaletteOptions:
    """Build a fresh PaletteOptions from DEFAULT_PALETTE_OPTIONS."""
    return PaletteOptions(**{**DEFAULT_PALETTE_OPTIONS, **overrides})
