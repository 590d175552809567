from design_token_engine.domain.colors import (
    AccessibilityReport,
    Cmyk,
    ColorPalette,
    ColorStep,
    ColorValues,
    Oklch,
    PaletteOptions,
    Rgb,
)
from design_token_engine.domain.typography import (
    DistanceScaleConfig,
    ResolvedTypeStyle,
    ScaleConfig,
    ScaleStep,
    TypeStyle,
    step_index,
    step_label,
)
from design_token_engine.domain.value_objects import (
    ChromaPreset,
    ColorFormat,
    Lighting,
    LightnessPreset,
    ScaleMethod,
    TextType,
    Unit,
)

__all__ = [
    "AccessibilityReport",
    "ChromaPreset",
    "Cmyk",
    "ColorFormat",
    "ColorPalette",
    "ColorStep",
    "ColorValues",
    "DistanceScaleConfig",
    "Lighting",
    "LightnessPreset",
    "Oklch",
    "PaletteOptions",
    "ResolvedTypeStyle",
    "Rgb",
    "ScaleConfig",
    "ScaleMethod",
    "ScaleStep",
    "TextType",
    "TypeStyle",
    "Unit",
    "step_index",
    "step_label",
]
