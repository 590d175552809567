from design_token_engine.domain import (
    AccessibilityReport,
    ColorPalette,
    ColorStep,
    ColorValues,
    DistanceScaleConfig,
    PaletteOptions,
    ScaleConfig,
    ScaleStep,
    TypeStyle,
)
from design_token_engine.exceptions import (
    ColorParseError,
    DesignTokenError,
    InvalidScaleConfigError,
    PaletteGenerationError,
)

__all__ = [
    "AccessibilityReport",
    "ColorParseError",
    "ColorPalette",
    "ColorStep",
    "ColorValues",
    "DesignTokenError",
    "DistanceScaleConfig",
    "InvalidScaleConfigError",
    "PaletteGenerationError",
    "PaletteOptions",
    "ScaleConfig",
    "ScaleStep",
    "TypeStyle",
]

__version__ = "0.1.0"
