"""Presets for type scales, type styles, viewing conditions and palettes.

Usage:
    from design_token_engine.design_system import (
        DEFAULT_SCALE, DEFAULT_TYPE_STYLES, PLATFORM_DISTANCE_PRESETS,
    )
    from design_token_engine.services import calculate_scale_for_config

    steps = calculate_scale_for_config(DEFAULT_SCALE)
"""

from design_token_engine.design_system.tokens import (
    DEFAULT_PALETTE_OPTIONS,
    DEFAULT_SCALE,
    DEFAULT_TYPE_STYLES,
    PLATFORM_DISTANCE_PRESETS,
    WCAG_THRESHOLDS,
    default_palette_options,
)

__all__ = [
    "DEFAULT_PALETTE_OPTIONS",
    "DEFAULT_SCALE",
    "DEFAULT_TYPE_STYLES",
    "PLATFORM_DISTANCE_PRESETS",
    "WCAG_THRESHOLDS",
    "default_palette_options",
]
