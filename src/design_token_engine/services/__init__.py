from design_token_engine.services.color_conversion import (
    calculate_contrast,
    check_accessibility,
    convert_color,
    convert_to_all_formats,
    get_luminance,
    meets_contrast,
    parse_color,
)
from design_token_engine.services.distance import calculate_distance_based_size
from design_token_engine.services.interfaces import PaletteService, TypeScaleService
from design_token_engine.services.palette import (
    PaletteServiceImpl,
    build_palette,
    calculate_chroma,
    calculate_lightness,
    generate_palette,
)
from design_token_engine.services.scale import (
    TypeScaleServiceImpl,
    calculate_scale_for_config,
    calculate_type_scale,
    parse_scale_recommendation,
)
from design_token_engine.services.type_styles import resolve_type_styles
from design_token_engine.services.units import convert_units

__all__ = [
    "PaletteService",
    "PaletteServiceImpl",
    "TypeScaleService",
    "TypeScaleServiceImpl",
    "build_palette",
    "calculate_chroma",
    "calculate_contrast",
    "calculate_distance_based_size",
    "calculate_lightness",
    "calculate_scale_for_config",
    "calculate_type_scale",
    "check_accessibility",
    "convert_color",
    "convert_to_all_formats",
    "convert_units",
    "generate_palette",
    "get_luminance",
    "meets_contrast",
    "parse_color",
    "parse_scale_recommendation",
    "resolve_type_styles",
]
