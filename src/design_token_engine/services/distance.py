"""Distance-based base font size.

Derives a legible body size from how far away the reader is, how well they
see, the typeface's proportions and the reading conditions, instead of
picking a number by eye.

The model treats legibility as a minimum visual angle: a glyph must subtend
at least MIN_VISUAL_ANGLE_DEG at the eye. The physical height that achieves
this at distance d is 2 * d * tan(angle / 2). That height is then adjusted:

- divided by visual acuity (decimal acuity, 1.0 = normal vision)
- multiplied by the typeface's mean length ratio, so a typeface that looks
  small at a given nominal size is set larger
- multiplied by a lighting factor and a text-type factor
- converted from millimetres to pixels with the medium's ppi

Every factor is >= 1 or scales linearly with distance, so the result never
shrinks as the distance grows or the lighting gets worse.
"""

import math

from design_token_engine.domain.typography import DistanceScaleConfig
from design_token_engine.domain.value_objects import Lighting, TextType
from design_token_engine.logging_config import get_logger

logger = get_logger(__name__)

MIN_VISUAL_ANGLE_DEG = 0.21
MM_PER_CM = 10.0
MM_PER_INCH = 25.4

LIGHTING_FACTORS: dict[Lighting, float] = {
    Lighting.GOOD: 1.0,
    Lighting.MODERATE: 1.25,
    Lighting.POOR: 1.5,
}

TEXT_TYPE_FACTORS: dict[TextType, float] = {
    TextType.CONTINUOUS: 1.0,
    TextType.ISOLATED: 1.5,
}


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def minimum_glyph_height_mm(viewing_distance_cm: float) -> float:
    """Physical height (mm) subtending the minimum visual angle at a distance."""
    distance_mm = viewing_distance_cm * MM_PER_CM
    angle_rad = math.radians(MIN_VISUAL_ANGLE_DEG)
    return 2 * distance_mm * math.tan(angle_rad / 2)


def calculate_distance_based_size(
    viewing_distance: float,
    visual_acuity: float = 1.0,
    mean_length_ratio: float = 1.0,
    text_type: TextType | str = TextType.CONTINUOUS,
    lighting: Lighting | str = Lighting.GOOD,
    ppi: float = 96.0,
) -> float:
    """Return the base font size in whole pixels for the given conditions.

    Raises:
        InvalidScaleConfigError: a numeric input is not positive, or
            text_type/lighting is not a known value.
    """
    config = DistanceScaleConfig(
        viewing_distance=viewing_distance,
        visual_acuity=visual_acuity,
        mean_length_ratio=mean_length_ratio,
        text_type=text_type,
        lighting=lighting,
        ppi=ppi,
    )
    return calculate_distance_based_size_for_config(config)


def calculate_distance_based_size_for_config(config: DistanceScaleConfig) -> float:
    """Same as calculate_distance_based_size, from a validated config."""
    size_mm = minimum_glyph_height_mm(config.viewing_distance)
    size_mm /= config.visual_acuity
    size_mm *= config.mean_length_ratio
    size_mm *= LIGHTING_FACTORS[config.lighting] * TEXT_TYPE_FACTORS[config.text_type]

    size_px = _round_half_up(size_mm * config.ppi / MM_PER_INCH)
    logger.debug(
        "distance_based_size_calculated",
        viewing_distance=config.viewing_distance,
        lighting=config.lighting.value,
        text_type=config.text_type.value,
        ppi=config.ppi,
        size_px=size_px,
    )
    return size_px
