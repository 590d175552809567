"""Palette generation in OKLCH space.

A palette is a run of steps named 100, 200, ... N00 derived from one base
color. Lightness and chroma follow the presets in PaletteOptions while the
hue stays fixed (optionally shifted). The middle step, floor(n / 2), is the
base step and can be locked to the base lightness and chroma; a locked step
still takes the shifted hue.

Unlike the single-color conversions, generation fails as a whole: if the
base color cannot be resolved, PaletteGenerationError is raised and no
partial palette is returned.
"""

from design_token_engine.config import Settings, get_settings
from design_token_engine.domain.colors import (
    AccessibilityReport,
    ColorPalette,
    ColorStep,
    ColorValues,
    Oklch,
    PaletteOptions,
)
from design_token_engine.domain.value_objects import ChromaPreset, LightnessPreset
from design_token_engine.exceptions import ColorParseError, PaletteGenerationError
from design_token_engine.logging_config import get_logger
from design_token_engine.services.color_conversion import (
    check_accessibility,
    color_values,
    convert_to_all_formats,
    meets_contrast,
    parse_color,
    to_oklch,
)
from design_token_engine.services.interfaces import PaletteService

logger = get_logger(__name__)

DEFAULT_BASE_OKLCH = Oklch(l=0.5, c=0.1, h=240.0)

# Bounds applied when only chroma varies across the palette.
SAFE_LIGHTNESS = (0.05, 0.95)
SAFE_CHROMA = (0.01, 0.4)


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def _position(index: int, total: int) -> float:
    if total <= 1:
        return 0.0
    return index / (total - 1)


def _ease_in(t: float) -> float:
    return t**3


def _ease_out(t: float) -> float:
    return 1 - (1 - t) ** 3


def _ease_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t**3
    return 1 - (-2 * t + 2) ** 3 / 2


_LIGHTNESS_CURVES = {
    LightnessPreset.LINEAR: lambda t: t,
    LightnessPreset.CURVED: _ease_in_out,
    LightnessPreset.EASE_IN: _ease_in,
    LightnessPreset.EASE_OUT: _ease_out,
}


def calculate_lightness(index: int, total: int, options: PaletteOptions) -> float:
    """Lightness of step index out of total.

    Index 0 maps to lightness_range[0] and the last index to
    lightness_range[1]. The custom preset reads custom_lightness_values
    and falls back to linear when fewer than total values are given.
    """
    preset = options.lightness_preset
    if preset == LightnessPreset.CUSTOM:
        if len(options.custom_lightness_values) >= total:
            return float(options.custom_lightness_values[index])
        logger.warning(
            "custom_lightness_values_short",
            provided=len(options.custom_lightness_values),
            required=total,
        )
    curve = _LIGHTNESS_CURVES.get(preset, _LIGHTNESS_CURVES[LightnessPreset.LINEAR])
    min_l, max_l = options.lightness_range
    return min_l + curve(_position(index, total)) * (max_l - min_l)


def _normalized_lightness(lightness: float, options: PaletteOptions) -> float:
    min_l, max_l = options.lightness_range
    if max_l == min_l:
        return 0.0
    return _clamp((lightness - min_l) / (max_l - min_l), 0.0, 1.0)


def calculate_chroma(
    index: int, total: int, lightness: float | None, options: PaletteOptions
) -> float:
    """Chroma of step index out of total.

    decrease and increase follow the step's lightness, normalized against
    lightness_range. Pass lightness=None to place them by step position
    instead, which is how chroma-only palettes spread their steps.
    """
    min_c, max_c = options.chroma_range
    preset = options.chroma_preset

    if preset == ChromaPreset.CONSTANT:
        return max_c
    if preset == ChromaPreset.CUSTOM:
        if len(options.custom_chroma_values) >= total:
            return float(options.custom_chroma_values[index])
        logger.warning(
            "custom_chroma_values_short",
            provided=len(options.custom_chroma_values),
            required=total,
        )
        return min_c + _position(index, total) * (max_c - min_c)

    if lightness is None:
        t = _position(index, total)
    else:
        t = _normalized_lightness(lightness, options)
    if preset == ChromaPreset.DECREASE:
        return max_c - t * (max_c - min_c)
    return min_c + t * (max_c - min_c)


def _resolve_base(base_color: ColorValues | str) -> Oklch:
    if isinstance(base_color, ColorValues):
        source = base_color.oklch
        if not source:
            raise PaletteGenerationError(
                "Missing OKLCH value in base color", base_color=base_color
            )
    else:
        source = base_color
    try:
        base = to_oklch(parse_color(source))
    except ColorParseError as exc:
        raise PaletteGenerationError(
            f"Could not parse base color: {exc.message}", base_color=source
        ) from exc

    if not base.is_complete:
        logger.warning("base_color_incomplete", base_color=str(source))
        base = Oklch(
            l=base.l if base.l is not None else DEFAULT_BASE_OKLCH.l,
            c=base.c if base.c is not None else DEFAULT_BASE_OKLCH.c,
            h=base.h if base.h is not None else DEFAULT_BASE_OKLCH.h,
        )
    return base


def generate_palette(
    base_color: ColorValues | str,
    num_steps: int,
    vary_lightness: bool = True,
    options: PaletteOptions | None = None,
) -> list[ColorStep]:
    """Generate num_steps colors from base_color.

    With vary_lightness, lightness follows the lightness preset and chroma
    the chroma preset. Without it, every step keeps the base lightness and
    only chroma varies; both axes are then clamped to SAFE_LIGHTNESS and
    SAFE_CHROMA.

    Raises:
        PaletteGenerationError: num_steps < 1, the base color has no
            parseable OKLCH value, or any step fails to build.
    """
    options = options or PaletteOptions()
    if num_steps < 1:
        logger.warning(
            "palette_generation_failed", reason="num_steps < 1", num_steps=num_steps
        )
        raise PaletteGenerationError(
            f"num_steps must be >= 1, got {num_steps}", base_color=base_color
        )

    try:
        base = _resolve_base(base_color)
    except PaletteGenerationError as exc:
        logger.warning("palette_generation_failed", reason=exc.message, **exc.context)
        raise

    hue = (base.h + options.hue_shift) % 360
    base_index = num_steps // 2

    steps: list[ColorStep] = []
    try:
        for i in range(num_steps):
            is_base = i == base_index
            if is_base and options.lock_base_color:
                oklch = Oklch(base.l, base.c, hue)
            elif vary_lightness:
                lightness = calculate_lightness(i, num_steps, options)
                chroma = calculate_chroma(i, num_steps, lightness, options)
                oklch = Oklch(_clamp(lightness, 0.0, 1.0), max(chroma, 0.0), hue)
            else:
                chroma = calculate_chroma(i, num_steps, None, options)
                oklch = Oklch(
                    _clamp(base.l, *SAFE_LIGHTNESS), _clamp(chroma, *SAFE_CHROMA), hue
                )

            values = color_values(oklch)
            steps.append(
                ColorStep(
                    name=str((i + 1) * 100),
                    values=values,
                    accessibility=check_accessibility(values.hex),
                    is_base_color=is_base,
                )
            )
    except (ArithmeticError, IndexError, TypeError, ValueError) as exc:
        logger.warning(
            "palette_generation_failed", reason=str(exc), base_color=str(base_color)
        )
        raise PaletteGenerationError(
            f"Failed to generate palette step: {exc}", base_color=base_color
        ) from exc

    logger.debug(
        "palette_generated",
        steps=num_steps,
        base_index=base_index,
        lightness_preset=options.lightness_preset.value,
        chroma_preset=options.chroma_preset.value,
        vary_lightness=vary_lightness,
    )
    return steps


def build_palette(
    name: str,
    base_color: ColorValues | str,
    num_steps: int,
    vary_lightness: bool = True,
    options: PaletteOptions | None = None,
    *,
    is_core: bool = True,
    description: str | None = None,
    tags: list[str] | None = None,
) -> ColorPalette:
    """Generate a palette and wrap it with its identity and base color."""
    steps = generate_palette(base_color, num_steps, vary_lightness, options)
    if isinstance(base_color, str):
        base_values = convert_to_all_formats(base_color)
    else:
        base_values = base_color
    return ColorPalette(
        name=name,
        base_color=base_values,
        steps=steps,
        description=description,
        tags=list(tags or []),
        is_core=is_core,
    )


class PaletteServiceImpl(PaletteService):
    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def _steps(self, num_steps: int | None) -> int:
        if num_steps is None:
            return self._settings.default_palette_steps
        return num_steps

    def default_options(self) -> PaletteOptions:
        return PaletteOptions(
            lightness_range=self._settings.default_lightness_range,
            chroma_range=self._settings.default_chroma_range,
            lock_base_color=self._settings.lock_base_color,
        )

    def generate(
        self,
        base_color: ColorValues | str,
        num_steps: int | None = None,
        vary_lightness: bool = True,
        options: PaletteOptions | None = None,
    ) -> list[ColorStep]:
        return generate_palette(
            base_color,
            self._steps(num_steps),
            vary_lightness,
            options or self.default_options(),
        )

    def build(
        self,
        name: str,
        base_color: ColorValues | str,
        num_steps: int | None = None,
        options: PaletteOptions | None = None,
        *,
        is_core: bool = True,
    ) -> ColorPalette:
        return build_palette(
            name,
            base_color,
            self._steps(num_steps),
            options=options or self.default_options(),
            is_core=is_core,
        )

    def accessibility(self, color: str) -> AccessibilityReport:
        return check_accessibility(color)

    def meets_contrast(
        self, foreground: str, background: str, *, large_text: bool = False
    ) -> bool:
        return meets_contrast(
            foreground,
            background,
            large_text=large_text,
            min_contrast_body=self._settings.min_contrast_body,
            min_contrast_large=self._settings.min_contrast_large,
        )
