"""Type scale generation.

A modular scale is a geometric sequence anchored at the base size f0:
step i has size base * ratio**i, for i from -steps_down to +steps_up. Steps
are returned in ascending index order and converted to the caller's unit.
"""

import re
from collections.abc import Iterable, Sequence
from typing import Any

from design_token_engine.config import Settings, get_settings
from design_token_engine.domain.typography import (
    DistanceScaleConfig,
    ResolvedTypeStyle,
    ScaleConfig,
    ScaleStep,
    TypeStyle,
    step_label,
)
from design_token_engine.domain.value_objects import ScaleMethod, Unit
from design_token_engine.exceptions import InvalidScaleConfigError
from design_token_engine.logging_config import get_logger
from design_token_engine.services.distance import (
    calculate_distance_based_size_for_config,
)
from design_token_engine.services.interfaces import TypeScaleService
from design_token_engine.services.type_styles import resolve_type_styles
from design_token_engine.services.units import (
    DEFAULT_REFERENCE_BASE_SIZE_PX,
    convert_units,
)

logger = get_logger(__name__)

RECOMMENDATION_DEFAULTS: dict[str, float] = {
    "base_size": 16.0,
    "ratio": 1.2,
    "steps_up": 3,
    "steps_down": 2,
}

_BASE_SIZE_PATTERNS = (
    re.compile(
        r"(?:recommended|base)\s+size(?:\s+is|\s+of)?\s*:?\s*(\d+(?:\.\d+)?)\s*px",
        re.I,
    ),
    re.compile(r"base\s+size[:\s]+(\d+(?:\.\d+)?)", re.I),
)
_RATIO_PATTERNS = (
    re.compile(r"ratio(?:\s+is|\s+of)?\s*:?\s*(\d+(?:\.\d+)?)", re.I),
)
_STEPS_UP_PATTERNS = (
    re.compile(r"steps\s+up(?:\s+is|\s+of)?\s*:?\s*(\d+)", re.I),
    re.compile(r"(\d+)\s+steps?\s+up", re.I),
)
_STEPS_DOWN_PATTERNS = (
    re.compile(r"steps\s+down(?:\s+is|\s+of)?\s*:?\s*(\d+)", re.I),
    re.compile(r"(\d+)\s+steps?\s+down", re.I),
)


def calculate_type_scale(
    base_size: float,
    ratio: float,
    steps_up: int,
    steps_down: int,
    target_unit: Unit | str = Unit.PX,
    reference_base_size_px: float = DEFAULT_REFERENCE_BASE_SIZE_PX,
) -> list[ScaleStep]:
    """Build the modular scale f-steps_down .. f0 .. f+steps_up.

    base_size is in px. Every size is converted from px to target_unit; the
    ratio on each step is the scale-wide ratio.

    Raises:
        InvalidScaleConfigError: negative step counts or non-positive
            base size or ratio.
    """
    if base_size <= 0:
        raise InvalidScaleConfigError("base_size", base_size, "must be > 0")
    if ratio <= 0:
        raise InvalidScaleConfigError("ratio", ratio, "must be > 0")
    if steps_up < 0:
        raise InvalidScaleConfigError("steps_up", steps_up, "must be >= 0")
    if steps_down < 0:
        raise InvalidScaleConfigError("steps_down", steps_down, "must be >= 0")

    def _step(index: int, size_px: float) -> ScaleStep:
        size = convert_units(size_px, Unit.PX, target_unit, reference_base_size_px)
        return ScaleStep(label=step_label(index), size=size, ratio=ratio)

    steps: list[ScaleStep] = []
    for i in range(steps_down, 0, -1):
        steps.append(_step(-i, base_size / ratio**i))
    steps.append(_step(0, base_size))
    for i in range(1, steps_up + 1):
        steps.append(_step(i, base_size * ratio**i))
    return steps


def resolve_base_size(
    config: ScaleConfig, distance: DistanceScaleConfig | None = None
) -> float:
    """Return the px base size a config produces.

    The distance method ignores config.base_size and derives the base from
    the viewing conditions.
    """
    if config.method == ScaleMethod.DISTANCE:
        if distance is None:
            raise InvalidScaleConfigError(
                "distance", None, "required when method is 'distance'"
            )
        return calculate_distance_based_size_for_config(distance)
    return config.base_size


def calculate_scale_for_config(
    config: ScaleConfig,
    target_unit: Unit | str = Unit.PX,
    distance: DistanceScaleConfig | None = None,
    reference_base_size_px: float = DEFAULT_REFERENCE_BASE_SIZE_PX,
) -> list[ScaleStep]:
    """Build the scale described by a platform's ScaleConfig."""
    base_size = resolve_base_size(config, distance)
    steps = calculate_type_scale(
        base_size,
        config.ratio,
        config.steps_up,
        config.steps_down,
        target_unit,
        reference_base_size_px,
    )
    logger.debug(
        "type_scale_calculated",
        method=config.method.value,
        base_size_px=base_size,
        ratio=config.ratio,
        steps=len(steps),
        unit=str(getattr(target_unit, "value", target_unit)),
    )
    return steps


def _first_match(patterns: tuple[re.Pattern[str], ...], text: str) -> str | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def parse_scale_recommendation(text: Any) -> ScaleConfig:
    """Parse a free-text scale recommendation into an 'ai' ScaleConfig.

    Understands lines such as "base size: 18px", "ratio: 1.333",
    "steps up: 5", "steps down: 2" and looser phrasing ("a base size of
    18px", "4 steps up"). Fields that are missing or out of range fall back
    to RECOMMENDATION_DEFAULTS.
    """
    values = dict(RECOMMENDATION_DEFAULTS)
    if not isinstance(text, str):
        logger.warning("recommendation_not_text", received=type(text).__name__)
        return _recommendation_config(values)

    raw_base = _first_match(_BASE_SIZE_PATTERNS, text)
    raw_ratio = _first_match(_RATIO_PATTERNS, text)
    raw_up = _first_match(_STEPS_UP_PATTERNS, text)
    raw_down = _first_match(_STEPS_DOWN_PATTERNS, text)

    if raw_base is not None and float(raw_base) > 0:
        values["base_size"] = float(raw_base)
    if raw_ratio is not None and float(raw_ratio) > 1:
        values["ratio"] = float(raw_ratio)
    if raw_up is not None:
        values["steps_up"] = int(raw_up)
    if raw_down is not None:
        values["steps_down"] = int(raw_down)

    missing = [
        name
        for name, raw in (
            ("base_size", raw_base),
            ("ratio", raw_ratio),
            ("steps_up", raw_up),
            ("steps_down", raw_down),
        )
        if raw is None
    ]
    if missing:
        logger.info("recommendation_fields_defaulted", fields=missing)
    return _recommendation_config(values)


def _recommendation_config(values: dict[str, float]) -> ScaleConfig:
    return ScaleConfig(
        base_size=values["base_size"],
        ratio=values["ratio"],
        steps_up=int(values["steps_up"]),
        steps_down=int(values["steps_down"]),
        method=ScaleMethod.AI,
    )


class TypeScaleServiceImpl(TypeScaleService):
    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def calculate_scale(
        self,
        config: ScaleConfig,
        target_unit: Unit | str | None = None,
        distance: DistanceScaleConfig | None = None,
    ) -> list[ScaleStep]:
        return calculate_scale_for_config(
            config,
            target_unit or self._settings.default_unit,
            distance,
            self._settings.reference_base_size_px,
        )

    def base_size_for_distance(self, distance: DistanceScaleConfig) -> float:
        return calculate_distance_based_size_for_config(distance)

    def config_from_recommendation(self, text: str) -> ScaleConfig:
        return parse_scale_recommendation(text)

    def resolve_styles(
        self, styles: Iterable[TypeStyle], steps: Sequence[ScaleStep]
    ) -> list[ResolvedTypeStyle]:
        return resolve_type_styles(styles, steps)
