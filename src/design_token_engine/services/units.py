"""Size conversion between absolute and root-relative CSS units."""

from design_token_engine.domain.value_objects import Unit
from design_token_engine.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_REFERENCE_BASE_SIZE_PX = 16.0
PX_PER_PT = 96.0 / 72.0


def _to_px(value: float, unit: Unit, reference_base_size_px: float) -> float:
    if unit in (Unit.REM, Unit.EM):
        return value * reference_base_size_px
    if unit == Unit.PT:
        return value * PX_PER_PT
    return value


def _from_px(value: float, unit: Unit, reference_base_size_px: float) -> float:
    if unit in (Unit.REM, Unit.EM):
        return value / reference_base_size_px
    if unit == Unit.PT:
        return value / PX_PER_PT
    return value


def _parse_unit(unit: Unit | str) -> Unit | None:
    if isinstance(unit, Unit):
        return unit
    try:
        return Unit(str(unit).strip().lower())
    except ValueError:
        return None


def convert_units(
    value: float,
    from_unit: Unit | str,
    to_unit: Unit | str,
    reference_base_size_px: float = DEFAULT_REFERENCE_BASE_SIZE_PX,
) -> float:
    """Convert a size between px, rem, em and pt.

    rem and em are both resolved against reference_base_size_px. No rounding
    is applied. An unknown unit, or a non-positive reference size, returns
    value unchanged so a bad unit never breaks rendering.
    """
    source = _parse_unit(from_unit)
    target = _parse_unit(to_unit)
    if source is None or target is None:
        logger.debug(
            "unknown_unit_passthrough",
            from_unit=str(from_unit),
            to_unit=str(to_unit),
        )
        return value
    if source == target:
        return value
    if reference_base_size_px <= 0:
        logger.debug(
            "invalid_reference_size_passthrough",
            reference_base_size_px=reference_base_size_px,
        )
        return value

    px = _to_px(value, source, reference_base_size_px)
    return _from_px(px, target, reference_base_size_px)
