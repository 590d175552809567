from collections.abc import Iterable, Sequence

from design_token_engine.domain.typography import ResolvedTypeStyle, ScaleStep, TypeStyle
from design_token_engine.logging_config import get_logger

logger = get_logger(__name__)


def resolve_type_styles(
    styles: Iterable[TypeStyle], steps: Sequence[ScaleStep]
) -> list[ResolvedTypeStyle]:
    """Attach the size of each style's scale step to the style.

    Sizes stay in whatever unit the steps were calculated in. Styles bound
    to a step the scale does not have are left out.
    """
    sizes = {step.label: step.size for step in steps}
    resolved: list[ResolvedTypeStyle] = []
    for style in styles:
        size = sizes.get(style.scale_step)
        if size is None:
            logger.warning(
                "type_style_step_missing",
                style_id=style.id,
                scale_step=style.scale_step,
                available=sorted(sizes),
            )
            continue
        resolved.append(
            ResolvedTypeStyle(
                style=style,
                font_size=size,
                line_height_size=size * style.line_height,
            )
        )
    return resolved
