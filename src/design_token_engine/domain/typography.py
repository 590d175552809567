"""Typography domain model: scale steps, scale configuration and type styles."""

from dataclasses import dataclass

from design_token_engine.domain.value_objects import Lighting, ScaleMethod, TextType
from design_token_engine.exceptions import InvalidScaleConfigError

STEP_LABEL_PREFIX = "f"


def _coerce_enum(enum_cls, field: str, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidScaleConfigError(field, value, f"must be one of {allowed}") from exc


def step_label(index: int) -> str:
    """Return the label for a scale index: f-2, f-1, f0, f1, ..."""
    return f"{STEP_LABEL_PREFIX}{index}"


def step_index(label: str) -> int:
    """Return the scale index encoded in a step label."""
    if not label.startswith(STEP_LABEL_PREFIX):
        raise ValueError(f"Not a scale step label: {label!r}")
    return int(label[len(STEP_LABEL_PREFIX) :])


@dataclass(frozen=True, slots=True)
class ScaleStep:
    """One named size in a type scale.

    size is already expressed in the caller's target unit. ratio is the
    scale-wide ratio, identical on every step of the same scale.
    """

    label: str
    size: float
    ratio: float

    @property
    def index(self) -> int:
        return step_index(self.label)

    @property
    def is_base(self) -> bool:
        return self.label == step_label(0)


@dataclass(frozen=True, slots=True)
class ScaleConfig:
    """Parameters of a type scale for one platform."""

    base_size: float
    ratio: float
    steps_up: int
    steps_down: int
    method: ScaleMethod = ScaleMethod.MODULAR

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "method", _coerce_enum(ScaleMethod, "method", self.method)
        )
        if self.base_size <= 0:
            raise InvalidScaleConfigError("base_size", self.base_size, "must be > 0")
        if self.ratio <= 1:
            raise InvalidScaleConfigError("ratio", self.ratio, "must be > 1")
        if self.steps_up < 0:
            raise InvalidScaleConfigError("steps_up", self.steps_up, "must be >= 0")
        if self.steps_down < 0:
            raise InvalidScaleConfigError("steps_down", self.steps_down, "must be >= 0")

    @property
    def total_steps(self) -> int:
        return self.steps_down + 1 + self.steps_up


@dataclass(frozen=True, slots=True)
class DistanceScaleConfig:
    """Ergonomic inputs for deriving a base size from viewing conditions.

    viewing_distance is in centimetres; ppi is pixels per physical inch of
    the target display or print medium.
    """

    viewing_distance: float
    visual_acuity: float = 1.0
    mean_length_ratio: float = 1.0
    text_type: TextType = TextType.CONTINUOUS
    lighting: Lighting = Lighting.GOOD
    ppi: float = 96.0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "text_type", _coerce_enum(TextType, "text_type", self.text_type)
        )
        object.__setattr__(
            self, "lighting", _coerce_enum(Lighting, "lighting", self.lighting)
        )
        for name in ("viewing_distance", "visual_acuity", "mean_length_ratio", "ppi"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidScaleConfigError(name, value, "must be > 0")


@dataclass(frozen=True, slots=True)
class TypeStyle:
    """A named text style bound to a scale step (e.g. Heading 1 -> f5)."""

    id: str
    name: str
    scale_step: str
    font_weight: int = 400
    line_height: float = 1.5
    letter_spacing: float = 0.0
    optical_size: float | None = None
    font_family: str | None = None


@dataclass(frozen=True, slots=True)
class ResolvedTypeStyle:
    """A type style with the concrete size of its scale step attached."""

    style: TypeStyle
    font_size: float
    line_height_size: float

    @property
    def name(self) -> str:
        return self.style.name
