"""Color domain model: color spaces, serialized values, palettes."""

from dataclasses import dataclass, field
from uuid import uuid4

from design_token_engine.domain.value_objects import ChromaPreset, LightnessPreset


@dataclass(frozen=True, slots=True)
class Rgb:
    """Gamma-encoded sRGB color with channels in [0, 1] (unclipped)."""

    r: float
    g: float
    b: float

    @property
    def in_gamut(self) -> bool:
        return all(0.0 <= channel <= 1.0 for channel in (self.r, self.g, self.b))

    def clipped(self) -> "Rgb":
        return Rgb(*(min(1.0, max(0.0, channel)) for channel in (self.r, self.g, self.b)))


@dataclass(frozen=True, slots=True)
class Oklch:
    """OKLCH color. Any component may be None when the source left it unset.

    An achromatic color has hue None.
    """

    l: float | None
    c: float | None
    h: float | None

    @property
    def is_complete(self) -> bool:
        return self.l is not None and self.c is not None and self.h is not None


@dataclass(frozen=True, slots=True)
class Cmyk:
    """Naive (profile-free) CMYK with components in [0, 1]."""

    c: float
    m: float
    y: float
    k: float


@dataclass(frozen=True, slots=True)
class ColorValues:
    """Serializations of one color, produced together so they always agree."""

    hex: str
    rgb: str
    oklch: str
    cmyk: str | None = None
    pantone: str | None = None


@dataclass(frozen=True, slots=True)
class AccessibilityReport:
    contrast_with_white: float
    contrast_with_black: float
    wcag_aa_normal: bool
    wcag_aa_large: bool
    wcag_aaa: bool

    @property
    def best_contrast(self) -> float:
        return max(self.contrast_with_white, self.contrast_with_black)

    @property
    def preferred_text_color(self) -> str:
        """Hex of the text color (white or black) with the better contrast."""
        if self.contrast_with_white >= self.contrast_with_black:
            return "#ffffff"
        return "#000000"

    @classmethod
    def no_contrast(cls) -> "AccessibilityReport":
        """Report used when a color cannot be evaluated."""
        return cls(
            contrast_with_white=1.0,
            contrast_with_black=1.0,
            wcag_aa_normal=False,
            wcag_aa_large=False,
            wcag_aaa=False,
        )


@dataclass(frozen=True, slots=True)
class ColorStep:
    name: str
    values: ColorValues
    accessibility: AccessibilityReport
    is_base_color: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class PaletteOptions:
    """Per-request palette generation options.

    Ranges are (min, max) pairs: lightness in [0, 1], chroma >= 0.
    """

    lightness_preset: LightnessPreset = LightnessPreset.LINEAR
    chroma_preset: ChromaPreset = ChromaPreset.CONSTANT
    lightness_range: tuple[float, float] = (0.0, 1.0)
    chroma_range: tuple[float, float] = (0.0, 0.4)
    hue_shift: float = 0.0
    lock_base_color: bool = True
    custom_lightness_values: list[float] = field(default_factory=list)
    custom_chroma_values: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.lightness_preset, LightnessPreset):
            self.lightness_preset = LightnessPreset(self.lightness_preset)
        if not isinstance(self.chroma_preset, ChromaPreset):
            self.chroma_preset = ChromaPreset(self.chroma_preset)
        self.lightness_range = (float(self.lightness_range[0]), float(self.lightness_range[1]))
        self.chroma_range = (float(self.chroma_range[0]), float(self.chroma_range[1]))


@dataclass
class ColorPalette:
    name: str
    base_color: ColorValues
    steps: list[ColorStep]
    id: str = field(default_factory=lambda: str(uuid4()))
    description: str | None = None
    tags: list[str] = field(default_factory=list)
    is_core: bool = True

    @property
    def base_step(self) -> ColorStep | None:
        for step in self.steps:
            if step.is_base_color:
                return step
        return None

    def step(self, name: str) -> ColorStep:
        for candidate in self.steps:
            if candidate.name == name:
                return candidate
        raise KeyError(name)
