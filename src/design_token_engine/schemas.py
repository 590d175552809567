"""Pydantic v2 schemas for the plain data exchanged with callers.

Field names are snake_case in Python and camelCase on the wire
(baseSize, contrastWithWhite, isBaseColor). Requests validate input and
convert to domain objects with to_domain(); responses are built from domain
objects with model_validate(obj).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from design_token_engine.domain.colors import PaletteOptions
from design_token_engine.domain.typography import DistanceScaleConfig, ScaleConfig
from design_token_engine.domain.value_objects import (
    ChromaPreset,
    Lighting,
    LightnessPreset,
    ScaleMethod,
    TextType,
    Unit,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# Typography Schemas
class DistanceScaleRequest(CamelModel):
    """Viewing conditions for a distance-based base size."""

    viewing_distance: float = Field(..., gt=0, description="Distance in cm")
    visual_acuity: float = Field(default=1.0, gt=0)
    mean_length_ratio: float = Field(default=1.0, gt=0)
    text_type: TextType = TextType.CONTINUOUS
    lighting: Lighting = Lighting.GOOD
    ppi: float = Field(default=96.0, gt=0)

    def to_domain(self) -> DistanceScaleConfig:
        return DistanceScaleConfig(
            viewing_distance=self.viewing_distance,
            visual_acuity=self.visual_acuity,
            mean_length_ratio=self.mean_length_ratio,
            text_type=self.text_type,
            lighting=self.lighting,
            ppi=self.ppi,
        )


class ScaleRequest(CamelModel):
    """Schema for requesting a type scale."""

    method: ScaleMethod = ScaleMethod.MODULAR
    base_size: float = Field(default=16.0, gt=0)
    ratio: float = Field(default=1.25, gt=1)
    steps_up: int = Field(default=5, ge=0, le=20)
    steps_down: int = Field(default=2, ge=0, le=20)
    target_unit: Unit = Unit.PX
    distance: DistanceScaleRequest | None = None

    @model_validator(mode="after")
    def require_distance_for_distance_method(self) -> "ScaleRequest":
        if self.method == ScaleMethod.DISTANCE and self.distance is None:
            raise ValueError("distance is required when method is 'distance'")
        return self

    def to_domain(self) -> ScaleConfig:
        return ScaleConfig(
            base_size=self.base_size,
            ratio=self.ratio,
            steps_up=self.steps_up,
            steps_down=self.steps_down,
            method=self.method,
        )


class ScaleStepResponse(CamelResponse):
    label: str
    size: float
    ratio: float


# Color Schemas
class PaletteOptionsRequest(CamelModel):
    """Schema for palette generation options."""

    lightness_preset: LightnessPreset = LightnessPreset.LINEAR
    chroma_preset: ChromaPreset = ChromaPreset.CONSTANT
    lightness_range: tuple[float, float] = (0.05, 0.95)
    chroma_range: tuple[float, float] = (0.01, 0.4)
    hue_shift: float = 0.0
    lock_base_color: bool = True
    custom_lightness_values: list[float] = Field(default_factory=list)
    custom_chroma_values: list[float] = Field(default_factory=list)

    @field_validator("lightness_range")
    @classmethod
    def validate_lightness_range(cls, v: tuple[float, float]) -> tuple[float, float]:
        low, high = v
        if not 0 <= low <= high <= 1:
            raise ValueError("lightness range must satisfy 0 <= min <= max <= 1")
        return v

    @field_validator("chroma_range")
    @classmethod
    def validate_chroma_range(cls, v: tuple[float, float]) -> tuple[float, float]:
        low, high = v
        if not 0 <= low <= high:
            raise ValueError("chroma range must satisfy 0 <= min <= max")
        return v

    @field_validator("custom_lightness_values")
    @classmethod
    def validate_custom_lightness(cls, v: list[float]) -> list[float]:
        if any(not 0 <= value <= 1 for value in v):
            raise ValueError("custom lightness values must be within [0, 1]")
        return v

    @field_validator("custom_chroma_values")
    @classmethod
    def validate_custom_chroma(cls, v: list[float]) -> list[float]:
        if any(value < 0 for value in v):
            raise ValueError("custom chroma values must be >= 0")
        return v

    def to_domain(self) -> PaletteOptions:
        return PaletteOptions(
            lightness_preset=self.lightness_preset,
            chroma_preset=self.chroma_preset,
            lightness_range=self.lightness_range,
            chroma_range=self.chroma_range,
            hue_shift=self.hue_shift,
            lock_base_color=self.lock_base_color,
            custom_lightness_values=list(self.custom_lightness_values),
            custom_chroma_values=list(self.custom_chroma_values),
        )


class PaletteRequest(CamelModel):
    """Schema for generating a palette.

    to_domain() returns the PaletteOptions; base_color, num_steps and
    vary_lightness are passed to the generator as they are.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(default="Palette", min_length=1, max_length=255)
    base_color: str = Field(..., min_length=1)
    num_steps: int = Field(default=9, ge=1, le=20)
    vary_lightness: bool = True
    options: PaletteOptionsRequest = Field(default_factory=PaletteOptionsRequest)

    def to_domain(self) -> PaletteOptions:
        return self.options.to_domain()


class ColorValuesResponse(CamelResponse):
    hex: str
    rgb: str
    oklch: str
    cmyk: str | None = None
    pantone: str | None = None


class AccessibilityReportResponse(CamelResponse):
    contrast_with_white: float
    contrast_with_black: float
    wcag_aa_normal: bool = Field(alias="wcagAANormal")
    wcag_aa_large: bool = Field(alias="wcagAALarge")
    wcag_aaa: bool = Field(alias="wcagAAA")


class ColorStepResponse(CamelResponse):
    id: str
    name: str
    values: ColorValuesResponse
    accessibility: AccessibilityReportResponse
    is_base_color: bool


class ColorPaletteResponse(CamelResponse):
    id: str
    name: str
    base_color: ColorValuesResponse
    steps: list[ColorStepResponse]
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_core: bool = True
