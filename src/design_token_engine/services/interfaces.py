from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from design_token_engine.domain.colors import (
    AccessibilityReport,
    ColorPalette,
    ColorStep,
    ColorValues,
    PaletteOptions,
)
from design_token_engine.domain.typography import (
    DistanceScaleConfig,
    ResolvedTypeStyle,
    ScaleConfig,
    ScaleStep,
    TypeStyle,
)
from design_token_engine.domain.value_objects import Unit


class TypeScaleService(ABC):
    @abstractmethod
    def calculate_scale(
        self,
        config: ScaleConfig,
        target_unit: Unit | str | None = None,
        distance: DistanceScaleConfig | None = None,
    ) -> list[ScaleStep]:
        pass

    @abstractmethod
    def base_size_for_distance(self, distance: DistanceScaleConfig) -> float:
        pass

    @abstractmethod
    def config_from_recommendation(self, text: str) -> ScaleConfig:
        pass

    @abstractmethod
    def resolve_styles(
        self, styles: Iterable[TypeStyle], steps: Sequence[ScaleStep]
    ) -> list[ResolvedTypeStyle]:
        pass


class PaletteService(ABC):
    @abstractmethod
    def generate(
        self,
        base_color: ColorValues | str,
        num_steps: int | None = None,
        vary_lightness: bool = True,
        options: PaletteOptions | None = None,
    ) -> list[ColorStep]:
        pass

    @abstractmethod
    def build(
        self,
        name: str,
        base_color: ColorValues | str,
        num_steps: int | None = None,
        options: PaletteOptions | None = None,
        *,
        is_core: bool = True,
    ) -> ColorPalette:
        pass

    @abstractmethod
    def default_options(self) -> PaletteOptions:
        pass

    @abstractmethod
    def accessibility(self, color: str) -> AccessibilityReport:
        pass

    @abstractmethod
    def meets_contrast(
        self, foreground: str, background: str, *, large_text: bool = False
    ) -> bool:
        pass
