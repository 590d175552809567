import pytest
import structlog

from design_token_engine.config import Environment, Settings, get_settings
from design_token_engine.container import reset_container
from design_token_engine.domain import ColorValues, PaletteOptions
from design_token_engine.domain.value_objects import ChromaPreset, LightnessPreset
from design_token_engine.logging_config import clear_context


@pytest.fixture(autouse=True)
def _reset_global_state():
    yield
    get_settings.cache_clear()
    reset_container()
    clear_context()
    structlog.reset_defaults()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment=Environment.TESTING, _env_file=None)


@pytest.fixture
def base_color_values() -> ColorValues:
    return ColorValues(
        hex="#3264C8",
        rgb="rgb(50, 100, 200)",
        oklch="oklch(60% 0.15 240)",
    )


@pytest.fixture
def linear_options() -> PaletteOptions:
    return PaletteOptions(
        lightness_preset=LightnessPreset.LINEAR,
        chroma_preset=ChromaPreset.CONSTANT,
        lightness_range=(0.05, 0.95),
        chroma_range=(0.01, 0.4),
    )
