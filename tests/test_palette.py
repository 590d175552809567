import logging

import pytest

from design_token_engine.config import Settings
from design_token_engine.domain import ColorValues, PaletteOptions
from design_token_engine.domain.value_objects import ChromaPreset, LightnessPreset
from design_token_engine.exceptions import ColorParseError, PaletteGenerationError
from design_token_engine.services.color_conversion import (
    check_accessibility,
    parse_color,
)
from design_token_engine.services.palette import (
    PaletteServiceImpl,
    build_palette,
    calculate_chroma,
    calculate_lightness,
    generate_palette,
)


def _oklch(step):
    return parse_color(step.values.oklch)


class TestCalculateLightness:
    """Lightness presets across a five-step range."""

    @pytest.fixture
    def unit_range(self) -> PaletteOptions:
        return PaletteOptions(lightness_range=(0.0, 1.0))

    def test_linear(self, unit_range: PaletteOptions) -> None:
        values = [calculate_lightness(i, 5, unit_range) for i in range(5)]

        assert values == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])

    @pytest.mark.parametrize("preset", list(LightnessPreset))
    def test_endpoints_anchored(self, preset: LightnessPreset) -> None:
        options = PaletteOptions(
            lightness_preset=preset,
            lightness_range=(0.1, 0.9),
            custom_lightness_values=[0.1, 0.3, 0.5, 0.7, 0.9],
        )

        assert calculate_lightness(0, 5, options) == pytest.approx(0.1)
        assert calculate_lightness(4, 5, options) == pytest.approx(0.9)

    def test_curved_is_symmetric_s_curve(self) -> None:
        options = PaletteOptions(lightness_preset="curved", lightness_range=(0.0, 1.0))

        values = [calculate_lightness(i, 5, options) for i in range(5)]

        assert values == pytest.approx([0.0, 0.0625, 0.5, 0.9375, 1.0])

    def test_ease_in_front_loads_dark_steps(self) -> None:
        options = PaletteOptions(lightness_preset="easeIn", lightness_range=(0.0, 1.0))

        assert calculate_lightness(2, 5, options) == pytest.approx(0.125)

    def test_ease_out_front_loads_light_steps(self) -> None:
        options = PaletteOptions(
            lightness_preset=LightnessPreset.EASE_OUT, lightness_range=(0.0, 1.0)
        )

        assert calculate_lightness(2, 5, options) == pytest.approx(0.875)

    def test_custom_values(self) -> None:
        options = PaletteOptions(
            lightness_preset="custom", custom_lightness_values=[0.9, 0.7, 0.5]
        )

        assert calculate_lightness(1, 3, options) == 0.7

    def test_short_custom_values_fall_back_to_linear(self, capsys, caplog) -> None:
        options = PaletteOptions(
            lightness_preset="custom",
            lightness_range=(0.0, 1.0),
            custom_lightness_values=[0.9],
        )

        with caplog.at_level(logging.WARNING):
            value = calculate_lightness(1, 5, options)

        assert value == pytest.approx(0.25)
        captured = capsys.readouterr()
        assert "custom_lightness_values_short" in captured.out + caplog.text

    def test_single_step_uses_range_start(self) -> None:
        options = PaletteOptions(lightness_range=(0.3, 0.8))

        assert calculate_lightness(0, 1, options) == 0.3


class TestCalculateChroma:
    @pytest.fixture
    def options(self) -> PaletteOptions:
        return PaletteOptions(lightness_range=(0.2, 0.8), chroma_range=(0.1, 0.3))

    def test_constant_is_maximum(self, options: PaletteOptions) -> None:
        assert calculate_chroma(0, 5, 0.2, options) == 0.3

    def test_decrease_follows_lightness(self, options: PaletteOptions) -> None:
        options.chroma_preset = ChromaPreset.DECREASE

        assert calculate_chroma(0, 5, 0.2, options) == pytest.approx(0.3)
        assert calculate_chroma(0, 5, 0.5, options) == pytest.approx(0.2)
        assert calculate_chroma(0, 5, 0.8, options) == pytest.approx(0.1)

    def test_increase_follows_lightness(self, options: PaletteOptions) -> None:
        options.chroma_preset = ChromaPreset.INCREASE

        assert calculate_chroma(3, 5, 0.5, options) == pytest.approx(0.2)

    def test_lightness_outside_range_is_clamped(self, options: PaletteOptions) -> None:
        options.chroma_preset = ChromaPreset.INCREASE

        assert calculate_chroma(0, 5, 1.0, options) == pytest.approx(0.3)
        assert calculate_chroma(0, 5, 0.0, options) == pytest.approx(0.1)

    def test_position_when_lightness_omitted(self, options: PaletteOptions) -> None:
        options.chroma_preset = ChromaPreset.DECREASE

        assert calculate_chroma(0, 5, None, options) == pytest.approx(0.3)
        assert calculate_chroma(4, 5, None, options) == pytest.approx(0.1)

    def test_custom_values(self, options: PaletteOptions) -> None:
        options.chroma_preset = ChromaPreset.CUSTOM
        options.custom_chroma_values = [0.05, 0.15, 0.25]

        assert calculate_chroma(2, 3, 0.5, options) == 0.25

    def test_custom_without_values_interpolates_by_index(
        self, options: PaletteOptions
    ) -> None:
        options.chroma_preset = ChromaPreset.CUSTOM

        values = [calculate_chroma(i, 3, 0.5, options) for i in range(3)]

        assert values == pytest.approx([0.1, 0.2, 0.3])


class TestGeneratePalette:
    """Palette generation around a locked base color."""

    def test_nine_step_palette(
        self, base_color_values: ColorValues, linear_options: PaletteOptions
    ) -> None:
        steps = generate_palette(base_color_values, 9, True, linear_options)

        assert [s.name for s in steps] == [str(n * 100) for n in range(1, 10)]
        base = steps[4]
        assert base.name == "500"
        assert base.is_base_color
        assert base.values.oklch == "oklch(60% 0.15 240)"

    @pytest.mark.parametrize("num_steps", [1, 2, 3, 5, 9, 12, 20])
    def test_cardinality(self, num_steps: int, linear_options: PaletteOptions) -> None:
        steps = generate_palette("#3264c8", num_steps, True, linear_options)

        assert len(steps) == num_steps

    @pytest.mark.parametrize("num_steps", [1, 2, 4, 7, 10])
    def test_single_base_step_at_middle(self, num_steps: int) -> None:
        steps = generate_palette("#3264c8", num_steps)

        flags = [s.is_base_color for s in steps]
        assert flags.count(True) == 1
        assert flags.index(True) == num_steps // 2

    @pytest.mark.parametrize("num_steps", [3, 6, 11])
    def test_locked_base_reproduces_input(self, num_steps: int) -> None:
        steps = generate_palette("oklch(42% 0.12 150)", num_steps)

        base = _oklch(steps[num_steps // 2])
        assert base.l == pytest.approx(0.42)
        assert base.c == pytest.approx(0.12)
        assert base.h == pytest.approx(150)

    def test_unlocked_base_follows_preset(
        self, base_color_values: ColorValues, linear_options: PaletteOptions
    ) -> None:
        linear_options.lock_base_color = False

        steps = generate_palette(base_color_values, 9, True, linear_options)

        assert steps[0].values.oklch == "oklch(5% 0.4 240)"
        assert steps[4].values.oklch == "oklch(50% 0.4 240)"
        assert steps[4].is_base_color

    def test_lightness_increases_with_linear_preset(
        self, linear_options: PaletteOptions
    ) -> None:
        linear_options.lock_base_color = False

        steps = generate_palette("#3264c8", 9, True, linear_options)

        lightness = [_oklch(s).l for s in steps]
        assert all(a < b for a, b in zip(lightness, lightness[1:]))

    def test_hue_shift_applies_to_locked_base(
        self, linear_options: PaletteOptions
    ) -> None:
        linear_options.hue_shift = 150

        steps = generate_palette("oklch(60% 0.15 240)", 5, True, linear_options)

        assert [_oklch(s).h for s in steps] == pytest.approx([30] * 5)
        base = _oklch(steps[2])
        assert base.l == pytest.approx(0.6)
        assert base.c == pytest.approx(0.15)

    def test_chroma_only_keeps_base_lightness(
        self, linear_options: PaletteOptions
    ) -> None:
        linear_options.chroma_preset = ChromaPreset.INCREASE

        steps = generate_palette("oklch(60% 0.15 240)", 9, False, linear_options)

        assert steps[0].values.oklch == "oklch(60% 0.01 240)"
        assert steps[8].values.oklch == "oklch(60% 0.4 240)"
        assert steps[4].values.oklch == "oklch(60% 0.15 240)"

    def test_chroma_only_clamps_lightness(self, linear_options: PaletteOptions) -> None:
        steps = generate_palette("oklch(99% 0.1 200)", 3, False, linear_options)

        assert _oklch(steps[0]).l == pytest.approx(0.95)

    def test_chroma_is_never_negative(self) -> None:
        options = PaletteOptions(
            chroma_preset=ChromaPreset.CUSTOM,
            custom_chroma_values=[-0.2] * 5,
            lock_base_color=False,
        )

        steps = generate_palette("#3264c8", 5, True, options)

        assert all(_oklch(s).c >= 0 for s in steps)

    def test_accessibility_matches_hex(self) -> None:
        steps = generate_palette("#3264c8", 7)

        for step in steps:
            assert step.accessibility == check_accessibility(step.values.hex)

    def test_ids_are_unique(self) -> None:
        steps = generate_palette("#3264c8", 9)

        assert len({s.id for s in steps}) == 9

    def test_deterministic_apart_from_ids(self, linear_options: PaletteOptions) -> None:
        first = generate_palette("#3264c8", 9, True, linear_options)
        second = generate_palette("#3264c8", 9, True, linear_options)

        assert [s.values for s in first] == [s.values for s in second]

    def test_incomplete_base_uses_defaults(self, capsys, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            steps = generate_palette("oklch(none 0.1 120)", 3)

        assert steps[1].values.oklch == "oklch(50% 0.1 120)"
        captured = capsys.readouterr()
        assert "base_color_incomplete" in captured.out + caplog.text

    def test_missing_hue_uses_default(self) -> None:
        base = ColorValues(hex="#777777", rgb="rgb(119, 119, 119)", oklch="oklch(55% 0.05)")

        steps = generate_palette(base, 3)

        assert _oklch(steps[1]).h == pytest.approx(240)


class TestGeneratePaletteFailures:
    def test_unparseable_base(self, capsys, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            with pytest.raises(PaletteGenerationError) as exc_info:
                generate_palette("not-a-color", 9)

        assert isinstance(exc_info.value.__cause__, ColorParseError)
        assert exc_info.value.context["base_color"] == "not-a-color"
        captured = capsys.readouterr()
        assert "palette_generation_failed" in captured.out + caplog.text

    def test_missing_oklch_field(self) -> None:
        base = ColorValues(hex="#3264c8", rgb="rgb(50, 100, 200)", oklch="")

        with pytest.raises(PaletteGenerationError, match="Missing OKLCH"):
            generate_palette(base, 9)

    @pytest.mark.parametrize("num_steps", [0, -3])
    def test_rejects_non_positive_step_count(self, num_steps: int) -> None:
        with pytest.raises(PaletteGenerationError):
            generate_palette("#3264c8", num_steps)

    @pytest.mark.parametrize(
        "overrides",
        [
            {
                "lightness_preset": LightnessPreset.CUSTOM,
                "custom_lightness_values": [None, 0.3, 0.5, 0.7, 0.9],
            },
            {
                "chroma_preset": ChromaPreset.CUSTOM,
                "custom_chroma_values": [None, 0.1, 0.1, 0.1, 0.1],
            },
        ],
    )
    def test_non_numeric_custom_value(self, overrides: dict, capsys, caplog) -> None:
        options = PaletteOptions(**overrides)

        with caplog.at_level(logging.WARNING):
            with pytest.raises(PaletteGenerationError) as exc_info:
                generate_palette("#3264c8", 5, True, options)

        assert isinstance(exc_info.value.__cause__, TypeError)
        captured = capsys.readouterr()
        assert "palette_generation_failed" in captured.out + caplog.text


class TestBuildPalette:
    def test_wraps_steps(self) -> None:
        palette = build_palette(
            "Primary", "#3264C8", 9, tags=["brand"], description="Main brand blue"
        )

        assert palette.name == "Primary"
        assert palette.base_color.hex == "#3264c8"
        assert len(palette.steps) == 9
        assert palette.tags == ["brand"]
        assert palette.description == "Main brand blue"
        assert palette.is_core
        assert palette.base_step is palette.steps[4]
        assert palette.step("500") is palette.steps[4]

    def test_keeps_color_values_base(self, base_color_values: ColorValues) -> None:
        palette = build_palette("Primary", base_color_values, 5, is_core=False)

        assert palette.base_color is base_color_values
        assert not palette.is_core

    def test_unknown_step_name(self) -> None:
        palette = build_palette("Primary", "#3264c8", 3)

        with pytest.raises(KeyError):
            palette.step("900")


class TestPaletteServiceImpl:
    @pytest.fixture
    def service(self) -> PaletteServiceImpl:
        settings = Settings(
            default_palette_steps=5,
            default_lightness_range=(0.1, 0.9),
            default_chroma_range=(0.02, 0.2),
            min_contrast_body=7.0,
            _env_file=None,
        )
        return PaletteServiceImpl(settings)

    def test_default_options_from_settings(self, service: PaletteServiceImpl) -> None:
        options = service.default_options()

        assert options.lightness_range == (0.1, 0.9)
        assert options.chroma_range == (0.02, 0.2)
        assert options.lock_base_color

    def test_default_step_count(self, service: PaletteServiceImpl) -> None:
        assert len(service.generate("#3264c8")) == 5

    def test_explicit_step_count(self, service: PaletteServiceImpl) -> None:
        assert len(service.generate("#3264c8", 11)) == 11

    def test_build(self, service: PaletteServiceImpl) -> None:
        palette = service.build("Accent", "#ff6600", is_core=False)

        assert len(palette.steps) == 5
        assert not palette.is_core

    def test_meets_contrast_uses_settings(self, service: PaletteServiceImpl) -> None:
        assert service.meets_contrast("#000000", "#ffffff")
        assert not service.meets_contrast("#3264c8", "#ffffff")

    def test_accessibility(self, service: PaletteServiceImpl) -> None:
        assert service.accessibility("#000000").wcag_aaa
