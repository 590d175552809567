import pytest
from pydantic import ValidationError

from design_token_engine.config import Environment, LogLevel, Settings, get_settings


class TestSettingsDefaults:
    def test_defaults(self, test_settings: Settings) -> None:
        assert test_settings.reference_base_size_px == 16
        assert test_settings.default_unit == "px"
        assert test_settings.default_palette_steps == 9
        assert test_settings.default_lightness_range == (0.05, 0.95)
        assert test_settings.default_chroma_range == (0.01, 0.4)
        assert test_settings.lock_base_color is True
        assert test_settings.min_contrast_body == 4.5
        assert test_settings.min_contrast_large == 3.0
        assert test_settings.log_level == LogLevel.INFO

    def test_environment_flags(self, test_settings: Settings) -> None:
        assert test_settings.is_testing
        assert not test_settings.is_production
        assert not test_settings.is_development


class TestLogFormat:
    def test_console_outside_production(self) -> None:
        settings = Settings(environment=Environment.DEVELOPMENT, _env_file=None)

        assert settings.log_format == "console"

    def test_json_in_production(self) -> None:
        settings = Settings(environment=Environment.PRODUCTION, _env_file=None)

        assert settings.log_format == "json"

    def test_explicit_format_wins(self) -> None:
        settings = Settings(
            environment=Environment.PRODUCTION, log_format="console", _env_file=None
        )

        assert settings.log_format == "console"


class TestEnvironmentOverrides:
    """Settings read DTE_ prefixed environment variables."""

    def test_scalar_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DTE_DEFAULT_PALETTE_STEPS", "11")
        monkeypatch.setenv("DTE_REFERENCE_BASE_SIZE_PX", "18")

        settings = Settings(_env_file=None)

        assert settings.default_palette_steps == 11
        assert settings.reference_base_size_px == 18

    def test_range_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DTE_DEFAULT_LIGHTNESS_RANGE", "[0.1, 0.9]")

        settings = Settings(_env_file=None)

        assert settings.default_lightness_range == (0.1, 0.9)

    def test_get_settings_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        get_settings.cache_clear()
        first = get_settings()
        monkeypatch.setenv("DTE_DEFAULT_PALETTE_STEPS", "3")

        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings().default_palette_steps == 3


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_palette_steps": 0},
            {"default_palette_steps": 21},
            {"reference_base_size_px": 0},
            {"default_lightness_range": (0.9, 0.1)},
            {"default_lightness_range": (0.0, 1.5)},
            {"default_chroma_range": (-0.1, 0.4)},
            {"min_contrast_body": 22},
            {"default_unit": "vw"},
        ],
    )
    def test_rejects_invalid(self, kwargs: dict) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **kwargs)
