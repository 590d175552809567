"""Dependency container for the engine's service layer.

Services are built lazily from one Settings instance and cached for reuse.

Usage:
    from design_token_engine.container import get_container

    container = get_container()
    steps = container.type_scale_service.calculate_scale(config)
    palette = container.palette_service.build("Primary", "#3264c8")
"""

from functools import cached_property, lru_cache
from typing import TYPE_CHECKING

from design_token_engine.config import Settings, get_settings
from design_token_engine.logging_config import get_logger

if TYPE_CHECKING:
    from design_token_engine.services.interfaces import (
        PaletteService,
        TypeScaleService,
    )

logger = get_logger(__name__)


class Container:
    """Lazy holder of the engine services.

    Pass custom settings for testing:

        container = Container(settings=Settings(default_palette_steps=5))
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        logger.debug(
            "container_created",
            environment=self._settings.environment.value,
            default_unit=self._settings.default_unit,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @cached_property
    def type_scale_service(self) -> "TypeScaleService":
        from design_token_engine.services.scale import TypeScaleServiceImpl

        return TypeScaleServiceImpl(self._settings)

    @cached_property
    def palette_service(self) -> "PaletteService":
        from design_token_engine.services.palette import PaletteServiceImpl

        return PaletteServiceImpl(self._settings)


_container: Container | None = None


@lru_cache
def get_container() -> Container:
    """Get the global container, created on first access with default settings."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Drop the global container so the next access rebuilds it."""
    global _container
    _container = None
    get_container.cache_clear()
