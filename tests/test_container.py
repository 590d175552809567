from design_token_engine.config import Settings
from design_token_engine.container import Container, get_container, reset_container
from design_token_engine.services.interfaces import PaletteService, TypeScaleService
from design_token_engine.services.palette import PaletteServiceImpl
from design_token_engine.services.scale import TypeScaleServiceImpl


class TestContainer:
    def test_builds_services(self, test_settings: Settings) -> None:
        container = Container(settings=test_settings)

        assert isinstance(container.type_scale_service, TypeScaleServiceImpl)
        assert isinstance(container.type_scale_service, TypeScaleService)
        assert isinstance(container.palette_service, PaletteServiceImpl)
        assert isinstance(container.palette_service, PaletteService)

    def test_services_are_cached(self, test_settings: Settings) -> None:
        container = Container(settings=test_settings)

        assert container.palette_service is container.palette_service
        assert container.type_scale_service is container.type_scale_service

    def test_services_share_settings(self) -> None:
        settings = Settings(default_palette_steps=4, _env_file=None)
        container = Container(settings=settings)

        assert container.settings is settings
        assert len(container.palette_service.generate("#3264c8")) == 4


class TestGlobalContainer:
    def test_singleton(self) -> None:
        assert get_container() is get_container()

    def test_reset(self) -> None:
        first = get_container()

        reset_container()

        assert get_container() is not first
