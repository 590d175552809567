"""structlog setup for hosts that embed the engine.

The engine only ever calls get_logger(); configure_logging() belongs to the
host. Console output is for development, JSON lines for everything else.
Callers tag events with brand, platform or palette identifiers through
bind_context() or LogContext.
"""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from design_token_engine.config import Settings, get_settings

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s %(message)s"


def _upper_level(
    _: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict["level"] = "WARNING" if method_name == "warn" else method_name.upper()
    return event_dict


def _app_context(settings: Settings) -> Processor:
    app = settings.app_name
    environment = settings.environment.value

    def add_app_context(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("app", app)
        event_dict.setdefault("environment", environment)
        return event_dict

    return add_app_context


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]


def get_console_processors() -> list[Processor]:
    """Processor chain for colored development output."""
    return [
        *_shared_processors(),
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="%H:%M:%S"),
        structlog.dev.ConsoleRenderer(
            exception_formatter=structlog.dev.plain_traceback
        ),
    ]


def get_json_processors(settings: Settings | None = None) -> list[Processor]:
    """Processor chain for JSON lines tagged with app and environment."""
    return [
        *_shared_processors(),
        _upper_level,
        _app_context(settings or get_settings()),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ]


def _file_handler(path: Path, level: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def configure_logging(settings: Settings | None = None) -> None:
    """Route structlog through stdlib logging at settings.log_level.

    Call once at startup. With settings.log_file set, events are also
    appended to that file; its directory is created when missing.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.value)

    if settings.log_format == "json":
        processors = get_json_processors(settings)
    else:
        processors = get_console_processors()

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    if settings.log_file:
        logging.getLogger().addHandler(_file_handler(settings.log_file, level))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Module logger; events are snake_case names with keyword fields.

        logger = get_logger(__name__)
        logger.info("palette_generated", steps=9, base_color="#3264C8")
    """
    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Bind fields for the duration of a with block.

    Values that were already bound under the same keys come back on exit.

        with LogContext(palette_name="primary"):
            steps = generate_palette("#3264C8", 9)
    """

    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = kwargs
        self._previous: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        bound = structlog.contextvars.get_contextvars()
        self._previous = {key: bound[key] for key in self.kwargs if key in bound}
        bind_context(**self.kwargs)
        return self

    def __exit__(self, *exc_info: object) -> None:
        unbind_context(*self.kwargs)
        if self._previous:
            bind_context(**self._previous)
