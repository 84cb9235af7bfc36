"""Formatter construction and structlog configuration.

Usage:
    from logxi.config import configure_logging

    configure_logging(name="api")
    log = structlog.get_logger()
    log.info("Server starting", port=3334)
"""

from __future__ import annotations

import sys

import structlog

from logxi.formatters import HappyDevFormatter
from logxi.renderer import LogxiRenderer
from logxi.settings import LogxiSettings, get_settings
from logxi.writer import colorable_stdout, colors_enabled

log = structlog.get_logger(__name__)

# Name of the logger used by the library itself
INTERNAL_NAME = "logxi"


def build_formatter(
    name: str,
    *,
    settings: LogxiSettings | None = None,
    colors: bool = False,
) -> HappyDevFormatter:
    """Create a formatter for ``name`` from settings."""
    settings = settings or get_settings()
    return HappyDevFormatter(
        name,
        settings.build_theme(colors),
        separator=settings.separator,
        time_format=settings.time_format,
    )


def configure_logging(
    *,
    name: str = INTERNAL_NAME,
    settings: LogxiSettings | None = None,
    colors: bool | None = None,
) -> None:
    """Configure structlog to render through logxi.

    Call this once at application startup before any logging.

    Args:
        name: Logger name written in the ``n`` field
        settings: Settings to use (environment-derived if None)
        colors: Enable colors (auto-detect TTY/NO_COLOR/FORCE_COLOR if None)

    Raises:
        ConfigurationError: If the settings name an unknown log level
    """
    settings = settings or get_settings()
    min_level = settings.min_level()
    if colors is None:
        colors = colors_enabled(sys.stdout, settings)

    renderer = LogxiRenderer(build_formatter(name, settings=settings, colors=colors))

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(int(min_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(colorable_stdout(colors)),
        cache_logger_on_first_use=False,
    )
    log.debug(
        "Logging configured",
        name=name,
        colors=colors,
        scheme=settings.scheme,
        theme=settings.theme_spec(),
        log_level=min_level.name.lower(),
    )
