"""logxi - happy developer log formatting.

Renders log events as colorized ``key=value`` lines for terminals, with the
call site attached to warnings and the call trace attached to errors.

Usage:
    from logxi import get_logger

    log = get_logger("api")
    log.info("Server starting", "port", 3334)
    log.warn("Slow query", "elapsed_ms", 1250)

    # Or through structlog
    from logxi import configure_logging

    configure_logging(name="api")
"""

from logxi._version import __version__, get_version
from logxi.colors import (
    ANSI_RESET,
    DARK_SCHEME,
    LIGHT_SCHEME,
    SCHEMES,
    ColorTheme,
    color_code,
    named_theme,
    parse_theme,
)
from logxi.config import build_formatter, configure_logging
from logxi.errors import ConfigurationError, LogxiError, TracedError
from logxi.formatters import HappyDevFormatter
from logxi.levels import Level, label_for
from logxi.logger import DEFAULT_NAME, Logger, LoggerRegistry, get_logger, new_logger
from logxi.renderer import LogxiRenderer
from logxi.settings import LogxiSettings, get_settings

__all__ = [
    "ANSI_RESET",
    "DARK_SCHEME",
    "DEFAULT_NAME",
    "LIGHT_SCHEME",
    "SCHEMES",
    "ColorTheme",
    "ConfigurationError",
    "HappyDevFormatter",
    "Level",
    "Logger",
    "LoggerRegistry",
    "LogxiError",
    "LogxiRenderer",
    "LogxiSettings",
    "TracedError",
    "__version__",
    "build_formatter",
    "color_code",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_version",
    "label_for",
    "named_theme",
    "new_logger",
    "parse_theme",
]
