"""Terminal detection and color-capable output streams."""

from __future__ import annotations

import sys
from typing import TextIO

import colorama
import structlog

from logxi.settings import LogxiSettings, get_settings

log = structlog.get_logger(__name__)


def is_terminal(stream: TextIO) -> bool:
    """Whether ``stream`` is attached to an interactive terminal."""
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        # Foreign file-likes or closed streams
        return False


def colors_enabled(stream: TextIO, settings: LogxiSettings | None = None) -> bool:
    """Decide whether output to ``stream`` is colorized.

    ``no_color`` wins over ``force_color``, which wins over TTY detection.
    """
    settings = settings or get_settings()
    if settings.no_color:
        return False
    if settings.force_color:
        return True
    return is_terminal(stream)


def colorable_stdout(colors: bool) -> TextIO:
    """Return stdout, enabling ANSI sequences on Windows consoles when colorizing."""
    if colors and sys.platform == "win32":
        colorama.just_fix_windows_console()
        log.debug("Enabled ANSI processing on Windows console")
    return sys.stdout
