"""Loggers and the process-wide name registry.

Usage:
    from logxi import get_logger

    log = get_logger("api")
    log.info("Server starting", "port", 3334)
    raise log.error("Request failed", "err", exc)
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import Any, NoReturn, TextIO

import structlog

from logxi.config import build_formatter
from logxi.errors import LogxiError
from logxi.formatters import HappyDevFormatter
from logxi.levels import Level
from logxi.settings import LogxiSettings
from logxi.writer import colorable_stdout, colors_enabled

log = structlog.get_logger(__name__)

# Name of the default logger
DEFAULT_NAME = "~"


def _extract_error(msg: str, args: Sequence[Any]) -> BaseException:
    for arg in args:
        if isinstance(arg, BaseException):
            return arg
    return LogxiError(msg)


class Logger:
    """Named logger writing formatted lines to a stream.

    Each level method calls ``formatter.format`` directly: the stack context
    of warnings and errors relies on that call depth (see
    ``logxi.formatters.INTERNAL_FRAMES``). Wrappers around these methods must
    pass the extra depth through ``HappyDevFormatter.format(skip=...)``.
    """

    def __init__(
        self,
        name: str,
        formatter: HappyDevFormatter,
        writer: TextIO | None = None,
    ) -> None:
        self.name = name
        self.formatter = formatter
        self.writer = writer
        self._lock = threading.Lock()

    def debug(self, msg: str, *args: Any) -> None:
        self._write(self.formatter.format(Level.DEBUG, msg, args))

    def info(self, msg: str, *args: Any) -> None:
        self._write(self.formatter.format(Level.INFO, msg, args))

    def warn(self, msg: str, *args: Any) -> BaseException:
        """Log a warning and return an error the caller may raise.

        The error is the first exception among ``args``, otherwise a
        :class:`LogxiError` carrying ``msg``.
        """
        self._write(self.formatter.format(Level.WARN, msg, args))
        return _extract_error(msg, args)

    warning = warn

    def error(self, msg: str, *args: Any) -> BaseException:
        """Log an error and return an error the caller may raise."""
        self._write(self.formatter.format(Level.ERROR, msg, args))
        return _extract_error(msg, args)

    def fatal(self, msg: str, *args: Any) -> NoReturn:
        """Log a fatal event and exit with status 1."""
        self._write(self.formatter.format(Level.FATAL, msg, args))
        raise SystemExit(1)

    def log(self, level: int, msg: str, *args: Any) -> None:
        """Log at an arbitrary level. A FATAL event does not exit here."""
        self._write(self.formatter.format(level, msg, args))

    def _write(self, line: str) -> None:
        writer = self.writer if self.writer is not None else sys.stdout
        with self._lock:
            writer.write(line)
            writer.flush()

    def __repr__(self) -> str:
        return f"Logger(name={self.name!r})"


class LoggerRegistry:
    """Thread-safe name -> Logger store; at most one logger per name."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._loggers: dict[str, Logger] = {}

    def get_or_create(self, name: str, factory: Callable[[str], Logger]) -> Logger:
        """Return the logger registered as ``name``, creating it on first use."""
        with self._lock:
            logger = self._loggers.get(name)
            if logger is not None:
                return logger
            logger = factory(name)
            self._loggers[name] = logger
            count = len(self._loggers)
        log.debug("Logger created", name=name, registered=count)
        return logger

    def clear(self) -> None:
        """Forget every registered logger."""
        with self._lock:
            self._loggers.clear()


registry = LoggerRegistry()


def new_logger(
    name: str,
    *,
    writer: TextIO | None = None,
    settings: LogxiSettings | None = None,
    colors: bool | None = None,
) -> Logger:
    """Create an unregistered logger.

    Colors are auto-detected from the target stream when ``colors`` is None.
    """
    stream = writer if writer is not None else sys.stdout
    if colors is None:
        colors = colors_enabled(stream, settings)
    if writer is None:
        colorable_stdout(colors)
    return Logger(name, build_formatter(name, settings=settings, colors=colors), writer)


def get_logger(name: str = DEFAULT_NAME) -> Logger:
    """Return the registered logger for ``name``, creating it on first use."""
    return registry.get_or_create(name, new_logger)
