"""structlog processor rendering events through HappyDevFormatter."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from logxi.errors import TracedError, safe_str
from logxi.formatters import HappyDevFormatter
from logxi.levels import Level
from logxi.stack import count_frames

if TYPE_CHECKING:
    from structlog.typing import EventDict, WrappedLogger

# structlog method name -> severity
METHOD_LEVELS: dict[str, Level] = {
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "msg": Level.INFO,
    "log": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
    "err": Level.ERROR,
    "exception": Level.ERROR,
    "failure": Level.ERROR,
    "critical": Level.FATAL,
    "fatal": Level.FATAL,
}

# Packages whose frames sit between the application and the renderer
_LOGGING_PACKAGES = ("structlog",)


def _exception(exc_info: Any) -> BaseException | None:
    if exc_info is True:
        exc_info = sys.exc_info()
    if isinstance(exc_info, BaseException):
        return exc_info
    if isinstance(exc_info, tuple) and len(exc_info) == 3:
        return exc_info[1]
    return None


class LogxiRenderer:
    """Render a structlog event dict as a logxi line.

    The ``event`` becomes the message, remaining keys become fields in
    insertion order (``_``-prefixed keys are dropped) and ``exc_info`` is
    rendered as an ``err`` field carrying the exception's own traceback.

    Example:
        log.warning("Slow query", elapsed_ms=1250)
        # t=... n=api l=WRN m=Slow query c=app/db.py:42 fetch elapsed_ms=1250
    """

    def __init__(self, formatter: HappyDevFormatter) -> None:
        self.formatter = formatter

    def __call__(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> str:
        """Render a log event to a line without its trailing newline."""
        level_name = str(event_dict.pop("level", method_name)).lower()
        level = METHOD_LEVELS.get(level_name, Level.INFO)
        message = safe_str(event_dict.pop("event", ""))

        error = _exception(event_dict.pop("exc_info", None))

        args: list[Any] = []
        for key, value in event_dict.items():
            if str(key).startswith("_"):
                continue
            args.extend((key, value))
        if error is not None:
            args.extend(("err", TracedError.from_exception(error)))

        # The renderer stands in for Logger.<level>; structlog frames above it
        # are extra depth
        skip = count_frames(_LOGGING_PACKAGES, sys._getframe(1))
        return self.formatter.format(level, message, args, skip=skip).removesuffix("\n")
