"""Developer-oriented log line formatting.

Produces one ``key=value`` line per event, fields in a fixed order:

    t=2026-10-19T09:41:07.123456 n=api l=INF m=server started port=8080

Warnings carry the call site in a ``c`` field; errors carry the call trace.
"""

from __future__ import annotations

import io
from collections.abc import Sequence
from datetime import datetime
from enum import Enum, auto
from typing import Any

from logxi.colors import ColorTheme
from logxi.errors import TracedError, safe_str
from logxi.levels import Level
from logxi.stack import caller, format_trace, trace

# Call-depth contract of the public entry points. Every Logger level method
# calls HappyDevFormatter.format directly, so the application frame sits
# INTERNAL_FRAMES above the capture in _context:
#
#     _context <- format <- Logger.<level> <- application
#
# and ERROR_WRAP_SKIP above the capture in TracedError.wrap:
#
#     wrap <- _write_field <- format <- Logger.<level> <- application
#
# Callers adding frames between the application and format pass
# skip=<extra frames> to format.
INTERNAL_FRAMES = 3
ERROR_WRAP_SKIP = 4

DEFAULT_SEPARATOR = " "
DEFAULT_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"
UNKNOWN_LABEL = "???"
IMBALANCED_MARKER = "IMBALANCED_PAIRS=>"


class ValueKind(Enum):
    """How a field value is rendered."""

    PLAIN = auto()
    ERROR = auto()
    TRACED_ERROR = auto()


def classify(value: Any) -> ValueKind:
    if isinstance(value, TracedError):
        return ValueKind.TRACED_ERROR
    if isinstance(value, BaseException):
        return ValueKind.ERROR
    return ValueKind.PLAIN


class HappyDevFormatter:
    """Colorized formatter for terminals.

    Performance is not the priority here; developers seeing errors and
    their stack is. Formatting never raises: malformed arguments are
    flagged inline in the produced line.

    Example:
        t=2026-10-19T09:41:07.123456 n=api l=WRN m=slow query c=app/db.py:42 fetch
    """

    def __init__(
        self,
        name: str,
        theme: ColorTheme | None = None,
        *,
        separator: str = DEFAULT_SEPARATOR,
        time_format: str = DEFAULT_TIME_FORMAT,
    ) -> None:
        """Initialize the formatter.

        Args:
            name: Logger name written in the ``n`` field
            theme: Color theme; colors are disabled when omitted
            separator: Text written between fields
            time_format: ``strftime`` format of the ``t`` field
        """
        self.name = name
        self.theme = theme if theme is not None else ColorTheme.plain()
        self.separator = separator
        self.time_format = time_format

    def format(self, level: int, msg: str, args: Sequence[Any] = (), *, skip: int = 0) -> str:
        """Render one event as a newline-terminated line.

        Args:
            level: Event severity
            msg: Event message
            args: Alternating keys and values
            skip: Frames added between the application and this call
                beyond the call-depth contract
        """
        args = tuple(args)
        theme = self.theme
        buf = io.StringIO()

        self._write_key(buf, "t", first=True)
        self._write_value(buf, datetime.now().strftime(self.time_format), theme.value)
        self._write_field(buf, "n", self.name, theme.value, skip)

        label, color, context = self._context(level, skip)
        self._write_field(buf, "l", label, color, skip)
        self._write_field(buf, "m", msg, color, skip)
        if context:
            self._write_field(buf, "c", context, color, skip)

        if args:
            if len(args) % 2 == 0:
                for i in range(0, len(args), 2):
                    key = args[i]
                    if isinstance(key, str):
                        self._write_field(buf, key, args[i + 1], theme.value, skip)
                    else:
                        self._write_field(buf, f"BADKEY_NAME_{i + 1}", key, theme.error, skip)
                        self._write_field(buf, f"BADKEY_VALUE_{i + 2}", args[i + 1], theme.error, skip)
            else:
                buf.write(self.separator)
                buf.write(theme.error)
                buf.write(IMBALANCED_MARKER)
                buf.write(theme.warn)
                buf.write(" ".join(safe_str(arg) for arg in args))
                buf.write(theme.reset)

        buf.write("\n")
        return buf.getvalue()

    def _context(self, level: int, skip: int) -> tuple[str, str, str]:
        """Resolve label, color and stack context for ``level``."""
        theme = self.theme
        try:
            severity = Level(level)
        except (ValueError, TypeError):
            return UNKNOWN_LABEL, theme.error, ""

        color = theme.level_color(severity)
        if severity is Level.WARN:
            return severity.label, color, str(caller(INTERNAL_FRAMES + skip))
        if severity >= Level.ERROR:
            return severity.label, color, format_trace(trace(INTERNAL_FRAMES + skip))
        return severity.label, color, ""

    def _write_key(self, buf: io.StringIO, key: str, *, first: bool = False) -> None:
        if not first:
            buf.write(self.separator)
        buf.write(self.theme.key)
        buf.write(key)
        buf.write(self.theme.reset)
        buf.write("=")

    def _write_value(self, buf: io.StringIO, text: str, color: str) -> None:
        if color:
            buf.write(color)
        buf.write(text)
        if color:
            buf.write(self.theme.reset)

    def _write_field(self, buf: io.StringIO, key: str, value: Any, color: str, skip: int = 0) -> None:
        self._write_key(buf, key)
        kind = classify(value)
        if kind is ValueKind.ERROR:
            value = TracedError.wrap(value, ERROR_WRAP_SKIP + skip)
            kind = ValueKind.TRACED_ERROR

        if color:
            buf.write(color)
        if kind is ValueKind.TRACED_ERROR:
            self._write_error(buf, value)
        else:
            buf.write(safe_str(value))
        if color:
            buf.write(self.theme.reset)

    def _write_error(self, buf: io.StringIO, err: TracedError) -> None:
        buf.write(self.theme.error)
        buf.write(err.describe())
        buf.write("\n")
        buf.write(err.stack())
        buf.write(self.theme.reset)
