"""Exceptions raised and rendered by logxi."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from logxi.stack import Frame, frames_from_traceback, trace


def safe_str(value: Any) -> str:
    """Render ``value`` with ``str()``, reporting a failing ``__str__`` inline."""
    try:
        return str(value)
    except Exception as exc:
        return f"!{type(value).__name__}({exc!r})"


def qualified_name(exc_type: type[BaseException]) -> str:
    """Exception class name, prefixed with its module unless builtin."""
    name = exc_type.__qualname__
    if exc_type.__module__ and exc_type.__module__ != "builtins":
        return f"{exc_type.__module__}.{name}"
    return name


class LogxiError(Exception):
    """Base exception for all logxi errors."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(LogxiError):
    """Raised when a configuration value cannot be used."""


class TracedError(LogxiError):
    """An error annotated with the call stack captured where it was wrapped.

    Frames are stored innermost first. The wrapped exception, if any, is kept
    as ``err`` and chained as ``__cause__``.
    """

    def __init__(self, err: BaseException | str, frames: Sequence[Frame]) -> None:
        cause = err if isinstance(err, BaseException) else None
        super().__init__(safe_str(err))
        self.err = cause
        self.frames: tuple[Frame, ...] = tuple(frames)
        self.__cause__ = cause

    @classmethod
    def new(cls, message: str) -> TracedError:
        """Create a traced error whose stack starts at the caller."""
        return cls(message, trace(1))

    @classmethod
    def wrap(cls, err: BaseException, skip: int = 1) -> TracedError:
        """Annotate ``err`` with the current call stack.

        ``skip`` counts frames above ``wrap`` itself: ``1`` starts the stack at
        the function calling ``wrap``. An already traced error is returned
        unchanged so its original capture site is kept.
        """
        if isinstance(err, TracedError):
            return err
        return cls(err, trace(skip))

    @classmethod
    def from_exception(cls, err: BaseException) -> TracedError:
        """Annotate a raised exception with the frames of its own traceback."""
        if isinstance(err, TracedError):
            return err
        return cls(err, frames_from_traceback(err.__traceback__))

    @property
    def type_name(self) -> str:
        if self.err is None:
            return type(self).__name__
        return qualified_name(type(self.err))

    def describe(self) -> str:
        """First line of the rendered error: type and message."""
        if self.err is None:
            return self.message
        return f"{self.type_name}: {self.message}"

    def stack(self) -> str:
        """Rendered frame block, one ``file:line function`` line per frame."""
        lines: list[str] = []
        for frame in self.frames:
            lines.append(f"{frame}\n")
            if frame.source:
                lines.append(f"\t{frame.source}\n")
        return "".join(lines)
