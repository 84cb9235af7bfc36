"""Call-stack capture for log context and traced errors.

Frames are captured innermost first. All offsets are counted from the function
that calls into this module: ``caller(0)`` is that function itself.
"""

from __future__ import annotations

import linecache
import sys
from dataclasses import dataclass
from types import FrameType, TracebackType


@dataclass(frozen=True, slots=True)
class Frame:
    """One entry of a captured call stack."""

    filename: str
    lineno: int
    function: str
    source: str = ""

    @classmethod
    def from_frame(cls, frame: FrameType, lineno: int | None = None) -> Frame:
        code = frame.f_code
        line = lineno if lineno is not None else (frame.f_lineno or 0)
        source = linecache.getline(code.co_filename, line, frame.f_globals).strip()
        return cls(code.co_filename, line, code.co_name, source)

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} {self.function}"


def _is_bootstrap(frame: FrameType) -> bool:
    return frame.f_code.co_filename.startswith("<frozen ")


def caller(skip: int = 0) -> Frame:
    """Return the frame ``skip`` levels above the calling function.

    A stack shallower than ``skip`` yields the outermost frame available.
    """
    frame = sys._getframe(1)
    for _ in range(skip):
        if frame.f_back is None:
            break
        frame = frame.f_back
    return Frame.from_frame(frame)


def trace(skip: int = 0) -> list[Frame]:
    """Return the active call stack starting at the calling function.

    The first ``skip`` frames are dropped, as are interpreter bootstrap frames.
    """
    frames: list[Frame] = []
    frame: FrameType | None = sys._getframe(1)
    while frame is not None:
        if not _is_bootstrap(frame):
            frames.append(Frame.from_frame(frame))
        frame = frame.f_back
    return frames[skip:]


def frames_from_traceback(tb: TracebackType | None) -> list[Frame]:
    """Frames of an exception traceback, innermost first."""
    frames: list[Frame] = []
    while tb is not None:
        frames.append(Frame.from_frame(tb.tb_frame, tb.tb_lineno))
        tb = tb.tb_next
    frames.reverse()
    return frames


def format_trace(frames: list[Frame]) -> str:
    """Render frames for the ``c`` field.

    A single frame stays on the same line. Several frames are grouped on
    tab-indented lines below it, followed by a newline.
    """
    if not frames:
        return ""
    if len(frames) == 1:
        return str(frames[0])
    return "".join(f"\n\t{frame}" for frame in frames) + "\n"


def _in_packages(module: str, packages: tuple[str, ...]) -> bool:
    return any(module == pkg or module.startswith(pkg + ".") for pkg in packages)


def count_frames(packages: tuple[str, ...], frame: FrameType | None) -> int:
    """Count consecutive frames, from ``frame`` outward, running code of ``packages``."""
    count = 0
    while frame is not None and _in_packages(frame.f_globals.get("__name__", ""), packages):
        count += 1
        frame = frame.f_back
    return count
