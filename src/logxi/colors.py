"""Color themes for terminal output.

A theme is described by a compact spec of comma-separated ``role=style`` pairs:

    key=cyan+h,value,DBG,WRN=yellow+h,INF=green+h,ERR=red+h

Each style reads ``name[+attrs][:background[+attrs]]`` where ``name`` is a
basic color or a 0-255 palette index and ``attrs`` combines ``b`` (bold),
``B`` (blink), ``u`` (underline), ``i`` (inverse) and ``h`` (high intensity).
A role without ``=`` is present but uncolored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from logxi.errors import ConfigurationError
from logxi.levels import Level

# =============================================================================
# ANSI Escape Codes
# =============================================================================

ANSI_RESET = "\033[0m"

COLOR_NAMES: dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "default": 9,
}

# Attribute flag -> SGR parameter, in emission order
_ATTRIBUTES = (("b", "1"), ("B", "5"), ("u", "4"), ("i", "7"))

_NORMAL_FG = 30
_HIGH_FG = 90
_NORMAL_BG = 40
_HIGH_BG = 100

# =============================================================================
# Built-in Schemes
# =============================================================================

DARK_SCHEME = "key=cyan+h,value,DBG,WRN=yellow+h,INF=green+h,ERR=red+h"
LIGHT_SCHEME = "key=cyan+b,value,DBG,WRN=yellow+b,INF=green+b,ERR=red+b"

SCHEMES: dict[str, str] = {
    "dark": DARK_SCHEME,
    "light": LIGHT_SCHEME,
}

THEME_ROLES = ("key", "value", "DBG", "INF", "WRN", "ERR")


def _color_param(name: str, extended: int, base: int) -> str | None:
    if name.isdigit():
        index = int(name)
        return f"{extended};5;{index}" if index <= 255 else None
    offset = COLOR_NAMES.get(name)
    if offset is None:
        return None
    return str(base + offset)


def color_code(style: str) -> str:
    """Convert a style such as ``red+b:white`` to its ANSI escape sequence.

    Empty styles, ``off`` and unknown color names produce ``""``.
    """
    style = style.strip()
    if style in ("", "off"):
        return ""
    if style == "reset":
        return ANSI_RESET

    foreground, _, background = style.partition(":")
    fg_name, _, fg_attrs = foreground.partition("+")
    bg_name, _, bg_attrs = background.partition("+")

    fg = _color_param(fg_name, 38, _HIGH_FG if "h" in fg_attrs else _NORMAL_FG)
    if fg is None:
        return ""

    params = [code for flag, code in _ATTRIBUTES if flag in fg_attrs]
    params.append(fg)
    if bg_name:
        bg = _color_param(bg_name, 48, _HIGH_BG if "h" in bg_attrs else _NORMAL_BG)
        if bg is not None:
            params.append(bg)
    return f"\033[{';'.join(params)}m"


def parse_kv_list(text: str, separator: str = ",") -> dict[str, str]:
    """Split ``a=1,b,c=3`` into a dict; a segment without ``=`` maps to ``""``."""
    pairs: dict[str, str] = {}
    for segment in text.split(separator):
        if not segment:
            continue
        key, _, value = segment.partition("=")
        pairs[key.strip()] = value.strip()
    return pairs


@dataclass(frozen=True, slots=True)
class ColorTheme:
    """Immutable role -> ANSI code table shared by formatters.

    Roles never assigned resolve to ``""`` (no color).
    """

    codes: Mapping[str, str] = field(default_factory=dict)
    reset: str = ANSI_RESET

    def __post_init__(self) -> None:
        object.__setattr__(self, "codes", MappingProxyType(dict(self.codes)))

    @classmethod
    def plain(cls) -> ColorTheme:
        """A theme with colors disabled."""
        return cls(codes={}, reset="")

    def color_code(self, role: str) -> str:
        if role == "reset":
            return self.reset
        return self.codes.get(role, "")

    def level_color(self, level: Level) -> str:
        return self.color_code(level.role)

    @property
    def key(self) -> str:
        return self.color_code("key")

    @property
    def value(self) -> str:
        return self.color_code("value")

    @property
    def debug(self) -> str:
        return self.color_code("DBG")

    @property
    def info(self) -> str:
        return self.color_code("INF")

    @property
    def warn(self) -> str:
        return self.color_code("WRN")

    @property
    def error(self) -> str:
        return self.color_code("ERR")

    @property
    def is_plain(self) -> bool:
        return not self.reset and not any(self.codes.values())


def parse_theme(spec: str) -> ColorTheme:
    """Build a theme from a spec string. Never fails."""
    styles = parse_kv_list(spec, ",")
    return ColorTheme(codes={role: color_code(style) for role, style in styles.items()})


def named_theme(name: str) -> ColorTheme:
    """Return the built-in ``dark`` or ``light`` theme.

    Raises:
        ConfigurationError: If ``name`` is not a built-in scheme.
    """
    spec = SCHEMES.get(name.strip().lower())
    if spec is None:
        raise ConfigurationError(
            f"Unknown color scheme: {name}",
            details={"scheme": name, "available": sorted(SCHEMES)},
        )
    return parse_theme(spec)
