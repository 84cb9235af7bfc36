"""Log severities and their short display labels."""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Severity of a log event, ordered by increasing urgency.

    Values line up with the stdlib ``logging`` levels so the two can be
    compared directly.
    """

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50

    @property
    def label(self) -> str:
        """Three-letter label shown in the ``l`` field."""
        return LEVEL_LABELS[self]

    @property
    def role(self) -> str:
        """Theme role holding this level's color."""
        return LEVEL_ROLES[self]

    @classmethod
    def parse(cls, name: str) -> Level:
        """Resolve a level from its name, label or common alias.

        Matching is case-insensitive: ``"warn"``, ``"WRN"`` and ``"warning"``
        all resolve to :attr:`WARN`.

        Raises:
            ValueError: If ``name`` matches no level.
        """
        key = name.strip().upper()
        for level in cls:
            if key in (level.name, LEVEL_LABELS[level]):
                return level
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unknown log level: {name!r}")


LEVEL_LABELS: dict[Level, str] = {
    Level.DEBUG: "DBG",
    Level.INFO: "INF",
    Level.WARN: "WRN",
    Level.ERROR: "ERR",
    Level.FATAL: "FTL",
}

# FATAL has no role of its own and renders with the error color
LEVEL_ROLES: dict[Level, str] = {
    Level.DEBUG: "DBG",
    Level.INFO: "INF",
    Level.WARN: "WRN",
    Level.ERROR: "ERR",
    Level.FATAL: "ERR",
}

_ALIASES: dict[str, Level] = {
    "WARNING": Level.WARN,
    "EXCEPTION": Level.ERROR,
    "CRITICAL": Level.FATAL,
}


def label_for(level: int) -> str:
    """Return the display label for ``level``.

    Raises:
        ValueError: If ``level`` is not one of the five severities.
    """
    return Level(level).label
