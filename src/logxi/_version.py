"""Version information for logxi."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version


@lru_cache(maxsize=1)
def get_version() -> str:
    """Installed distribution version, or ``0.0.0`` from a bare checkout."""
    try:
        return pkg_version("logxi")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()
