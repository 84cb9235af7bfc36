"""Environment-driven settings for logxi.

All settings read ``LOGXI_``-prefixed environment variables (or a ``.env``
file), e.g. ``LOGXI_COLORS="key=cyan+h,ERR=red+b"``.
"""

import os
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logxi.colors import SCHEMES, ColorTheme, parse_theme
from logxi.errors import ConfigurationError
from logxi.formatters import DEFAULT_SEPARATOR, DEFAULT_TIME_FORMAT
from logxi.levels import Level


class LogxiSettings(BaseSettings):
    """Theme and layout settings shared by every logger."""

    model_config = SettingsConfigDict(
        env_prefix="LOGXI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    colors: str | None = Field(
        default=None,
        description="Theme spec, e.g. key=cyan+h,value,ERR=red+h (overrides scheme)",
    )
    scheme: Literal["dark", "light"] = Field(
        default="dark",
        description="Built-in palette used when no theme spec is set",
    )
    no_color: bool = Field(default=False, description="Disable colors")
    force_color: bool = Field(
        default=False,
        description="Enable colors even when output is not a terminal",
    )
    separator: str = Field(
        default=DEFAULT_SEPARATOR,
        min_length=1,
        description="Text written between fields",
    )
    time_format: str = Field(
        default=DEFAULT_TIME_FORMAT,
        min_length=1,
        description="strftime format of the t field",
    )
    log_level: str = Field(
        default="info",
        description="Minimum level of events rendered through structlog",
    )

    @model_validator(mode="after")
    def check_color_conventions(self) -> "LogxiSettings":
        """Honor the cross-tool NO_COLOR and FORCE_COLOR variables."""
        if not self.no_color and os.environ.get("NO_COLOR", ""):
            object.__setattr__(self, "no_color", True)

        force_color = os.environ.get("FORCE_COLOR", "")
        if not self.force_color and force_color not in ("", "0", "false"):
            object.__setattr__(self, "force_color", True)

        return self

    def theme_spec(self) -> str:
        """Effective theme spec: the explicit one, else the named scheme."""
        return self.colors or SCHEMES[self.scheme]

    def min_level(self) -> Level:
        """Parsed ``log_level``."""
        try:
            return Level.parse(self.log_level)
        except ValueError:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}",
                details={"log_level": self.log_level},
            ) from None

    def build_theme(self, colors: bool) -> ColorTheme:
        """Parse the effective theme, or a plain one when colors are off."""
        if not colors:
            return ColorTheme.plain()
        return parse_theme(self.theme_spec())


@lru_cache(maxsize=1)
def get_settings() -> LogxiSettings:
    """Shared settings instance, read from the environment once."""
    return LogxiSettings()


def reset_settings() -> None:
    """Forget the cached settings so the environment is read again."""
    get_settings.cache_clear()
