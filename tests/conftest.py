"""Pytest fixtures for logxi tests.

Provides:
- Environment isolation (LOGXI_*, NO_COLOR, FORCE_COLOR) and settings cache reset
- structlog reset after each test
- Formatter and logger factories writing to in-memory streams
"""

from __future__ import annotations

import io
import os
from collections.abc import Callable, Iterator

import pytest
import structlog

from logxi.colors import ColorTheme
from logxi.formatters import HappyDevFormatter
from logxi.logger import Logger
from logxi.settings import reset_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Run every test without inherited color settings or a stray .env file."""
    for var in list(os.environ):
        if var.startswith("LOGXI_"):
            monkeypatch.delenv(var)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def plain_formatter() -> HappyDevFormatter:
    """Formatter named ``api`` with colors disabled."""
    return HappyDevFormatter("api", ColorTheme.plain())


@pytest.fixture
def make_logger() -> Callable[..., tuple[Logger, io.StringIO]]:
    """Factory for loggers writing to a StringIO.

    Usage:
        logger, out = make_logger("api")
        logger.info("hello")
        assert "m=hello" in out.getvalue()
    """

    def _make(name: str = "test", theme: ColorTheme | None = None) -> tuple[Logger, io.StringIO]:
        out = io.StringIO()
        formatter = HappyDevFormatter(name, theme or ColorTheme.plain())
        return Logger(name, formatter, out), out

    return _make
