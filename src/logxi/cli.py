"""logxi command-line interface.

    logxi demo --scheme light
    logxi theme "key=cyan+h,ERR=red+b"
    logxi format warn "disk almost full" free_mb 120
"""

import io
import sys
from typing import Annotated

import typer
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from logxi._version import __version__
from logxi.colors import (
    SCHEMES,
    THEME_ROLES,
    ColorTheme,
    named_theme,
    parse_kv_list,
    parse_theme,
)
from logxi.config import INTERNAL_NAME, configure_logging
from logxi.errors import ConfigurationError
from logxi.formatters import HappyDevFormatter
from logxi.levels import Level
from logxi.logger import Logger
from logxi.settings import get_settings
from logxi.writer import colorable_stdout, colors_enabled

app = typer.Typer(
    name="logxi",
    help="logxi - happy developer log formatting",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _error(message: str) -> None:
    console.print(f"[bold red]×[/bold red] {message}")


def _resolve_theme(scheme: str | None, spec: str | None, no_color: bool) -> ColorTheme:
    """Pick the theme for stdout from options, falling back to settings."""
    settings = get_settings()
    if spec:
        chosen = parse_theme(spec)
    elif scheme:
        chosen = named_theme(scheme)
    else:
        chosen = parse_theme(settings.theme_spec())

    if no_color or not colors_enabled(sys.stdout, settings):
        return ColorTheme.plain()
    colorable_stdout(True)
    return chosen


def _formatter(name: str, theme: ColorTheme) -> HappyDevFormatter:
    settings = get_settings()
    return HappyDevFormatter(
        name,
        theme,
        separator=settings.separator,
        time_format=settings.time_format,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"logxi {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """logxi - happy developer log formatting."""
    try:
        configure_logging(name=INTERNAL_NAME)
    except ConfigurationError as e:
        _error(e.message)
        raise typer.Exit(1) from None


@app.command()
def demo(
    name: Annotated[str, typer.Option("--name", "-n", help="Logger name")] = "demo",
    scheme: Annotated[str | None, typer.Option("--scheme", "-s", help="dark or light")] = None,
    colors: Annotated[
        str | None, typer.Option("--colors", help="Theme spec, overrides --scheme")
    ] = None,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colors")] = False,
) -> None:
    """Print one sample line per level plus malformed-argument examples."""
    try:
        theme = _resolve_theme(scheme, colors, no_color)
    except ConfigurationError as e:
        _error(e.message)
        raise typer.Exit(1) from None

    logger = Logger(name, _formatter(name, theme))
    logger.debug("Loading configuration", "path", "~/.config/demo.toml")
    logger.info("Server started", "port", 8080, "host", "0.0.0.0")
    logger.warn("Slow response", "elapsed_ms", 1250)
    logger.error("Request failed", "err", ConnectionResetError("connection reset by peer"))
    logger.info("Non-string key", 42, "answer")
    logger.info("Odd argument count", "user", "alice", "role")


@app.command()
def theme(
    spec: Annotated[str | None, typer.Argument(help="Theme spec to inspect")] = None,
    scheme: Annotated[str | None, typer.Option("--scheme", "-s", help="dark or light")] = None,
) -> None:
    """Show the roles, styles and ANSI codes of a theme."""
    if spec is None and scheme is not None:
        spec = SCHEMES.get(scheme.strip().lower())
        if spec is None:
            _error(f"Unknown color scheme: {scheme} (available: {', '.join(SCHEMES)})")
            raise typer.Exit(1)
    if spec is None:
        spec = get_settings().theme_spec()

    styles = parse_kv_list(spec, ",")
    parsed = parse_theme(spec)

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Role")
    table.add_column("Style")
    table.add_column("Code")
    table.add_column("Sample")

    roles = list(THEME_ROLES) + [role for role in styles if role not in THEME_ROLES]
    for role in roles:
        code = parsed.color_code(role)
        sample = Text.from_ansi(f"{code}sample{parsed.reset}") if code else Text("sample")
        table.add_row(
            Text(role),
            Text(styles.get(role, "-")),
            Text(repr(code) if code else "-"),
            sample,
        )

    console.print(table)


@app.command("format")
def format_event(
    level: Annotated[str, typer.Argument(help="Level name or label, e.g. info or WRN")],
    message: Annotated[str, typer.Argument(help="Event message")],
    pairs: Annotated[list[str] | None, typer.Argument(help="Alternating keys and values")] = None,
    name: Annotated[str, typer.Option("--name", "-n", help="Logger name")] = "~",
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colors")] = False,
) -> None:
    """Format a single event and print it."""
    try:
        severity = Level.parse(level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="LEVEL") from None

    buf = io.StringIO()
    logger = Logger(name, _formatter(name, _resolve_theme(None, None, no_color)), buf)
    logger.log(severity, message, *(pairs or []))
    # click strips ANSI codes on non-terminals unless color=True
    typer.echo(buf.getvalue(), nl=False, color=True)
