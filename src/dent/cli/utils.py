"""
Dent CLI utilities.

Shared helpers used by the CLI command modules.
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from dent._version import get_version
from dent.core.engine import Dent
from dent.core.errors import DentError
from dent.core.settings import DentSettings
from dent.core.values import Value

err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"Dent version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()}"
        )
        raise typer.Exit()


def configure_logging(level: int) -> None:
    """Send log records to stderr at the given numeric level."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("dent").setLevel(level)


def print_error(label: str, error: Exception) -> None:
    err_console.print(f"[bold red]{escape(label)}:[/bold red] {escape(str(error))}")


def get_settings(ctx: typer.Context) -> DentSettings:
    """Settings loaded by the main callback, or defaults."""
    settings = ctx.obj if isinstance(ctx.obj, DentSettings) else None
    return settings or DentSettings()


def load_document(file: str, settings: DentSettings) -> Value:
    """Parse a Dent file, or stdin when ``file`` is ``-``.

    Exits with code 1 if the file does not exist or fails to parse.
    """
    dent = Dent.from_settings(settings)
    try:
        if file == "-":
            return dent.parse(sys.stdin.read())
        path = Path(file)
        if not path.exists():
            typer.echo(f"File does not exist: {file}", err=True)
            raise typer.Exit(code=1)
        return dent.parse_file(path)
    except DentError as e:
        print_error(type(e).__name__, e)
        raise typer.Exit(code=1) from e
