"""
Dent CLI - Entry point.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from dent.cli.commands import check_command, query_command, show_command
from dent.cli.utils import configure_logging, print_error, version_callback
from dent.core.settings import DentSettings, load_settings

app = typer.Typer(
    help="Dent – parse and query Dent configuration files.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings file (default: ./dent.toml if present)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (overrides settings), e.g. DEBUG",
    ),
) -> None:
    """Dent CLI main callback for global options."""
    try:
        settings = load_settings(config)
        if log_level is not None:
            settings = DentSettings.model_validate(
                {**settings.model_dump(), "log_level": log_level}
            )
    except (OSError, ValueError) as e:
        print_error("Invalid settings", e)
        raise typer.Exit(code=2) from e

    configure_logging(settings.log_level_value)
    ctx.obj = settings


app.command(name="query")(query_command)
app.command(name="check")(check_command)
app.command(name="show")(show_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
