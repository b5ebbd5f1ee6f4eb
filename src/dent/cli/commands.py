"""
Document commands: query, check, show.
"""

from __future__ import annotations

import typer

from dent.cli.utils import get_settings, load_document, print_error
from dent.core.errors import QueryError
from dent.core.query import parse_query, resolve
from dent.core.values import to_text


def query_command(
    ctx: typer.Context,
    file: str = typer.Argument(..., help="The Dent file to query, or - for stdin."),
    query: str = typer.Argument(..., help="The query to run. For example: .foo.bar[0].baz"),
) -> None:
    """Print the value found at a path inside a Dent document."""
    try:
        parts = parse_query(query)
    except QueryError as e:
        print_error("QueryError", e)
        raise typer.Exit(code=2) from e

    value = load_document(file, get_settings(ctx))
    typer.echo(to_text(resolve(value, parts)))


def check_command(
    ctx: typer.Context,
    file: str = typer.Argument(..., help="The Dent file to check, or - for stdin."),
) -> None:
    """Parse a Dent document and report whether it is valid."""
    load_document(file, get_settings(ctx))
    typer.echo("OK")


def show_command(
    ctx: typer.Context,
    file: str = typer.Argument(..., help="The Dent file to render, or - for stdin."),
) -> None:
    """Print a Dent document in canonical text form."""
    value = load_document(file, get_settings(ctx))
    typer.echo(to_text(value))
