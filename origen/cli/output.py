"""Shared console and error reporting for CLI commands."""

import json
from typing import Any

import typer
from rich.console import Console

from origen.exceptions import OrigenError

console = Console()


def echo_json(data: Any) -> None:
    """Plain JSON on stdout, unstyled so it can be piped."""
    typer.echo(json.dumps(data, indent=2))


def fail(exc: OrigenError) -> None:
    """Print an origen error and exit 1."""
    console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(1)
