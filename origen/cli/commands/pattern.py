"""origen pattern — Render a named layout pattern."""

from typing import Optional

import typer
from rich.syntax import Syntax

from origen.cli.output import console, echo_json, fail
from origen.exceptions import OrigenError


def pattern_cmd(
    name: str = typer.Argument(..., help="Pattern name, e.g. form-layout"),
    title: Optional[str] = typer.Option(None, help="Title text"),
    description: Optional[str] = typer.Option(None, help="Description text"),
    columns: Optional[int] = typer.Option(None, help="Grid columns (dashboard-grid, 1-6)"),
    primary_action: Optional[str] = typer.Option(None, help="Primary button label"),
    secondary_action: Optional[str] = typer.Option(None, help="Secondary button label"),
    variant: Optional[str] = typer.Option(None, help="default | destructive (modal-confirm)"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
):
    """Print a layout pattern's markup with the given options applied.

    Example:
        origen pattern dashboard-grid --columns 4
        origen pattern modal-confirm --variant destructive --primary-action Delete
    """
    from origen.patterns import get_layout_pattern

    options = {
        "title": title,
        "description": description,
        "columns": columns,
        "primary_action": primary_action,
        "secondary_action": secondary_action,
        "variant": variant,
    }
    try:
        result = get_layout_pattern(name, {k: v for k, v in options.items() if v is not None})
    except OrigenError as exc:
        fail(exc)

    if as_json:
        echo_json(result.to_wire())
        return

    console.print(f"[bold]{result.pattern.value}[/bold]  [dim]{result.structure.type.value}[/dim]")
    console.print(Syntax(result.code, "html", theme="ansi_dark"))
    console.print(f"[dim]Use for: {', '.join(result.usage.when)}[/dim]")
