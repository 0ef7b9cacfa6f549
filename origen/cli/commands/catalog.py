"""origen tokens | spec | search — Browse the design-system catalog."""

from typing import Optional

import typer
from rich import box
from rich.table import Table

from origen.cli.output import console, echo_json, fail
from origen.exceptions import OrigenError


def tokens_cmd(
    category: str = typer.Option("all", "--category", help="all | colors | spacing | typography | radius"),
    theme: str = typer.Option("light", "--theme", help="light | dark"),
):
    """Print design tokens as JSON.

    Example:
        origen tokens --category colors --theme dark
    """
    from origen.catalog import get_token_catalog

    try:
        echo_json(get_token_catalog().get(category, theme))
    except OrigenError as exc:
        fail(exc)


def spec_cmd(component: str = typer.Argument(..., help="button | input | card | select | modal")):
    """Print a component's contract as JSON. Exits 1 for an unknown component."""
    from origen.catalog import get_component_registry
    from origen.types import ComponentSpecNotFound

    spec = get_component_registry().get(component)
    echo_json(spec.to_wire())
    if isinstance(spec, ComponentSpecNotFound):
        raise typer.Exit(1)


def search_cmd(
    query: str = typer.Argument(..., help="Search terms, e.g. 'form input'"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Maximum results (1-20)"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
):
    """Search components by name, description and usage.

    Example:
        origen search "dialog confirm"
    """
    from origen.search import search_components

    try:
        response = search_components(query, limit)
    except OrigenError as exc:
        fail(exc)

    if as_json:
        echo_json(response.to_wire())
        return

    if not response.results:
        console.print(f"[yellow]No components match[/yellow] {query!r}")
        return

    table = Table(box=box.ROUNDED, header_style="bold dim", title=f"[bold]{response.count} result(s)[/bold]")
    table.add_column("Component", style="cyan", width=12)
    table.add_column("Score", justify="right", width=6)
    table.add_column("Description")
    for r in response.results:
        table.add_row(r.display_name, f"{r.score:.2f}", f"[dim]{r.description}[/dim]")
    console.print(table)
    if response.has_more:
        console.print("[dim]More results available; raise --limit.[/dim]")
