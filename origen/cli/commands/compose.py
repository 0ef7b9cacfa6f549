"""origen compose — Compose a UI from a plain-language intent."""

import typer
from rich import box
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from origen.cli.output import console, echo_json, fail
from origen.exceptions import OrigenError


def compose_cmd(
    intent: str = typer.Argument(..., help="What to build, e.g. 'login form'"),
    context: str = typer.Option("section", "--context", "-c", help="page | section | component"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
):
    """Match an intent to a pattern and print the generated markup.

    Example:
        origen compose "contact form with name, email and message"
        origen compose "login" --context page
    """
    from origen.compose import compose_interface

    try:
        result = compose_interface(intent, context)
    except OrigenError as exc:
        fail(exc)

    if as_json:
        echo_json(result.to_wire())
        return

    if result.suggestions:
        console.print("[yellow]No pattern matched this intent.[/yellow] Try one of:")
        for suggestion in result.suggestions:
            console.print(f"  [cyan]{suggestion}[/cyan]")
        return

    table = Table(box=box.ROUNDED, header_style="bold dim", title="[bold]Components[/bold]")
    table.add_column("Name", style="cyan")
    table.add_column("Slot", style="dim")
    table.add_column("Props")
    table.add_column("Children")
    for comp in result.components:
        props = " ".join(f"{k}={v!r}" for k, v in comp.props.items())
        table.add_row(comp.name, comp.slot or "-", Text(props), Text(str(comp.children or "")))

    console.print()
    console.print(table)
    console.print(Syntax(result.code, "html", theme="ansi_dark"))
    console.print(f"[dim]Tokens: {', '.join(result.tokens)}[/dim]")
