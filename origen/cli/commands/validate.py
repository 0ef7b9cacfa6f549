"""origen validate — Static accessibility check of markup."""

from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.table import Table

from origen.cli.output import console, echo_json, fail
from origen.exceptions import OrigenError

_SEVERITY_COLOR = {"error": "red", "warning": "yellow", "info": "blue"}


def validate_cmd(
    file: Optional[Path] = typer.Argument(None, help="File containing JSX markup"),
    code: Optional[str] = typer.Option(None, "--code", help="Markup passed inline"),
    context: str = typer.Option("general", "--context", help="form | navigation | content | modal | general"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
):
    """Validate markup and print the issues. Exits 1 when errors are found.

    Example:
        origen validate src/LoginForm.tsx
        origen validate --code '<img src="a.png" />'
    """
    from origen.a11y import validate_accessibility

    if file is not None:
        if not file.exists():
            console.print(f"[red]Error:[/red] file not found: {file}")
            raise typer.Exit(1)
        code = file.read_text(encoding="utf-8")

    try:
        result = validate_accessibility(code=code, context=context)
    except OrigenError as exc:
        fail(exc)

    if as_json:
        echo_json(result.to_wire())
    else:
        if result.issues:
            table = Table(box=box.ROUNDED, header_style="bold dim", title="[bold]Accessibility Issues[/bold]")
            table.add_column("Severity", width=9)
            table.add_column("Rule", style="cyan")
            table.add_column("WCAG", style="dim")
            table.add_column("Component")
            table.add_column("Message")
            for issue in result.issues:
                sev = issue.severity.value
                color = _SEVERITY_COLOR.get(sev, "white")
                table.add_row(
                    f"[{color}]{sev}[/{color}]", issue.rule, issue.wcag or "",
                    issue.component or "", issue.message,
                )
            console.print(table)
        color = "green" if result.valid else "red"
        console.print(f"[{color}]{result.summary}[/{color}]")
        if result.passed_rules:
            console.print(f"[dim]Passed: {', '.join(result.passed_rules)}[/dim]")

    if not result.valid:
        raise typer.Exit(1)
