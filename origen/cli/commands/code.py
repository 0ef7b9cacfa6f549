"""origen code — Generate usage code for one component."""

import json
from typing import Any, Optional

import typer
from rich.syntax import Syntax

from origen.cli.output import console, echo_json, fail
from origen.exceptions import OrigenError


def _parse_prop(pair: str) -> tuple[str, Any]:
    """``key=value``; the value is read as JSON when it parses, else kept as text."""
    key, sep, raw = pair.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"expected key=value, got {pair!r}", param_hint="--prop")
    try:
        return key, json.loads(raw)
    except json.JSONDecodeError:
        return key, raw


def code_cmd(
    component: str = typer.Argument(..., help="button | input | card | select | modal"),
    prop: Optional[list[str]] = typer.Option(None, "--prop", "-p", help="Prop as key=value (repeatable)"),
    children: Optional[str] = typer.Option(None, "--children", help="Children content"),
    framework: str = typer.Option("react", "--framework", help="react | nextjs"),
    variant: Optional[str] = typer.Option(None, "--variant", help="Variant prop shorthand"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
):
    """Print markup, the import line and npm dependencies for a component.

    Example:
        origen code button --variant destructive --children Delete
        origen code input -p type=email -p required=true
    """
    from origen.codegen import get_code

    props = dict(_parse_prop(p) for p in prop or [])
    try:
        result = get_code(component, props, children, framework, variant)
    except OrigenError as exc:
        fail(exc)

    if as_json:
        echo_json(result.to_wire())
        return

    for line in result.imports:
        console.print(line, markup=False, highlight=False)
    console.print()
    console.print(Syntax(result.code, "html", theme="ansi_dark"))
    if result.dependencies:
        console.print(f"[dim]npm install {' '.join(result.dependencies)}[/dim]", highlight=False)
