"""origen tools — List all registered origen tools."""

from rich import box
from rich.table import Table

from origen.cli.output import console


def tools_list():
    """List all registered tools and their parameters.

    Example:
        origen tools
    """
    from origen.tools.registry import ToolRegistry

    tool_defs = ToolRegistry.with_builtins().list_tools()

    if not tool_defs:
        console.print("[yellow]No tools registered.[/yellow]")
        return

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title=f"[bold]{len(tool_defs)} Registered Tools[/bold]",
    )
    table.add_column("Name", style="cyan", width=24)
    table.add_column("Description", width=48)
    table.add_column("Parameters", style="dim", width=30)

    for tool in sorted(tool_defs, key=lambda t: t.name):
        properties = tool.parameters.get("properties", {})
        required = set(tool.parameters.get("required", []))
        params = ", ".join(f"{p}*" if p in required else p for p in properties)
        table.add_row(tool.name, f"[dim]{tool.description}[/dim]", params)

    console.print()
    console.print(table)
    console.print()
    console.print("[dim]* required. Add tools with the [cyan]@tool[/cyan] decorator in origen/tools/builtin/.[/dim]")
