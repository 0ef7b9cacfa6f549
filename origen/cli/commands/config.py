"""origen config — Show resolved origen configuration."""

from rich import box
from rich.table import Table

from origen.cli.output import console


def config_show():
    """Show the resolved configuration.

    Reads from environment variables and .env file.

    Example:
        origen config
    """
    from origen.config import OrigenConfig
    cfg = OrigenConfig()

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title="[bold]origen Configuration[/bold]",
    )
    table.add_column("Key", style="cyan", width=24)
    table.add_column("Value", width=40)
    table.add_column("Env Var", style="dim", width=30)

    sections = [
        ("App", ["app_name", "debug", "log_level"]),
        ("Catalog", ["tokens_path", "components_path", "default_theme"]),
        ("Code generation", ["indent", "package_import"]),
        ("Search", ["search_default_limit", "search_max_limit"]),
        ("Server", ["host", "port", "mcp_transport", "cors_origins"]),
    ]

    first = True
    for section_name, fields in sections:
        if not first:
            table.add_row("", "", "")
        first = False
        table.add_row(f"[bold dim]── {section_name} ──[/bold dim]", "", "")
        for attr in fields:
            val = getattr(cfg, attr, None)
            display = "[dim](not set)[/dim]" if val is None else repr(val) if attr == "indent" else str(val)
            table.add_row(f"  {attr}", display, f"ORIGEN_{attr.upper()}")

    console.print()
    console.print(table)
    console.print()
    console.print("[dim]Source: environment variables + .env file (prefix: ORIGEN_)[/dim]")
