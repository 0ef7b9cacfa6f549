"""origen CLI: Typer application."""

import logging

import typer
from rich.console import Console

from origen.config import config
from origen.version import __version__

app = typer.Typer(
    name="origen",
    help="origen: design-system engine: compose UIs from intents, render layouts, check accessibility.",
    no_args_is_help=True,
    invoke_without_command=True,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", is_eager=True, help="Show version"),
):
    """origen CLI."""
    if version:
        console.print(f"origen v{__version__}")
        raise typer.Exit()
    logging.basicConfig(level=config.log_level)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


# ── Design commands ────────────────────────────────────────────────────────────
from origen.cli.commands import compose, pattern, validate, code  # noqa: E402

app.command(name="compose", help="Compose a UI from a plain-language intent")(compose.compose_cmd)
app.command(name="pattern", help="Render a named layout pattern")(pattern.pattern_cmd)
app.command(name="validate", help="Check markup for accessibility issues")(validate.validate_cmd)
app.command(name="code", help="Generate usage code for a component")(code.code_cmd)

# ── Catalog commands ───────────────────────────────────────────────────────────
from origen.cli.commands import catalog  # noqa: E402

app.command(name="tokens", help="Print design tokens")(catalog.tokens_cmd)
app.command(name="spec", help="Print a component contract")(catalog.spec_cmd)
app.command(name="search", help="Search components")(catalog.search_cmd)

# ── Parity commands ────────────────────────────────────────────────────────────
from origen.cli.commands import config as config_cmd, tools, serve  # noqa: E402

app.command(name="config", help="Show resolved configuration")(config_cmd.config_show)
app.command(name="tools", help="List all registered tools")(tools.tools_list)
app.command(name="serve", help="Start the MCP server")(serve.serve_mcp)
app.command(name="dev", help="Start the HTTP API with hot reload")(serve.dev_server)


if __name__ == "__main__":
    app()
