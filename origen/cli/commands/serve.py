"""origen serve | dev — Run the MCP server or the HTTP API."""

from typing import Optional

import typer
from rich.console import Console

console = Console(stderr=True)  # stdout belongs to the stdio transport

_TRANSPORTS = ("stdio", "sse", "streamable-http")


def serve_mcp(
    transport: Optional[str] = typer.Option(None, "--transport", "-t", help="stdio | sse | streamable-http"),
):
    """Start the MCP server (stdio by default)."""
    from origen.config import config
    from origen.server import run

    transport = transport or config.mcp_transport
    if transport not in _TRANSPORTS:
        console.print(f"[red]Error:[/red] unknown transport {transport!r}; expected one of {', '.join(_TRANSPORTS)}")
        raise typer.Exit(1)
    console.print(f"[green]Starting origen MCP server ({transport})[/green]")
    run(transport)


def dev_server(
    host: str = typer.Option("0.0.0.0", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to listen on"),
):
    """Start the origen HTTP API in development mode with hot reload."""
    import uvicorn
    console.print(f"[green]Starting origen dev server on {host}:{port}[/green]")
    uvicorn.run("origen.api.main:app", host=host, port=port, reload=True)
