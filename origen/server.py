"""MCP server exposing the origen tools and the token/component resources.

Run over stdio (the default) for local MCP clients, or over HTTP:
    origen serve --transport streamable-http
"""

import json
import logging
from typing import Any, Callable

from mcp.server.fastmcp import FastMCP

from origen.catalog import get_component_registry, get_token_catalog
from origen.config import config
from origen.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Origen design system. Use compose_interface for a first draft from a plain-language "
    "intent, get_layout_pattern for standard layouts, get_code and get_component_spec for "
    "single components, and validate_accessibility before shipping markup."
)


def _json(data: Any) -> str:
    return json.dumps(data, indent=2)


def _token_resources() -> dict[str, tuple[str, str, Callable[[], Any]]]:
    """uri → (name, description, payload factory)."""
    return {
        "tokens://all": (
            "All Tokens", "Primitive scales and semantic tokens for every theme",
            lambda: get_token_catalog().all_tokens(),
        ),
        "tokens://colors": (
            "Color Tokens", "Color primitives and semantic color tokens",
            lambda: get_token_catalog().color_tokens(),
        ),
        "tokens://spacing": (
            "Spacing Tokens", "Spacing scale tokens",
            lambda: get_token_catalog().primitives["spacing"],
        ),
        "tokens://typography": (
            "Typography Tokens", "Font family, size, weight, and line height tokens",
            lambda: get_token_catalog().primitives["typography"],
        ),
        "tokens://radius": (
            "Radius Tokens", "Border radius tokens",
            lambda: get_token_catalog().primitives["radius"],
        ),
    }


def _add_resource(mcp: FastMCP, uri: str, name: str, description: str, payload: Callable[[], Any]) -> None:
    def read() -> str:
        return _json(payload())

    mcp.resource(uri, name=name, description=description, mime_type="application/json")(read)


def create_server(registry: ToolRegistry = None) -> FastMCP:
    """Build a FastMCP server with every registered tool and the catalog resources."""
    registry = registry or ToolRegistry.with_builtins()
    mcp = FastMCP(config.app_name, instructions=INSTRUCTIONS)

    for definition in registry.list_tools():
        _, impl = registry.get(definition.name)
        mcp.add_tool(impl, name=definition.name, description=definition.description)

    for uri, (name, description, payload) in _token_resources().items():
        _add_resource(mcp, uri, name, description, payload)

    for key, spec in get_component_registry():
        _add_resource(
            mcp,
            f"components://{key}",
            f"{spec.name} Component",
            f"Specification for the {key} component",
            lambda key=key: get_component_registry().get(key).to_wire(),
        )

    logger.debug(f"MCP server ready: {len(registry.list_tools())} tools")
    return mcp


def run(transport: str = None) -> None:
    """Serve over ``transport`` (stdio, sse or streamable-http)."""
    transport = transport or config.mcp_transport
    logger.info(f"{config.app_name} MCP server starting on {transport}")
    create_server().run(transport=transport)
