"""Tests for the FastMCP server: tool list, catalog resources, error surfacing."""

import json

import pytest
from mcp.server.fastmcp.exceptions import ToolError as MCPToolError

from origen.server import create_server
from origen.tools.registry import ToolRegistry


@pytest.fixture
def mcp_server(tool_registry):
    return create_server(tool_registry)


def _uris(resources):
    return {str(r.uri).rstrip("/") for r in resources}


async def _read_json(server, uri):
    contents = list(await server.read_resource(uri))
    return json.loads(contents[0].content)


def _text_of(result):
    # newer SDKs return (content blocks, structured output)
    if isinstance(result, tuple):
        result = result[0]
    return result[0].text


class TestServerTools:

    @pytest.mark.asyncio
    async def test_lists_every_registered_tool(self, mcp_server, tool_registry):
        tools = await mcp_server.list_tools()
        assert {t.name for t in tools} == {t.name for t in tool_registry.list_tools()}

    @pytest.mark.asyncio
    async def test_descriptions_carry_over(self, mcp_server, tool_registry):
        tools = {t.name: t for t in await mcp_server.list_tools()}
        definition, _ = tool_registry.get("compose_interface")
        assert tools["compose_interface"].description == definition.description

    @pytest.mark.asyncio
    async def test_call_tool_returns_json(self, mcp_server):
        result = await mcp_server.call_tool("compose_interface", {"intent": "login"})
        payload = json.loads(_text_of(result))
        assert payload["code"].startswith("<Card>")

    @pytest.mark.asyncio
    async def test_input_errors_surface_as_tool_errors(self, mcp_server):
        with pytest.raises(MCPToolError):
            await mcp_server.call_tool("compose_interface", {"intent": ""})

    @pytest.mark.asyncio
    async def test_custom_registry(self):
        server = create_server(ToolRegistry())
        assert await server.list_tools() == []


class TestServerResources:

    @pytest.mark.asyncio
    async def test_resource_uris(self, mcp_server):
        uris = _uris(await mcp_server.list_resources())
        assert {
            "tokens://all", "tokens://colors", "tokens://spacing", "tokens://typography", "tokens://radius",
        } <= uris
        assert {f"components://{k}" for k in ("button", "input", "card", "select", "modal")} <= uris

    @pytest.mark.asyncio
    async def test_resources_are_json(self, mcp_server):
        resources = await mcp_server.list_resources()
        assert all(r.mimeType == "application/json" for r in resources)

    @pytest.mark.asyncio
    async def test_all_tokens_resource(self, mcp_server):
        payload = await _read_json(mcp_server, "tokens://all")
        assert set(payload["semantic"]) == {"light", "dark"}

    @pytest.mark.asyncio
    async def test_radius_resource_is_raw_scale(self, mcp_server):
        payload = await _read_json(mcp_server, "tokens://radius")
        assert payload["full"] == "9999px"

    @pytest.mark.asyncio
    async def test_component_resource(self, mcp_server):
        payload = await _read_json(mcp_server, "components://modal")
        assert payload["name"] == "Modal"
        assert payload["interactive"] is True
