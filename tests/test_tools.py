"""Tests for the @tool decorator, the ToolRegistry and the built-in design tools."""

from typing import Optional

import pytest

from origen.exceptions import EmptyIntentError, InvalidOptionError, ToolError, UnknownPatternError
from origen.tools import plugin
from origen.tools.plugin import get_registered_tools, tool
from origen.tools.registry import ToolRegistry

BUILTIN_TOOLS = {
    "get_tokens", "get_component_spec", "get_code", "search_components",
    "compose_interface", "get_layout_pattern", "validate_accessibility",
}


# ── TestToolDecorator ──────────────────────────────────────────────────────────

class TestToolDecorator:

    @pytest.fixture(autouse=True)
    def isolated_registry(self, monkeypatch):
        monkeypatch.setattr(plugin, "_registered_tools", {})

    def test_schema_from_signature(self):
        @tool(name="shout", description="Upper-case text", params={"text": "Text to shout"})
        async def shout(text: str, times: int = 1, loud: Optional[bool] = None) -> str:
            return text.upper() * times

        definition = shout._origen_tool
        assert definition.name == "shout"
        assert definition.description == "Upper-case text"
        props = definition.parameters["properties"]
        assert props["text"] == {"type": "string", "description": "Text to shout"}
        assert props["times"] == {"type": "integer", "description": "Parameter: times", "default": 1}
        assert props["loud"]["type"] == "boolean"
        assert "default" not in props["loud"]
        assert definition.parameters["required"] == ["text"]

    def test_defaults_from_function(self):
        @tool()
        async def echo(payload: dict):
            """Echo the payload back.

            Longer explanation that is not part of the description.
            """
            return payload

        definition = echo._origen_tool
        assert definition.name == "echo"
        assert definition.description == "Echo the payload back."
        assert definition.parameters["properties"]["payload"]["type"] == "object"

    def test_registration_is_global(self):
        @tool(name="noop")
        async def noop():
            return None

        assert set(get_registered_tools()) == {"noop"}

    @pytest.mark.asyncio
    async def test_wrapper_is_awaitable(self):
        @tool(name="add")
        async def add(a: int, b: int) -> int:
            return a + b

        assert await add(2, 3) == 5


# ── TestToolRegistry ───────────────────────────────────────────────────────────

class TestToolRegistry:

    def test_builtins_registered(self, tool_registry):
        assert {t.name for t in tool_registry.list_tools()} == BUILTIN_TOOLS

    def test_get_unknown_tool(self, tool_registry):
        with pytest.raises(ToolError) as exc_info:
            tool_registry.get("render_pdf")
        assert exc_info.value.tool_name == "render_pdf"

    def test_required_parameters(self, tool_registry):
        required = {t.name: t.parameters["required"] for t in tool_registry.list_tools()}
        assert required["compose_interface"] == ["intent"]
        assert required["get_code"] == ["component"]
        assert required["get_layout_pattern"] == ["pattern"]
        assert required["validate_accessibility"] == []
        assert required["get_tokens"] == []

    def test_parameter_types_and_defaults(self, tool_registry):
        definition, _ = tool_registry.get("get_code")
        props = definition.parameters["properties"]
        assert props["props"]["type"] == "object"
        assert props["framework"]["default"] == "react"
        definition, _ = tool_registry.get("search_components")
        assert definition.parameters["properties"]["limit"]["type"] == "integer"

    def test_empty_registry(self):
        assert ToolRegistry().list_tools() == []

    @pytest.mark.asyncio
    async def test_call_unknown_tool(self, tool_registry):
        with pytest.raises(ToolError):
            await tool_registry.call("render_pdf", {})

    @pytest.mark.asyncio
    async def test_call_missing_argument(self, tool_registry):
        with pytest.raises(InvalidOptionError) as exc_info:
            await tool_registry.call("compose_interface", {})
        assert "missing intent" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_call_unexpected_argument(self, tool_registry):
        with pytest.raises(InvalidOptionError) as exc_info:
            await tool_registry.call("compose_interface", {"intent": "login", "style": "dark"})
        assert "unexpected style" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_call_wrong_argument_type(self, tool_registry):
        with pytest.raises(InvalidOptionError) as exc_info:
            await tool_registry.call("search_components", {"query": "dialog", "limit": "5"})
        assert exc_info.value.option == "limit"
        assert "limit must be integer" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_call_bool_is_not_an_integer(self, tool_registry):
        with pytest.raises(InvalidOptionError):
            await tool_registry.call("search_components", {"query": "dialog", "limit": True})

    @pytest.mark.asyncio
    async def test_call_null_optional_argument(self, tool_registry):
        result = await tool_registry.call("search_components", {"query": "dialog", "limit": None})
        assert result["count"] >= 1


# ── TestBuiltinTools ───────────────────────────────────────────────────────────

class TestBuiltinTools:

    @pytest.mark.asyncio
    async def test_get_tokens_defaults(self, tool_registry):
        result = await tool_registry.call("get_tokens")
        assert set(result) == {"primitives", "semantic"}

    @pytest.mark.asyncio
    async def test_get_tokens_dark_colors(self, tool_registry):
        result = await tool_registry.call("get_tokens", {"category": "colors", "theme": "dark"})
        assert result["semantic"]["background"] == "#020617"

    @pytest.mark.asyncio
    async def test_get_component_spec(self, tool_registry):
        result = await tool_registry.call("get_component_spec", {"component": "input"})
        assert result["name"] == "Input"
        assert result["accessibility"]["requiresLabel"] is True

    @pytest.mark.asyncio
    async def test_get_component_spec_not_found_is_soft(self, tool_registry):
        result = await tool_registry.call("get_component_spec", {"component": "tooltip"})
        assert result == {"error": 'Component "tooltip" not found.'}

    @pytest.mark.asyncio
    async def test_get_code(self, tool_registry):
        result = await tool_registry.call("get_code", {"component": "select", "framework": "nextjs"})
        assert result["code"].startswith('"use client";')
        assert result["component"] == "select"

    @pytest.mark.asyncio
    async def test_search_components(self, tool_registry):
        result = await tool_registry.call("search_components", {"query": "dialog", "limit": 1})
        assert result["count"] == 1
        assert result["hasMore"] is True

    @pytest.mark.asyncio
    async def test_compose_interface(self, tool_registry):
        result = await tool_registry.call("compose_interface", {"intent": "login"})
        assert result["code"].startswith("<Card>")
        assert result["layout"] == {"type": "stack", "direction": "column", "gap": "4"}
        assert "suggestions" not in result

    @pytest.mark.asyncio
    async def test_compose_interface_empty_intent(self, tool_registry):
        with pytest.raises(EmptyIntentError):
            await tool_registry.call("compose_interface", {"intent": "  "})

    @pytest.mark.asyncio
    async def test_get_layout_pattern(self, tool_registry):
        result = await tool_registry.call(
            "get_layout_pattern", {"pattern": "dashboard-grid", "options": {"columns": 2}},
        )
        assert result["structure"]["columns"] == 2
        assert "grid-cols-2" in result["code"]

    @pytest.mark.asyncio
    async def test_get_layout_pattern_unknown(self, tool_registry):
        with pytest.raises(UnknownPatternError):
            await tool_registry.call("get_layout_pattern", {"pattern": "carousel"})

    @pytest.mark.asyncio
    async def test_validate_accessibility(self, tool_registry):
        result = await tool_registry.call("validate_accessibility", {"code": "<Button />"})
        assert result["valid"] is False
        assert result["issues"][0]["rule"] == "button-needs-name"
        assert result["passedRules"] == []

    @pytest.mark.asyncio
    async def test_compose_then_validate(self, tool_registry):
        composed = await tool_registry.call("compose_interface", {"intent": "settings"})
        result = await tool_registry.call("validate_accessibility", {"components": composed["components"]})
        assert [i["rule"] for i in result["issues"]] == ["select-needs-label"]
