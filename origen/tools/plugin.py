"""@tool decorator for registering functions as origen tools.

Usage:
    @tool(name="get_tokens", description="Get design tokens")
    async def get_tokens(category: str = "all", theme: str = "light") -> dict:
        ...

Auto-generates ToolDefinition from function signature + type hints.
"""

import functools
import inspect
import typing
from typing import Any, Callable

from origen.types import ToolDefinition

# Global registry for decorated tools, filled at import time
_registered_tools: dict[str, tuple[ToolDefinition, Callable[..., Any]]] = {}

_TYPE_MAP = {str: "string", int: "integer", float: "number",
             bool: "boolean", list: "array", dict: "object"}


def _json_type(annotation) -> str:
    """JSON Schema type for an annotation. Optional[X] maps like X."""
    if annotation is inspect.Parameter.empty:
        return "string"
    origin = typing.get_origin(annotation)
    if origin is typing.Union:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        return _json_type(args[0]) if len(args) == 1 else "string"
    return _TYPE_MAP.get(origin or annotation, "string")


def tool(
    name: str = None,
    description: str = None,
    params: dict[str, str] = None,
):
    """Decorator to register a function as an origen tool.

    Args:
        name: Tool name, exposed verbatim over MCP and HTTP (defaults to the function name)
        description: Tool description (defaults to first docstring line)
        params: Per-parameter descriptions for the generated schema
    """
    params = params or {}

    def decorator(func):
        tool_name = name or func.__name__
        tool_desc = description or (func.__doc__ or "").strip().split("\n")[0]

        sig = inspect.signature(func)
        hints = typing.get_type_hints(func)
        properties = {}
        for param_name, param in sig.parameters.items():
            schema = {
                "type": _json_type(hints.get(param_name, param.annotation)),
                "description": params.get(param_name, f"Parameter: {param_name}"),
            }
            if param.default is not inspect.Parameter.empty and param.default is not None:
                schema["default"] = param.default
            properties[param_name] = schema

        definition = ToolDefinition(
            name=tool_name,
            description=tool_desc,
            parameters={
                "type": "object",
                "properties": properties,
                "required": [p for p, v in sig.parameters.items() if v.default is inspect.Parameter.empty],
            },
        )

        _registered_tools[tool_name] = (definition, func)

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            return await func(*args, **kwargs)

        wrapper._origen_tool = definition
        return wrapper

    return decorator


def get_registered_tools() -> dict[str, tuple[ToolDefinition, Callable[..., Any]]]:
    """Snapshot of every @tool registration made so far."""
    return _registered_tools.copy()
