"""Name → (definition, implementation) table shared by the MCP server, the HTTP API and the CLI."""

import logging
from typing import Any, Callable

from origen.exceptions import InvalidOptionError, ToolError
from origen.types import ToolDefinition

logger = logging.getLogger(__name__)

# JSON-schema type → accepted Python types. bool is an int subclass and is rejected separately.
_JSON_TYPES: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
    "array": (list,),
    "object": (dict,),
}


def _type_problems(arguments: dict[str, Any], schema: dict) -> list[str]:
    problems = []
    properties = schema.get("properties", {})
    required = schema.get("required", [])
    for key, value in arguments.items():
        expected = properties[key].get("type")
        if expected not in _JSON_TYPES:
            continue
        if value is None and key not in required:
            continue
        is_bool = isinstance(value, bool)
        if not isinstance(value, _JSON_TYPES[expected]) or (is_bool and expected != "boolean"):
            problems.append(f"{key} must be {expected}")
    return problems


class ToolRegistry:
    """Design tools by name. Transports list and dispatch through this."""

    def __init__(self):
        self._tools: dict[str, ToolDefinition] = {}
        self._implementations: dict[str, Callable[..., Any]] = {}

    @classmethod
    def with_builtins(cls) -> "ToolRegistry":
        """Registry holding every tool registered by ``origen.tools.builtin``."""
        from origen.tools.plugin import get_registered_tools
        import origen.tools.builtin  # noqa: F401  (runs the @tool registrations)

        registry = cls()
        for _name, (definition, impl) in get_registered_tools().items():
            registry.register(definition, impl)
        return registry

    def register(self, definition: ToolDefinition, implementation: Callable[..., Any]) -> None:
        """Add or replace a tool. ``implementation`` is an async callable returning a JSON-ready dict."""
        self._tools[definition.name] = definition
        self._implementations[definition.name] = implementation

    def get(self, name: str) -> tuple[ToolDefinition, Callable[..., Any]]:
        """Definition and implementation for ``name``.

        Raises:
            ToolError: no tool of that name is registered.
        """
        if name not in self._tools:
            raise ToolError(f"Tool '{name}' not found in registry", tool_name=name)
        return self._tools[name], self._implementations[name]

    def list_tools(self) -> list[ToolDefinition]:
        """Definitions in registration order."""
        return list(self._tools.values())

    async def call(self, name: str, arguments: dict[str, Any] = None) -> Any:
        """Run a tool by name with keyword arguments.

        Raises:
            ToolError: unknown tool.
            InvalidOptionError: missing required, unexpected or wrongly typed arguments.
        """
        definition, impl = self.get(name)
        arguments = arguments or {}
        schema = definition.parameters
        unknown = sorted(set(arguments) - set(schema.get("properties", {})))
        missing = [p for p in schema.get("required", []) if p not in arguments]
        if unknown or missing:
            problems = [f"unexpected {p}" for p in unknown] + [f"missing {p}" for p in missing]
            raise InvalidOptionError(
                f"Bad arguments for tool '{name}': {', '.join(problems)}",
                option=", ".join(unknown + missing),
            )
        mistyped = _type_problems(arguments, schema)
        if mistyped:
            raise InvalidOptionError(
                f"Bad arguments for tool '{name}': {', '.join(mistyped)}",
                option=", ".join(p.split(" ", 1)[0] for p in mistyped),
            )
        logger.debug(f"calling tool {name} with {sorted(arguments)}")
        return await impl(**arguments)
