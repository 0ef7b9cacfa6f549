"""Built-in tools package. Import to register all built-in tools."""

from origen.tools.builtin.design import (
    compose_interface,
    get_code,
    get_component_spec,
    get_layout_pattern,
    get_tokens,
    search_components,
    validate_accessibility,
)

__all__ = [
    "get_tokens", "get_component_spec", "get_code", "search_components",
    "compose_interface", "get_layout_pattern", "validate_accessibility",
]
