from origen.tools.plugin import get_registered_tools, tool
from origen.tools.registry import ToolRegistry

__all__ = ["tool", "get_registered_tools", "ToolRegistry"]
