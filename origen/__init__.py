"""origen — design-system engine for AI agents.

Usage:
    from origen import compose_interface, validate_accessibility

    result = compose_interface("contact form with name, email and message")
    report = validate_accessibility(components=result.components)
"""

from origen.a11y import validate_accessibility
from origen.codegen import get_code
from origen.compose import compose_interface
from origen.patterns import get_layout_pattern
from origen.search import search_components
from origen.types import (
    ComponentDescriptor, ComposeResult, LayoutPatternResult, ValidationResult,
    AccessibilityIssue, CodeResult, SearchResponse, ComponentSpec,
)
from origen.exceptions import (
    OrigenError, InputContractError, EmptyIntentError, UnknownPatternError,
    MissingValidationInputError, UnknownComponentError, InvalidOptionError,
    CatalogError, ToolError,
)
from origen.version import __version__

__all__ = [
    "compose_interface", "get_layout_pattern", "validate_accessibility",
    "get_code", "search_components",
    "ComponentDescriptor", "ComposeResult", "LayoutPatternResult", "ValidationResult",
    "AccessibilityIssue", "CodeResult", "SearchResponse", "ComponentSpec",
    "OrigenError", "InputContractError", "EmptyIntentError", "UnknownPatternError",
    "MissingValidationInputError", "UnknownComponentError", "InvalidOptionError",
    "CatalogError", "ToolError",
    "__version__",
]
