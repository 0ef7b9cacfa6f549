"""Test fixtures: bundled catalogs, sample descriptors, tool registry.

All tests should use these fixtures for consistency.
"""

import pytest

from origen.catalog import ComponentRegistry, TokenCatalog
from origen.tools.registry import ToolRegistry
from origen.types import ComponentDescriptor


@pytest.fixture
def token_catalog():
    """Token catalog loaded from the bundled defaults."""
    from origen.catalog.loader import _DEFAULTS_DIR
    return TokenCatalog.from_yaml(_DEFAULTS_DIR / "tokens.yaml")


@pytest.fixture
def component_registry():
    """Component registry loaded from the bundled defaults."""
    from origen.catalog.loader import _DEFAULTS_DIR
    return ComponentRegistry.from_yaml(_DEFAULTS_DIR / "components.yaml")


@pytest.fixture
def tool_registry():
    """Registry with every built-in tool registered."""
    return ToolRegistry.with_builtins()


@pytest.fixture
def accessible_components():
    """One passing instance of every checked component type."""
    return [
        ComponentDescriptor(name="Button", children="Save"),
        ComponentDescriptor(name="Input", props={"aria-label": "Email"}),
        ComponentDescriptor(name="Modal.Content", props={"title": "Delete", "description": "Cannot be undone"}),
        ComponentDescriptor(name="Select", props={"aria-labelledby": "theme-label"}),
        ComponentDescriptor(name="img", props={"alt": "Team at the offsite"}),
    ]
