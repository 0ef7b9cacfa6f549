"""Design-system tools: the seven operations exposed over MCP and HTTP.

Each tool is a thin async wrapper around the synchronous core and returns a
JSON-ready dict with camelCase keys. Input contract violations propagate as
``InputContractError`` subclasses for the transport to map.
"""

from typing import Optional

from origen.a11y import validate_accessibility as _validate_accessibility
from origen.catalog import get_component_registry, get_token_catalog
from origen.codegen import get_code as _get_code
from origen.compose import compose_interface as _compose_interface
from origen.patterns import get_layout_pattern as _get_layout_pattern
from origen.search import search_components as _search_components
from origen.tools.plugin import tool


@tool(
    name="get_tokens",
    description="Get design tokens (colors, spacing, typography, radius) for a theme",
    params={
        "category": "Token category: all, colors, spacing, typography or radius",
        "theme": "Theme for semantic tokens: light or dark",
    },
)
async def get_tokens(category: str = "all", theme: str = "light") -> dict:
    return get_token_catalog().get(category, theme)


@tool(
    name="get_component_spec",
    description="Get the full contract for a component: props, tokens, accessibility and usage",
    params={"component": "Component name: button, input, card, select or modal"},
)
async def get_component_spec(component: str) -> dict:
    # an unknown name is a soft failure returned as {"error": ...}
    return get_component_registry().get(component).to_wire()


@tool(
    name="get_code",
    description="Generate usage code for a component with the given props",
    params={
        "component": "Component to generate code for",
        "props": "Props to apply to the component",
        "children": "Children content",
        "framework": "Target framework: react or nextjs",
        "variant": "Shorthand for the variant prop",
    },
)
async def get_code(
    component: str,
    props: Optional[dict] = None,
    children: Optional[str] = None,
    framework: str = "react",
    variant: Optional[str] = None,
) -> dict:
    return _get_code(component, props, children, framework, variant).to_wire()


@tool(
    name="search_components",
    description="Search components by name, description and usage",
    params={
        "query": "Search query, e.g. 'form input' or 'dialog'",
        "limit": "Maximum number of results (1-20)",
    },
)
async def search_components(query: str, limit: Optional[int] = None) -> dict:
    return _search_components(query, limit).to_wire()


@tool(
    name="compose_interface",
    description="Compose a UI from a natural-language intent into components, code and tokens",
    params={
        "intent": "What to build, e.g. 'login form with email and password'",
        "context": "Where the UI lives: page, section or component",
    },
)
async def compose_interface(intent: str, context: str = "section") -> dict:
    return _compose_interface(intent, context).to_wire()


@tool(
    name="get_layout_pattern",
    description="Get a named layout pattern with structure, code, slots and usage guidance",
    params={
        "pattern": "Pattern name, e.g. form-layout, dashboard-grid, modal-confirm",
        "options": "Customisation: title, description, columns, primaryAction, secondaryAction, variant",
    },
)
async def get_layout_pattern(pattern: str, options: Optional[dict] = None) -> dict:
    return _get_layout_pattern(pattern, options).to_wire()


@tool(
    name="validate_accessibility",
    description="Check markup or a component list for accessibility issues and score it",
    params={
        "code": "JSX markup to validate",
        "components": "Component list from compose_interface or get_layout_pattern",
        "context": "Hint: form, navigation, content, modal or general",
    },
)
async def validate_accessibility(
    code: Optional[str] = None,
    components: Optional[list] = None,
    context: str = "general",
) -> dict:
    return _validate_accessibility(code=code, components=components, context=context).to_wire()
