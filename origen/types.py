"""All shared types, enums, and type aliases. Everything imports from here."""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ── Enums ──────────────────────────────────────────────────────────────

class Slot(str, Enum):
    WRAPPER = "wrapper"
    HEADER = "header"
    CONTENT = "content"
    FOOTER = "footer"
    TRIGGER = "trigger"
    ITEMS = "items"
    ACTIONS = "actions"
    ICON = "icon"
    MESSAGE = "message"
    SIDEBAR = "sidebar"
    MAIN = "main"
    STATS = "stats"
    HEADLINE = "headline"
    DESCRIPTION = "description"

class LayoutType(str, Enum):
    FLEX = "flex"
    GRID = "grid"
    STACK = "stack"

class Direction(str, Enum):
    ROW = "row"
    COLUMN = "column"

class ComposeContext(str, Enum):
    PAGE = "page"           # wrapped in a full-height page container
    SECTION = "section"
    COMPONENT = "component"

class A11yContext(str, Enum):
    FORM = "form"
    NAVIGATION = "navigation"
    CONTENT = "content"
    MODAL = "modal"
    GENERAL = "general"

class Severity(str, Enum):
    ERROR = "error"         # blocks validity, -25
    WARNING = "warning"     # -10
    INFO = "info"           # -2

class PatternName(str, Enum):
    FORM_LAYOUT = "form-layout"
    SPLIT_VIEW = "split-view"
    DASHBOARD_GRID = "dashboard-grid"
    MODAL_CONFIRM = "modal-confirm"
    LIST_WITH_ACTIONS = "list-with-actions"
    HERO_SECTION = "hero-section"
    EMPTY_STATE = "empty-state"

class ComponentName(str, Enum):
    BUTTON = "button"
    INPUT = "input"
    CARD = "card"
    SELECT = "select"
    MODAL = "modal"

class TokenCategory(str, Enum):
    ALL = "all"
    COLORS = "colors"
    SPACING = "spacing"
    TYPOGRAPHY = "typography"
    RADIUS = "radius"

class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

class Framework(str, Enum):
    REACT = "react"
    NEXTJS = "nextjs"       # adds "use client" to interactive components

class ActionVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


# ── Base ───────────────────────────────────────────────────────────────

class WireModel(BaseModel):
    """Base for every model that crosses a transport boundary.

    Attributes are snake_case in Python and camelCase on the wire
    (``passed_rules`` <-> ``passedRules``). Both spellings are accepted on input.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys and unset optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ── Composition ────────────────────────────────────────────────────────

class ComponentDescriptor(WireModel):
    """The unit flowing through every subsystem."""
    name: str                                       # "Button", "Modal.Content", "img"
    props: dict[str, Any] = Field(default_factory=dict)  # insertion order is render order
    slot: Optional[str] = None                      # a Slot value; None or unknown = unslotted
    children: Optional[Union[str, list[Any]]] = None

class LayoutConfig(WireModel):
    type: LayoutType
    direction: Optional[Direction] = None
    gap: Optional[str] = None                       # tailwind spacing step, e.g. "4"

class LayoutStructure(LayoutConfig):
    columns: Optional[int] = None

class IntentPattern(BaseModel):
    """Keyword-tagged component skeleton. Built once at import, never mutated."""
    model_config = ConfigDict(frozen=True)

    name: str                                       # "login", "navigation" (for logs)
    keywords: tuple[str, ...]                       # substring triggers, declaration order
    components: tuple[ComponentDescriptor, ...]
    layout: LayoutConfig

class ComposeResult(WireModel):
    layout: LayoutConfig
    components: list[ComponentDescriptor]
    code: str
    tokens: list[str]
    suggestions: Optional[list[str]] = None         # only set when no pattern matched


# ── Layout patterns ────────────────────────────────────────────────────

class SlotDefinition(WireModel):
    name: str
    description: str
    accepts: list[str]                              # documentation only, not enforced

class UsageGuide(WireModel):
    when: list[str] = Field(min_length=1)
    examples: list[str] = Field(min_length=1)

class LayoutPatternOptions(WireModel):
    title: Optional[str] = None
    description: Optional[str] = None
    columns: Optional[int] = Field(default=None, ge=1, le=6)
    primary_action: Optional[str] = None
    secondary_action: Optional[str] = None
    variant: Optional[ActionVariant] = None         # modal-confirm only

class LayoutPatternResult(WireModel):
    pattern: PatternName
    structure: LayoutStructure
    components: list[ComponentDescriptor]
    code: str
    tokens: list[str]
    slots: list[SlotDefinition]
    usage: UsageGuide


# ── Accessibility ──────────────────────────────────────────────────────

class AccessibilityIssue(WireModel):
    severity: Severity
    rule: str                                       # stable id, e.g. "input-needs-label"
    wcag: Optional[str] = None                      # "1.3.1, 4.1.2"
    component: Optional[str] = None
    message: str
    suggestion: str

class ValidationResult(WireModel):
    valid: bool                                     # no error-severity issues
    score: int                                      # 0-100
    issues: list[AccessibilityIssue]
    summary: str
    passed_rules: list[str]


# ── Component contracts ────────────────────────────────────────────────

class PropSpec(WireModel):
    type: str
    values: Optional[list[str]] = None
    default: Any = None
    required: Optional[bool] = None
    description: Optional[str] = None

class AccessibilitySpec(WireModel):
    role: Optional[str] = None
    focus_trap: Optional[bool] = None
    requires_label: Optional[bool] = None
    semantic_structure: Optional[bool] = None
    keyboard_interaction: Optional[list[str]] = None

class UsageSpec(WireModel):
    when: list[str]
    avoid: Optional[list[str]] = None

class CodeExample(WireModel):
    title: str
    code: str

class ComponentSpec(WireModel):
    """Static contract for one component of the UI library."""
    name: str                                       # display name, "Button"
    description: str
    props: dict[str, PropSpec] = Field(default_factory=dict)
    subcomponents: Optional[list[str]] = None
    content_props: Optional[dict[str, Any]] = None
    tokens: dict[str, Any] = Field(default_factory=dict)
    accessibility: Optional[AccessibilitySpec] = None
    usage: Optional[UsageSpec] = None
    examples: Optional[list[CodeExample]] = None
    exports: list[str] = Field(default_factory=list)       # names importable from the package
    dependencies: list[str] = Field(default_factory=list)  # npm runtime deps
    interactive: bool = False                       # needs a client boundary in Next.js

class ComponentSpecNotFound(WireModel):
    """Soft failure returned in the success channel by get_component_spec."""
    error: str

class CodeResult(WireModel):
    component: ComponentName
    code: str
    imports: list[str]
    dependencies: list[str] = Field(default_factory=list)

class SearchResult(WireModel):
    name: str                                       # registry key
    display_name: str
    description: str
    usage: Optional[list[str]] = None
    score: float                                    # fraction of query terms matched

class SearchResponse(WireModel):
    query: str
    results: list[SearchResult]
    count: int
    has_more: bool


# ── Tools ──────────────────────────────────────────────────────────────

class ToolDefinition(BaseModel):
    """Registration record for a tool exposed over MCP and HTTP."""
    name: str                                       # unique identifier
    description: str                                # shown to the calling model
    parameters: dict[str, Any]                      # JSON Schema for params
