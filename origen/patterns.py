"""Layout pattern catalog.

Seven named, fixed layouts. Each entry carries documentation data (structure,
representative components, slots, usage, tokens) and a markup template. The
template is filled from ``LayoutPatternOptions``; unset options fall back to
per-pattern defaults. Pattern names form a closed set, so an unknown name is
a hard error rather than a "no match".
"""

import logging
from string import Template
from typing import Callable, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from origen.exceptions import InvalidOptionError, UnknownPatternError
from origen.types import (
    ActionVariant,
    ComponentDescriptor,
    LayoutPatternOptions,
    LayoutPatternResult,
    LayoutStructure,
    PatternName,
    SlotDefinition,
    UsageGuide,
)

logger = logging.getLogger(__name__)

CodeRenderer = Callable[[LayoutPatternOptions], str]


class PatternConfig(BaseModel):
    """One catalog entry. Built once at import, copied out on every lookup."""
    model_config = ConfigDict(frozen=True)

    structure: LayoutStructure
    components: list[ComponentDescriptor]
    slots: list[SlotDefinition]
    usage: UsageGuide
    tokens: list[str]
    render: CodeRenderer


def _opt(value, default):
    # empty strings are kept; only an unset option takes the default
    return default if value is None else value


# ── Templates ────────────────────────────────────────────────────────────────

_FORM_LAYOUT = Template("""\
<Card>
  <CardHeader>
    <CardTitle>${title}</CardTitle>
    <CardDescription>${description}</CardDescription>
  </CardHeader>
  <CardContent className="space-y-4">
    <div className="space-y-2">
      <Label htmlFor="field1">Field 1</Label>
      <Input id="field1" placeholder="Enter value" />
    </div>
    {/* Add more fields here */}
  </CardContent>
  <CardFooter>
    <div className="flex justify-end gap-2 w-full">
      <Button variant="outline">${secondary}</Button>
      <Button>${primary}</Button>
    </div>
  </CardFooter>
</Card>""")

_SPLIT_VIEW = Template("""\
<div className="grid grid-cols-[250px_1fr] min-h-screen">
  <aside className="border-r border-border bg-muted/30 p-4">
    <nav className="space-y-2">
      <Button variant="ghost" className="w-full justify-start">${title}</Button>
      <Button variant="ghost" className="w-full justify-start">Settings</Button>
      <Button variant="ghost" className="w-full justify-start">Profile</Button>
    </nav>
  </aside>
  <main className="p-6">
    {/* Main content here */}
  </main>
</div>""")

_STAT_CARD = """\
    <Card>
      <CardHeader className="pb-2">
        <CardTitle className="text-sm font-medium">{label}</CardTitle>
      </CardHeader>
      <CardContent>
        <div className="text-2xl font-bold">{value}</div>
      </CardContent>
    </Card>"""

_DASHBOARD_STATS = (("Total Users", "1,234"), ("Revenue", "$12,345"), ("Active Now", "42"))

_MODAL_CONFIRM = Template("""\
<Modal>
  <Modal.Trigger>
    <Button variant="outline">Open</Button>
  </Modal.Trigger>
  <Modal.Content title="${title}" description="${description}">
    <div className="flex justify-end gap-2 mt-4">
      <Button variant="outline">${secondary}</Button>
      ${primary_button}
    </div>
  </Modal.Content>
</Modal>""")

_LIST_ITEM = """\
      <div className="flex items-center justify-between p-4">
        <div>{label}</div>
        <div className="flex gap-2">
          <Button variant="ghost" size="sm">Edit</Button>
          <Button variant="ghost" size="sm">Delete</Button>
        </div>
      </div>"""

_LIST_WITH_ACTIONS = Template("""\
<Card>
  <CardHeader>
    <CardTitle>${title}</CardTitle>
    <CardDescription>${description}</CardDescription>
  </CardHeader>
  <CardContent className="p-0">
    <div className="divide-y divide-border">
${items}
    </div>
  </CardContent>
  <CardFooter className="justify-center">
    <Button variant="outline">Load More</Button>
  </CardFooter>
</Card>""")

_HERO_SECTION = Template("""\
<section className="flex flex-col items-center justify-center min-h-[60vh] text-center px-4">
  <h1 className="text-4xl font-bold tracking-tight sm:text-6xl">
    ${title}
  </h1>
  <p className="mt-6 text-lg text-muted-foreground max-w-2xl">
    ${description}
  </p>
  <div className="mt-10 flex items-center justify-center gap-4">
    <Button size="lg">${primary}</Button>
    <Button variant="outline" size="lg">${secondary}</Button>
  </div>
</section>""")

_EMPTY_STATE = Template("""\
<div className="flex flex-col items-center justify-center py-12 text-center">
  <div className="rounded-full bg-muted p-4 mb-4">
    <InboxIcon className="h-8 w-8 text-muted-foreground" />
  </div>
  <h3 className="text-lg font-semibold">${title}</h3>
  <p className="text-sm text-muted-foreground max-w-sm mt-2">
    ${description}
  </p>
  <div className="mt-6">
    <Button>${primary}</Button>
  </div>
</div>""")


# ── Renderers ────────────────────────────────────────────────────────────────
# safe_substitute: the templates contain literal "$" (e.g. "$12,345") that must pass through.

def render_form_layout(opts: LayoutPatternOptions) -> str:
    return _FORM_LAYOUT.safe_substitute(
        title=_opt(opts.title, "Form Title"),
        description=_opt(opts.description, "Enter your information below"),
        primary=_opt(opts.primary_action, "Submit"),
        secondary=_opt(opts.secondary_action, "Cancel"),
    )


def render_split_view(opts: LayoutPatternOptions) -> str:
    return _SPLIT_VIEW.safe_substitute(title=_opt(opts.title, "Dashboard"))


def render_dashboard_grid(opts: LayoutPatternOptions) -> str:
    columns = _opt(opts.columns, 3)
    cards = "\n".join(_STAT_CARD.format(label=label, value=value) for label, value in _DASHBOARD_STATS)
    return "\n".join([
        '<div className="space-y-6">',
        f'  <div className="grid grid-cols-{columns} gap-4">',
        cards,
        "  </div>",
        '  <Card className="col-span-full">',
        "    {/* Main content here */}",
        "  </Card>",
        "</div>",
    ])


def render_modal_confirm(opts: LayoutPatternOptions) -> str:
    primary = _opt(opts.primary_action, "Confirm")
    if opts.variant is ActionVariant.DESTRUCTIVE:
        primary_button = f'<Button variant="destructive">{primary}</Button>'
    else:
        primary_button = f"<Button>{primary}</Button>"
    return _MODAL_CONFIRM.safe_substitute(
        title=_opt(opts.title, "Confirm Action"),
        description=_opt(opts.description, "Are you sure you want to proceed?"),
        secondary=_opt(opts.secondary_action, "Cancel"),
        primary_button=primary_button,
    )


def render_list_with_actions(opts: LayoutPatternOptions) -> str:
    return _LIST_WITH_ACTIONS.safe_substitute(
        title=_opt(opts.title, "Items"),
        description=_opt(opts.description, "Manage your items"),
        items="\n".join(_LIST_ITEM.format(label=f"Item {n}") for n in (1, 2)),
    )


def render_hero_section(opts: LayoutPatternOptions) -> str:
    return _HERO_SECTION.safe_substitute(
        title=_opt(opts.title, "Welcome to Our App"),
        description=_opt(
            opts.description,
            "Build amazing things with our powerful tools and intuitive interface.",
        ),
        primary=_opt(opts.primary_action, "Get Started"),
        secondary=_opt(opts.secondary_action, "Learn More"),
    )


def render_empty_state(opts: LayoutPatternOptions) -> str:
    return _EMPTY_STATE.safe_substitute(
        title=_opt(opts.title, "No items yet"),
        description=_opt(opts.description, "Get started by creating your first item."),
        primary=_opt(opts.primary_action, "Create Item"),
    )


# ── Catalog ──────────────────────────────────────────────────────────────────

def _c(name: str, slot: str, **props) -> dict:
    return {"name": name, "props": props, "slot": slot}


def _s(name: str, description: str, *accepts: str) -> dict:
    return {"name": name, "description": description, "accepts": list(accepts)}


PATTERNS: dict[PatternName, PatternConfig] = {
    PatternName.FORM_LAYOUT: PatternConfig(
        structure={"type": "stack", "direction": "column", "gap": "6"},
        components=[
            _c("Card", "wrapper"),
            _c("CardHeader", "header"),
            _c("CardTitle", "header"),
            _c("CardDescription", "header"),
            _c("CardContent", "content", className="space-y-4"),
            _c("Input", "content"),
            _c("CardFooter", "footer", className="flex justify-end gap-2"),
            _c("Button", "footer", variant="outline"),
            _c("Button", "footer", variant="default"),
        ],
        slots=[
            _s("fields", "Form field area", "Input", "Select", "FormField"),
            _s("actions", "Footer action buttons", "Button"),
        ],
        usage={
            "when": ["Collecting user input", "Data entry forms", "Settings forms"],
            "examples": ["Contact form", "Profile edit", "Checkout form"],
        },
        tokens=["border", "card", "card-foreground", "muted-foreground", "primary", "primary-foreground"],
        render=render_form_layout,
    ),
    PatternName.SPLIT_VIEW: PatternConfig(
        structure={"type": "grid", "columns": 2, "gap": "0"},
        components=[
            _c("div", "wrapper", className="grid grid-cols-[250px_1fr] min-h-screen"),
            _c("aside", "sidebar", className="border-r border-border bg-muted/30 p-4"),
            _c("nav", "sidebar", className="space-y-2"),
            _c("Button", "sidebar", variant="ghost", className="w-full justify-start"),
            _c("main", "main", className="p-6"),
        ],
        slots=[
            _s("sidebar", "Navigation sidebar", "Button", "nav"),
            _s("main", "Main content area", "Card", "div", "section"),
        ],
        usage={
            "when": ["Admin dashboards", "Settings pages", "Documentation sites"],
            "examples": ["App settings", "User management", "Content editor"],
        },
        tokens=["background", "border", "foreground", "muted"],
        render=render_split_view,
    ),
    PatternName.DASHBOARD_GRID: PatternConfig(
        structure={"type": "grid", "columns": 3, "gap": "4"},
        components=[
            _c("div", "wrapper", className="space-y-6"),
            _c("div", "stats", className="grid gap-4"),
            _c("Card", "stats"),
            _c("CardHeader", "stats", className="pb-2"),
            _c("CardTitle", "stats", className="text-sm font-medium"),
            _c("CardContent", "stats"),
        ],
        slots=[
            _s("stats", "Stat card grid", "Card"),
            _s("main", "Main content area below stats", "Card", "div"),
        ],
        usage={
            "when": ["Analytics dashboards", "Admin overviews", "Metrics displays"],
            "examples": ["Sales dashboard", "User analytics", "System status"],
        },
        tokens=["border", "card", "card-foreground", "muted-foreground"],
        render=render_dashboard_grid,
    ),
    PatternName.MODAL_CONFIRM: PatternConfig(
        structure={"type": "stack", "direction": "column", "gap": "4"},
        components=[
            _c("Modal", "wrapper"),
            _c("Modal.Trigger", "trigger"),
            _c("Button", "trigger", variant="outline"),
            _c("Modal.Content", "content"),
            _c("Button", "actions", variant="outline"),
            _c("Button", "actions"),
        ],
        slots=[
            _s("trigger", "Element that opens the modal", "Button"),
            _s("content", "Modal body content", "div", "p", "form"),
            _s("actions", "Action buttons", "Button"),
        ],
        usage={
            "when": ["Destructive actions", "Confirmations", "Important decisions"],
            "examples": ["Delete confirmation", "Logout prompt", "Discard changes"],
        },
        tokens=["background", "border", "card", "foreground", "muted-foreground", "primary", "destructive"],
        render=render_modal_confirm,
    ),
    PatternName.LIST_WITH_ACTIONS: PatternConfig(
        structure={"type": "stack", "direction": "column", "gap": "0"},
        components=[
            _c("Card", "wrapper"),
            _c("CardHeader", "header"),
            _c("CardTitle", "header"),
            _c("CardDescription", "header"),
            _c("CardContent", "content", className="p-0"),
            _c("div", "items", className="divide-y divide-border"),
            _c("Button", "actions", variant="ghost", size="sm"),
            _c("CardFooter", "footer", className="justify-center"),
        ],
        slots=[
            _s("items", "List items", "div", "ListItem"),
            _s("actions", "Per-item actions", "Button"),
            _s("pagination", "Pagination controls", "Button", "Pagination"),
        ],
        usage={
            "when": ["Data lists", "User management", "Content management"],
            "examples": ["User list", "Product inventory", "Task list"],
        },
        tokens=["border", "card", "card-foreground", "muted-foreground", "primary"],
        render=render_list_with_actions,
    ),
    PatternName.HERO_SECTION: PatternConfig(
        structure={"type": "flex", "direction": "column", "gap": "6"},
        components=[
            _c("section", "wrapper",
               className="flex flex-col items-center justify-center min-h-[60vh] text-center px-4"),
            _c("h1", "headline", className="text-4xl font-bold tracking-tight sm:text-6xl"),
            _c("p", "description", className="mt-6 text-lg text-muted-foreground max-w-2xl"),
            _c("div", "actions", className="mt-10 flex items-center justify-center gap-4"),
            _c("Button", "actions", size="lg"),
            _c("Button", "actions", variant="outline", size="lg"),
        ],
        slots=[
            _s("headline", "Main headline", "h1", "span"),
            _s("description", "Supporting text", "p", "span"),
            _s("actions", "CTA buttons", "Button"),
        ],
        usage={
            "when": ["Landing pages", "Marketing pages", "Product launches"],
            "examples": ["Homepage hero", "Feature announcement", "Waitlist signup"],
        },
        tokens=["background", "foreground", "muted-foreground", "primary", "primary-foreground"],
        render=render_hero_section,
    ),
    PatternName.EMPTY_STATE: PatternConfig(
        structure={"type": "flex", "direction": "column", "gap": "4"},
        components=[
            _c("div", "wrapper", className="flex flex-col items-center justify-center py-12 text-center"),
            _c("div", "icon", className="rounded-full bg-muted p-4 mb-4"),
            _c("h3", "message", className="text-lg font-semibold"),
            _c("p", "message", className="text-sm text-muted-foreground max-w-sm mt-2"),
            _c("div", "actions", className="mt-6"),
            _c("Button", "actions"),
        ],
        slots=[
            _s("icon", "Illustration or icon", "svg", "img", "div"),
            _s("message", "Empty state message", "h3", "p"),
            _s("actions", "Action to resolve empty state", "Button"),
        ],
        usage={
            "when": ["No data to display", "First-time user experience", "Search with no results"],
            "examples": ["Empty inbox", "No search results", "No projects yet"],
        },
        tokens=["background", "foreground", "muted", "muted-foreground", "primary"],
        render=render_empty_state,
    ),
}


def available_patterns() -> list[str]:
    return [name.value for name in PATTERNS]


def _resolve_pattern(pattern: Union[PatternName, str]) -> PatternName:
    try:
        return PatternName(pattern)
    except ValueError:
        raise UnknownPatternError(
            f'Invalid pattern: "{pattern}". Available patterns: {", ".join(available_patterns())}',
            pattern=str(pattern),
        ) from None


def _resolve_options(options) -> LayoutPatternOptions:
    if options is None:
        return LayoutPatternOptions()
    if isinstance(options, LayoutPatternOptions):
        return options
    try:
        return LayoutPatternOptions.model_validate(options)
    except ValidationError as exc:
        bad = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise InvalidOptionError(f"Invalid layout pattern options: {bad}", option=bad) from exc


def get_layout_pattern(
    pattern: Union[PatternName, str],
    options: Union[LayoutPatternOptions, dict, None] = None,
) -> LayoutPatternResult:
    """Look up a named layout and render its markup with ``options`` applied.

    Only dashboard-grid honours ``options.columns``, in both the returned
    structure and the grid class of the markup.

    Raises:
        UnknownPatternError: ``pattern`` is not one of the seven names.
        InvalidOptionError: columns outside 1..6 or an unknown variant.
    """
    name = _resolve_pattern(pattern)
    opts = _resolve_options(options)
    entry = PATTERNS[name]

    structure = entry.structure.model_copy()
    if name is PatternName.DASHBOARD_GRID and opts.columns:
        structure.columns = opts.columns

    logger.debug(f"layout pattern {name.value!r} rendered with {opts.to_wire()}")
    return LayoutPatternResult(
        pattern=name,
        structure=structure,
        components=[c.model_copy(deep=True) for c in entry.components],
        code=entry.render(opts),
        tokens=sorted(entry.tokens),
        slots=[s.model_copy(deep=True) for s in entry.slots],
        usage=entry.usage.model_copy(deep=True),
    )
