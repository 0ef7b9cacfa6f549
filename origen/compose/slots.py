"""Slot assembler: bucket a flat descriptor list and render it as JSX-like markup."""

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Union

from origen.config import config
from origen.types import ComponentDescriptor, ComposeContext, Direction, LayoutConfig, LayoutType, Slot

PAGE_CONTAINER = '<div className="min-h-screen bg-background p-8">'

# (slot, structural placeholder, opening tag) in render order
_CARD_SECTIONS = (
    (Slot.HEADER, "CardHeader", "<CardHeader>"),
    (Slot.CONTENT, "CardContent", '<CardContent className="flex flex-col gap-4">'),
    (Slot.FOOTER, "CardFooter", "<CardFooter>"),
)


@dataclass
class SlotBuckets:
    """The six known buckets. Unknown or missing slots land in ``unslotted``."""
    wrapper: list[ComponentDescriptor] = field(default_factory=list)
    header: list[ComponentDescriptor] = field(default_factory=list)
    content: list[ComponentDescriptor] = field(default_factory=list)
    footer: list[ComponentDescriptor] = field(default_factory=list)
    trigger: list[ComponentDescriptor] = field(default_factory=list)
    unslotted: list[ComponentDescriptor] = field(default_factory=list)

    def of(self, slot: Union[Slot, str]) -> list[ComponentDescriptor]:
        return getattr(self, Slot(slot).value)

    def wraps(self, name: str) -> bool:
        return any(c.name == name for c in self.wrapper)


_BUCKETED = frozenset(s.value for s in (Slot.WRAPPER, Slot.HEADER, Slot.CONTENT, Slot.FOOTER, Slot.TRIGGER))


def group_by_slot(components: Iterable[ComponentDescriptor]) -> SlotBuckets:
    buckets = SlotBuckets()
    for comp in components:
        key = comp.slot.value if isinstance(comp.slot, Slot) else comp.slot
        if key in _BUCKETED:
            buckets.of(comp.slot).append(comp)
        else:
            buckets.unslotted.append(comp)
    return buckets


def render_prop(key: str, value: Any) -> str:
    """One attribute: strings quoted, True bare, False as {false}, rest as a JSON expression."""
    if isinstance(value, str):
        return f'{key}="{value}"'
    if value is True:
        return key
    if value is False:
        return f"{key}={{false}}"
    return f"{key}={{{json.dumps(value, separators=(',', ':'), ensure_ascii=False)}}}"


def render_props(props: dict[str, Any]) -> str:
    """Attributes in insertion order, each with a leading space."""
    return "".join(f" {render_prop(k, v)}" for k, v in props.items())


def _children_text(children: Union[str, list, None]) -> str:
    if isinstance(children, list):
        return "".join(str(c) for c in children)
    return children or ""


def render_component(comp: ComponentDescriptor, name: str = None) -> str:
    """``<Name props>children</Name>``, or self-closing when there are no children."""
    tag = name or comp.name
    props = render_props(comp.props)
    text = _children_text(comp.children)
    if text:
        return f"<{tag}{props}>{text}</{tag}>"
    return f"<{tag}{props} />"


def flex_class(layout: LayoutConfig) -> str:
    """Container class for the flat path. Only flex layouts produce one."""
    if layout.type is not LayoutType.FLEX:
        return ""
    direction = "flex-row" if layout.direction is Direction.ROW else "flex-col"
    gap = f"gap-{layout.gap}" if layout.gap else ""
    return f"flex {direction} {gap}".strip()


class MarkupRenderer:
    """Turns bucketed descriptors into one of three fixed skeletons."""

    def __init__(self, indent: str = None):
        self.indent = indent if indent is not None else config.indent

    def render(
        self,
        layout: LayoutConfig,
        components: list[ComponentDescriptor],
        context: ComposeContext = ComposeContext.SECTION,
    ) -> str:
        context = ComposeContext(context)
        buckets = group_by_slot(components)
        if buckets.wraps("Card"):
            body = self._card(buckets)
        elif buckets.wraps("Modal"):
            body = self._modal(buckets)
        else:
            body = self._flat(layout, buckets)

        if context is ComposeContext.PAGE:
            return self.wrap_page(body)
        return body

    def wrap_page(self, body: str) -> str:
        inner = body.replace("\n", "\n" + self.indent)
        return f"{PAGE_CONTAINER}\n{self.indent}{inner}\n</div>"

    def _card(self, buckets: SlotBuckets) -> str:
        ind = self.indent
        lines = ["<Card>"]
        for slot, placeholder, opening in _CARD_SECTIONS:
            members = buckets.of(slot)
            if not members:
                continue
            lines.append(f"{ind}{opening}")
            lines.extend(
                f"{ind * 2}{render_component(c)}" for c in members if c.name != placeholder
            )
            lines.append(f"{ind}</{placeholder}>")
        lines.append("</Card>")
        return "\n".join(lines)

    def _modal(self, buckets: SlotBuckets) -> str:
        ind = self.indent
        lines = ["<Modal>"]
        if buckets.trigger:
            lines.append(f"{ind}<Modal.Trigger>")
            lines.extend(
                f"{ind * 2}{render_component(c)}" for c in buckets.trigger if c.name != "Modal"
            )
            lines.append(f"{ind}</Modal.Trigger>")
        lines.append(f'{ind}<Modal.Content title="Modal">')
        lines.append(f"{ind * 2}{{/* Content here */}}")
        lines.append(f"{ind}</Modal.Content>")
        lines.append("</Modal>")
        return "\n".join(lines)

    def _flat(self, layout: LayoutConfig, buckets: SlotBuckets) -> str:
        # unslotted already holds every descriptor whose slot is missing or unknown,
        # so it is the union of both groups with each descriptor once
        lines = [f'<div className="{flex_class(layout)}">']
        lines.extend(f"{self.indent}{render_component(c)}" for c in buckets.unslotted)
        lines.append("</div>")
        return "\n".join(lines)


def generate_code(
    layout: LayoutConfig,
    components: list[ComponentDescriptor],
    context: ComposeContext = ComposeContext.SECTION,
) -> str:
    return MarkupRenderer().render(layout, components, context)
