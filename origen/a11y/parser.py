"""Regex extraction of component descriptors from JSX-like markup.

Two independent passes: self-closing tags first, then paired tags whose body
is plain text. A tag matched by both passes is reported twice. Nesting is not
understood; a paired tag whose body contains another tag is not matched.
"""

import math
import re
from typing import Any

from origen.types import ComponentDescriptor

SELF_CLOSING_RE = re.compile(r"<(\w+(?:\.\w+)?)\s*([^>]*?)/>")
PAIRED_RE = re.compile(r"<(\w+(?:\.\w+)?)\s*([^>]*)>([^<]*)</\1>")

STRING_PROP_RE = re.compile(r'(\w+(?:-\w+)*)="([^"]*)"')
EXPR_PROP_RE = re.compile(r"(\w+(?:-\w+)*)=\{([^}]+)\}")


def _expr_value(raw: str) -> Any:
    value = raw.strip()
    if value == "true":
        return True
    if value == "false":
        return False
    try:
        return int(value)
    except ValueError:
        pass
    try:
        number = float(value)
    except ValueError:
        return value
    return value if math.isnan(number) else number


def parse_props(source: str) -> dict[str, Any]:
    """``key="v"`` pairs as strings, then ``key={expr}`` pairs as bool/number/raw text."""
    props: dict[str, Any] = {}
    for key, value in STRING_PROP_RE.findall(source):
        props[key] = value
    for key, raw in EXPR_PROP_RE.findall(source):
        props[key] = _expr_value(raw)
    return props


def parse_markup(code: str) -> list[ComponentDescriptor]:
    components = [
        ComponentDescriptor(name=m.group(1), props=parse_props(m.group(2)))
        for m in SELF_CLOSING_RE.finditer(code)
    ]
    for m in PAIRED_RE.finditer(code):
        children = m.group(3).strip()
        components.append(
            ComponentDescriptor(name=m.group(1), props=parse_props(m.group(2)), children=children or None)
        )
    return components
