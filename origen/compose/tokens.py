"""Token collector: which semantic tokens a set of components draws on."""

from typing import Iterable, Mapping, Union

from origen.types import ComponentDescriptor

TOKEN_MAP: dict[str, tuple[str, ...]] = {
    "Button": ("primary", "primary-foreground", "secondary", "destructive"),
    "Input": ("background", "border", "input", "ring", "foreground"),
    "Card": ("card", "card-foreground", "border"),
    "CardHeader": ("card",),
    "CardTitle": ("card-foreground",),
    "CardDescription": ("muted-foreground",),
    "CardContent": ("card",),
    "CardFooter": ("card", "border"),
    "Select": ("background", "border", "foreground"),
    "Modal": ("background", "foreground", "border"),
}


def _name_of(comp: Union[ComponentDescriptor, Mapping]) -> str:
    if isinstance(comp, Mapping):
        return comp.get("name", "")
    return comp.name


def collect_tokens(components: Iterable[Union[ComponentDescriptor, Mapping]]) -> list[str]:
    """Sorted, de-duplicated token names. Unknown component names add nothing."""
    found: set[str] = set()
    for comp in components:
        found.update(TOKEN_MAP.get(_name_of(comp), ()))
    return sorted(found)
