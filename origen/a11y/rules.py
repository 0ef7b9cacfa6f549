"""Static accessibility rules, keyed by the component name they apply to.

Every applicable rule runs for each component; a component can raise several
issues. Names not in ``RULES`` are never checked.
"""

from dataclasses import dataclass
from typing import Callable

from origen.types import AccessibilityIssue, ComponentDescriptor, Severity

REDUNDANT_ALT_PHRASES = ("image of", "picture of", "photo of")


@dataclass(frozen=True)
class Rule:
    id: str
    severity: Severity
    wcag: str
    component: str
    message: str
    suggestion: str
    violated: Callable[[ComponentDescriptor], bool]

    def issue(self) -> AccessibilityIssue:
        return AccessibilityIssue(
            severity=self.severity,
            rule=self.id,
            wcag=self.wcag,
            component=self.component,
            message=self.message,
            suggestion=self.suggestion,
        )


def _has(comp: ComponentDescriptor, *keys: str) -> bool:
    return any(comp.props.get(k) for k in keys)


def _input_unlabelled(comp: ComponentDescriptor) -> bool:
    return not _has(comp, "aria-label", "aria-labelledby", "id")


def _placeholder_as_label(comp: ComponentDescriptor) -> bool:
    # an id means an external <Label> may exist, but nothing proves it does
    return (
        _has(comp, "placeholder")
        and not _has(comp, "aria-label", "aria-labelledby")
        and _has(comp, "id")
    )


def _button_unnamed(comp: ComponentDescriptor) -> bool:
    has_text = isinstance(comp.children, str) and bool(comp.children.strip())
    return not _has(comp, "aria-label") and not has_text


def _modal_unlabelled(comp: ComponentDescriptor) -> bool:
    return not _has(comp, "title", "aria-label", "aria-labelledby")


def _modal_undescribed(comp: ComponentDescriptor) -> bool:
    return not _modal_unlabelled(comp) and not _has(comp, "description", "aria-describedby")


def _img_missing_alt(comp: ComponentDescriptor) -> bool:
    # alt="" marks a decorative image and is valid
    return "alt" not in comp.props


def _img_redundant_alt(comp: ComponentDescriptor) -> bool:
    alt = comp.props.get("alt")
    if not isinstance(alt, str) or not alt:
        return False
    lowered = alt.lower()
    return any(phrase in lowered for phrase in REDUNDANT_ALT_PHRASES)


INPUT_NEEDS_LABEL = Rule(
    id="input-needs-label",
    severity=Severity.ERROR,
    wcag="1.3.1, 4.1.2",
    component="Input",
    message="Input is missing an accessible label",
    suggestion="Add aria-label, aria-labelledby, or associate with a Label using id",
    violated=_input_unlabelled,
)

PLACEHOLDER_NOT_LABEL = Rule(
    id="placeholder-not-label",
    severity=Severity.WARNING,
    wcag="3.3.2",
    component="Input",
    message="Placeholder used as only visible indicator",
    suggestion="Add a visible label; placeholder disappears when user types",
    violated=_placeholder_as_label,
)

BUTTON_NEEDS_NAME = Rule(
    id="button-needs-name",
    severity=Severity.ERROR,
    wcag="4.1.2",
    component="Button",
    message="Button has no accessible name",
    suggestion="Add text content or aria-label to the Button",
    violated=_button_unnamed,
)

MODAL_NEEDS_LABEL = Rule(
    id="modal-needs-label",
    severity=Severity.ERROR,
    wcag="4.1.2",
    component="Modal.Content",
    message="Modal dialog is missing an accessible label",
    suggestion="Add title prop or aria-label/aria-labelledby to Modal.Content",
    violated=_modal_unlabelled,
)

MODAL_NEEDS_DESCRIPTION = Rule(
    id="modal-needs-description",
    severity=Severity.WARNING,
    wcag="4.1.2",
    component="Modal.Content",
    message="Modal dialog has no description for context",
    suggestion="Add description prop or aria-describedby for additional context",
    violated=_modal_undescribed,
)

SELECT_NEEDS_LABEL = Rule(
    id="select-needs-label",
    severity=Severity.ERROR,
    wcag="1.3.1, 4.1.2",
    component="Select",
    message="Select is missing an accessible label",
    suggestion="Add aria-label or associate with a Label element",
    violated=_input_unlabelled,
)

IMG_NEEDS_ALT = Rule(
    id="img-needs-alt",
    severity=Severity.ERROR,
    wcag="1.1.1",
    component="img",
    message="Image is missing alt text",
    suggestion="Add alt attribute with descriptive text, or alt='' for decorative images",
    violated=_img_missing_alt,
)

REDUNDANT_ALT = Rule(
    id="redundant-alt",
    severity=Severity.WARNING,
    wcag="1.1.1",
    component="img",
    message="Alt text contains redundant words",
    suggestion="Remove 'image of' prefix; screen readers announce images",
    violated=_img_redundant_alt,
)

RULES: dict[str, tuple[Rule, ...]] = {
    "Input": (INPUT_NEEDS_LABEL, PLACEHOLDER_NOT_LABEL),
    "Button": (BUTTON_NEEDS_NAME,),
    "Modal.Content": (MODAL_NEEDS_LABEL, MODAL_NEEDS_DESCRIPTION),
    "Select": (SELECT_NEEDS_LABEL,),
    "img": (IMG_NEEDS_ALT, REDUNDANT_ALT),
}

# the error-level rule reported in passedRules for each checked component type
PRIMARY_RULES: dict[str, str] = {
    "Button": BUTTON_NEEDS_NAME.id,
    "Input": INPUT_NEEDS_LABEL.id,
    "Modal.Content": MODAL_NEEDS_LABEL.id,
    "Select": SELECT_NEEDS_LABEL.id,
    "img": IMG_NEEDS_ALT.id,
}
