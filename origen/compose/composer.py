"""Composition orchestrator: intent text → layout, components, markup, tokens."""

import logging
from typing import Union

from origen.compose.intent import IntentMatcher, extract_form_fields, is_form_pattern
from origen.compose.slots import MarkupRenderer
from origen.compose.tokens import collect_tokens
from origen.exceptions import EmptyIntentError, InvalidOptionError
from origen.types import ComponentDescriptor, ComposeContext, ComposeResult, IntentPattern, LayoutConfig
from origen.utils import coerce_option

logger = logging.getLogger(__name__)

NO_MATCH_CODE = "// No matching pattern found for this intent"
NO_MATCH_SUGGESTIONS = (
    "login form",
    "user profile",
    "contact form",
    "navigation header",
    "settings page",
)


def field_input(field: str) -> ComponentDescriptor:
    """Input descriptor for one detected field kind."""
    return ComponentDescriptor(
        name="Input",
        props={
            "type": "text" if field == "textarea" else field,
            "placeholder": field[:1].upper() + field[1:],
        },
        slot="content",
    )


class Composer:
    """Runs matcher → field injection → renderer → token collector.

    Each call works on a fresh copy of the matched pattern's components, so
    the pattern table is never mutated.
    """

    def __init__(self, matcher: IntentMatcher = None, renderer: MarkupRenderer = None):
        self.matcher = matcher or IntentMatcher()
        self.renderer = renderer or MarkupRenderer()

    def build_component_list(self, pattern: IntentPattern, intent: str) -> list[ComponentDescriptor]:
        components = [c.model_copy(deep=True) for c in pattern.components]
        if not is_form_pattern(pattern):
            return components

        fields = extract_form_fields(intent)
        if not fields:
            return components
        logger.debug(f"form pattern {pattern.name!r}: injecting fields {fields}")

        inputs = [field_input(f) for f in fields]
        anchor = next(
            (i for i, c in enumerate(components) if c.name == "CardContent" and c.slot == "content"),
            None,
        )
        # without an anchor, assume the last two entries are footer + action
        at = anchor + 1 if anchor is not None else len(components) - 2
        components[at:at] = inputs
        return components

    def compose(
        self,
        intent: str,
        context: Union[ComposeContext, str] = ComposeContext.SECTION,
    ) -> ComposeResult:
        """Compose a UI skeleton for ``intent``.

        A valid intent that matches nothing is a soft outcome: the result
        carries empty components and a list of suggested intents.

        Raises:
            EmptyIntentError: intent is empty or whitespace only.
            InvalidOptionError: intent is not a string, or context is not page, section or component.
        """
        if intent is not None and not isinstance(intent, str):
            raise InvalidOptionError(f"Intent must be a string, got {type(intent).__name__}", option="intent")
        if not intent or not intent.strip():
            raise EmptyIntentError("Intent must be a non-empty string")
        context = coerce_option(ComposeContext, context, "context", default=ComposeContext.SECTION)

        pattern = self.matcher.match(intent)
        if pattern is None:
            logger.info(f"no pattern matched intent {intent!r}")
            return ComposeResult(
                layout=LayoutConfig(type="stack", direction="column"),
                components=[],
                code=NO_MATCH_CODE,
                tokens=[],
                suggestions=list(NO_MATCH_SUGGESTIONS),
            )

        components = self.build_component_list(pattern, intent)
        code = self.renderer.render(pattern.layout, components, context)
        return ComposeResult(
            layout=pattern.layout.model_copy(),
            components=components,
            code=code,
            tokens=collect_tokens(components),
        )


_default_composer = Composer()


def compose_interface(
    intent: str,
    context: Union[ComposeContext, str] = ComposeContext.SECTION,
) -> ComposeResult:
    return _default_composer.compose(intent, context)
