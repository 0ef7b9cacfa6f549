"""Natural-language composition: intent matching, slot assembly, token collection."""

from origen.compose.composer import Composer, compose_interface
from origen.compose.intent import INTENT_PATTERNS, IntentMatcher, extract_form_fields, match_intent
from origen.compose.slots import MarkupRenderer, generate_code, group_by_slot, render_component
from origen.compose.tokens import TOKEN_MAP, collect_tokens

__all__ = [
    "Composer", "compose_interface",
    "INTENT_PATTERNS", "IntentMatcher", "extract_form_fields", "match_intent",
    "MarkupRenderer", "generate_code", "group_by_slot", "render_component",
    "TOKEN_MAP", "collect_tokens",
]
