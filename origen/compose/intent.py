"""Intent matching: free text → one predefined component skeleton.

Pure substring scoring, no NLU. Every keyword of every pattern is tested
against the lower-cased intent; the pattern with the most hits wins, the
earliest-declared pattern wins ties, and zero hits means no match.
"""

import logging
import re
from typing import Iterable, Optional

from origen.types import ComponentDescriptor, IntentPattern, LayoutConfig

logger = logging.getLogger(__name__)


def _c(name: str, props: dict = None, slot: str = None, children: str = None) -> ComponentDescriptor:
    return ComponentDescriptor(name=name, props=props or {}, slot=slot, children=children)


_STACK = LayoutConfig(type="stack", direction="column", gap="4")

# ── Intent patterns (declaration order is the tie-break order) ───────────────

INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    IntentPattern(
        name="login",
        keywords=("login", "signin", "sign in", "log in"),
        components=(
            _c("Card", slot="wrapper"),
            _c("CardHeader", slot="header"),
            _c("CardTitle", slot="header", children="Sign In"),
            _c("CardContent", slot="content"),
            _c("Input", {"type": "email", "placeholder": "Email"}, slot="content"),
            _c("Input", {"type": "password", "placeholder": "Password"}, slot="content"),
            _c("CardFooter", slot="footer"),
            _c("Button", {"variant": "default"}, slot="footer", children="Sign In"),
        ),
        layout=_STACK,
    ),
    IntentPattern(
        name="profile",
        keywords=("profile", "user card", "user profile", "account"),
        components=(
            _c("Card", slot="wrapper"),
            _c("CardHeader", slot="header"),
            _c("CardTitle", slot="header", children="User Profile"),
            _c("CardDescription", slot="header", children="Manage your account"),
            _c("CardContent", slot="content"),
            _c("Button", {"variant": "secondary"}, slot="content", children="Edit Profile"),
        ),
        layout=_STACK,
    ),
    IntentPattern(
        name="form",
        keywords=("form", "input form", "data entry"),
        components=(
            _c("Card", slot="wrapper"),
            _c("CardHeader", slot="header"),
            _c("CardTitle", slot="header", children="Form"),
            _c("CardContent", slot="content"),
            _c("CardFooter", slot="footer"),
            _c("Button", {"variant": "default"}, slot="footer", children="Submit"),
        ),
        layout=_STACK,
    ),
    IntentPattern(
        name="navigation",
        keywords=("navigation", "header", "navbar", "nav"),
        components=(
            _c("Button", {"variant": "ghost"}, children="Home"),
            _c("Button", {"variant": "ghost"}, children="About"),
            _c("Button", {"variant": "ghost"}, children="Contact"),
        ),
        layout=LayoutConfig(type="flex", direction="row", gap="2"),
    ),
    IntentPattern(
        name="settings",
        keywords=("settings", "preferences", "options"),
        components=(
            _c("Card", slot="wrapper"),
            _c("CardHeader", slot="header"),
            _c("CardTitle", slot="header", children="Settings"),
            _c("CardContent", slot="content"),
            _c("Select", {"placeholder": "Choose option"}, slot="content"),
            _c("CardFooter", slot="footer"),
            _c("Button", {"variant": "default"}, slot="footer", children="Save"),
        ),
        layout=_STACK,
    ),
    IntentPattern(
        name="modal",
        keywords=("modal", "dialog", "popup", "confirm"),
        components=(
            _c("Modal", slot="wrapper"),
            _c("Button", slot="trigger", children="Open"),
        ),
        layout=_STACK,
    ),
)

# Patterns carrying any of these keywords get dynamic fields injected.
FORM_KEYWORDS = frozenset({"form", "data entry"})

# ── Field hints (checked independently, in this order) ───────────────────────

_FIELD_CHECKS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"email", re.IGNORECASE), "email"),
    (re.compile(r"password", re.IGNORECASE), "password"),
    (re.compile(r"name", re.IGNORECASE), "text"),
    (re.compile(r"phone", re.IGNORECASE), "tel"),
    (re.compile(r"message|comment", re.IGNORECASE), "textarea"),
    (re.compile(r"date", re.IGNORECASE), "date"),
)


def extract_form_fields(intent: str) -> list[str]:
    """Field kinds hinted at by ``intent``, in check order (not word order)."""
    return [field for pattern, field in _FIELD_CHECKS if pattern.search(intent)]


def is_form_pattern(pattern: IntentPattern) -> bool:
    return any(kw in FORM_KEYWORDS for kw in pattern.keywords)


class IntentMatcher:
    """Greedy keyword scorer over a fixed pattern table."""

    def __init__(self, patterns: Iterable[IntentPattern] = INTENT_PATTERNS):
        self._patterns = tuple(patterns)

    @property
    def patterns(self) -> tuple[IntentPattern, ...]:
        return self._patterns

    def score(self, intent: str) -> list[tuple[IntentPattern, int]]:
        """Keyword hit count per pattern, in declaration order."""
        normalized = intent.lower()
        return [
            (pattern, sum(1 for kw in pattern.keywords if kw in normalized))
            for pattern in self._patterns
        ]

    def match(self, intent: str) -> Optional[IntentPattern]:
        best: Optional[IntentPattern] = None
        best_score = 0
        for pattern, score in self.score(intent):
            # strict > keeps the earliest pattern on a tie
            if score > best_score:
                best, best_score = pattern, score
        if best is not None:
            logger.debug(f"intent {intent!r} → pattern {best.name!r} ({best_score} keyword hits)")
        return best


_default_matcher = IntentMatcher()


def match_intent(intent: str) -> Optional[IntentPattern]:
    """Best pattern for ``intent`` using the built-in table, or None."""
    return _default_matcher.match(intent)
