"""Static accessibility checks over component descriptors or markup."""

from origen.a11y.engine import (
    AccessibilityEngine,
    calculate_score,
    generate_summary,
    passed_rules,
    validate_accessibility,
)
from origen.a11y.parser import parse_markup, parse_props
from origen.a11y.rules import PRIMARY_RULES, RULES, Rule

__all__ = [
    "AccessibilityEngine", "calculate_score", "generate_summary", "passed_rules",
    "validate_accessibility", "parse_markup", "parse_props",
    "PRIMARY_RULES", "RULES", "Rule",
]
