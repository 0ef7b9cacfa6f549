"""Accessibility rule engine: descriptors or markup → scored validation result."""

import logging
from typing import Iterable, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from origen.a11y.parser import parse_markup
from origen.a11y.rules import PRIMARY_RULES, RULES, Rule
from origen.exceptions import InvalidOptionError, MissingValidationInputError
from origen.types import A11yContext, AccessibilityIssue, ComponentDescriptor, Severity, ValidationResult
from origen.utils import coerce_option

logger = logging.getLogger(__name__)

SEVERITY_WEIGHTS: dict[Severity, int] = {
    Severity.ERROR: 25,
    Severity.WARNING: 10,
    Severity.INFO: 2,
}

ComponentInput = Union[ComponentDescriptor, Mapping]


def calculate_score(issues: Iterable[AccessibilityIssue]) -> int:
    """100 minus the severity weight of every issue, floored at 0."""
    return max(0, 100 - sum(SEVERITY_WEIGHTS[i.severity] for i in issues))


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}{'s' if n > 1 else ''}"


def generate_summary(issues: Sequence[AccessibilityIssue], score: int) -> str:
    if not issues:
        return "All accessibility checks passed. Score: 100/100"
    errors = sum(1 for i in issues if i.severity is Severity.ERROR)
    warnings = sum(1 for i in issues if i.severity is Severity.WARNING)
    parts = []
    if errors:
        parts.append(_count(errors, "error"))
    if warnings:
        parts.append(_count(warnings, "warning"))
    return f"Found {' and '.join(parts)}. Score: {score}/100"


def passed_rules(
    components: Iterable[ComponentDescriptor],
    issues: Iterable[AccessibilityIssue],
) -> list[str]:
    """Primary rule ids that held, once each, in order of the first component checked.

    A rule counts as failed if it fired for any component of the input.
    """
    failed = {i.rule for i in issues}
    passed: list[str] = []
    for comp in components:
        rule_id = PRIMARY_RULES.get(comp.name)
        if rule_id and rule_id not in failed and rule_id not in passed:
            passed.append(rule_id)
    return passed


class AccessibilityEngine:
    """Runs the per-component rule table over a component list."""

    def __init__(self, rules: Mapping[str, tuple[Rule, ...]] = RULES):
        self.rules = rules

    def check(self, comp: ComponentDescriptor) -> list[AccessibilityIssue]:
        return [rule.issue() for rule in self.rules.get(comp.name, ()) if rule.violated(comp)]

    def validate(
        self,
        code: Optional[str] = None,
        components: Optional[Sequence[ComponentInput]] = None,
        context: Union[A11yContext, str] = A11yContext.GENERAL,
    ) -> ValidationResult:
        """Validate ``components`` if given, otherwise the components parsed from ``code``.

        ``context`` is accepted as a hint and logged; it does not change the rules.

        Raises:
            MissingValidationInputError: neither code nor components supplied.
            InvalidOptionError: unknown context or a malformed component descriptor.
        """
        if not code and components is None:
            raise MissingValidationInputError("Either code or components must be provided")
        context = coerce_option(A11yContext, context, "context", default=A11yContext.GENERAL)

        if components is not None:
            try:
                comps = [ComponentDescriptor.model_validate(c) for c in components]
            except ValidationError as exc:
                bad = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
                raise InvalidOptionError(f"Invalid component descriptor: {bad}", option="components") from exc
        else:
            comps = parse_markup(code)

        issues = [issue for comp in comps for issue in self.check(comp)]
        score = calculate_score(issues)
        valid = not any(i.severity is Severity.ERROR for i in issues)

        logger.debug(
            f"a11y [{context.value}]: {len(comps)} components, {len(issues)} issues, score {score}"
        )
        return ValidationResult(
            valid=valid,
            score=score,
            issues=issues,
            summary=generate_summary(issues, score),
            passed_rules=passed_rules(comps, issues),
        )


_default_engine = AccessibilityEngine()


def validate_accessibility(
    code: Optional[str] = None,
    components: Optional[Sequence[ComponentInput]] = None,
    context: Union[A11yContext, str] = A11yContext.GENERAL,
) -> ValidationResult:
    return _default_engine.validate(code=code, components=components, context=context)
