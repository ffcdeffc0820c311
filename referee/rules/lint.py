"""Review-time checks for the rule authoring discipline.

Rules are meant to describe conditions, not to recommend. These checks
flag directive vocabulary, score-like wording, and options that the table
as a whole never criticises (or never credits). They run in tests and in
``scripts/lint_rules.py``; the engine never calls them.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from referee.engine.evaluator import RefereeEngine
from referee.models.constraints import all_constraint_sets
from referee.models.evaluation import ApiOption, DecisionRule
from referee.rules.table import RuleTable

DIRECTIVE_TERMS: tuple[str, ...] = (
    "should",
    "best",
    "optimal",
    "always",
    "never",
    "must",
    "choose",
    "prefer",
    "recommend",
)

_DIRECTIVE_RE = re.compile(
    r"\b(" + "|".join(DIRECTIVE_TERMS) + r")\b", re.IGNORECASE
)
_SCORE_RE = re.compile(
    r"\b(score[sd]?|rank(?:ed|ing|s)?|rating|weight(?:ed|ing|s)?)\b"
    r"|\d+(?:\.\d+)?\s*%"
    r"|\b\d+(?:\.\d+)?\s*/\s*(?:5|10|100)\b"
    r"|\b\d+\s+out\s+of\s+\d+\b",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class LintFinding:
    """A single authoring problem in the rule table."""

    rule_id: str | None
    check: str
    message: str


def _texts(rule: DecisionRule) -> Iterator[tuple[str, str]]:
    """Yield (location, text) for every authored string in ``rule``."""
    yield "description", rule.description
    for option in rule.impacts.affected_options():
        impact = rule.impacts.for_option(option)
        if impact is None:
            continue
        for field in ("strengths", "weaknesses", "tradeoffs"):
            for text in getattr(impact, field):
                yield f"{option.value}.{field}", text


def find_directive_language(table: RuleTable) -> list[LintFinding]:
    """Flag prescriptive words ("should", "best", ...) in any rule text."""
    findings: list[LintFinding] = []
    for rule in table:
        for location, text in _texts(rule):
            match = _DIRECTIVE_RE.search(text)
            if match:
                findings.append(
                    LintFinding(
                        rule_id=rule.id,
                        check="directive-language",
                        message=f"{location}: '{match.group(0)}' in {text!r}",
                    )
                )
    return findings


def find_numeric_scores(table: RuleTable) -> list[LintFinding]:
    """Flag score, rank or weight vocabulary and rating-like numbers."""
    findings: list[LintFinding] = []
    for rule in table:
        for location, text in _texts(rule):
            match = _SCORE_RE.search(text)
            if match:
                findings.append(
                    LintFinding(
                        rule_id=rule.id,
                        check="numeric-score",
                        message=f"{location}: '{match.group(0)}' in {text!r}",
                    )
                )
    return findings


def find_unopposed_options(engine: RefereeEngine) -> list[LintFinding]:
    """Flag options never given a weakness, or never a strength.

    Walks every valid constraint combination. An option that collects
    weaknesses nowhere in the space would be systematically favored by the
    table; one that never collects a strength, systematically disfavored.
    """
    has_strength: set[ApiOption] = set()
    has_weakness: set[ApiOption] = set()
    for constraints in all_constraint_sets():
        result = engine.evaluate(constraints)
        for option in ApiOption:
            option_result = result.option(option)
            if option_result.strengths:
                has_strength.add(option)
            if option_result.weaknesses:
                has_weakness.add(option)

    findings: list[LintFinding] = []
    for option in ApiOption:
        if option not in has_weakness:
            findings.append(
                LintFinding(
                    rule_id=None,
                    check="neutrality",
                    message=f"{option.label} has no weaknesses for any constraint set",
                )
            )
        if option not in has_strength:
            findings.append(
                LintFinding(
                    rule_id=None,
                    check="neutrality",
                    message=f"{option.label} has no strengths for any constraint set",
                )
            )
    return findings


def lint_rule_table(engine: RefereeEngine) -> list[LintFinding]:
    """Run every check against the engine's rule table."""
    table = engine.rule_table
    return [
        *find_directive_language(table),
        *find_numeric_scores(table),
        *find_unopposed_options(engine),
    ]
