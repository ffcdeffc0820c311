"""Referee engine: rule matching and per-option aggregation.

Evaluation walks the rule table in definition order. A rule matches when
every dimension in its ``when`` clause equals the constraint value for
that dimension; dimensions it does not name are wildcards. Each matching
rule appends its statements to the options it impacts and leaves one
trace entry per impacted option.

Deterministic -- same constraints, same result. No I/O, no shared state.
"""

from __future__ import annotations

from collections.abc import Mapping

from referee.engine.labels import format_trigger_label
from referee.models.constraints import ConstraintSet, freeze
from referee.models.evaluation import (
    ApiOption,
    DecisionRule,
    EvaluationResult,
    OptionImpact,
    OptionResult,
    RuleTrace,
)
from referee.rules.table import RuleTable


def matches(rule: DecisionRule, constraints: ConstraintSet) -> bool:
    """True iff every dimension ``rule`` constrains equals the set's value."""
    for dimension, required in rule.when:
        if constraints.value_of(dimension) != required:
            return False
    return True


class _OptionAccumulator:
    """Mutable working state for one option during a single evaluation."""

    __slots__ = ("strengths", "weaknesses", "tradeoffs", "traces", "_traced_ids")

    def __init__(self) -> None:
        self.strengths: list[str] = []
        self.weaknesses: list[str] = []
        self.tradeoffs: list[str] = []
        self.traces: list[RuleTrace] = []
        self._traced_ids: set[str] = set()

    def add(
        self,
        rule: DecisionRule,
        impact: OptionImpact,
        trigger_label: str,
        affected: tuple[ApiOption, ...],
    ) -> None:
        self.strengths.extend(impact.strengths)
        self.weaknesses.extend(impact.weaknesses)
        self.tradeoffs.extend(impact.tradeoffs)

        categories = impact.contributed_categories()
        # One trace per rule per option, and only when something was added.
        if categories and rule.id not in self._traced_ids:
            self._traced_ids.add(rule.id)
            self.traces.append(
                RuleTrace(
                    rule_id=rule.id,
                    description=rule.description,
                    trigger_label=trigger_label,
                    affected_options=affected,
                    contributed_categories=categories,
                )
            )

    def build(self) -> OptionResult:
        return OptionResult(
            strengths=tuple(self.strengths),
            weaknesses=tuple(self.weaknesses),
            tradeoffs=tuple(self.tradeoffs),
            triggered_rules=tuple(self.traces),
        )


class RefereeEngine:
    """Evaluates constraint sets against an explicitly supplied rule table.

    The engine holds only a reference to an immutable RuleTable. Each call
    to ``evaluate`` reads that reference once, so swapping tables with
    ``with_rule_table`` never exposes a half-updated table to a caller.
    """

    def __init__(self, rule_table: RuleTable) -> None:
        self._rule_table = rule_table

    @property
    def rule_table(self) -> RuleTable:
        return self._rule_table

    def rule_count(self) -> int:
        """Number of rules every evaluation walks."""
        return self._rule_table.rule_count()

    def with_rule_table(self, rule_table: RuleTable) -> RefereeEngine:
        """Return a new engine over ``rule_table``; this engine is unchanged."""
        return RefereeEngine(rule_table)

    def evaluate(
        self, constraints: ConstraintSet | Mapping[str, object]
    ) -> EvaluationResult:
        """Compare REST, GraphQL and gRPC under ``constraints``.

        Args:
            constraints: A ConstraintSet, or a mapping keyed by dimension
                (``expertise``, ``scale``, ``timeToMarket``,
                ``riskTolerance``).

        Returns:
            A fresh EvaluationResult with statements in rule-table order.

        Raises:
            InvalidConstraintsError: if a dimension is missing or holds a
                value outside its enumeration. Nothing is evaluated.
        """
        frozen = freeze(constraints)
        table = self._rule_table

        accumulators: dict[ApiOption, _OptionAccumulator] = {
            option: _OptionAccumulator() for option in ApiOption
        }
        triggered: dict[str, None] = {}

        for rule in table:
            if not matches(rule, frozen):
                continue
            triggered[rule.id] = None

            affected = rule.impacts.affected_options()
            trigger_label = format_trigger_label(rule.when)
            for option in affected:
                impact = rule.impacts.for_option(option)
                if impact is not None:
                    accumulators[option].add(rule, impact, trigger_label, affected)

        return EvaluationResult(
            rest=accumulators[ApiOption.REST].build(),
            graphql=accumulators[ApiOption.GRAPHQL].build(),
            grpc=accumulators[ApiOption.GRPC].build(),
            total_rules_evaluated=table.rule_count(),
            total_rules_triggered=len(triggered),
            triggered_rule_ids=tuple(triggered),
        )
