"""Ordered, immutable collection of decision rules."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from referee.models.evaluation import DecisionRule

logger = logging.getLogger(__name__)


class RuleTable:
    """A fixed, ordered sequence of DecisionRules.

    Iteration order is the authored order and is part of the observable
    contract: matching rules are reported in exactly this order.
    """

    __slots__ = ("_rules", "_by_id")

    def __init__(self, rules: Iterable[DecisionRule]) -> None:
        ordered = tuple(rules)
        by_id: dict[str, DecisionRule] = {}
        for rule in ordered:
            if rule.id in by_id:
                msg = f"Duplicate rule id '{rule.id}' in rule table"
                raise ValueError(msg)
            by_id[rule.id] = rule
        self._rules = ordered
        self._by_id = by_id
        logger.debug("Rule table built with %d rules", len(ordered))

    def __iter__(self) -> Iterator[DecisionRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({len(self._rules)} rules)"

    def rule_count(self) -> int:
        """Fixed number of rules in the table."""
        return len(self._rules)

    def get(self, rule_id: str) -> DecisionRule:
        """Look up a rule by id.

        Raises:
            KeyError: if no rule has ``rule_id``.
        """
        try:
            return self._by_id[rule_id]
        except KeyError:
            msg = f"Rule '{rule_id}' not found"
            raise KeyError(msg) from None

    def ids(self) -> tuple[str, ...]:
        """Rule ids in table order."""
        return tuple(rule.id for rule in self._rules)
