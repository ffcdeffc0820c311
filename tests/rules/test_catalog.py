"""Tests for the baseline 26-rule catalogue."""

from __future__ import annotations

from collections import Counter

from referee.engine.labels import format_trigger_label
from referee.models.constraints import ConstraintDimension
from referee.rules.catalog import DEFAULT_RULES, build_default_rule_table
from referee.rules.table import RuleTable


class TestCatalogueShape:
    """Size, grouping and ordering of the authored rules."""

    def test_twenty_six_rules(self, rule_table: RuleTable) -> None:
        assert rule_table.rule_count() == 26
        assert len(DEFAULT_RULES) == 26

    def test_ids_unique(self) -> None:
        ids = [rule.id for rule in DEFAULT_RULES]
        assert len(set(ids)) == len(ids)

    def test_group_sizes(self) -> None:
        prefixes = Counter(rule.id.split("_")[0] for rule in DEFAULT_RULES)
        assert prefixes == {
            "EXP": 7,
            "SCALE": 7,
            "TIME": 4,
            "RISK": 4,
            "COMPOUND": 4,
        }

    def test_first_and_last(self, rule_table: RuleTable) -> None:
        ids = rule_table.ids()
        assert ids[0] == "EXP_BEGINNER_REST"
        assert ids[-1] == "COMPOUND_BEGINNER_FAST"

    def test_compound_rules_are_two_dimensional(self) -> None:
        for rule in DEFAULT_RULES:
            expected = 2 if rule.id.startswith("COMPOUND_") else 1
            assert rule.specificity == expected, rule.id

    def test_large_beginner_conditions(self, rule_table: RuleTable) -> None:
        rule = rule_table.get("COMPOUND_LARGE_BEGINNER")
        assert rule.conditions == {
            ConstraintDimension.SCALE: "large",
            ConstraintDimension.EXPERTISE: "beginner",
        }

    def test_every_rule_impacts_some_option(self) -> None:
        for rule in DEFAULT_RULES:
            assert rule.impacts.affected_options(), rule.id

    def test_every_rule_contributes_statements(self) -> None:
        for rule in DEFAULT_RULES:
            contributed = [
                rule.impacts.for_option(opt).contributed_categories()
                for opt in rule.impacts.affected_options()
            ]
            assert all(contributed), rule.id

    def test_every_trigger_label_formats(self) -> None:
        for rule in DEFAULT_RULES:
            assert format_trigger_label(rule.when)

    def test_build_returns_fresh_table_over_same_rules(self) -> None:
        a = build_default_rule_table()
        b = build_default_rule_table()
        assert a is not b
        assert list(a) == list(b)
