"""Tests for rule and result models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from referee.models.constraints import ConstraintDimension
from referee.models.evaluation import (
    ApiOption,
    DecisionRule,
    EvaluationResult,
    ImpactCategory,
    OptionImpact,
    OptionResult,
    RuleImpacts,
)


class TestApiOption:
    """Display labels for the three styles."""

    def test_labels(self) -> None:
        assert ApiOption.REST.label == "REST"
        assert ApiOption.GRAPHQL.label == "GraphQL"
        assert ApiOption.GRPC.label == "gRPC"

    def test_order(self) -> None:
        assert list(ApiOption) == [ApiOption.REST, ApiOption.GRAPHQL, ApiOption.GRPC]


class TestOptionImpact:
    """contributed_categories: one entry per non-empty list."""

    def test_no_categories_when_empty(self) -> None:
        assert OptionImpact().contributed_categories() == ()

    def test_all_categories_in_fixed_order(self) -> None:
        impact = OptionImpact(tradeoffs=["t"], strengths=["s"], weaknesses=["w"])
        assert impact.contributed_categories() == (
            ImpactCategory.STRENGTH,
            ImpactCategory.WEAKNESS,
            ImpactCategory.TRADEOFF,
        )

    def test_tradeoff_label(self) -> None:
        assert ImpactCategory.TRADEOFF.value == "trade-off"

    def test_lists_become_tuples(self) -> None:
        impact = OptionImpact(strengths=["a", "b"])
        assert impact.strengths == ("a", "b")


class TestRuleImpacts:
    """affected_options: options with an impact object, in fixed order."""

    def test_order_is_independent_of_construction(self) -> None:
        impacts = RuleImpacts(grpc=OptionImpact(strengths=["g"]), rest=OptionImpact(weaknesses=["r"]))
        assert impacts.affected_options() == (ApiOption.REST, ApiOption.GRPC)

    def test_empty_impact_still_counts_as_affected(self) -> None:
        impacts = RuleImpacts(graphql=OptionImpact())
        assert impacts.affected_options() == (ApiOption.GRAPHQL,)

    def test_for_option(self) -> None:
        impact = OptionImpact(strengths=["x"])
        impacts = RuleImpacts(rest=impact)
        assert impacts.for_option(ApiOption.REST) == impact
        assert impacts.for_option(ApiOption.GRPC) is None


class TestDecisionRule:
    """Authored rules: ordered conditions, checked against the domain."""

    def test_when_keeps_authored_order(self) -> None:
        rule = DecisionRule(
            id="R1",
            description="d",
            when={"scale": "large", "expertise": "beginner"},
        )
        assert [dim for dim, _ in rule.when] == [
            ConstraintDimension.SCALE,
            ConstraintDimension.EXPERTISE,
        ]
        assert rule.conditions == {
            ConstraintDimension.SCALE: "large",
            ConstraintDimension.EXPERTISE: "beginner",
        }
        assert rule.specificity == 2

    def test_empty_when(self) -> None:
        rule = DecisionRule(id="ANY", description="matches everything")
        assert rule.when == ()
        assert rule.specificity == 0

    def test_unknown_dimension_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DecisionRule(id="R", description="d", when={"budget": "tight"})

    def test_value_outside_domain_rejected(self) -> None:
        with pytest.raises(ValidationError, match="huge"):
            DecisionRule(id="R", description="d", when={"scale": "huge"})

    def test_repeated_dimension_rejected(self) -> None:
        with pytest.raises(ValidationError, match="listed twice"):
            DecisionRule(
                id="R",
                description="d",
                when=(("scale", "large"), ("scale", "small")),
            )

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DecisionRule(id="", description="d")

    def test_is_frozen(self) -> None:
        rule = DecisionRule(id="R", description="d")
        with pytest.raises(ValidationError):
            rule.description = "changed"  # type: ignore[misc]

    def test_serializes_when_as_mapping(self) -> None:
        rule = DecisionRule(
            id="R",
            description="d",
            when={"timeToMarket": "fast", "riskTolerance": "low"},
            impacts=RuleImpacts(rest=OptionImpact(strengths=["s"])),
        )
        data = rule.model_dump(mode="json")
        assert data["when"] == {"timeToMarket": "fast", "riskTolerance": "low"}
        assert data["impacts"]["rest"]["strengths"] == ["s"]
        assert data["impacts"]["grpc"] is None


class TestEvaluationResult:
    """Result accessors."""

    def test_option_accessor(self) -> None:
        rest = OptionResult(strengths=["s"])
        result = EvaluationResult(
            rest=rest,
            graphql=OptionResult(),
            grpc=OptionResult(),
            total_rules_evaluated=1,
            total_rules_triggered=1,
        )
        assert result.option(ApiOption.REST) is rest
        assert result.option(ApiOption.GRPC).is_empty
        assert not rest.is_empty

    def test_negative_counts_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EvaluationResult(
                rest=OptionResult(),
                graphql=OptionResult(),
                grpc=OptionResult(),
                total_rules_evaluated=-1,
                total_rules_triggered=0,
            )
