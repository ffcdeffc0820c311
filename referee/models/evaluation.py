"""Rule and result models for the referee engine.

DecisionRule and its impacts are authored once and frozen. RuleTrace,
OptionResult and EvaluationResult are produced fresh by every evaluation
and are frozen as well, so a result can be shared without copying.

Deterministic -- impacts are text statements, never scores.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum

from pydantic import Field, field_serializer, field_validator, model_validator

from referee.models.common import RefereeBase
from referee.models.constraints import DIMENSION_VALUES, ConstraintDimension

# ---------------------------------------------------------------------------
# Enums (all StrEnum)
# ---------------------------------------------------------------------------


class ApiOption(StrEnum):
    """The three API architecture styles under comparison."""

    REST = "rest"
    GRAPHQL = "graphql"
    GRPC = "grpc"

    @property
    def label(self) -> str:
        """Display name of the style."""
        return _OPTION_LABELS[self]


_OPTION_LABELS: dict[ApiOption, str] = {
    ApiOption.REST: "REST",
    ApiOption.GRAPHQL: "GraphQL",
    ApiOption.GRPC: "gRPC",
}


class ImpactCategory(StrEnum):
    """Polarity of an impact statement."""

    STRENGTH = "strength"
    WEAKNESS = "weakness"
    TRADEOFF = "trade-off"


# ---------------------------------------------------------------------------
# Authored rule data
# ---------------------------------------------------------------------------


class OptionImpact(RefereeBase, frozen=True):
    """Statements a single rule contributes to one API option."""

    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    tradeoffs: tuple[str, ...] = ()

    def contributed_categories(self) -> tuple[ImpactCategory, ...]:
        """Categories with at least one statement, each listed once."""
        categories: list[ImpactCategory] = []
        if self.strengths:
            categories.append(ImpactCategory.STRENGTH)
        if self.weaknesses:
            categories.append(ImpactCategory.WEAKNESS)
        if self.tradeoffs:
            categories.append(ImpactCategory.TRADEOFF)
        return tuple(categories)


class RuleImpacts(RefereeBase, frozen=True):
    """Per-option impacts of a rule; ``None`` means the option is untouched."""

    rest: OptionImpact | None = None
    graphql: OptionImpact | None = None
    grpc: OptionImpact | None = None

    def for_option(self, option: ApiOption) -> OptionImpact | None:
        return getattr(self, option.value)

    def affected_options(self) -> tuple[ApiOption, ...]:
        """Options this rule defines an impact for, in REST/GraphQL/gRPC order."""
        return tuple(opt for opt in ApiOption if self.for_option(opt) is not None)


class DecisionRule(RefereeBase, frozen=True):
    """A static rule: a partial constraint pattern and its textual impacts.

    ``when`` is stored as an ordered tuple of (dimension, value) pairs so the
    authored dimension order survives and the rule stays immutable. It
    accepts a plain mapping on construction and serializes back to one.
    """

    id: str = Field(min_length=1)
    description: str
    when: tuple[tuple[ConstraintDimension, str], ...] = ()
    impacts: RuleImpacts = Field(default_factory=RuleImpacts)

    @field_validator("when", mode="before")
    @classmethod
    def _when_from_mapping(cls, value: object) -> object:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @model_validator(mode="after")
    def _check_conditions(self) -> DecisionRule:
        seen: set[ConstraintDimension] = set()
        for dimension, required in self.when:
            if dimension in seen:
                msg = f"Rule {self.id}: dimension '{dimension}' listed twice"
                raise ValueError(msg)
            seen.add(dimension)
            allowed = {m.value for m in DIMENSION_VALUES[dimension]}
            if required not in allowed:
                msg = (
                    f"Rule {self.id}: '{dimension}' value {required!r} "
                    f"is outside {sorted(allowed)}"
                )
                raise ValueError(msg)
        return self

    @field_serializer("when")
    def _when_as_mapping(
        self, when: tuple[tuple[ConstraintDimension, str], ...]
    ) -> dict[str, str]:
        return {dimension.value: value for dimension, value in when}

    @property
    def conditions(self) -> dict[ConstraintDimension, str]:
        """The ``when`` clause as an ordered mapping."""
        return dict(self.when)

    @property
    def specificity(self) -> int:
        """Number of constrained dimensions."""
        return len(self.when)


# ---------------------------------------------------------------------------
# Evaluation output
# ---------------------------------------------------------------------------


class RuleTrace(RefereeBase, frozen=True):
    """Which rule produced statements for an option, and of what kind."""

    rule_id: str
    description: str
    trigger_label: str
    affected_options: tuple[ApiOption, ...]
    contributed_categories: tuple[ImpactCategory, ...]


class OptionResult(RefereeBase, frozen=True):
    """Accumulated statements for one API option, in rule-table order."""

    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    tradeoffs: tuple[str, ...] = ()
    triggered_rules: tuple[RuleTrace, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.strengths or self.weaknesses or self.tradeoffs)


class EvaluationResult(RefereeBase, frozen=True):
    """Side-by-side comparison of the three options for one constraint set."""

    rest: OptionResult
    graphql: OptionResult
    grpc: OptionResult
    total_rules_evaluated: int = Field(ge=0)
    total_rules_triggered: int = Field(ge=0)
    triggered_rule_ids: tuple[str, ...] = ()

    def option(self, option: ApiOption) -> OptionResult:
        """Return the result for ``option``."""
        return getattr(self, option.value)
