"""Observational insight text for a constraint set.

Each template pairs a partial constraint pattern with a short paragraph
describing where operational risk accumulates. Templates carry an
explicit ``specificity`` (number of constrained dimensions); the
generator orders them once, most specific first, and returns the first
match. Ties keep authoring order.

Deterministic -- observations, never recommendations.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import Field, field_validator, model_validator

from referee.models.common import RefereeBase
from referee.models.constraints import ConstraintDimension, ConstraintSet, freeze

FALLBACK_INSIGHT = (
    "Observe how your selected constraints shape the trade-offs across all "
    "three options — without determining a single correct answer."
)


class InsightTemplate(RefereeBase, frozen=True):
    """A pattern -> observation pair with an authored specificity."""

    when: tuple[tuple[ConstraintDimension, str], ...]
    text: str = Field(min_length=1)
    specificity: int = Field(ge=0)

    @field_validator("when", mode="before")
    @classmethod
    def _when_from_mapping(cls, value: object) -> object:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @model_validator(mode="after")
    def _check_specificity(self) -> InsightTemplate:
        if self.specificity != len(self.when):
            msg = (
                f"Insight specificity {self.specificity} does not match "
                f"{len(self.when)} conditions"
            )
            raise ValueError(msg)
        return self

    def applies_to(self, constraints: ConstraintSet) -> bool:
        return all(
            constraints.value_of(dimension) == value for dimension, value in self.when
        )


DEFAULT_INSIGHTS: tuple[InsightTemplate, ...] = (
    # Scale
    InsightTemplate(
        when={"scale": "large"},
        specificity=1,
        text=(
            "Under these constraints, certain options begin accumulating operational "
            "risk without immediately failing. Large scale amplifies performance "
            "differences and exposes infrastructure limits that remain invisible at "
            "smaller volumes."
        ),
    ),
    InsightTemplate(
        when={"scale": "small"},
        specificity=1,
        text=(
            "At small scale, infrastructure overhead and learning curves dominate the "
            "risk profile. Performance differences between options may not materialize "
            "until scale increases."
        ),
    ),
    # Expertise
    InsightTemplate(
        when={"expertise": "beginner"},
        specificity=1,
        text=(
            "Under these constraints, certain options begin accumulating operational "
            "risk without immediately failing. Beginner expertise increases the "
            "likelihood of misconfiguration and extends debugging timelines for "
            "complex architectures."
        ),
    ),
    InsightTemplate(
        when={"expertise": "expert"},
        specificity=1,
        text=(
            "Expert teams can absorb complexity that would overwhelm less experienced "
            "teams. However, this trades simplicity for operational control — a "
            "trade-off that compounds over time."
        ),
    ),
    # Time-to-market
    InsightTemplate(
        when={"timeToMarket": "fast"},
        specificity=1,
        text=(
            "Fast delivery pressure reduces tolerance for learning curves and schema "
            "complexity. Decisions made under time pressure may require refactoring "
            "once constraints relax."
        ),
    ),
    InsightTemplate(
        when={"timeToMarket": "balanced"},
        specificity=1,
        text=(
            "Balanced timelines reveal long-term trade-offs that fast delivery would "
            "obscure. Schema-first approaches and custom infrastructure become viable "
            "options."
        ),
    ),
    # Risk tolerance
    InsightTemplate(
        when={"riskTolerance": "low"},
        specificity=1,
        text=(
            "Low risk tolerance narrows viable options toward mature, well-documented "
            "patterns. This reduces operational surprise but may limit performance "
            "optimization."
        ),
    ),
    InsightTemplate(
        when={"riskTolerance": "high"},
        specificity=1,
        text=(
            "High risk tolerance enables aggressive optimization but accepts "
            "operational uncertainty. Performance gains may come at the cost of "
            "debugging complexity."
        ),
    ),
    # Compound
    InsightTemplate(
        when={"scale": "large", "expertise": "beginner"},
        specificity=2,
        text=(
            "Under these constraints, certain options begin accumulating operational "
            "risk without immediately failing. Large scale with beginner expertise "
            "creates compounding pressure — infrastructure limits require operational "
            "knowledge to navigate safely."
        ),
    ),
    InsightTemplate(
        when={"scale": "large", "expertise": "expert"},
        specificity=2,
        text=(
            "Expert teams at large scale can optimize aggressively, but this trades "
            "simplicity for operational control. Capacity planning and infrastructure "
            "management become ongoing responsibilities."
        ),
    ),
    InsightTemplate(
        when={"timeToMarket": "fast", "riskTolerance": "low"},
        specificity=2,
        text=(
            "Fast delivery with low risk tolerance creates strong pressure toward "
            "familiar patterns. This combination narrows viable options significantly "
            "without declaring a winner."
        ),
    ),
    InsightTemplate(
        when={"expertise": "beginner", "timeToMarket": "fast"},
        specificity=2,
        text=(
            "Under these constraints, certain options begin accumulating operational "
            "risk without immediately failing. Beginner teams under time pressure face "
            "compounding constraints — learning curves become delivery risks."
        ),
    ),
)


class InsightGenerator:
    """Selects the most specific matching observation for a constraint set."""

    def __init__(
        self,
        templates: Iterable[InsightTemplate] = DEFAULT_INSIGHTS,
        fallback: str = FALLBACK_INSIGHT,
    ) -> None:
        # sorted() is stable, so equal specificity keeps authoring order.
        self._ordered = tuple(
            sorted(templates, key=lambda t: t.specificity, reverse=True)
        )
        self._fallback = fallback

    @property
    def templates(self) -> tuple[InsightTemplate, ...]:
        """Templates in evaluation order (most specific first)."""
        return self._ordered

    def generate(self, constraints: ConstraintSet | Mapping[str, object]) -> str:
        """Return the first matching template's text, or the fallback.

        Raises:
            InvalidConstraintsError: if ``constraints`` is not a valid set.
        """
        frozen = freeze(constraints)
        for template in self._ordered:
            if template.applies_to(frozen):
                return template.text
        return self._fallback
