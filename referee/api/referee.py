"""FastAPI referee endpoints.

GET  /v1/referee/constraints   — constraint dimensions and allowed values
GET  /v1/referee/rules         — rule catalogue in evaluation order
POST /v1/referee/evaluate      — compare REST / GraphQL / gRPC for a constraint set
POST /v1/referee/summary       — one-line summary of a constraint set

Candidates are validated by the engine, not trusted from the client.
Deterministic engine code only.

Casing: constraint candidates and the echoed ``constraints`` object use the
dimension keys (``expertise``, ``scale``, ``timeToMarket``, ``riskTolerance``);
every other response field is snake_case (``total_rules_evaluated``,
``triggered_rules``, ...).
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from referee.api.dependencies import get_engine, get_insight_generator
from referee.engine.evaluator import RefereeEngine
from referee.engine.insights import InsightGenerator
from referee.engine.labels import (
    DIMENSION_LABELS,
    VALUE_LABELS,
    format_summary,
    format_trigger_label,
)
from referee.models.constraints import (
    DIMENSION_VALUES,
    ConstraintSet,
    InvalidConstraintsError,
    freeze,
)
from referee.models.evaluation import EvaluationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/referee", tags=["referee"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------


class ConstraintOptionSpec(BaseModel):
    """One selectable value of a dimension."""

    value: str
    label: str


class ConstraintDimensionSpec(BaseModel):
    """A dimension and its closed set of values."""

    key: str
    label: str
    description: str
    options: list[ConstraintOptionSpec]


class RuleSummary(BaseModel):
    """A rule as listed in the catalogue."""

    id: str
    description: str
    when: dict[str, str]
    trigger_label: str
    affected_options: list[str]
    specificity: int


class RuleCatalogueResponse(BaseModel):
    """Response for the rule catalogue."""

    rule_count: int
    rules: list[RuleSummary]


class EvaluationResponse(BaseModel):
    """Response for an evaluation request."""

    constraints: dict[str, str]
    summary: str
    insight: str
    result: EvaluationResult


class SummaryResponse(BaseModel):
    """Response for a summary request."""

    constraints: dict[str, str]
    summary: str


def _freeze_or_422(candidate: dict[str, Any]) -> ConstraintSet:
    try:
        return freeze(candidate)
    except InvalidConstraintsError as exc:
        logger.info("Rejected constraint candidate: %s", exc.problems)
        raise HTTPException(status_code=422, detail=exc.problems) from exc


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/constraints", response_model=list[ConstraintDimensionSpec])
async def list_constraints() -> list[ConstraintDimensionSpec]:
    """Return the four dimensions with their allowed values, in order."""
    specs: list[ConstraintDimensionSpec] = []
    for dimension, allowed in DIMENSION_VALUES.items():
        label, description, _ = DIMENSION_LABELS[dimension]
        specs.append(
            ConstraintDimensionSpec(
                key=dimension.value,
                label=label,
                description=description,
                options=[
                    ConstraintOptionSpec(
                        value=member.value,
                        label=VALUE_LABELS[dimension][member.value],
                    )
                    for member in allowed
                ],
            )
        )
    return specs


@router.get("/rules", response_model=RuleCatalogueResponse)
async def list_rules(
    engine: RefereeEngine = Depends(get_engine),
) -> RuleCatalogueResponse:
    """Return every rule in the order evaluation walks them."""
    table = engine.rule_table
    return RuleCatalogueResponse(
        rule_count=table.rule_count(),
        rules=[
            RuleSummary(
                id=rule.id,
                description=rule.description,
                when={dim.value: value for dim, value in rule.when},
                trigger_label=format_trigger_label(rule.when),
                affected_options=[opt.value for opt in rule.impacts.affected_options()],
                specificity=rule.specificity,
            )
            for rule in table
        ],
    )


@router.post("/evaluate", response_model=EvaluationResponse)
async def evaluate_constraints(
    candidate: dict[str, Any] = Body(...),
    engine: RefereeEngine = Depends(get_engine),
    insights: InsightGenerator = Depends(get_insight_generator),
) -> EvaluationResponse:
    """Evaluate a constraint candidate against the rule table."""
    constraints = _freeze_or_422(candidate)
    result = engine.evaluate(constraints)
    logger.debug(
        "Evaluated %d rules, %d triggered",
        result.total_rules_evaluated,
        result.total_rules_triggered,
    )
    return EvaluationResponse(
        constraints={dim.value: value for dim, value in constraints.as_mapping().items()},
        summary=format_summary(constraints),
        insight=insights.generate(constraints),
        result=result,
    )


@router.post("/summary", response_model=SummaryResponse)
async def summarize_constraints(
    candidate: dict[str, Any] = Body(...),
) -> SummaryResponse:
    """Return the one-line summary for a constraint candidate."""
    constraints = _freeze_or_422(candidate)
    return SummaryResponse(
        constraints={dim.value: value for dim, value in constraints.as_mapping().items()},
        summary=format_summary(constraints),
    )
