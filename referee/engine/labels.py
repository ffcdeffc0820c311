"""Human-readable labels for constraint values.

Two independent lookup tables over the same enumerations: trigger-label
phrases for rule traces, and the short words used in the constraint
summary line. Both cover the full enumeration space.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from referee.models.constraints import (
    ConstraintDimension,
    ConstraintSet,
    Expertise,
    RiskTolerance,
    Scale,
    TimeToMarket,
    freeze,
)

TRIGGER_LABEL_SEPARATOR = " + "
SUMMARY_SEPARATOR = " · "

# (dimension, value) -> phrase used in rule trace labels.
CONSTRAINT_LABELS: dict[ConstraintDimension, dict[str, str]] = {
    ConstraintDimension.EXPERTISE: {
        Expertise.BEGINNER: "Beginner expertise",
        Expertise.INTERMEDIATE: "Intermediate expertise",
        Expertise.EXPERT: "Expert expertise",
    },
    ConstraintDimension.SCALE: {
        Scale.SMALL: "Small scale",
        Scale.MEDIUM: "Medium scale",
        Scale.LARGE: "Large scale",
    },
    ConstraintDimension.TIME_TO_MARKET: {
        TimeToMarket.FAST: "Fast delivery",
        TimeToMarket.BALANCED: "Balanced delivery",
    },
    ConstraintDimension.RISK_TOLERANCE: {
        RiskTolerance.LOW: "Low risk tolerance",
        RiskTolerance.MEDIUM: "Medium risk tolerance",
        RiskTolerance.HIGH: "High risk tolerance",
    },
}

# (dimension, value) -> word used in the summary line.
VALUE_LABELS: dict[ConstraintDimension, dict[str, str]] = {
    ConstraintDimension.EXPERTISE: {
        Expertise.BEGINNER: "Beginner",
        Expertise.INTERMEDIATE: "Intermediate",
        Expertise.EXPERT: "Expert",
    },
    ConstraintDimension.SCALE: {
        Scale.SMALL: "Small",
        Scale.MEDIUM: "Medium",
        Scale.LARGE: "Large",
    },
    ConstraintDimension.TIME_TO_MARKET: {
        TimeToMarket.FAST: "Fast",
        TimeToMarket.BALANCED: "Balanced",
    },
    ConstraintDimension.RISK_TOLERANCE: {
        RiskTolerance.LOW: "Low",
        RiskTolerance.MEDIUM: "Medium",
        RiskTolerance.HIGH: "High",
    },
}

# Dimension -> (display name, description, summary noun).
DIMENSION_LABELS: dict[ConstraintDimension, tuple[str, str, str]] = {
    ConstraintDimension.EXPERTISE: (
        "Team Expertise",
        "Familiarity with API paradigms and operational tooling",
        "team",
    ),
    ConstraintDimension.SCALE: (
        "Scale Expectation",
        "Anticipated request volume and data throughput",
        "scale",
    ),
    ConstraintDimension.TIME_TO_MARKET: (
        "Time-to-Market",
        "Delivery pressure vs. long-term optimization",
        "delivery",
    ),
    ConstraintDimension.RISK_TOLERANCE: (
        "Risk Tolerance",
        "Willingness to accept operational uncertainty",
        "risk",
    ),
}


def format_trigger_label(
    when: Iterable[tuple[ConstraintDimension, str]],
) -> str:
    """Join the phrases for a rule's conditions in their authored order.

    ``when`` is a rule's (dimension, value) pairs; an empty clause gives an
    empty label.
    """
    return TRIGGER_LABEL_SEPARATOR.join(
        CONSTRAINT_LABELS[ConstraintDimension(dimension)][value]
        for dimension, value in when
    )


def format_summary(constraints: ConstraintSet | Mapping[str, object]) -> str:
    """One-line summary, e.g. ``Beginner team · Large scale · Fast delivery · Low risk``.

    Raises:
        InvalidConstraintsError: if ``constraints`` is not a valid set.
    """
    frozen = freeze(constraints)
    tokens: list[str] = []
    for dimension, value in frozen.as_mapping().items():
        noun = DIMENSION_LABELS[dimension][2]
        tokens.append(f"{VALUE_LABELS[dimension][value]} {noun}")
    return SUMMARY_SEPARATOR.join(tokens)
