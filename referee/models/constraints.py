"""Constraint model: the four decision dimensions and their closed domains.

A ConstraintSet is the only input to the referee engine. Candidates arrive
as plain mappings keyed by dimension (``expertise``, ``scale``,
``timeToMarket``, ``riskTolerance``) and are checked with ``validate``
before being frozen into an immutable ConstraintSet.

Deterministic -- no coercion of unknown values.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import StrEnum
from itertools import product

from pydantic import Field

from referee.models.common import RefereeBase

# ---------------------------------------------------------------------------
# Enums (all StrEnum)
# ---------------------------------------------------------------------------


class ConstraintDimension(StrEnum):
    """The four constraint axes, in declaration order."""

    EXPERTISE = "expertise"
    SCALE = "scale"
    TIME_TO_MARKET = "timeToMarket"
    RISK_TOLERANCE = "riskTolerance"


class Expertise(StrEnum):
    """Team familiarity with API paradigms and operational tooling."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


class Scale(StrEnum):
    """Anticipated request volume and data throughput."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class TimeToMarket(StrEnum):
    """Delivery pressure vs. long-term optimization."""

    FAST = "fast"
    BALANCED = "balanced"


class RiskTolerance(StrEnum):
    """Willingness to accept operational uncertainty."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Dimension -> enumeration of allowed values.
DIMENSION_VALUES: dict[ConstraintDimension, type[StrEnum]] = {
    ConstraintDimension.EXPERTISE: Expertise,
    ConstraintDimension.SCALE: Scale,
    ConstraintDimension.TIME_TO_MARKET: TimeToMarket,
    ConstraintDimension.RISK_TOLERANCE: RiskTolerance,
}

# Dimension -> ConstraintSet attribute name.
_FIELD_NAMES: dict[ConstraintDimension, str] = {
    ConstraintDimension.EXPERTISE: "expertise",
    ConstraintDimension.SCALE: "scale",
    ConstraintDimension.TIME_TO_MARKET: "time_to_market",
    ConstraintDimension.RISK_TOLERANCE: "risk_tolerance",
}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class InvalidConstraintsError(ValueError):
    """Raised when a candidate constraint set fails validation.

    ``problems`` lists every reason the candidate was rejected, one entry
    per offending dimension.
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        detail = "; ".join(self.problems) or "constraint set is not a mapping"
        super().__init__(
            f"Invalid constraints: all fields must be present with valid values ({detail})"
        )


# ---------------------------------------------------------------------------
# ConstraintSet
# ---------------------------------------------------------------------------


class ConstraintSet(RefereeBase, frozen=True):
    """Immutable, fully specified set of the four constraint values."""

    expertise: Expertise
    scale: Scale
    time_to_market: TimeToMarket = Field(alias="timeToMarket")
    risk_tolerance: RiskTolerance = Field(alias="riskTolerance")

    def value_of(self, dimension: ConstraintDimension | str) -> StrEnum:
        """Return the value held for ``dimension``."""
        return getattr(self, _FIELD_NAMES[ConstraintDimension(dimension)])

    def as_mapping(self) -> dict[ConstraintDimension, str]:
        """Dimension-keyed plain values, in declaration order."""
        return {dim: self.value_of(dim).value for dim in ConstraintDimension}

    def with_value(
        self, dimension: ConstraintDimension | str, value: str
    ) -> ConstraintSet:
        """Copy-on-write: a new ConstraintSet with one dimension replaced.

        Raises:
            InvalidConstraintsError: if ``dimension`` or ``value`` is outside
                the closed domain.
        """
        if str(dimension) not in {dim.value for dim in ConstraintDimension}:
            raise InvalidConstraintsError([f"unknown dimension {dimension!r}"])
        candidate: dict[str, object] = {
            dim.value: val for dim, val in self.as_mapping().items()
        }
        candidate[str(dimension)] = value
        return freeze(candidate)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def constraint_problems(candidate: object) -> list[str]:
    """Return every reason ``candidate`` is not a valid constraint set.

    An empty list means the candidate is valid. Values must be exact
    members of their enumeration: no case folding, no type coercion.
    """
    if isinstance(candidate, ConstraintSet):
        return []
    if not isinstance(candidate, Mapping):
        return [f"expected a mapping, got {type(candidate).__name__}"]

    problems: list[str] = []
    for dimension, allowed in DIMENSION_VALUES.items():
        if dimension.value not in candidate:
            problems.append(f"missing '{dimension.value}'")
            continue
        value = candidate[dimension.value]
        if not isinstance(value, str) or value not in {m.value for m in allowed}:
            options = ", ".join(m.value for m in allowed)
            problems.append(
                f"'{dimension.value}' must be one of [{options}], got {value!r}"
            )
    return problems


def validate(candidate: object) -> bool:
    """True iff ``candidate`` holds all four dimensions with allowed values.

    Never raises; callers needing a hard failure use ``freeze`` or the
    engine, which raise InvalidConstraintsError.
    """
    return not constraint_problems(candidate)


def freeze(candidate: ConstraintSet | Mapping[str, object]) -> ConstraintSet:
    """Return an immutable ConstraintSet copied from ``candidate``.

    The argument is never mutated. Extra keys are ignored.

    Raises:
        InvalidConstraintsError: if ``candidate`` fails ``validate``.
    """
    if isinstance(candidate, ConstraintSet):
        return candidate
    problems = constraint_problems(candidate)
    if problems:
        raise InvalidConstraintsError(problems)
    return ConstraintSet.model_validate(
        {dim.value: candidate[dim.value] for dim in ConstraintDimension}
    )


def all_constraint_sets() -> Iterator[ConstraintSet]:
    """Yield every valid combination (3 x 3 x 2 x 3 = 54) in declaration order."""
    for expertise, scale, time_to_market, risk in product(
        Expertise, Scale, TimeToMarket, RiskTolerance
    ):
        yield ConstraintSet(
            expertise=expertise,
            scale=scale,
            time_to_market=time_to_market,
            risk_tolerance=risk,
        )
