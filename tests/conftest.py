"""Shared pytest fixtures for the referee test suite.

Provides:
- rule_table / engine: the baseline 26-rule table and an engine over it
- beginner_large: the worked example constraint set (as a plain mapping)
- low_profile / high_profile: the two opposed neutrality profiles
"""

import pytest

from referee.engine.evaluator import RefereeEngine
from referee.rules.catalog import build_default_rule_table
from referee.rules.table import RuleTable


@pytest.fixture
def rule_table() -> RuleTable:
    return build_default_rule_table()


@pytest.fixture
def engine(rule_table: RuleTable) -> RefereeEngine:
    return RefereeEngine(rule_table)


@pytest.fixture
def beginner_large() -> dict[str, str]:
    return {
        "expertise": "beginner",
        "scale": "large",
        "timeToMarket": "fast",
        "riskTolerance": "low",
    }


@pytest.fixture
def low_profile() -> dict[str, str]:
    return {
        "expertise": "beginner",
        "scale": "small",
        "timeToMarket": "fast",
        "riskTolerance": "low",
    }


@pytest.fixture
def high_profile() -> dict[str, str]:
    return {
        "expertise": "expert",
        "scale": "large",
        "timeToMarket": "balanced",
        "riskTolerance": "high",
    }
