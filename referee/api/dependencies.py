"""FastAPI dependency injection factories for the referee engine.

The rule table is built once per process and shared read-only; endpoints
receive the engine and insight generator via Depends(). Tests swap them
with ``app.dependency_overrides``.
"""

from functools import lru_cache

from referee.engine.evaluator import RefereeEngine
from referee.engine.insights import InsightGenerator
from referee.rules.catalog import build_default_rule_table


@lru_cache(maxsize=1)
def get_engine() -> RefereeEngine:
    return RefereeEngine(build_default_rule_table())


@lru_cache(maxsize=1)
def get_insight_generator() -> InsightGenerator:
    return InsightGenerator()
