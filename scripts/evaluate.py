"""Evaluate one constraint set and print the REST / GraphQL / gRPC comparison.

Usage:
    python -m scripts.evaluate --expertise beginner --scale large \\
        --time-to-market fast --risk-tolerance low
    python -m scripts.evaluate --expertise expert --scale large \\
        --time-to-market balanced --risk-tolerance high --trace
    python -m scripts.evaluate ... --json
"""

from __future__ import annotations

import argparse
import json

from referee.engine.evaluator import RefereeEngine
from referee.engine.insights import InsightGenerator
from referee.engine.labels import format_summary
from referee.models.constraints import (
    ConstraintSet,
    Expertise,
    InvalidConstraintsError,
    RiskTolerance,
    Scale,
    TimeToMarket,
    freeze,
)
from referee.models.evaluation import ApiOption, EvaluationResult
from referee.rules.catalog import build_default_rule_table


def _print_header(constraints: ConstraintSet, insight: str) -> None:
    """Print the constraint summary and the observational insight."""
    w = 72
    print("=" * w)
    print("  API Referee")
    print(f"  {format_summary(constraints)}")
    print("=" * w)
    print()
    print(f"  {insight}")


def _print_list(title: str, items: tuple[str, ...]) -> None:
    print(f"    {title} ({len(items)}):")
    if not items:
        print("      (none)")
    for item in items:
        print(f"      - {item}")


def _print_option(result: EvaluationResult, option: ApiOption, trace: bool) -> None:
    """Print strengths, weaknesses, trade-offs (and optionally rules) for one option."""
    option_result = result.option(option)
    print()
    print(f"  {option.label}")
    print(f"  {'-' * len(option.label)}")
    _print_list("Strengths", option_result.strengths)
    _print_list("Weaknesses", option_result.weaknesses)
    _print_list("Trade-offs", option_result.tradeoffs)
    if trace:
        print(f"    Rules ({len(option_result.triggered_rules)}):")
        for entry in option_result.triggered_rules:
            categories = ", ".join(c.value for c in entry.contributed_categories)
            print(f"      [{entry.rule_id}] {entry.trigger_label} -> {categories}")
            print(f"        {entry.description}")


def main(argv: list[str] | None = None) -> None:
    """Run a single evaluation."""
    parser = argparse.ArgumentParser(
        description="Compare REST, GraphQL and gRPC under declared constraints",
    )
    parser.add_argument(
        "--expertise", required=True, choices=[m.value for m in Expertise],
    )
    parser.add_argument("--scale", required=True, choices=[m.value for m in Scale])
    parser.add_argument(
        "--time-to-market", required=True, choices=[m.value for m in TimeToMarket],
    )
    parser.add_argument(
        "--risk-tolerance", required=True, choices=[m.value for m in RiskTolerance],
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--trace", action="store_true", help="Show triggered rules")
    args = parser.parse_args(argv)

    try:
        constraints = freeze({
            "expertise": args.expertise,
            "scale": args.scale,
            "timeToMarket": args.time_to_market,
            "riskTolerance": args.risk_tolerance,
        })
    except InvalidConstraintsError as exc:
        parser.error(str(exc))

    engine = RefereeEngine(build_default_rule_table())
    result = engine.evaluate(constraints)
    insight = InsightGenerator().generate(constraints)

    if args.json:
        payload = {
            "summary": format_summary(constraints),
            "insight": insight,
            "result": result.model_dump(mode="json"),
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    _print_header(constraints, insight)
    for option in ApiOption:
        _print_option(result, option, args.trace)

    print()
    print("=" * 72)
    print(
        f"  {result.total_rules_evaluated} deterministic rules evaluated"
        f" · {result.total_rules_triggered} rules triggered by your constraints"
    )
    print("=" * 72)


if __name__ == "__main__":
    main()
