"""Check the rule catalogue against the authoring discipline.

Reports directive language, score-like wording and options the table never
criticises or never credits.

Usage:
    python -m scripts.lint_rules
"""

from __future__ import annotations

import argparse
import sys

from referee.engine.evaluator import RefereeEngine
from referee.rules.catalog import build_default_rule_table
from referee.rules.lint import lint_rule_table


def main(argv: list[str] | None = None) -> None:
    """Lint the default rule table; exit 1 if anything is flagged."""
    parser = argparse.ArgumentParser(
        description="Lint the referee rule catalogue",
    )
    parser.parse_args(argv)

    engine = RefereeEngine(build_default_rule_table())
    findings = lint_rule_table(engine)

    print(f"  Rules checked: {engine.rule_count()}")
    if not findings:
        print("  RESULT: PASS")
        sys.exit(0)

    print(f"  Findings ({len(findings)}):")
    for finding in findings:
        where = finding.rule_id or "table"
        print(f"    ! [{finding.check}] {where}: {finding.message}")
    print(f"  RESULT: FAIL ({len(findings)} findings)")
    sys.exit(1)


if __name__ == "__main__":
    main()
