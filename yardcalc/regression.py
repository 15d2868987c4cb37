"""Built-in regression suite — fixed expressions with known values.

Each case is evaluated and compared against its expected value within an
absolute tolerance. Results render as a Rich table showing infix, postfix,
expected, actual and verdict, like a scorecard.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.table import Table

from yardcalc.evaluator import try_evaluate
from yardcalc.settings import DEFAULT_TOLERANCE

# Expected values were computed independently at high precision.
REGRESSION_CASES: list[tuple[str, float]] = [
    ("3 + 4 * 2 / (1 - 5) ^ 2 ^ 3", 3.0001220703125),
    (
        "10 * 15 / 23 / (512 * 13 ^ 2 ^ 2 / 13 ^ 2) * 3213 + 1 * 2 - 11 + 10",
        1.2421684059042963725,
    ),
    (
        "10.321 * 15.12451 / 23.1231 / (512.5643 * 13.345 ^ 2.3123 ^ 2 / 13 ^ 2) * 3213.42 + 1 * 2 - 11 + 10",
        1.0068815587795003944,
    ),
    (
        "0 - 10.321 * 15.12451 / 23.1231 / (512.5643 * 13.345 ^ 2.3123 ^ 2 / 13 ^ 2) * 3213.42 + 1 * 2 - 11 + 10",
        0.9931184412204996056,
    ),
    ("542 / 122 + (3 + 4) * 3 - 4 ^ 3 ^ 1.123", -91.374566859708925394),
    # % shares precedence with / and groups left: (542 % 15.515) / (...)
    (
        "542 % 15.515 / (122 % 2 ^ (1.5 / 1.25)) + (3 + 4 * 11.111111) * 3 - 4 ^ 3 ^ 1.123",
        86.405052120668061920,
    ),
]


@dataclass
class CheckResult:
    """Outcome of one regression case."""

    expression: str
    expected: float
    actual: Optional[float] = None
    postfix: str = ""
    error_kind: Optional[str] = None
    tolerance: float = DEFAULT_TOLERANCE

    @property
    def verdict(self) -> str:
        if self.error_kind is not None:
            return "error"
        if self.actual is not None and math.isclose(
            self.actual, self.expected, rel_tol=0.0, abs_tol=self.tolerance
        ):
            return "pass"
        return "fail"


def run_checks(
    cases: Optional[list[tuple[str, float]]] = None,
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[CheckResult]:
    """Evaluate every case; a failing or erroring case never stops the run."""
    results = []
    for expression, expected in cases if cases is not None else REGRESSION_CASES:
        outcome = try_evaluate(expression)
        results.append(CheckResult(
            expression=expression,
            expected=expected,
            actual=outcome.value,
            postfix=outcome.postfix,
            error_kind=outcome.error_kind,
            tolerance=tolerance,
        ))
    return results


def render_checks(results: list[CheckResult], console: Console) -> None:
    """Render a Rich table of regression results."""
    if not results:
        console.print("[yellow]No regression cases.[/yellow]")
        return

    table = Table(title="Regression checks", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Infix", overflow="fold")
    table.add_column("Postfix", overflow="fold", style="cyan")
    table.add_column("Expected", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Verdict", justify="center")

    colors = {"pass": "green", "fail": "red", "error": "magenta"}
    for i, r in enumerate(results, 1):
        actual = r.error_kind if r.error_kind else repr(r.actual)
        color = colors[r.verdict]
        table.add_row(
            str(i),
            r.expression,
            r.postfix or "--",
            repr(r.expected),
            actual,
            f"[{color}]{r.verdict}[/{color}]",
        )

    passed = sum(1 for r in results if r.verdict == "pass")
    console.print()
    console.print(table)
    console.print(f"  {passed}/{len(results)} passed (tolerance {results[0].tolerance:g})")
    console.print()
