"""Fixed-format report lines for the law demonstration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .demo import DemoReport

LAWS_VALID = (
    "",
    "left identity, right identity, associativity laws valid.",
    "... so, it is a monad after all!",
    "... so, we can now start playing and pay the consequences!",
)
LAWS_INVALID = (
    "",
    "left identity, right identity, associativity laws NOT valid.",
)


def _flag(passed: bool, failure: str = "false") -> str:
    return "true" if passed else failure


def format_report(report: DemoReport) -> list[str]:
    """Render a DemoReport as the lines printed to stdout.

    Args:
        report: Outcome of run_demo

    Returns:
        Lines without trailing newlines, in print order
    """
    last = report.length - 1
    checks = {check.name: check.passed for check in report.identities}

    lines = list(LAWS_VALID if report.laws_hold else LAWS_INVALID)
    lines.append(
        f"Sum of doubles of integer sequence 0,1,2,3,...,{last} test: "
        f"{_flag(checks['sum_of_doubles'])}"
    )
    lines.append(
        f"Sum of squares of integer sequence 0,1,2,3,...,{last} test: "
        f"{_flag(checks['sum_of_squares'])}"
    )
    lines.append(
        "Sum of squares vs square of sums (provided no overflow): "
        f"{_flag(checks['squares_vs_square_of_sum'], 'false (you overflowed it!)')}"
    )
    lines.append("")
    return lines
