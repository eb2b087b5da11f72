"""Tally scenario outcomes and render the summary.

Shows a Rich table with one row per scenario, then the totals block:
total, passed, failed, pass rate and the overall verdict line.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.table import Table

from carbrunner.models import RunSummary, ScenarioOutcome

_RULE = "=" * 39


def summarize(outcomes: Iterable[ScenarioOutcome]) -> RunSummary:
    """Collect outcomes into a RunSummary."""
    return RunSummary(outcomes=list(outcomes))


def _fmt_elapsed(seconds: float) -> str:
    if seconds == 0.0:
        return "--"
    return f"{seconds:.1f}s"


def render_summary(summary: RunSummary, console: Console) -> None:
    """Render the per-scenario table and the totals block."""
    console.print()
    console.print("[bold]Test Execution Summary[/bold]")

    if summary.outcomes:
        table = Table(show_header=True, header_style="bold")
        table.add_column("ID", style="dim", min_width=6)
        table.add_column("Scenario", min_width=30)
        table.add_column("Verdict", justify="center")
        table.add_column("Time", justify="right")

        for o in summary.outcomes:
            color = "green" if o.passed else "red"
            table.add_row(o.scenario_id, o.title, f"[{color}]{o.verdict}[/{color}]", _fmt_elapsed(o.elapsed_s))
        console.print(table)

    console.print(f"Total Tests: {summary.total}")
    console.print(f"Tests Passed: {summary.passed}")
    console.print(f"Tests Failed: {summary.failed}")

    if summary.pass_rate is not None:
        console.print(f"Pass Rate: {summary.pass_rate:.1f}%")

    if summary.failed == 0:
        console.print("[green]All tests passed successfully[/green]")
    else:
        console.print("[red]Some tests failed - review results above[/red]")
    console.print(_RULE)
