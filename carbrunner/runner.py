"""Run orchestration: browser launch, then scenarios, then the summary.

Data flow per run:
1. Resolve the scenarios to run (all, or the IDs given with --only)
2. Launch one browser session (fatal on failure, nothing runs)
3. Run each scenario in ID order against the shared CalculatorPage
4. Turn any error raised inside a scenario into a failed outcome
5. Print the summary and quit the browser, even if the loop itself raised
"""

from __future__ import annotations

import time
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from carbrunner.models import RunSummary, ScenarioOutcome
from carbrunner.page import CalculatorPage
from carbrunner.scenarios import ScenarioInfo, list_scenarios, load_scenario
from carbrunner.scorer import render_summary, summarize
from carbrunner.session import DEFAULT_TIMEOUT_S, DriverFactory, DriverSession


def select_scenarios(only: Optional[Sequence[str]] = None) -> list[ScenarioInfo]:
    """All scenarios in ID order, or just the requested IDs.

    Raises UnknownScenarioError for an ID that does not exist.
    """
    if not only:
        return list_scenarios()
    selected = {info.id: info for info in (load_scenario(s) for s in only)}
    return sorted(selected.values(), key=lambda s: s.id)


def _print_outcome(outcome: ScenarioOutcome, console: Console) -> None:
    color = "green" if outcome.passed else "red"
    console.print(
        f"{outcome.scenario_id} [{color}]{outcome.verdict}[/{color}]: {escape(outcome.summary)}"
    )
    for line in outcome.details:
        console.print(f"  {escape(line)}")


def run_scenario(info: ScenarioInfo, page: CalculatorPage, console: Console) -> ScenarioOutcome:
    """Execute one scenario; never raises for errors inside the scenario.

    Args:
        info: The scenario to run.
        page: Page object over the shared browser session.
        console: Rich Console for status output.

    Returns:
        The scenario's outcome, or a failed outcome carrying the error message.
    """
    console.print(f"\n[bold]--- {info.id}: {info.title} ---[/bold]")
    start = time.monotonic()
    try:
        outcome = info.run(page)
    except Exception as exc:
        outcome = ScenarioOutcome.from_error(info.id, info.title, exc)
    outcome.elapsed_s = round(time.monotonic() - start, 1)
    _print_outcome(outcome, console)
    return outcome


def run_scenarios(
    scenarios: Sequence[ScenarioInfo],
    page: CalculatorPage,
    console: Console,
) -> list[ScenarioOutcome]:
    """Run scenarios sequentially against one page, in the given order."""
    return [run_scenario(info, page, console) for info in scenarios]


def run_suite(
    console: Console,
    only: Optional[Sequence[str]] = None,
    headless: bool = False,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    driver_path: Optional[str] = None,
    driver_factory: Optional[DriverFactory] = None,
) -> RunSummary:
    """Run the suite end to end: launch, scenarios, summary, teardown.

    Raises:
        UnknownScenarioError: an ID in `only` does not exist (before launch).
        SessionStartError: the browser could not be launched.
    """
    scenarios = select_scenarios(only)

    console.print("[bold]Carbohydrate Calculator Test Automation[/bold]")
    console.print(
        f"Running {len(scenarios)} automated end-to-end test cases: "
        + ", ".join(s.id for s in scenarios)
    )
    console.print()

    session = DriverSession(
        console,
        headless=headless,
        timeout_s=timeout_s,
        driver_path=driver_path,
        driver_factory=driver_factory,
    )
    session.start()

    outcomes: list[ScenarioOutcome] = []
    try:
        page = CalculatorPage(session)
        for info in scenarios:
            outcomes.append(run_scenario(info, page, console))
    finally:
        summary = summarize(outcomes)
        render_summary(summary, console)
        session.stop()
    return summary
