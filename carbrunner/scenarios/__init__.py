"""Scenario discovery and loading for carbrunner.

Each scenario is a module carbrunner/scenarios/tcNNN_<slug>.py defining:
    ID           scenario identifier, e.g. "TC003"
    TITLE        heading printed before the scenario runs
    DESCRIPTION  one-line intent, shown by `carbrunner list`
    run(page)    drives a CalculatorPage and returns a ScenarioOutcome
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from carbrunner.models import ScenarioOutcome


@dataclass
class ScenarioInfo:
    """Metadata about a discovered scenario."""

    id: str
    title: str
    description: str
    module: str
    run: Callable[..., ScenarioOutcome]


class UnknownScenarioError(LookupError):
    """Raised when a requested scenario ID does not exist."""


def _scenarios_root() -> Path:
    """Absolute path to the scenarios/ directory."""
    return Path(__file__).parent


def _load_module(stem: str) -> Optional[ScenarioInfo]:
    mod = importlib.import_module(f"carbrunner.scenarios.{stem}")
    run = getattr(mod, "run", None)
    scenario_id = getattr(mod, "ID", None)
    if not callable(run) or not scenario_id:
        return None
    return ScenarioInfo(
        id=scenario_id,
        title=getattr(mod, "TITLE", scenario_id),
        description=getattr(mod, "DESCRIPTION", ""),
        module=mod.__name__,
        run=run,
    )


def list_scenarios() -> list[ScenarioInfo]:
    """Discover all scenarios, in ID order.

    Scans carbrunner/scenarios/ for tc*.py modules that define ID and run().
    """
    scenarios = []
    for path in sorted(_scenarios_root().glob("tc*.py")):
        info = _load_module(path.stem)
        if info:
            scenarios.append(info)
    scenarios.sort(key=lambda s: s.id)
    return scenarios


def load_scenario(scenario_id: str) -> ScenarioInfo:
    """Load a single scenario by ID (case-insensitive).

    Raises:
        UnknownScenarioError: no scenario carries that ID.
    """
    wanted = scenario_id.strip().upper()
    for info in list_scenarios():
        if info.id.upper() == wanted:
            return info
    raise UnknownScenarioError(f"Unknown scenario: {scenario_id}")
