"""TC001: consecutive calculations with two different profiles.

Verifies the form can be reused for a second, unrelated calculation
without a reload.
"""

from __future__ import annotations

from carbrunner import checks
from carbrunner.models import ActivityLevel, Gender, Profile, ScenarioOutcome

ID = "TC001"
TITLE = "Multiple Calculation Sessions Workflow"
DESCRIPTION = "Two sequential calculations with distinct profiles both succeed"

FIRST = Profile.metric("25", Gender.MALE, "180", "75", ActivityLevel.MODERATE)
SECOND = Profile.metric("45", Gender.FEMALE, "165", "60", ActivityLevel.ACTIVE)


def run(page) -> ScenarioOutcome:
    first = page.calculate(FIRST)
    second = page.calculate(SECOND)

    outcome = ScenarioOutcome(
        scenario_id=ID,
        title=TITLE,
        passed=checks.has_result(first) and checks.has_result(second),
    )
    if outcome.passed:
        outcome.summary = "Multiple calculation sessions work correctly"
        outcome.details.append("Both calculations completed successfully with different profiles")
    else:
        outcome.summary = "Multiple calculation sessions failed"
        outcome.details.append(checks.describe(FIRST.label(), first))
        outcome.details.append(checks.describe(SECOND.label(), second))
    return outcome
