"""TC006: high-end and low-end profiles."""

from __future__ import annotations

from carbrunner import checks
from carbrunner.models import ActivityLevel, Gender, Profile, ScenarioOutcome

ID = "TC006"
TITLE = "Extreme Boundary Value Testing"
DESCRIPTION = "High-end and low-end profiles both succeed"

# Age 18 and 80 are the calculator's accepted limits.
MAXIMUM = Profile.metric("80", Gender.MALE, "220", "150", ActivityLevel.ACTIVE)
MINIMUM = Profile.metric("18", Gender.FEMALE, "140", "40", ActivityLevel.SEDENTARY)


def run(page) -> ScenarioOutcome:
    high = page.calculate(MAXIMUM)
    low = page.calculate(MINIMUM)

    outcome = ScenarioOutcome(
        scenario_id=ID,
        title=TITLE,
        passed=checks.has_result(high) and checks.has_result(low),
    )
    if outcome.passed:
        outcome.summary = "Extreme boundary value testing successful"
        outcome.details.append("Both maximum and minimum boundary values handled correctly")
    else:
        outcome.summary = "Extreme boundary value handling failed"
        outcome.details.append(checks.describe(f"Maximum {MAXIMUM.label()}", high))
        outcome.details.append(checks.describe(f"Minimum {MINIMUM.label()}", low))
    return outcome
