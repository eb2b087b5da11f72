"""TC003: activity multiplier changes the recommendation."""

from __future__ import annotations

from carbrunner import checks
from carbrunner.models import ActivityLevel, Gender, Profile, ScenarioOutcome

ID = "TC003"
TITLE = "Activity Level Impact Comparison"
DESCRIPTION = "Same profile at two activity multipliers; both succeed and outputs differ"

SEDENTARY = Profile.metric("30", Gender.MALE, "175", "75", ActivityLevel.SEDENTARY)
ACTIVE = Profile.metric("30", Gender.MALE, "175", "75", ActivityLevel.ACTIVE)


def run(page) -> ScenarioOutcome:
    sedentary = page.calculate(SEDENTARY)
    active = page.calculate(ACTIVE)

    both = checks.has_result(sedentary) and checks.has_result(active)
    different = checks.outputs_differ(sedentary, active)

    outcome = ScenarioOutcome(scenario_id=ID, title=TITLE, passed=both and different)
    if outcome.passed:
        outcome.summary = "Activity level impact comparison successful"
        outcome.details.append("Different activity levels produced different carb recommendations")
    else:
        outcome.summary = "Activity level impact not detected"
        if both and not different:
            outcome.details.append("Both activity levels rendered identical output")
    outcome.details.append(checks.describe(f"Sedentary {SEDENTARY.activity.value}", sedentary))
    outcome.details.append(checks.describe(f"Active {ACTIVE.activity.value}", active))
    return outcome
