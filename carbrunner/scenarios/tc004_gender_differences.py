"""TC004: gender selection changes the recommendation."""

from __future__ import annotations

from carbrunner import checks
from carbrunner.models import ActivityLevel, Gender, Profile, ScenarioOutcome

ID = "TC004"
TITLE = "Gender-Based Calculation Differences"
DESCRIPTION = "Same profile for both genders; both succeed and outputs differ"

MALE = Profile.metric("35", Gender.MALE, "170", "70", ActivityLevel.MODERATE)
FEMALE = Profile.metric("35", Gender.FEMALE, "170", "70", ActivityLevel.MODERATE)


def run(page) -> ScenarioOutcome:
    male = page.calculate(MALE)
    female = page.calculate(FEMALE)

    both = checks.has_result(male) and checks.has_result(female)
    outcome = ScenarioOutcome(
        scenario_id=ID,
        title=TITLE,
        passed=both and checks.outputs_differ(male, female),
    )
    if outcome.passed:
        outcome.summary = "Gender-based calculation differences verified"
        outcome.details.append("Male and female profiles produced different carb recommendations")
    else:
        outcome.summary = "Gender impact not detected or calculations failed"
    outcome.details.append(checks.describe("Male", male))
    outcome.details.append(checks.describe("Female", female))
    return outcome
