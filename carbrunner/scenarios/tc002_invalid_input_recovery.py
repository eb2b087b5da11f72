"""TC002: invalid inputs are refused, then a valid calculation recovers.

Steps:
1. Type "abc" as age and leave the field; look for inline validation.
2. Submit an out-of-range age (150); the page must not present a result.
3. Submit a negative weight (-50); reported, not scored.
4. Submit a valid profile; it must produce a result.

Passes when step 1 or step 2 shows the invalid input was caught and
step 4 succeeds.
"""

from __future__ import annotations

from carbrunner import checks
from carbrunner.models import ActivityLevel, Gender, Profile, ScenarioOutcome
from carbrunner.page import AGE

ID = "TC002"
TITLE = "Incorrect Values Validation and Recovery"
DESCRIPTION = "Invalid, out-of-range and negative inputs never yield a false success; a valid retry does"

INVALID_AGE_TEXT = "abc"
OUT_OF_RANGE = Profile.metric("150", Gender.MALE, "180", "75", ActivityLevel.MODERATE)
NEGATIVE_WEIGHT = Profile.metric("25", Gender.MALE, "175", "-50", ActivityLevel.MODERATE)
VALID = Profile.metric("30", Gender.FEMALE, "165", "60", ActivityLevel.LIGHT)


def run(page) -> ScenarioOutcome:
    page.ready()
    page.helpers.set_field_value(AGE, INVALID_AGE_TEXT)
    age_validation = page.probe_validation()

    # Negative steps may be refused without a post; the page is judged as shown.
    page.fill(OUT_OF_RANGE)
    out_of_range = checks.rejects_out_of_range(page.compute(expect_reload=False))

    negative_weight = checks.rejects_negative_weight(page.calculate(NEGATIVE_WEIGHT, expect_reload=False))

    final = page.calculate(VALID)
    recovered = checks.has_result(final)

    outcome = ScenarioOutcome(
        scenario_id=ID,
        title=TITLE,
        passed=(age_validation or out_of_range) and recovered,
    )
    outcome.details.extend([
        f"Non-numeric age flagged: {'yes' if age_validation else 'no'}",
        f"Out-of-range age refused: {'yes' if out_of_range else 'no'}",
        f"Negative weight refused: {'yes' if negative_weight else 'no'}",
        checks.describe(f"Recovery {VALID.label()}", final),
    ])
    if outcome.passed:
        outcome.summary = "Incorrect values validation and recovery successful"
        outcome.details.insert(0, "Invalid inputs detected and valid calculation completed")
    else:
        outcome.summary = "Validation or recovery workflow failed"
    return outcome
