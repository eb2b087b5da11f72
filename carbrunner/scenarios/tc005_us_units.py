"""TC005: US units workflow, then the equivalent metric profile.

The metric half starts from a fresh navigation: the "Metric Units" link is
not reliably reachable from a result page rendered in US mode.
"""

from __future__ import annotations

from carbrunner import checks
from carbrunner.models import ActivityLevel, Gender, Profile, ScenarioOutcome

ID = "TC005"
TITLE = "US Units Mode Comprehensive Workflow"
DESCRIPTION = "US-unit calculation and equivalent metric calculation both succeed"

US = Profile.us("28", Gender.FEMALE, "5", "6", "140", ActivityLevel.LIGHT)
METRIC = Profile.metric("28", Gender.FEMALE, "168", "63.5", ActivityLevel.LIGHT)


def run(page) -> ScenarioOutcome:
    us_result = page.calculate(US, switch_units=True)
    metric_result = page.calculate(METRIC, full_reload=True, switch_units=True)

    outcome = ScenarioOutcome(
        scenario_id=ID,
        title=TITLE,
        passed=checks.has_result(us_result) and checks.has_result(metric_result),
    )
    if outcome.passed:
        outcome.summary = "US units mode comprehensive workflow successful"
        outcome.details.append("Both US Imperial and Metric units calculations completed")
    else:
        outcome.summary = "US units workflow failed"
        outcome.details.append(checks.describe(US.label(), us_result))
        outcome.details.append(checks.describe(METRIC.label(), metric_result))
    return outcome
