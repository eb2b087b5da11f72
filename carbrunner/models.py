"""Data models for the carbrunner UI test suite.

Typed structures for carbrunner: form enums, Profile, ScenarioOutcome and
RunSummary. They flow from the scenarios through the runner to the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

_SELENIUM_PREFIX = "Message:"


def error_message(exc: BaseException) -> str:
    """First line of an exception's message, or its type name when it has none."""
    # WebDriverException keeps the driver's message in .msg; str() adds a stacktrace
    text = (getattr(exc, "msg", None) or str(exc)).strip()
    first = text.splitlines()[0].strip() if text else ""
    if first.startswith(_SELENIUM_PREFIX):
        first = first[len(_SELENIUM_PREFIX):].strip()
    return first or type(exc).__name__


class Gender(str, Enum):
    """Gender radio controls, keyed by element id."""

    MALE = "csex1"
    FEMALE = "csex2"


class UnitSystem(str, Enum):
    """Unit-entry modes offered by the calculator."""

    METRIC = "metric"
    US = "us"

    @property
    def link_text(self) -> str:
        """Text of the tab link that switches the form into this mode."""
        return "Metric Units" if self is UnitSystem.METRIC else "US Units"


class ActivityLevel(str, Enum):
    """Activity dropdown options, keyed by their multiplier value."""

    SEDENTARY = "1.2"
    LIGHT = "1.375"
    MODERATE = "1.55"
    ACTIVE = "1.725"
    VERY_ACTIVE = "1.9"


@dataclass
class Profile:
    """One set of form inputs submitted to the calculator.

    Values are kept as strings: some scenarios deliberately type text the
    page should reject ("abc", "-50").
    """

    age: str
    gender: Gender
    activity: ActivityLevel = ActivityLevel.MODERATE
    units: UnitSystem = UnitSystem.METRIC
    height_cm: str = ""
    weight_kg: str = ""
    height_ft: str = ""
    height_in: str = ""
    weight_lb: str = ""

    @classmethod
    def metric(
        cls,
        age: str,
        gender: Gender,
        height_cm: str,
        weight_kg: str,
        activity: ActivityLevel = ActivityLevel.MODERATE,
    ) -> Profile:
        return cls(
            age=age,
            gender=gender,
            activity=activity,
            units=UnitSystem.METRIC,
            height_cm=height_cm,
            weight_kg=weight_kg,
        )

    @classmethod
    def us(
        cls,
        age: str,
        gender: Gender,
        height_ft: str,
        height_in: str,
        weight_lb: str,
        activity: ActivityLevel = ActivityLevel.MODERATE,
    ) -> Profile:
        return cls(
            age=age,
            gender=gender,
            activity=activity,
            units=UnitSystem.US,
            height_ft=height_ft,
            height_in=height_in,
            weight_lb=weight_lb,
        )

    def label(self) -> str:
        """Short human-readable description, e.g. '30/M 175cm 75kg @1.2'."""
        sex = "M" if self.gender is Gender.MALE else "F"
        if self.units is UnitSystem.US:
            body = f"{self.height_ft}ft{self.height_in}in {self.weight_lb}lb"
        else:
            body = f"{self.height_cm}cm {self.weight_kg}kg"
        return f"{self.age}/{sex} {body} @{self.activity.value}"


@dataclass
class ScenarioOutcome:
    """Verdict of a single scenario run."""

    scenario_id: str
    title: str
    passed: bool = False
    summary: str = ""
    details: list[str] = field(default_factory=list)
    error: Optional[str] = None
    elapsed_s: float = 0.0

    @property
    def verdict(self) -> str:
        return "PASSED" if self.passed else "FAILED"

    @classmethod
    def from_error(cls, scenario_id: str, title: str, exc: BaseException) -> ScenarioOutcome:
        """Failed outcome for a scenario that raised."""
        message = error_message(exc)
        return cls(
            scenario_id=scenario_id,
            title=title,
            passed=False,
            summary=f"Exception occurred - {message}",
            error=message,
        )


@dataclass
class RunSummary:
    """Pass/fail totals across every scenario of one run."""

    outcomes: list[ScenarioOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def pass_rate(self) -> Optional[float]:
        """Percentage of passed scenarios, None when nothing ran."""
        if self.total == 0:
            return None
        return self.passed * 100.0 / self.total

    @property
    def verdict(self) -> str:
        if self.total == 0:
            return "no-tests"
        if self.failed == 0:
            return "pass"
        return "fail"
