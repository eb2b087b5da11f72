"""Page object for the calculator.net carbohydrate calculator."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC

from carbrunner import checks
from carbrunner.interactions import FormHelpers
from carbrunner.models import Profile, UnitSystem
from carbrunner.session import DriverSession, document_complete

AGE = (By.NAME, "cage")
HEIGHT_CM = (By.NAME, "cheightmeter")
WEIGHT_KG = (By.NAME, "ckg")
HEIGHT_FT = (By.NAME, "cheightfeet")
HEIGHT_IN = (By.NAME, "cheightinch")
WEIGHT_LB = (By.NAME, "cpound")
ACTIVITY = (By.NAME, "cactivity")
SUBMIT = (By.NAME, "x")

# Visible only while the form is in the matching unit mode.
_UNIT_MARKER = {
    UnitSystem.METRIC: HEIGHT_CM,
    UnitSystem.US: HEIGHT_FT,
}

# Upper bound for inline validation to appear after leaving a field.
VALIDATION_PROBE_S = 1.5


class CalculatorPage:
    """User-level actions on the calculator form."""

    def __init__(self, session: DriverSession, helpers: FormHelpers | None = None) -> None:
        self.session = session
        self.helpers = helpers or FormHelpers(session)

    @property
    def console(self) -> Console:
        return self.session.console

    @property
    def source(self) -> str:
        return self.session.page_source

    def ready(self, full_reload: bool = False) -> None:
        """Reset the form; full_reload forces a fresh navigation."""
        if full_reload:
            self.session.invalidate()
        self.session.ensure_ready()
        self.session.wait().until(EC.presence_of_element_located(AGE), "age field not present")

    def use_units(self, units: UnitSystem) -> None:
        """Switch the form to a unit-entry mode via its tab link."""
        link = (By.LINK_TEXT, units.link_text)
        self.session.wait().until(EC.element_to_be_clickable(link), f"{units.link_text} link not clickable")
        self.helpers.click_control(link)
        self.session.wait().until(
            EC.visibility_of_element_located(_UNIT_MARKER[units]), f"form did not switch to {units.link_text}"
        )

    def fill(self, profile: Profile) -> None:
        """Populate every field of the profile.

        Does not switch unit mode; fields of the hidden mode are set through
        the script fallback.
        """
        h = self.helpers
        h.set_field_value(AGE, profile.age)
        h.check_radio((By.ID, profile.gender.value))
        if profile.units is UnitSystem.US:
            h.set_field_value(HEIGHT_FT, profile.height_ft)
            h.set_field_value(HEIGHT_IN, profile.height_in)
            h.set_field_value(WEIGHT_LB, profile.weight_lb)
        else:
            h.set_field_value(HEIGHT_CM, profile.height_cm)
            h.set_field_value(WEIGHT_KG, profile.weight_kg)
        h.select_option(ACTIVITY, profile.activity.value)

    def compute(self, expect_reload: bool = True) -> str:
        """Submit the form and return the page source afterwards.

        The form posts back to the same URL, so the old submit control going
        stale marks the new page. With expect_reload False the page may
        refuse the input without posting; the source is then captured as-is
        once the wait runs out. Otherwise a missing reload raises
        TimeoutException.
        """
        submit = self.helpers.click_control(SUBMIT)
        wait = self.session.wait()
        try:
            wait.until(EC.staleness_of(submit), "form submit did not re-render the page")
        except TimeoutException:
            if expect_reload:
                raise
            self.console.print("  [dim]Submit was not posted; reading the current page[/dim]")
            return self.source
        wait.until(document_complete, "result page never finished loading")
        return self.source

    def calculate(
        self,
        profile: Profile,
        full_reload: bool = False,
        switch_units: bool = False,
        expect_reload: bool = True,
    ) -> str:
        """Reset, fill and compute one profile; returns the result page source."""
        self.ready(full_reload=full_reload)
        if switch_units:
            self.use_units(profile.units)
        self.fill(profile)
        source = self.compute(expect_reload=expect_reload)
        self.console.print(f"  [dim]{escape(checks.describe(profile.label(), source))}[/dim]")
        return source

    def probe_validation(self, timeout: float = VALIDATION_PROBE_S) -> bool:
        """Leave the age field and report whether validation wording shows up."""
        self.helpers.press_tab(AGE)
        try:
            self.session.wait(timeout).until(lambda d: checks.shows_validation(d.page_source))
        except TimeoutException:
            return False
        return True
