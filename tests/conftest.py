"""Shared fixtures: an in-memory stand-in for the calculator page.

FakeDriver imitates the parts of calculator.net's carbohydrate calculator
the suite touches: named fields, gender radios, the activity dropdown,
the unit tabs (hiding the other mode's fields), inline age validation,
and a submit that re-renders the page with a result or an error. Every
submit or navigation bumps a generation counter so elements found
earlier go stale, like a real page reload.
"""

from __future__ import annotations

import io

import pytest
from rich.console import Console
from selenium.common.exceptions import (
    ElementNotInteractableException,
    NoSuchElementException,
    StaleElementReferenceException,
    UnexpectedTagNameException,
    WebDriverException,
)
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys

from carbrunner.page import CalculatorPage
from carbrunner.session import DriverSession

ACTIVITY_OPTIONS = ("1", "1.2", "1.375", "1.465", "1.55", "1.725", "1.9")

_METRIC_FIELDS = {"cheightmeter", "ckg"}
_US_FIELDS = {"cheightfeet", "cheightinch", "cpound"}
_NAMES = {"cage", "cheightmeter", "ckg", "cheightfeet", "cheightinch", "cpound", "cactivity", "x"}
_IDS = {"cage", "csex1", "csex2"}
_LINKS = {"US Units": "us", "Metric Units": "metric"}


class FakeElement:
    """Handle to one control of the stand-in page."""

    def __init__(self, driver: FakeDriver, key: str, kind: str) -> None:
        self._driver = driver
        self.key = key
        self.kind = kind  # "field", "radio", "select", "submit", "link"
        self._generation = driver.generation

    def _check_fresh(self) -> None:
        if self._generation != self._driver.generation:
            raise StaleElementReferenceException(f"stale element: {self.key}")

    def _check_interactable(self) -> None:
        if not self.is_displayed():
            raise ElementNotInteractableException(f"element not interactable: {self.key}")

    @property
    def tag_name(self) -> str:
        return {"select": "select", "link": "a"}.get(self.kind, "input")

    def is_displayed(self) -> bool:
        self._check_fresh()
        return self._driver.is_visible(self.key)

    def is_enabled(self) -> bool:
        self._check_fresh()
        return True

    def clear(self) -> None:
        self._check_fresh()
        self._check_interactable()
        self._driver.fields[self.key] = ""

    def send_keys(self, *values: str) -> None:
        self._check_fresh()
        text = "".join(values)
        if Keys.TAB in text:
            self._driver.on_blur(self.key)
            return
        self._check_interactable()
        self._driver.fields[self.key] = self._driver.fields.get(self.key, "") + text

    def click(self) -> None:
        self._check_fresh()
        self._check_interactable()
        self._driver.activate(self)

    def select_value(self, value: str) -> None:
        self._check_fresh()
        if value not in ACTIVITY_OPTIONS:
            raise NoSuchElementException(f"Cannot locate option with value: {value}")
        self._driver.fields[self.key] = value


class FakeSelect:
    """Stand-in for selenium's Select over FakeElement dropdowns."""

    def __init__(self, element: FakeElement) -> None:
        if element.tag_name != "select":
            raise UnexpectedTagNameException(f"Select only works on <select> elements, not on {element.tag_name}")
        self._el = element

    def select_by_value(self, value: str) -> None:
        self._el.select_value(value)


class FakeDriver:
    """Minimal WebDriver over a deterministic calculator page."""

    def __init__(self, missing: tuple[str, ...] = ()) -> None:
        self.url: str | None = None
        self.generation = 0
        self.navigations = 0
        self.scrolls_to_top = 0
        self.scripted_values: list[str] = []
        self.quit_called = False
        self.maximized = False
        self.missing = set(missing)
        self._load_defaults()

    def _load_defaults(self) -> None:
        self.units = "metric"
        self.fields = {
            "cage": "25",
            "cheightmeter": "180",
            "ckg": "65",
            "cheightfeet": "5",
            "cheightinch": "10",
            "cpound": "160",
            "cactivity": "1.465",
        }
        self.checked = {"csex1": True, "csex2": False}
        self.inline_error: str | None = None
        self.result_html = ""

    # ---- WebDriver surface -------------------------------------------------

    def get(self, url: str) -> None:
        self.url = url
        self.navigations += 1
        self.generation += 1
        self._load_defaults()

    def maximize_window(self) -> None:
        self.maximized = True

    def quit(self) -> None:
        self.quit_called = True

    def find_element(self, by: str = By.ID, value: str | None = None) -> FakeElement:
        if self.url is None or value in self.missing:
            raise NoSuchElementException(f"no such element: {by}={value}")
        if by == By.NAME and value in _NAMES:
            kind = {"cactivity": "select", "x": "submit"}.get(value, "field")
            return FakeElement(self, value, kind)
        if by == By.ID and value in _IDS:
            return FakeElement(self, value, "radio" if value.startswith("csex") else "field")
        if by == By.LINK_TEXT and value in _LINKS:
            return FakeElement(self, value, "link")
        raise NoSuchElementException(f"no such element: {by}={value}")

    def execute_script(self, script: str, *args):
        for arg in args:
            if isinstance(arg, FakeElement):
                arg._check_fresh()
        if script == "return document.readyState":
            return "complete"
        if script == "window.scrollTo(0, 0);":
            self.scrolls_to_top += 1
            return None
        if script.startswith("arguments[0].scrollIntoView"):
            return None
        if script == "arguments[0].value = arguments[1];":
            self.fields[args[0].key] = args[1]
            self.scripted_values.append(args[0].key)
            return None
        if script == "arguments[0].value = '';":
            self.fields[args[0].key] = ""
            return None
        if script in ("arguments[0].checked = true;", "arguments[0].checked = false;"):
            state = script.endswith("true;")
            if state:
                # radio group: checking one unchecks the other
                for key in self.checked:
                    self.checked[key] = False
            self.checked[args[0].key] = state
            return None
        if script == "arguments[0].click();":
            self.activate(args[0])
            return None
        raise WebDriverException(f"unsupported script: {script}")

    @property
    def page_source(self) -> str:
        parts = ["<html><head><title>Carbohydrate Calculator</title></head><body>", "<form>"]
        if self.inline_error:
            parts.append(f'<div class="inputErrMsg">{self.inline_error}</div>')
        parts.append("</form>")
        parts.append(self.result_html)
        parts.append("</body></html>")
        return "".join(parts)

    # ---- page behaviour ----------------------------------------------------

    def is_visible(self, key: str) -> bool:
        if key in _METRIC_FIELDS:
            return self.units == "metric"
        if key in _US_FIELDS:
            return self.units == "us"
        return True

    def on_blur(self, key: str) -> None:
        if key == "cage" and not _is_number(self.fields.get("cage", "")):
            self.inline_error = "Please provide positive numbers only."

    def activate(self, element: FakeElement) -> None:
        if element.kind == "link":
            self.units = _LINKS[element.key]
        elif element.kind == "submit":
            self.submit()

    def submit(self) -> None:
        self.generation += 1
        self.inline_error = None
        self.result_html = self._render_result()

    def _render_result(self) -> str:
        f = self.fields
        if not all(_is_number(f.get(k, "")) for k in ("cage",)):
            return "<p class='err'>Please provide a valid age.</p>"
        age = float(f["cage"])
        if self.units == "us":
            values = (f["cheightfeet"], f["cheightinch"], f["cpound"])
            if not all(_is_number(v) for v in values):
                return "<p class='err'>Please provide valid height and weight.</p>"
            height_cm = (float(values[0]) * 12 + float(values[1])) * 2.54
            weight_kg = float(values[2]) * 0.45359237
        else:
            if not (_is_number(f["cheightmeter"]) and _is_number(f["ckg"])):
                return "<p class='err'>Please provide valid height and weight.</p>"
            height_cm = float(f["cheightmeter"])
            weight_kg = float(f["ckg"])
        if not 18 <= age <= 80:
            return "<p class='err'>Please provide an age between 18 and 80.</p>"
        if weight_kg <= 0:
            return "<p class='err'>Please provide positive weight value.</p>"
        if not any(self.checked.values()):
            return "<p class='err'>Please select a sex.</p>"
        offset = 5 if self.checked["csex1"] else -161
        bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age + offset
        calories = bmr * float(f["cactivity"])
        low, high = round(calories * 0.40 / 4), round(calories * 0.65 / 4)
        return (
            '<h2 class="h2result">Result</h2>'
            f"<p>{low:,} - {high:,} grams of carbohydrate per day</p>"
        )


class RefusingDriver(FakeDriver):
    """Page that refuses ages outside 18-80 client-side instead of posting."""

    def submit(self) -> None:
        age = self.fields.get("cage", "")
        if _is_number(age) and not 18 <= float(age) <= 80:
            self.inline_error = "Please provide an age between 18 and 80."
            return
        super().submit()


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


# ---- fixtures --------------------------------------------------------------

@pytest.fixture(autouse=True)
def fake_select(monkeypatch):
    """Route dropdown selection through FakeSelect."""
    monkeypatch.setattr("carbrunner.interactions.Select", FakeSelect)


@pytest.fixture(autouse=True)
def no_click_settle(monkeypatch):
    monkeypatch.setattr("carbrunner.interactions.CLICK_SETTLE_S", 0)


@pytest.fixture
def console():
    """Console writing into a buffer; read it back with console.file.getvalue()."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def driver():
    return FakeDriver()


@pytest.fixture
def session(console, driver):
    s = DriverSession(console, timeout_s=1.0, driver_factory=lambda options, service: driver)
    s.start()
    yield s
    s.stop()


@pytest.fixture
def page(session):
    return CalculatorPage(session)


@pytest.fixture
def refusing_page(console):
    """CalculatorPage over a RefusingDriver with a short wait bound."""
    s = DriverSession(console, timeout_s=0.3, driver_factory=lambda options, service: RefusingDriver())
    s.start()
    yield CalculatorPage(s)
    s.stop()
