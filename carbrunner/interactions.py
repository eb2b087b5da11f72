"""Form interaction primitives with a native-then-script fallback.

Real pages sometimes reject native events on elements that are present but
not yet interactable (covered, hidden by the current unit tab, mid-layout).
Each helper therefore runs a FallbackPolicy: the native Selenium action
first, and on a capability error the same effect injected by script. Only
a failure of the script path propagates.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    InvalidElementStateException,
    MoveTargetOutOfBoundsException,
    StaleElementReferenceException,
)
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import Select

from carbrunner.session import DriverSession

T = TypeVar("T")

Locator = tuple[str, str]

# Errors meaning "the native action is not available right now".
CAPABILITY_ERRORS: tuple[type[Exception], ...] = (
    ElementNotInteractableException,
    ElementClickInterceptedException,
    InvalidElementStateException,
    StaleElementReferenceException,
    MoveTargetOutOfBoundsException,
)

# Pause between scrolling a control into view and clicking it.
CLICK_SETTLE_S = 0.1

_SCROLL_INTO_VIEW = "arguments[0].scrollIntoView({behavior: 'instant', block: 'center'});"


@dataclass
class FallbackPolicy(Generic[T]):
    """Two strategies for one interaction.

    `secondary` runs only when `primary` raises one of `recoverable`; any
    other error from `primary`, and every error from `secondary`, propagates.
    """

    name: str
    primary: Callable[[], T]
    secondary: Callable[[], T]
    recoverable: tuple[type[Exception], ...] = CAPABILITY_ERRORS

    def run(self, on_fallback: Optional[Callable[[str, Exception], None]] = None) -> T:
        try:
            return self.primary()
        except self.recoverable as exc:
            if on_fallback:
                on_fallback(self.name, exc)
            return self.secondary()


class FormHelpers:
    """Generic field/dropdown/click primitives bound to one DriverSession."""

    def __init__(self, session: DriverSession) -> None:
        self.session = session

    def _note_fallback(self, name: str, exc: Exception) -> None:
        self.session.console.print(
            f"  [dim]{name}: native action unavailable ({type(exc).__name__}), using script[/dim]"
        )

    def find(self, locator: Locator) -> WebElement:
        return self.session.require_driver().find_element(*locator)

    def set_field_value(self, locator: Locator, text: str) -> WebElement:
        """Clear a field and type text, or assign its value by script."""
        driver = self.session.require_driver()
        element = self.find(locator)

        def native() -> None:
            element.clear()
            element.send_keys(text)

        def scripted() -> None:
            driver.execute_script("arguments[0].value = arguments[1];", element, text)

        FallbackPolicy("set_field_value", native, scripted).run(self._note_fallback)
        return element

    def select_option(self, locator: Locator, value: str) -> None:
        """Choose the dropdown option whose value matches exactly.

        Raises NoSuchElementException when no option carries that value.
        """
        Select(self.find(locator)).select_by_value(value)

    def click_control(self, locator: Locator) -> WebElement:
        """Scroll a control to the viewport center and click it."""
        driver = self.session.require_driver()
        element = self.find(locator)
        driver.execute_script(_SCROLL_INTO_VIEW, element)
        time.sleep(CLICK_SETTLE_S)

        def scripted() -> None:
            driver.execute_script("arguments[0].click();", element)

        FallbackPolicy("click_control", element.click, scripted).run(self._note_fallback)
        return element

    def check_radio(self, locator: Locator) -> WebElement:
        """Mark a radio or checkbox as checked by script."""
        element = self.find(locator)
        self.session.require_driver().execute_script("arguments[0].checked = true;", element)
        return element

    def press_tab(self, locator: Locator) -> None:
        """Move focus off a field so its change/blur handlers fire."""
        self.find(locator).send_keys(Keys.TAB)
