"""Browser session lifecycle for carbrunner runs.

One DriverSession owns one Chrome instance for the whole run. Scenarios share
it, so between scenarios the session resets page state instead of reloading:

    NotLoaded --ensure_ready()--> Loaded   (full navigation + readiness wait)
    Loaded    --ensure_ready()--> Loaded   (clear age + gender in place)
    Loaded    --invalidate()----> NotLoaded
"""

from __future__ import annotations

from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from carbrunner.environment import build_chrome_options, build_chrome_service
from carbrunner.models import error_message

CALCULATOR_URL = "https://www.calculator.net/carbohydrate-calculator.html"
DEFAULT_TIMEOUT_S = 8.0

# Present once the calculator form has rendered.
READY_LOCATOR = (By.NAME, "cage")

# Fields cleared by the in-place reset.
_RESET_VALUE_LOCATORS = ((By.NAME, "cage"),)
_RESET_CHECKED_LOCATORS = ((By.ID, "csex1"), (By.ID, "csex2"))

DriverFactory = Callable[[ChromeOptions, Optional[ChromeService]], WebDriver]


class SessionStartError(RuntimeError):
    """Raised when the browser cannot be launched."""


def _chrome_factory(options: ChromeOptions, service: Optional[ChromeService]) -> WebDriver:
    if service is None:
        return webdriver.Chrome(options=options)
    return webdriver.Chrome(options=options, service=service)


def document_complete(driver: WebDriver) -> bool:
    """Wait condition: the document reports full readiness."""
    return driver.execute_script("return document.readyState") == "complete"


class DriverSession:
    """A single browser session plus the calculator page's load state."""

    def __init__(
        self,
        console: Console,
        headless: bool = False,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        driver_path: Optional[str] = None,
        driver_factory: Optional[DriverFactory] = None,
    ) -> None:
        self.console = console
        self.headless = headless
        self.timeout_s = timeout_s
        self.driver_path = driver_path
        self._factory = driver_factory or _chrome_factory
        self.driver: Optional[WebDriver] = None
        self.page_loaded = False
        self.navigations = 0

    # ---- lifecycle ---------------------------------------------------------

    def start(self) -> WebDriver:
        """Launch the browser.

        Raises:
            SessionStartError: the browser or chromedriver could not start.
                Any half-created handle is released first.
        """
        if self.driver is not None:
            return self.driver

        options = build_chrome_options(self.headless)
        service = build_chrome_service(self.driver_path)
        try:
            self.driver = self._factory(options, service)
            if not self.headless:
                self.driver.maximize_window()
        except (WebDriverException, OSError) as exc:
            self.stop()
            raise SessionStartError(error_message(exc)) from exc

        self.console.print("WebDriver initialized successfully")
        return self.driver

    def stop(self) -> None:
        """Quit the browser. Safe to call repeatedly or after a failed start."""
        if self.driver is None:
            return
        driver, self.driver = self.driver, None
        self.page_loaded = False
        try:
            driver.quit()
        except Exception as exc:
            # chromedriver may already be gone; the handle is dropped either way
            self.console.print(f"[yellow]WebDriver did not quit cleanly:[/yellow] {escape(error_message(exc))}")
            return
        self.console.print("WebDriver closed successfully")

    def __enter__(self) -> DriverSession:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    # ---- helpers -----------------------------------------------------------

    def require_driver(self) -> WebDriver:
        if self.driver is None:
            raise RuntimeError("Browser session is not running; call start() first")
        return self.driver

    def wait(self, timeout: Optional[float] = None) -> WebDriverWait:
        """Bounded poll against the live driver; timeout raises TimeoutException."""
        return WebDriverWait(self.require_driver(), timeout if timeout is not None else self.timeout_s)

    @property
    def page_source(self) -> str:
        return self.require_driver().page_source

    def scroll_to_top(self) -> None:
        self.require_driver().execute_script("window.scrollTo(0, 0);")

    # ---- page state --------------------------------------------------------

    def ensure_ready(self) -> None:
        """Bring the calculator form to a fillable state.

        The first call (or the first after invalidate()) navigates to the
        calculator and waits for the form and document readiness. Later calls
        only clear the age field and both gender radios in place.
        """
        driver = self.require_driver()
        if not self.page_loaded:
            self.console.print(f"  [dim]Loading {CALCULATOR_URL}[/dim]")
            driver.get(CALCULATOR_URL)
            self.navigations += 1
            wait = self.wait()
            wait.until(EC.presence_of_element_located(READY_LOCATOR), "calculator form did not load")
            wait.until(document_complete, "calculator page never finished loading")
            self.page_loaded = True
        else:
            self.console.print("  [dim]Resetting form in place[/dim]")
            for locator in _RESET_VALUE_LOCATORS:
                driver.execute_script("arguments[0].value = '';", driver.find_element(*locator))
            for locator in _RESET_CHECKED_LOCATORS:
                driver.execute_script("arguments[0].checked = false;", driver.find_element(*locator))
        self.scroll_to_top()

    def invalidate(self) -> None:
        """Force the next ensure_ready() to perform a full navigation."""
        self.page_loaded = False
