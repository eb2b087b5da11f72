"""Browser launch configuration for carbrunner sessions.

Each builder returns an object ready to hand to webdriver.Chrome().
"""

from __future__ import annotations

from typing import Optional

from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService

# Stability flags for automated runs against a third-party page.
_STABILITY_ARGS = (
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-extensions",
    "--remote-allow-origins=*",
    "--disable-blink-features=AutomationControlled",
    "--start-maximized",
    "--disable-images",
    "--disable-plugins",
)

# Headless Chrome ignores --start-maximized, so the window gets a fixed size.
_HEADLESS_ARGS = (
    "--headless=new",
    "--window-size=1920,1080",
)


def build_chrome_options(headless: bool = False) -> ChromeOptions:
    """Build Chrome options with the stability flags applied.

    Also hides the "controlled by automated test software" banner and the
    automation extension, which some sites treat differently.

    Args:
        headless: Run without a visible window (CI, containers).
    """
    options = ChromeOptions()
    for arg in _STABILITY_ARGS:
        options.add_argument(arg)
    if headless:
        for arg in _HEADLESS_ARGS:
            options.add_argument(arg)
    options.add_experimental_option("useAutomationExtension", False)
    options.add_experimental_option("excludeSwitches", ["enable-automation"])
    return options


def build_chrome_service(driver_path: Optional[str] = None) -> Optional[ChromeService]:
    """Build a chromedriver Service for an explicit driver binary.

    Returns None when no path is given, letting Selenium Manager resolve
    a matching chromedriver itself.
    """
    if not driver_path:
        return None
    return ChromeService(executable_path=driver_path)
