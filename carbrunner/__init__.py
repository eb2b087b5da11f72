"""carbrunner: end-to-end UI tests for an online carbohydrate calculator.

Drives https://www.calculator.net/carbohydrate-calculator.html through
Selenium, runs six scripted scenarios (TC001-TC006) against one shared
browser session and prints a pass/fail summary.

Usage:
    python -m carbrunner list            # Show scenarios
    python -m carbrunner run             # Run all of them
    python -m carbrunner run -o TC003    # Run one
"""
