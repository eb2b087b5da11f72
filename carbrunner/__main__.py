"""CLI for the carbrunner UI test suite.

Usage:
    python -m carbrunner list                      # Show available scenarios
    python -m carbrunner run                       # Run TC001..TC006
    python -m carbrunner run --only TC003 -o TC004 # Run a subset
    python -m carbrunner run --headless            # No visible browser window
"""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from carbrunner.runner import run_suite
from carbrunner.scenarios import UnknownScenarioError, list_scenarios
from carbrunner.session import DEFAULT_TIMEOUT_S, SessionStartError

app = typer.Typer(
    name="carbrunner",
    help="End-to-end UI tests for the calculator.net carbohydrate calculator",
    no_args_is_help=True,
)
console = Console()


@app.command("list")
def cmd_list() -> None:
    """Show available scenarios."""
    scenarios = list_scenarios()
    if not scenarios:
        console.print("[yellow]No scenarios found.[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Available Scenarios", show_header=True, header_style="bold")
    table.add_column("ID", style="green", min_width=6)
    table.add_column("Title", min_width=30)
    table.add_column("Intent", min_width=30)

    for s in scenarios:
        table.add_row(s.id, s.title, s.description)

    console.print()
    console.print(table)
    console.print()


@app.command("run")
def cmd_run(
    only: Optional[List[str]] = typer.Option(None, "--only", "-o", help="Scenario ID to run (repeatable)"),
    headless: bool = typer.Option(False, "--headless", envvar="CARBRUNNER_HEADLESS", help="Run Chrome without a window"),
    timeout: float = typer.Option(DEFAULT_TIMEOUT_S, "--timeout", "-t", help="Upper bound in seconds for each page wait"),
    driver: Optional[str] = typer.Option(None, "--driver", envvar="CHROMEDRIVER", help="Path to a chromedriver binary"),
) -> None:
    """Run the scenarios against a live browser."""
    try:
        run_suite(
            console,
            only=only,
            headless=headless,
            timeout_s=timeout,
            driver_path=driver,
        )
    except UnknownScenarioError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
    except SessionStartError as exc:
        console.print(f"[red]Failed to initialize WebDriver:[/red] {escape(str(exc))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
