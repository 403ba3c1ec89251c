"""
Command-line interface for exprcalc.

    exprcalc            read one expression from stdin and print its value
    exprcalc test       run the built-in self-test suite
"""

import sys
from typing import List, Optional

import typer
from rich.console import Console

from exprcalc.calculator import Calculator
from exprcalc.config import settings
from exprcalc.errors import CalculatorError
from exprcalc.logging_setup import configure_logging
from exprcalc.selftest import run_self_test

app = typer.Typer(
    name="exprcalc",
    help="Evaluate arithmetic expressions with + - * / and parentheses.",
    add_completion=False,
)

console = Console(highlight=False, soft_wrap=True)


@app.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def main(
    args: Optional[List[str]] = typer.Argument(None, help="Pass 'test' to run the self-test suite"),
):
    """Evaluate an expression read from stdin, or run the self-test suite."""
    configure_logging(settings.log_level)
    args = args or []

    if len(args) > 1:
        console.print("Too many parametres", markup=False)
        return
    if not args:
        _run_calculator()
    elif args[0] == "test":
        _run_tests()
    else:
        console.print("Unknown parameter", markup=False)


# =============================================================================
# Helpers
# =============================================================================

def _run_calculator() -> None:
    """Evaluate a single line from stdin."""
    calculator = Calculator(settings)
    line = sys.stdin.readline().rstrip("\r\n")

    try:
        result = calculator.calculate(line)
    except CalculatorError as e:
        console.print(str(e), end="", markup=False)
        return

    console.print(calculator.format_result(result), markup=False)


def _run_tests() -> None:
    """Run the self-test suite and print one line per case."""
    console.print("Running tests")
    report = run_self_test(Calculator(settings))

    for outcome in report.outcomes:
        if outcome.passed:
            console.print(f"[green]Passed test: {outcome.index}[/]")
        else:
            console.print(f"[red]Failed test: {outcome.index}[/]")

    console.print()
    if report.all_passed:
        console.print("[bold green]All tests passed![/]")
    else:
        console.print(f"[bold red]Failed {report.failed_count} tests[/]")


if __name__ == "__main__":
    app()
