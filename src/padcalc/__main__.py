"""Terminal front-end for padcalc.

Usage:
    python -m padcalc keys "2+3*4="          # Print the final display
    python -m padcalc keys "12{Backspace}" -t   # Show every step
    python -m padcalc repl                    # Read keystrokes line by line
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from padcalc.core import Calculator
from padcalc.keyboard import tokenize
from padcalc.models import CalculatorState

app = typer.Typer(
    name="padcalc",
    help="Two-operand keypad calculator",
    no_args_is_help=True,
)
console = Console(highlight=False)
err_console = Console(stderr=True)

QUIT_WORDS = {"q", "quit", "exit"}


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", envvar="PADCALC_LOG_LEVEL", help="Logging level"
    ),
) -> None:
    """Configure logging for every command."""
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        err_console.print(f"[red]Invalid log level: {log_level}[/red]")
        raise typer.Exit(2)
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def render(state: CalculatorState) -> Panel:
    """Two-line display: pending operand and operator above the value."""
    return Panel(
        f"[dim]{state.pending_line}[/dim]\n[bold]{state.current_value}[/bold]",
        title="padcalc",
        expand=False,
    )


@app.command("keys")
def cmd_keys(
    keystrokes: str = typer.Argument(help="Keys to press, e.g. '7+3=' or '12{Backspace}'"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Print the state after every key"),
) -> None:
    """Press keys on a fresh calculator and show the result."""
    calc = Calculator()

    if not trace:
        calc.type(keystrokes)
        console.print(render(calc.state))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Key", style="green")
    table.add_column("Pending")
    table.add_column("Display", justify="right")
    table.add_column("Overwrite", justify="center")

    for key in tokenize(keystrokes):
        if not calc.press(key):
            table.add_row(key, "[yellow]unbound[/yellow]", "", "")
            continue
        state = calc.state
        table.add_row(key, state.pending_line, state.current_value, "yes" if state.overwrite else "")

    console.print(table)


@app.command("repl")
def cmd_repl() -> None:
    """Read keystrokes line by line and show the display after each."""
    calc = Calculator()
    console.print(render(calc.state))

    for line in sys.stdin:
        if line.strip().lower() in QUIT_WORDS:
            break
        calc.type(line)
        console.print(render(calc.state))


if __name__ == "__main__":
    app()
