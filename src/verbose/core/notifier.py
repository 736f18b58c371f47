# verbose/core/notifier.py
"""User-facing CLI notices. These are always shown and go to stderr."""

import typer
from rich.console import Console

console = Console(stderr=True)


def error(message: str, exit_on_error: bool = False, icon: str = "❌ ", code: int = 1):
    """CLI error notice; raises typer.Exit(code) when exit_on_error is set."""
    console.print(f"{icon} {message}", markup=False, style="bold red")
    if exit_on_error:
        raise typer.Exit(code=code)


def warning(message: str, icon: str = "⚠️"):
    """CLI warning notice."""
    console.print(f"{icon} {message}", markup=False, style="bold yellow")
