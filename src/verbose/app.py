# verbose/app.py
"""
Command-line front end: lets shell scripts emit gated diagnostics.

    verbose -v println info "everything is ok"
    VERBOSE_ON=1 verbose printf warning "value should be greater than %d" 10
"""

import os
import re
from datetime import datetime
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

import verbose
from verbose.core.config import load_verbosity
from verbose.core.emitter import FatalAssertion
from verbose.core.logger import set_verbosity
from verbose.core.messages import PREFIXES, MessageType
from verbose.core.notifier import error, warning
from verbose.core.version import read_local_version

app = typer.Typer(help="Print color-coded diagnostics only when verbose mode is on.")

TRUE_WORDS = {"1", "true", "yes", "y", "on", "ok"}
FALSE_WORDS = {"0", "false", "no", "n", "off", ""}

# One %-placeholder; group 1 is the conversion character
PLACEHOLDER = re.compile(r"%(?:\([^)]*\))?[#0+ -]*(?:\d+)?(?:\.\d+)?[hlL]?([a-zA-Z%])")
NUMERIC_CONVERSIONS = set("diouxXeEfFgGc")


def _parse_value(value: str):
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return value


def _bind(fmt: str, args: Optional[List[str]]) -> list:
    """Convert only the arguments that feed a numeric placeholder; the rest stay verbatim."""
    conversions = [m.group(1) for m in PLACEHOLDER.finditer(fmt) if m.group(1) != "%"]
    values = []
    for i, value in enumerate(args or []):
        conversion = conversions[i] if i < len(conversions) else "s"
        values.append(_parse_value(value) if conversion in NUMERIC_CONVERSIONS else value)
    return values


def _category(name: str) -> MessageType:
    try:
        return MessageType.parse(name)
    except ValueError as exc:
        error(str(exc), exit_on_error=True)


def _condition(word: str) -> bool:
    lowered = word.strip().lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    error(f"Invalid condition '{word}'. Use true/false, yes/no or 1/0.", exit_on_error=True)


def _line(fmt: str) -> str:
    return fmt if fmt.endswith("\n") else fmt + "\n"


def _version_callback(value: bool):
    if value:
        typer.echo(read_local_version())
        raise typer.Exit()


@app.callback()
def main(
    verbose_flag: bool = typer.Option(False, "--verbose", "-v", help="Turn verbose output on (also $VERBOSE_ON)."),
    debug_flag: bool = typer.Option(False, "--debug", "-d", help="Turn debug output on (also $VERBOSE_DEBUG)."),
    env_file: Optional[str] = typer.Option(None, "--env-file", help="Load VERBOSE_ON/VERBOSE_DEBUG from this .env file."),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
):
    if env_file and not os.path.exists(env_file):
        warning(f"Env file not found: {env_file}")
        env_file = None
    loaded = load_verbosity(env_file)
    set_verbosity(verbose=verbose_flag or loaded.verbose, debug=debug_flag or loaded.debug)


@app.command("println")
def println_cmd(
    category: str = typer.Argument(..., help="info, warning, alert, track or debug."),
    message: Optional[List[str]] = typer.Argument(None, help="Words of the message."),
):
    """Print the message words separated by spaces."""
    verbose.println(_category(category), *(message or []))


@app.command("printf")
def printf_cmd(
    category: str = typer.Argument(..., help="info, warning, alert, track or debug."),
    fmt: str = typer.Argument(..., metavar="FORMAT", help="printf-style format, e.g. 'took %d tries'."),
    args: Optional[List[str]] = typer.Argument(None, help="Values for the format placeholders."),
):
    """Print a printf-style formatted message."""
    verbose.printf(_category(category), _line(fmt), *_bind(fmt, args))


@app.command("debug")
def debug_cmd(
    fmt: str = typer.Argument(..., metavar="FORMAT"),
    args: Optional[List[str]] = typer.Argument(None),
):
    """Print a debug message (shown whenever debug mode is on)."""
    verbose.debug(fmt, *_bind(fmt, args))


@app.command("ensure")
def ensure_cmd(
    condition: str = typer.Argument(..., help="true/false, yes/no or 1/0."),
    fmt: str = typer.Argument(..., metavar="FORMAT"),
    args: Optional[List[str]] = typer.Argument(None),
):
    """Fail with exit code 2 and an alert message if CONDITION is false."""
    try:
        verbose.ensure(_condition(condition), fmt, *_bind(fmt, args))
    except FatalAssertion as exc:
        error(str(exc), exit_on_error=True, code=2)


@app.command("track")
def track_cmd(
    start: float = typer.Argument(..., help="Start time as a UNIX timestamp (e.g. $(date +%s.%N))."),
    fmt: str = typer.Argument(..., metavar="FORMAT"),
    args: Optional[List[str]] = typer.Argument(None),
):
    """Print a message with the time elapsed since START."""
    verbose.track(datetime.fromtimestamp(start), fmt, *_bind(fmt, args))


@app.command("categories")
def categories_cmd():
    """List message categories and their prefixes."""
    table = Table(title="Message categories")
    table.add_column("Category", style="bold")
    table.add_column("Prefix")
    table.add_column("Shown when")
    for msgtype in MessageType:
        shown = "verbose or debug" if msgtype is MessageType.DEBUG else "verbose"
        table.add_row(msgtype.name.lower(), Text.from_ansi(PREFIXES[msgtype]), shown)
    Console().print(table)


if __name__ == "__main__":
    app()
