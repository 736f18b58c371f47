# verbose/core/emitter.py
"""
Gated, prefixed console output.

An Emitter writes a message only when its VerbosityState allows the
message category. Every line starts with the category prefix from
verbose.core.messages; TRACK lines also carry a timestamp.

Usage:
    emitter = Emitter()
    emitter.state.verbose = True
    emitter.println(MessageType.INFO, "everything is ok")
    emitter.printf(MessageType.WARNING, "value should be greater than %d\\n", value)
"""

import time
from collections.abc import Mapping
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Optional

from rich.console import Console

from verbose.core.durations import format_duration
from verbose.core.logger import VerbosityState
from verbose.core.messages import PREFIXES, TIMESTAMP_FORMAT, MessageType


class FatalAssertion(AssertionError):
    """Raised by Emitter.ensure. Signals a broken invariant; not meant to be caught."""


def render(template: str, params: tuple) -> str:
    """Apply printf-style formatting, marking errors inline instead of raising."""
    values: Any = params
    if len(params) == 1 and isinstance(params[0], Mapping):
        values = params[0]
    try:
        return template % values
    except (TypeError, ValueError, KeyError) as exc:
        return f"{template}%!({type(exc).__name__}: {exc})"


def _join(operands: list) -> str:
    # Space only between two adjacent non-string operands
    out = []
    for i, value in enumerate(operands):
        if i and not isinstance(value, str) and not isinstance(operands[i - 1], str):
            out.append(" ")
        out.append(str(value))
    return "".join(out)


def timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class Emitter:
    def __init__(self, state: Optional[VerbosityState] = None, console: Optional[Console] = None):
        self.state = state if state is not None else VerbosityState()
        self.console = console or Console()

    def enabled(self, msgtype: MessageType) -> bool:
        return self.state.allows(msgtype)

    def _out(self, text: str, end: str = "\n"):
        # Raw write: control characters (\r, \b, ...) must reach the stream as given
        file = self.console.file
        file.write(text + end)
        file.flush()

    def _operands(self, msgtype: MessageType, params: tuple) -> list:
        operands = [PREFIXES[msgtype]]
        if msgtype is MessageType.TRACK:
            operands.append(timestamp())
        operands.extend(params)
        return operands

    def println(self, msgtype: MessageType, *params):
        """Write the operands separated by spaces, followed by a newline."""
        if not self.enabled(msgtype):
            return
        self._out(" ".join(str(p) for p in self._operands(msgtype, params)))

    def write(self, msgtype: MessageType, *params):
        """Write the operands without a newline.

        A space is added between operands only when neither is a string.
        """
        if not self.enabled(msgtype):
            return
        self._out(_join(self._operands(msgtype, params)), end="")

    def printf(self, msgtype: MessageType, fmt: str, *params):
        """Write a %-formatted message after the prefix. No newline is added."""
        if not self.enabled(msgtype):
            return
        head = PREFIXES[msgtype] + " "
        if msgtype is MessageType.TRACK:
            head += timestamp()
        self._out(render(head + fmt, params), end="")

    def printf_if(self, condition: bool, msgtype: MessageType, fmt: str, *params):
        if condition:
            self.printf(msgtype, fmt, *params)

    def error(self, context: str, err: Optional[BaseException]) -> Optional[BaseException]:
        """Report err as an ALERT when verbose, then hand it back unchanged.

        Meant for return/raise sites:
            raise emitter.error("load config", exc)
        """
        if err is not None and self.state.verbose:
            self._out(f"{PREFIXES[MessageType.ALERT]} [{context}] {err}")
        return err

    def ensure(self, ok: bool, fmt: str, *params):
        """Raise FatalAssertion with the formatted ALERT message if ok is false.

        Ignores the verbosity flags.
        """
        if not ok:
            raise FatalAssertion(render(PREFIXES[MessageType.ALERT] + " " + fmt, params))

    def track(self, start, fmt: str, *params):
        """Write the message with the time elapsed since start.

        start is a time.monotonic() reading, or a datetime for wall-clock time.
        """
        if not self.state.verbose:
            return
        if isinstance(start, datetime):
            now = datetime.now(start.tzinfo)
            elapsed = (now - start).total_seconds()
        else:
            elapsed = time.monotonic() - start
        message = render(fmt, params)
        self._out(f"{PREFIXES[MessageType.TRACK]} {message} << {format_duration(max(elapsed, 0.0))}")

    @contextmanager
    def tracked(self, fmt: str, *params):
        """Track the duration of a with-block."""
        start = time.monotonic()
        try:
            yield
        finally:
            self.track(start, fmt, *params)

    def debug(self, fmt: str, *params):
        """Write a DEBUG line when debug mode is on, regardless of verbose."""
        if not self.state.debug:
            return
        self._out(f"{PREFIXES[MessageType.DEBUG]} {render(fmt, params)}")
