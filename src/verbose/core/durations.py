# verbose/core/durations.py
"""
Elapsed-time rendering.

Durations are shown the way Go's time.Duration prints them: the largest
fitting unit for sub-second values ("850ns", "12.5µs", "1.503ms") and
h/m/s components otherwise ("2.1s", "1m30s", "1h2m3.5s").
"""

from datetime import timedelta
from typing import Union

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


def _fraction(value: int, scale: int) -> str:
    """Render value/scale with trailing zeros trimmed."""
    whole, rest = divmod(value, scale)
    if not rest:
        return str(whole)
    digits = len(str(scale)) - 1
    return f"{whole}.{rest:0{digits}d}".rstrip("0")


def format_duration(elapsed: Union[float, int, timedelta]) -> str:
    """Format a duration given in seconds (or as a timedelta)."""
    if isinstance(elapsed, timedelta):
        elapsed = elapsed.total_seconds()
    ns = int(round(elapsed * _NS_PER_S))
    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns == 0:
        return "0s"
    if ns < _NS_PER_US:
        return f"{sign}{ns}ns"
    if ns < _NS_PER_MS:
        return f"{sign}{_fraction(ns, _NS_PER_US)}µs"
    if ns < _NS_PER_S:
        return f"{sign}{_fraction(ns, _NS_PER_MS)}ms"

    hours, ns = divmod(ns, 3600 * _NS_PER_S)
    minutes, ns = divmod(ns, 60 * _NS_PER_S)
    seconds = _fraction(ns, _NS_PER_S)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"
