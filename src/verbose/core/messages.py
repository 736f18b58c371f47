# verbose/core/messages.py
"""
Message categories and their console prefixes.

Each category maps to a fixed header: a colored label padded so the
colons line up, e.g. `>>info   :` in cyan.
"""

from enum import Enum
from types import MappingProxyType

TIMESTAMP_FORMAT = "%Y%m%d %H:%M:%S "

RESET = "\x1b[0m"


class MessageType(Enum):
    INFO = 0      # ">>info   :" in cyan
    WARNING = 1   # ">>warning:" in orange
    ALERT = 2     # ">>alert  :" in red
    TRACK = 3     # ">>track  :" in green, followed by a timestamp
    DEBUG = 4     # ">>debug  :" in yellow

    @classmethod
    def parse(cls, name: str) -> "MessageType":
        """Look up a category by (case-insensitive) name."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            valid = ", ".join(m.name.lower() for m in cls)
            raise ValueError(f"Unknown message type '{name}' (expected one of: {valid})") from None


def _header(color: str, label: str) -> str:
    return f">>{color}{label}{RESET}{' ' * (7 - len(label))}:"


PREFIXES = MappingProxyType({
    MessageType.INFO: _header("\x1b[0;36m", "info"),
    MessageType.WARNING: _header("\x1b[38;5;208m", "warning"),
    MessageType.ALERT: _header("\x1b[0;31m", "alert"),
    MessageType.TRACK: _header("\x1b[0;32m", "track"),
    MessageType.DEBUG: _header("\x1b[0;33m", "debug"),
})
