# verbose/core/logger.py
from dataclasses import dataclass

from verbose.core.messages import MessageType


@dataclass
class VerbosityState:
    """Verbosity flags read by an Emitter on every call."""
    verbose: bool = False
    debug: bool = False

    def allows(self, msgtype: MessageType) -> bool:
        # DEBUG messages also pass when only debug mode is on
        return self.verbose or (self.debug and msgtype is MessageType.DEBUG)


# Process-wide default (set in verbose.app or by the host application)
state = VerbosityState()


def set_verbosity(verbose: bool = None, debug: bool = None) -> VerbosityState:
    """Toggle the default verbosity flags. Flags left as None are unchanged."""
    if verbose is not None:
        state.verbose = bool(verbose)
    if debug is not None:
        state.debug = bool(debug)
    return state


def is_on() -> bool:
    return state.verbose


def is_debug() -> bool:
    return state.debug
