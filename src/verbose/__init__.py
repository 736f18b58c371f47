"""
verbose generates formatted output only when verbose mode is turned on.

MessageType defines the header of the message and its color:
  - INFO:    `>>info   :` in cyan
  - WARNING: `>>warning:` in orange
  - ALERT:   `>>alert  :` in red
  - TRACK:   `>>track  :` in green, followed by a timestamp
  - DEBUG:   `>>debug  :` in yellow, also shown when only debug mode is on

Usage:

    import verbose
    from verbose import MessageType

    verbose.set_verbosity(verbose=True)
    verbose.println(MessageType.INFO, "everything is ok")
    verbose.printf(MessageType.WARNING, "value should be greater than %d\\n", value)

The module-level functions write through a default Emitter bound to the
process-wide `state`. Build an Emitter of your own to keep separate flags.
"""

from verbose.core.emitter import Emitter, FatalAssertion
from verbose.core.logger import VerbosityState, state, set_verbosity, is_on, is_debug
from verbose.core.messages import MessageType, PREFIXES
from verbose.core.durations import format_duration

INFO = MessageType.INFO
WARNING = MessageType.WARNING
ALERT = MessageType.ALERT
TRACK = MessageType.TRACK
DEBUG = MessageType.DEBUG

default_emitter = Emitter(state=state)

println = default_emitter.println
write = default_emitter.write
printf = default_emitter.printf
printf_if = default_emitter.printf_if
error = default_emitter.error
ensure = default_emitter.ensure
track = default_emitter.track
tracked = default_emitter.tracked
debug = default_emitter.debug

__all__ = [
    'Emitter', 'FatalAssertion', 'VerbosityState', 'MessageType', 'PREFIXES',
    'INFO', 'WARNING', 'ALERT', 'TRACK', 'DEBUG',
    'state', 'set_verbosity', 'is_on', 'is_debug', 'default_emitter',
    'println', 'write', 'printf', 'printf_if', 'error', 'ensure',
    'track', 'tracked', 'debug', 'format_duration',
]
