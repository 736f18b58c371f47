import io

import pytest
from rich.console import Console

import verbose
from verbose.core.emitter import Emitter
from verbose.core.logger import VerbosityState


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def emitter(buffer):
    """Emitter with its own flags, writing into a string buffer."""
    console = Console(file=buffer, force_terminal=False, width=80)
    return Emitter(state=VerbosityState(), console=console)


@pytest.fixture(autouse=True)
def reset_default_state(monkeypatch, tmp_path):
    """
    Keep the process-wide flags and environment from leaking between tests.
    Runs each test from an empty directory so no stray .env is picked up.
    """
    for name in ("VERBOSE_ON", "VERBOSE_DEBUG"):
        # setenv first so values loaded from .env files are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    verbose.set_verbosity(verbose=False, debug=False)
    yield
    verbose.set_verbosity(verbose=False, debug=False)
