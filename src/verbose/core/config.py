# verbose/core/config.py
"""
Verbosity from the environment.

Reads VERBOSE_ON and VERBOSE_DEBUG, loading a .env file first
(the one in the current directory wins over dotenv's default lookup).
"""

import os
from typing import Optional

from dotenv import load_dotenv

from verbose.core.logger import VerbosityState, set_verbosity

VERBOSE_ENV = "VERBOSE_ON"
DEBUG_ENV = "VERBOSE_DEBUG"

TRUTHY = {"1", "true", "yes", "y", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


def load_env(env_file: Optional[str] = None) -> bool:
    if env_file:
        return load_dotenv(env_file, override=True)
    cwd_env = os.path.join(os.getcwd(), ".env")
    if os.path.exists(cwd_env):
        return load_dotenv(cwd_env, override=True)
    return load_dotenv()


def load_verbosity(env_file: Optional[str] = None) -> VerbosityState:
    """Build a VerbosityState from the environment (and .env)."""
    load_env(env_file)
    return VerbosityState(verbose=env_flag(VERBOSE_ENV), debug=env_flag(DEBUG_ENV))


def configure_from_env(env_file: Optional[str] = None) -> VerbosityState:
    """Apply the environment settings to the default state."""
    loaded = load_verbosity(env_file)
    return set_verbosity(verbose=loaded.verbose, debug=loaded.debug)
