# verbose/core/version.py
"""Version of the verbose package, as shipped in src/verbose/VERSION (shown by `verbose --version`)."""

from pathlib import Path

VERSION_FILE = Path(__file__).parent.parent / "VERSION"


def read_local_version() -> str:
    try:
        return VERSION_FILE.read_text(encoding="utf-8").strip()
    except OSError:
        # Running from a tree without the data file
        return "0.0.0"
