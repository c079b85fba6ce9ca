"""Colors for `m`'s terminal output.

`NO_COLOR` turns them off, `FORCE_COLOR` turns them on even when stderr is
not a terminal.
"""

import os
import sys
from typing import TextIO

__all__ = [
    "CRITICAL_STYLE",
    "ERROR_STYLE",
    "WARNING_STYLE",
    "colorize",
    "should_colorize",
]

RESET = "\x1b[0m"

# (prefix, suffix) pairs
WARNING_STYLE = ("\x1b[33;2m", RESET)
ERROR_STYLE = ("\x1b[31;2m", RESET)
CRITICAL_STYLE = ("\x1b[31;1m", RESET)


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell whether ANSI colors may be written to `stream` (stderr by default)."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    stream = stream or sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(text: str, style: tuple[str, str]) -> str:
    prefix, suffix = style
    return f"{prefix}{text}{suffix}"
