"""The `m` command line client: send a message to yabai and print the answer.

Usage:
    m [--debug <logfile>] query --windows
"""

import logging
import sys

from .ansi import ERROR_STYLE, colorize, should_colorize
from .ipc import send
from .logging_setup import get_logger, init_logger
from .models import ExitCode, YabaiCommandError, YabaiConnectionError, YabaiFormatError

log = logging.getLogger(__name__)

__all__ = ["main", "run_client", "use_param"]


def use_param(txt: str, argv: list[str]) -> str:
    """Check if `argv` starts with the option `txt`.

    if so, removes it and its value from `argv` & returns the value.
    Later occurrences belong to the message sent to yabai and are kept.
    """
    v = ""
    if argv and argv[0] == txt:
        v = argv[1] if len(argv) > 1 else ""
        del argv[:2]
    return v


def _print_error(message: str) -> None:
    text = f"Error: {message}"
    print(colorize(text, ERROR_STYLE) if should_colorize(sys.stderr) else text, file=sys.stderr)


def run_client(args: list[str]) -> ExitCode:
    """Send `args` joined by spaces and print the response, if any."""
    if not args:
        _print_error("no message given, eg: m query --windows")
        return ExitCode.USAGE_ERROR

    try:
        result = send(" ".join(args), logger=log)
    except YabaiConnectionError as e:
        _print_error(str(e))
        return ExitCode.CONNECTION_ERROR
    except YabaiCommandError as e:
        _print_error(e.message or str(e))
        return ExitCode.COMMAND_ERROR
    except YabaiFormatError as e:
        _print_error(str(e))
        return ExitCode.FORMAT_ERROR

    if result is not None:
        print(result.rstrip("\n"))
    return ExitCode.SUCCESS


def main() -> None:
    """Run the command."""
    argv = sys.argv[1:]
    debug_flag = use_param("--debug", argv)
    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    get_logger()
    sys.exit(run_client(argv))


if __name__ == "__main__":
    main()
