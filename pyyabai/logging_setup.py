"""Log configuration for the `m` command.

Library modules only call `logging.getLogger(__name__)`, so their records
land under the "pyyabai" namespace and follow whatever the embedding program
configured. `init_logger` and `get_logger` are for programs owning the process,
such as `m`.
"""

import logging
import os

from .ansi import CRITICAL_STYLE, ERROR_STYLE, WARNING_STYLE, should_colorize

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
    "is_debug",
    "set_debug",
]


class LogObjects:
    """Handlers installed by `init_logger`, and the debug switch."""

    handlers: list[logging.Handler] = []
    debug: bool = bool(os.environ.get("DEBUG"))


def is_debug() -> bool:
    """True if `DEBUG` is set in the environment or `--debug` was passed."""
    return LogObjects.debug


def set_debug(value: bool) -> None:
    LogObjects.debug = value


class ScreenLogFormatter(logging.Formatter):
    """Terminal formatter, warnings and errors are colored when possible."""

    def __init__(self) -> None:
        super().__init__()
        log_format = r"%(name)15s - %(message)s // %(filename)s:%(lineno)d" if is_debug() else r"%(message)s"
        colored = should_colorize()

        def _formatter(style: tuple[str, str]) -> logging.Formatter:
            prefix, suffix = style if colored else ("", "")
            return logging.Formatter(prefix + log_format + suffix)

        self._plain = logging.Formatter(log_format)
        self._formatters = {
            logging.WARNING: _formatter(WARNING_STYLE),
            logging.ERROR: _formatter(ERROR_STYLE),
            logging.CRITICAL: _formatter(CRITICAL_STYLE),
        }

    def format(self, record: logging.LogRecord) -> str:
        return self._formatters.get(record.levelno, self._plain).format(record)


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """Prepare the handlers used by `get_logger`.

    Args:
        filename: also log to this file
        force_debug: log at debug level whatever `DEBUG` says
    """
    if force_debug:
        set_debug(True)

    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenLogFormatter())
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "pyyabai", level: int | None = None) -> logging.Logger:
    """Return a named logger wired to the `init_logger` handlers.

    Args:
        name (str): logger's name, "pyyabai" covers every library module
        level (int): logger's level (auto if not set)
    """
    logger = logging.getLogger(name)
    if level is None:
        logger.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    else:
        logger.setLevel(level)
    logger.propagate = False
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return logger
