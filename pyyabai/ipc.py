"""Interact with yabai using its control socket.

Every call opens a new connection, writes one framed request, reads the
answer until yabai closes the stream and closes the socket. Nothing is retried.
"""

__all__ = [
    "send",
    "send_command",
    "send_raw",
    "yabai_connection",
]

import logging
import socket
from collections.abc import Iterator
from contextlib import contextmanager
from logging import Logger

from .codec import decode_response, encode_message, frame_message
from .commands import render_command
from .constants import RECV_CHUNK_SIZE
from .ipc_paths import get_socket_path
from .models import Command, YabaiCommandError, YabaiConnectionError

log = logging.getLogger(__name__)


@contextmanager
def yabai_connection(logger: Logger) -> Iterator[socket.socket]:
    """Yield a socket connected to yabai, closed on exit."""
    try:
        path = get_socket_path()
    except (OSError, KeyError) as e:
        logger.critical("cannot resolve the login name used in yabai's socket path")
        msg = f"Cannot locate the yabai socket: {e}"
        raise YabaiConnectionError(msg) from e
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        try:
            sock.connect(path)
        except OSError as e:
            logger.critical("yabai socket %s not available! is it running ?", path)
            msg = f"Cannot connect to {path}: {e}"
            raise YabaiConnectionError(msg) from e
        yield sock


def _exchange(sock: socket.socket, request: bytes) -> bytes:
    """Write `request` and return everything read until end of stream."""
    chunks = []
    try:
        sock.sendall(request)
        while chunk := sock.recv(RECV_CHUNK_SIZE):
            chunks.append(chunk)
    except OSError as e:
        msg = f"yabai socket I/O failed: {e}"
        raise YabaiConnectionError(msg) from e
    return b"".join(chunks)


def send_raw(payload: bytes, command: str = "", logger: Logger | None = None) -> str | None:
    """Send an already encoded message and return the response.

    Args:
        payload: NUL separated message, without its length prefix
        command: human readable form of the message, used in errors
        logger: logger to use, defaults to the module one

    Returns:
        The response text, None if yabai answered nothing
    """
    logger = logger or log
    command = command or payload.decode("utf-8", errors="replace")
    logger.debug(command)
    with yabai_connection(logger) as sock:
        data = _exchange(sock, frame_message(payload))
    try:
        return decode_response(command, data)
    except YabaiCommandError as e:
        logger.warning("FAILED %s: %s", command, e.message)
        raise


def send(message: str, logger: Logger | None = None) -> str | None:
    """Send a command to yabai as a string of space separated arguments.

    Eg:
        send("space --focus 2")
        send("query --windows --space")
    """
    return send_raw(encode_message(message), message.strip(), logger=logger)


def send_command(command: Command, logger: Logger | None = None) -> str | None:
    """Send a typed `Command` to yabai.

    Eg:
        send_command(FocusSpace(FocusTarget.RECENT))
    """
    return send(render_command(command), logger=logger)
