"""Framing of requests and decoding of yabai responses.

A request is the message tokens joined by NUL bytes and terminated by two
extra NUL bytes, preceded by its length as a little-endian u32::

    [N: u32 LE] space NUL --focus NUL 2 NUL NUL

A response is read until the peer closes the stream. If its first byte is
the 0x07 sentinel, the rest is an error message.
"""

import struct

from .constants import ERROR_SENTINEL, LENGTH_PREFIX_FORMAT, MESSAGE_TERMINATOR, TOKEN_SEPARATOR
from .models import YabaiCommandError, YabaiFormatError

__all__ = [
    "decode_response",
    "encode_message",
    "frame_message",
]


def encode_message(message: str) -> bytes:
    """Encode a space separated message into NUL separated tokens.

    Only single spaces split tokens, surrounding whitespace is trimmed.
    """
    tokens = [token.encode("utf-8") for token in message.strip().split(" ")]
    return TOKEN_SEPARATOR.join(tokens) + MESSAGE_TERMINATOR


def frame_message(payload: bytes) -> bytes:
    """Prefix `payload` with its length."""
    return struct.pack(LENGTH_PREFIX_FORMAT, len(payload)) + payload


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"Invalid UTF-8 in yabai response: {e}"
        raise YabaiFormatError(msg) from e


def decode_response(command: str, data: bytes) -> str | None:
    """Interpret the raw bytes answered to `command`.

    Args:
        command: the message that was sent, reported in errors
        data: everything read from the socket

    Returns:
        The response text, or None when yabai sent nothing

    Raises:
        YabaiCommandError: the response starts with the error sentinel
        YabaiFormatError: the response is not valid UTF-8
    """
    if not data:
        return None
    if data[0] == ERROR_SENTINEL:
        raise YabaiCommandError(command, _decode(data[1:]))
    return _decode(data)
