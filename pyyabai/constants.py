"""Shared constants for pyyabai."""

__all__ = [
    "ERROR_SENTINEL",
    "LENGTH_PREFIX_FORMAT",
    "MESSAGE_TERMINATOR",
    "QUERY_DISPLAYS",
    "QUERY_SPACES",
    "QUERY_WINDOWS",
    "RECV_CHUNK_SIZE",
    "SOCKET_NAMESPACE",
    "SOCKET_PATH_TEMPLATE",
    "TOKEN_SEPARATOR",
]

SOCKET_NAMESPACE = "yabai"
SOCKET_PATH_TEMPLATE = "/tmp/{namespace}_{user}.socket"  # noqa: S108

# Request framing
TOKEN_SEPARATOR = b"\x00"
MESSAGE_TERMINATOR = b"\x00\x00"
LENGTH_PREFIX_FORMAT = "<I"  # little-endian u32

# First byte of a failed response
ERROR_SENTINEL = 0x07

RECV_CHUNK_SIZE = 4096

QUERY_SPACES = "query --spaces"
QUERY_DISPLAYS = "query --displays"
QUERY_WINDOWS = "query --windows"
