"""Query yabai for spaces, displays and windows."""

import json
from logging import Logger
from typing import Any, TypeVar

from .constants import QUERY_DISPLAYS, QUERY_SPACES, QUERY_WINDOWS
from .ipc import send
from .models import DisplayInfo, Record, SpaceInfo, WindowInfo, YabaiDeserializationError, YabaiEmptyResponseError

__all__ = [
    "parse_records",
    "query_displays",
    "query_spaces",
    "query_windows",
]

RecordT = TypeVar("RecordT", bound=Record)


def parse_records(payload: str, record_type: type[RecordT]) -> list[RecordT]:
    """Parse a JSON array of `record_type` objects.

    Raises:
        YabaiDeserializationError: invalid JSON or schema mismatch
    """
    try:
        data: Any = json.loads(payload)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON for {record_type.__name__} list: {e}"
        raise YabaiDeserializationError(msg) from e
    if not isinstance(data, list):
        msg = f"Expected a JSON array of {record_type.__name__}, got {type(data).__name__}"
        raise YabaiDeserializationError(msg)
    return [record_type.from_dict(item) for item in data]


def _query(command: str, record_type: type[RecordT], logger: Logger | None) -> list[RecordT]:
    result = send(command, logger=logger)
    if result is None:
        msg = f"No result from yabai {command}"
        raise YabaiEmptyResponseError(msg)
    return parse_records(result, record_type)


def query_spaces(logger: Logger | None = None) -> list[SpaceInfo]:
    """Return every mission control space."""
    return _query(QUERY_SPACES, SpaceInfo, logger)


def query_displays(logger: Logger | None = None) -> list[DisplayInfo]:
    """Return every display."""
    return _query(QUERY_DISPLAYS, DisplayInfo, logger)


def query_windows(logger: Logger | None = None) -> list[WindowInfo]:
    """Return every window known to yabai."""
    return _query(QUERY_WINDOWS, WindowInfo, logger)
