"""Types used to talk to yabai: commands, query records and errors."""

from dataclasses import asdict, dataclass, field, fields
from enum import IntEnum, StrEnum
from types import GenericAlias
from typing import Any, Self

__all__ = [
    "BalanceSpace",
    "Command",
    "Direction",
    "DisplayInfo",
    "ExitCode",
    "FocusSpace",
    "FocusSpaceOption",
    "FocusTarget",
    "FocusWindow",
    "FocusWindowDirection",
    "Frame",
    "MoveActiveWindowToSpace",
    "Record",
    "RotateSpace",
    "SpaceInfo",
    "SpaceRotation",
    "SwapWindowDirection",
    "ToggleWindowFloating",
    "ToggleZoomFullscreen",
    "WarpWindowDirection",
    "WindowInfo",
    "YabaiCommandError",
    "YabaiConnectionError",
    "YabaiDeserializationError",
    "YabaiEmptyResponseError",
    "YabaiError",
    "YabaiFormatError",
]


# Errors {{{


class YabaiError(Exception):
    """Base class for every error raised by pyyabai."""


class YabaiConnectionError(YabaiError, OSError):
    """The socket could not be connected, written to or read from."""


class YabaiFormatError(YabaiError):
    """The daemon answered with bytes that are not valid UTF-8."""


class YabaiCommandError(YabaiError):
    """yabai rejected a command (response started with the error sentinel)."""

    def __init__(self, command: str, message: str) -> None:
        super().__init__(command, message)
        self.command = command
        self.message = message

    def __str__(self) -> str:
        return f"CommandError: {self.command!r} caused {self.message!r}"


class YabaiEmptyResponseError(YabaiError):
    """A query got no payload back."""


class YabaiDeserializationError(YabaiError, ValueError):
    """A JSON payload does not match the expected record schema."""


# Exit codes for the `m` client
class ExitCode(IntEnum):
    """Standard exit codes for the `m` client."""

    SUCCESS = 0
    USAGE_ERROR = 1  # No command provided
    CONNECTION_ERROR = 3  # Cannot connect to yabai
    COMMAND_ERROR = 4  # yabai returned an error
    FORMAT_ERROR = 5  # Response could not be decoded


# }}}

# Command arguments {{{


class Direction(StrEnum):
    """A cardinal direction."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class SpaceRotation(StrEnum):
    """Angles accepted by `space --rotate`."""

    ROTATE_90 = "90"
    ROTATE_180 = "180"
    ROTATE_270 = "270"


class FocusTarget(StrEnum):
    """Named targets accepted by `space --focus`."""

    NEXT = "next"
    PREV = "prev"
    FIRST = "first"
    LAST = "last"
    RECENT = "recent"


FocusSpaceOption = FocusTarget | int
"""A named target, or the id of a specific space."""


# }}}

# Commands {{{


@dataclass(frozen=True)
class Command:
    """Base class of the commands understood by `send_command`."""


@dataclass(frozen=True)
class FocusSpace(Command):
    """Focus a space by name (next, recent...) or by id."""

    option: FocusSpaceOption


@dataclass(frozen=True)
class RotateSpace(Command):
    """Rotate the layout of the focused space."""

    rotation: SpaceRotation


@dataclass(frozen=True)
class BalanceSpace(Command):
    """Balance the split ratios of the focused space."""


@dataclass(frozen=True)
class MoveActiveWindowToSpace(Command):
    """Send the focused window to another space."""

    space: int


@dataclass(frozen=True)
class FocusWindow(Command):
    """Focus a window by id."""

    window: int


@dataclass(frozen=True)
class FocusWindowDirection(Command):
    direction: Direction


@dataclass(frozen=True)
class SwapWindowDirection(Command):
    direction: Direction


@dataclass(frozen=True)
class WarpWindowDirection(Command):
    direction: Direction


@dataclass(frozen=True)
class ToggleWindowFloating(Command):
    pass


@dataclass(frozen=True)
class ToggleZoomFullscreen(Command):
    pass


# }}}

# Query records {{{


def _json_key(name: str) -> str:
    return name.replace("_", "-")


def _type_name(expected: Any) -> str:  # noqa: ANN401
    return str(expected) if isinstance(expected, GenericAlias) else expected.__name__


def _convert(record: str, key: str, expected: Any, value: Any) -> Any:  # noqa: ANN401
    """Check `value` against `expected` and return it in its final form."""

    def fail() -> YabaiDeserializationError:
        return YabaiDeserializationError(f"{record}.{key}: expected {_type_name(expected)}, got {type(value).__name__}")

    if expected is bool:
        if isinstance(value, bool):
            return value
        raise fail()
    if expected is int:
        # bool is a subclass of int
        if not isinstance(value, int) or isinstance(value, bool):
            raise fail()
        # ids, indexes, pids and levels are all unsigned for yabai
        if value < 0:
            msg = f"{record}.{key}: expected a non-negative int, got {value}"
            raise YabaiDeserializationError(msg)
        return value
    if expected is float:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return float(value)
        raise fail()
    if expected is str:
        if isinstance(value, str):
            return value
        raise fail()
    if isinstance(expected, GenericAlias) and expected.__origin__ is list:
        if not isinstance(value, list):
            raise fail()
        (item_type,) = expected.__args__
        return [_convert(record, f"{key}[{i}]", item_type, item) for i, item in enumerate(value)]
    if isinstance(expected, type) and issubclass(expected, Record):
        if not isinstance(value, dict):
            raise fail()
        return expected.from_dict(value)
    msg = f"unsupported field type {expected!r}"
    raise TypeError(msg)


class Record:
    """Mixin for the read-only snapshots returned by yabai queries.

    JSON keys are the kebab-case spelling of the attribute names.
    """

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build a record from one JSON object, checking every field.

        Unknown keys are ignored.

        Raises:
            YabaiDeserializationError: missing key or wrong value type
        """
        name = cls.__name__
        if not isinstance(data, dict):
            msg = f"{name}: expected an object, got {type(data).__name__}"
            raise YabaiDeserializationError(msg)
        values = {}
        for prop in fields(cls):  # type: ignore[arg-type]
            key = _json_key(prop.name)
            if key not in data:
                msg = f"{name}: missing field {key!r}"
                raise YabaiDeserializationError(msg)
            values[prop.name] = _convert(name, key, prop.type, data[key])
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object yabai would have sent for this record."""

        def _rename(value: Any) -> Any:  # noqa: ANN401
            if isinstance(value, dict):
                return {_json_key(k): _rename(v) for k, v in value.items()}
            return value

        return _rename(asdict(self))  # type: ignore[call-overload]


@dataclass(frozen=True)
class Frame(Record):
    """Position and size of a window or display."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class SpaceInfo(Record):
    """A mission control space, as reported by `query --spaces`."""

    id: int
    uuid: str
    index: int
    label: str
    type: str
    display: int
    windows: list[int] = field(hash=False)
    first_window: int
    last_window: int
    has_focus: bool
    is_visible: bool
    is_native_fullscreen: bool


@dataclass(frozen=True)
class DisplayInfo(Record):
    """A display, as reported by `query --displays`."""

    id: int
    uuid: str
    index: int
    frame: Frame
    spaces: list[int] = field(hash=False)


@dataclass(frozen=True)
class WindowInfo(Record):  # pylint: disable=too-many-instance-attributes
    """A window, as reported by `query --windows`.

    `display` and `space` are ids to be matched against the other queries.
    """

    id: int
    pid: int
    app: str
    title: str
    frame: Frame
    role: str
    subrole: str
    display: int
    space: int
    level: int
    opacity: float
    split_type: str
    stack_index: int
    can_move: bool
    can_resize: bool
    has_focus: bool
    has_shadow: bool
    has_border: bool
    has_parent_zoom: bool
    has_fullscreen_zoom: bool
    is_native_fullscreen: bool
    is_visible: bool
    is_minimized: bool
    is_hidden: bool
    is_floating: bool
    is_sticky: bool
    is_topmost: bool
    is_grabbed: bool


# }}}
