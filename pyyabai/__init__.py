"""pyyabai - a client for the yabai tiling window manager.

Sends messages to a running yabai over its Unix control socket, either as
plain strings or as typed commands, and parses query results into records:

    from pyyabai import FocusSpace, FocusTarget, query_windows, send, send_command

    send("space --focus 2")
    send_command(FocusSpace(FocusTarget.RECENT))
    windows = query_windows()
"""

from .commands import render_command
from .ipc import send, send_command, send_raw
from .models import (
    BalanceSpace,
    Command,
    Direction,
    DisplayInfo,
    FocusSpace,
    FocusSpaceOption,
    FocusTarget,
    FocusWindow,
    FocusWindowDirection,
    Frame,
    MoveActiveWindowToSpace,
    RotateSpace,
    SpaceInfo,
    SpaceRotation,
    SwapWindowDirection,
    ToggleWindowFloating,
    ToggleZoomFullscreen,
    WarpWindowDirection,
    WindowInfo,
    YabaiCommandError,
    YabaiConnectionError,
    YabaiDeserializationError,
    YabaiEmptyResponseError,
    YabaiError,
    YabaiFormatError,
)
from .query import query_displays, query_spaces, query_windows

__all__ = [
    "BalanceSpace",
    "Command",
    "Direction",
    "DisplayInfo",
    "FocusSpace",
    "FocusSpaceOption",
    "FocusTarget",
    "FocusWindow",
    "FocusWindowDirection",
    "Frame",
    "MoveActiveWindowToSpace",
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
    "query_displays",
    "query_spaces",
    "query_windows",
    "render_command",
    "send",
    "send_command",
    "send_raw",
]
