"""Render typed commands into yabai message strings."""

from .models import (
    BalanceSpace,
    Command,
    FocusSpace,
    FocusWindow,
    FocusWindowDirection,
    MoveActiveWindowToSpace,
    RotateSpace,
    SwapWindowDirection,
    ToggleWindowFloating,
    ToggleZoomFullscreen,
    WarpWindowDirection,
)

__all__ = ["render_command"]


def render_command(command: Command) -> str:
    """Return the message string for `command`.

    Eg:
        render_command(FocusSpace(FocusTarget.RECENT)) == "space --focus recent"
        render_command(FocusSpace(2)) == "space --focus 2"
    """
    match command:
        case FocusSpace(option):
            return f"space --focus {option}"
        case RotateSpace(rotation):
            return f"space --rotate {rotation}"
        case BalanceSpace():
            return "space --balance"
        case MoveActiveWindowToSpace(space):
            return f"window --space {space}"
        case FocusWindow(window):
            return f"window --focus {window}"
        case FocusWindowDirection(direction):
            return f"window --focus {direction}"
        case SwapWindowDirection(direction):
            return f"window --swap {direction}"
        case WarpWindowDirection(direction):
            return f"window --warp {direction}"
        case ToggleWindowFloating():
            return "window --toggle float"
        case ToggleZoomFullscreen():
            return "window --toggle zoom-fullscreen"
    msg = f"Not a yabai command: {command!r}"
    raise TypeError(msg)
