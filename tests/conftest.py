" generic fixtures "
from copy import deepcopy
from unittest.mock import MagicMock

import pytest


def pytest_configure():
    "Runs once before all"
    from pyyabai.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


SOCKET_PATH = "/tmp/yabai_tester.socket"


@pytest.fixture
def mock_socket(mocker):
    "Replaces the Unix socket, returns (socket class mock, socket mock, respond)"
    sock = MagicMock(name="mocked_socket")
    sock.__enter__.return_value = sock
    sock.__exit__.return_value = False
    sock.recv.side_effect = [b""]

    def respond(*chunks):
        "Sets the bytes yabai will answer, in chunks"
        sock.recv.side_effect = [*chunks, b""]

    mock_cls = mocker.patch("socket.socket", return_value=sock)
    mocker.patch("pyyabai.ipc.get_socket_path", return_value=SOCKET_PATH)
    return mock_cls, sock, respond


@pytest.fixture
def spaces():
    return deepcopy(SPACES)


@pytest.fixture
def displays():
    return deepcopy(DISPLAYS)


@pytest.fixture
def windows():
    return deepcopy(WINDOWS)


SPACES = [
    {
        "id": 3,
        "uuid": "",
        "index": 1,
        "label": "code",
        "type": "bsp",
        "display": 1,
        "windows": [1201, 884],
        "first-window": 1201,
        "last-window": 884,
        "has-focus": True,
        "is-visible": True,
        "is-native-fullscreen": False,
    },
    {
        "id": 7,
        "uuid": "2F3B3C7E-0D1A-4C33-9B0E-5B1A9E0F7A11",
        "index": 2,
        "label": "",
        "type": "float",
        "display": 2,
        "windows": [],
        "first-window": 0,
        "last-window": 0,
        "has-focus": False,
        "is-visible": True,
        "is-native-fullscreen": False,
    },
]

DISPLAYS = [
    {
        "id": 1,
        "uuid": "37D8832A-2D66-02CA-B9F7-8F30A301B230",
        "index": 1,
        "frame": {"x": 0.0, "y": 0.0, "w": 1512.0, "h": 982.0},
        "spaces": [3, 4, 5],
    },
    {
        "id": 2,
        "uuid": "9A21D5C0-4E8B-11EE-8C99-0242AC120002",
        "index": 2,
        "frame": {"x": 1512, "y": -200, "w": 2560, "h": 1440},
        "spaces": [7],
    },
]

WINDOWS = [
    {
        "id": 1201,
        "pid": 611,
        "app": "kitty",
        "title": "vim models.py",
        "frame": {"x": 8.0, "y": 33.0, "w": 744.0, "h": 941.0},
        "role": "AXWindow",
        "subrole": "AXStandardWindow",
        "display": 1,
        "space": 1,
        "level": 0,
        "opacity": 1.0,
        "split-type": "vertical",
        "stack-index": 0,
        "can-move": True,
        "can-resize": True,
        "has-focus": True,
        "has-shadow": True,
        "has-border": False,
        "has-parent-zoom": False,
        "has-fullscreen-zoom": False,
        "is-native-fullscreen": False,
        "is-visible": True,
        "is-minimized": False,
        "is-hidden": False,
        "is-floating": False,
        "is-sticky": False,
        "is-topmost": False,
        "is-grabbed": False,
    },
    {
        "id": 884,
        "pid": 402,
        "app": "Safari",
        "title": "yabai wiki",
        "frame": {"x": 760, "y": 33, "w": 744, "h": 941},
        "role": "AXWindow",
        "subrole": "AXStandardWindow",
        "display": 1,
        "space": 1,
        "level": 0,
        "opacity": 0.9,
        "split-type": "none",
        "stack-index": 0,
        "can-move": True,
        "can-resize": True,
        "has-focus": False,
        "has-shadow": True,
        "has-border": False,
        "has-parent-zoom": False,
        "has-fullscreen-zoom": False,
        "is-native-fullscreen": False,
        "is-visible": True,
        "is-minimized": False,
        "is-hidden": False,
        "is-floating": True,
        "is-sticky": False,
        "is-topmost": False,
        "is-grabbed": False,
        "scratchpad": "",
    },
]
