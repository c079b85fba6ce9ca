"""Fake `m` CLI to generate auto-completion scripts.

    RUN=1 python scripts/m.py --print-completion zsh > _m
"""

import argparse
import os

import shtab

DIRECTIONS = ["north", "south", "east", "west"]


def get_parser():
    """Describe the messages most commonly sent through `m`."""
    parser = argparse.ArgumentParser(prog="m", description="Send a message to yabai", add_help=False, allow_abbrev=False)
    parser.add_argument(
        "--debug",
        help="Enable debug mode and log to a file",
        metavar="filename",
    ).complete = shtab.FILE
    shtab.add_argument_to(parser)

    domains = parser.add_subparsers(dest="domain")

    query = domains.add_parser("query", help="Query yabai's state as JSON")
    query.add_argument("what", choices=["--displays", "--spaces", "--windows"])

    space = domains.add_parser("space", help="Act on the focused space")
    space.add_argument(
        "action",
        choices=["--focus", "--rotate", "--balance"],
        help="--focus <next|prev|first|last|recent|id>, --rotate <90|180|270>",
    )
    space.add_argument("target", nargs="?", choices=["next", "prev", "first", "last", "recent", "90", "180", "270"])

    window = domains.add_parser("window", help="Act on the focused window")
    window.add_argument(
        "action",
        choices=["--focus", "--swap", "--warp", "--space", "--toggle"],
        help="--focus/--swap/--warp <direction>, --space <id>, --toggle <float|zoom-fullscreen>",
    )
    window.add_argument("target", nargs="?", choices=[*DIRECTIONS, "float", "zoom-fullscreen"])

    return parser


if "RUN" in os.environ:
    get_parser().parse_args()
