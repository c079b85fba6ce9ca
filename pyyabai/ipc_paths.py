"""Socket path resolution."""

import getpass
from functools import cache

from .constants import SOCKET_NAMESPACE, SOCKET_PATH_TEMPLATE

__all__ = [
    "get_socket_path",
    "socket_path_for",
]


def socket_path_for(user: str, namespace: str = SOCKET_NAMESPACE) -> str:
    """Return the control socket path of `namespace` for the given login name."""
    return SOCKET_PATH_TEMPLATE.format(namespace=namespace, user=user)


@cache
def get_socket_path() -> str:
    """Return yabai's control socket path for the invoking user.

    Computed on first use and kept for the lifetime of the process.
    """
    return socket_path_for(getpass.getuser())
