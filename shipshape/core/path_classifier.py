"""Network path detection"""

from typing import Any, Callable

from ..constants import UNC_PREFIX

NetworkPathPredicate = Callable[[Any], bool]


def is_network_path(path: Any) -> bool:
    """Check if a path is a UNC (network) path such as ``\\\\server\\share``

    Non-string values are never network paths.
    """
    if not isinstance(path, str):
        return False
    return path.startswith(UNC_PREFIX)
