"""
Filesystem validation utilities.
"""

import os
from pathlib import Path
from typing import Union


def path_exists(path: Union[str, Path]) -> bool:
    """
    Report whether a file or directory exists.

    Args:
        path: Path to check.

    Returns:
        True if the path exists, False if it is absent.

    Raises:
        OSError: If the path could not be inspected for another reason
            (e.g. permission denied), so callers can tell an unknown
            state apart from an absent path.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True
