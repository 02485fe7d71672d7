"""Filesystem reachability check."""

__docformat__ = 'google'

__all__ = [
    'file_accessible'
]

import logging
import os
from typing import Union

logger = logging.getLogger(__name__)

def file_accessible(file_path: Union[str, os.PathLike]) -> bool:
    """
    Check if a file can be opened for reading.

    All causes of failure (missing file, permissions, a directory, an invalid
    path) collapse to False.

    Example:
        >>> file_accessible('/no/such/file')
        False
    """
    try:
        with open(file_path, 'rb'):
            return True
    except (OSError, ValueError) as e:
        logger.debug("Cannot open %s: %s", file_path, e)
        return False
