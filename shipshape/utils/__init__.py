# shipshape/utils/__init__.py
"""Utility functions for shipshape"""

from .file_utils import (
    copy_tree,
    is_same_or_inside,
    remove_path,
    is_real_directory,
)

from .async_utils import (
    run_async,
    sync_to_async,
)

__all__ = [
    # File utilities
    "copy_tree",
    "is_same_or_inside",
    "remove_path",
    "is_real_directory",

    # Async utilities
    "run_async",
    "sync_to_async",
]
