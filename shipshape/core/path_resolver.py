"""Path resolution module for shipshape"""

import os
from pathlib import Path
from typing import Optional, Union

from ..constants import CONFIG_FILE_CANDIDATES


class PathResolver:
    """Resolves configured paths against the invocation root"""

    def __init__(self, invocation_root: Optional[Union[str, Path]] = None):
        """Initialize path resolver

        Args:
            invocation_root: Directory the deployment was started from
                (defaults to the current working directory)
        """
        self.invocation_root = Path(os.path.abspath(invocation_root or os.getcwd()))

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to the invocation root

        Symlinks are not followed, so a destination reached through a
        link keeps its configured spelling.

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Absolute, normalized path
        """
        return Path(os.path.abspath(os.path.join(self.invocation_root, path)))

    def resolve_source(self, source: str) -> Path:
        """Resolve the configured source directory"""
        return self.resolve(source)

    def resolve_destination(self, destination: str) -> Path:
        """Resolve the configured destination directory"""
        return self.resolve(destination)

    def find_config_file(self) -> Optional[Path]:
        """Find the first configuration file present in the invocation root

        Returns:
            Path to the configuration file or None
        """
        for name in CONFIG_FILE_CANDIDATES:
            candidate = self.invocation_root / name
            if candidate.is_file():
                return candidate
        return None

    def make_relative(self, path: Union[str, Path]) -> Path:
        """Make a path relative to the invocation root when it is under it"""
        path = Path(os.path.abspath(path))

        try:
            return path.relative_to(self.invocation_root)
        except ValueError:
            return path
