# shipshape/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def is_real_directory(path: PathLike) -> bool:
    """Check if path is a directory and not a symlink to one"""
    return os.path.isdir(path) and not os.path.islink(path)


def is_same_or_inside(path: PathLike, directory: PathLike) -> bool:
    """Check if path is directory itself or lies somewhere below it

    Both paths are resolved first, so symlinked parents and relative
    segments compare by their real location.
    """
    path = Path(path).resolve()
    directory = Path(directory).resolve()
    return path == directory or directory in path.parents


def remove_path(path: PathLike) -> None:
    """
    Remove a file, symlink or directory tree

    Symlinks are unlinked without touching their target.

    Args:
        path: Path to remove
    """
    if is_real_directory(path):
        shutil.rmtree(path)
    else:
        os.unlink(path)


def copy_tree(src: PathLike, dst: PathLike) -> int:
    """
    Copy every entry of src into dst, overwriting what is already there

    Unlike ``shutil.copytree(..., dirs_exist_ok=True)`` a file in dst that
    collides with a directory in src (or the other way round) is replaced
    instead of aborting the copy. Symlinks are copied as symlinks.

    Args:
        src: Source directory
        dst: Destination directory (created if missing)

    Returns:
        Number of files and links copied

    Raises:
        shutil.Error: If dst is src or lies inside it
    """
    src = Path(src)
    dst = Path(dst)

    if is_same_or_inside(dst, src):
        raise shutil.Error(f"Cannot copy {src} to a subdirectory of itself, {dst}")

    return _copy_entries(src, dst)


def _copy_entries(src: Path, dst: Path) -> int:
    if os.path.lexists(dst) and not is_real_directory(dst):
        remove_path(dst)
    dst.mkdir(parents=True, exist_ok=True)

    copied = 0
    with os.scandir(src) as entries:
        for entry in entries:
            target = dst / entry.name

            if entry.is_symlink():
                if os.path.lexists(target):
                    remove_path(target)
                os.symlink(os.readlink(entry.path), target,
                           target_is_directory=entry.is_dir())
                copied += 1
            elif entry.is_dir():
                copied += _copy_entries(Path(entry.path), target)
            else:
                if is_real_directory(target) or os.path.islink(target):
                    remove_path(target)
                shutil.copy2(entry.path, target)
                copied += 1

    shutil.copystat(src, dst)
    return copied
