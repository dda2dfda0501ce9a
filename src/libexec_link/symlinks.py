from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Callable

from .errors import FilesystemMutationError

logger = logging.getLogger(__name__)


# Called as strategy(target, link).
SymlinkStrategy = Callable[[Path, Path], None]


def posix_symlink(target: Path, link: Path) -> None:
    os.symlink(target, link)


def windows_dir_symlink(target: Path, link: Path) -> None:
    # Windows needs to know up front that the link points at a directory.
    os.symlink(target, link, target_is_directory=True)


def select_symlink_strategy(os_name: str | None = None) -> SymlinkStrategy:
    if (os_name or os.name) == "nt":
        return windows_dir_symlink
    return posix_symlink


def _lstat(path: Path) -> os.stat_result | None:
    try:
        return path.lstat()
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as exc:
        raise FilesystemMutationError("inspect", path, exc) from exc


def entry_present(path: Path) -> bool:
    """
    True if anything sits at path, including a dangling symlink
    (which fails exists() but still has lstat metadata).
    """
    return _lstat(path) is not None


def describe_entry(path: Path) -> str:
    st = _lstat(path)
    if st is None:
        return "missing"
    if stat.S_ISLNK(st.st_mode):
        return "symlink" if os.path.exists(path) else "dangling symlink"
    if stat.S_ISDIR(st.st_mode):
        return "directory"
    return "file"


def remove_entry(path: Path) -> None:
    """
    Remove whatever is at path with a file-style unlink.

    A real directory is not removed recursively: unlink fails and the error
    propagates.
    """
    try:
        path.unlink()
    except OSError as exc:
        raise FilesystemMutationError("remove", path, exc) from exc


def create_symlink(target: Path, link: Path, *, strategy: SymlinkStrategy | None = None) -> None:
    if strategy is None:
        strategy = select_symlink_strategy()
    try:
        strategy(target, link)
    except OSError as exc:
        raise FilesystemMutationError("create symlink", link, exc) from exc
