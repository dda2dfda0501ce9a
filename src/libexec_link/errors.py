from __future__ import annotations

from pathlib import Path
from typing import Sequence


class SupportLinkError(Exception):
    """Base class for every failure of the libexec symlink setup."""


class EnvironmentResolutionError(SupportLinkError):
    """The running program's own executable path could not be determined."""


class GitCommandError(SupportLinkError):
    """git could not be started or exited with a non-zero status."""

    def __init__(self, cmd: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            msg = f"Failed to run {' '.join(self.cmd)!r}"
        else:
            msg = f"{' '.join(self.cmd)!r} exited with status {returncode}"
        if stderr:
            msg = f"{msg}: {stderr}"
        super().__init__(msg)


class GitOutputDecodeError(SupportLinkError):
    """git wrote something to stdout that is not UTF-8 text."""


class PathDerivationError(SupportLinkError, ValueError):
    """A path that must have a parent directory does not have one."""


class FilesystemMutationError(SupportLinkError, OSError):
    """Removing the old entry or creating the new symlink failed."""

    def __init__(self, action: str, path: Path, cause: OSError) -> None:
        super().__init__(f"Cannot {action} {path}: {cause.strerror or cause}")
        self.action = action
        self.path = path
        self.errno = cause.errno
