from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from .errors import EnvironmentResolutionError, PathDerivationError


DEFAULT_LINK_NAME = "libexec"


@dataclass(frozen=True)
class SupportLayout:
    """
    Paths involved in one run of the symlink setup:

      base_dir/
        bin/app          <- executable (binary_dir = base_dir/bin)
        libexec  ->  libexec_target   (parent of git's exec_path)
    """

    executable: Path
    binary_dir: Path
    base_dir: Path
    exec_path: Path
    libexec_target: Path
    symlink_path: Path


def parent_of(path: Path, what: str) -> Path:
    parent = path.parent
    # Path("/").parent, Path(".").parent and Path("").parent are all themselves.
    if parent == path:
        raise PathDerivationError(f"Cannot get {what} from {str(path)!r}")
    return parent


def current_executable() -> Path:
    """
    Absolute path of the program that is running right now.

    Frozen applications (PyInstaller and friends) report themselves through
    sys.executable; otherwise the launched script is sys.argv[0].
    """
    if getattr(sys, "frozen", False):
        if not sys.executable:
            raise EnvironmentResolutionError("Frozen application without sys.executable.")
        return Path(sys.executable).resolve()

    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 in ("", "-c", "-m"):
        raise EnvironmentResolutionError(f"Cannot determine the current executable from argv[0]={argv0!r}")
    try:
        return Path(argv0).resolve()
    except (OSError, RuntimeError) as exc:
        # RuntimeError: symlink loop on older Pythons.
        raise EnvironmentResolutionError(f"Cannot resolve current executable {argv0!r}: {exc}") from exc


def install_dirs(executable: Path) -> tuple[Path, Path]:
    """(binary_dir, base_dir): the first and second parents of the executable."""
    binary_dir = parent_of(executable, "binary directory")
    base_dir = parent_of(binary_dir, "base directory")
    return binary_dir, base_dir


def derive_layout(executable: Path, exec_path: Path, *, link_name: str = DEFAULT_LINK_NAME) -> SupportLayout:
    """
    Pure path arithmetic; nothing on disk is read or written.
    """
    binary_dir, base_dir = install_dirs(executable)
    libexec_target = parent_of(exec_path, "libexec directory from exec-path")
    return SupportLayout(
        executable=executable,
        binary_dir=binary_dir,
        base_dir=base_dir,
        exec_path=exec_path,
        libexec_target=libexec_target,
        symlink_path=base_dir / link_name,
    )
