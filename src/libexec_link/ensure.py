from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .git import read_exec_path
from .layout import DEFAULT_LINK_NAME, SupportLayout, current_executable, derive_layout, install_dirs
from .symlinks import SymlinkStrategy, create_symlink, describe_entry, entry_present, remove_entry

logger = logging.getLogger(__name__)


def ensure_support_symlink(
    *,
    executable_provider: Callable[[], Path] = current_executable,
    exec_path_provider: Callable[[], Path] = read_exec_path,
    symlink: SymlinkStrategy | None = None,
    link_name: str = DEFAULT_LINK_NAME,
) -> SupportLayout:
    """
    Make <base_dir>/libexec a symlink to the parent of git's exec-path,
    where base_dir is two levels above the running executable.

    e.g. executable /opt/tool/bin/app and exec-path /usr/libexec/git-core give
    /opt/tool/libexec -> /usr/libexec

    Anything already at the link path is unlinked first, so calling this again
    just recreates the same link. A real directory there cannot be unlinked and
    the call fails. The first error is raised as a SupportLinkError subclass;
    nothing is retried and earlier steps are not rolled back.
    """
    executable = executable_provider()
    # Bad install dirs fail before git is run.
    install_dirs(executable)
    exec_path = exec_path_provider()
    layout = derive_layout(executable, exec_path, link_name=link_name)
    logger.debug("binary_dir=%s base_dir=%s", layout.binary_dir, layout.base_dir)
    logger.debug("exec_path=%s libexec_target=%s", layout.exec_path, layout.libexec_target)

    link = layout.symlink_path
    if entry_present(link):
        logger.info("removing existing %s at %s", describe_entry(link), link)
        remove_entry(link)

    create_symlink(layout.libexec_target, link, strategy=symlink)
    logger.info("linked %s -> %s", link, layout.libexec_target)
    return layout
