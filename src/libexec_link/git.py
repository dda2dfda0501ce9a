from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .errors import GitCommandError, GitOutputDecodeError

logger = logging.getLogger(__name__)


def exec_git(args: Sequence[str], *, git_binary: str = "git") -> subprocess.CompletedProcess:
    """
    Run git and wait for it. Blocks until the process exits; there is no timeout.

    Raises GitCommandError if git cannot be started or exits non-zero.
    """
    cmd = [git_binary, *args]
    logger.debug("running %s", cmd)
    try:
        res = subprocess.run(cmd, capture_output=True, check=False)
    except OSError as exc:
        raise GitCommandError(cmd, None, str(exc)) from exc

    if res.returncode != 0:
        stderr = res.stderr.decode("utf-8", errors="replace").strip()
        raise GitCommandError(cmd, res.returncode, stderr)
    return res


def read_exec_path(*, git_binary: str = "git") -> Path:
    """
    Ask git where it keeps its helper programs, e.g. /usr/libexec/git-core.
    """
    res = exec_git(["--exec-path"], git_binary=git_binary)
    try:
        text = res.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise GitOutputDecodeError(f"git --exec-path printed non UTF-8 output: {exc}") from exc
    return Path(text.strip())
