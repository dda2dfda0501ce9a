from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable

from .git import read_exec_path
from .layout import DEFAULT_LINK_NAME, current_executable


@dataclass(frozen=True)
class LinkConfig:
    git_binary: str = "git"
    link_name: str = DEFAULT_LINK_NAME
    executable: Path | None = None

    def __post_init__(self) -> None:
        if self.git_binary.strip() == "":
            raise ValueError("git_binary must not be empty.")
        name = self.link_name
        if name in ("", ".", "..") or Path(name).name != name or "\\" in name:
            raise ValueError(f"link_name must be a single path component, got {name!r}")

    def executable_provider(self) -> Callable[[], Path]:
        if self.executable is None:
            return current_executable
        fixed = Path(self.executable).absolute()
        return lambda: fixed

    def exec_path_provider(self) -> Callable[[], Path]:
        return partial(read_exec_path, git_binary=self.git_binary)
