from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running without installing the package
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from libexec_link.config import LinkConfig  # noqa: E402
from libexec_link.ensure import ensure_support_symlink  # noqa: E402
from libexec_link.errors import SupportLinkError  # noqa: E402
from libexec_link.layout import derive_layout  # noqa: E402
from libexec_link.symlinks import describe_entry  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Point <install root>/libexec at the parent of `git --exec-path`."
    )
    p.add_argument("--executable", type=Path, default=None, help="Use this path instead of the running program.")
    p.add_argument("--git", dest="git_binary", default="git", help="git binary to query.")
    p.add_argument("--link-name", default="libexec")
    p.add_argument("--dry-run", action="store_true", help="Print the layout without touching the filesystem.")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = LinkConfig(git_binary=args.git_binary, link_name=args.link_name, executable=args.executable)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    try:
        if args.dry_run:
            layout = derive_layout(
                cfg.executable_provider()(), cfg.exec_path_provider()(), link_name=cfg.link_name
            )
            state = describe_entry(layout.symlink_path)
        else:
            layout = ensure_support_symlink(
                executable_provider=cfg.executable_provider(),
                exec_path_provider=cfg.exec_path_provider(),
                link_name=cfg.link_name,
            )
    except SupportLinkError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.dry_run:
        print("OK: dry run, nothing changed")
        print(f"- executable: {layout.executable}")
        print(f"- base dir: {layout.base_dir}")
        print(f"- git exec-path: {layout.exec_path}")
        print(f"- {layout.symlink_path} ({state}) would point to {layout.libexec_target}")
    else:
        print(f"OK: {layout.symlink_path} -> {layout.libexec_target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
