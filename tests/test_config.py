from __future__ import annotations

import sys
import unittest
from pathlib import Path
from unittest import mock

# Allow running tests without installing the src-layout package.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from libexec_link.config import LinkConfig  # noqa: E402
from libexec_link.layout import current_executable  # noqa: E402


class TestLinkConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = LinkConfig()
        self.assertEqual(cfg.link_name, "libexec")
        self.assertIs(cfg.executable_provider(), current_executable)

    def test_rejects_bad_values(self) -> None:
        for kwargs in ({"git_binary": " "}, {"link_name": ""}, {"link_name": ".."}, {"link_name": "a/b"}):
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValueError):
                    LinkConfig(**kwargs)

    def test_executable_override(self) -> None:
        cfg = LinkConfig(executable=Path("/opt/tool/bin/app"))
        self.assertEqual(cfg.executable_provider()(), Path("/opt/tool/bin/app").absolute())

    def test_exec_path_provider_uses_git_binary(self) -> None:
        cfg = LinkConfig(git_binary="/usr/local/bin/git")
        with mock.patch("libexec_link.config.read_exec_path", return_value=Path("/x/git-core")) as fake:
            provider = cfg.exec_path_provider()
            self.assertEqual(provider(), Path("/x/git-core"))
        fake.assert_called_once_with(git_binary="/usr/local/bin/git")


if __name__ == "__main__":
    unittest.main()
