"""Custom build hook for Hatchling to embed the git commit in the package."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO = "typetest/_build_info.py"


class CustomBuildHook(BuildHookInterface):
    """Writes typetest/_build_info.py for ``typetest --version``."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        target = Path(self.root) / BUILD_INFO
        commit = self._git(["rev-parse", "HEAD"])
        date = self._git(["show", "-s", "--format=%cI", "HEAD"])
        target.write_text(
            "# Auto-generated at build time.\n"
            f"COMMIT = {commit!r}\n"
            f"DATE = {date!r}\n",
            encoding="utf-8",
        )
        build_data.setdefault("artifacts", []).append(BUILD_INFO)

    def _git(self, args: list[str]) -> str | None:
        try:
            out = subprocess.check_output(["git", *args], cwd=self.root,
                                          stderr=subprocess.DEVNULL)
        except (subprocess.CalledProcessError, FileNotFoundError, OSError):
            # A source tree without git still builds
            return None
        return out.decode().strip() or None
