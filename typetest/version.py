"""Version string for ``typetest --version``.

The commit is looked up, in order, from a live git checkout, from the
``_build_info`` module written by the hatch build hook, and from the PEP 610
``direct_url.json`` of a VCS install.
"""

from __future__ import annotations

import importlib.metadata
import json
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

DISTRIBUTION = "typetest"


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]
    dirty: bool = False


def _git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL
        )
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def _from_git_checkout() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    if _git(["rev-parse", "--show-toplevel"], here) is None:
        return None
    status = _git(["status", "--porcelain"], here)
    return BuildInfo(
        commit=_git(["rev-parse", "HEAD"], here),
        date=_git(["show", "-s", "--format=%cI", "HEAD"], here),
        dirty=bool(status),
    )


def _from_build_info() -> Optional[BuildInfo]:
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    return BuildInfo(
        commit=getattr(_build_info, "COMMIT", None),
        date=getattr(_build_info, "DATE", None),
    )


def _from_direct_url() -> Optional[BuildInfo]:
    try:
        dist = importlib.metadata.distribution(DISTRIBUTION)
        text = dist.read_text("direct_url.json")
    except importlib.metadata.PackageNotFoundError:
        return None
    if not text:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    commit = (data.get("vcs_info") or {}).get("commit_id")
    return BuildInfo(commit=commit, date=None) if commit else None


def get_build_info() -> BuildInfo:
    for getter in (_from_git_checkout, _from_build_info, _from_direct_url):
        info = getter()
        if info and (info.commit or info.date):
            return info
    return BuildInfo(commit=None, date=None)


def get_version_string() -> str:
    info = get_build_info()
    # Short (7-character) hashes when known
    commit = info.commit[:7] if info.commit else "unknown"
    dirty = "-dirty" if info.dirty else ""
    return f"{commit}{dirty} {info.date or 'unknown'}"
