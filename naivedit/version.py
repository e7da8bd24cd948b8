"""Version and build information for ``naivedit --version``."""

from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

DISTRIBUTION = "naivedit"


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]
    dirty: bool


def _git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def _from_git_checkout() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    if _git(["rev-parse", "--show-toplevel"], here) is None:
        return None
    commit = _git(["rev-parse", "HEAD"], here)
    date = _git(["show", "-s", "--format=%cI", "HEAD"], here)
    dirty = bool(_git(["status", "--porcelain"], here))
    return BuildInfo(commit=commit, date=date, dirty=dirty)


def _from_build_hook() -> Optional[BuildInfo]:
    # Written into the wheel by hatch_build.py
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    commit = getattr(_build_info, "COMMIT", None)
    date = getattr(_build_info, "DATE", None)
    if not (commit or date):
        return None
    return BuildInfo(commit=commit, date=date, dirty=False)


def get_build_info() -> BuildInfo:
    for getter in (_from_git_checkout, _from_build_hook):
        info = getter()
        if info and (info.commit or info.date):
            return info
    return BuildInfo(commit=None, date=None, dirty=False)


def get_package_version() -> str:
    try:
        return importlib.metadata.version(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_version_string() -> str:
    """e.g. ``naivedit 0.1.0 (1a2b3c4-dirty 2026-10-19T10:00:00+02:00)``"""
    info = get_build_info()
    commit = info.commit[:7] if info.commit else "unknown"
    if info.dirty:
        commit += "-dirty"
    return f"{DISTRIBUTION} {get_package_version()} ({commit} {info.date or 'unknown'})"
