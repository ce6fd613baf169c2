"""Runtime version resolution helpers."""

# ruff: noqa: S603

from __future__ import annotations

from importlib import metadata
from pathlib import Path
import shutil
import subprocess  # nosec B404 - subprocess is used with fixed git arguments

DISTRIBUTION_NAME = "tutorkit"


def _installed_version() -> str | None:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return None


def _rev_parse_short(repo_root: Path) -> str | None:
    git_exec = shutil.which("git")
    if not git_exec:
        return None
    try:
        result = subprocess.run(  # nosec S603
            [git_exec, "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
            cwd=repo_root,
        )
    except (subprocess.CalledProcessError, OSError):
        return None
    return result.stdout.strip() or None


def get_runtime_version() -> str:
    """Resolve the version from package metadata, falling back to git."""
    installed = _installed_version()
    if installed:
        return installed
    repo_root = Path(__file__).resolve().parents[3]
    short_hash = _rev_parse_short(repo_root)
    if short_hash:
        return f"dev+{short_hash}"
    return "dev+unknown"
