"""Loads environment overrides from ``.env`` files and the process environment."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from tutorkit.constants import ENV_DOCS_ROOT, ENV_LOG_LEVEL


def load_environment(dotenv_path: str | Path | None = None) -> bool:
    """Load a `.env` file when available; return whether one was read."""
    path = Path(dotenv_path) if dotenv_path else Path(".env")
    if path.exists():
        return load_dotenv(dotenv_path=path)
    return False


def environment_overrides() -> dict[str, dict[str, str]]:
    """Collect configuration overrides from ``TUTORKIT_*`` variables."""
    overrides: dict[str, dict[str, str]] = {}
    docs_root = os.getenv(ENV_DOCS_ROOT)
    if docs_root:
        overrides.setdefault("docs", {})["root"] = docs_root
    log_level = os.getenv(ENV_LOG_LEVEL)
    if log_level:
        overrides.setdefault("logging", {})["log_level"] = log_level
    return overrides


__all__ = ["load_environment", "environment_overrides"]
