#!/usr/bin/env python3
"""Fail when the tutorial docs contain broken links or one-way navigation."""

from __future__ import annotations

from pathlib import Path
import sys

from tutorkit.config.settings import load_settings
from tutorkit.docs import check_with_settings, render


def main() -> int:
    repo_root = Path(__file__).resolve().parents[1]
    settings = load_settings(
        repo_root / "tutorkit.yml",
        overrides={"docs": {"root": str(repo_root)}},
    )
    report = check_with_settings(settings.docs)
    if not report.ok:
        print("error: documentation integrity check failed:")
        print(render(report))
        return 1
    print(render(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
