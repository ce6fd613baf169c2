"""Invariant: adapters and helpers stay isolated from unrelated layers."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[2] / "src" / "tutorkit"

FORBIDDEN_BY_PACKAGE = {
    "httpapi": ("tutorkit.docs", "tutorkit.cli", "tutorkit.main", "tutorkit.styles"),
    "api": ("tutorkit.httpapi", "tutorkit.docs", "tutorkit.cli", "tutorkit.main"),
    "styles": (
        "tutorkit.docs",
        "tutorkit.greeting",
        "tutorkit.api",
        "tutorkit.httpapi",
        "tutorkit.cli",
    ),
    "docs": ("tutorkit.greeting", "tutorkit.api", "tutorkit.httpapi", "tutorkit.cli"),
}


def _imported_modules(path: Path) -> list[tuple[int, str]]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    found: list[tuple[int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.extend((node.lineno, alias.name) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            found.append((node.lineno, node.module))
    return found


@pytest.mark.parametrize("package", sorted(FORBIDDEN_BY_PACKAGE))
def test_package_does_not_import_forbidden_layers(package: str) -> None:
    forbidden = FORBIDDEN_BY_PACKAGE[package]
    violations: list[str] = []
    for path in sorted((SRC_ROOT / package).rglob("*.py")):
        violations.extend(
            f"{path}:{lineno} imports {module}"
            for lineno, module in _imported_modules(path)
            if module.startswith(forbidden)
        )
    assert not violations, f"{package} crosses layers:\n" + "\n".join(violations)
