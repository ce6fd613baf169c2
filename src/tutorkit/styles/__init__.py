"""Nested-scope phrasing helpers for TDD and BDD style tests."""

from __future__ import annotations

from .helper import (
    TestStyle,
    act,
    arrange,
    assertion,
    given,
    scope,
    then,
    whenever,
)

__all__ = [
    "TestStyle",
    "arrange",
    "act",
    "assertion",
    "given",
    "whenever",
    "then",
    "scope",
]
