"""Centralized semantic enums for tutorkit."""

from __future__ import annotations

from enum import Enum


class StyleKind(str, Enum):
    """Phrasing styles a test body can be written in."""

    TDD = "tdd"
    BDD = "bdd"


class PhaseName(str, Enum):
    """Named phases of the nested-scope phrasing helper."""

    ARRANGE = "arrange"
    ACT = "act"
    ASSERTION = "assertion"
    GIVEN = "given"
    WHENEVER = "whenever"
    THEN = "then"


class NavigationDirection(str, Enum):
    """Direction of a navigation link between tutorial documents."""

    NEXT = "next"
    BACK = "back"

    @property
    def opposite(self) -> NavigationDirection:
        if self is NavigationDirection.NEXT:
            return NavigationDirection.BACK
        return NavigationDirection.NEXT


class IssueKind(str, Enum):
    """Classifies problems found in the documentation corpus."""

    BROKEN_LINK = "broken_link"
    OUTSIDE_ROOT = "outside_root"
    MISSING_ANCHOR = "missing_anchor"
    NAV_DANGLING = "nav_dangling"
    NAV_NOT_RECIPROCATED = "nav_not_reciprocated"
    NAV_DISCONNECTED = "nav_disconnected"


class OutputFormat(str, Enum):
    """Report renderings supported by the CLI."""

    TEXT = "text"
    JSON = "json"
