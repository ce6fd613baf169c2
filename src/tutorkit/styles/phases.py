"""Declares the phrasing phases and their console metadata."""

from __future__ import annotations

from dataclasses import dataclass

from tutorkit.enums import PhaseName, StyleKind


@dataclass(frozen=True)
class PhaseInfo:
    style: StyleKind
    keyword: str
    labeled: bool


TDD_SEQUENCE: tuple[PhaseName, ...] = (
    PhaseName.ARRANGE,
    PhaseName.ACT,
    PhaseName.ASSERTION,
)

BDD_SEQUENCE: tuple[PhaseName, ...] = (
    PhaseName.GIVEN,
    PhaseName.WHENEVER,
    PhaseName.THEN,
)

PHASE_DETAILS: dict[PhaseName, PhaseInfo] = {
    PhaseName.ARRANGE: PhaseInfo(style=StyleKind.TDD, keyword="Arrange", labeled=False),
    PhaseName.ACT: PhaseInfo(style=StyleKind.TDD, keyword="Act", labeled=False),
    PhaseName.ASSERTION: PhaseInfo(
        style=StyleKind.TDD, keyword="Assert", labeled=False
    ),
    PhaseName.GIVEN: PhaseInfo(style=StyleKind.BDD, keyword="Given", labeled=True),
    PhaseName.WHENEVER: PhaseInfo(style=StyleKind.BDD, keyword="When", labeled=True),
    PhaseName.THEN: PhaseInfo(style=StyleKind.BDD, keyword="Then", labeled=True),
}


def phases_for(style: StyleKind) -> tuple[PhaseName, ...]:
    """Return the canonical phase order for a style."""
    return TDD_SEQUENCE if style is StyleKind.TDD else BDD_SEQUENCE


def describe(phase: PhaseName, label: str | None) -> str:
    """Render the console line announcing a labeled phase."""
    keyword = PHASE_DETAILS[phase].keyword
    text = (label or "").strip()
    return f"{keyword} {text}" if text else keyword


__all__ = [
    "PhaseInfo",
    "TDD_SEQUENCE",
    "BDD_SEQUENCE",
    "PHASE_DETAILS",
    "phases_for",
    "describe",
]
