"""Nested-scope helper for arrange/act/assert and given/when/then tests.

Each phase entry runs its block synchronously, exactly once, and hands the
block's return value back to the caller. Exceptions raised inside a block
propagate untouched. The BDD phases print a descriptive line before running
their block; that line never changes control flow.

Example::

    style = TestStyle()
    style.given("a greeting service", lambda: style.whenever(
        "greeting Ada", lambda: style.then(
            "the message names Ada",
            lambda: check(service.greet("Ada")),
        ),
    ))
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
import logging
from typing import TypeVar

from tutorkit.enums import PhaseName
from tutorkit.styles.phases import PHASE_DETAILS, describe

T = TypeVar("T")

Emitter = Callable[[str], object]

logger = logging.getLogger(__name__)


class TestStyle:
    """Runs test bodies inside labeled, nested phase scopes."""

    # Keep pytest from collecting this class when it is imported into tests.
    __test__ = False

    def __init__(self, emit: Emitter | None = None) -> None:
        self._emit: Emitter = emit or print
        self._active: list[PhaseName] = []

    @property
    def active_phases(self) -> tuple[PhaseName, ...]:
        """Phases currently entered, outermost first."""
        return tuple(self._active)

    @contextmanager
    def scope(self, phase: PhaseName, label: str | None = None) -> Iterator[None]:
        """Enter ``phase`` for the duration of a ``with`` block."""
        phase = PhaseName(phase)
        if PHASE_DETAILS[phase].labeled:
            self._emit(describe(phase, label))
        self._active.append(phase)
        logger.debug(
            "entered phase %s",
            " > ".join(p.value for p in self._active),
        )
        try:
            yield
        finally:
            self._active.pop()

    def run(self, phase: PhaseName, block: Callable[[], T], label: str | None = None) -> T:
        """Run ``block`` once inside ``phase`` and return its result."""
        with self.scope(phase, label):
            return block()

    def arrange(self, block: Callable[[], T]) -> T:
        return self.run(PhaseName.ARRANGE, block)

    def act(self, block: Callable[[], T]) -> T:
        return self.run(PhaseName.ACT, block)

    def assertion(self, block: Callable[[], T]) -> T:
        return self.run(PhaseName.ASSERTION, block)

    def given(self, label: str, block: Callable[[], T]) -> T:
        return self.run(PhaseName.GIVEN, block, label)

    def whenever(self, label: str, block: Callable[[], T]) -> T:
        return self.run(PhaseName.WHENEVER, block, label)

    def then(self, label: str, block: Callable[[], T]) -> T:
        return self.run(PhaseName.THEN, block, label)


_default_style = TestStyle()


def arrange(block: Callable[[], T]) -> T:
    """Run the arrange block of a TDD-style test."""
    return _default_style.arrange(block)


def act(block: Callable[[], T]) -> T:
    """Run the act block of a TDD-style test."""
    return _default_style.act(block)


def assertion(block: Callable[[], T]) -> T:
    """Run the assertion block of a TDD-style test."""
    return _default_style.assertion(block)


def given(label: str, block: Callable[[], T]) -> T:
    """Print ``Given <label>`` and run the block."""
    return _default_style.given(label, block)


def whenever(label: str, block: Callable[[], T]) -> T:
    """Print ``When <label>`` and run the block."""
    return _default_style.whenever(label, block)


def then(label: str, block: Callable[[], T]) -> T:
    """Print ``Then <label>`` and run the block."""
    return _default_style.then(label, block)


def scope(phase: PhaseName, label: str | None = None) -> AbstractContextManager[None]:
    """Context-manager form of a phase on the default style."""
    return _default_style.scope(phase, label)
