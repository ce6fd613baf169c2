from __future__ import annotations

from contextlib import AbstractContextManager
import logging
from typing import get_type_hints

import pytest

from tutorkit import styles
from tutorkit.enums import PhaseName, StyleKind
from tutorkit.styles import TestStyle
from tutorkit.styles.phases import BDD_SEQUENCE, PHASE_DETAILS, TDD_SEQUENCE, describe, phases_for


class _Boom(Exception):
    pass


def _recording_style() -> tuple[TestStyle, list[str]]:
    emitted: list[str] = []
    return TestStyle(emit=emitted.append), emitted


def test_tdd_phases_run_block_once_and_return_its_value() -> None:
    style, emitted = _recording_style()
    calls: list[str] = []

    def block() -> int:
        calls.append("ran")
        return 42

    assert style.arrange(block) == 42
    assert style.act(block) == 42
    assert style.assertion(block) == 42
    assert calls == ["ran", "ran", "ran"]
    assert emitted == []


def test_bdd_phases_emit_label_before_running_block() -> None:
    style, emitted = _recording_style()
    order: list[str] = []

    def block() -> str:
        order.append(f"block after {len(emitted)} line(s)")
        return "done"

    assert style.given("a greeting service", block) == "done"
    assert style.whenever("Ada is greeted", block) == "done"
    assert style.then("the message names Ada", block) == "done"
    assert emitted == [
        "Given a greeting service",
        "When Ada is greeted",
        "Then the message names Ada",
    ]
    assert order == [
        "block after 1 line(s)",
        "block after 2 line(s)",
        "block after 3 line(s)",
    ]


def test_nested_phases_run_inside_out_and_return_innermost_value() -> None:
    style, emitted = _recording_style()
    seen: list[tuple[PhaseName, ...]] = []

    def innermost() -> str:
        seen.append(style.active_phases)
        return "ok"

    result = style.given(
        "a context",
        lambda: style.whenever("an event", lambda: style.then("an outcome", innermost)),
    )
    assert result == "ok"
    assert seen == [(PhaseName.GIVEN, PhaseName.WHENEVER, PhaseName.THEN)]
    assert emitted == ["Given a context", "When an event", "Then an outcome"]
    assert style.active_phases == ()


def test_exceptions_propagate_unchanged_and_stack_unwinds() -> None:
    style, _ = _recording_style()
    error = _Boom("inner failure")

    def explode() -> None:
        raise error

    with pytest.raises(_Boom) as caught:
        style.arrange(lambda: style.act(lambda: style.assertion(explode)))
    assert caught.value is error
    assert style.active_phases == ()


def test_assertion_errors_are_not_translated() -> None:
    style, _ = _recording_style()

    def failing_check() -> None:
        assert 1 == 2, "mismatch"

    with pytest.raises(AssertionError, match="mismatch"):
        style.then("the values match", failing_check)


def test_label_does_not_change_control_flow() -> None:
    style, emitted = _recording_style()
    assert style.given("", lambda: "a") == "a"
    assert style.given("   ", lambda: "b") == "b"
    assert emitted == ["Given", "Given"]


def test_scope_context_manager_emits_and_tracks_phase() -> None:
    style, emitted = _recording_style()
    with style.scope(PhaseName.GIVEN, "a context"):
        assert style.active_phases == (PhaseName.GIVEN,)
        with style.scope(PhaseName.ACT):
            assert style.active_phases == (PhaseName.GIVEN, PhaseName.ACT)
    assert emitted == ["Given a context"]
    assert style.active_phases == ()


def test_module_level_helpers_print_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    value = styles.given(
        "a number",
        lambda: styles.whenever("it is doubled", lambda: styles.then("it is even", lambda: 2 * 21)),
    )
    assert value == 42
    assert capsys.readouterr().out.splitlines() == [
        "Given a number",
        "When it is doubled",
        "Then it is even",
    ]
    assert styles.arrange(lambda: styles.act(lambda: styles.assertion(lambda: "x"))) == "x"
    assert capsys.readouterr().out == ""


def test_phase_table_covers_both_styles() -> None:
    assert phases_for(StyleKind.TDD) == TDD_SEQUENCE
    assert phases_for(StyleKind.BDD) == BDD_SEQUENCE
    assert set(PHASE_DETAILS) == set(TDD_SEQUENCE) | set(BDD_SEQUENCE)
    assert all(not PHASE_DETAILS[phase].labeled for phase in TDD_SEQUENCE)
    assert all(PHASE_DETAILS[phase].labeled for phase in BDD_SEQUENCE)
    assert describe(PhaseName.WHENEVER, " it rains ") == "When it rains"


def test_style_is_not_collected_by_pytest() -> None:
    assert TestStyle.__test__ is False


def test_each_phase_entry_is_logged_with_its_nesting_path(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.DEBUG, logger="tutorkit.styles.helper")
    style, _ = _recording_style()
    style.given(
        "a style",
        lambda: style.whenever("nesting", lambda: style.then("logged", lambda: None)),
    )
    messages = [
        record.getMessage()
        for record in caplog.records
        if record.name == "tutorkit.styles.helper"
    ]
    assert messages == [
        "entered phase given",
        "entered phase given > whenever",
        "entered phase given > whenever > then",
    ]
    assert {
        record.levelno for record in caplog.records if record.name == "tutorkit.styles.helper"
    } == {logging.DEBUG}


def test_module_level_scope_is_a_context_manager(capsys: pytest.CaptureFixture[str]) -> None:
    assert get_type_hints(styles.scope)["return"] == AbstractContextManager[None]
    manager = styles.scope(PhaseName.THEN, "the default style prints")
    assert isinstance(manager, AbstractContextManager)
    with manager:
        pass
    assert capsys.readouterr().out == "Then the default style prints\n"
