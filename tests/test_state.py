from __future__ import annotations

import logging

import pytest

from error_catch_notifier.config import NotifierConfig
from error_catch_notifier.state import NotifierState


def valid_sub(error):  # noqa: ARG001
    return None


def test_defaults_are_off() -> None:
    state = NotifierState()

    assert state.is_enabled is False
    assert state.is_logging_enabled is False
    assert state.has_subscribers() is False


def test_enable_logging_is_idempotent() -> None:
    state = NotifierState()

    state.enable_logging()
    once = state.is_logging_enabled
    state.enable_logging()

    assert once is True
    assert state.is_logging_enabled is True

    state.disable_logging()
    assert state.is_logging_enabled is False


def test_enable_error_catching_without_subscribers_stays_off() -> None:
    state = NotifierState()
    state.init([], False, False)

    state.enable_error_catching()

    assert state.is_enabled is False


def test_enable_error_catching_warns_when_logging(caplog: pytest.LogCaptureFixture) -> None:
    state = NotifierState()
    state.init([], False, True)
    caplog.set_level(logging.DEBUG)

    state.enable_error_catching()

    assert [r.getMessage() for r in caplog.records] == [
        "No valid error subscribers provided. Use init to pass valid error subscribers"
    ]
    assert caplog.records[0].levelno == logging.WARNING


def test_init_with_valid_subscriber_enables_both_flags() -> None:
    state = NotifierState()

    state.init([valid_sub], True, True)

    assert state.is_enabled is True
    assert state.is_logging_enabled is True
    assert list(state.iter_subscribers()) == [valid_sub]


def test_init_with_only_invalid_subscribers_keeps_catching_off() -> None:
    state = NotifierState()

    state.init([lambda: None, "nope"], True, False)

    assert state.is_enabled is False
    assert state.has_subscribers() is False


def test_init_replaces_previous_subscribers() -> None:
    def other_sub(error):  # noqa: ARG001
        return None

    state = NotifierState()
    state.init([valid_sub], True)
    state.init([other_sub], True)

    assert list(state.iter_subscribers()) == [other_sub]


def test_init_rejects_non_sequence_and_keeps_previous_state(caplog: pytest.LogCaptureFixture) -> None:
    state = NotifierState()
    state.init([valid_sub], True, False)
    caplog.set_level(logging.DEBUG)

    state.init(valid_sub, False, True)  # type: ignore[arg-type]

    assert [r.getMessage() for r in caplog.records] == ["errorSubscriberFunctions must be an array of functions"]
    assert caplog.records[0].levelno == logging.ERROR
    assert state.is_logging_enabled is True
    assert state.is_enabled is True
    assert list(state.iter_subscribers()) == [valid_sub]


def test_init_rejects_string_silently_without_logging(caplog: pytest.LogCaptureFixture) -> None:
    state = NotifierState()
    caplog.set_level(logging.DEBUG)

    state.init("error", True, False)  # type: ignore[arg-type]

    assert caplog.records == []
    assert state.is_enabled is False


def test_init_accepts_tuple() -> None:
    state = NotifierState()

    state.init((valid_sub,), True)

    assert state.is_enabled is True


def test_disable_error_catching_keeps_subscribers() -> None:
    state = NotifierState()
    state.init([valid_sub], True)

    state.disable_error_catching()
    assert state.is_enabled is False

    state.enable_error_catching()
    assert state.is_enabled is True


def test_logging_toggle_does_not_touch_catching() -> None:
    state = NotifierState()
    state.init([valid_sub], True)

    state.enable_logging()
    state.disable_logging()

    assert state.is_enabled is True


def test_apply_config_uses_config_flags() -> None:
    state = NotifierState()

    state.apply_config(NotifierConfig(catching_enabled=True, logging_enabled=True), [valid_sub])

    assert state.is_enabled is True
    assert state.is_logging_enabled is True


def test_states_compare_by_identity() -> None:
    logger = logging.getLogger("test_ecn_identity")
    a = NotifierState(logger=logger)
    b = NotifierState(logger=logger)
    a.init([valid_sub], True, True)

    assert a != b
    assert a == a
