from __future__ import annotations

import logging

import pytest

from error_catch_notifier.notifier import notify_error_subscribers
from error_catch_notifier.state import NotifierState
from error_catch_notifier.subscribers import build_subscriber_list


def error_subscriber1(error):  # noqa: ARG001
    return None


def error_subscriber2(error, options=None, failback=None):  # noqa: ARG001
    return None


def bad_subscriber():
    return None


def wrong_name(err):  # noqa: ARG001
    return None


@pytest.fixture
def state() -> NotifierState:
    return NotifierState()


def test_returns_valid_subscribers(state: NotifierState) -> None:
    subs = [error_subscriber1, error_subscriber2]

    assert build_subscriber_list(subs, state=state) == subs


def test_drops_function_without_error_argument(state: NotifierState) -> None:
    assert build_subscriber_list([error_subscriber1, bad_subscriber], state=state) == [error_subscriber1]


def test_preserves_relative_order_of_survivors(state: NotifierState) -> None:
    candidates = [error_subscriber2, "x", wrong_name, error_subscriber1, {}, bad_subscriber]

    assert build_subscriber_list(candidates, state=state) == [error_subscriber2, error_subscriber1]


def test_default_input_is_empty(state: NotifierState) -> None:
    assert build_subscriber_list(state=state) == []


def test_accepts_lambda_and_callable_instance(state: NotifierState) -> None:
    class Handler:
        def __call__(self, error):  # noqa: ARG002
            return None

    handler = Handler()
    anon = lambda error: None  # noqa: E731

    assert build_subscriber_list([anon, handler], state=state) == [anon, handler]


def test_rejections_are_silent_when_logging_disabled(state: NotifierState, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    build_subscriber_list([{}, bad_subscriber], state=state)

    assert caplog.records == []


def test_non_callable_rejection_logs_index(state: NotifierState, caplog: pytest.LogCaptureFixture) -> None:
    state.enable_logging()
    caplog.set_level(logging.DEBUG)

    build_subscriber_list([error_subscriber1, "oops"], state=state)

    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        "Skipping error subscriber: oops at errorSubscribers index 1",
        "Subscriber is not a function",
    ]
    assert all(r.levelno == logging.WARNING for r in caplog.records)


def test_wrong_signature_rejection_logs_name(state: NotifierState, caplog: pytest.LogCaptureFixture) -> None:
    state.enable_logging()
    caplog.set_level(logging.DEBUG)

    build_subscriber_list([wrong_name], state=state)

    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        "Skipping error subscriber: wrong_name",
        "First argument of subscriber function must be named error",
    ]


def test_rejects_error_that_cannot_be_passed_positionally(state: NotifierState) -> None:
    def keyword_only(*, error):  # noqa: ARG001
        return None

    def keywords(**error):  # noqa: ARG001
        return None

    def star_args(*error):  # noqa: ARG001
        return None

    candidates = [keyword_only, keywords, star_args, error_subscriber1]

    assert build_subscriber_list(candidates, state=state) == [star_args, error_subscriber1]


def test_keyword_only_error_does_not_block_later_subscribers() -> None:
    seen: list[object] = []

    def keyword_only(*, error):  # noqa: ARG001
        return None

    def good(error):
        seen.append(error)

    state = NotifierState()
    state.init([keyword_only, good], True, False)
    err = ValueError("x")

    notify_error_subscribers(err, state=state)

    assert seen == [err]
