from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Callable

from .inspection import callable_name, first_argument_is_positional, get_argument_names, is_function

if TYPE_CHECKING:
    from .state import NotifierState

ErrorSubscriber = Callable[..., Any]

REQUIRED_FIRST_ARGUMENT = "error"


def build_subscriber_list(
    candidates: Sequence[Any] = (),
    *,
    state: "NotifierState",
) -> list[ErrorSubscriber]:
    """
    Filter candidate callbacks down to valid error subscribers.

    A candidate survives when it is callable and its first declared
    parameter is named ``error`` and can be passed positionally
    (``def on_error(*, error)`` is rejected). Survivors keep their relative order.
    Rejections are logged as warnings only when logging is enabled on
    `state`.

    Usage example
    -------------
        def on_error(error, options=None, failback=None): ...
        build_subscriber_list([on_error, "nope"], state=state)  # [on_error]
    """
    logger = state.logger
    accepted: list[ErrorSubscriber] = []

    for index, candidate in enumerate(candidates):
        if not is_function(candidate):
            if state.is_logging_enabled:
                logger.warning("Skipping error subscriber: %s at errorSubscribers index %d", candidate, index)
                logger.warning("Subscriber is not a function")
            continue

        names = get_argument_names(candidate)
        if not names or names[0] != REQUIRED_FIRST_ARGUMENT or not first_argument_is_positional(candidate):
            if state.is_logging_enabled:
                logger.warning("Skipping error subscriber: %s", callable_name(candidate))
                logger.warning("First argument of subscriber function must be named error")
            continue

        accepted.append(candidate)

    return accepted
