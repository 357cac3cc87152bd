from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .failback import make_error_subscriber_failback
from .inspection import callable_name, positional_capacity
from .types import CallOutcome

if TYPE_CHECKING:
    from .state import NotifierState


def notify_error_subscribers(error: BaseException, options: Optional[Any] = None, *, state: "NotifierState") -> None:
    """
    Pass `error` to every subscriber on `state`, in registration order.

    Each subscriber receives ``(error, options, failback)`` cut down to the
    number of positional arguments it accepts, with a fresh failback per
    call. The first subscriber that raises ends the round: its exception is
    logged (when logging is enabled) and the remaining subscribers are not
    called. Nothing is re-raised.

    Usage example
    -------------
        try:
            risky()
        except ValueError as exc:
            notify_error_subscribers(exc, {"job": "nightly"}, state=state)
    """
    for subscriber in state.iter_subscribers():
        name = callable_name(subscriber)
        args = (error, options, make_error_subscriber_failback(name, state=state))
        capacity = positional_capacity(subscriber)
        if capacity is not None:
            args = args[:capacity]

        outcome = CallOutcome.from_call(subscriber, *args)
        if outcome.ok:
            continue

        if state.is_logging_enabled:
            extra = {"subscriber": name}
            state.logger.error("Skipping error subscriber: %s", name, extra=extra)
            state.logger.error(outcome.error, exc_info=outcome.error, extra=extra)
        return
