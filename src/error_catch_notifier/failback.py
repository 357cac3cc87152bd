from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from .state import NotifierState

ErrorSubscriberFailback = Callable[..., None]


def make_error_subscriber_failback(name: str, *, state: "NotifierState") -> ErrorSubscriberFailback:
    """
    Build the failback handed to a subscriber.

    Subscribers doing asynchronous work call it later to report how that
    work went: ``failback(error)`` on failure, ``failback(None, data)`` on
    success. The logging flag is read when the failback is called, not
    when it is made. With logging off it does nothing.

    Success lines are logged at INFO. An unconfigured logger only shows
    WARNING and above, so call ``configure_logging`` (or set up handlers
    yourself) to see them.

    Usage example
    -------------
        def on_error(error, options, failback):
            send_to_tracker(error, callback=lambda exc, resp: failback(exc, resp))
    """

    def error_subscriber_failback(error: Optional[Any] = None, data: Optional[Any] = None) -> None:
        if not state.is_logging_enabled:
            return

        extra = {"subscriber": name}
        if error is not None:
            state.logger.error("Error subscriber %s failed with error", name, extra=extra)
            state.logger.error(error, extra=extra)

        if data is not None:
            state.logger.info("Error subscriber %s succeeded with", name, extra=extra)
            state.logger.info(data, extra=extra)

    return error_subscriber_failback
