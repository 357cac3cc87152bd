from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

from .notifier import notify_error_subscribers
from .types import CallOutcome

if TYPE_CHECKING:
    from .state import NotifierState

T = TypeVar("T")


def wrap(
    target: Callable[..., T],
    options: Optional[Any] = None,
    *,
    state: "NotifierState",
) -> Callable[..., Optional[T]]:
    """
    Wrap `target` so errors it raises go to the subscribers on `state`.

    Behavior
    --------
    - catching disabled: the wrapper is a pass-through; return values and
      exceptions are exactly those of `target`.
    - catching enabled: an ``Exception`` raised by `target` is handed to
      the subscribers with the wrap-time `options` and the wrapper returns
      None instead of raising.

    The catching flag is read on every call. The result works as a method
    when assigned on a class, since the receiver is just forwarded.

    Usage example
    -------------
        load = wrap(load_profile, {"feature": "profile"}, state=state)
        profile = load(user_id)  # None if load_profile raised while catching
    """

    @functools.wraps(target)
    def wrapped_function(*args: Any, **kwargs: Any) -> Optional[T]:
        if not state.is_enabled:
            return target(*args, **kwargs)

        outcome = CallOutcome.from_call(target, *args, **kwargs)
        if outcome.ok:
            return outcome.value

        notify_error_subscribers(outcome.error, options, state=state)
        return None

    return wrapped_function
