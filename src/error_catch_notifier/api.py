"""Process-wide default notifier and its free-function surface."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, Optional, TypeVar

from .config import NotifierConfig
from .failback import ErrorSubscriberFailback
from .failback import make_error_subscriber_failback as _make_failback
from .logging import configure_logging
from .notifier import notify_error_subscribers as _notify
from .state import NotifierState
from .subscribers import ErrorSubscriber
from .subscribers import build_subscriber_list as _build_subscriber_list
from .wrapper import wrap as _wrap

T = TypeVar("T")

_default_state = NotifierState()


def get_default_state() -> NotifierState:
    """Return the shared state used by the module-level functions."""
    return _default_state


def init_error_catch_notifier(
    subscribers: Optional[Sequence[Any]] = None,
    enabled: bool = False,
    logging_enabled: bool = False,
) -> None:
    _default_state.init(subscribers, enabled=enabled, logging_enabled=logging_enabled)


def init_from_config(cfg: NotifierConfig, subscribers: Optional[Sequence[Any]] = None) -> None:
    """
    Configure diagnostic logging from `cfg`, then initialize the default state.

    Without this (or other handler setup) the INFO-level failback success
    lines from subscribers are not shown anywhere.

    Usage example
    -------------
        init_from_config(NotifierConfig.from_env(), [report_to_sentry])
    """
    _default_state.logger = configure_logging(cfg=cfg, name=_default_state.logger.name)
    _default_state.apply_config(cfg, subscribers)


def enable_error_catching() -> None:
    _default_state.enable_error_catching()


def disable_error_catching() -> None:
    _default_state.disable_error_catching()


def enable_logging() -> None:
    _default_state.enable_logging()


def disable_logging() -> None:
    _default_state.disable_logging()


def get_is_enabled() -> bool:
    return _default_state.is_enabled


def get_is_logging_enabled() -> bool:
    return _default_state.is_logging_enabled


def build_subscriber_list(candidates: Sequence[Any] = ()) -> list[ErrorSubscriber]:
    return _build_subscriber_list(candidates, state=_default_state)


def make_error_subscriber_failback(name: str) -> ErrorSubscriberFailback:
    return _make_failback(name, state=_default_state)


def notify_error_subscribers(error: BaseException, options: Optional[Any] = None) -> None:
    """Report an error to the default subscribers without going through wrap."""
    _notify(error, options, state=_default_state)


def wrap(target: Callable[..., T], options: Optional[Any] = None) -> Callable[..., Optional[T]]:
    """
    Wrap `target` against the default state. Also usable as a bare decorator.

    Usage example
    -------------
        @wrap
        def handle_upload(payload): ...
    """
    return _wrap(target, options, state=_default_state)
