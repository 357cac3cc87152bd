from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Optional

from .subscribers import ErrorSubscriber, build_subscriber_list

if TYPE_CHECKING:
    from .config import NotifierConfig

DEFAULT_LOGGER_NAME = "error_catch_notifier"


def _is_subscriber_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


@dataclass(eq=False)
class NotifierState:
    """
    Live catching/logging flags plus the validated subscriber list.

    One instance is shared by everything wrapped against it; flags are read
    at call time, so toggling catching affects functions wrapped earlier.
    The object does no locking: callers mutating it from several threads
    must synchronize around it.

    Usage example
    -------------
        state = NotifierState()
        state.init([on_error], enabled=True, logging_enabled=True)
        safe_parse = wrap(parse, {"source": "upload"}, state=state)
    """

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(DEFAULT_LOGGER_NAME))

    def __post_init__(self) -> None:
        self._catching_enabled = False
        self._logging_enabled = False
        self._subscribers: list[ErrorSubscriber] = []

    @property
    def is_enabled(self) -> bool:
        """True when wrapped functions intercept errors."""
        return self._catching_enabled

    @property
    def is_logging_enabled(self) -> bool:
        return self._logging_enabled

    def has_subscribers(self) -> bool:
        return bool(self._subscribers)

    def iter_subscribers(self) -> Iterator[ErrorSubscriber]:
        """Iterate a snapshot of the subscribers in registration order."""
        return iter(tuple(self._subscribers))

    def enable_logging(self) -> None:
        self._logging_enabled = True

    def disable_logging(self) -> None:
        self._logging_enabled = False

    def enable_error_catching(self) -> None:
        """Turn catching on; stays off while there are no subscribers."""
        if not self._subscribers:
            if self._logging_enabled:
                self.logger.warning("No valid error subscribers provided. Use init to pass valid error subscribers")
            self._catching_enabled = False
            return
        self._catching_enabled = True

    def disable_error_catching(self) -> None:
        self._catching_enabled = False

    def init(
        self,
        subscribers: Optional[Sequence[Any]] = None,
        enabled: bool = False,
        logging_enabled: bool = False,
    ) -> None:
        """
        Reinitialize the state.

        Order matters: the logging flag is applied first so that subscriber
        validation logs under the new setting, then the subscriber list is
        replaced wholesale, then catching is applied (subject to the
        empty-list rule). A non-sequence `subscribers` leaves the previous
        list and catching flag untouched.
        """
        if logging_enabled:
            self.enable_logging()
        else:
            self.disable_logging()

        if subscribers is None:
            subscribers = ()
        if not _is_subscriber_sequence(subscribers):
            if self._logging_enabled:
                self.logger.error("errorSubscriberFunctions must be an array of functions")
            return

        self._subscribers = build_subscriber_list(subscribers, state=self)

        if enabled:
            self.enable_error_catching()
        else:
            self.disable_error_catching()

    def apply_config(self, cfg: "NotifierConfig", subscribers: Optional[Sequence[Any]] = None) -> None:
        """Initialize from a NotifierConfig's flags."""
        self.init(subscribers, enabled=cfg.catching_enabled, logging_enabled=cfg.logging_enabled)
