"""
error_catch_notifier: route exceptions from wrapped functions to subscribers.

Key primitives
--------------
- NotifierState: catching/logging flags + validated subscriber list
- wrap(): pass-through wrapper that hands errors to subscribers when catching is on
- notify_error_subscribers(): report an error to subscribers directly
- NotifierConfig / load_config(): startup settings from code, env or YAML
- configure_logging(): console + file logging for subscriber diagnostics

The module-level functions act on one shared default NotifierState.
"""

from .api import (
    build_subscriber_list,
    disable_error_catching,
    disable_logging,
    enable_error_catching,
    enable_logging,
    get_default_state,
    get_is_enabled,
    get_is_logging_enabled,
    init_error_catch_notifier,
    init_from_config,
    make_error_subscriber_failback,
    notify_error_subscribers,
    wrap,
)
from .config import ConfigError, NotifierConfig, load_config
from .inspection import get_argument_names, is_function
from .logging import configure_logging
from .state import NotifierState
from .types import CallOutcome
from .version import __version__

__all__ = [
    "CallOutcome",
    "ConfigError",
    "NotifierConfig",
    "NotifierState",
    "build_subscriber_list",
    "configure_logging",
    "disable_error_catching",
    "disable_logging",
    "enable_error_catching",
    "enable_logging",
    "get_argument_names",
    "get_default_state",
    "get_is_enabled",
    "get_is_logging_enabled",
    "init_error_catch_notifier",
    "init_from_config",
    "is_function",
    "load_config",
    "make_error_subscriber_failback",
    "notify_error_subscribers",
    "wrap",
    "__version__",
]
