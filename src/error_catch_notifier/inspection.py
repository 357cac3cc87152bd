"""Signature helpers used to validate error subscribers."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Optional

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _signature(target: Any) -> Optional[inspect.Signature]:
    try:
        return inspect.signature(target)
    except (TypeError, ValueError):
        # Builtins and some C callables have no introspectable signature.
        return None


def get_argument_names(target: Any) -> list[str]:
    """
    Return the declared parameter names of a callable, in order.

    Bound methods and callable instances do not report their receiver.
    Anything that cannot be introspected yields an empty list rather than
    an error, so validation stays decidable for every candidate.

    Usage example
    -------------
        def on_error(error, options=None): ...
        get_argument_names(on_error)  # ["error", "options"]
    """
    sig = _signature(target)
    if sig is None:
        return []
    return [name for name in sig.parameters if name]


def positional_capacity(target: Callable[..., Any]) -> Optional[int]:
    """Number of positional arguments `target` accepts; None if unbounded or unknown."""
    sig = _signature(target)
    if sig is None:
        return None
    count = 0
    for param in sig.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in _POSITIONAL_KINDS:
            count += 1
    return count


def first_argument_is_positional(target: Any) -> bool:
    """True when the first declared parameter can receive a positional argument."""
    sig = _signature(target)
    if sig is None:
        return False
    first = next(iter(sig.parameters.values()), None)
    if first is None:
        return False
    return first.kind in _POSITIONAL_KINDS or first.kind == inspect.Parameter.VAR_POSITIONAL


def is_function(value: Any) -> bool:
    """Return True for any callable value (functions, lambdas, methods, callable objects)."""
    return callable(value)


def callable_name(target: Any) -> str:
    """Human-readable name used in diagnostics."""
    name = getattr(target, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return type(target).__name__
