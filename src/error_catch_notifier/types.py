from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class CallOutcome:
    """
    Result of calling something under the catch policy.

    Exactly one of ``value`` / ``error`` is meaningful: when ``error`` is set
    the call raised and ``value`` is None.

    Usage example
    -------------
        outcome = CallOutcome.from_call(int, "12")
        if outcome.ok:
            print(outcome.value)
    """
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def from_call(fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> "CallOutcome":
        # BaseException-only signals (KeyboardInterrupt, SystemExit) are not captured.
        try:
            value = fn(*args, **kwargs)
        except Exception as exc:
            return CallOutcome(error=exc)
        return CallOutcome(value=value)
