r"""Data structures describing a failed attempt.

A ``FailureInfo`` is built after every failed attempt and passed to the
listeners of the policy, which makes them the hook for logging,
metrics, or alerting beyond the debug logs of the executor.

Example:
    ```pycon
    >>> from aretry import RetryPolicy
    >>> from aretry.backoff import NO_DELAY
    >>> from aretry.context import FailureInfo
    >>> from aretry.rules import max_attempts
    >>> def log_failure(info: FailureInfo) -> None:
    ...     print(f"attempt {info.context.attempt} failed, retry: {info.will_retry}")
    ...
    >>> policy = RetryPolicy(max_attempts(2), NO_DELAY, listeners=(log_failure,))
    >>> policy.call(lambda: 1 / 0)  # doctest: +SKIP
    attempt 1 failed, retry: True
    attempt 2 failed, retry: False
    Traceback (most recent call last):
    ...
    ZeroDivisionError: division by zero

    ```
"""

from __future__ import annotations

__all__ = ["FailureInfo", "FailureListener", "RetryContext"]

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class RetryContext:
    """Snapshot of one call going through a retry policy, taken right
    after a failed attempt.

    Attributes:
        name: The name of the call, used in log messages.
        attempt: The number of the attempt that failed (1-indexed).
        failure: The exception raised by that attempt.
        start_time: The ``time.monotonic()`` value when the call started.
        elapsed: Seconds elapsed since the call started, including the
            time spent waiting between attempts.
    """

    name: str
    attempt: int
    failure: Exception
    start_time: float
    elapsed: float


@dataclass(frozen=True)
class FailureInfo:
    """Information passed to the failure listeners of a policy.

    Attributes:
        context: The state of the call after the failed attempt.
        will_retry: Whether the rule allowed another attempt.
        delay: The delay in seconds before the next attempt, or 0.0 if
            the call gives up.
    """

    context: RetryContext
    will_retry: bool
    delay: float


FailureListener = Callable[[FailureInfo], None]
