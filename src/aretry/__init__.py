r"""aretry - Retry engine with composable rules and backoff strategies.

This package re-invokes a fallible operation according to a retry
policy until it succeeds, the policy forbids another attempt, or the
operation fails in a way the policy does not retry. A policy combines
one retry rule and one backoff strategy, and is immutable, so one
policy can serve any number of concurrent calls.

Key Features:
    - Direct calls (``call``), coroutine calls (``call_async``) and
      submission to a ``concurrent.futures.Executor`` (``submit``)
    - Transparent retry of every method of an interface (``proxy``)
    - Backoff strategies: no delay, fixed, exponential, random, and
      their sums
    - Rules: maximum attempts, exception types, combined with ``&``,
      ``|`` and ``~``
    - The original failure is re-raised unchanged once retries stop
    - Cancellation of the wait between attempts
    - Failure listeners for logging, metrics, or alerting

Example:
    ```pycon
    >>> from aretry import RetryPolicy
    >>> from aretry.backoff import exponential, random_delay
    >>> from aretry.rules import max_attempts
    >>> policy = RetryPolicy(
    ...     rule=max_attempts(3),
    ...     backoff=exponential(1.0, 10.0) + random_delay(1.0, 2.0),
    ... )
    >>> policy.call(lambda: "Hello world!")
    'Hello world!'

    ```
"""

from __future__ import annotations

__all__ = [
    "FailureInfo",
    "RetryCancelledError",
    "RetryContext",
    "RetryError",
    "RetryPolicy",
    "RetryPolicyBuilder",
    "UndeclaredFailureError",
    "__version__",
    "raises",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.context import FailureInfo, RetryContext
from aretry.exceptions import RetryCancelledError, RetryError, UndeclaredFailureError
from aretry.policy import RetryPolicy, RetryPolicyBuilder
from aretry.proxy import raises

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
