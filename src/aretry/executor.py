r"""Attempt loop shared by every execution surface of a retry policy.

The loop keeps its state (attempt number, start time, last failure) in
local variables, so one policy can run any number of calls at the same
time from different threads or tasks.
"""

from __future__ import annotations

__all__ = ["evaluate_failure", "execute", "execute_async", "schedule"]

import logging
import threading
import time
from concurrent.futures import Future
from typing import TYPE_CHECKING, TypeVar

from aretry.config import DEFAULT_CALL_NAME
from aretry.context import FailureInfo, RetryContext
from aretry.exceptions import RetryCancelledError
from aretry.utils.sleep import sleep, sleep_async

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from concurrent.futures import Executor

    from aretry.policy import RetryPolicy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def evaluate_failure(
    policy: RetryPolicy,
    *,
    name: str,
    attempt: int,
    failure: Exception,
    start_time: float,
) -> tuple[bool, float]:
    """Decide what to do after a failed attempt.

    Asks the rule whether another attempt is allowed, asks the backoff
    strategy for the delay if it is, and notifies the listeners.

    Args:
        policy: The retry policy.
        name: The name of the call.
        attempt: The number of the attempt that failed (1-indexed).
        failure: The exception raised by that attempt.
        start_time: The ``time.monotonic()`` value when the call started.

    Returns:
        Tuple of (will_retry, delay).
    """
    will_retry = policy.rule.should_retry(attempt, failure)
    delay = policy.backoff.delay(attempt) if will_retry else 0.0
    context = RetryContext(
        name=name,
        attempt=attempt,
        failure=failure,
        start_time=start_time,
        elapsed=time.monotonic() - start_time,
    )
    if will_retry:
        logger.debug(
            f"{name} failed on attempt {attempt} with {type(failure).__name__}: {failure}, "
            f"will retry in {delay:.2f}s"
        )
    else:
        logger.debug(
            f"{name} failed on attempt {attempt} with {type(failure).__name__}: {failure}, "
            f"giving up after {context.elapsed:.2f}s"
        )
    info = FailureInfo(context=context, will_retry=will_retry, delay=delay)
    for listener in policy.listeners:
        listener(info)
    return will_retry, delay


def execute(
    policy: RetryPolicy,
    operation: Callable[[], T],
    *,
    name: str = DEFAULT_CALL_NAME,
    cancel_event: threading.Event | None = None,
) -> T:
    """Call ``operation`` until it succeeds or the policy gives up.

    The loop:
    - Returns the result of the first successful attempt
    - On failure, asks the rule whether to retry
    - If not, re-raises the failure unchanged (same object, same
      traceback)
    - If so, waits for the backoff delay and tries again

    Only ``Exception`` subclasses are treated as failures.
    ``KeyboardInterrupt``, ``SystemExit`` and other ``BaseException``
    subclasses abort the loop immediately.

    Args:
        policy: The retry policy.
        operation: The zero-argument callable to run.
        name: The name of the call, used in log messages.
        cancel_event: Optional event that cancels the call when set
            while waiting between attempts.

    Returns:
        The value returned by ``operation``.

    Raises:
        Exception: The last failure raised by ``operation``.
        RetryCancelledError: If ``cancel_event`` is set while waiting.

    Example:
        ```pycon
        >>> from aretry import RetryPolicy
        >>> from aretry.backoff import NO_DELAY
        >>> from aretry.executor import execute
        >>> from aretry.rules import max_attempts
        >>> results = iter([OSError("down"), "done"])
        >>> def operation():
        ...     result = next(results)
        ...     if isinstance(result, Exception):
        ...         raise result
        ...     return result
        ...
        >>> execute(RetryPolicy(max_attempts(3), NO_DELAY), operation)
        'done'

        ```
    """
    start_time = time.monotonic()
    attempt = 1
    while True:
        try:
            result = operation()
        except Exception as exc:
            will_retry, delay = evaluate_failure(
                policy, name=name, attempt=attempt, failure=exc, start_time=start_time
            )
            if not will_retry:
                raise
            failure = exc
        else:
            if attempt > 1:
                logger.debug(f"{name} succeeded after {attempt} attempts")
            return result

        sleep(delay, name=name, attempt=attempt, failure=failure, cancel_event=cancel_event)
        attempt += 1


async def execute_async(
    policy: RetryPolicy,
    operation: Callable[[], Awaitable[T]],
    *,
    name: str = DEFAULT_CALL_NAME,
) -> T:
    """Await ``operation()`` until it succeeds or the policy gives up.

    This is the asynchronous counterpart of ``execute``. The wait
    between attempts uses ``asyncio.sleep``, so other tasks keep running,
    and cancelling the task aborts the loop with
    ``asyncio.CancelledError``.

    Args:
        policy: The retry policy.
        operation: A zero-argument callable returning a new awaitable
            for every attempt, typically ``lambda: coro_func(arg)``.
        name: The name of the call, used in log messages.

    Returns:
        The value produced by the awaitable.

    Raises:
        Exception: The last failure raised by the awaitable.
    """
    start_time = time.monotonic()
    attempt = 1
    while True:
        try:
            result = await operation()
        except Exception as exc:
            will_retry, delay = evaluate_failure(
                policy, name=name, attempt=attempt, failure=exc, start_time=start_time
            )
            if not will_retry:
                raise
        else:
            if attempt > 1:
                logger.debug(f"{name} succeeded after {attempt} attempts")
            return result

        await sleep_async(delay)
        attempt += 1


def schedule(
    policy: RetryPolicy,
    executor: Executor,
    operation: Callable[[], T],
    *,
    name: str = DEFAULT_CALL_NAME,
    cancel_event: threading.Event | None = None,
) -> Future[T]:
    """Run the attempts of ``operation`` as separate tasks on
    ``executor``.

    Each attempt is one task. After a retryable failure, a timer thread
    waits for the backoff delay and then submits the next attempt, so no
    worker of ``executor`` is held while waiting.

    Args:
        policy: The retry policy.
        executor: The executor running the attempts.
        operation: The zero-argument callable to run.
        name: The name of the call, used in log messages.
        cancel_event: Optional event that cancels the call when set
            while waiting between attempts.

    Returns:
        A future resolving to the result of the first successful
        attempt, or failing with the last failure, a
        ``RetryCancelledError`` if the call is cancelled, or the
        ``RuntimeError`` raised by an executor that was shut down.

    Raises:
        RuntimeError: If ``executor`` does not accept the first attempt.
    """
    result: Future[T] = Future()
    result.set_running_or_notify_cancel()
    start_time = time.monotonic()

    def run(attempt: int) -> None:
        try:
            value = operation()
        except Exception as exc:
            failure = exc
        except BaseException as exc:
            result.set_exception(exc)
            raise
        else:
            if attempt > 1:
                logger.debug(f"{name} succeeded after {attempt} attempts")
            result.set_result(value)
            return

        try:
            will_retry, delay = evaluate_failure(
                policy, name=name, attempt=attempt, failure=failure, start_time=start_time
            )
        except Exception as exc:
            result.set_exception(exc)
            return
        if not will_retry:
            result.set_exception(failure)
            return
        threading.Thread(
            target=wait_and_resubmit,
            args=(attempt, delay, failure),
            name=f"aretry-{name}-{attempt}",
            daemon=True,
        ).start()

    def wait_and_resubmit(attempt: int, delay: float, failure: Exception) -> None:
        try:
            sleep(delay, name=name, attempt=attempt, failure=failure, cancel_event=cancel_event)
            executor.submit(run, attempt + 1)
        except (RetryCancelledError, RuntimeError) as exc:
            result.set_exception(exc)

    executor.submit(run, 1)
    return result
