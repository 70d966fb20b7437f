r"""Retry policy combining one retry rule and one backoff strategy.

The policy owns no per-call state. It is an immutable value: build it
once, then share it between threads, tasks, and proxies.

Example:
    ```pycon
    >>> from aretry import RetryPolicy
    >>> from aretry.backoff import exponential, random_delay
    >>> from aretry.rules import max_attempts
    >>> policy = (
    ...     RetryPolicy.builder()
    ...     .rule(max_attempts(3))
    ...     .backoff(exponential(1.0, 10.0) + random_delay(1.0, 2.0))
    ...     .build()
    ... )
    >>> policy.call(lambda: "Hello world!")
    'Hello world!'

    ```
"""

from __future__ import annotations

__all__ = ["RetryPolicy", "RetryPolicyBuilder"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from aretry.backoff.base import BaseBackoff
from aretry.backoff.constant import NO_DELAY
from aretry.config import DEFAULT_CALL_NAME
from aretry.executor import execute, execute_async, schedule
from aretry.proxy import create_proxy
from aretry.rules.base import NEVER, BaseRule

if TYPE_CHECKING:
    import threading
    from collections.abc import Awaitable, Callable, Iterable
    from concurrent.futures import Executor, Future

    from aretry.context import FailureListener

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry policy.

    Args:
        rule: The rule deciding whether a failed attempt is retried.
            Defaults to ``NEVER``.
        backoff: The strategy computing the delay between attempts.
            Defaults to ``NO_DELAY``.
        listeners: Callables invoked with a ``FailureInfo`` after every
            failed attempt.

    Raises:
        TypeError: If ``rule`` or ``backoff`` has the wrong type.
    """

    rule: BaseRule = NEVER
    backoff: BaseBackoff = NO_DELAY
    listeners: tuple[FailureListener, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.rule, BaseRule):
            msg = f"rule must be a BaseRule, got {type(self.rule).__name__}"
            raise TypeError(msg)
        if not isinstance(self.backoff, BaseBackoff):
            msg = f"backoff must be a BaseBackoff, got {type(self.backoff).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "listeners", tuple(self.listeners))

    @staticmethod
    def builder() -> RetryPolicyBuilder:
        """Return a new builder with the default rule and backoff."""
        return RetryPolicyBuilder()

    def call(
        self,
        operation: Callable[[], T],
        *,
        name: str = DEFAULT_CALL_NAME,
        cancel_event: threading.Event | None = None,
    ) -> T:
        """Call ``operation`` with retry.

        Args:
            operation: The zero-argument callable to run.
            name: The name of the call, used in log messages.
            cancel_event: Optional event that cancels the call when set
                while waiting between attempts.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            Exception: The original failure raised by ``operation`` once
                the rule forbids another attempt.
            RetryCancelledError: If ``cancel_event`` is set while
                waiting between attempts.

        Example:
            ```pycon
            >>> from aretry.policies import NONE
            >>> NONE.call(lambda: 42)
            42

            ```
        """
        return execute(self, operation, name=name, cancel_event=cancel_event)

    async def call_async(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        name: str = DEFAULT_CALL_NAME,
    ) -> T:
        """Await ``operation()`` with retry.

        Args:
            operation: A zero-argument callable returning a new awaitable
                for every attempt.
            name: The name of the call, used in log messages.

        Returns:
            The value produced by the first successful attempt.

        Raises:
            Exception: The original failure once the rule forbids
                another attempt.
            asyncio.CancelledError: If the task is cancelled.
        """
        return await execute_async(self, operation, name=name)

    def submit(
        self,
        executor: Executor,
        operation: Callable[[], T],
        *,
        name: str = DEFAULT_CALL_NAME,
        cancel_event: threading.Event | None = None,
    ) -> Future[T]:
        """Run ``operation`` with retry on ``executor``.

        Every attempt is a separate task of the executor. The waits
        between attempts happen off the executor, so a small pool can
        serve many retrying calls.

        Args:
            executor: The executor running the call.
            operation: The zero-argument callable to run.
            name: The name of the call, used in log messages.
            cancel_event: Optional event that cancels the call when set
                while waiting between attempts.

        Returns:
            A future resolving to the result, or failing with the
            original failure.

        Example:
            ```pycon
            >>> from concurrent.futures import ThreadPoolExecutor
            >>> from aretry.policies import NONE
            >>> with ThreadPoolExecutor(max_workers=1) as pool:
            ...     NONE.submit(pool, lambda: 42).result()
            ...
            42

            ```
        """
        return schedule(self, executor, operation, name=name, cancel_event=cancel_event)

    def proxy(
        self,
        interface: type[T],
        target: T,
        *,
        cancel_event: threading.Event | None = None,
    ) -> T:
        """Wrap ``target`` so that every method of ``interface`` is
        called with retry.

        Args:
            interface: The class describing the capability. Its public
                methods are the ones retried.
            target: The object implementing them.
            cancel_event: Optional event that cancels the synchronous
                calls when set while waiting between attempts.

        Returns:
            An instance of a subclass of ``interface`` forwarding every
            call to ``target``.

        Raises:
            TypeError: If ``target`` lacks a method of ``interface``.
        """
        return create_proxy(self, interface, target, cancel_event=cancel_event)


class RetryPolicyBuilder:
    """Fluent builder for ``RetryPolicy``.

    The setters can be called in any order; unset values keep the
    defaults of ``RetryPolicy``.

    Example:
        ```pycon
        >>> from aretry import RetryPolicyBuilder
        >>> from aretry.backoff import NO_DELAY
        >>> from aretry.rules import max_attempts
        >>> policy = RetryPolicyBuilder().backoff(NO_DELAY).rule(max_attempts(99)).build()
        >>> policy.rule
        MaxAttempts(limit=99)

        ```
    """

    def __init__(self, rule: BaseRule = NEVER, backoff: BaseBackoff = NO_DELAY) -> None:
        self._rule = rule
        self._backoff = backoff
        self._listeners: list[FailureListener] = []

    def rule(self, rule: BaseRule) -> RetryPolicyBuilder:
        self._rule = rule
        return self

    def backoff(self, backoff: BaseBackoff) -> RetryPolicyBuilder:
        self._backoff = backoff
        return self

    def listener(self, *listeners: FailureListener) -> RetryPolicyBuilder:
        self._listeners.extend(listeners)
        return self

    def listeners(self, listeners: Iterable[FailureListener]) -> RetryPolicyBuilder:
        self._listeners = list(listeners)
        return self

    def build(self) -> RetryPolicy:
        return RetryPolicy(rule=self._rule, backoff=self._backoff, listeners=tuple(self._listeners))
