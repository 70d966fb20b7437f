r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoff"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.backoff.combinator import PlusBackoff


class BaseBackoff(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before the next
    attempt, given the number of the attempt that just failed.
    Strategies are immutable once built, so one instance can be shared
    by any number of concurrent calls.

    Two strategies can be added together with ``plus`` or ``+``; the
    resulting strategy waits for the sum of both delays.
    """

    @abstractmethod
    def delay(self, attempt: int) -> float:
        """Calculate the delay to wait after a failed attempt.

        Args:
            attempt: The number of the attempt that failed (1-indexed).
                For example, attempt=1 is the first attempt, so the
                returned value is the wait before the second attempt.

        Returns:
            The delay in seconds, always non-negative.

        Raises:
            ValueError: If ``attempt`` is lower than 1.
        """

    def plus(self, other: BaseBackoff) -> PlusBackoff:
        """Combine this strategy with another one by adding their
        delays.

        Args:
            other: The strategy to add.

        Returns:
            A strategy whose delay is ``self.delay(n) + other.delay(n)``.

        Example:
            ```pycon
            >>> from aretry.backoff import ExponentialBackoff, FixedDelay
            >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=10.0).plus(FixedDelay(0.5))
            >>> backoff.delay(1)
            1.5
            >>> backoff.delay(3)
            4.5

            ```
        """
        from aretry.backoff.combinator import PlusBackoff

        return PlusBackoff(self, other)

    def __add__(self, other: object) -> PlusBackoff:
        if not isinstance(other, BaseBackoff):
            return NotImplemented
        return self.plus(other)
