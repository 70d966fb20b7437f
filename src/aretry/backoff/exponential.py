r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from aretry.backoff.base import BaseBackoff
from aretry.config import DEFAULT_BASE_DELAY, DEFAULT_MAX_DELAY
from aretry.utils.validation import validate_attempt, validate_delay_range


class ExponentialBackoff(BaseBackoff):
    """Exponential backoff strategy.

    Calculates the delay as ``min(base_delay * 2 ** (attempt - 1),
    max_delay)``: the delay doubles after every failed attempt until it
    reaches ``max_delay``.

    Args:
        base_delay: The delay in seconds after the first failed attempt.
        max_delay: The maximum delay in seconds. Must be greater than or
            equal to ``base_delay``.

    Raises:
        ValueError: If a delay is negative or if ``base_delay`` is
            greater than ``max_delay``.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=10.0)
        >>> [backoff.delay(attempt) for attempt in range(1, 6)]
        [1.0, 2.0, 4.0, 8.0, 10.0]
        >>> backoff.delay(10_000)  # capped, no overflow
        10.0

        ```
    """

    def __init__(
        self, base_delay: float = DEFAULT_BASE_DELAY, max_delay: float = DEFAULT_MAX_DELAY
    ) -> None:
        validate_delay_range("base_delay", base_delay, "max_delay", max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def delay(self, attempt: int) -> float:
        validate_attempt(attempt)
        if self.base_delay == 0:
            return 0.0
        # Double one step at a time so the value never grows past the cap.
        value = self.base_delay
        for _ in range(attempt - 1):
            value *= 2
            if value >= self.max_delay:
                return self.max_delay
        return min(value, self.max_delay)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExponentialBackoff):
            return NotImplemented
        return self.base_delay == other.base_delay and self.max_delay == other.max_delay

    def __hash__(self) -> int:
        return hash((self.__class__, self.base_delay, self.max_delay))
