r"""Randomized backoff strategy."""

from __future__ import annotations

__all__ = ["RandomBackoff"]

import random

from aretry.backoff.base import BaseBackoff
from aretry.utils.validation import validate_attempt, validate_delay_range


class RandomBackoff(BaseBackoff):
    """Random backoff strategy.

    Draws the delay uniformly from ``[min_delay, max_delay]``,
    independently of the attempt number. This is mostly useful as a
    jitter added to another strategy, for example
    ``ExponentialBackoff(1.0, 10.0) + RandomBackoff(0.0, 1.0)``.

    Args:
        min_delay: The lower bound in seconds.
        max_delay: The upper bound in seconds.
        seed: Optional seed for the private random generator.

    Each instance owns its generator, so two instances only compare
    equal to themselves.

    Raises:
        ValueError: If a bound is negative or if ``min_delay`` is
            greater than ``max_delay``.

    Example:
        ```pycon
        >>> from aretry.backoff import RandomBackoff
        >>> backoff = RandomBackoff(min_delay=1.0, max_delay=2.0, seed=42)
        >>> 1.0 <= backoff.delay(1) <= 2.0
        True

        ```
    """

    def __init__(self, min_delay: float, max_delay: float, seed: int | None = None) -> None:
        validate_delay_range("min_delay", min_delay, "max_delay", max_delay)
        self.min_delay = min_delay
        self.max_delay = max_delay
        self._rng = random.Random(seed)  # noqa: S311

    def delay(self, attempt: int) -> float:
        validate_attempt(attempt)
        return self._rng.uniform(self.min_delay, self.max_delay)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(min_delay={self.min_delay}, "
            f"max_delay={self.max_delay})"
        )
