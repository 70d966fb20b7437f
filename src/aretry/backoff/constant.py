r"""Constant backoff strategies."""

from __future__ import annotations

__all__ = ["NO_DELAY", "FixedDelay", "NoDelay"]

from aretry.backoff.base import BaseBackoff
from aretry.utils.validation import validate_attempt, validate_delay


class FixedDelay(BaseBackoff):
    """Fixed backoff strategy.

    Returns the same delay after every failed attempt.

    Args:
        delay: The delay in seconds to wait before each retry.

    Example:
        ```pycon
        >>> from aretry.backoff import FixedDelay
        >>> backoff = FixedDelay(2.5)
        >>> backoff.delay(1)
        2.5
        >>> backoff.delay(10)
        2.5

        ```
    """

    def __init__(self, delay: float) -> None:
        validate_delay("delay", delay)
        self.interval = delay

    def delay(self, attempt: int) -> float:
        validate_attempt(attempt)
        return self.interval

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.interval})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedDelay):
            return NotImplemented
        return self.interval == other.interval

    def __hash__(self) -> int:
        return hash((self.__class__, self.interval))


class NoDelay(BaseBackoff):
    """Backoff strategy that never waits.

    Use the ``NO_DELAY`` instance rather than creating new ones.
    """

    def delay(self, attempt: int) -> float:
        validate_attempt(attempt)
        return 0.0

    def __repr__(self) -> str:
        return "NO_DELAY"


NO_DELAY = NoDelay()
