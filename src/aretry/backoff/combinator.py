r"""Combinators that build a backoff strategy out of other ones."""

from __future__ import annotations

__all__ = ["PlusBackoff"]

from aretry.backoff.base import BaseBackoff


class PlusBackoff(BaseBackoff):
    """Backoff strategy that adds the delays of two strategies.

    The combinator enforces no upper bound of its own; compose bounded
    strategies if the total needs a ceiling. Since addition is
    associative, ``(a + b) + c`` and ``a + (b + c)`` wait the same
    total time.

    Args:
        left: The first strategy.
        right: The second strategy.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff, FixedDelay, PlusBackoff
        >>> backoff = PlusBackoff(ExponentialBackoff(1.0, 10.0), FixedDelay(1.0))
        >>> backoff.delay(2)
        3.0

        ```
    """

    def __init__(self, left: BaseBackoff, right: BaseBackoff) -> None:
        self.left = left
        self.right = right

    def delay(self, attempt: int) -> float:
        return self.left.delay(attempt) + self.right.delay(attempt)

    def __repr__(self) -> str:
        return f"({self.left!r} + {self.right!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlusBackoff):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash((self.__class__, self.left, self.right))
