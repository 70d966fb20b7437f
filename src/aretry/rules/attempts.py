r"""Rule limiting the number of attempts."""

from __future__ import annotations

__all__ = ["MaxAttempts"]

from aretry.config import DEFAULT_MAX_ATTEMPTS
from aretry.rules.base import BaseRule
from aretry.utils.validation import validate_limit


class MaxAttempts(BaseRule):
    """Rule that allows at most ``limit`` attempts.

    The first attempt counts, so ``limit`` attempts means at most
    ``limit - 1`` retries. ``MaxAttempts(1)`` never retries.

    Args:
        limit: The maximum number of attempts. Must be >= 1.

    Raises:
        ValueError: If ``limit`` is lower than 1.

    Example:
        ```pycon
        >>> from aretry.rules import MaxAttempts
        >>> rule = MaxAttempts(3)
        >>> rule.should_retry(1, OSError())
        True
        >>> rule.should_retry(2, OSError())
        True
        >>> rule.should_retry(3, OSError())
        False

        ```
    """

    def __init__(self, limit: int = DEFAULT_MAX_ATTEMPTS) -> None:
        validate_limit(limit)
        self.limit = limit

    def should_retry(self, attempt: int, failure: Exception) -> bool:  # noqa: ARG002
        return attempt < self.limit

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(limit={self.limit})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaxAttempts):
            return NotImplemented
        return self.limit == other.limit

    def __hash__(self) -> int:
        return hash((self.__class__, self.limit))
