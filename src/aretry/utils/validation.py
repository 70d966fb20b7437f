r"""Parameter validation utilities for backoff strategies and retry
rules.

Every check raises ``ValueError`` as soon as an invalid value is seen,
so a misconfigured policy fails at construction time rather than at
call time.
"""

from __future__ import annotations

__all__ = ["validate_attempt", "validate_delay", "validate_delay_range", "validate_limit"]


def validate_attempt(attempt: int) -> None:
    """Validate an attempt number.

    Args:
        attempt: The attempt number. Attempts are numbered from 1.

    Raises:
        ValueError: If ``attempt`` is lower than 1.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_attempt
        >>> validate_attempt(1)
        >>> validate_attempt(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: attempt must be >= 1, got 0

        ```
    """
    if attempt < 1:
        msg = f"attempt must be >= 1, got {attempt}"
        raise ValueError(msg)


def validate_delay(name: str, delay: float) -> None:
    """Validate that a delay is non-negative.

    Args:
        name: The parameter name used in the error message.
        delay: The delay in seconds.

    Raises:
        ValueError: If ``delay`` is negative.
    """
    if delay < 0:
        msg = f"{name} must be non-negative, got {delay}"
        raise ValueError(msg)


def validate_delay_range(
    min_name: str, min_delay: float, max_name: str, max_delay: float
) -> None:
    """Validate a ``[min_delay, max_delay]`` range of delays.

    Args:
        min_name: The name of the lower bound parameter.
        min_delay: The lower bound in seconds.
        max_name: The name of the upper bound parameter.
        max_delay: The upper bound in seconds.

    Raises:
        ValueError: If a bound is negative or if the lower bound is
            greater than the upper bound.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_delay_range
        >>> validate_delay_range("min_delay", 1.0, "max_delay", 2.0)
        >>> validate_delay_range("min_delay", 2.0, "max_delay", 1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: min_delay must be <= max_delay, got min_delay=2.0 and max_delay=1.0

        ```
    """
    validate_delay(min_name, min_delay)
    validate_delay(max_name, max_delay)
    if min_delay > max_delay:
        msg = (
            f"{min_name} must be <= {max_name}, got {min_name}={min_delay} "
            f"and {max_name}={max_delay}"
        )
        raise ValueError(msg)


def validate_limit(limit: int) -> None:
    """Validate a maximum number of attempts.

    Args:
        limit: The maximum number of attempts, including the first one.

    Raises:
        ValueError: If ``limit`` is lower than 1.
    """
    if limit < 1:
        msg = f"limit must be >= 1, got {limit}"
        raise ValueError(msg)
