r"""Backoff strategies that compute the delay between two attempts.

This package provides a no-delay strategy, fixed, exponential and
random strategies, and the ``PlusBackoff`` combinator that adds the
delays of two strategies.
"""

from __future__ import annotations

__all__ = [
    "NO_DELAY",
    "BaseBackoff",
    "ExponentialBackoff",
    "FixedDelay",
    "NoDelay",
    "PlusBackoff",
    "RandomBackoff",
    "exponential",
    "fixed",
    "no_delay",
    "random_delay",
]

from aretry.backoff.base import BaseBackoff
from aretry.backoff.combinator import PlusBackoff
from aretry.backoff.constant import NO_DELAY, FixedDelay, NoDelay
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.random_delay import RandomBackoff


def no_delay() -> NoDelay:
    r"""Return the strategy that never waits."""
    return NO_DELAY


def fixed(delay: float) -> FixedDelay:
    r"""Return a strategy that always waits ``delay`` seconds."""
    return FixedDelay(delay)


def exponential(base_delay: float, max_delay: float) -> ExponentialBackoff:
    r"""Return an exponential strategy capped at ``max_delay``."""
    return ExponentialBackoff(base_delay=base_delay, max_delay=max_delay)


def random_delay(min_delay: float, max_delay: float, seed: int | None = None) -> RandomBackoff:
    r"""Return a strategy drawing delays uniformly from ``[min_delay,
    max_delay]``."""
    return RandomBackoff(min_delay=min_delay, max_delay=max_delay, seed=seed)
