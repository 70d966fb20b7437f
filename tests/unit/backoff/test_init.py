r"""Unit tests for the backoff factory functions."""

from __future__ import annotations

from aretry.backoff import (
    NO_DELAY,
    ExponentialBackoff,
    FixedDelay,
    RandomBackoff,
    exponential,
    fixed,
    no_delay,
    random_delay,
)


def test_no_delay_factory() -> None:
    assert no_delay() is NO_DELAY


def test_fixed_factory() -> None:
    assert fixed(2.0) == FixedDelay(2.0)


def test_exponential_factory() -> None:
    backoff = exponential(1.0, 10.0)
    assert isinstance(backoff, ExponentialBackoff)
    assert backoff.base_delay == 1.0
    assert backoff.max_delay == 10.0


def test_random_delay_factory() -> None:
    backoff = random_delay(1.0, 2.0, seed=1)
    assert isinstance(backoff, RandomBackoff)
    assert backoff.min_delay == 1.0
    assert backoff.max_delay == 2.0
