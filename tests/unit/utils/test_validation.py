r"""Unit tests for parameter validation utilities."""

from __future__ import annotations

import pytest

from aretry.utils.validation import (
    validate_attempt,
    validate_delay,
    validate_delay_range,
    validate_limit,
)

######################################
#     Tests for validate_attempt     #
######################################


@pytest.mark.parametrize("attempt", [1, 2, 1000])
def test_validate_attempt_valid(attempt: int) -> None:
    validate_attempt(attempt)


@pytest.mark.parametrize("attempt", [0, -1])
def test_validate_attempt_invalid(attempt: int) -> None:
    with pytest.raises(ValueError, match=rf"attempt must be >= 1, got {attempt}"):
        validate_attempt(attempt)


####################################
#     Tests for validate_delay     #
####################################


@pytest.mark.parametrize("delay", [0, 0.0, 1.5])
def test_validate_delay_valid(delay: float) -> None:
    validate_delay("delay", delay)


def test_validate_delay_invalid() -> None:
    with pytest.raises(ValueError, match=r"timeout must be non-negative, got -0.1"):
        validate_delay("timeout", -0.1)


##########################################
#     Tests for validate_delay_range     #
##########################################


@pytest.mark.parametrize(("low", "high"), [(0.0, 0.0), (1.0, 2.0), (2.0, 2.0)])
def test_validate_delay_range_valid(low: float, high: float) -> None:
    validate_delay_range("low", low, "high", high)


def test_validate_delay_range_inverted() -> None:
    with pytest.raises(ValueError, match=r"low must be <= high, got low=2.0 and high=1.0"):
        validate_delay_range("low", 2.0, "high", 1.0)


def test_validate_delay_range_negative_high() -> None:
    with pytest.raises(ValueError, match=r"high must be non-negative"):
        validate_delay_range("low", 0.0, "high", -1.0)


####################################
#     Tests for validate_limit     #
####################################


@pytest.mark.parametrize("limit", [1, 99])
def test_validate_limit_valid(limit: int) -> None:
    validate_limit(limit)


@pytest.mark.parametrize("limit", [0, -5])
def test_validate_limit_invalid(limit: int) -> None:
    with pytest.raises(ValueError, match=r"limit must be >= 1"):
        validate_limit(limit)
