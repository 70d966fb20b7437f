r"""Shared test helpers for retry tests."""

from __future__ import annotations

__all__ = ["FlakyError", "flaky", "flaky_async"]

from unittest.mock import AsyncMock, Mock


class FlakyError(OSError):
    """Failure raised by the flaky test operations."""


def flaky(failures: int, result: object = "done") -> Mock:
    """Create an operation failing ``failures`` times before returning
    ``result``."""
    return Mock(side_effect=[FlakyError(f"failure {i + 1}") for i in range(failures)] + [result])


def flaky_async(failures: int, result: object = "done") -> AsyncMock:
    """Create a coroutine function failing ``failures`` times before
    returning ``result``."""
    return AsyncMock(
        side_effect=[FlakyError(f"failure {i + 1}") for i in range(failures)] + [result]
    )
