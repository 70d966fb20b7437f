r"""Unit tests for the asynchronous attempt loop."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry import RetryPolicy
from aretry.backoff import NO_DELAY, ExponentialBackoff
from aretry.executor import execute_async
from aretry.rules import NEVER, exception_in, max_attempts
from tests.helpers import FlakyError, flaky_async


@pytest.mark.asyncio
async def test_execute_async_success(mock_asleep: Mock) -> None:
    operation = AsyncMock(return_value=42)
    assert await execute_async(RetryPolicy(max_attempts(3), NO_DELAY), operation) == 42
    operation.assert_awaited_once()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_execute_async_retries_until_success(mock_asleep: Mock) -> None:
    operation = flaky_async(3)
    policy = RetryPolicy(max_attempts(4), ExponentialBackoff(1.0, 10.0))
    assert await execute_async(policy, operation) == "done"
    assert operation.await_count == 4
    assert mock_asleep.call_args_list == [call(1.0), call(2.0), call(4.0)]


@pytest.mark.asyncio
async def test_execute_async_exhausted(mock_asleep: Mock) -> None:
    failures = [FlakyError(str(i)) for i in range(3)]
    operation = AsyncMock(side_effect=failures)
    with pytest.raises(FlakyError) as exc_info:
        await execute_async(RetryPolicy(max_attempts(3), NO_DELAY), operation)
    assert exc_info.value is failures[-1]
    assert operation.await_count == 3
    assert mock_asleep.call_count == 2


@pytest.mark.asyncio
async def test_execute_async_non_retriable(mock_asleep: Mock) -> None:
    operation = AsyncMock(side_effect=[ValueError("fatal"), "done"])
    policy = RetryPolicy(max_attempts(3) & ~exception_in(ValueError), NO_DELAY)
    with pytest.raises(ValueError, match=r"fatal"):
        await execute_async(policy, operation)
    operation.assert_awaited_once()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_execute_async_never(mock_asleep: Mock) -> None:  # noqa: ARG001
    operation = flaky_async(1)
    with pytest.raises(FlakyError):
        await execute_async(RetryPolicy(NEVER, NO_DELAY), operation)
    operation.assert_awaited_once()


@pytest.mark.asyncio
async def test_execute_async_cancelled_during_backoff() -> None:
    operation = AsyncMock(side_effect=FlakyError("boom"))
    policy = RetryPolicy(max_attempts(10), ExponentialBackoff(60.0, 60.0))
    task = asyncio.create_task(execute_async(policy, operation))
    while operation.await_count == 0:
        await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    operation.assert_awaited_once()
