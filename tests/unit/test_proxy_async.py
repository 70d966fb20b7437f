from __future__ import annotations

from abc import ABC, abstractmethod
from unittest.mock import Mock, call

import pytest

from aretry import RetryPolicy, UndeclaredFailureError, raises
from aretry.backoff import FixedDelay
from aretry.rules import max_attempts
from tests.helpers import FlakyError


class AsyncApi(ABC):
    @abstractmethod
    @raises(OSError)
    async def fetch(self, key: str) -> str: ...

    @abstractmethod
    def ping(self) -> str: ...


class FlakyAsyncApi(AsyncApi):
    def __init__(self, failures: int, error: Exception | None = None) -> None:
        self.failures = failures
        self.error = error or FlakyError("fetch failed")
        self.calls = 0

    async def fetch(self, key: str) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return f"{key}-{self.calls}"

    def ping(self) -> str:
        return "pong"


@pytest.mark.asyncio
async def test_proxy_async_method_retries(mock_asleep: Mock) -> None:
    target = FlakyAsyncApi(failures=2)
    api = RetryPolicy(max_attempts(5), FixedDelay(0.5)).proxy(AsyncApi, target)
    assert await api.fetch("k") == "k-3"
    assert target.calls == 3
    assert mock_asleep.call_args_list == [call(0.5), call(0.5)]


@pytest.mark.asyncio
async def test_proxy_async_method_exhausted(mock_asleep: Mock) -> None:  # noqa: ARG001
    target = FlakyAsyncApi(failures=10)
    api = RetryPolicy(max_attempts(2), FixedDelay(0.5)).proxy(AsyncApi, target)
    with pytest.raises(FlakyError, match=r"fetch failed"):
        await api.fetch("k")
    assert target.calls == 2


@pytest.mark.asyncio
async def test_proxy_async_method_undeclared(mock_asleep: Mock) -> None:  # noqa: ARG001
    error = ValueError("bad")
    target = FlakyAsyncApi(failures=10, error=error)
    api = RetryPolicy(max_attempts(2), FixedDelay(0.5)).proxy(AsyncApi, target)
    with pytest.raises(UndeclaredFailureError) as exc_info:
        await api.fetch("k")
    assert exc_info.value.failure is error


def test_proxy_sync_method_next_to_async_method() -> None:
    api = RetryPolicy(max_attempts(2), FixedDelay(0.5)).proxy(AsyncApi, FlakyAsyncApi(failures=0))
    assert api.ping() == "pong"
