r"""Unit tests for the sleep performed between attempts."""

from __future__ import annotations

import threading
import time
from unittest.mock import Mock

import pytest

from aretry.exceptions import RetryCancelledError
from aretry.utils.sleep import sleep, sleep_async

###########################
#     Tests for sleep     #
###########################


def test_sleep_without_event_uses_time_sleep(mock_sleep: Mock) -> None:
    sleep(1.5, name="call", attempt=1)
    mock_sleep.assert_called_once_with(1.5)


def test_sleep_with_event_waits(mock_sleep: Mock) -> None:
    event = Mock(spec=threading.Event, wait=Mock(return_value=False))
    sleep(2.0, name="call", attempt=1, cancel_event=event)
    event.wait.assert_called_once_with(2.0)
    mock_sleep.assert_not_called()


def test_sleep_with_set_event_raises() -> None:
    event = threading.Event()
    event.set()
    failure = OSError("boom")
    with pytest.raises(RetryCancelledError, match=r"fetch cancelled") as exc_info:
        sleep(10.0, name="fetch", attempt=2, failure=failure, cancel_event=event)
    assert exc_info.value.attempt == 2
    assert exc_info.value.failure is failure
    assert exc_info.value.__cause__ is failure


def test_sleep_cancelled_while_waiting() -> None:
    event = threading.Event()
    timer = threading.Timer(0.05, event.set)
    timer.start()
    start = time.monotonic()
    try:
        with pytest.raises(RetryCancelledError):
            sleep(30.0, name="call", attempt=1, cancel_event=event)
    finally:
        timer.cancel()
    assert time.monotonic() - start < 10.0


#################################
#     Tests for sleep_async     #
#################################


@pytest.mark.asyncio
async def test_sleep_async(mock_asleep: Mock) -> None:
    await sleep_async(0.5)
    mock_asleep.assert_called_once_with(0.5)

