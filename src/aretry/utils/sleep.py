r"""Interruptible sleep used between retry attempts."""

from __future__ import annotations

__all__ = ["sleep", "sleep_async"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from aretry.exceptions import RetryCancelledError

if TYPE_CHECKING:
    import threading

logger: logging.Logger = logging.getLogger(__name__)


def sleep(
    delay: float,
    *,
    name: str,
    attempt: int,
    failure: Exception | None = None,
    cancel_event: threading.Event | None = None,
) -> None:
    """Block the calling thread for ``delay`` seconds.

    Without ``cancel_event`` this is ``time.sleep``. With it, the wait
    ends early when the event is set, and the call is cancelled.

    Args:
        delay: The delay in seconds.
        name: The name of the call, used in the cancellation error.
        attempt: The attempt that just failed.
        failure: The failure raised by that attempt.
        cancel_event: Optional event that cancels the call when set.

    Raises:
        RetryCancelledError: If ``cancel_event`` is set before or
            during the wait. The error is chained to ``failure``.
    """
    if cancel_event is None:
        time.sleep(delay)
        return
    if cancel_event.wait(delay):
        logger.debug(f"{name} cancelled while waiting {delay:.2f}s after attempt {attempt}")
        raise RetryCancelledError(name, attempt=attempt, failure=failure) from failure


async def sleep_async(delay: float) -> None:
    """Suspend the calling task for ``delay`` seconds.

    Cancelling the task raises ``asyncio.CancelledError`` out of this
    coroutine, which aborts the retry loop.

    Args:
        delay: The delay in seconds.
    """
    await asyncio.sleep(delay)
