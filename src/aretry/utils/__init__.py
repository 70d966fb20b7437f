r"""Helper functions shared by the retry engine: parameter validation
and the sleep performed between attempts."""

from __future__ import annotations

__all__ = [
    "sleep",
    "sleep_async",
    "validate_attempt",
    "validate_delay",
    "validate_delay_range",
    "validate_limit",
]

from aretry.utils.sleep import sleep, sleep_async
from aretry.utils.validation import (
    validate_attempt,
    validate_delay,
    validate_delay_range,
    validate_limit,
)
