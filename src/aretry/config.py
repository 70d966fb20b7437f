r"""Default values used by the retry policy, backoff strategies, and
rules."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_CALL_NAME",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
]

# Base delay in seconds for exponential backoff
# Delay = base_delay * 2 ** (attempt - 1)
# With 0.3: 1st retry waits 0.3s, 2nd waits 0.6s, 3rd waits 1.2s
DEFAULT_BASE_DELAY = 0.3

# Upper bound in seconds for a single exponential backoff delay
DEFAULT_MAX_DELAY = 30.0

# Default number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Name used in log messages when the caller does not name the operation
DEFAULT_CALL_NAME = "call"
