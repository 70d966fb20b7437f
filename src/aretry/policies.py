r"""Named retry policies for common cases."""

from __future__ import annotations

__all__ = ["ALWAYS", "NONE"]

from aretry.backoff.constant import NO_DELAY
from aretry.policy import RetryPolicy
from aretry.rules import base as rules

# Exactly one attempt: failures propagate immediately.
NONE = RetryPolicy(rule=rules.NEVER, backoff=NO_DELAY)

# Retry every failure forever without waiting. Only safe for
# operations known to recover.
ALWAYS = RetryPolicy(rule=rules.ALWAYS, backoff=NO_DELAY)
