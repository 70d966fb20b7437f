r"""Retry rules deciding whether a failed attempt may be retried.

Public API:
    - BaseRule: Base class, composable with ``&``, ``|`` and ``~``
    - MaxAttempts: Limit on the total number of attempts
    - ExceptionIn: Classification of failures by exception type
    - Predicate: Decision delegated to a function
    - ALWAYS / NEVER: Constant rules
"""

from __future__ import annotations

__all__ = [
    "ALWAYS",
    "NEVER",
    "AllOf",
    "AnyOf",
    "BaseRule",
    "Constant",
    "ExceptionIn",
    "MaxAttempts",
    "Not",
    "Predicate",
    "exception_in",
    "max_attempts",
    "predicate",
]

from typing import TYPE_CHECKING

from aretry.rules.attempts import MaxAttempts
from aretry.rules.base import ALWAYS, NEVER, AllOf, AnyOf, BaseRule, Constant, Not
from aretry.rules.exception import ExceptionIn
from aretry.rules.predicate import Predicate

if TYPE_CHECKING:
    from collections.abc import Callable


def max_attempts(limit: int) -> MaxAttempts:
    r"""Return a rule allowing at most ``limit`` attempts."""
    return MaxAttempts(limit)


def exception_in(*types: type[BaseException]) -> ExceptionIn:
    r"""Return a rule allowing retries for the given exception types."""
    return ExceptionIn(*types)


def predicate(func: Callable[[int, Exception], bool]) -> Predicate:
    r"""Return a rule calling ``func(attempt, failure)`` to decide."""
    return Predicate(func)
